from kcssc.models.event import Event
from kcssc.models.program import Program
from kcssc.models.photo import Photo

__all__ = ["Event", "Program", "Photo"]
