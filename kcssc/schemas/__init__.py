from kcssc.schemas.event import EventCreate, EventUpdate, EventResponse, EventFilters
from kcssc.schemas.program import ProgramCreate, ProgramUpdate, ProgramResponse, ProgramFilters
from kcssc.schemas.photo import PhotoCreate, PhotoUpdate, PhotoResponse, PhotoFilters
from kcssc.schemas.upload import UploadResponse

__all__ = [
    "EventCreate", "EventUpdate", "EventResponse", "EventFilters",
    "ProgramCreate", "ProgramUpdate", "ProgramResponse", "ProgramFilters",
    "PhotoCreate", "PhotoUpdate", "PhotoResponse", "PhotoFilters",
    "UploadResponse",
]
