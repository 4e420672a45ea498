from kcssc.client.backends import DatabaseBackend, HttpBackend, MockBackend
from kcssc.client.cache import TTLCache
from kcssc.client.data_service import DataService
from kcssc.client.entities import EntityKind

__all__ = ["DataService", "EntityKind", "TTLCache", "MockBackend", "HttpBackend", "DatabaseBackend"]
