"""
Client-side data access for the site's pages.

Reads go cache -> backend -> built-in sample data. Writes need a configured
backend and invalidate the entity's cache entry when they succeed.
"""
import logging
from datetime import date
from typing import Any, Dict, List, Optional, Union

from kcssc.client.backends import HttpBackend, MockBackend
from kcssc.client.cache import TTLCache
from kcssc.client.entities import EntityKind, coerce_model, entity_type
from kcssc.core.config import Settings, get_cached_settings
from kcssc.core.exceptions import BackendError, ConfigurationError, KcsscError, NotFoundError
from kcssc.schemas import (
    EventFilters, EventResponse, PhotoFilters, PhotoResponse, ProgramFilters, ProgramResponse, UploadResponse,
)

logger = logging.getLogger(__name__)

Payload = Union[Dict[str, Any], Any]

SOURCE_CACHE = "cache"
SOURCE_BACKEND = "backend"
SOURCE_MOCK = "mock"
SOURCE_DEGRADED = "degraded"


class DataService:
    """
    Construct once and pass it around; the cache lives on the instance.

    Args:
        backend: HttpBackend or DatabaseBackend, or None to serve the sample data
        cache: TTLCache shared by all entity kinds
        mock_backend: sample data source, also the fallback when the backend fails
        degrade_on_error: when False, backend read failures raise BackendError
    """

    def __init__(
        self,
        backend=None,
        cache: Optional[TTLCache] = None,
        mock_backend: Optional[MockBackend] = None,
        degrade_on_error: bool = True,
    ):
        self.backend = backend
        self.cache = cache if cache is not None else TTLCache()
        self.mock_backend = mock_backend if mock_backend is not None else MockBackend()
        self.degrade_on_error = degrade_on_error
        self.last_source: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, client=None, **kwargs) -> "DataService":
        settings = settings or get_cached_settings()
        cache = TTLCache(ttl=settings.cache_ttl_seconds)
        if settings.backend_configured:
            logger.info(f"Data service using API at {settings.api_base_url}")
            return cls(HttpBackend(settings.api_base_url, client=client), cache, **kwargs)
        logger.info("Data service using built-in sample data (USE_MOCK_DATA=true or API_BASE_URL not set)")
        return cls(None, cache, **kwargs)

    @property
    def backend_configured(self) -> bool:
        return self.backend is not None

    def _fallback(self, error: KcsscError, what: str):
        if not self.degrade_on_error:
            if isinstance(error, BackendError):
                raise error
            raise BackendError(f"Failed to fetch {what}: {error.message}") from error
        logger.warning(f"Failed to fetch {what} from API, falling back to sample data: {error.message}")
        self.last_source = SOURCE_DEGRADED
        return self.mock_backend

    def _require_backend(self, kind: EntityKind, action: str):
        if self.backend is None:
            raise ConfigurationError(
                f"Cannot {action} {EntityKind(kind).value} with mock data. "
                "Set USE_MOCK_DATA=false and API_BASE_URL"
            )
        return self.backend

    def fetch_entities(self, kind: EntityKind, use_cache: bool = True) -> List[Any]:
        kind = EntityKind(kind)
        key = entity_type(kind).cache_key

        if use_cache:
            cached = self.cache.get(key)
            if cached is not None:
                self.last_source = SOURCE_CACHE
                return list(cached)

        if self.backend is None:
            items = self.mock_backend.list(kind)
            self.last_source = SOURCE_MOCK
        else:
            try:
                items = self.backend.list(kind)
                self.last_source = SOURCE_BACKEND
            except KcsscError as e:
                items = self._fallback(e, kind.value).list(kind)

        self.cache.set(key, items)
        return list(items)

    def fetch_by_id(self, kind: EntityKind, entity_id: int):
        """Not cached. Raises NotFoundError when neither the backend nor the sample data has the id."""
        kind = EntityKind(kind)

        if self.backend is None:
            item = self.mock_backend.get(kind, entity_id)
            self.last_source = SOURCE_MOCK
            return item

        try:
            item = self.backend.get(kind, entity_id)
            self.last_source = SOURCE_BACKEND
            return item
        except NotFoundError:
            if not self.degrade_on_error:
                raise
            fallback = self._fallback_for_missing(kind, entity_id)
        except KcsscError as e:
            fallback = self._fallback(e, f"{entity_type(kind).label.lower()} {entity_id}")
        return fallback.get(kind, entity_id)

    def _fallback_for_missing(self, kind: EntityKind, entity_id: int):
        logger.info(f"{entity_type(kind).label} {entity_id} not found in API, checking sample data")
        self.last_source = SOURCE_DEGRADED
        return self.mock_backend

    def fetch_with_filters(self, kind: EntityKind, filters=None) -> List[Any]:
        """Not cached. Without a backend the sample data is filtered locally."""
        kind = EntityKind(kind)
        filters = coerce_model(entity_type(kind).filters, filters)

        if self.backend is None:
            self.last_source = SOURCE_MOCK
            return self.mock_backend.list(kind, filters)

        try:
            items = self.backend.list(kind, filters)
            self.last_source = SOURCE_BACKEND
            return items
        except KcsscError as e:
            return self._fallback(e, f"filtered {kind.value}").list(kind, filters)

    def create_entity(self, kind: EntityKind, payload: Payload):
        kind = EntityKind(kind)
        created = self._require_backend(kind, "create").create(kind, payload)
        self.cache.invalidate(entity_type(kind).cache_key)
        return created

    def update_entity(self, kind: EntityKind, entity_id: int, payload: Payload):
        kind = EntityKind(kind)
        updated = self._require_backend(kind, "update").update(kind, entity_id, payload)
        self.cache.invalidate(entity_type(kind).cache_key)
        return updated

    def delete_entity(self, kind: EntityKind, entity_id: int) -> None:
        kind = EntityKind(kind)
        self._require_backend(kind, "delete").delete(kind, entity_id)
        self.cache.invalidate(entity_type(kind).cache_key)

    # Events

    def fetch_events(self, use_cache: bool = True) -> List[EventResponse]:
        return self.fetch_entities(EntityKind.EVENTS, use_cache)

    def fetch_event_by_id(self, event_id: int) -> EventResponse:
        return self.fetch_by_id(EntityKind.EVENTS, event_id)

    def create_event(self, payload: Payload) -> EventResponse:
        return self.create_entity(EntityKind.EVENTS, payload)

    def update_event(self, event_id: int, payload: Payload) -> EventResponse:
        return self.update_entity(EntityKind.EVENTS, event_id, payload)

    def delete_event(self, event_id: int) -> None:
        self.delete_entity(EntityKind.EVENTS, event_id)

    def fetch_events_with_filters(
        self,
        category: Optional[str] = None,
        start_date: Optional[Union[date, str]] = None,
        end_date: Optional[Union[date, str]] = None,
        featured: Optional[bool] = None,
    ) -> List[EventResponse]:
        filters = EventFilters(category=category, start_date=start_date, end_date=end_date, featured=featured)
        return self.fetch_with_filters(EntityKind.EVENTS, filters)

    # Programs

    def fetch_programs(self, use_cache: bool = True) -> List[ProgramResponse]:
        return self.fetch_entities(EntityKind.PROGRAMS, use_cache)

    def fetch_program_by_id(self, program_id: int) -> ProgramResponse:
        return self.fetch_by_id(EntityKind.PROGRAMS, program_id)

    def create_program(self, payload: Payload) -> ProgramResponse:
        return self.create_entity(EntityKind.PROGRAMS, payload)

    def update_program(self, program_id: int, payload: Payload) -> ProgramResponse:
        return self.update_entity(EntityKind.PROGRAMS, program_id, payload)

    def delete_program(self, program_id: int) -> None:
        self.delete_entity(EntityKind.PROGRAMS, program_id)

    def fetch_programs_with_filters(
        self, category: Optional[str] = None, age_group: Optional[str] = None
    ) -> List[ProgramResponse]:
        return self.fetch_with_filters(EntityKind.PROGRAMS, ProgramFilters(category=category, age_group=age_group))

    # Photos

    def fetch_photos(self, use_cache: bool = True) -> List[PhotoResponse]:
        return self.fetch_entities(EntityKind.PHOTOS, use_cache)

    def fetch_photo_by_id(self, photo_id: int) -> PhotoResponse:
        return self.fetch_by_id(EntityKind.PHOTOS, photo_id)

    def fetch_favourite_photos(self) -> List[PhotoResponse]:
        return self.fetch_with_filters(EntityKind.PHOTOS, PhotoFilters(favourite=True))

    def fetch_photos_by_year(self, year: int) -> List[PhotoResponse]:
        return self.fetch_with_filters(EntityKind.PHOTOS, PhotoFilters(year=year))

    def fetch_photos_by_event(self, event: str) -> List[PhotoResponse]:
        return self.fetch_with_filters(EntityKind.PHOTOS, PhotoFilters(event=event))

    def create_photo(self, payload: Payload) -> PhotoResponse:
        return self.create_entity(EntityKind.PHOTOS, payload)

    def update_photo(self, photo_id: int, payload: Payload) -> PhotoResponse:
        return self.update_entity(EntityKind.PHOTOS, photo_id, payload)

    def delete_photo(self, photo_id: int) -> None:
        self.delete_entity(EntityKind.PHOTOS, photo_id)

    def upload_photo(self, content: bytes, filename: str, content_type: str = "image/jpeg") -> UploadResponse:
        """Stores the image only; pass the returned file_path to create_photo."""
        return self._require_backend(EntityKind.PHOTOS, "upload").upload_photo(content, filename, content_type)

    # Cache

    def clear_events_cache(self) -> None:
        self.cache.invalidate(entity_type(EntityKind.EVENTS).cache_key)

    def clear_programs_cache(self) -> None:
        self.cache.invalidate(entity_type(EntityKind.PROGRAMS).cache_key)

    def clear_photos_cache(self) -> None:
        self.cache.invalidate(entity_type(EntityKind.PHOTOS).cache_key)

    def clear_all_caches(self) -> None:
        self.cache.clear()
