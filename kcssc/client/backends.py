"""
Backends the client DataService reads from and writes to.

All three answer with the same display-shaped pydantic models:
- MockBackend: the built-in sample data, read-only, with a simulated delay
- HttpBackend: the REST API at API_BASE_URL
- DatabaseBackend: the service layer directly, inside a SQLAlchemy session
"""
import logging
import random
import time
from collections import namedtuple
from contextlib import contextmanager
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import httpx
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from kcssc.client.entities import EntityKind, coerce_model, entity_type
from kcssc.client.mock_data import mock_events, mock_photos, mock_programs
from kcssc.core.exceptions import BackendError, ConfigurationError, NotFoundError, ValidationError
from kcssc.schemas.upload import UploadResponse
from kcssc.services import storage_service
from kcssc.services.event_service import EventService
from kcssc.services.photo_service import PhotoService
from kcssc.services.program_service import ProgramService

logger = logging.getLogger(__name__)

Payload = Union[Dict[str, Any], Any]


class MockBackend:
    name = "mock"

    def __init__(
        self,
        list_delay: Tuple[float, float] = (1.0, 2.0),
        item_delay: float = 0.5,
        sleeper: Callable[[float], None] = time.sleep,
    ):
        self.list_delay = list_delay
        self.item_delay = item_delay
        self.sleeper = sleeper
        self._data = {
            EntityKind.EVENTS: mock_events(),
            EntityKind.PROGRAMS: mock_programs(),
            EntityKind.PHOTOS: mock_photos(),
        }

    def _pause(self, seconds: float) -> None:
        if seconds > 0:
            self.sleeper(seconds)

    def list(self, kind: EntityKind, filters=None) -> List[Any]:
        low, high = self.list_delay
        self._pause(random.uniform(low, high) if high > low else low)
        items = [item.model_copy() for item in self._data[EntityKind(kind)]]
        if filters is not None:
            items = [item for item in items if filters.matches(item)]
        return items

    def get(self, kind: EntityKind, entity_id: int):
        self._pause(self.item_delay)
        for item in self._data[EntityKind(kind)]:
            if item.id == entity_id:
                return item.model_copy()
        raise NotFoundError(entity_type(kind).label, entity_id)

    def _read_only(self, *args, **kwargs):
        raise ConfigurationError("The sample data is read-only")

    create = update = delete = upload_photo = _read_only


def api_root(base_url: str) -> str:
    """http://host -> http://host/api; http://host/api/ -> http://host/api"""
    root = (base_url or "").rstrip("/")
    if not root.endswith("/api"):
        root += "/api"
    return root


class HttpBackend:
    name = "http"

    def __init__(self, base_url: str, client: Optional[httpx.Client] = None, timeout: float = 10.0):
        self.root = api_root(base_url)
        self.client = client or httpx.Client(timeout=timeout)

    @staticmethod
    def _detail(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(body, dict) and body.get("detail"):
            return str(body["detail"])
        return str(body)

    def _request(self, method: str, path: str, not_found: Optional[Tuple[str, int]] = None, **kwargs) -> httpx.Response:
        url = f"{self.root}{path}"
        try:
            response = self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise BackendError(f"{method} {url} failed: {e}") from e
        logger.debug(f"{method} {url} -> {response.status_code}")

        if response.is_success:
            return response

        detail = self._detail(response)
        if response.status_code == 404 and not_found is not None:
            raise NotFoundError(*not_found)
        if response.status_code in (400, 422):
            raise ValidationError(detail)
        raise BackendError(f"{method} {url} returned {response.status_code}: {detail}")

    @staticmethod
    def _parse(model, response: httpx.Response, many: bool = False):
        """Body of a 2xx response as `model` instances. Anything unreadable is a BackendError."""
        try:
            body = response.json()
        except ValueError as e:
            raise BackendError(f"{response.request.url} did not answer with JSON: {e}") from e
        if many and not isinstance(body, list):
            raise BackendError(f"{response.request.url} answered with {type(body).__name__}, expected a list")
        try:
            if many:
                return [model.model_validate(item) for item in body]
            return model.model_validate(body)
        except PydanticValidationError as e:
            raise BackendError(f"Unexpected {model.__name__} from {response.request.url}: {e}") from e

    def list(self, kind: EntityKind, filters=None) -> List[Any]:
        etype = entity_type(kind)
        params = filters.to_query_params() if filters is not None else None
        response = self._request("GET", etype.path, params=params)
        return self._parse(etype.response, response, many=True)

    def get(self, kind: EntityKind, entity_id: int):
        etype = entity_type(kind)
        response = self._request("GET", f"{etype.path}/{entity_id}", not_found=(etype.label, entity_id))
        return self._parse(etype.response, response)

    def create(self, kind: EntityKind, payload: Payload):
        etype = entity_type(kind)
        body = coerce_model(etype.create, payload).model_dump(mode="json", by_alias=True, exclude_none=True)
        response = self._request("POST", etype.path, json=body)
        return self._parse(etype.response, response)

    def update(self, kind: EntityKind, entity_id: int, payload: Payload):
        etype = entity_type(kind)
        body = coerce_model(etype.update, payload).model_dump(mode="json", by_alias=True, exclude_unset=True)
        response = self._request("PUT", f"{etype.path}/{entity_id}", json=body, not_found=(etype.label, entity_id))
        return self._parse(etype.response, response)

    def delete(self, kind: EntityKind, entity_id: int) -> None:
        etype = entity_type(kind)
        self._request("DELETE", f"{etype.path}/{entity_id}", not_found=(etype.label, entity_id))

    def upload_photo(self, content: bytes, filename: str, content_type: str) -> UploadResponse:
        response = self._request("POST", "/upload/photo", files={"photo": (filename, content, content_type)})
        return self._parse(UploadResponse, response)

    def close(self) -> None:
        self.client.close()


ServiceOps = namedtuple("ServiceOps", "list get create update delete to_response")

SERVICES: Dict[EntityKind, ServiceOps] = {
    EntityKind.EVENTS: ServiceOps(
        EventService.list_events, EventService.get_event, EventService.create_event,
        EventService.update_event, EventService.delete_event, EventService.to_response,
    ),
    EntityKind.PROGRAMS: ServiceOps(
        ProgramService.list_programs, ProgramService.get_program, ProgramService.create_program,
        ProgramService.update_program, ProgramService.delete_program, ProgramService.to_response,
    ),
    EntityKind.PHOTOS: ServiceOps(
        PhotoService.list_photos, PhotoService.get_photo, PhotoService.create_photo,
        PhotoService.update_photo, PhotoService.delete_photo, PhotoService.to_response,
    ),
}


class DatabaseBackend:
    """Embedded mode: same operations as HttpBackend without going through HTTP."""

    name = "database"

    def __init__(self, session_factory: Optional[Callable] = None):
        if session_factory is None:
            from kcssc.core import database

            if database.engine is None:
                raise ConfigurationError("DatabaseBackend needs DB_ENABLED=true and a database URL")
            session_factory = database.SessionLocal
        self.session_factory = session_factory

    @contextmanager
    def _session(self):
        db = self.session_factory()
        try:
            yield db
        except SQLAlchemyError as e:
            raise BackendError(f"Database error: {e}") from e
        finally:
            db.close()

    def list(self, kind: EntityKind, filters=None) -> List[Any]:
        ops = SERVICES[EntityKind(kind)]
        with self._session() as db:
            return [ops.to_response(row) for row in ops.list(db, filters)]

    def _get_row(self, db, kind: EntityKind, entity_id: int):
        row = SERVICES[EntityKind(kind)].get(db, entity_id)
        if row is None:
            raise NotFoundError(entity_type(kind).label, entity_id)
        return row

    def get(self, kind: EntityKind, entity_id: int):
        with self._session() as db:
            return SERVICES[EntityKind(kind)].to_response(self._get_row(db, kind, entity_id))

    def create(self, kind: EntityKind, payload: Payload):
        ops = SERVICES[EntityKind(kind)]
        data = coerce_model(entity_type(kind).create, payload)
        with self._session() as db:
            return ops.to_response(ops.create(db, data))

    def update(self, kind: EntityKind, entity_id: int, payload: Payload):
        ops = SERVICES[EntityKind(kind)]
        data = coerce_model(entity_type(kind).update, payload)
        if EntityKind(kind) is EntityKind.PHOTOS and not data.model_fields_set:
            raise ValidationError("No fields to update")
        with self._session() as db:
            row = self._get_row(db, kind, entity_id)
            return ops.to_response(ops.update(db, row, data))

    def delete(self, kind: EntityKind, entity_id: int) -> None:
        ops = SERVICES[EntityKind(kind)]
        with self._session() as db:
            ops.delete(db, self._get_row(db, kind, entity_id))

    def upload_photo(self, content: bytes, filename: str, content_type: str) -> UploadResponse:
        return storage_service.store_photo(content, filename, content_type)
