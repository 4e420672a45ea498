from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Type, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from kcssc.core.exceptions import ValidationError
from kcssc.schemas import (
    EventCreate, EventUpdate, EventResponse, EventFilters,
    ProgramCreate, ProgramUpdate, ProgramResponse, ProgramFilters,
    PhotoCreate, PhotoUpdate, PhotoResponse, PhotoFilters,
)


class EntityKind(str, Enum):
    EVENTS = "events"
    PROGRAMS = "programs"
    PHOTOS = "photos"


@dataclass(frozen=True)
class EntityType:
    label: str
    path: str
    response: Type[BaseModel]
    create: Type[BaseModel]
    update: Type[BaseModel]
    filters: Type[BaseModel]

    @property
    def cache_key(self) -> str:
        return self.path.strip("/")


ENTITY_TYPES: Dict[EntityKind, EntityType] = {
    EntityKind.EVENTS: EntityType("Event", "/events", EventResponse, EventCreate, EventUpdate, EventFilters),
    EntityKind.PROGRAMS: EntityType("Program", "/programs", ProgramResponse, ProgramCreate, ProgramUpdate, ProgramFilters),
    EntityKind.PHOTOS: EntityType("Photo", "/photos", PhotoResponse, PhotoCreate, PhotoUpdate, PhotoFilters),
}


def entity_type(kind: Union[EntityKind, str]) -> EntityType:
    return ENTITY_TYPES[EntityKind(kind)]


def coerce_model(model: Type[BaseModel], payload: Union[BaseModel, Dict[str, Any], None]) -> BaseModel:
    """Validates a dict (camelCase or snake_case keys) into `model`; models of the right type pass through."""
    if isinstance(payload, model):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(exclude_unset=True)
    try:
        return model.model_validate(payload or {})
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid {model.__name__}: {e}") from e
    except ValueError as e:
        raise ValidationError(str(e)) from e
