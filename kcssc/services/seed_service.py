"""
Loads the built-in sample events, programs and photos into the database.

Records already present are skipped, so seeding can be re-run safely:
events match on title + date, programs on title, photos on image + event + date.
"""
import logging
from typing import Callable, Dict, List, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from kcssc.client.mock_data import EVENTS, PHOTOS, PROGRAMS
from kcssc.models import Event, Photo, Program
from kcssc.schemas import EventCreate, PhotoCreate, ProgramCreate
from kcssc.services.event_service import EventService
from kcssc.services.photo_service import PhotoService
from kcssc.services.program_service import ProgramService

logger = logging.getLogger(__name__)

SeedResult = Tuple[int, int]


def _without_id(record: Dict) -> Dict:
    return {k: v for k, v in record.items() if k != "id"}


def _seed(db: Session, records: List, label: str, exists: Callable, create: Callable) -> SeedResult:
    inserted = skipped = 0
    for data in records:
        if exists(db, data):
            skipped += 1
            logger.info(f"Skipped {label} (already exists): {data}")
            continue
        try:
            create(db, data)
            inserted += 1
        except IntegrityError as e:
            db.rollback()
            skipped += 1
            logger.info(f"Skipped {label} (integrity conflict): {e.orig}")
    return inserted, skipped


def seed_events(db: Session) -> SeedResult:
    records = [EventCreate.model_validate(_without_id(e)) for e in EVENTS]
    return _seed(
        db, records, "event",
        lambda db, d: db.query(Event).filter(Event.title == d.title, Event.date == d.date).first() is not None,
        EventService.create_event,
    )


def seed_programs(db: Session) -> SeedResult:
    records = [ProgramCreate.model_validate(_without_id(p)) for p in PROGRAMS]
    return _seed(
        db, records, "program",
        lambda db, d: db.query(Program).filter(Program.title == d.title).first() is not None,
        ProgramService.create_program,
    )


def seed_photos(db: Session) -> SeedResult:
    records = [PhotoCreate.model_validate(_without_id(p)) for p in PHOTOS]
    return _seed(
        db, records, "photo",
        lambda db, d: db.query(Photo).filter(
            Photo.photo == d.photo, Photo.event == d.event, Photo.date == d.date
        ).first() is not None,
        PhotoService.create_photo,
    )


def record_counts(db: Session) -> Dict[str, int]:
    return {
        "events": db.query(Event).count(),
        "programs": db.query(Program).count(),
        "photos": db.query(Photo).count(),
    }
