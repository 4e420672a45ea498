from datetime import date, time

import pytest

from kcssc.client import DatabaseBackend, DataService, EntityKind, TTLCache
from kcssc.client.calendar import programs_on_date
from kcssc.core import database
from kcssc.core.exceptions import NotFoundError, ValidationError
from kcssc.models import Program
from kcssc.services import seed_service
from kcssc.services.schedule import Recurrence


@pytest.fixture
def embedded(engine, upload_dir, clock, mock_backend):
    return DataService(DatabaseBackend(database.SessionLocal), TTLCache(clock=clock), mock_backend=mock_backend)


def test_crud_without_http(embedded, event_payload):
    created = embedded.create_event(event_payload)
    assert created.time == "11:00 AM - 3:00 PM"

    assert [e.id for e in embedded.fetch_events()] == [created.id]
    assert embedded.last_source == "backend"

    updated = embedded.update_event(created.id, {"featured": False})
    assert updated.featured is False

    embedded.delete_event(created.id)
    assert embedded.fetch_events() == []


def test_filters_run_as_queries(embedded, photo_payload):
    embedded.create_photo(photo_payload)
    embedded.create_photo({**photo_payload, "date": "2024-12-31", "favourite": False})
    assert [p.date for p in embedded.fetch_photos_by_year(2024)] == ["2024-12-31"]
    assert [p.date for p in embedded.fetch_favourite_photos()] == ["2025-01-25"]


def test_missing_entity(engine):
    backend = DatabaseBackend(database.SessionLocal)
    with pytest.raises(NotFoundError):
        backend.get(EntityKind.PROGRAMS, 1)
    with pytest.raises(NotFoundError):
        backend.delete(EntityKind.EVENTS, 1)


def test_empty_photo_update_rejected(embedded, photo_payload):
    photo = embedded.create_photo(photo_payload)
    with pytest.raises(ValidationError):
        embedded.update_photo(photo.id, {})


def test_upload_goes_through_storage(embedded, upload_dir):
    uploaded = embedded.upload_photo(b"bytes", "Spring Gala.jpg", "image/jpeg")
    assert uploaded.file_path.startswith("/uploads/Spring-Gala-")
    assert (upload_dir / uploaded.filename).read_bytes() == b"bytes"


def test_seed_is_idempotent(db_session):
    assert seed_service.seed_events(db_session) == (20, 0)
    assert seed_service.seed_programs(db_session) == (9, 0)
    assert seed_service.seed_photos(db_session) == (20, 0)
    assert seed_service.seed_photos(db_session) == (0, 20)
    assert seed_service.record_counts(db_session) == {"events": 20, "programs": 9, "photos": 20}


def test_seeded_programs_keep_schedule_text(db_session):
    seed_service.seed_programs(db_session)
    backend = DatabaseBackend(database.SessionLocal)
    programs = {p.title: p for p in backend.list(EntityKind.PROGRAMS)}
    assert programs["Gentle Exercise Class"].schedule == "Tuesdays/Thursdays, 11:00 AM - 12:00 PM"
    assert programs["Choir & Singing Group"].spots == "Open enrollment"


def test_stored_recurrence_reaches_the_calendar(embedded, db_session, program_payload):
    program = embedded.create_program(program_payload)
    assert program.recurrence == Recurrence(frozenset({1}), time(10), time(12))

    row = db_session.get(Program, program.id)
    row.schedule_days = "4"
    db_session.commit()

    programs = embedded.fetch_programs()
    assert programs_on_date(programs, date(2025, 1, 24)) == programs  # a Friday
    assert programs_on_date(programs, date(2025, 1, 21)) == []
