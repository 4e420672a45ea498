from datetime import date

import httpx
import pytest

from kcssc.client import DataService, EntityKind, HttpBackend, MockBackend, TTLCache
from kcssc.client.backends import api_root
from kcssc.client.calendar import programs_on_date
from kcssc.core.config import get_settings
from kcssc.core.exceptions import BackendError, ConfigurationError, NotFoundError, ValidationError
from kcssc.models import Program


class CountingBackend:
    """Wraps a backend and counts list calls."""

    def __init__(self, inner):
        self.inner = inner
        self.list_calls = 0

    def list(self, kind, filters=None):
        self.list_calls += 1
        return self.inner.list(kind, filters)

    def __getattr__(self, name):
        return getattr(self.inner, name)


class BrokenBackend:
    def list(self, kind, filters=None):
        raise BackendError("connection refused")

    def get(self, kind, entity_id):
        raise BackendError("connection refused")


# Without a backend


def test_mock_mode_serves_sample_data(mock_service):
    events = mock_service.fetch_events()
    assert len(events) == 20
    assert mock_service.last_source == "mock"
    assert len(mock_service.fetch_programs()) == 9
    assert len(mock_service.fetch_photos()) == 20


def test_second_read_comes_from_cache(mock_service):
    mock_service.fetch_events()
    mock_service.fetch_events()
    assert mock_service.last_source == "cache"
    mock_service.fetch_events(use_cache=False)
    assert mock_service.last_source == "mock"


def test_cache_expires_after_ttl(mock_service, clock):
    mock_service.fetch_programs()
    clock.advance(5 * 60)
    mock_service.fetch_programs()
    assert mock_service.last_source == "mock"


def test_mock_fetch_by_id(mock_service):
    assert mock_service.fetch_event_by_id(1).title == "Lunar New Year Celebration"
    assert mock_service.fetch_program_by_id(2).schedule == "Mon/Wed/Fri, 9:00 AM - 10:00 AM"
    with pytest.raises(NotFoundError):
        mock_service.fetch_event_by_id(999)


def test_mock_filters(mock_service):
    health = mock_service.fetch_with_filters(EntityKind.EVENTS, {"category": "Health", "featured": True})
    assert [e.title for e in health] == ["Health Screening Day"]

    january = mock_service.fetch_events_with_filters(start_date="2025-01-20", end_date="January 22, 2025")
    assert sorted(e.id for e in january) == [4, 5, 12]

    seniors = mock_service.fetch_programs_with_filters(age_group="55+")
    assert {p.title for p in seniors} == {"Tai Chi for Beginners", "Computer Skills Workshop"}

    assert len(mock_service.fetch_favourite_photos()) == 4
    assert len(mock_service.fetch_photos_by_year(2025)) == 20
    assert mock_service.fetch_photos_by_year(2024) == []
    assert [p.id for p in mock_service.fetch_photos_by_event("Karaoke Night")] == [16]


@pytest.mark.parametrize("call", [
    lambda s: s.create_event({"title": "x"}),
    lambda s: s.update_program(1, {"title": "x"}),
    lambda s: s.delete_photo(1),
    lambda s: s.upload_photo(b"img", "a.jpg"),
])
def test_writes_need_a_backend(mock_service, call):
    mock_service.fetch_events()
    with pytest.raises(ConfigurationError) as excinfo:
        call(mock_service)
    assert "USE_MOCK_DATA=false" in excinfo.value.message
    assert "API_BASE_URL" in excinfo.value.message
    mock_service.fetch_events()
    assert mock_service.last_source == "cache"


def test_mock_delays_use_sleeper():
    pauses = []
    backend = MockBackend(list_delay=(1.0, 2.0), item_delay=0.5, sleeper=pauses.append)
    backend.list(EntityKind.EVENTS)
    backend.get(EntityKind.EVENTS, 1)
    assert 1.0 <= pauses[0] <= 2.0
    assert pauses[1] == 0.5


# With the API behind the test client


def test_backend_mode_reads_from_api(api_service, client, event_payload):
    client.post("/api/events", json=event_payload)
    events = api_service.fetch_events()
    assert [e.title for e in events] == ["Lunar New Year Celebration"]
    assert api_service.last_source == "backend"


def test_backend_mode_caches_list(client, clock, mock_backend, event_payload):
    backend = CountingBackend(HttpBackend("http://testserver/api/", client=client))
    service = DataService(backend, TTLCache(clock=clock), mock_backend=mock_backend)

    service.fetch_events()
    service.fetch_events()
    assert backend.list_calls == 1

    clock.advance(301)
    service.fetch_events()
    assert backend.list_calls == 2


def test_create_invalidates_cache(api_service, event_payload):
    assert api_service.fetch_events() == []
    created = api_service.create_event(event_payload)
    assert created.date == "January 25, 2025"

    events = api_service.fetch_events()
    assert api_service.last_source == "backend"
    assert [e.id for e in events] == [created.id]


def test_update_and_delete_through_api(api_service, program_payload):
    program = api_service.create_program(program_payload)
    updated = api_service.update_program(program.id, {"spots": "Full"})
    assert updated.spots == "Full"
    assert api_service.fetch_program_by_id(program.id).spots == "Full"

    api_service.delete_program(program.id)
    assert api_service.fetch_programs() == []


def test_update_and_delete_refresh_cached_list(client, clock, mock_backend, event_payload):
    backend = CountingBackend(HttpBackend("http://testserver", client=client))
    service = DataService(backend, TTLCache(clock=clock), mock_backend=mock_backend)
    event = service.create_event(event_payload)

    assert [e.title for e in service.fetch_events()] == ["Lunar New Year Celebration"]
    service.fetch_events()
    assert service.last_source == "cache"
    assert backend.list_calls == 1

    service.update_event(event.id, {"title": "Spring Festival"})
    assert [e.title for e in service.fetch_events()] == ["Spring Festival"]
    assert service.last_source == "backend"
    assert backend.list_calls == 2

    service.fetch_events()
    assert service.last_source == "cache"
    service.delete_event(event.id)
    assert service.fetch_events() == []
    assert service.last_source == "backend"
    assert backend.list_calls == 3


def test_calendar_uses_recurrence_read_from_api(api_service, db_session, program_payload):
    program = api_service.create_program(program_payload)
    assert program.schedule_days == [1]

    row = db_session.get(Program, program.id)
    row.schedule_days = "4"
    db_session.commit()

    programs = api_service.fetch_programs()
    assert programs[0].schedule == "Tuesdays, 10:00 AM - 12:00 PM"
    assert programs_on_date(programs, date(2025, 1, 24)) == programs  # a Friday
    assert programs_on_date(programs, date(2025, 1, 21)) == []


def test_backend_filters_match_local_filters(api_service, mock_service):
    for event in mock_service.fetch_events():
        api_service.create_event(event.model_dump(exclude={"id"}, exclude_none=True))

    query = {"category": "Health", "featured": True}
    remote = api_service.fetch_with_filters(EntityKind.EVENTS, query)
    local = mock_service.fetch_with_filters(EntityKind.EVENTS, query)
    assert [e.title for e in remote] == [e.title for e in local] == ["Health Screening Day"]
    assert api_service.last_source == "backend"


def test_missing_id_falls_back_to_sample_data(api_service):
    assert api_service.fetch_event_by_id(3).title == "Traditional Chinese Painting Class"
    assert api_service.last_source == "degraded"
    with pytest.raises(NotFoundError):
        api_service.fetch_event_by_id(999)


def test_missing_id_raises_when_not_degrading(client, mock_backend):
    service = DataService(HttpBackend("http://testserver", client=client), mock_backend=mock_backend,
                          degrade_on_error=False)
    with pytest.raises(NotFoundError):
        service.fetch_event_by_id(3)


def test_update_missing_entity(api_service):
    with pytest.raises(NotFoundError):
        api_service.update_event(404, {"title": "Nope"})


def test_invalid_payload_is_rejected_before_sending(api_service):
    with pytest.raises(ValidationError):
        api_service.create_event({"title": "Only a title"})


def test_photo_upload_then_create(api_service, upload_dir):
    uploaded = api_service.upload_photo(b"\x89PNG not really", "gala.png", "image/png")
    assert uploaded.file_path.startswith("/uploads/gala-")

    photo = api_service.create_photo({
        "photo": uploaded.file_path, "event": "Gala", "date": "2025-03-01", "favourite": True,
    })
    assert api_service.fetch_favourite_photos() == [photo]


# Backend failures


def test_backend_failure_degrades_to_sample_data(clock, mock_backend):
    service = DataService(BrokenBackend(), TTLCache(clock=clock), mock_backend=mock_backend)
    assert len(service.fetch_events()) == 20
    assert service.last_source == "degraded"
    assert service.fetch_program_by_id(1).title == "Chinese Brush Painting"
    assert service.last_source == "degraded"
    assert len(service.fetch_with_filters(EntityKind.PHOTOS, {"favourite": True})) == 4


def serving(status_code, **content):
    return httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(status_code, **content)))


def test_html_answer_degrades_to_sample_data(clock, mock_backend):
    client = serving(200, text="<!doctype html><html><body>Not the API</body></html>")
    service = DataService(HttpBackend("http://wrong-host", client=client), TTLCache(clock=clock), mock_backend=mock_backend)
    assert len(service.fetch_events()) == 20
    assert service.last_source == "degraded"
    assert service.fetch_event_by_id(1).title == "Lunar New Year Celebration"
    assert service.last_source == "degraded"
    assert len(service.fetch_events_with_filters(category="Health")) == 2


def test_wrong_json_shape_degrades_to_sample_data(clock, mock_backend):
    service = DataService(HttpBackend("http://wrong-host", client=serving(200, json={"error": "nope"})),
                          TTLCache(clock=clock), mock_backend=mock_backend)
    assert len(service.fetch_programs()) == 9
    assert service.last_source == "degraded"
    assert service.fetch_program_by_id(1).title == "Chinese Brush Painting"

    service = DataService(HttpBackend("http://wrong-host", client=serving(200, json=[{"id": "x"}])),
                          TTLCache(clock=clock), mock_backend=mock_backend)
    assert len(service.fetch_photos()) == 20
    assert service.last_source == "degraded"


def test_unreadable_answer_raises_backend_error():
    backend = HttpBackend("http://wrong-host", client=serving(200, text="<html></html>"))
    with pytest.raises(BackendError):
        backend.list(EntityKind.EVENTS)
    with pytest.raises(BackendError):
        backend.get(EntityKind.EVENTS, 1)

    service = DataService(backend, degrade_on_error=False)
    with pytest.raises(BackendError):
        service.fetch_events()


def test_backend_failure_raises_when_not_degrading(mock_backend):
    service = DataService(BrokenBackend(), mock_backend=mock_backend, degrade_on_error=False)
    with pytest.raises(BackendError):
        service.fetch_events()
    with pytest.raises(BackendError):
        service.fetch_event_by_id(1)


def test_clear_caches(mock_service):
    mock_service.fetch_events()
    mock_service.fetch_programs()
    mock_service.clear_events_cache()
    mock_service.fetch_events()
    assert mock_service.last_source == "mock"
    mock_service.fetch_programs()
    assert mock_service.last_source == "cache"
    mock_service.clear_all_caches()
    mock_service.fetch_programs()
    assert mock_service.last_source == "mock"


# Construction


def test_api_root():
    assert api_root("http://localhost:3000") == "http://localhost:3000/api"
    assert api_root("http://localhost:3000/api/") == "http://localhost:3000/api"


def test_from_settings_without_api_url(monkeypatch):
    monkeypatch.setenv("USE_MOCK_DATA", "false")
    monkeypatch.delenv("API_BASE_URL", raising=False)
    service = DataService.from_settings(get_settings())
    assert not service.backend_configured


def test_from_settings_with_api_url(monkeypatch):
    monkeypatch.setenv("USE_MOCK_DATA", "false")
    monkeypatch.setenv("API_BASE_URL", "https://kcssc.example.org/api")
    monkeypatch.setenv("CACHE_TTL_SECONDS", "60")
    service = DataService.from_settings(get_settings())
    assert isinstance(service.backend, HttpBackend)
    assert service.backend.root == "https://kcssc.example.org/api"
    assert service.cache.ttl == 60
