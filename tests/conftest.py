import os
import tempfile

os.environ["APP_ENV"] = "test"
os.environ["DB_ENABLED"] = "true"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["USE_MOCK_DATA"] = "true"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="kcssc-uploads-")
os.environ.pop("STORAGE_BUCKET", None)
os.environ.pop("API_BASE_URL", None)

import pytest
from fastapi.testclient import TestClient

from kcssc.client import DataService, HttpBackend, MockBackend, TTLCache
from kcssc.core import database
from kcssc.main import app
from kcssc.services import storage_service


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def engine():
    import kcssc.models  # noqa: F401

    engine = database.configure_engine("sqlite://")
    database.Base.metadata.create_all(bind=engine)
    yield engine
    database.Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(engine):
    session = database.SessionLocal()
    yield session
    session.close()


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(storage_service, "UPLOAD_DIR", str(tmp_path))
    monkeypatch.setattr(storage_service, "storage_bucket", None)
    monkeypatch.setattr(storage_service, "last_upload_error", None)
    return tmp_path


@pytest.fixture
def client(engine, upload_dir):
    def override_get_db():
        db = database.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[database.get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def mock_backend():
    return MockBackend(list_delay=(0, 0), item_delay=0)


@pytest.fixture
def mock_service(clock, mock_backend):
    """DataService with no backend configured, serving the sample data."""
    return DataService(None, TTLCache(clock=clock), mock_backend=mock_backend)


@pytest.fixture
def api_service(client, clock, mock_backend):
    """DataService talking to the app through the test client."""
    backend = HttpBackend("http://testserver", client=client)
    return DataService(backend, TTLCache(clock=clock), mock_backend=mock_backend)


@pytest.fixture
def event_payload():
    return {
        "title": "Lunar New Year Celebration",
        "date": "2025-01-25",
        "time": "11:00 AM - 3:00 PM",
        "location": "Community Hall",
        "category": "Holiday",
        "description": "Traditional performances, food, and festivities.",
        "featured": True,
    }


@pytest.fixture
def program_payload():
    return {
        "title": "Chinese Brush Painting",
        "category": "Arts & Crafts",
        "icon": "Palette",
        "schedule": "Tuesdays, 10:00 AM - 12:00 PM",
        "ageGroup": "All Ages",
        "description": "Traditional brush painting techniques.",
        "spots": "12 spots available",
    }


@pytest.fixture
def photo_payload():
    return {
        "photo": "/HeroPhoto.JPG",
        "description": "Community members gathering",
        "event": "Lunar New Year Celebration",
        "date": "2025-01-25",
        "favourite": True,
    }
