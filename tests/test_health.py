from kcssc.core import database


def test_liveness(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert "timestamp" in response.json()


def test_detailed_health_with_database(client):
    body = client.get("/api/health").json()
    assert body["status"] == "healthy"
    assert body["services"]["database"]["status"] == "healthy"
    assert body["services"]["database"]["dialect"] == "sqlite"
    assert body["services"]["storage"]["storage_type"] == "local_filesystem"


def test_database_health(client):
    assert client.get("/api/health/database").json()["status"] == "healthy"


def test_health_without_database(client, monkeypatch):
    monkeypatch.setattr(database, "engine", None)
    body = client.get("/api/health").json()
    assert body["services"]["database"]["status"] == "not_configured"
    assert body["status"] == "healthy"


def test_endpoints_answer_503_without_database(client, monkeypatch):
    app_overrides = client.app.dependency_overrides
    app_overrides.clear()
    monkeypatch.setattr(database, "engine", None)
    response = client.get("/api/events")
    assert response.status_code == 503
    assert "DB_ENABLED" in response.json()["detail"]


def test_storage_status(client, upload_dir):
    body = client.get("/api/system/storage-status").json()
    assert body["object_storage_available"] is False
    assert body["fallback_mode"] is True
    assert body["upload_dir"] == str(upload_dir)
