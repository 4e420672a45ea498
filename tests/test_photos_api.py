def create_photo(client, payload, **overrides):
    response = client.post("/api/photos", json={**payload, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


def test_create_photo(client, photo_payload):
    photo = create_photo(client, photo_payload)
    assert photo["date"] == "2025-01-25"
    assert photo["favourite"] is True
    assert photo["event"] == "Lunar New Year Celebration"


def test_create_photo_requires_event_and_date(client):
    response = client.post("/api/photos", json={"photo": "/a.jpg"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required fields"


def test_list_photos_newest_first_with_filters(client, photo_payload):
    create_photo(client, photo_payload, event="Old", date="2024-06-01", favourite=False)
    create_photo(client, photo_payload, event="New", date="2025-02-01", favourite=True)
    create_photo(client, photo_payload, event="Mid", date="2025-01-15", favourite=False)

    def events(**params):
        return [p["event"] for p in client.get("/api/photos", params=params).json()]

    assert events() == ["New", "Mid", "Old"]
    assert events(favourite="true") == ["New"]
    assert events(year=2024) == ["Old"]
    assert events(event="Mid") == ["Mid"]


def test_update_photo(client, photo_payload):
    photo = create_photo(client, photo_payload)
    response = client.put(f"/api/photos/{photo['id']}", json={"favourite": False, "description": "Updated"})
    assert response.status_code == 200
    assert response.json()["favourite"] is False
    assert response.json()["description"] == "Updated"
    assert response.json()["photo"] == photo["photo"]


def test_update_photo_without_fields(client, photo_payload):
    photo = create_photo(client, photo_payload)
    response = client.put(f"/api/photos/{photo['id']}", json={})
    assert response.status_code == 400
    assert response.json()["detail"] == "No fields to update"


def test_missing_photo(client):
    assert client.get("/api/photos/7").status_code == 404
    assert client.put("/api/photos/7", json={"favourite": True}).status_code == 404
    assert client.delete("/api/photos/7").status_code == 404


def test_delete_photo_removes_unreferenced_upload(client, upload_dir, photo_payload):
    (upload_dir / "shared.jpg").write_bytes(b"img")
    (upload_dir / "single.jpg").write_bytes(b"img")
    first = create_photo(client, photo_payload, photo="/uploads/shared.jpg")
    second = create_photo(client, photo_payload, photo="/uploads/shared.jpg")
    single = create_photo(client, photo_payload, photo="/uploads/single.jpg")

    assert client.delete(f"/api/photos/{single['id']}").status_code == 204
    assert not (upload_dir / "single.jpg").exists()

    assert client.delete(f"/api/photos/{first['id']}").status_code == 204
    assert (upload_dir / "shared.jpg").exists()
    assert client.delete(f"/api/photos/{second['id']}").status_code == 204
    assert not (upload_dir / "shared.jpg").exists()


def test_delete_photo_leaves_site_images_alone(client, photo_payload):
    photo = create_photo(client, photo_payload, photo="/HeroPhoto.JPG")
    assert client.delete(f"/api/photos/{photo['id']}").status_code == 204
    assert client.get("/api/photos").json() == []
