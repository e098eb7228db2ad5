import logging
import os
import uuid

import pytest
from fastapi.testclient import TestClient

from sync_notes.exceptions import ValidationError
from sync_notes.main import create_app


@pytest.fixture
def app(settings, clock):
    return create_app(settings, clock=clock)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


def _new_note(client, data="hello"):
    response = client.post("/v1/create-note-request")
    assert response.status_code == 201
    note = {"id": response.json()["id"], "data": data}
    response = client.post("/v1/note", json=note)
    assert response.status_code == 201
    return note


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/").json()["status"] == "healthy"


def test_startup_creates_data_dir(client, settings):
    assert os.path.isdir(settings.DATA_DIR)


def test_create_request_returns_uuid(client):
    response = client.post("/v1/create-note-request")

    assert response.status_code == 201
    assert uuid.UUID(response.json()["id"])


def test_create_read_and_reuse(client):
    note = _new_note(client, "hello")

    response = client.get(f"/v1/note/{note['id']}")
    assert response.status_code == 200
    assert response.json() == note

    response = client.post("/v1/note", json={"id": note["id"], "data": "again"})
    assert response.status_code == 403
    assert client.get(f"/v1/note/{note['id']}").json()["data"] == "hello"


def test_create_echoes_body(client):
    token = client.post("/v1/create-note-request").json()["id"]
    body = {"id": token, "data": "# Heading\n\n* item"}

    response = client.post("/v1/note", json=body)

    assert response.status_code == 201
    assert response.json() == body


def test_create_with_unknown_token(client):
    response = client.post("/v1/note", json={"id": str(uuid.uuid4()), "data": "x"})

    assert response.status_code == 403
    assert response.json()["code"] == "forbidden"


def test_create_with_expired_token(client, clock):
    token = client.post("/v1/create-note-request").json()["id"]
    clock.advance(3601)

    response = client.post("/v1/note", json={"id": token, "data": "x"})

    assert response.status_code == 403


@pytest.mark.parametrize("body", [
    {"data": "missing id"},
    {"id": "not-a-uuid", "data": "x"},
    {"id": str(uuid.uuid4())},
])
def test_create_malformed_body(client, body):
    response = client.post("/v1/note", json=body)

    assert response.status_code == ValidationError.status_code == 400
    assert response.json()["code"] == ValidationError.code


def test_create_invalid_json(client):
    response = client.post(
        "/v1/note", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400


def test_get_unknown_note(client):
    assert client.get(f"/v1/note/{uuid.uuid4()}").status_code == 404


def test_get_non_uuid_id(client):
    assert client.get("/v1/note/not-a-uuid").status_code == 404


def test_update_note(client):
    note = _new_note(client, "v1")
    updated = {"id": note["id"], "data": "v2"}

    response = client.put(f"/v1/note/{note['id']}", json=updated)

    assert response.status_code == 200
    assert response.json() == updated
    assert client.get(f"/v1/note/{note['id']}").json()["data"] == "v2"


def test_update_unknown_note(client, settings):
    note_id = str(uuid.uuid4())

    response = client.put(f"/v1/note/{note_id}", json={"id": note_id, "data": "x"})

    assert response.status_code == 404
    assert os.listdir(settings.DATA_DIR) == []


def test_update_id_mismatch_leaves_storage_alone(client):
    note = _new_note(client, "original")
    other = str(uuid.uuid4())

    response = client.put(f"/v1/note/{note['id']}", json={"id": other, "data": "changed"})

    assert response.status_code == 404
    assert client.get(f"/v1/note/{note['id']}").json()["data"] == "original"
    assert client.get(f"/v1/note/{other}").status_code == 404


def test_update_malformed_body(client):
    note = _new_note(client)
    response = client.put(f"/v1/note/{note['id']}", json={"id": note["id"]})
    assert response.status_code == 400


def test_storage_failure_returns_500(app, client, tmp_path):
    token = client.post("/v1/create-note-request").json()["id"]
    app.state.store.directory = str(tmp_path / "gone")

    response = client.post("/v1/note", json={"id": token, "data": "x"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error", "code": "storage_error"}


def test_cors_preflight(client):
    response = client.options(
        "/v1/create-note-request",
        headers={
            "Origin": "https://notes.example.com",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_get_note_with_invalid_utf8_bytes(client, settings):
    note_id = uuid.uuid4()
    with open(os.path.join(settings.DATA_DIR, str(note_id)), "wb") as f:
        f.write(b"caf\xe9")

    response = client.get(f"/v1/note/{note_id}")

    assert response.status_code == 200
    assert response.json() == {"id": str(note_id), "data": "caf�"}


def test_directory_at_note_path_is_not_found(client, settings):
    note_id = uuid.uuid4()
    os.mkdir(os.path.join(settings.DATA_DIR, str(note_id)))

    response = client.get(f"/v1/note/{note_id}")

    assert response.status_code == 404
    assert response.json()["code"] == "not_found"


def test_request_log_level_follows_status(client, caplog):
    caplog.set_level(logging.INFO, logger="sync_notes.api")

    client.post("/v1/create-note-request")
    client.get(f"/v1/note/{uuid.uuid4()}")

    records = [r for r in caplog.records if r.name == "sync_notes.api"]
    assert [r.levelno for r in records] == [logging.INFO, logging.WARNING]
    assert "POST /v1/create-note-request" in records[0].getMessage()
    assert " 404 " in records[1].getMessage()
