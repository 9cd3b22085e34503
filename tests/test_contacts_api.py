from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from house_major.api.main import app
from house_major.api.routes import contacts as contact_routes


def test_contact_submission_is_public(monkeypatch: pytest.MonkeyPatch) -> None:
    notified: list[tuple] = []
    monkeypatch.setattr(contact_routes, "notify_inbox", lambda *args: notified.append(args))
    client = TestClient(app)
    response = client.post(
        "/contacts",
        json={"name": "Ada", "email": "ada@example.com", "message": "Need a website"},
    )
    assert response.status_code == 201
    assert response.json()["message"] == "Message sent successfully"
    assert notified == [("Ada", "ada@example.com", "Need a website")]


def test_contact_submission_survives_without_smtp() -> None:
    client = TestClient(app)
    response = client.post(
        "/contacts",
        json={"name": "Ada", "email": "ada@example.com", "message": "Hello"},
    )
    assert response.status_code == 201


def test_admin_reads_and_deletes_contacts(admin_headers: dict[str, str]) -> None:
    client = TestClient(app)
    assert client.get("/contacts").status_code == 401

    client.post("/contacts", json={"name": "Ada", "email": "ada@example.com", "message": "One"})
    client.post("/contacts", json={"name": "Bob", "email": "bob@example.com", "message": "Two"})

    contacts = client.get("/contacts", headers=admin_headers).json()
    assert [c["name"] for c in contacts] == ["Bob", "Ada"]

    contact_id = contacts[0]["id"]
    assert client.get(f"/contacts/{contact_id}", headers=admin_headers).json()["message"] == "Two"
    assert client.delete(f"/contacts/{contact_id}", headers=admin_headers).status_code == 200
    assert client.get(f"/contacts/{contact_id}", headers=admin_headers).status_code == 404
