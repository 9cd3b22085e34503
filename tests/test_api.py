from __future__ import annotations

from fastapi.testclient import TestClient

from house_major.api.main import app
from house_major.api.routes import health
from house_major.data.db import dispose_engine, ping


def test_health_check() -> None:
    client = TestClient(app)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_health_reports_unreachable_database(monkeypatch) -> None:
    monkeypatch.setattr(health, "ping", lambda: False)
    response = TestClient(app).get("/health")
    assert response.status_code == 503
    assert response.json() == {"status": "unhealthy"}


def test_unknown_route_uses_error_envelope() -> None:
    client = TestClient(app)
    response = client.get("/does-not-exist")
    assert response.status_code == 404
    body = response.json()
    assert body["status"] == "error"
    assert body["message"]


def test_protected_route_without_token() -> None:
    client = TestClient(app)
    response = client.get("/services")
    assert response.status_code == 401
    assert response.json() == {"status": "error", "message": "No token provided"}


def test_protected_route_with_wrong_scheme() -> None:
    client = TestClient(app)
    response = client.get("/services", headers={"Authorization": "Token abc"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid authorization format. Use 'Bearer <token>'"


def test_protected_route_with_empty_bearer() -> None:
    client = TestClient(app)
    response = client.get("/services", headers={"Authorization": "Bearer"})
    assert response.status_code == 401
    assert response.json()["message"] == "Token missing"


def test_protected_route_with_garbage_token() -> None:
    client = TestClient(app)
    response = client.get("/services", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"


def test_token_for_deleted_user_is_rejected() -> None:
    from house_major.services.auth import create_access_token

    client = TestClient(app)
    token = create_access_token(999, "ghost@housemajor.rw")
    response = client.get("/services", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["message"] == "User not found"


def test_validation_error_is_422_with_details() -> None:
    client = TestClient(app)
    response = client.post("/contacts", json={"name": "Ada"})
    assert response.status_code == 422
    body = response.json()
    assert body["status"] == "error"
    assert body["message"].startswith("Invalid ")
    assert body["details"]


def test_database_ping(monkeypatch, tmp_path) -> None:
    assert ping() is True
    monkeypatch.setenv("DB_URL", f"sqlite:///{(tmp_path / 'missing' / 'db.sqlite').as_posix()}")
    dispose_engine()
    assert ping() is False
