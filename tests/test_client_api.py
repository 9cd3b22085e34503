from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from house_major.api.main import app
from house_major.client.auth import AuthGate, LocalStore
from house_major.client.base import ApiClient, ApiError, AuthorizationError, FileUpload
from house_major.client.resources import (
    ApplicationsClient,
    ContactsClient,
    ProjectsClient,
    ServicesClient,
    TeamClient,
)
from house_major.dashboard.listing import ListState
from house_major.services.auth import create_user


@pytest.fixture
def gate(tmp_path: Path) -> AuthGate:
    create_user("admin", "admin@housemajor.rw", "secret123")
    store = LocalStore(tmp_path / "storage.json")
    api = ApiClient("http://testserver", token_store=store, session=TestClient(app))
    return AuthGate(api, store)


def test_login_and_create_service_end_to_end(gate: AuthGate) -> None:
    gate.login("admin@housemajor.rw", "secret123")
    assert gate.is_authenticated()
    assert gate.get_user_email() == "admin@housemajor.rw"

    services = ServicesClient(gate.api)
    services.create(
        {"title": "DevOps", "description": "Pipelines and cloud", "icon": "CloudIcon"}
    )
    services.create(
        {"title": "Branding", "description": "Logos", "icon": "PaintBrushIcon"}
    )

    items = services.list()
    state = ListState(page_size=6, fields=("title", "description"))
    state.set_query("devops")
    view = state.view(items)
    assert [s["title"] for s in view.items] == ["DevOps"]
    assert services.list_public()[0]["title"] == "DevOps"


def test_bad_login_keeps_gate_signed_out(gate: AuthGate) -> None:
    with pytest.raises(AuthorizationError, match="Invalid credentials"):
        gate.login("admin@housemajor.rw", "wrong")
    assert not gate.is_authenticated()


def test_stale_token_is_cleared_on_401(gate: AuthGate) -> None:
    gate.store.set("authToken", "stale")
    assert gate.is_authenticated()
    with pytest.raises(AuthorizationError):
        ServicesClient(gate.api).list()
    assert not gate.is_authenticated()


def test_logout_clears_credentials(gate: AuthGate) -> None:
    gate.login("admin@housemajor.rw", "secret123")
    gate.logout()
    assert gate.get_token() is None
    assert gate.get_user_email() is None


def test_multipart_uploads_through_client(gate: AuthGate) -> None:
    gate.login("admin@housemajor.rw", "secret123")
    png = FileUpload("shot.png", b"\x89PNG\r\n\x1a\nfake", "image/png")

    project = ProjectsClient(gate.api).create_with_images(
        {
            "title": "Umuganda",
            "description": "Community",
            "category": "Web App",
            "date": "2023",
            "tags": ["React"],
            "client": {"name": "City of Kigali"},
        },
        [png],
    )
    assert project["tags"] == ["React"]
    assert project["client"]["name"] == "City of Kigali"
    assert len(project["images"]) == 1

    member = TeamClient(gate.api).create_with_photo({"name": "Eric", "role": "CTO"}, png)
    updated = TeamClient(gate.api).update(member["id"], {"role": "CEO"})
    assert updated["role"] == "CEO"
    assert updated["image"] == member["image"]


def test_public_submissions_need_no_login(gate: AuthGate) -> None:
    application = ApplicationsClient(gate.api).submit(
        {"fullName": "Ada", "email": "ada@example.com", "careerId": None},
        FileUpload("cv.pdf", b"%PDF-1.4", "application/pdf"),
    )
    assert application["jobTitle"] == "General Application"

    contact = ContactsClient(gate.api).submit(
        {"name": "Ada", "email": "ada@example.com", "message": "Hi"}
    )
    assert contact["name"] == "Ada"

    with pytest.raises(ApiError) as excinfo:
        ApplicationsClient(gate.api).submit({"fullName": "Ada", "email": "ada@example.com", "careerId": 42})
    assert excinfo.value.status_code == 404


def test_application_fetched_by_id(gate: AuthGate) -> None:
    applications = ApplicationsClient(gate.api)
    submitted = applications.submit(
        {"fullName": "Ada", "email": "ada@example.com", "careerId": None},
        FileUpload("cv.pdf", b"%PDF-1.4", "application/pdf"),
    )
    gate.login("admin@housemajor.rw", "secret123")

    fetched = applications.get_by_id(submitted["id"])
    assert fetched["email"] == "ada@example.com"
    assert fetched["status"] == "Pending"

    with pytest.raises(ApiError) as excinfo:
        applications.get_by_id(999)
    assert excinfo.value.status_code == 404
