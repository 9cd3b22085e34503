from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from house_major.client.base import (
    TOKEN_KEY,
    ApiClient,
    ApiError,
    AuthorizationError,
    FileUpload,
    encode_multipart_fields,
    unwrap,
)
from house_major.client.resources import (
    AdminUsersClient,
    ApplicationsClient,
    ProjectsClient,
    ServicesClient,
    TeamClient,
)


class FakeResponse:
    def __init__(self, status_code: int, body: Any = None) -> None:
        self.status_code = status_code
        self._body = body

    def json(self) -> Any:
        if self._body is None:
            raise ValueError("No JSON body")
        return self._body


class FakeSession:
    def __init__(self, *responses: FakeResponse) -> None:
        self.responses = list(responses)
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append((method, url, kwargs))
        return self.responses.pop(0)


class DictStore:
    def __init__(self, **values: Any) -> None:
        self.values = dict(values)

    def get(self, key: str) -> Any:
        return self.values.get(key)

    def remove(self, key: str) -> None:
        self.values.pop(key, None)


def _api(session: FakeSession, token: str | None = "tok") -> tuple[ApiClient, DictStore]:
    store = DictStore(**({TOKEN_KEY: token} if token else {}))
    return ApiClient("http://api.test/", token_store=store, session=session), store


def test_unwrap_handles_raw_and_enveloped_bodies() -> None:
    assert unwrap([1, 2]) == [1, 2]
    assert unwrap({"id": 1}) == {"id": 1}
    assert unwrap({"status": "success", "message": "ok", "data": {"id": 3}}) == {"id": 3}
    assert unwrap({"status": "success", "data": {"users": [{"id": 1}]}}) == {"users": [{"id": 1}]}
    assert unwrap({"status": "success", "message": "Deleted"}) is None


def test_encode_multipart_fields() -> None:
    encoded = encode_multipart_fields({"title": "X", "tags": ["a"], "client": {"name": "c"}, "bio": None, "n": 3})
    assert encoded == {
        "title": "X",
        "tags": json.dumps(["a"]),
        "client": json.dumps({"name": "c"}),
        "bio": "",
        "n": "3",
    }


def test_protected_call_without_token_never_hits_network() -> None:
    session = FakeSession()
    api, _ = _api(session, token=None)
    with pytest.raises(AuthorizationError):
        ServicesClient(api).list()
    assert session.calls == []


def test_bearer_header_and_url() -> None:
    session = FakeSession(FakeResponse(200, [{"id": 1}]))
    api, _ = _api(session)
    assert ServicesClient(api).list() == [{"id": 1}]
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("GET", "http://api.test/services")
    assert kwargs["headers"] == {"Authorization": "Bearer tok"}


def test_public_reads_send_no_token() -> None:
    session = FakeSession(FakeResponse(200, []))
    api, _ = _api(session, token=None)
    assert ProjectsClient(api).list() == []
    assert session.calls[0][2]["headers"] == {}


def test_401_clears_token() -> None:
    session = FakeSession(FakeResponse(401, {"status": "error", "message": "Invalid or expired token"}))
    api, store = _api(session)
    with pytest.raises(AuthorizationError) as excinfo:
        ServicesClient(api).list()
    assert excinfo.value.message == "Invalid or expired token"
    assert store.get(TOKEN_KEY) is None


def test_error_status_uses_server_message_or_fallback() -> None:
    session = FakeSession(
        FakeResponse(404, {"status": "error", "message": "Service not found"}),
        FakeResponse(500),
    )
    api, _ = _api(session)
    client = ServicesClient(api)
    with pytest.raises(ApiError, match="Service not found") as excinfo:
        client.get_by_id(9)
    assert excinfo.value.status_code == 404
    with pytest.raises(ApiError, match="Failed to delete service"):
        client.remove(9)


def test_error_envelope_with_2xx_status_raises() -> None:
    session = FakeSession(FakeResponse(200, {"status": "error", "message": "Nope"}))
    api, _ = _api(session)
    with pytest.raises(ApiError, match="Nope"):
        ServicesClient(api).create({"title": "x"})


def test_network_failure_becomes_api_error() -> None:
    class BrokenSession:
        def request(self, method: str, url: str, **kwargs: Any) -> None:
            raise requests.ConnectionError("refused")

    api = ApiClient("http://api.test", token_store=DictStore(**{TOKEN_KEY: "t"}), session=BrokenSession())
    with pytest.raises(ApiError, match="Network error"):
        ServicesClient(api).list()


def test_project_upload_is_multipart_with_timeout() -> None:
    session = FakeSession(FakeResponse(201, {"status": "success", "message": "ok", "data": {"id": 5}}))
    api, _ = _api(session)
    image = FileUpload("a.png", b"png", "image/png")
    result = ProjectsClient(api).create_with_images(
        {"title": "T", "tags": ["x"], "images": ["ignored"]}, [image]
    )
    assert result == {"id": 5}
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("POST", "http://api.test/projects/upload")
    assert kwargs["data"] == {"title": "T", "tags": '["x"]'}
    assert kwargs["files"] == [("images", ("a.png", b"png", "image/png"))]
    assert kwargs["timeout"] == 120


def test_application_submit_switches_to_multipart_with_resume() -> None:
    session = FakeSession(FakeResponse(201, {"status": "success", "data": {"id": 1}}), FakeResponse(201, {"status": "success", "data": {"id": 2}}))
    api, _ = _api(session, token=None)
    client = ApplicationsClient(api)

    client.submit({"fullName": "Ada", "email": "a@b.c"})
    client.submit({"fullName": "Ada", "email": "a@b.c"}, FileUpload("cv.pdf", b"%PDF", "application/pdf"))

    assert session.calls[0][1] == "http://api.test/applications"
    assert session.calls[0][2]["json"] == {"fullName": "Ada", "email": "a@b.c"}
    assert session.calls[1][1] == "http://api.test/upload-application"
    assert session.calls[1][2]["files"][0][0] == "resume"


def test_team_update_is_multipart_without_photo() -> None:
    session = FakeSession(FakeResponse(200, {"status": "success", "data": {"id": 1}}))
    api, _ = _api(session)
    TeamClient(api).update(1, {"name": "Eric", "image": "/uploads/team/x.png"})
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("PUT", "http://api.test/team/1")
    assert kwargs["data"] == {"name": "Eric"}
    assert kwargs["files"] == []


def test_admin_users_list_reads_users_key() -> None:
    body = {"status": "success", "data": {"users": [{"id": 1}, {"id": 2, "email": "g@h.rw"}]}}
    session = FakeSession(FakeResponse(200, body))
    api, _ = _api(session)
    assert AdminUsersClient(api).list() == [{"id": 1}, {"id": 2, "email": "g@h.rw"}]
    assert session.calls[0][:2] == ("GET", "http://api.test/auth/admin/users")


def test_admin_users_get_by_id_searches_list() -> None:
    body = {"status": "success", "data": {"users": [{"id": 1}, {"id": 2, "email": "g@h.rw"}]}}
    session = FakeSession(FakeResponse(200, body), FakeResponse(200, body))
    api, _ = _api(session)
    client = AdminUsersClient(api)
    assert client.get_by_id(2)["email"] == "g@h.rw"
    with pytest.raises(ApiError) as excinfo:
        client.get_by_id(7)
    assert excinfo.value.status_code == 404


def test_admin_users_client_has_no_update() -> None:
    api, _ = _api(FakeSession())
    assert not hasattr(AdminUsersClient(api), "update")


def test_file_upload_from_path_guesses_type(tmp_path) -> None:
    (tmp_path / "shot.png").write_bytes(b"\x89PNG")
    (tmp_path / "blob.hm").write_bytes(b"\x00\x01")

    upload = FileUpload.from_path(tmp_path / "shot.png")
    assert upload.filename == "shot.png"
    assert upload.content == b"\x89PNG"
    assert upload.content_type == "image/png"
    assert upload.size == 4
    assert FileUpload.from_path(str(tmp_path / "blob.hm")).content_type == "application/octet-stream"


def test_file_upload_from_missing_path_raises(tmp_path) -> None:
    with pytest.raises(OSError):
        FileUpload.from_path(tmp_path / "gone.pdf")
