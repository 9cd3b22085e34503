from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from house_major.client.auth import AuthGate, LocalStore
from house_major.client.base import EMAIL_KEY, TOKEN_KEY, ApiClient, ApiError


class ScriptedSession:
    """Answers each request with the next (status, body) pair."""

    def __init__(self, *replies: tuple[int, Any]) -> None:
        self.replies = list(replies)
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> Any:
        self.calls.append((method, url, kwargs))
        status, body = self.replies.pop(0)

        class Reply:
            status_code = status

            def json(self) -> Any:
                return body

        return Reply()


def _gate(tmp_path: Path, *replies: tuple[int, Any]) -> tuple[AuthGate, ScriptedSession]:
    store = LocalStore(tmp_path / "storage.json")
    session = ScriptedSession(*replies)
    return AuthGate(ApiClient("http://api.test", token_store=store, session=session), store), session


def test_local_store_persists_to_disk(tmp_path: Path) -> None:
    store = LocalStore(tmp_path / "storage.json")
    store.set("authToken", "abc")
    assert json.loads((tmp_path / "storage.json").read_text()) == {"authToken": "abc"}
    assert LocalStore(tmp_path / "storage.json").get("authToken") == "abc"

    store.remove("authToken")
    assert store.get("authToken") is None


def test_corrupt_store_reads_empty(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("{not json")
    assert LocalStore(path).get("authToken") is None


def test_subscribe_and_unsubscribe(tmp_path: Path) -> None:
    store = LocalStore(tmp_path / "storage.json")
    seen: list[tuple[str, Any]] = []
    unsubscribe = store.subscribe(lambda key, value: seen.append((key, value)))
    store.set("a", 1)
    unsubscribe()
    store.set("b", 2)
    assert seen == [("a", 1)]


def test_sync_reports_changes_from_another_process(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    mine = LocalStore(path)
    theirs = LocalStore(path)
    seen: list[str] = []
    mine.subscribe(lambda key, value: seen.append(key))

    theirs.set(TOKEN_KEY, "tok")
    assert mine.sync() == [TOKEN_KEY]
    assert seen == [TOKEN_KEY]
    assert mine.sync() == []


def test_login_stores_token_and_email(tmp_path: Path) -> None:
    gate, session = _gate(
        tmp_path,
        (200, {"status": "success", "message": "ok", "data": {"token": "tok", "user": {"email": "ada@x.rw"}}}),
    )
    changes: list[bool] = []
    gate.on_change(changes.append)

    assert gate.login("ada@x.rw", "secret") == {"token": "tok"}
    assert gate.is_authenticated()
    assert gate.get_token() == "tok"
    assert gate.get_user_email() == "ada@x.rw"
    assert changes == [True]
    assert session.calls[0][2]["json"] == {"email": "ada@x.rw", "password": "secret"}


def test_failed_login_stores_nothing(tmp_path: Path) -> None:
    gate, _ = _gate(tmp_path, (401, {"status": "error", "message": "Invalid credentials"}))
    with pytest.raises(ApiError, match="Invalid credentials"):
        gate.login("ada@x.rw", "bad")
    assert not gate.is_authenticated()


def test_logout_clears_even_when_server_fails(tmp_path: Path) -> None:
    gate, _ = _gate(tmp_path, (500, {"status": "error", "message": "down"}))
    gate.store.set(TOKEN_KEY, "tok")
    gate.store.set(EMAIL_KEY, "ada@x.rw")
    changes: list[bool] = []
    gate.on_change(changes.append)

    gate.logout()
    assert gate.get_token() is None
    assert gate.get_user_email() is None
    assert changes == [False]


def test_reset_password_sends_camel_case(tmp_path: Path) -> None:
    gate, session = _gate(tmp_path, (200, {"status": "success", "message": "ok"}))
    gate.reset_password("ada@x.rw", "123456", "newsecret")
    assert session.calls[0][2]["json"] == {
        "email": "ada@x.rw",
        "token": "123456",
        "newPassword": "newsecret",
    }


def test_update_profile_refreshes_stored_email(tmp_path: Path) -> None:
    gate, session = _gate(
        tmp_path,
        (200, {"status": "success", "message": "ok", "data": {"id": 1, "email": "new@x.rw"}}),
    )
    gate.store.set(TOKEN_KEY, "tok")
    gate.update_profile(email="new@x.rw")
    assert gate.get_user_email() == "new@x.rw"
    assert session.calls[0][2]["json"] == {"email": "new@x.rw"}
    assert session.calls[0][2]["headers"] == {"Authorization": "Bearer tok"}


def test_request_login_stores_nothing_until_stored(tmp_path: Path) -> None:
    gate, _ = _gate(
        tmp_path,
        (200, {"status": "success", "message": "ok", "data": {"token": "tok", "user": {"email": "ada@x.rw"}}}),
    )
    changes: list[bool] = []
    gate.on_change(changes.append)

    data = gate.request_login("ada@x.rw", "secret")
    assert not gate.is_authenticated()
    assert changes == []

    assert gate.store_login("ada@x.rw", data) == {"token": "tok"}
    assert gate.get_user_email() == "ada@x.rw"
    assert changes == [True]
