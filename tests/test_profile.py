from __future__ import annotations

from typing import Any

import pytest

from house_major.client.base import ApiError
from house_major.dashboard.action_menu import ActionItem
from house_major.dashboard.profile import ProfileScreen

from fakes import MemoryClient


class FakeGate:
    def __init__(self, email: str = "me@housemajor.rw") -> None:
        self.email = email
        self.updates: list[dict[str, Any]] = []
        self.fail_with: ApiError | None = None

    def get_user_email(self) -> str:
        return self.email

    def update_profile(self, **kwargs: Any) -> dict[str, Any]:
        if self.fail_with:
            raise self.fail_with
        self.updates.append(kwargs)
        return {"email": kwargs.get("email") or self.email}


def _screen(answer: bool = True) -> tuple[ProfileScreen, FakeGate, MemoryClient]:
    gate = FakeGate()
    users = MemoryClient(
        [
            {"id": 1, "username": "me", "email": "me@housemajor.rw"},
            {"id": 2, "username": "grace", "email": "grace@housemajor.rw"},
        ]
    )
    screen = ProfileScreen(gate, users, lambda prompt: answer)
    screen.mount()
    return screen, gate, users


def test_mount_lists_users() -> None:
    screen, _, _ = _screen()
    assert [u["username"] for u in screen.users] == ["me", "grace"]


def test_password_mismatch_is_caught_locally() -> None:
    screen, gate, _ = _screen()
    assert not screen.update_profile(new_password="abcdef", confirm_password="abcdeg")
    assert screen.error == "New passwords do not match"
    assert gate.updates == []


def test_new_password_needs_current_password() -> None:
    screen, gate, _ = _screen()
    assert not screen.update_profile(new_password="abcdef", confirm_password="abcdef")
    assert screen.error == "Current password is required to set a new password"
    assert gate.updates == []


def test_update_profile_success_and_server_error() -> None:
    screen, gate, _ = _screen()
    assert screen.update_profile(username="me2")
    assert gate.updates == [
        {"username": "me2", "email": None, "current_password": None, "new_password": None}
    ]
    assert screen.message == "Profile updated successfully!"

    gate.fail_with = ApiError("Current password incorrect", 400)
    assert not screen.update_profile(
        current_password="bad", new_password="abcdef", confirm_password="abcdef"
    )
    assert screen.error == "Current password incorrect"


def test_create_user_checks_confirmation() -> None:
    screen, _, users = _screen()
    assert not screen.create_user("bob", "bob@x.rw", "secret1", "secret2")
    assert screen.error == "Passwords do not match"
    assert users.calls == []

    assert screen.create_user("bob", "bob@x.rw", "secret1", "secret1")
    assert len(screen.users) == 3


def test_cannot_delete_self() -> None:
    screen, _, users = _screen()
    assert not screen.delete_user(1)
    assert screen.error == "You cannot delete your own account."
    assert users.calls == []


def test_delete_other_user_after_confirmation() -> None:
    screen, _, users = _screen(answer=False)
    assert not screen.delete_user(2)
    assert users.calls == []

    screen.confirm = lambda prompt: True
    assert screen.delete_user(2)
    assert users.calls == [("remove", 2)]
    assert [u["id"] for u in screen.users] == [1]
    assert screen.message == "User deleted successfully!"


def test_users_are_searchable_by_username_and_email() -> None:
    screen, _, _ = _screen()
    screen.search("GRACE")
    assert [u["id"] for u in screen.current_view().items] == [2]
    screen.search("me@housemajor")
    assert [u["id"] for u in screen.current_view().items] == [1]
    screen.search("")
    assert len(screen.current_view().items) == 2


def test_delete_is_the_only_row_action() -> None:
    screen, _, users = _screen()
    screen.menu.toggle(2)
    assert screen.menu.is_open(2)
    assert screen.perform(2, ActionItem.DELETE)
    assert not screen.menu.is_open(2)
    assert users.calls == [("remove", 2)]

    with pytest.raises(ValueError):
        screen.perform(1, ActionItem.EDIT)


def test_user_delete_failure_is_reported() -> None:
    screen, _, users = _screen()
    users.fail_with = ApiError("User not found", 404)
    assert not screen.delete_user(2)
    assert screen.error == "User not found"


def test_stale_user_list_is_discarded() -> None:
    screen, _, users = _screen()
    first = screen.begin_load()
    second = screen.begin_load()
    assert not screen.finish_load(first, [])
    assert screen.finish_load(second, users.list())
    assert len(screen.users) == 2
