"""Profile screen: the signed-in admin's account and the admin-user list."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from house_major.client.auth import AuthGate
from house_major.client.base import ApiError
from house_major.client.resources import AdminUsersClient
from house_major.dashboard.action_menu import ActionItem, ActionMenu
from house_major.dashboard.listing import ListState, PageView

logger = logging.getLogger(__name__)

ADMIN_USERS_PAGE_SIZE = 10
ADMIN_USER_ACTIONS = (ActionItem.DELETE,)


class ProfileScreen:
    def __init__(
        self,
        gate: AuthGate,
        users: AdminUsersClient,
        confirm: Callable[[str], bool],
    ) -> None:
        self.gate = gate
        self.users_client = users
        self.confirm = confirm
        self.users: list[dict[str, Any]] = []
        self.list_state = ListState(page_size=ADMIN_USERS_PAGE_SIZE, fields=("username", "email"))
        self.menu = ActionMenu(ADMIN_USER_ACTIONS)
        self.message: str | None = None
        self.error: str | None = None
        self.loading = False
        self.mounted = False
        self.dark_mode = False
        self._generation = 0

    def mount(self, load: bool = True) -> None:
        self.mounted = True
        if load:
            self.load()

    def unmount(self) -> None:
        self.mounted = False
        self.menu.close_all()

    def _fail(self, message: str) -> bool:
        self.error = message
        self.message = None
        return False

    def _succeed(self, message: str) -> bool:
        self.message = message
        self.error = None
        return True

    # Admin-user list -----------------------------------------------------

    def begin_load(self) -> int:
        self._generation += 1
        self.loading = True
        return self._generation

    def fetch(self) -> list[dict[str, Any]]:
        return self.users_client.list()

    def finish_load(
        self,
        generation: int,
        users: list[dict[str, Any]] | None = None,
        error: str | None = None,
    ) -> bool:
        if not self.mounted or generation != self._generation:
            return False
        self.loading = False
        if error is not None:
            self._fail(error)
            return True
        self.users = list(users or [])
        self.list_state.clamp(self.users)
        return True

    def load(self) -> None:
        generation = self.begin_load()
        try:
            users = self.fetch()
        except ApiError as exc:
            self.finish_load(generation, error=exc.message or "Failed to load users")
            return
        self.finish_load(generation, users)

    def current_view(self) -> PageView[dict[str, Any]]:
        return self.list_state.view(self.users)

    def search(self, query: str) -> None:
        self.list_state.set_query(query)
        self.menu.close_all()

    def next_page(self) -> None:
        self.list_state.next_page(self.users)
        self.menu.close_all()

    def previous_page(self) -> None:
        self.list_state.previous_page()
        self.menu.close_all()

    # Account -------------------------------------------------------------

    def update_profile(
        self,
        *,
        username: str = "",
        email: str = "",
        current_password: str = "",
        new_password: str = "",
        confirm_password: str = "",
    ) -> bool:
        if new_password and new_password != confirm_password:
            return self._fail("New passwords do not match")
        if new_password and not current_password:
            return self._fail("Current password is required to set a new password")
        try:
            self.gate.update_profile(
                username=username or None,
                email=email or None,
                current_password=current_password or None,
                new_password=new_password or None,
            )
        except ApiError as exc:
            return self._fail(exc.message or "Failed to update profile")
        return self._succeed("Profile updated successfully!")

    def create_user(self, username: str, email: str, password: str, confirm_password: str) -> bool:
        if password != confirm_password:
            return self._fail("Passwords do not match")
        try:
            self.users_client.create({"username": username, "email": email, "password": password})
        except ApiError as exc:
            return self._fail(exc.message or "Failed to create user")
        self.load()
        return self._succeed("User created successfully!")

    # Row actions ---------------------------------------------------------

    def destructive_operation(
        self, row_id: int, action: ActionItem
    ) -> tuple[str, Callable[[], Any], str]:
        """Prompt, client call and fallback error for deleting ``row_id``.

        Raises:
            ValueError: For any action other than delete, or for the signed-in
                admin's own account.
        """
        if action is not ActionItem.DELETE:
            raise ValueError(f"Action {action!s} is not available here")
        user = next((u for u in self.users if u.get("id") == row_id), None)
        if user is not None and user.get("email") == self.gate.get_user_email():
            raise ValueError("You cannot delete your own account.")
        return (
            "Are you sure you want to delete this user? This action cannot be undone.",
            lambda: self.users_client.remove(row_id),
            "Failed to delete user",
        )

    def mutation_failed(self, fallback: str, exc: ApiError) -> None:
        logger.warning("%s: %s", fallback, exc.message)
        self._fail(exc.message or fallback)

    def mutation_succeeded(self) -> None:
        self._succeed("User deleted successfully!")

    def perform(self, row_id: int, action: ActionItem) -> bool:
        """Run a row action chosen from the admin-user action menu."""
        self.menu.select(row_id, action)
        try:
            prompt, operation, fallback = self.destructive_operation(row_id, action)
        except ValueError as exc:
            return self._fail(str(exc))
        if not self.confirm(prompt):
            return False
        try:
            operation()
        except ApiError as exc:
            self.mutation_failed(fallback, exc)
            return False
        self.mutation_succeeded()
        self.load()
        return True

    def delete_user(self, user_id: int) -> bool:
        return self.perform(user_id, ActionItem.DELETE)
