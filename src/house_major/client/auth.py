"""Persistent local storage and the Auth Gate.

:class:`LocalStore` plays the part of browser local storage: a JSON file of
string keys, re-read on every access so another process's writes are seen.
:class:`AuthGate` keeps the bearer token and user email in it and never
checks the token's validity itself.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from house_major.client.base import EMAIL_KEY, TOKEN_KEY, ApiClient, ApiError
from house_major.config import get_state_dir

logger = logging.getLogger(__name__)

Listener = Callable[[str, Any], None]


class LocalStore:
    """Key/value store persisted to a single JSON file."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or (get_state_dir() / "local_storage.json")
        self._listeners: list[Listener] = []
        self._last_seen = self._read()

    def _read(self) -> dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring corrupt local storage at %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(".tmp")
        tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        os.replace(tmp_path, self.path)
        self._last_seen = dict(data)

    def _notify(self, key: str, value: Any) -> None:
        for listener in list(self._listeners):
            listener(key, value)

    def get(self, key: str) -> Any:
        return self._read().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)
        self._notify(key, value)

    def remove(self, key: str) -> None:
        data = self._read()
        if key not in data:
            return
        del data[key]
        self._write(data)
        self._notify(key, None)

    def clear(self) -> None:
        keys = list(self._read())
        self._write({})
        for key in keys:
            self._notify(key, None)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def sync(self) -> list[str]:
        """Notify listeners of keys another process changed since our last look.

        Returns:
            The changed keys.
        """
        current = self._read()
        changed = sorted(
            key
            for key in set(current) | set(self._last_seen)
            if current.get(key) != self._last_seen.get(key)
        )
        self._last_seen = dict(current)
        for key in changed:
            self._notify(key, current.get(key))
        return changed


class AuthGate:
    """Login state for the admin client.

    ``is_authenticated`` only checks that a token is stored. A stale token
    keeps reading as authenticated until a protected call answers 401, at
    which point :class:`ApiClient` clears it.
    """

    def __init__(self, api: ApiClient, store: LocalStore) -> None:
        self.api = api
        self.store = store

    def request_login(self, email: str, password: str) -> dict[str, Any]:
        """Exchange credentials for a token without storing anything."""
        return self.api.request(
            "POST",
            "/auth/login",
            json_body={"email": email, "password": password},
            fallback_error="Login failed",
        )

    def store_login(self, email: str, data: dict[str, Any]) -> dict[str, Any]:
        token = data["token"]
        self.store.set(TOKEN_KEY, token)
        self.store.set(EMAIL_KEY, data.get("user", {}).get("email") or email)
        logger.info("Signed in as %s", email)
        return {"token": token}

    def login(self, email: str, password: str) -> dict[str, Any]:
        return self.store_login(email, self.request_login(email, password))

    def logout(self) -> None:
        """Clear local credentials, whatever the server says."""
        try:
            self.api.request("POST", "/auth/logout", fallback_error="Logout failed")
        except ApiError:
            logger.warning("Server logout failed; clearing local session anyway", exc_info=True)
        finally:
            self.store.remove(TOKEN_KEY)
            self.store.remove(EMAIL_KEY)

    def is_authenticated(self) -> bool:
        return bool(self.store.get(TOKEN_KEY))

    def get_token(self) -> str | None:
        return self.store.get(TOKEN_KEY)

    def get_user_email(self) -> str | None:
        return self.store.get(EMAIL_KEY)

    def on_change(self, callback: Callable[[bool], None]) -> Callable[[], None]:
        """Call ``callback(is_authenticated)`` whenever the stored token changes."""

        def listener(key: str, value: Any) -> None:
            if key == TOKEN_KEY:
                callback(bool(value))

        return self.store.subscribe(listener)

    def register(self, username: str, email: str, password: str) -> dict[str, Any]:
        return self.api.request(
            "POST",
            "/auth/register",
            json_body={"username": username, "email": email, "password": password},
            fallback_error="Registration failed",
        )

    def forgot_password(self, email: str) -> None:
        self.api.request(
            "POST",
            "/auth/forgot-password",
            json_body={"email": email},
            fallback_error="Failed to send reset email",
        )

    def reset_password(self, email: str, token: str, new_password: str) -> None:
        self.api.request(
            "POST",
            "/auth/reset-password",
            json_body={"email": email, "token": token, "newPassword": new_password},
            fallback_error="Failed to reset password",
        )

    def update_profile(
        self,
        *,
        username: str | None = None,
        email: str | None = None,
        current_password: str | None = None,
        new_password: str | None = None,
    ) -> dict[str, Any]:
        payload = {
            "username": username,
            "email": email,
            "currentPassword": current_password,
            "newPassword": new_password,
        }
        user = self.api.request(
            "POST",
            "/auth/profile",
            auth=True,
            json_body={k: v for k, v in payload.items() if v},
            fallback_error="Failed to update profile",
        )
        if user and user.get("email"):
            self.store.set(EMAIL_KEY, user["email"])
        return user
