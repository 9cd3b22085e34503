"""HTTP plumbing shared by every resource client.

Responses come back either as raw JSON arrays/records or wrapped in the
``{status, message, data}`` envelope; :meth:`ApiClient.request` normalizes
both so callers only ever see the payload or an :class:`ApiError`.
"""

from __future__ import annotations

import json
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

import requests

from house_major.config import UPLOAD_TIMEOUT_SECONDS, get_api_url

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)

TOKEN_KEY = "authToken"
EMAIL_KEY = "userEmail"


class TokenStore(Protocol):
    def get(self, key: str) -> Any: ...

    def remove(self, key: str) -> None: ...


class ApiError(Exception):
    """A failed call, carrying the server's message when it sent one."""

    def __init__(self, message: str, status_code: int | None = None, payload: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


class AuthorizationError(ApiError):
    """No usable bearer token, or the server refused the one we sent."""


@dataclass(frozen=True)
class FileUpload:
    """A file to send as one multipart part."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    def from_path(cls, path: str | Path) -> FileUpload:
        """Read a local file, guessing its content type from the name.

        Raises:
            OSError: If the file cannot be read.
        """
        file_path = Path(path).expanduser()
        content_type = mimetypes.guess_type(file_path.name)[0] or "application/octet-stream"
        return cls(file_path.name, file_path.read_bytes(), content_type)


def _error_message(body: Any, fallback: str) -> str:
    if isinstance(body, dict):
        for key in ("message", "detail", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return fallback


def unwrap(body: Any) -> Any:
    """Strip the envelope, if any, from a successful response body.

    A raw list or record is returned as is; an envelope yields its ``data``.
    """
    if isinstance(body, dict) and "status" in body and ("data" in body or "message" in body):
        return body.get("data")
    return body


def encode_multipart_fields(fields: Mapping[str, Any]) -> dict[str, str]:
    """Render form fields as text parts; lists and dicts are JSON-encoded.

    None is sent as an empty part so a cleared field is cleared on the server.
    """
    encoded: dict[str, str] = {}
    for name, value in fields.items():
        if value is None:
            encoded[name] = ""
        elif isinstance(value, (list, dict)):
            encoded[name] = json.dumps(value)
        else:
            encoded[name] = str(value)
    return encoded


class ApiClient:
    """Thin wrapper over a ``requests.Session`` pointed at the API.

    The bearer token is read from ``token_store`` on every authenticated call,
    so a token cleared elsewhere is seen on the very next request.
    """

    def __init__(
        self,
        base_url: str | None = None,
        token_store: TokenStore | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = (base_url or get_api_url()).rstrip("/")
        self.token_store = token_store
        self.session = session or requests.Session()

    def _auth_headers(self) -> dict[str, str]:
        token = self.token_store.get(TOKEN_KEY) if self.token_store is not None else None
        if not token:
            raise AuthorizationError("You must be logged in to perform this action", 401)
        return {"Authorization": f"Bearer {token}"}

    def request(
        self,
        method: str,
        path: str,
        *,
        auth: bool = False,
        json_body: Any = None,
        fields: Mapping[str, Any] | None = None,
        files: Sequence[tuple[str, FileUpload]] | None = None,
        fallback_error: str = "Request failed",
    ) -> Any:
        """Issue one request and return the unwrapped payload.

        Raises:
            AuthorizationError: Before sending, when ``auth`` is set and no token
                is stored; after, on a 401 (the stored token is then cleared).
            ApiError: On transport failure or any other non-2xx response.
        """
        headers = self._auth_headers() if auth else {}
        kwargs: dict[str, Any] = {"headers": headers}
        if fields is not None or files is not None:
            kwargs["data"] = encode_multipart_fields(fields or {})
            kwargs["files"] = [
                (name, (upload.filename, upload.content, upload.content_type))
                for name, upload in files or ()
            ]
            kwargs["timeout"] = UPLOAD_TIMEOUT_SECONDS
        elif json_body is not None:
            kwargs["json"] = json_body

        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiError(f"Network error: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.status_code >= 400:
            message = _error_message(body, fallback_error)
            if response.status_code == 401:
                if self.token_store is not None:
                    self.token_store.remove(TOKEN_KEY)
                raise AuthorizationError(message, response.status_code, body)
            raise ApiError(message, response.status_code, body)

        if isinstance(body, dict) and body.get("status") == "error":
            raise ApiError(_error_message(body, fallback_error), response.status_code, body)
        return unwrap(body)
