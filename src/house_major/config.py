"""Environment-driven settings.

The nearest `.env` file is loaded on import. Every value is resolved when it
is asked for, so tests (and long-running processes) can change the
environment without re-importing anything.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Secrets such as JWT_SECRET and SMTP_PASSWORD usually live in .env.
load_dotenv()

DEFAULT_JWT_SECRET = "house-major-dev-secret"
DEFAULT_JWT_EXPIRE_MINUTES = 60 * 24
DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_CONTACT_INBOX = "info@housemajor.rw"

# Multipart uploads are the only calls with a client-side timeout.
UPLOAD_TIMEOUT_SECONDS = 120

_PROJECT_ROOT = Path(__file__).resolve().parents[2]


def get_project_root() -> Path:
    """Return the repository root (two levels above the package)."""
    return _PROJECT_ROOT


def get_jwt_secret() -> str:
    return os.getenv("JWT_SECRET") or DEFAULT_JWT_SECRET


def get_jwt_expire_minutes() -> int:
    raw = os.getenv("JWT_EXPIRE_MINUTES")
    if not raw:
        return DEFAULT_JWT_EXPIRE_MINUTES
    try:
        return max(1, int(raw))
    except ValueError:
        return DEFAULT_JWT_EXPIRE_MINUTES


def get_upload_root() -> Path:
    """Return the directory backing the object storage facade."""
    env_root = os.getenv("HOUSE_MAJOR_UPLOAD_DIR")
    if env_root:
        return Path(env_root).expanduser().resolve()
    return _PROJECT_ROOT / ".house_major_uploads"


def get_state_dir() -> Path:
    """Return the directory holding the admin client's persisted local storage."""
    env_dir = os.getenv("HOUSE_MAJOR_STATE_DIR")
    if env_dir:
        return Path(env_dir).expanduser().resolve()
    return Path.home() / ".house_major"


def get_api_url() -> str:
    return (os.getenv("HOUSE_MAJOR_API_URL") or DEFAULT_API_URL).rstrip("/")


def get_cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_contact_inbox() -> str:
    return os.getenv("CONTACT_INBOX") or DEFAULT_CONTACT_INBOX


def get_smtp_settings() -> dict[str, str | int | bool] | None:
    """Return SMTP settings, or None when outgoing mail is not configured."""
    host = os.getenv("SMTP_HOST")
    if not host:
        return None
    try:
        port = int(os.getenv("SMTP_PORT", "587"))
    except ValueError:
        port = 587
    return {
        "host": host,
        "port": port,
        "user": os.getenv("SMTP_USER", ""),
        "password": os.getenv("SMTP_PASSWORD", ""),
        "use_tls": os.getenv("SMTP_USE_TLS", "1").lower() not in {"0", "false", "no"},
        "sender": os.getenv("SMTP_SENDER") or os.getenv("SMTP_USER") or "no-reply@housemajor.rw",
    }
