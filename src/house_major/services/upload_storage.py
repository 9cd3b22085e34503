"""Object storage facade backed by a local directory.

Callers only see ``store_upload(...) -> url`` and ``delete_upload(url)``;
URLs are served back by the ``/uploads`` route.
"""

from __future__ import annotations

import logging
import re
import uuid
from pathlib import Path

from house_major.config import get_upload_root

logger = logging.getLogger(__name__)

URL_PREFIX = "/uploads"

_SAFE_NAME = re.compile(r"[^A-Za-z0-9._-]+")
_FOLDERS = frozenset({"projects", "resumes", "team"})


def get_upload_storage_root() -> Path:
    """Return the root directory for stored objects."""
    return get_upload_root()


def _safe_filename(filename: str) -> str:
    name = _SAFE_NAME.sub("-", Path(filename or "file").name).strip("-.")
    return name or "file"


def resolve_upload_path(folder: str, name: str) -> Path | None:
    """Return the on-disk path for a stored object, or None if it is not addressable."""
    if folder not in _FOLDERS or Path(name).name != name:
        return None
    return get_upload_storage_root() / folder / name


def store_upload(folder: str, filename: str, content: bytes) -> str:
    """Persist ``content`` and return the public URL for it."""
    if folder not in _FOLDERS:
        raise ValueError(f"Unknown upload folder: {folder}")
    stored_name = f"{uuid.uuid4().hex}-{_safe_filename(filename)}"
    target_path = get_upload_storage_root() / folder / stored_name
    target_path.parent.mkdir(parents=True, exist_ok=True)
    target_path.write_bytes(content)
    logger.info("Stored upload %s (%d bytes)", target_path.name, len(content))
    return f"{URL_PREFIX}/{folder}/{stored_name}"


def delete_upload(url: str | None) -> bool:
    """Remove a previously stored object; foreign URLs are ignored."""
    if not url or not url.startswith(f"{URL_PREFIX}/"):
        return False
    parts = url[len(URL_PREFIX) + 1 :].split("/")
    if len(parts) != 2:
        return False
    path = resolve_upload_path(parts[0], parts[1])
    if path is None or not path.exists():
        return False
    try:
        path.unlink()
    except OSError:
        logger.warning("Could not delete stored upload %s", url, exc_info=True)
        return False
    return True
