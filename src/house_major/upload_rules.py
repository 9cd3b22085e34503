"""Type and size rules for uploaded files.

Shared by the API (which enforces them) and the dashboard/public forms
(which check them before anything is sent).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

MB = 1024 * 1024


@dataclass(frozen=True)
class UploadRule:
    """What a single uploaded file may look like."""

    label: str
    max_bytes: int
    mime_prefix: str | None = None
    mime_types: tuple[str, ...] = ()
    extensions: tuple[str, ...] = ()
    type_message: str = "Invalid file type."

    def accepts_type(self, filename: str, content_type: str | None) -> bool:
        content_type = (content_type or "").lower()
        if self.mime_prefix and content_type.startswith(self.mime_prefix):
            return True
        if content_type in self.mime_types:
            return True
        # Browsers sometimes send application/octet-stream for PDFs.
        if not content_type or content_type == "application/octet-stream":
            return PurePath(filename).suffix.lower() in self.extensions
        return False


RESUME_RULE = UploadRule(
    label="resume",
    max_bytes=5 * MB,
    mime_types=("application/pdf",),
    extensions=(".pdf",),
    type_message="Please upload a PDF file",
)

PROFILE_PHOTO_RULE = UploadRule(
    label="profile photo",
    max_bytes=3 * MB,
    mime_prefix="image/",
    extensions=(".png", ".jpg", ".jpeg", ".gif", ".webp"),
    type_message="Invalid file type. Only images allowed.",
)

PROJECT_IMAGE_RULE = UploadRule(
    label="project image",
    max_bytes=10 * MB,
    mime_prefix="image/",
    extensions=(".png", ".jpg", ".jpeg", ".gif", ".webp"),
    type_message="Invalid file type. Only images allowed.",
)

MAX_PROJECT_IMAGES = 10


def check_upload(rule: UploadRule, filename: str, content_type: str | None, size: int) -> str | None:
    """Validate one file against a rule.

    Returns:
        Error message if the file is rejected, None if it is acceptable.
    """
    if not rule.accepts_type(filename, content_type):
        return rule.type_message
    if size > rule.max_bytes:
        return f"File size must be less than {rule.max_bytes // MB}MB"
    return None
