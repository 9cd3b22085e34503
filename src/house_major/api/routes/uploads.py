"""Stored-object routes and helpers for validating multipart files."""

from __future__ import annotations

import logging
import mimetypes
from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, UploadFile, status
from fastapi.responses import FileResponse

from house_major.services.upload_storage import resolve_upload_path, store_upload
from house_major.upload_rules import UploadRule, check_upload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/uploads", tags=["uploads"])


async def read_checked_upload(upload: UploadFile, rule: UploadRule) -> bytes:
    """Read an uploaded file, enforcing the type and size rule.

    Raises:
        HTTPException: 400 with the rule's message when the file is rejected.
    """
    data = await upload.read()
    error = check_upload(rule, upload.filename or "", upload.content_type, len(data))
    if error:
        logger.warning("Rejected %s upload %r: %s", rule.label, upload.filename, error)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    return data


async def store_checked_upload(upload: UploadFile, rule: UploadRule, folder: str) -> str:
    """Validate and persist one file, returning its public URL."""
    data = await read_checked_upload(upload, rule)
    return store_upload(folder, upload.filename or "file", data)


def is_present(upload: UploadFile | None) -> bool:
    """Browsers send an empty part when a file input is left blank."""
    return upload is not None and bool(upload.filename)


@router.get(
    "/{folder}/{filename}",
    summary="Download a stored file",
    responses={404: {"description": "File not found"}},
)
def get_upload(
    folder: Annotated[str, Path(description="Storage folder (projects, resumes, team)")],
    filename: Annotated[str, Path(description="Stored file name")],
) -> FileResponse:
    path = resolve_upload_path(folder, filename)
    if path is None or not path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")
    media_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    return FileResponse(path, media_type=media_type)
