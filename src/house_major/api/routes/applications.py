"""Job application routes.

Submitting is public (JSON or multipart with a PDF resume); reviewing is
admin-only.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, Path, UploadFile, status

from house_major.api.dependencies import get_current_user
from house_major.api.routes.uploads import is_present, store_checked_upload
from house_major.api.schemas.applications import ApplicationCreateRequest, ApplicationResponse
from house_major.api.schemas.common import Envelope
from house_major.data.models import ApplicationStatus
from house_major.services.applications import (
    create_application,
    delete_application,
    get_application,
    list_applications,
    set_application_status,
)
from house_major.services.errors import CareerNotFoundError
from house_major.services.upload_storage import delete_upload
from house_major.upload_rules import RESUME_RULE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/applications", tags=["applications"])
upload_router = APIRouter(tags=["applications"])

ApplicationId = Annotated[int, Path(description="Application ID")]


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")


def _submit(data: dict) -> Envelope[ApplicationResponse]:
    try:
        result = create_application(data)
    except CareerNotFoundError as exc:
        if data.get("resume_url"):
            delete_upload(data["resume_url"])
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message) from exc
    return Envelope(
        message="Application submitted successfully", data=ApplicationResponse(**result)
    )


def _parse_career_id(raw: str | None) -> int | None:
    if raw is None or raw.strip().lower() in {"", "null", "undefined", "none"}:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid careerId"
        ) from exc


@router.post(
    "",
    response_model=Envelope[ApplicationResponse],
    status_code=status.HTTP_201_CREATED,
)
def submit(data: ApplicationCreateRequest) -> Envelope[ApplicationResponse]:
    """Submit an application; omit ``careerId`` for a general application."""
    return _submit(data.model_dump())


@upload_router.post(
    "/upload-application",
    response_model=Envelope[ApplicationResponse],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Resume is not a PDF or is too large"}},
)
async def submit_with_resume(
    full_name: Annotated[str, Form(alias="fullName", min_length=1)],
    email: Annotated[str, Form(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")],
    phone: Annotated[str | None, Form()] = None,
    cover_letter: Annotated[str | None, Form(alias="coverLetter")] = None,
    job_title: Annotated[str | None, Form(alias="jobTitle")] = None,
    career_id: Annotated[str | None, Form(alias="careerId")] = None,
    resume: Annotated[UploadFile | None, File(description="PDF resume, max 5MB")] = None,
) -> Envelope[ApplicationResponse]:
    data = {
        "full_name": full_name,
        "email": email,
        "phone": phone or None,
        "cover_letter": cover_letter or None,
        "job_title": job_title or None,
        "career_id": _parse_career_id(career_id),
        "resume_url": None,
    }
    if is_present(resume):
        data["resume_url"] = await store_checked_upload(resume, RESUME_RULE, "resumes")
    return _submit(data)


@router.get(
    "",
    response_model=list[ApplicationResponse],
    dependencies=[Depends(get_current_user)],
)
def list_all() -> list[ApplicationResponse]:
    return [ApplicationResponse(**a) for a in list_applications()]


@router.get(
    "/{application_id}",
    response_model=ApplicationResponse,
    dependencies=[Depends(get_current_user)],
)
def get_one(application_id: ApplicationId) -> ApplicationResponse:
    result = get_application(application_id)
    if result is None:
        raise _not_found()
    return ApplicationResponse(**result)


@router.put(
    "/{application_id}/accept",
    response_model=Envelope[ApplicationResponse],
    dependencies=[Depends(get_current_user)],
)
def accept(application_id: ApplicationId) -> Envelope[ApplicationResponse]:
    result = set_application_status(application_id, ApplicationStatus.ACCEPTED)
    if result is None:
        raise _not_found()
    return Envelope(message="Application accepted", data=ApplicationResponse(**result))


@router.put(
    "/{application_id}/reject",
    response_model=Envelope[ApplicationResponse],
    dependencies=[Depends(get_current_user)],
)
def reject(application_id: ApplicationId) -> Envelope[ApplicationResponse]:
    result = set_application_status(application_id, ApplicationStatus.REJECTED)
    if result is None:
        raise _not_found()
    return Envelope(message="Application rejected", data=ApplicationResponse(**result))


@router.delete(
    "/{application_id}",
    response_model=Envelope[None],
    dependencies=[Depends(get_current_user)],
)
def delete(application_id: ApplicationId) -> Envelope[None]:
    result = delete_application(application_id)
    if result is None:
        raise _not_found()
    delete_upload(result["resume_url"])
    return Envelope(message="Application deleted successfully")
