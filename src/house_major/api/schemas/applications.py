"""Pydantic schemas for job application endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from house_major.api.schemas.common import CamelModel
from house_major.data.models import ApplicationStatus


class ApplicationResponse(CamelModel):
    id: int
    full_name: str
    email: str
    phone: str | None = None
    cover_letter: str | None = None
    job_title: str | None = None
    career_id: int | None = None
    resume_url: str | None = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    created_at: datetime


class ApplicationCreateRequest(CamelModel):
    """JSON application. ``careerId`` of null submits a general application."""

    full_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str | None = None
    cover_letter: str | None = None
    job_title: str | None = None
    career_id: int | None = None
    resume_url: str | None = None
