"""Pydantic schemas for team member endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from house_major.api.schemas.common import CamelModel


class TeamMemberResponse(CamelModel):
    id: int
    name: str
    role: str
    bio: str | None = None
    email: str | None = None
    linkedin: str | None = None
    github: str | None = None
    image: str | None = None
    created_at: datetime


class TeamMemberCreateRequest(CamelModel):
    name: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)
    bio: str | None = None
    email: str | None = None
    linkedin: str | None = None
    github: str | None = None
    image: str | None = None
