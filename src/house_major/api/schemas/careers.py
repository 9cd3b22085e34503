"""Pydantic schemas for job opening endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from house_major.api.schemas.common import CamelModel


class CareerResponse(CamelModel):
    id: int
    title: str
    department: str
    type: str
    location: str
    salary: str | None = None
    experience: str | None = None
    posted: str | None = None
    description: str
    requirements: list[str] = Field(default_factory=list)
    responsibilities: list[str] = Field(default_factory=list)
    application_count: int | None = Field(None, description="Present on list responses only")
    created_at: datetime


class CareerCreateRequest(CamelModel):
    title: str = Field(..., min_length=1)
    department: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, description="Employment type, e.g. Full-time")
    location: str = Field(..., min_length=1)
    salary: str | None = None
    experience: str | None = None
    posted: str | None = None
    description: str = Field(..., min_length=1)
    requirements: list[str] = Field(default_factory=list)
    responsibilities: list[str] = Field(default_factory=list)


class CareerUpdateRequest(CamelModel):
    title: str | None = Field(None, min_length=1)
    department: str | None = Field(None, min_length=1)
    type: str | None = Field(None, min_length=1)
    location: str | None = Field(None, min_length=1)
    salary: str | None = None
    experience: str | None = None
    posted: str | None = None
    description: str | None = Field(None, min_length=1)
    requirements: list[str] | None = None
    responsibilities: list[str] | None = None
