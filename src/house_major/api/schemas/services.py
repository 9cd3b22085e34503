"""Pydantic schemas for service endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from house_major.api.schemas.common import CamelModel
from house_major.icons import ServiceIcon


class ServiceResponse(CamelModel):
    id: int
    title: str
    description: str
    icon: str
    image: str | None = None
    created_at: datetime


class PublicServiceResponse(CamelModel):
    """Slim listing consumed by the public services section."""

    id: int
    title: str
    description: str
    icon: str


class ServiceCreateRequest(CamelModel):
    title: str = Field(..., min_length=1, description="Service name")
    description: str = Field(..., min_length=1, description="Marketing description")
    icon: ServiceIcon = Field(..., description="Icon registry name, e.g. MegaphoneIcon")
    image: str | None = Field(None, description="Optional illustration URL")


class ServiceUpdateRequest(CamelModel):
    """All fields optional; only provided fields are updated."""

    title: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    icon: ServiceIcon | None = None
    image: str | None = None
