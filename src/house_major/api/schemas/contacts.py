"""Pydantic schemas for contact message endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from house_major.api.schemas.common import CamelModel


class ContactResponse(CamelModel):
    id: int
    name: str
    email: str
    message: str
    created_at: datetime


class ContactCreateRequest(CamelModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    message: str = Field(..., min_length=1)
