"""Pydantic schemas for investment endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from house_major.api.schemas.common import CamelModel


class InvestmentResponse(CamelModel):
    id: int
    title: str
    description: str
    email: str | None = None
    image: str | None = None
    created_at: datetime


class InvestmentCreateRequest(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    email: str | None = None
    image: str | None = None


class InvestmentUpdateRequest(CamelModel):
    title: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    email: str | None = None
    image: str | None = None


class InvestmentInquiryRequest(CamelModel):
    """Public inquiry form; the stored title is derived from the nature."""

    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    investment_nature: str = Field(..., min_length=1, description="e.g. Angel Investment")
    message: str | None = None
