"""Shared Pydantic schemas for API responses."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON while keeping snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Envelope(BaseModel, Generic[T]):
    """The ``{status, message, data}`` wrapper used by mutations and auth."""

    status: str = Field("success", description="'success' or 'error'")
    message: str = Field(..., description="Human-readable outcome")
    data: T | None = Field(None, description="Payload, if any")


class ErrorResponse(BaseModel):
    """Body of every error response."""

    status: str = "error"
    message: str
    details: list[dict[str, Any]] | None = None
