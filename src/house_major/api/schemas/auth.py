"""Pydantic schemas for authentication and admin-user endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    created_at: datetime


class RegisterRequest(BaseModel):
    username: str = Field("", description="Display name; defaults to the email's local part")
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=6)


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginData(BaseModel):
    token: str
    user: UserResponse


class ForgotPasswordRequest(BaseModel):
    email: str = Field(..., min_length=1)


class ResetPasswordRequest(BaseModel):
    email: str = Field(..., min_length=1)
    token: str = Field(..., min_length=1, description="6-digit code sent by email")
    new_password: str = Field(..., min_length=6, alias="newPassword")

    model_config = ConfigDict(populate_by_name=True)


class ProfileUpdateRequest(BaseModel):
    username: str | None = None
    email: str | None = None
    current_password: str | None = Field(None, alias="currentPassword")
    new_password: str | None = Field(None, min_length=6, alias="newPassword")

    model_config = ConfigDict(populate_by_name=True)


class UserListData(BaseModel):
    users: list[UserResponse]
