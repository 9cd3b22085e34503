"""Authentication, profile and admin-user routes."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, status

from house_major.api.dependencies import CurrentUser
from house_major.api.schemas.auth import (
    ForgotPasswordRequest,
    LoginData,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    ResetPasswordRequest,
    UserListData,
    UserResponse,
)
from house_major.api.schemas.common import Envelope
from house_major.services.auth import (
    authenticate_user,
    create_access_token,
    create_user,
    delete_user,
    list_users,
    request_password_reset,
    reset_password,
    update_profile,
)
from house_major.services.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    MailDeliveryError,
    PasswordResetError,
    ProfileUpdateError,
    SelfDeletionError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _register(data: RegisterRequest) -> UserResponse:
    try:
        user = create_user(data.username, data.email, data.password)
    except DuplicateEmailError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc
    return UserResponse(**user)


@router.post(
    "/register",
    response_model=Envelope[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
def register(data: RegisterRequest) -> Envelope[UserResponse]:
    return Envelope(message="User registered successfully", data=_register(data))


@router.post("/login", response_model=Envelope[LoginData])
def login(data: LoginRequest) -> Envelope[LoginData]:
    try:
        user = authenticate_user(data.email, data.password)
    except InvalidCredentialsError as exc:
        logger.warning("Failed login for %s", data.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=exc.message) from exc
    token = create_access_token(user["id"], user["email"])
    return Envelope(
        message="Login successful",
        data=LoginData(token=token, user=UserResponse(**user)),
    )


@router.post("/logout", response_model=Envelope[None])
def logout() -> Envelope[None]:
    """Tokens are stateless; the client discards its copy."""
    return Envelope(message="Logged out successfully")


@router.post(
    "/forgot-password",
    response_model=Envelope[None],
    responses={404: {"description": "Email not found"}, 500: {"description": "Email failed"}},
)
def forgot_password(data: ForgotPasswordRequest) -> Envelope[None]:
    try:
        sent = request_password_reset(data.email)
    except MailDeliveryError as exc:
        logger.exception("Password reset email to %s failed", data.email)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send reset email",
        ) from exc
    if not sent:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Email not found")
    return Envelope(message="Reset token sent to your email")


@router.post("/reset-password", response_model=Envelope[None])
def reset(data: ResetPasswordRequest) -> Envelope[None]:
    try:
        reset_password(data.email, data.token, data.new_password)
    except PasswordResetError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc
    return Envelope(message="Password reset successfully")


@router.post("/profile", response_model=Envelope[UserResponse])
def profile(data: ProfileUpdateRequest, current_user: CurrentUser) -> Envelope[UserResponse]:
    """Update the signed-in admin's username, email or password."""
    try:
        user = update_profile(
            current_user["id"],
            username=data.username,
            email=data.email,
            current_password=data.current_password,
            new_password=data.new_password,
        )
    except (DuplicateEmailError, ProfileUpdateError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return Envelope(message="Profile updated successfully", data=UserResponse(**user))


@router.get("/admin/users", response_model=Envelope[UserListData])
def admin_users(current_user: CurrentUser) -> Envelope[UserListData]:
    users = [UserResponse(**u) for u in list_users()]
    return Envelope(message="Users fetched successfully", data=UserListData(users=users))


@router.post(
    "/admin/users",
    response_model=Envelope[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_admin_user(data: RegisterRequest, current_user: CurrentUser) -> Envelope[UserResponse]:
    user = _register(data)
    logger.info("Admin %s created admin %s", current_user["email"], user.email)
    return Envelope(message="Admin user created successfully", data=user)


@router.delete("/admin/users/{user_id}", response_model=Envelope[None])
def delete_admin_user(
    user_id: Annotated[int, Path(description="Admin user ID")],
    current_user: CurrentUser,
) -> Envelope[None]:
    try:
        deleted = delete_user(current_user["id"], user_id)
    except SelfDeletionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=exc.message) from exc
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return Envelope(message="User deleted successfully")
