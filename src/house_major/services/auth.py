"""Authentication and admin-account services.

Passwords and reset codes are hashed with passlib; access tokens are
HS256 JWTs carrying the user's id and email. Tokens are not revocable:
logout is purely client-side.
"""

from __future__ import annotations

import logging
import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from house_major.config import get_jwt_expire_minutes, get_jwt_secret
from house_major.data.db import get_session
from house_major.data.models import User
from house_major.services.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidTokenError,
    PasswordResetError,
    ProfileUpdateError,
    SelfDeletionError,
)
from house_major.services.mailer import send_email

logger = logging.getLogger(__name__)

__all__ = [
    "authenticate_user",
    "create_access_token",
    "create_user",
    "decode_access_token",
    "delete_user",
    "get_user",
    "hash_password",
    "list_users",
    "request_password_reset",
    "reset_password",
    "update_profile",
    "verify_password",
]

ALGORITHM = "HS256"
RESET_CODE_TTL = timedelta(minutes=15)

_pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return _pwd_context.hash(password)


def verify_password(password: str, stored_hash: str | None) -> bool:
    if not stored_hash:
        return False
    try:
        return _pwd_context.verify(password, stored_hash)
    except ValueError:
        # Unrecognized hash format
        return False


def _user_to_dict(user: User) -> dict[str, Any]:
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def _get_user_by_email(session: Session, email: str) -> User | None:
    return session.query(User).filter(User.email == email).first()


def create_access_token(user_id: int, email: str) -> str:
    """Issue a signed bearer token for the given user."""
    expires = datetime.now(UTC) + timedelta(minutes=get_jwt_expire_minutes())
    claims = {"id": user_id, "email": email, "exp": expires}
    return jwt.encode(claims, get_jwt_secret(), algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify a bearer token and return its claims.

    Raises:
        InvalidTokenError: If the signature, expiry or claims are invalid.
    """
    try:
        claims = jwt.decode(token, get_jwt_secret(), algorithms=[ALGORITHM])
    except JWTError as exc:
        raise InvalidTokenError("Invalid or expired token") from exc
    if not isinstance(claims.get("id"), int):
        raise InvalidTokenError("Invalid or expired token")
    return claims


def create_user(username: str, email: str, password: str) -> dict[str, Any]:
    """Create an admin account.

    Raises:
        DuplicateEmailError: If the email is already registered.
    """
    email_clean = email.strip().lower()
    with get_session() as session:
        if _get_user_by_email(session, email_clean) is not None:
            raise DuplicateEmailError()

        user = User(
            username=username.strip() or email_clean.split("@")[0],
            email=email_clean,
            password_hash=hash_password(password),
        )
        session.add(user)
        session.flush()
        logger.info("Created admin user %s", email_clean)
        return _user_to_dict(user)


def authenticate_user(email: str, password: str) -> dict[str, Any]:
    """Check credentials and return the matching user.

    Raises:
        InvalidCredentialsError: On unknown email or wrong password.
    """
    with get_session() as session:
        user = _get_user_by_email(session, email.strip().lower())
        if user is None or not verify_password(password, user.password_hash):
            raise InvalidCredentialsError()
        return _user_to_dict(user)


def get_user(user_id: int) -> dict[str, Any] | None:
    with get_session() as session:
        user = session.get(User, user_id)
        return _user_to_dict(user) if user else None


def list_users() -> list[dict[str, Any]]:
    """Return all admin accounts, newest first."""
    with get_session() as session:
        users = session.query(User).order_by(User.created_at.desc(), User.id.desc()).all()
        return [_user_to_dict(u) for u in users]


def delete_user(current_user_id: int, user_id: int) -> bool:
    """Delete an admin account other than the caller's own.

    Returns:
        True if deleted, False if no such user exists.

    Raises:
        SelfDeletionError: If the caller tries to delete themselves.
    """
    if current_user_id == user_id:
        raise SelfDeletionError()
    with get_session() as session:
        user = session.get(User, user_id)
        if user is None:
            return False
        session.delete(user)
        logger.info("Deleted admin user %d", user_id)
        return True


def update_profile(
    user_id: int,
    *,
    username: str | None = None,
    email: str | None = None,
    current_password: str | None = None,
    new_password: str | None = None,
) -> dict[str, Any] | None:
    """Update the caller's own account.

    Returns:
        Updated user dict, or None if the user no longer exists.

    Raises:
        DuplicateEmailError: If the new email belongs to someone else.
        ProfileUpdateError: If a new password is requested without the correct
            current password.
    """
    with get_session() as session:
        user = session.get(User, user_id)
        if user is None:
            return None

        if email:
            email_clean = email.strip().lower()
            existing = _get_user_by_email(session, email_clean)
            if existing is not None and existing.id != user_id:
                raise DuplicateEmailError()
            user.email = email_clean

        if username:
            user.username = username.strip()

        if new_password:
            if not current_password:
                raise ProfileUpdateError("Current password required")
            if not verify_password(current_password, user.password_hash):
                raise ProfileUpdateError("Current password incorrect")
            user.password_hash = hash_password(new_password)

        session.flush()
        return _user_to_dict(user)


def _generate_reset_code() -> str:
    return f"{secrets.randbelow(900_000) + 100_000}"


def request_password_reset(email: str) -> bool:
    """Issue a 6-digit reset code and email it to the account owner.

    Returns:
        False if no account uses this email, True once the code was sent.

    Raises:
        MailDeliveryError: If the email could not be delivered.
    """
    code = _generate_reset_code()
    with get_session() as session:
        user = _get_user_by_email(session, email.strip().lower())
        if user is None:
            return False
        user.reset_token_hash = hash_password(code)
        user.reset_token_expires_at = datetime.now(UTC) + RESET_CODE_TTL
        username = user.username
        address = user.email

    send_email(
        address,
        "Password Reset Request",
        "<h2>Password Reset</h2>"
        f"<p>Hello {username},</p>"
        "<p>Use this token to reset your password:</p>"
        f"<h3>{code}</h3>"
        "<p>This token expires in 15 minutes.</p>",
    )
    return True


def reset_password(email: str, code: str, new_password: str) -> None:
    """Replace the password of the account owning a valid reset code.

    Raises:
        PasswordResetError: If there is no pending code, it expired, or it is wrong.
    """
    with get_session() as session:
        user = _get_user_by_email(session, email.strip().lower())
        if user is None or not user.reset_token_hash or not user.reset_token_expires_at:
            raise PasswordResetError("Invalid or expired token")

        expires_at = user.reset_token_expires_at
        if expires_at.tzinfo is None:
            # SQLite drops tzinfo on the way back
            expires_at = expires_at.replace(tzinfo=UTC)
        if expires_at < datetime.now(UTC):
            raise PasswordResetError("Token expired")

        if not verify_password(code, user.reset_token_hash):
            raise PasswordResetError("Invalid token")

        user.password_hash = hash_password(new_password)
        user.reset_token_hash = None
        user.reset_token_expires_at = None
