"""Shared dependencies for API routes."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import Depends, Header, HTTPException, status

from house_major.services.auth import decode_access_token, get_user
from house_major.services.errors import InvalidTokenError

logger = logging.getLogger(__name__)


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    authorization: Annotated[
        str | None,
        Header(description="Bearer token issued by POST /auth/login"),
    ] = None,
) -> dict[str, Any]:
    """Resolve the admin making the request from the Authorization header.

    Returns:
        The authenticated user's dict (id, username, email, ...).

    Raises:
        HTTPException: 401 when the header is missing or malformed, the token
            doesn't verify, or its user no longer exists.
    """
    if not authorization:
        raise _unauthorized("No token provided")

    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        raise _unauthorized("Invalid authorization format. Use 'Bearer <token>'")

    token = token.strip()
    if not token:
        raise _unauthorized("Token missing")

    try:
        claims = decode_access_token(token)
    except InvalidTokenError as exc:
        logger.warning("Rejected bearer token: %s", exc.message)
        raise _unauthorized(exc.message) from exc

    user = get_user(claims["id"])
    if user is None:
        raise _unauthorized("User not found")
    return user


CurrentUser = Annotated[dict[str, Any], Depends(get_current_user)]
