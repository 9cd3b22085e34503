"""Admin user account model.

Any authenticated admin has full access; there is no role column.
Passwords and password-reset codes are stored only as hashes.
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from house_major.data.db import Base


class User(Base):
    """Dashboard administrator.

    Attributes:
        id: Auto-incrementing primary key.
        username: Display name.
        email: Unique login email.
        password_hash: Hash of the user's password.
        reset_token_hash: Hash of the pending password-reset code, if any.
        reset_token_expires_at: Expiry of the pending reset code.
        created_at: UTC timestamp when the account was created.
        updated_at: UTC timestamp of the last change.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(256), nullable=False)
    reset_token_hash: Mapped[str | None] = mapped_column(String(256), nullable=True)
    reset_token_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )
