"""ORM model for the services offered on the public site."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from house_major.data.db import Base


class Service(Base):
    """A service card shown in the public services section.

    Attributes:
        id: Auto-incrementing primary key.
        title: Service name.
        description: Short marketing description.
        icon: Key into the fixed icon registry (see ``house_major.icons``).
        image: Optional illustration URL.
        created_at: UTC timestamp when the row was created.
    """

    __tablename__ = "services"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    icon: Mapped[str] = mapped_column(String(64), nullable=False)
    image: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
