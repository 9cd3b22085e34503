"""ORM model for job openings."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import JSON, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from house_major.data.db import Base

if TYPE_CHECKING:
    from house_major.data.models.application import Application


class Career(Base):
    """A posted job opening.

    Attributes:
        id: Auto-incrementing primary key.
        title: Position title.
        department: Owning department.
        type: Employment type (e.g. Full-time).
        location: Work location.
        salary: Optional salary text.
        experience: Optional experience requirement text.
        posted: Optional free-text posting date.
        description: Position description.
        requirements: JSON list of requirement lines.
        responsibilities: JSON list of responsibility lines.
        created_at: UTC timestamp when the opening was created.
    """

    __tablename__ = "careers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    department: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(64), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    salary: Mapped[str | None] = mapped_column(String(128), nullable=True)
    experience: Mapped[str | None] = mapped_column(String(128), nullable=True)
    posted: Mapped[str | None] = mapped_column(String(64), nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    requirements: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    responsibilities: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )

    applications: Mapped[list[Application]] = relationship(
        "Application", back_populates="career", passive_deletes=True
    )
