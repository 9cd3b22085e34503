"""ORM model for job applications."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from house_major.data.db import Base

if TYPE_CHECKING:
    from house_major.data.models.career import Career


class ApplicationStatus(StrEnum):
    PENDING = "Pending"
    REVIEWED = "Reviewed"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"


class Application(Base):
    """A job application, optionally tied to a posted career.

    ``career_id`` of None marks a general application. Deleting the career
    keeps the application and clears the link.
    """

    __tablename__ = "applications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    cover_letter: Mapped[str | None] = mapped_column(Text, nullable=True)
    job_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    resume_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    career_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("careers.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    status: Mapped[str] = mapped_column(
        String(16), nullable=False, default=ApplicationStatus.PENDING.value
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )

    career: Mapped[Career | None] = relationship("Career", back_populates="applications")

    @validates("status")
    def validate_status(self, key: str, value: str) -> str:
        """Only the four known statuses may be stored."""
        return ApplicationStatus(value).value
