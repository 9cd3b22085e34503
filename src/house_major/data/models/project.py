"""ORM model for portfolio projects."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from house_major.data.db import Base


class Project(Base):
    """Portfolio entry with its media, links and client details.

    List-valued and object-valued attributes are stored as JSON columns and
    always replaced wholesale, never mutated in place.
    """

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    full_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(128), nullable=False)
    date: Mapped[str] = mapped_column(String(64), nullable=False)
    duration: Mapped[str | None] = mapped_column(String(128), nullable=True)
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    features: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    team: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    results: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    client: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    external_links: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    download_links: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
