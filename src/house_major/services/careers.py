"""Job openings."""

from __future__ import annotations

import logging
from typing import TypedDict

from sqlalchemy import func

from house_major.data.db import get_session
from house_major.data.models import Application, Career

logger = logging.getLogger(__name__)

__all__ = [
    "CareerData",
    "career_exists",
    "create_career",
    "delete_career",
    "get_career",
    "list_careers",
    "update_career",
]

_CAREER_FIELDS = (
    "title",
    "department",
    "type",
    "location",
    "salary",
    "experience",
    "posted",
    "description",
    "requirements",
    "responsibilities",
)


class CareerData(TypedDict, total=False):
    title: str
    department: str
    type: str
    location: str
    salary: str | None
    experience: str | None
    posted: str | None
    description: str
    requirements: list[str]
    responsibilities: list[str]


def _career_to_dict(career: Career, application_count: int | None = None) -> dict:
    result = {
        "id": career.id,
        "title": career.title,
        "department": career.department,
        "type": career.type,
        "location": career.location,
        "salary": career.salary,
        "experience": career.experience,
        "posted": career.posted,
        "description": career.description,
        "requirements": list(career.requirements or []),
        "responsibilities": list(career.responsibilities or []),
        "created_at": career.created_at,
    }
    if application_count is not None:
        result["application_count"] = application_count
    return result


def list_careers() -> list[dict]:
    """Return all openings, newest first, each with its application count."""
    with get_session() as session:
        counts = dict(
            session.query(Application.career_id, func.count(Application.id))
            .filter(Application.career_id.is_not(None))
            .group_by(Application.career_id)
            .all()
        )
        careers = session.query(Career).order_by(Career.created_at.desc(), Career.id.desc()).all()
        return [_career_to_dict(c, counts.get(c.id, 0)) for c in careers]


def get_career(career_id: int) -> dict | None:
    with get_session() as session:
        career = session.get(Career, career_id)
        return _career_to_dict(career) if career else None


def career_exists(career_id: int) -> bool:
    with get_session() as session:
        return session.get(Career, career_id) is not None


def create_career(data: CareerData) -> dict:
    with get_session() as session:
        career = Career(**{k: data[k] for k in _CAREER_FIELDS if k in data})
        session.add(career)
        session.flush()
        logger.info("Created career %d (%s)", career.id, career.title)
        return _career_to_dict(career)


def update_career(career_id: int, data: CareerData) -> dict | None:
    with get_session() as session:
        career = session.get(Career, career_id)
        if career is None:
            return None
        for field in _CAREER_FIELDS:
            if field in data:
                setattr(career, field, data[field])
        session.flush()
        return _career_to_dict(career)


def delete_career(career_id: int) -> bool:
    """Delete an opening; its applications are kept as general applications."""
    with get_session() as session:
        career = session.get(Career, career_id)
        if career is None:
            return False
        # SQLite only enforces ON DELETE SET NULL with foreign keys enabled.
        session.query(Application).filter(Application.career_id == career_id).update(
            {Application.career_id: None}, synchronize_session=False
        )
        session.delete(career)
        return True
