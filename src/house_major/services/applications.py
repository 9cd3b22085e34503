"""Job applications.

An application with ``career_id`` of None is a general application; such
applications carry the literal job title ``General Application``.
"""

from __future__ import annotations

import logging
from typing import TypedDict

from house_major.data.db import get_session
from house_major.data.models import Application, ApplicationStatus, Career
from house_major.services.errors import CareerNotFoundError

logger = logging.getLogger(__name__)

__all__ = [
    "GENERAL_APPLICATION_TITLE",
    "ApplicationData",
    "create_application",
    "delete_application",
    "get_application",
    "list_applications",
    "set_application_status",
]

GENERAL_APPLICATION_TITLE = "General Application"


class ApplicationData(TypedDict, total=False):
    full_name: str
    email: str
    phone: str | None
    cover_letter: str | None
    job_title: str | None
    career_id: int | None
    resume_url: str | None


def _application_to_dict(application: Application) -> dict:
    return {
        "id": application.id,
        "full_name": application.full_name,
        "email": application.email,
        "phone": application.phone,
        "cover_letter": application.cover_letter,
        "job_title": application.job_title,
        "career_id": application.career_id,
        "resume_url": application.resume_url,
        "status": application.status,
        "created_at": application.created_at,
    }


def list_applications() -> list[dict]:
    with get_session() as session:
        rows = (
            session.query(Application)
            .order_by(Application.created_at.desc(), Application.id.desc())
            .all()
        )
        return [_application_to_dict(a) for a in rows]


def get_application(application_id: int) -> dict | None:
    with get_session() as session:
        application = session.get(Application, application_id)
        return _application_to_dict(application) if application else None


def create_application(data: ApplicationData) -> dict:
    """Store a new application with status Pending.

    A missing job title is filled from the targeted career, or with
    ``General Application`` when no career is targeted.

    Raises:
        CareerNotFoundError: If ``career_id`` is given but doesn't exist.
    """
    career_id = data.get("career_id")
    job_title = data.get("job_title")
    with get_session() as session:
        if career_id is not None:
            career = session.get(Career, career_id)
            if career is None:
                logger.warning("Application refused: career %s not found", career_id)
                raise CareerNotFoundError()
            job_title = job_title or career.title
        else:
            job_title = job_title or GENERAL_APPLICATION_TITLE

        application = Application(
            full_name=data["full_name"].strip(),
            email=data["email"].strip(),
            phone=data.get("phone"),
            cover_letter=data.get("cover_letter"),
            job_title=job_title,
            career_id=career_id,
            resume_url=data.get("resume_url"),
            status=ApplicationStatus.PENDING.value,
        )
        session.add(application)
        session.flush()
        logger.info("Stored application %d for %s", application.id, job_title)
        return _application_to_dict(application)


def set_application_status(application_id: int, status: ApplicationStatus) -> dict | None:
    with get_session() as session:
        application = session.get(Application, application_id)
        if application is None:
            return None
        application.status = status.value
        session.flush()
        return _application_to_dict(application)


def delete_application(application_id: int) -> dict | None:
    """Delete an application.

    Returns:
        The deleted application (so the caller can drop its resume), or None.
    """
    with get_session() as session:
        application = session.get(Application, application_id)
        if application is None:
            return None
        result = _application_to_dict(application)
        session.delete(application)
        return result
