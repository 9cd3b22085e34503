"""Service catalog: the service cards shown on the public site.

Icon names are validated at the API boundary; this module stores whatever
it is handed so that legacy rows with unknown icons still load.
"""

from __future__ import annotations

import logging
from typing import TypedDict

from house_major.data.db import get_session
from house_major.data.models import Service

logger = logging.getLogger(__name__)

__all__ = [
    "ServiceData",
    "create_service",
    "delete_service",
    "get_service",
    "list_public_services",
    "list_services",
    "update_service",
]

_SERVICE_FIELDS = ("title", "description", "icon", "image")


class ServiceData(TypedDict, total=False):
    title: str
    description: str
    icon: str
    image: str | None


def _service_to_dict(service: Service) -> dict:
    return {
        "id": service.id,
        "title": service.title,
        "description": service.description,
        "icon": service.icon,
        "image": service.image,
        "created_at": service.created_at,
    }


def list_services() -> list[dict]:
    """Return every service, newest first."""
    with get_session() as session:
        services = (
            session.query(Service).order_by(Service.created_at.desc(), Service.id.desc()).all()
        )
        return [_service_to_dict(s) for s in services]


def list_public_services() -> list[dict]:
    """Return the slim public listing, in insertion order."""
    with get_session() as session:
        services = session.query(Service).order_by(Service.id.asc()).all()
        return [
            {"id": s.id, "title": s.title, "description": s.description, "icon": s.icon}
            for s in services
        ]


def get_service(service_id: int) -> dict | None:
    with get_session() as session:
        service = session.get(Service, service_id)
        return _service_to_dict(service) if service else None


def create_service(data: ServiceData) -> dict:
    with get_session() as session:
        service = Service(**{k: data[k] for k in _SERVICE_FIELDS if k in data})
        session.add(service)
        session.flush()
        logger.info("Created service %d (%s)", service.id, service.title)
        return _service_to_dict(service)


def update_service(service_id: int, data: ServiceData) -> dict | None:
    """Merge the provided fields over the stored service.

    Returns:
        Updated service dict, or None if the service doesn't exist.
    """
    with get_session() as session:
        service = session.get(Service, service_id)
        if service is None:
            return None
        for field in _SERVICE_FIELDS:
            if field in data:
                setattr(service, field, data[field])
        session.flush()
        return _service_to_dict(service)


def delete_service(service_id: int) -> bool:
    with get_session() as session:
        service = session.get(Service, service_id)
        if service is None:
            return False
        session.delete(service)
        return True
