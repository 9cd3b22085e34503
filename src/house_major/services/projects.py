"""Portfolio projects.

List and object attributes (images, features, client, links, ...) are stored
as JSON columns. Multipart requests carry them as JSON-encoded text parts,
decoded by :func:`parse_json_part`.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypedDict

from house_major.data.db import get_session
from house_major.data.models import Project

logger = logging.getLogger(__name__)

__all__ = [
    "JSON_LIST_FIELDS",
    "JSON_OBJECT_FIELDS",
    "ProjectData",
    "create_project",
    "delete_project",
    "get_project",
    "list_projects",
    "parse_json_part",
    "update_project",
]

_SCALAR_FIELDS = ("title", "description", "full_description", "category", "date", "duration")
JSON_LIST_FIELDS = ("images", "features", "tags", "team", "results")
JSON_OBJECT_FIELDS = ("client", "external_links", "download_links")
_PROJECT_FIELDS = _SCALAR_FIELDS + JSON_LIST_FIELDS + JSON_OBJECT_FIELDS


class ProjectData(TypedDict, total=False):
    title: str
    description: str
    full_description: str | None
    category: str
    date: str
    duration: str | None
    images: list[str]
    features: list[str]
    tags: list[str]
    team: list[str]
    results: list[dict[str, Any]]
    client: dict[str, Any]
    external_links: dict[str, Any]
    download_links: dict[str, Any]


def _project_to_dict(project: Project) -> dict:
    return {
        "id": project.id,
        "title": project.title,
        "description": project.description,
        "full_description": project.full_description,
        "category": project.category,
        "date": project.date,
        "duration": project.duration,
        "images": list(project.images or []),
        "features": list(project.features or []),
        "tags": list(project.tags or []),
        "team": list(project.team or []),
        "results": list(project.results or []),
        "client": dict(project.client or {}),
        "external_links": dict(project.external_links or {}),
        "download_links": dict(project.download_links or {}),
        "created_at": project.created_at,
    }


def parse_json_part(raw: str | None, expected: type, *, default: Any = None) -> Any:
    """Decode a JSON-encoded multipart field.

    Args:
        raw: Submitted text, or None when the part is absent.
        expected: ``list`` or ``dict``; any other decoded type is rejected.
        default: Returned when ``raw`` is absent or empty.

    Raises:
        ValueError: If ``raw`` is not valid JSON of the expected type.
    """
    if raw is None or not raw.strip():
        return default
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON: {exc.msg}") from exc
    if not isinstance(value, expected):
        raise ValueError(f"Expected a JSON {expected.__name__}")
    return value


def list_projects() -> list[dict]:
    with get_session() as session:
        projects = (
            session.query(Project).order_by(Project.created_at.desc(), Project.id.desc()).all()
        )
        return [_project_to_dict(p) for p in projects]


def get_project(project_id: int) -> dict | None:
    with get_session() as session:
        project = session.get(Project, project_id)
        return _project_to_dict(project) if project else None


def create_project(data: ProjectData) -> dict:
    with get_session() as session:
        project = Project(**{k: data[k] for k in _PROJECT_FIELDS if k in data})
        session.add(project)
        session.flush()
        logger.info("Created project %d (%s)", project.id, project.title)
        return _project_to_dict(project)


def update_project(project_id: int, data: ProjectData) -> tuple[dict, list[str]] | None:
    """Merge the provided fields over the stored project.

    Returns:
        ``(updated project, image URLs no longer referenced)``, or None if the
        project doesn't exist.
    """
    with get_session() as session:
        project = session.get(Project, project_id)
        if project is None:
            return None
        previous_images = list(project.images or [])
        for field in _PROJECT_FIELDS:
            if field in data:
                setattr(project, field, data[field])
        session.flush()
        current = set(project.images or [])
        dropped = [url for url in previous_images if url not in current]
        return _project_to_dict(project), dropped


def delete_project(project_id: int) -> dict | None:
    with get_session() as session:
        project = session.get(Project, project_id)
        if project is None:
            return None
        result = _project_to_dict(project)
        session.delete(project)
        return result
