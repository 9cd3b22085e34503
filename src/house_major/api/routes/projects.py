"""Portfolio project routes.

JSON endpoints take a full ``ProjectCreateRequest``; the ``/upload`` variants
take multipart forms whose list and object fields arrive as JSON-encoded
text parts alongside the image files.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, File, Form, HTTPException, Path, UploadFile, status
from pydantic import ValidationError

from house_major.api.dependencies import get_current_user
from house_major.api.routes.uploads import is_present, store_checked_upload
from house_major.api.schemas.common import Envelope
from house_major.api.schemas.projects import (
    ProjectCreateRequest,
    ProjectResponse,
    ProjectUpdateRequest,
)
from house_major.services.projects import (
    create_project,
    delete_project,
    get_project,
    list_projects,
    parse_json_part,
    update_project,
)
from house_major.services.upload_storage import delete_upload
from house_major.upload_rules import MAX_PROJECT_IMAGES, PROJECT_IMAGE_RULE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])

ProjectId = Annotated[int, Path(description="Project ID")]
OptionalText = Annotated[str | None, Form()]
ImageFiles = Annotated[list[UploadFile] | None, File(description="Project images")]

# Multipart part name -> (attribute, expected JSON type)
_JSON_PARTS: dict[str, tuple[str, type]] = {
    "features": ("features", list),
    "tags": ("tags", list),
    "team": ("team", list),
    "results": ("results", list),
    "client": ("client", dict),
    "externalLinks": ("external_links", dict),
    "downloadLinks": ("download_links", dict),
}


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def _validation_message(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"Invalid {location}: {first.get('msg')}" if location else str(first.get("msg"))


async def _store_images(images: list[UploadFile] | None) -> list[str]:
    files = [f for f in images or [] if is_present(f)]
    if len(files) > MAX_PROJECT_IMAGES:
        raise _bad_request(f"A project can have at most {MAX_PROJECT_IMAGES} images")
    urls: list[str] = []
    try:
        for upload in files:
            urls.append(await store_checked_upload(upload, PROJECT_IMAGE_RULE, "projects"))
    except HTTPException:
        for url in urls:
            delete_upload(url)
        raise
    return urls


@router.get("", response_model=list[ProjectResponse])
def list_all() -> list[ProjectResponse]:
    return [ProjectResponse(**p) for p in list_projects()]


@router.get("/{project_id}", response_model=ProjectResponse)
def get_one(project_id: ProjectId) -> ProjectResponse:
    result = get_project(project_id)
    if result is None:
        raise _not_found()
    return ProjectResponse(**result)


@router.post(
    "",
    response_model=Envelope[ProjectResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_user)],
)
def create(data: ProjectCreateRequest) -> Envelope[ProjectResponse]:
    result = create_project(data.model_dump())
    return Envelope(message="Project created successfully", data=ProjectResponse(**result))


@router.put(
    "/{project_id}",
    response_model=Envelope[ProjectResponse],
    dependencies=[Depends(get_current_user)],
)
def update(project_id: ProjectId, data: ProjectUpdateRequest) -> Envelope[ProjectResponse]:
    outcome = update_project(project_id, data.model_dump(exclude_unset=True))
    if outcome is None:
        raise _not_found()
    result, dropped = outcome
    for url in dropped:
        delete_upload(url)
    return Envelope(message="Project updated successfully", data=ProjectResponse(**result))


@router.delete(
    "/{project_id}",
    response_model=Envelope[None],
    dependencies=[Depends(get_current_user)],
)
def delete(project_id: ProjectId) -> Envelope[None]:
    result = delete_project(project_id)
    if result is None:
        raise _not_found()
    for url in result["images"]:
        delete_upload(url)
    return Envelope(message="Project deleted successfully")


@router.post(
    "/upload",
    response_model=Envelope[ProjectResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_user)],
    responses={400: {"description": "Malformed JSON part or rejected image"}},
)
async def create_with_images(
    title: Annotated[str, Form()],
    description: Annotated[str, Form()],
    category: Annotated[str, Form()],
    date: Annotated[str, Form()],
    full_description: Annotated[str | None, Form(alias="fullDescription")] = None,
    duration: OptionalText = None,
    features: OptionalText = None,
    tags: OptionalText = None,
    team: OptionalText = None,
    results: OptionalText = None,
    client: OptionalText = None,
    external_links: Annotated[str | None, Form(alias="externalLinks")] = None,
    download_links: Annotated[str | None, Form(alias="downloadLinks")] = None,
    images: ImageFiles = None,
) -> Envelope[ProjectResponse]:
    """Create a project from a multipart form, storing its image files."""
    raw_parts = {
        "features": features,
        "tags": tags,
        "team": team,
        "results": results,
        "client": client,
        "externalLinks": external_links,
        "downloadLinks": download_links,
    }
    payload: dict[str, Any] = {
        "title": title,
        "description": description,
        "full_description": full_description or None,
        "category": category,
        "date": date,
        "duration": duration or None,
    }
    for part, (attribute, expected) in _JSON_PARTS.items():
        default = [] if expected is list else {}
        try:
            payload[attribute] = parse_json_part(raw_parts[part], expected, default=default)
        except ValueError as exc:
            raise _bad_request(f"Invalid {part}: {exc}") from exc

    try:
        validated = ProjectCreateRequest.model_validate(payload)
    except ValidationError as exc:
        raise _bad_request(_validation_message(exc)) from exc

    data = validated.model_dump()
    data["images"] = await _store_images(images)
    result = create_project(data)
    return Envelope(message="Project created successfully", data=ProjectResponse(**result))


@router.put(
    "/{project_id}/upload",
    response_model=Envelope[ProjectResponse],
    dependencies=[Depends(get_current_user)],
)
async def update_with_images(
    project_id: ProjectId,
    title: OptionalText = None,
    description: OptionalText = None,
    category: OptionalText = None,
    date: OptionalText = None,
    full_description: Annotated[str | None, Form(alias="fullDescription")] = None,
    duration: OptionalText = None,
    features: OptionalText = None,
    tags: OptionalText = None,
    team: OptionalText = None,
    results: OptionalText = None,
    client: OptionalText = None,
    external_links: Annotated[str | None, Form(alias="externalLinks")] = None,
    download_links: Annotated[str | None, Form(alias="downloadLinks")] = None,
    images: ImageFiles = None,
) -> Envelope[ProjectResponse]:
    """Update a project from a multipart form.

    New image files replace the whole stored image list; without files the
    stored images are left alone. Malformed JSON parts keep the stored value.
    """
    existing = get_project(project_id)
    if existing is None:
        raise _not_found()

    raw_parts = {
        "features": features,
        "tags": tags,
        "team": team,
        "results": results,
        "client": client,
        "externalLinks": external_links,
        "downloadLinks": download_links,
    }
    payload: dict[str, Any] = {
        key: value
        for key, value in (
            ("title", title),
            ("description", description),
            ("category", category),
            ("date", date),
            ("full_description", full_description),
            ("duration", duration),
        )
        if value is not None
    }
    for part, (attribute, expected) in _JSON_PARTS.items():
        try:
            value = parse_json_part(raw_parts[part], expected)
        except ValueError:
            logger.warning("Ignoring malformed %s for project %d", part, project_id)
            continue
        if value is not None:
            payload[attribute] = value

    try:
        validated = ProjectUpdateRequest.model_validate(payload)
    except ValidationError as exc:
        raise _bad_request(_validation_message(exc)) from exc

    data = validated.model_dump(exclude_unset=True)
    # Images only change through uploaded files on this endpoint.
    data.pop("images", None)
    new_urls = await _store_images(images)
    if new_urls:
        data["images"] = new_urls

    outcome = update_project(project_id, data)
    if outcome is None:
        for url in new_urls:
            delete_upload(url)
        raise _not_found()
    result, dropped = outcome
    for url in dropped:
        delete_upload(url)
    return Envelope(message="Project updated successfully", data=ProjectResponse(**result))
