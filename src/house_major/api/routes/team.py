"""Team member routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, Path, UploadFile, status

from house_major.api.dependencies import get_current_user
from house_major.api.routes.uploads import is_present, store_checked_upload
from house_major.api.schemas.common import Envelope
from house_major.api.schemas.team import TeamMemberCreateRequest, TeamMemberResponse
from house_major.services.team import (
    create_team_member,
    delete_team_member,
    get_team_member,
    list_team_members,
    update_team_member,
)
from house_major.services.upload_storage import delete_upload
from house_major.upload_rules import PROFILE_PHOTO_RULE

router = APIRouter(prefix="/team", tags=["team"])

MemberId = Annotated[int, Path(description="Team member ID")]
OptionalText = Annotated[str | None, Form()]
PhotoFile = Annotated[UploadFile | None, File(description="Profile photo, max 3MB")]


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team member not found")


@router.get("", response_model=list[TeamMemberResponse])
def list_all() -> list[TeamMemberResponse]:
    return [TeamMemberResponse(**m) for m in list_team_members()]


@router.get("/{member_id}", response_model=TeamMemberResponse)
def get_one(member_id: MemberId) -> TeamMemberResponse:
    result = get_team_member(member_id)
    if result is None:
        raise _not_found()
    return TeamMemberResponse(**result)


@router.post(
    "",
    response_model=Envelope[TeamMemberResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_user)],
)
def create(data: TeamMemberCreateRequest) -> Envelope[TeamMemberResponse]:
    result = create_team_member(data.model_dump())
    return Envelope(message="Team member created successfully", data=TeamMemberResponse(**result))


@router.post(
    "/upload",
    response_model=Envelope[TeamMemberResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_user)],
    responses={400: {"description": "Photo is not an image or is too large"}},
)
async def create_with_photo(
    name: Annotated[str, Form(min_length=1)],
    role: Annotated[str, Form(min_length=1)],
    bio: OptionalText = None,
    email: OptionalText = None,
    linkedin: OptionalText = None,
    github: OptionalText = None,
    image: PhotoFile = None,
) -> Envelope[TeamMemberResponse]:
    data = {
        "name": name,
        "role": role,
        "bio": bio or None,
        "email": email or None,
        "linkedin": linkedin or None,
        "github": github or None,
        "image": None,
    }
    if is_present(image):
        data["image"] = await store_checked_upload(image, PROFILE_PHOTO_RULE, "team")
    result = create_team_member(data)
    return Envelope(message="Team member created successfully", data=TeamMemberResponse(**result))


@router.put(
    "/{member_id}",
    response_model=Envelope[TeamMemberResponse],
    dependencies=[Depends(get_current_user)],
)
async def update_with_photo(
    member_id: MemberId,
    name: OptionalText = None,
    role: OptionalText = None,
    bio: OptionalText = None,
    email: OptionalText = None,
    linkedin: OptionalText = None,
    github: OptionalText = None,
    image: PhotoFile = None,
) -> Envelope[TeamMemberResponse]:
    """Update a member; a new photo replaces (and deletes) the stored one."""
    if get_team_member(member_id) is None:
        raise _not_found()

    data = {
        key: value
        for key, value in (
            ("name", name),
            ("role", role),
            ("bio", bio),
            ("email", email),
            ("linkedin", linkedin),
            ("github", github),
        )
        if value is not None
    }
    for required in ("name", "role"):
        if required in data and not data[required].strip():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=f"{required} cannot be empty"
            )
    if is_present(image):
        data["image"] = await store_checked_upload(image, PROFILE_PHOTO_RULE, "team")

    outcome = update_team_member(member_id, data)
    if outcome is None:
        delete_upload(data.get("image"))
        raise _not_found()
    result, replaced = outcome
    delete_upload(replaced)
    return Envelope(message="Team member updated successfully", data=TeamMemberResponse(**result))


@router.delete(
    "/{member_id}",
    response_model=Envelope[None],
    dependencies=[Depends(get_current_user)],
)
def delete(member_id: MemberId) -> Envelope[None]:
    result = delete_team_member(member_id)
    if result is None:
        raise _not_found()
    delete_upload(result["image"])
    return Envelope(message="Team member deleted successfully")
