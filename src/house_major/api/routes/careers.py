"""Job opening routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from house_major.api.dependencies import get_current_user
from house_major.api.schemas.careers import (
    CareerCreateRequest,
    CareerResponse,
    CareerUpdateRequest,
)
from house_major.api.schemas.common import Envelope
from house_major.services.careers import (
    create_career,
    delete_career,
    get_career,
    list_careers,
    update_career,
)

router = APIRouter(prefix="/careers", tags=["careers"])

CareerId = Annotated[int, Path(description="Career ID")]


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Career not found")


@router.get("", response_model=list[CareerResponse])
def list_all() -> list[CareerResponse]:
    """List openings with their application counts."""
    return [CareerResponse(**c) for c in list_careers()]


@router.get("/{career_id}", response_model=CareerResponse)
def get_one(career_id: CareerId) -> CareerResponse:
    result = get_career(career_id)
    if result is None:
        raise _not_found()
    return CareerResponse(**result)


@router.post(
    "",
    response_model=Envelope[CareerResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_user)],
)
def create(data: CareerCreateRequest) -> Envelope[CareerResponse]:
    result = create_career(data.model_dump())
    return Envelope(message="Career created successfully", data=CareerResponse(**result))


@router.put(
    "/{career_id}",
    response_model=Envelope[CareerResponse],
    dependencies=[Depends(get_current_user)],
)
def update(career_id: CareerId, data: CareerUpdateRequest) -> Envelope[CareerResponse]:
    result = update_career(career_id, data.model_dump(exclude_unset=True))
    if result is None:
        raise _not_found()
    return Envelope(message="Career updated successfully", data=CareerResponse(**result))


@router.delete(
    "/{career_id}",
    response_model=Envelope[None],
    dependencies=[Depends(get_current_user)],
)
def delete(career_id: CareerId) -> Envelope[None]:
    """Delete an opening; its applications become general applications."""
    if not delete_career(career_id):
        raise _not_found()
    return Envelope(message="Career deleted successfully")
