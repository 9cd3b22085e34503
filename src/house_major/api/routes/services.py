"""Service catalog routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from house_major.api.dependencies import get_current_user
from house_major.api.schemas.common import Envelope
from house_major.api.schemas.services import (
    PublicServiceResponse,
    ServiceCreateRequest,
    ServiceResponse,
    ServiceUpdateRequest,
)
from house_major.services.service_catalog import (
    create_service,
    delete_service,
    get_service,
    list_public_services,
    list_services,
    update_service,
)

router = APIRouter(prefix="/services", tags=["services"])

ServiceId = Annotated[int, Path(description="Service ID")]


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")


@router.get("/frontend/all", response_model=list[PublicServiceResponse])
def list_public() -> list[PublicServiceResponse]:
    """Public listing used by the marketing site, in insertion order."""
    return [PublicServiceResponse(**s) for s in list_public_services()]


@router.get(
    "",
    response_model=list[ServiceResponse],
    dependencies=[Depends(get_current_user)],
)
def list_all() -> list[ServiceResponse]:
    return [ServiceResponse(**s) for s in list_services()]


@router.get(
    "/{service_id}",
    response_model=ServiceResponse,
    dependencies=[Depends(get_current_user)],
)
def get_one(service_id: ServiceId) -> ServiceResponse:
    result = get_service(service_id)
    if result is None:
        raise _not_found()
    return ServiceResponse(**result)


@router.post(
    "",
    response_model=Envelope[ServiceResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_user)],
)
def create(data: ServiceCreateRequest) -> Envelope[ServiceResponse]:
    result = create_service(data.model_dump(mode="json"))
    return Envelope(message="Service created successfully", data=ServiceResponse(**result))


@router.put(
    "/{service_id}",
    response_model=Envelope[ServiceResponse],
    dependencies=[Depends(get_current_user)],
)
def update(service_id: ServiceId, data: ServiceUpdateRequest) -> Envelope[ServiceResponse]:
    result = update_service(service_id, data.model_dump(mode="json", exclude_unset=True))
    if result is None:
        raise _not_found()
    return Envelope(message="Service updated successfully", data=ServiceResponse(**result))


@router.delete(
    "/{service_id}",
    response_model=Envelope[None],
    dependencies=[Depends(get_current_user)],
)
def delete(service_id: ServiceId) -> Envelope[None]:
    if not delete_service(service_id):
        raise _not_found()
    return Envelope(message="Service deleted successfully")
