"""Investment routes: the public inquiry form plus admin CRUD."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Path, status

from house_major.api.dependencies import get_current_user
from house_major.api.schemas.common import Envelope
from house_major.api.schemas.investments import (
    InvestmentCreateRequest,
    InvestmentInquiryRequest,
    InvestmentResponse,
    InvestmentUpdateRequest,
)
from house_major.services.investments import (
    create_investment,
    delete_investment,
    get_investment,
    list_investments,
    submit_inquiry,
    update_investment,
)
from house_major.services.mailer import notify_inbox

router = APIRouter(prefix="/investments", tags=["investments"])

InvestmentId = Annotated[int, Path(description="Investment ID")]


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Investment not found")


@router.post(
    "/inquiry",
    response_model=Envelope[InvestmentResponse],
    status_code=status.HTTP_201_CREATED,
)
def inquiry(
    data: InvestmentInquiryRequest, background_tasks: BackgroundTasks
) -> Envelope[InvestmentResponse]:
    """Public inquiry; the inbox is notified after the response is sent."""
    result = submit_inquiry(data.email, data.investment_nature, data.message)
    background_tasks.add_task(
        notify_inbox, data.email, data.email, result["description"], subject=result["title"]
    )
    return Envelope(
        message="Investment inquiry submitted successfully",
        data=InvestmentResponse(**result),
    )


@router.get(
    "",
    response_model=list[InvestmentResponse],
    dependencies=[Depends(get_current_user)],
)
def list_all() -> list[InvestmentResponse]:
    return [InvestmentResponse(**i) for i in list_investments()]


@router.get(
    "/{investment_id}",
    response_model=InvestmentResponse,
    dependencies=[Depends(get_current_user)],
)
def get_one(investment_id: InvestmentId) -> InvestmentResponse:
    result = get_investment(investment_id)
    if result is None:
        raise _not_found()
    return InvestmentResponse(**result)


@router.post(
    "",
    response_model=Envelope[InvestmentResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_user)],
)
def create(data: InvestmentCreateRequest) -> Envelope[InvestmentResponse]:
    result = create_investment(data.model_dump())
    return Envelope(message="Investment created successfully", data=InvestmentResponse(**result))


@router.put(
    "/{investment_id}",
    response_model=Envelope[InvestmentResponse],
    dependencies=[Depends(get_current_user)],
)
def update(
    investment_id: InvestmentId, data: InvestmentUpdateRequest
) -> Envelope[InvestmentResponse]:
    result = update_investment(investment_id, data.model_dump(exclude_unset=True))
    if result is None:
        raise _not_found()
    return Envelope(message="Investment updated successfully", data=InvestmentResponse(**result))


@router.delete(
    "/{investment_id}",
    response_model=Envelope[None],
    dependencies=[Depends(get_current_user)],
)
def delete(investment_id: InvestmentId) -> Envelope[None]:
    if not delete_investment(investment_id):
        raise _not_found()
    return Envelope(message="Investment deleted successfully")
