"""Contact message routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Path, status

from house_major.api.dependencies import get_current_user
from house_major.api.schemas.common import Envelope
from house_major.api.schemas.contacts import ContactCreateRequest, ContactResponse
from house_major.services.contacts import (
    create_contact,
    delete_contact,
    get_contact,
    list_contacts,
)
from house_major.services.mailer import notify_inbox

router = APIRouter(prefix="/contacts", tags=["contacts"])

ContactId = Annotated[int, Path(description="Contact message ID")]


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")


@router.post(
    "",
    response_model=Envelope[ContactResponse],
    status_code=status.HTTP_201_CREATED,
)
def submit(data: ContactCreateRequest, background_tasks: BackgroundTasks) -> Envelope[ContactResponse]:
    result = create_contact(data.name, data.email, data.message)
    background_tasks.add_task(notify_inbox, data.name, data.email, data.message)
    return Envelope(message="Message sent successfully", data=ContactResponse(**result))


@router.get(
    "",
    response_model=list[ContactResponse],
    dependencies=[Depends(get_current_user)],
)
def list_all() -> list[ContactResponse]:
    return [ContactResponse(**c) for c in list_contacts()]


@router.get(
    "/{contact_id}",
    response_model=ContactResponse,
    dependencies=[Depends(get_current_user)],
)
def get_one(contact_id: ContactId) -> ContactResponse:
    result = get_contact(contact_id)
    if result is None:
        raise _not_found()
    return ContactResponse(**result)


@router.delete(
    "/{contact_id}",
    response_model=Envelope[None],
    dependencies=[Depends(get_current_user)],
)
def delete(contact_id: ContactId) -> Envelope[None]:
    if not delete_contact(contact_id):
        raise _not_found()
    return Envelope(message="Contact deleted successfully")
