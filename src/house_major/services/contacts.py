"""Contact-form messages."""

from __future__ import annotations

import logging

from house_major.data.db import get_session
from house_major.data.models import Contact

logger = logging.getLogger(__name__)

__all__ = ["create_contact", "delete_contact", "get_contact", "list_contacts"]


def _contact_to_dict(contact: Contact) -> dict:
    return {
        "id": contact.id,
        "name": contact.name,
        "email": contact.email,
        "message": contact.message,
        "created_at": contact.created_at,
    }


def list_contacts() -> list[dict]:
    with get_session() as session:
        contacts = (
            session.query(Contact).order_by(Contact.created_at.desc(), Contact.id.desc()).all()
        )
        return [_contact_to_dict(c) for c in contacts]


def get_contact(contact_id: int) -> dict | None:
    with get_session() as session:
        contact = session.get(Contact, contact_id)
        return _contact_to_dict(contact) if contact else None


def create_contact(name: str, email: str, message: str) -> dict:
    with get_session() as session:
        contact = Contact(name=name.strip(), email=email.strip(), message=message)
        session.add(contact)
        session.flush()
        logger.info("Stored contact message %d from %s", contact.id, contact.email)
        return _contact_to_dict(contact)


def delete_contact(contact_id: int) -> bool:
    with get_session() as session:
        contact = session.get(Contact, contact_id)
        if contact is None:
            return False
        session.delete(contact)
        return True
