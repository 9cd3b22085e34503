"""Investment inquiries.

Inquiries arrive either from the public form (``submit_inquiry``), which
synthesizes the title from the chosen investment nature, or from an admin
through the regular CRUD functions.
"""

from __future__ import annotations

import logging
from typing import TypedDict

from house_major.data.db import get_session
from house_major.data.models import Investment

logger = logging.getLogger(__name__)

__all__ = [
    "InvestmentData",
    "build_inquiry_description",
    "build_inquiry_title",
    "create_investment",
    "delete_investment",
    "get_investment",
    "list_investments",
    "submit_inquiry",
    "update_investment",
]

_INVESTMENT_FIELDS = ("title", "description", "email", "image")


class InvestmentData(TypedDict, total=False):
    title: str
    description: str
    email: str | None
    image: str | None


def _investment_to_dict(investment: Investment) -> dict:
    return {
        "id": investment.id,
        "title": investment.title,
        "description": investment.description,
        "email": investment.email,
        "image": investment.image,
        "created_at": investment.created_at,
    }


def build_inquiry_title(nature: str) -> str:
    return f"Investment Inquiry - {nature}"


def build_inquiry_description(nature: str, message: str | None = None) -> str:
    """Return the stored description for a public inquiry.

    A submitted message is kept as-is; otherwise a default text naming the
    investment nature is used.
    """
    if message and message.strip():
        return message
    return f"New investment inquiry received.\nInvestment Nature: {nature}"


def list_investments() -> list[dict]:
    with get_session() as session:
        rows = (
            session.query(Investment)
            .order_by(Investment.created_at.desc(), Investment.id.desc())
            .all()
        )
        return [_investment_to_dict(i) for i in rows]


def get_investment(investment_id: int) -> dict | None:
    with get_session() as session:
        investment = session.get(Investment, investment_id)
        return _investment_to_dict(investment) if investment else None


def create_investment(data: InvestmentData) -> dict:
    with get_session() as session:
        investment = Investment(**{k: data[k] for k in _INVESTMENT_FIELDS if k in data})
        session.add(investment)
        session.flush()
        return _investment_to_dict(investment)


def submit_inquiry(email: str, nature: str, message: str | None = None) -> dict:
    """Store a public investment inquiry."""
    result = create_investment(
        {
            "title": build_inquiry_title(nature),
            "description": build_inquiry_description(nature, message),
            "email": email.strip(),
        }
    )
    logger.info("Stored investment inquiry %d (%s)", result["id"], nature)
    return result


def update_investment(investment_id: int, data: InvestmentData) -> dict | None:
    with get_session() as session:
        investment = session.get(Investment, investment_id)
        if investment is None:
            return None
        for field in _INVESTMENT_FIELDS:
            if field in data:
                setattr(investment, field, data[field])
        session.flush()
        return _investment_to_dict(investment)


def delete_investment(investment_id: int) -> bool:
    with get_session() as session:
        investment = session.get(Investment, investment_id)
        if investment is None:
            return False
        session.delete(investment)
        return True
