"""Team member profiles."""

from __future__ import annotations

import logging
from typing import TypedDict

from house_major.data.db import get_session
from house_major.data.models import TeamMember

logger = logging.getLogger(__name__)

__all__ = [
    "TeamMemberData",
    "create_team_member",
    "delete_team_member",
    "get_team_member",
    "list_team_members",
    "update_team_member",
]

_TEAM_FIELDS = ("name", "role", "bio", "email", "linkedin", "github", "image")


class TeamMemberData(TypedDict, total=False):
    name: str
    role: str
    bio: str | None
    email: str | None
    linkedin: str | None
    github: str | None
    image: str | None


def _member_to_dict(member: TeamMember) -> dict:
    return {
        "id": member.id,
        "name": member.name,
        "role": member.role,
        "bio": member.bio,
        "email": member.email,
        "linkedin": member.linkedin,
        "github": member.github,
        "image": member.image,
        "created_at": member.created_at,
    }


def list_team_members() -> list[dict]:
    with get_session() as session:
        members = (
            session.query(TeamMember)
            .order_by(TeamMember.created_at.desc(), TeamMember.id.desc())
            .all()
        )
        return [_member_to_dict(m) for m in members]


def get_team_member(member_id: int) -> dict | None:
    with get_session() as session:
        member = session.get(TeamMember, member_id)
        return _member_to_dict(member) if member else None


def create_team_member(data: TeamMemberData) -> dict:
    with get_session() as session:
        member = TeamMember(**{k: data[k] for k in _TEAM_FIELDS if k in data})
        session.add(member)
        session.flush()
        logger.info("Created team member %d (%s)", member.id, member.name)
        return _member_to_dict(member)


def update_team_member(member_id: int, data: TeamMemberData) -> tuple[dict, str | None] | None:
    """Merge the provided fields over the stored member.

    Returns:
        ``(updated member, replaced image URL or None)``, or None if the
        member doesn't exist. The caller owns deleting the replaced image.
    """
    with get_session() as session:
        member = session.get(TeamMember, member_id)
        if member is None:
            return None
        previous_image = member.image
        for field in _TEAM_FIELDS:
            if field in data:
                setattr(member, field, data[field])
        session.flush()
        replaced = previous_image if previous_image and previous_image != member.image else None
        return _member_to_dict(member), replaced


def delete_team_member(member_id: int) -> dict | None:
    with get_session() as session:
        member = session.get(TeamMember, member_id)
        if member is None:
            return None
        result = _member_to_dict(member)
        session.delete(member)
        return result
