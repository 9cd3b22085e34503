"""ORM models package for database tables.

This package provides SQLAlchemy ORM models representing database tables:
- Service: Service cards on the public site
- Project: Portfolio projects
- Career / Application: Job openings and the applications against them
- TeamMember: Team profile cards
- Investment: Investment inquiries
- Contact: Contact-form messages
- User: Dashboard administrators

All models inherit from the shared Base declarative class defined in data.db.
"""

from house_major.data.db import Base
from house_major.data.models.application import Application, ApplicationStatus
from house_major.data.models.career import Career
from house_major.data.models.contact import Contact
from house_major.data.models.investment import Investment
from house_major.data.models.project import Project
from house_major.data.models.service import Service
from house_major.data.models.team_member import TeamMember
from house_major.data.models.user import User

__all__ = [
    "Application",
    "ApplicationStatus",
    "Base",
    "Career",
    "Contact",
    "Investment",
    "Project",
    "Service",
    "TeamMember",
    "User",
]
