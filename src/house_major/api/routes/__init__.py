"""Route handlers for the API."""

from house_major.api.routes import (
    applications,
    auth,
    careers,
    contacts,
    health,
    investments,
    projects,
    services,
    team,
    uploads,
)

__all__ = [
    "applications",
    "auth",
    "careers",
    "contacts",
    "health",
    "investments",
    "projects",
    "services",
    "team",
    "uploads",
]
