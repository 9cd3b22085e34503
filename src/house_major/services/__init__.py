"""Service layer: business logic for persistence and integrations.

Routers and the CLI call these functions; nothing here imports FastAPI.
"""

from house_major.services.applications import (
    create_application,
    delete_application,
    get_application,
    list_applications,
    set_application_status,
)
from house_major.services.auth import (
    authenticate_user,
    create_access_token,
    create_user,
    decode_access_token,
    delete_user,
    list_users,
    request_password_reset,
    reset_password,
    update_profile,
)
from house_major.services.careers import (
    create_career,
    delete_career,
    get_career,
    list_careers,
    update_career,
)
from house_major.services.contacts import create_contact, delete_contact, list_contacts
from house_major.services.investments import (
    create_investment,
    delete_investment,
    list_investments,
    submit_inquiry,
    update_investment,
)
from house_major.services.projects import (
    create_project,
    delete_project,
    get_project,
    list_projects,
    update_project,
)
from house_major.services.service_catalog import (
    create_service,
    delete_service,
    get_service,
    list_public_services,
    list_services,
    update_service,
)
from house_major.services.team import (
    create_team_member,
    delete_team_member,
    list_team_members,
    update_team_member,
)

__all__ = [
    "authenticate_user",
    "create_access_token",
    "create_application",
    "create_career",
    "create_contact",
    "create_investment",
    "create_project",
    "create_service",
    "create_team_member",
    "create_user",
    "decode_access_token",
    "delete_application",
    "delete_career",
    "delete_contact",
    "delete_investment",
    "delete_project",
    "delete_service",
    "delete_team_member",
    "delete_user",
    "get_application",
    "get_career",
    "get_project",
    "get_service",
    "list_applications",
    "list_careers",
    "list_contacts",
    "list_investments",
    "list_projects",
    "list_public_services",
    "list_services",
    "list_team_members",
    "list_users",
    "request_password_reset",
    "reset_password",
    "set_application_status",
    "submit_inquiry",
    "update_career",
    "update_investment",
    "update_profile",
    "update_project",
    "update_service",
    "update_team_member",
]
