"""HTTP clients for the House Major API, plus the admin Auth Gate."""

from house_major.client.auth import AuthGate, LocalStore
from house_major.client.base import ApiClient, ApiError, AuthorizationError, FileUpload
from house_major.client.resources import (
    AdminUsersClient,
    ApplicationsClient,
    CareersClient,
    ContactsClient,
    InvestmentsClient,
    ProjectsClient,
    ResourceClient,
    ServicesClient,
    TeamClient,
)

__all__ = [
    "AdminUsersClient",
    "ApiClient",
    "ApiError",
    "ApplicationsClient",
    "AuthGate",
    "AuthorizationError",
    "CareersClient",
    "ContactsClient",
    "FileUpload",
    "InvestmentsClient",
    "LocalStore",
    "ProjectsClient",
    "ResourceClient",
    "ServicesClient",
    "TeamClient",
]
