"""Per-resource clients over :class:`~house_major.client.base.ApiClient`.

Every client exposes ``list``, ``get_by_id``, ``create``, ``update`` and
``remove``; resource-specific actions live on the subclasses. Payloads are
camelCase dicts exactly as the API exchanges them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from house_major.client.base import ApiClient, ApiError, FileUpload

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

Record = dict[str, Any]


class ResourceClient:
    """CRUD calls against one collection endpoint.

    Attributes:
        path: Collection path, e.g. ``/services``.
        label: Singular noun used in fallback error messages.
        public_reads: Whether list/get work without a token.
    """

    path: str = ""
    label: str = "record"
    public_reads: bool = False

    def __init__(self, api: ApiClient) -> None:
        self.api = api

    def list(self) -> list[Record]:
        result = self.api.request(
            "GET",
            self.path,
            auth=not self.public_reads,
            fallback_error=f"Failed to fetch {self.label}s",
        )
        return list(result or [])

    def get_by_id(self, record_id: int) -> Record:
        return self.api.request(
            "GET",
            f"{self.path}/{record_id}",
            auth=not self.public_reads,
            fallback_error=f"Failed to fetch {self.label}",
        )

    def create(self, payload: Mapping[str, Any]) -> Record:
        return self.api.request(
            "POST",
            self.path,
            auth=True,
            json_body=dict(payload),
            fallback_error=f"Failed to create {self.label}",
        )

    def update(self, record_id: int, payload: Mapping[str, Any]) -> Record:
        return self.api.request(
            "PUT",
            f"{self.path}/{record_id}",
            auth=True,
            json_body=dict(payload),
            fallback_error=f"Failed to update {self.label}",
        )

    def remove(self, record_id: int) -> None:
        self.api.request(
            "DELETE",
            f"{self.path}/{record_id}",
            auth=True,
            fallback_error=f"Failed to delete {self.label}",
        )


class ServicesClient(ResourceClient):
    path = "/services"
    label = "service"

    def list_public(self) -> list[Record]:
        """Slim listing for the public site (no token needed)."""
        return list(self.api.request("GET", f"{self.path}/frontend/all") or [])


class ProjectsClient(ResourceClient):
    path = "/projects"
    label = "project"
    public_reads = True

    def create_with_images(
        self, payload: Mapping[str, Any], images: Sequence[FileUpload] = ()
    ) -> Record:
        fields = {k: v for k, v in payload.items() if k != "images"}
        return self.api.request(
            "POST",
            f"{self.path}/upload",
            auth=True,
            fields=fields,
            files=[("images", image) for image in images],
            fallback_error="Failed to create project",
        )

    def update_with_images(
        self, record_id: int, payload: Mapping[str, Any], images: Sequence[FileUpload] = ()
    ) -> Record:
        """Update a project; stored images are replaced only if ``images`` is non-empty."""
        fields = {k: v for k, v in payload.items() if k != "images"}
        return self.api.request(
            "PUT",
            f"{self.path}/{record_id}/upload",
            auth=True,
            fields=fields,
            files=[("images", image) for image in images],
            fallback_error="Failed to update project",
        )


class CareersClient(ResourceClient):
    path = "/careers"
    label = "job opening"
    public_reads = True


class ApplicationsClient(ResourceClient):
    path = "/applications"
    label = "application"

    def accept(self, record_id: int) -> Record:
        return self.api.request(
            "PUT",
            f"{self.path}/{record_id}/accept",
            auth=True,
            fallback_error="Failed to accept application",
        )

    def reject(self, record_id: int) -> Record:
        return self.api.request(
            "PUT",
            f"{self.path}/{record_id}/reject",
            auth=True,
            fallback_error="Failed to reject application",
        )

    def submit(self, payload: Mapping[str, Any], resume: FileUpload | None = None) -> Record:
        """Public submission; multipart when a resume is attached."""
        if resume is None:
            return self.api.request(
                "POST",
                self.path,
                json_body=dict(payload),
                fallback_error="Failed to submit application",
            )
        return self.api.request(
            "POST",
            "/upload-application",
            fields=payload,
            files=[("resume", resume)],
            fallback_error="Failed to submit application",
        )


class TeamClient(ResourceClient):
    path = "/team"
    label = "team member"
    public_reads = True

    def create_with_photo(self, payload: Mapping[str, Any], image: FileUpload | None = None) -> Record:
        return self.api.request(
            "POST",
            f"{self.path}/upload",
            auth=True,
            fields=payload,
            files=[("image", image)] if image else [],
            fallback_error="Failed to create team member",
        )

    def update(self, record_id: int, payload: Mapping[str, Any], image: FileUpload | None = None) -> Record:
        """Team updates are always multipart, with an optional new photo."""
        return self.api.request(
            "PUT",
            f"{self.path}/{record_id}",
            auth=True,
            fields={k: v for k, v in payload.items() if k != "image"},
            files=[("image", image)] if image else [],
            fallback_error="Failed to update team member",
        )


class InvestmentsClient(ResourceClient):
    path = "/investments"
    label = "investment"

    def submit_inquiry(self, payload: Mapping[str, Any]) -> Record:
        """Unauthenticated create used by the public inquiry form."""
        return self.api.request(
            "POST",
            f"{self.path}/inquiry",
            json_body=dict(payload),
            fallback_error="Failed to submit inquiry",
        )


class ContactsClient(ResourceClient):
    path = "/contacts"
    label = "contact"

    def submit(self, payload: Mapping[str, Any]) -> Record:
        return self.api.request(
            "POST",
            self.path,
            json_body=dict(payload),
            fallback_error="Failed to send message",
        )


class AdminUsersClient:
    """Admin accounts: list, create and remove only.

    Accounts are edited by their owners through the profile endpoint, so
    there is no ``update`` here.
    """

    path = "/auth/admin/users"

    def __init__(self, api: ApiClient) -> None:
        self.api = api

    def list(self) -> list[Record]:
        result = self.api.request("GET", self.path, auth=True, fallback_error="Failed to fetch users")
        return list((result or {}).get("users") or [])

    def get_by_id(self, record_id: int) -> Record:
        """Look a user up in the listing; there is no per-user endpoint.

        Raises:
            ApiError: With status 404 when no such user exists.
        """
        for user in self.list():
            if user.get("id") == record_id:
                return user
        raise ApiError("User not found", 404)

    def create(self, payload: Mapping[str, Any]) -> Record:
        return self.api.request(
            "POST",
            self.path,
            auth=True,
            json_body=dict(payload),
            fallback_error="Failed to create user",
        )

    def remove(self, record_id: int) -> None:
        self.api.request(
            "DELETE",
            f"{self.path}/{record_id}",
            auth=True,
            fallback_error="Failed to delete user",
        )
