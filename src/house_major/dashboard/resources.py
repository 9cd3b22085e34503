"""Per-section configuration of the management screens.

Each section names its resource client, page size, searchable fields, row
actions, table columns and (where it has one) its create/edit form.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from house_major.client.base import ApiClient, FileUpload
from house_major.client.resources import (
    ApplicationsClient,
    CareersClient,
    ContactsClient,
    InvestmentsClient,
    ProjectsClient,
    ResourceClient,
    ServicesClient,
    TeamClient,
)
from house_major.dashboard.action_menu import ActionItem
from house_major.dashboard.forms import (
    FileField,
    FormField,
    JsonField,
    ListField,
    NestedGroup,
    TextField,
)
from house_major.dashboard.listing import SearchField
from house_major.icons import selectable_icons
from house_major.upload_rules import MAX_PROJECT_IMAGES, PROFILE_PHOTO_RULE, PROJECT_IMAGE_RULE

Files = dict[str, list[FileUpload]]
Saver = Callable[[Any, int | None, dict[str, Any], Files], dict[str, Any]]

CRUD_ACTIONS = (ActionItem.VIEW, ActionItem.EDIT, ActionItem.DELETE)
REVIEW_ACTIONS = (ActionItem.VIEW, ActionItem.ACCEPT, ActionItem.REJECT, ActionItem.DELETE)
READ_ONLY_ACTIONS = (ActionItem.VIEW, ActionItem.DELETE)


@dataclass(frozen=True)
class SectionConfig:
    id: str
    title: str
    noun: str
    client_factory: Callable[[ApiClient], ResourceClient]
    page_size: int
    search_fields: tuple[SearchField, ...]
    actions: tuple[ActionItem, ...]
    columns: tuple[tuple[str, SearchField], ...]
    form_fields: tuple[FormField, ...] = ()
    saver: Saver | None = None

    @property
    def has_form(self) -> bool:
        return bool(self.form_fields) and self.saver is not None


def _json_saver(client: ResourceClient, record_id: int | None, payload: dict, files: Files) -> dict:
    if record_id is None:
        return client.create(payload)
    return client.update(record_id, payload)


def _project_saver(client: ProjectsClient, record_id: int | None, payload: dict, files: Files) -> dict:
    images = files.get("images", [])
    if record_id is None:
        return client.create_with_images(payload, images)
    return client.update_with_images(record_id, payload, images)


def _team_saver(client: TeamClient, record_id: int | None, payload: dict, files: Files) -> dict:
    photos = files.get("image", [])
    photo = photos[0] if photos else None
    if record_id is None:
        return client.create_with_photo(payload, photo)
    return client.update(record_id, payload, photo)


def _application_status(record: dict[str, Any]) -> str:
    return record.get("status") or "Pending"


SERVICES = SectionConfig(
    id="services",
    title="Services",
    noun="service",
    client_factory=ServicesClient,
    page_size=6,
    search_fields=("title", "description", "icon"),
    actions=CRUD_ACTIONS,
    columns=(("Title", "title"), ("Icon", "icon"), ("Description", "description")),
    form_fields=(
        TextField("title", "Title", required=True),
        TextField("description", "Description", required=True, multiline=True),
        TextField(
            "icon",
            "Icon",
            required=True,
            choices=tuple(icon.value for icon in selectable_icons()),
        ),
    ),
    saver=_json_saver,
)

PORTFOLIO = SectionConfig(
    id="portfolio",
    title="Portfolio",
    noun="project",
    client_factory=ProjectsClient,
    page_size=6,
    search_fields=("title", "category", "client.name"),
    actions=CRUD_ACTIONS,
    columns=(("Title", "title"), ("Category", "category"), ("Client", "client.name"), ("Date", "date")),
    form_fields=(
        TextField("title", "Title", required=True),
        TextField("category", "Category", required=True),
        TextField("description", "Description", required=True, multiline=True),
        TextField("fullDescription", "Full description", multiline=True),
        TextField("date", "Date", required=True),
        TextField("duration", "Duration"),
        NestedGroup("client", "Client", keys=("name", "logo", "industry", "location")),
        ListField("features", "Features"),
        ListField("tags", "Tags"),
        ListField("team", "Team"),
        NestedGroup("externalLinks", "External links", keys=("live", "github"), omit_empty=True),
        NestedGroup("downloadLinks", "Download links", keys=("ios", "android"), omit_empty=True),
        JsonField("results", "Results", expected=list),
        FileField(
            "images",
            "Images",
            rule=PROJECT_IMAGE_RULE,
            multiple=True,
            max_files=MAX_PROJECT_IMAGES,
        ),
    ),
    saver=_project_saver,
)

JOB_OPENINGS = SectionConfig(
    id="job-openings",
    title="Job Openings",
    noun="job opening",
    client_factory=CareersClient,
    page_size=10,
    search_fields=("title", "department", "location", "type"),
    actions=CRUD_ACTIONS,
    columns=(
        ("Title", "title"),
        ("Department", "department"),
        ("Location", "location"),
        ("Type", "type"),
        ("Applications", "applicationCount"),
    ),
    form_fields=(
        TextField("title", "Title", required=True),
        TextField("department", "Department", required=True),
        TextField("type", "Type", required=True),
        TextField("location", "Location", required=True),
        TextField("salary", "Salary"),
        TextField("experience", "Experience"),
        TextField("posted", "Posted"),
        TextField("description", "Description", required=True, multiline=True),
        ListField("requirements", "Requirements"),
        ListField("responsibilities", "Responsibilities"),
    ),
    saver=_json_saver,
)

APPLICATIONS = SectionConfig(
    id="applications",
    title="Applications",
    noun="application",
    client_factory=ApplicationsClient,
    page_size=10,
    search_fields=("fullName", "email", "jobTitle", _application_status),
    actions=REVIEW_ACTIONS,
    columns=(
        ("Name", "fullName"),
        ("Email", "email"),
        ("Position", "jobTitle"),
        ("Status", _application_status),
    ),
)

TEAM = SectionConfig(
    id="team",
    title="Team",
    noun="team member",
    client_factory=TeamClient,
    page_size=6,
    search_fields=("name", "role", "email"),
    actions=CRUD_ACTIONS,
    columns=(("Name", "name"), ("Role", "role"), ("Email", "email")),
    form_fields=(
        TextField("name", "Name", required=True),
        TextField("role", "Role", required=True),
        TextField("bio", "Bio", multiline=True),
        TextField("email", "Email"),
        TextField("linkedin", "LinkedIn"),
        TextField("github", "GitHub"),
        FileField("image", "Photo", rule=PROFILE_PHOTO_RULE),
    ),
    saver=_team_saver,
)

INVESTMENTS = SectionConfig(
    id="investments",
    title="Investments",
    noun="investment",
    client_factory=InvestmentsClient,
    page_size=6,
    search_fields=("title", "description", "email"),
    actions=CRUD_ACTIONS,
    columns=(("Title", "title"), ("Email", "email"), ("Description", "description")),
    form_fields=(
        TextField("title", "Title", required=True),
        TextField("description", "Description", required=True, multiline=True),
        TextField("email", "Email"),
    ),
    saver=_json_saver,
)

CONTACTS = SectionConfig(
    id="contacts",
    title="Contacts",
    noun="contact",
    client_factory=ContactsClient,
    page_size=6,
    search_fields=("name", "email", "message"),
    actions=READ_ONLY_ACTIONS,
    columns=(("Name", "name"), ("Email", "email"), ("Message", "message")),
)

MANAGEMENT_SECTIONS: dict[str, SectionConfig] = {
    section.id: section
    for section in (SERVICES, PORTFOLIO, JOB_OPENINGS, APPLICATIONS, TEAM, INVESTMENTS, CONTACTS)
}
