"""Dashboard shell: mounts exactly one section screen at a time."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from house_major.client.auth import AuthGate
from house_major.client.base import ApiClient
from house_major.client.resources import AdminUsersClient
from house_major.dashboard.overview import OverviewScreen
from house_major.dashboard.profile import ProfileScreen
from house_major.dashboard.resources import MANAGEMENT_SECTIONS
from house_major.dashboard.screens import Confirm, ManagementScreen

logger = logging.getLogger(__name__)

DEFAULT_SECTION = "overview"
SECTION_ORDER = (
    "overview",
    "services",
    "portfolio",
    "job-openings",
    "applications",
    "team",
    "investments",
    "contacts",
    "profile",
)


class Screen(Protocol):
    dark_mode: bool

    def mount(self, load: bool = True) -> None: ...

    def unmount(self) -> None: ...


class DashboardShell:
    """Section switcher holding the shared theme flag and no resource state."""

    def __init__(
        self,
        registry: Mapping[str, Callable[[], Screen]],
        dark_mode: bool = False,
    ) -> None:
        if DEFAULT_SECTION not in registry:
            raise ValueError(f"registry must provide '{DEFAULT_SECTION}'")
        self.registry = dict(registry)
        self.dark_mode = dark_mode
        self.active_section: str | None = None
        self.active_screen: Screen | None = None

    @property
    def sections(self) -> list[str]:
        return [s for s in SECTION_ORDER if s in self.registry] + [
            s for s in self.registry if s not in SECTION_ORDER
        ]

    def set_active_section(self, section_id: str, load: bool = True) -> Screen:
        """Switch to ``section_id``; unknown ids fall back to the overview.

        With ``load=False`` the new screen is mounted without fetching, for
        callers that run the fetch themselves.
        """
        if section_id not in self.registry:
            logger.debug("Unknown section %r; showing overview", section_id)
            section_id = DEFAULT_SECTION
        if self.active_screen is not None:
            self.active_screen.unmount()
        screen = self.registry[section_id]()
        screen.dark_mode = self.dark_mode
        self.active_section = section_id
        self.active_screen = screen
        screen.mount(load=load)
        return screen

    def toggle_theme(self) -> bool:
        self.dark_mode = not self.dark_mode
        if self.active_screen is not None:
            self.active_screen.dark_mode = self.dark_mode
        return self.dark_mode


def build_dashboard(api: ApiClient, gate: AuthGate, confirm: Confirm) -> DashboardShell:
    """Wire every section of the admin dashboard against one API client."""
    clients = {section_id: cfg.client_factory(api) for section_id, cfg in MANAGEMENT_SECTIONS.items()}

    def management(section_id: str) -> Callable[[], Any]:
        return lambda: ManagementScreen(MANAGEMENT_SECTIONS[section_id], clients[section_id], confirm)

    registry: dict[str, Callable[[], Any]] = {
        DEFAULT_SECTION: lambda: OverviewScreen(clients),
        "profile": lambda: ProfileScreen(gate, AdminUsersClient(api), confirm),
    }
    for section_id in MANAGEMENT_SECTIONS:
        registry[section_id] = management(section_id)
    return DashboardShell(registry)
