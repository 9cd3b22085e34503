"""Overview screen: per-resource counts and a recent-activity feed."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from house_major.client.base import ApiError
from house_major.client.resources import ResourceClient
from house_major.dashboard.listing import PageView, clamp_page, paginate, total_pages

logger = logging.getLogger(__name__)

ACTIVITY_PAGE_SIZE = 4

# section id -> (count label, how many recent rows feed the activity list, describe)
_FEEDS: dict[str, tuple[str, int, Callable[[dict[str, Any]], str]]] = {
    "applications": (
        "Applications",
        3,
        lambda r: f"New application from {r.get('fullName')} for "
        f"{r.get('jobTitle') or 'General Position'}",
    ),
    "portfolio": ("Portfolio Projects", 2, lambda r: f'Project "{r.get("title")}" added to portfolio'),
    "services": ("Total Services", 2, lambda r: f'Service "{r.get("title")}" added'),
    "investments": (
        "Investment Inquiries",
        2,
        lambda r: f"New investment inquiry: {r.get('title')}",
    ),
    "job-openings": ("Job Openings", 2, lambda r: f"Job opening posted: {r.get('title')}"),
    "team": ("Team Members", 2, lambda r: f"Team member added: {r.get('name')}"),
    "contacts": ("Contacts", 2, lambda r: f"New contact inquiry from {r.get('name')}"),
}


@dataclass(frozen=True)
class Activity:
    section: str
    description: str
    created_at: str


class OverviewScreen:
    """Dashboard landing screen."""

    def __init__(self, clients: Mapping[str, ResourceClient]) -> None:
        self.clients = dict(clients)
        self.counts: dict[str, int] = {}
        self.activities: list[Activity] = []
        self.activity_page = 1
        self.loading = False
        self.mounted = False
        self.dark_mode = False
        self._generation = 0

    def mount(self, load: bool = True) -> None:
        self.mounted = True
        if load:
            self.load()

    def unmount(self) -> None:
        self.mounted = False

    def _fetch_section(self, section: str) -> list[dict[str, Any]]:
        client = self.clients.get(section)
        if client is None:
            return []
        try:
            return client.list()
        except ApiError as exc:
            logger.warning("Overview could not load %s: %s", section, exc.message)
            return []

    def begin_load(self) -> int:
        self._generation += 1
        self.loading = True
        return self._generation

    def fetch(self) -> dict[str, list[dict[str, Any]]]:
        """Rows per section; a failing resource yields no rows."""
        return {section: self._fetch_section(section) for section in _FEEDS}

    def finish_load(
        self,
        generation: int,
        rows: dict[str, list[dict[str, Any]]] | None = None,
        error: str | None = None,
    ) -> bool:
        """Rebuild counts and the activity feed unless the result is stale."""
        if not self.mounted or generation != self._generation:
            return False
        self.loading = False
        if error is not None:
            logger.warning("Overview load failed: %s", error)
            return True
        counts: dict[str, int] = {}
        activities: list[Activity] = []
        for section, (_label, recent, describe) in _FEEDS.items():
            section_rows = (rows or {}).get(section, [])
            counts[section] = len(section_rows)
            for row in section_rows[:recent]:
                activities.append(
                    Activity(
                        section=section,
                        description=describe(row),
                        created_at=str(row.get("createdAt") or ""),
                    )
                )
        # ISO-8601 timestamps sort chronologically as text.
        activities.sort(key=lambda a: a.created_at, reverse=True)
        self.counts = counts
        self.activities = activities
        self.activity_page = clamp_page(self.activity_page, self.activity_pages)
        return True

    def load(self) -> None:
        """Fetch every resource; a failing resource counts as zero."""
        generation = self.begin_load()
        self.finish_load(generation, self.fetch())

    def stats(self) -> list[tuple[str, int]]:
        return [(label, self.counts.get(section, 0)) for section, (label, _, _) in _FEEDS.items()]

    @property
    def activity_pages(self) -> int:
        return total_pages(len(self.activities), ACTIVITY_PAGE_SIZE)

    def activity_view(self) -> PageView[Activity]:
        return PageView(
            items=paginate(self.activities, self.activity_page, ACTIVITY_PAGE_SIZE),
            total_pages=self.activity_pages,
            page=self.activity_page,
            total_items=len(self.activities),
        )

    def set_activity_page(self, page: int) -> None:
        self.activity_page = clamp_page(page, self.activity_pages)
