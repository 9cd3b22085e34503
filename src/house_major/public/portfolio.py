"""Portfolio section: category filter with a collapsed "first three" view."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

ALL_PROJECTS = "All Projects"
CATEGORIES = (
    ALL_PROJECTS,
    "Software development",
    "Data security",
    "Tech consultancy",
    "Ai model development",
    "DevOps",
    "Cybersecurity",
    "Geospatial analysis",
)
COLLAPSED_COUNT = 3


def filter_by_category(projects: Sequence[dict[str, Any]], category: str) -> list[dict[str, Any]]:
    """Exact category match; ``All Projects`` keeps everything."""
    if category == ALL_PROJECTS:
        return list(projects)
    return [p for p in projects if p.get("category") == category]


class PortfolioSection:
    def __init__(self, projects: Sequence[dict[str, Any]] = ()) -> None:
        self.projects = list(projects)
        self.category = ALL_PROJECTS
        self.show_all = False

    def set_projects(self, projects: Sequence[dict[str, Any]]) -> None:
        self.projects = list(projects)

    def select_category(self, category: str) -> None:
        if category not in CATEGORIES:
            raise ValueError(f"Unknown category: {category}")
        self.category = category
        self.show_all = False

    def toggle_show_all(self) -> None:
        self.show_all = not self.show_all

    @property
    def filtered(self) -> list[dict[str, Any]]:
        return filter_by_category(self.projects, self.category)

    @property
    def visible(self) -> list[dict[str, Any]]:
        filtered = self.filtered
        return filtered if self.show_all else filtered[:COLLAPSED_COUNT]

    @property
    def has_more(self) -> bool:
        return len(self.filtered) > COLLAPSED_COUNT
