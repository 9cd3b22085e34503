from __future__ import annotations

import pytest

from house_major.icons import ServiceIcon
from house_major.public.portfolio import ALL_PROJECTS, PortfolioSection, filter_by_category
from house_major.public.services import to_card

PROJECTS = [
    {"id": i, "title": f"P{i}", "category": "DevOps" if i % 2 else "Cybersecurity"} for i in range(1, 8)
]


def test_filter_by_category_is_exact() -> None:
    assert [p["id"] for p in filter_by_category(PROJECTS, "DevOps")] == [1, 3, 5, 7]
    assert filter_by_category(PROJECTS, "devops") == []
    assert len(filter_by_category(PROJECTS, ALL_PROJECTS)) == 7


def test_collapsed_view_shows_three() -> None:
    section = PortfolioSection(PROJECTS)
    assert len(section.visible) == 3
    assert section.has_more
    section.toggle_show_all()
    assert len(section.visible) == 7


def test_selecting_category_collapses_again() -> None:
    section = PortfolioSection(PROJECTS)
    section.toggle_show_all()
    section.select_category("Cybersecurity")
    assert not section.show_all
    assert [p["id"] for p in section.visible] == [2, 4, 6]
    assert not section.has_more


def test_unknown_category_is_rejected() -> None:
    with pytest.raises(ValueError):
        PortfolioSection().select_category("Gardening")


def test_service_card_falls_back_to_placeholder_icon() -> None:
    card = to_card({"title": "SEO", "description": "d", "icon": "RocketIcon"})
    assert card.icon is ServiceIcon.PLACEHOLDER
    assert to_card({"title": "Cloud", "icon": "CloudIcon"}).icon is ServiceIcon.CLOUD
