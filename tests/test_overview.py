from __future__ import annotations

from house_major.client.base import ApiError
from house_major.dashboard.overview import OverviewScreen

from fakes import MemoryClient


def _overview() -> tuple[OverviewScreen, dict[str, MemoryClient]]:
    clients = {
        "applications": MemoryClient(
            [
                {"id": i, "fullName": f"Applicant {i}", "jobTitle": None, "createdAt": f"2024-01-0{i}T10:00:00"}
                for i in range(1, 5)
            ]
        ),
        "services": MemoryClient(
            [{"id": 1, "title": "DevOps", "createdAt": "2024-02-01T09:00:00"}]
        ),
        "contacts": MemoryClient([]),
        "team": MemoryClient([]),
    }
    clients["contacts"].fail_with = ApiError("boom", 500)
    return OverviewScreen(clients), clients


def test_counts_and_failures_count_as_zero() -> None:
    overview, _ = _overview()
    overview.mount()
    stats = dict(overview.stats())
    assert stats["Applications"] == 4
    assert stats["Total Services"] == 1
    assert stats["Contacts"] == 0
    assert stats["Portfolio Projects"] == 0


def test_activity_feed_is_newest_first_and_capped_per_resource() -> None:
    overview, _ = _overview()
    overview.mount()
    descriptions = [a.description for a in overview.activities]
    assert descriptions[0] == 'Service "DevOps" added'
    # Only the first three applications feed the activity list.
    assert len([d for d in descriptions if d.startswith("New application")]) == 3
    assert "New application from Applicant 1 for General Position" in descriptions


def test_activity_pagination_clamps() -> None:
    overview, _ = _overview()
    overview.mount()
    assert overview.activity_pages == 1
    overview.set_activity_page(5)
    assert overview.activity_page == 1
    assert len(overview.activity_view().items) == 4


def test_activity_feed_pages_four_at_a_time() -> None:
    overview, clients = _overview()
    clients["team"].records.append({"id": 1, "name": "Eric", "createdAt": "2023-12-01T08:00:00"})
    overview.mount()
    assert len(overview.activities) == 5
    assert overview.activity_pages == 2
    overview.set_activity_page(2)
    assert [a.description for a in overview.activity_view().items] == ["Team member added: Eric"]


def test_load_after_unmount_is_ignored() -> None:
    overview, clients = _overview()
    overview.mount()
    overview.unmount()
    clients["services"].records.append({"id": 2, "title": "SEO"})
    overview.load()
    assert dict(overview.stats())["Total Services"] == 1
