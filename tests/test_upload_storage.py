from __future__ import annotations

from pathlib import Path

import pytest

from house_major.services.upload_storage import (
    delete_upload,
    resolve_upload_path,
    store_upload,
)


@pytest.fixture(autouse=True)
def upload_root(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    root = tmp_path / "uploads"
    monkeypatch.setenv("HOUSE_MAJOR_UPLOAD_DIR", root.as_posix())
    return root


def test_store_and_delete_roundtrip(upload_root: Path) -> None:
    url = store_upload("team", "My Photo (1).png", b"img")
    assert url.startswith("/uploads/team/")
    assert url.endswith("-My-Photo-1-.png")

    stored = list((upload_root / "team").iterdir())
    assert len(stored) == 1
    assert stored[0].read_bytes() == b"img"

    assert delete_upload(url) is True
    assert not stored[0].exists()
    assert delete_upload(url) is False


def test_unknown_folder_is_refused() -> None:
    with pytest.raises(ValueError):
        store_upload("secrets", "a.txt", b"x")
    assert resolve_upload_path("secrets", "a.txt") is None


def test_path_traversal_is_not_addressable() -> None:
    assert resolve_upload_path("team", "../api.db") is None


@pytest.mark.parametrize(
    "url",
    [None, "", "https://images.unsplash.com/photo.jpg", "/uploads/team", "/uploads/team/a/b"],
)
def test_foreign_urls_are_ignored(url: str | None) -> None:
    assert delete_upload(url) is False
