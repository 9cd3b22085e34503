from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from house_major.data.db import dispose_engine, init_db


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Use a temporary SQLite DB, upload root and state dir for API tests."""
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    monkeypatch.setenv("HOUSE_MAJOR_UPLOAD_DIR", (tmp_path / "uploads").as_posix())
    monkeypatch.setenv("HOUSE_MAJOR_STATE_DIR", (tmp_path / "state").as_posix())
    monkeypatch.delenv("SMTP_HOST", raising=False)
    dispose_engine()
    init_db()
    yield
    # Dispose engine to release connections
    dispose_engine()


@pytest.fixture
def admin_headers(api_db: None) -> dict[str, str]:
    """Bearer headers for a freshly created admin account."""
    from house_major.services.auth import create_access_token, create_user

    user = create_user("admin", "admin@housemajor.rw", "secret123")
    return {"Authorization": f"Bearer {create_access_token(user['id'], user['email'])}"}


@pytest.fixture(autouse=True)
def _api_db_for_api_tests(request: pytest.FixtureRequest) -> None:
    """Automatically use the api_db fixture in API test files."""
    test_file_path = Path(str(request.node.fspath))
    if "api" in test_file_path.stem.lower():
        request.getfixturevalue("api_db")
