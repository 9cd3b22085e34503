"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from dotenv import load_dotenv

from house_major import config


def test_dotenv_file_feeds_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", "")
    monkeypatch.delenv("JWT_SECRET")
    monkeypatch.setenv("CORS_ORIGINS", "")
    monkeypatch.delenv("CORS_ORIGINS")
    env_file = tmp_path / ".env"
    env_file.write_text("JWT_SECRET=from-dotenv\nCORS_ORIGINS=https://housemajor.rw, http://localhost:3000\n")

    assert load_dotenv(env_file) is True
    assert config.get_jwt_secret() == "from-dotenv"
    assert config.get_cors_origins() == ["https://housemajor.rw", "http://localhost:3000"]


def test_real_environment_wins_over_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", "from-shell")
    env_file = tmp_path / ".env"
    env_file.write_text("JWT_SECRET=from-dotenv\n")

    load_dotenv(env_file)
    assert config.get_jwt_secret() == "from-shell"


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("JWT_SECRET", "JWT_EXPIRE_MINUTES", "HOUSE_MAJOR_API_URL", "SMTP_HOST"):
        monkeypatch.delenv(name, raising=False)
    assert config.get_jwt_secret() == config.DEFAULT_JWT_SECRET
    assert config.get_jwt_expire_minutes() == config.DEFAULT_JWT_EXPIRE_MINUTES
    assert config.get_api_url() == config.DEFAULT_API_URL
    assert config.get_smtp_settings() is None


def test_bad_expiry_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_EXPIRE_MINUTES", "soon")
    assert config.get_jwt_expire_minutes() == config.DEFAULT_JWT_EXPIRE_MINUTES
    monkeypatch.setenv("JWT_EXPIRE_MINUTES", "0")
    assert config.get_jwt_expire_minutes() == 1


def test_api_url_drops_trailing_slash(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOUSE_MAJOR_API_URL", "https://api.housemajor.rw/")
    assert config.get_api_url() == "https://api.housemajor.rw"
