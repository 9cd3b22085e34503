"""Tests for HouseMajorTUI helpers that do not need a running app."""

from __future__ import annotations

from pathlib import Path

from fakes import MemoryClient

from house_major.client.auth import LocalStore
from house_major.client.base import TOKEN_KEY, ApiClient
from house_major.dashboard.action_menu import ActionItem
from house_major.dashboard.resources import PORTFOLIO
from house_major.dashboard.screens import ManagementScreen
from house_major.tui import DESTRUCTIVE_ACTIONS, HouseMajorTUI, _noun


def _app(tmp_path: Path) -> HouseMajorTUI:
    store = LocalStore(tmp_path / "local_storage.json")
    return HouseMajorTUI(api=ApiClient(base_url="http://testserver", token_store=store), store=store)


def _portfolio_screen() -> ManagementScreen:
    screen = ManagementScreen(PORTFOLIO, MemoryClient(), lambda prompt: True)
    screen.open_create()
    return screen


class TestConfirmation:
    def test_confirm_without_pending_action_is_a_noop(self, tmp_path: Path) -> None:
        app = _app(tmp_path)
        app.action_confirm()
        assert app._pending is None
        assert app._callbacks == {}

    def test_pending_action_for_a_hidden_screen_is_dropped(self, tmp_path: Path) -> None:
        app = _app(tmp_path)
        app._pending = (_portfolio_screen(), 1, ActionItem.DELETE)
        app.action_confirm()
        assert app._pending is None
        assert app._callbacks == {}

    def test_only_mutating_actions_ask_for_confirmation(self) -> None:
        assert ActionItem.DELETE in DESTRUCTIVE_ACTIONS
        assert ActionItem.VIEW not in DESTRUCTIVE_ACTIONS
        assert ActionItem.EDIT not in DESTRUCTIVE_ACTIONS

    def test_noun_names_the_row(self) -> None:
        assert _noun(_portfolio_screen()) == "project"


class TestAttachFiles:
    def test_image_path_is_attached(self, tmp_path: Path) -> None:
        image = tmp_path / "shot.png"
        image.write_bytes(b"\x89PNG")
        app = _app(tmp_path)
        screen = _portfolio_screen()
        draft = {"images": [str(image)]}
        assert app._attach_files(screen, draft) is None
        assert "images" not in draft
        (upload,) = screen.form.files["images"]
        assert upload.filename == "shot.png"
        assert upload.content_type == "image/png"

    def test_single_path_string_is_accepted(self, tmp_path: Path) -> None:
        image = tmp_path / "shot.png"
        image.write_bytes(b"\x89PNG")
        app = _app(tmp_path)
        screen = _portfolio_screen()
        assert app._attach_files(screen, {"images": str(image)}) is None
        assert len(screen.form.files["images"]) == 1

    def test_missing_file_is_reported(self, tmp_path: Path) -> None:
        app = _app(tmp_path)
        screen = _portfolio_screen()
        error = app._attach_files(screen, {"images": [str(tmp_path / "gone.png")]})
        assert error is not None
        assert error.startswith("Images: cannot read")
        assert "images" not in screen.form.files

    def test_rule_violation_is_reported(self, tmp_path: Path) -> None:
        notes = tmp_path / "notes.txt"
        notes.write_text("not an image")
        app = _app(tmp_path)
        screen = _portfolio_screen()
        error = app._attach_files(screen, {"images": [str(notes)]})
        assert error == "Invalid file type. Only images allowed."
        assert screen.form.errors["images"] == error

    def test_empty_selection_clears_attachments(self, tmp_path: Path) -> None:
        image = tmp_path / "shot.png"
        image.write_bytes(b"\x89PNG")
        app = _app(tmp_path)
        screen = _portfolio_screen()
        app._attach_files(screen, {"images": [str(image)]})
        assert app._attach_files(screen, {"images": []}) is None
        assert "images" not in screen.form.files


class TestInitialState:
    def test_starts_signed_out_without_dashboard(self, tmp_path: Path) -> None:
        app = _app(tmp_path)
        assert app._gate.is_authenticated() is False
        assert app._shell is None
        assert app._screen is None

    def test_stored_token_counts_as_signed_in(self, tmp_path: Path) -> None:
        store = LocalStore(tmp_path / "local_storage.json")
        store.set(TOKEN_KEY, "abc")
        app = HouseMajorTUI(api=ApiClient(base_url="http://testserver", token_store=store), store=store)
        assert app._gate.is_authenticated() is True
