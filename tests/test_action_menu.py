from __future__ import annotations

import pytest

from house_major.dashboard.action_menu import ActionItem, ActionMenu, MenuDirection, direction_for


def _menu() -> ActionMenu:
    return ActionMenu((ActionItem.VIEW, ActionItem.EDIT, ActionItem.DELETE))


def test_only_one_menu_open_at_a_time() -> None:
    menu = _menu()
    menu.toggle(1)
    menu.toggle(2)
    assert not menu.is_open(1)
    assert menu.is_open(2)


def test_toggle_same_row_closes() -> None:
    menu = _menu()
    menu.toggle(1)
    menu.toggle(1)
    assert not menu.is_open(1)


def test_select_closes_and_validates_action() -> None:
    menu = _menu()
    menu.toggle(1)
    assert menu.select(1, ActionItem.EDIT) is ActionItem.EDIT
    assert not menu.is_open(1)
    with pytest.raises(ValueError):
        menu.select(1, ActionItem.ACCEPT)


def test_outside_click_and_escape_close() -> None:
    menu = _menu()
    menu.toggle(4)
    menu.handle_outside_click()
    assert menu.active_id is None

    menu.toggle(4)
    assert menu.handle_key("Enter") is False
    assert menu.is_open(4)
    assert menu.handle_key("Escape") is True
    assert not menu.is_open(4)
    assert menu.handle_key("Escape") is False


@pytest.mark.parametrize(
    ("index", "direction"),
    [(0, MenuDirection.DOWN), (3, MenuDirection.DOWN), (4, MenuDirection.UP), (9, MenuDirection.UP)],
)
def test_rows_past_index_three_open_upward(index: int, direction: MenuDirection) -> None:
    assert direction_for(index) is direction
