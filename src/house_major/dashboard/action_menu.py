"""Per-table row action menu: at most one row's menu is open at a time."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from enum import StrEnum

# Rows past this index open their menu upward.
UPWARD_FROM_INDEX = 3


class ActionItem(StrEnum):
    VIEW = "view"
    EDIT = "edit"
    DELETE = "delete"
    ACCEPT = "accept"
    REJECT = "reject"


class MenuDirection(StrEnum):
    UP = "up"
    DOWN = "down"


def direction_for(row_index: int, threshold: int = UPWARD_FROM_INDEX) -> MenuDirection:
    """Which way the menu for the row at ``row_index`` (0-based) opens."""
    return MenuDirection.UP if row_index > threshold else MenuDirection.DOWN


class ActionMenu:
    """Tracks the single open row menu of one table."""

    def __init__(self, actions: Sequence[ActionItem]) -> None:
        self.actions = tuple(actions)
        self.active_id: Hashable | None = None

    def toggle(self, row_id: Hashable) -> None:
        self.active_id = None if self.active_id == row_id else row_id

    def close_all(self) -> None:
        self.active_id = None

    def is_open(self, row_id: Hashable) -> bool:
        return self.active_id is not None and self.active_id == row_id

    def select(self, row_id: Hashable, action: ActionItem) -> ActionItem:
        """Pick an action from a row's menu; the menu closes either way.

        Raises:
            ValueError: If this table doesn't offer ``action``.
        """
        self.close_all()
        if action not in self.actions:
            raise ValueError(f"Action {action!s} is not available here")
        return action

    def handle_outside_click(self) -> None:
        self.close_all()

    def handle_key(self, key: str) -> bool:
        """Close the open menu on Escape; returns whether the key was consumed."""
        if key.lower() in {"escape", "esc"} and self.active_id is not None:
            self.close_all()
            return True
        return False
