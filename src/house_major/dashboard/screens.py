"""Management screen: fetch, filter, paginate, act, re-fetch.

The screen owns its list state, action menu and form. Every successful
mutation is followed by a full re-fetch; nothing is patched locally.
Destructive actions ask ``confirm`` first and do nothing if it says no.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from house_major.client.base import ApiError
from house_major.client.resources import ApplicationsClient, ResourceClient
from house_major.dashboard.action_menu import ActionItem, ActionMenu, MenuDirection, direction_for
from house_major.dashboard.forms import FormController
from house_major.dashboard.listing import ListState, PageView
from house_major.dashboard.resources import SectionConfig

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]


class ManagementScreen:
    """One admin table over one resource."""

    def __init__(self, section: SectionConfig, client: ResourceClient, confirm: Confirm) -> None:
        self.section = section
        self.client = client
        self.confirm = confirm
        self.items: list[dict[str, Any]] = []
        self.list_state = ListState(page_size=section.page_size, fields=section.search_fields)
        self.menu = ActionMenu(section.actions)
        self.form: FormController | None = None
        if section.has_form:
            self.form = FormController(
                section.form_fields,
                save=lambda record_id, payload, files: section.saver(
                    self.client, record_id, payload, files
                ),
                on_saved=lambda _record: self.load(),
            )
        self.viewing: dict[str, Any] | None = None
        self.loading = False
        self.error: str | None = None
        self.mounted = False
        self.dark_mode = False
        self._generation = 0

    # Lifecycle -----------------------------------------------------------

    def mount(self, load: bool = True) -> None:
        self.mounted = True
        if load:
            self.load()

    def unmount(self) -> None:
        self.mounted = False
        self.menu.close_all()

    def begin_load(self) -> int:
        """Start a fetch; returns the generation its result must present."""
        self._generation += 1
        self.loading = True
        return self._generation

    def finish_load(
        self,
        generation: int,
        items: list[dict[str, Any]] | None = None,
        error: str | None = None,
    ) -> bool:
        """Apply a fetch result unless it is stale.

        Returns:
            False when the screen was unmounted or a newer fetch started.
        """
        if not self.mounted or generation != self._generation:
            logger.debug("Discarding stale %s response", self.section.id)
            return False
        self.loading = False
        if error is not None:
            self.error = error
            return True
        self.items = list(items or [])
        self.error = None
        self.list_state.clamp(self.items)
        return True

    def fetch(self) -> list[dict[str, Any]]:
        return self.client.list()

    def load(self) -> None:
        generation = self.begin_load()
        try:
            items = self.fetch()
        except ApiError as exc:
            logger.warning("Failed to load %s: %s", self.section.id, exc.message)
            self.finish_load(generation, error=exc.message or f"Failed to load {self.section.noun}s")
            return
        self.finish_load(generation, items=items)

    # List ----------------------------------------------------------------

    def current_view(self) -> PageView[dict[str, Any]]:
        return self.list_state.view(self.items)

    def search(self, query: str) -> None:
        self.list_state.set_query(query)
        self.menu.close_all()

    def next_page(self) -> None:
        self.list_state.next_page(self.items)
        self.menu.close_all()

    def previous_page(self) -> None:
        self.list_state.previous_page()
        self.menu.close_all()

    def menu_direction(self, row_index: int) -> MenuDirection:
        return direction_for(row_index)

    def _find(self, row_id: int) -> dict[str, Any] | None:
        for item in self.items:
            if item.get("id") == row_id:
                return item
        return None

    # Actions -------------------------------------------------------------

    def open_create(self) -> None:
        if self.form is None:
            raise RuntimeError(f"{self.section.title} has no create form")
        self.form.open(None)

    def perform(self, row_id: int, action: ActionItem) -> bool:
        """Run a row action chosen from the action menu.

        Returns:
            True if the action went through (for mutations, the server accepted it).
        """
        self.menu.select(row_id, action)
        record = self._find(row_id)
        if record is None:
            self.error = f"{self.section.noun.capitalize()} not found"
            return False

        if action is ActionItem.VIEW:
            self.viewing = record
            return True
        if action is ActionItem.EDIT:
            if self.form is None:
                raise RuntimeError(f"{self.section.title} has no edit form")
            self.form.open(record)
            return True
        prompt, operation, fallback = self.destructive_operation(row_id, action)
        if not self.confirm(prompt):
            return False
        try:
            operation()
        except ApiError as exc:
            self.mutation_failed(fallback, exc)
            return False
        self.mutation_succeeded()
        self.load()
        return True

    def destructive_operation(
        self, row_id: int, action: ActionItem
    ) -> tuple[str, Callable[[], Any], str]:
        """The confirmation prompt, client call and fallback error for ``action``.

        The call only talks to the API, so it may run off the UI thread.
        """
        if action is ActionItem.DELETE:
            return (
                f"Are you sure you want to delete this {self.section.noun}?",
                lambda: self.client.remove(row_id),
                f"Failed to delete {self.section.noun}",
            )
        if action in (ActionItem.ACCEPT, ActionItem.REJECT):
            if not isinstance(self.client, ApplicationsClient):
                raise RuntimeError(f"{action} is only available for applications")
            operation = self.client.accept if action is ActionItem.ACCEPT else self.client.reject
            return (
                f"Are you sure you want to {action} this application?",
                lambda: operation(row_id),
                f"Failed to {action} application",
            )
        raise ValueError(f"Unhandled action {action}")

    def mutation_failed(self, fallback: str, exc: ApiError) -> None:
        logger.warning("%s: %s", fallback, exc.message)
        self.error = exc.message or fallback

    def mutation_succeeded(self) -> None:
        """Clear state tied to the old collection; the caller re-fetches."""
        self.error = None
        self.viewing = None

    def close_view(self) -> None:
        self.viewing = None
