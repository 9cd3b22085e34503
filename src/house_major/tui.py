from __future__ import annotations

import json
import threading
from collections.abc import Callable
from typing import Any

from textual import on
from textual.app import App, ComposeResult
from textual.containers import Container, VerticalScroll
from textual.widgets import Button, Footer, Header, Input, Label, Markdown, Static, TextArea
from textual.worker import Worker, WorkerState

from house_major.client.auth import AuthGate, LocalStore
from house_major.client.base import ApiClient, ApiError, FileUpload
from house_major.dashboard.action_menu import ActionItem
from house_major.dashboard.forms import FileField
from house_major.dashboard.overview import OverviewScreen
from house_major.dashboard.profile import ProfileScreen
from house_major.dashboard.screens import ManagementScreen
from house_major.dashboard.shell import SECTION_ORDER, DashboardShell, build_dashboard
from house_major.tui_rendering import (
    render_form_markdown,
    render_overview_markdown,
    render_profile_markdown,
    render_record_markdown,
    render_table_markdown,
)

OnSuccess = Callable[[Any], Any]
OnError = Callable[[ApiError], Any]

DESTRUCTIVE_ACTIONS = (ActionItem.DELETE, ActionItem.ACCEPT, ActionItem.REJECT)


def _noun(screen: ManagementScreen | ProfileScreen) -> str:
    return screen.section.noun if isinstance(screen, ManagementScreen) else "user"


class HouseMajorTUI(App[None]):
    """Terminal admin dashboard for House Major.

    Screen state is only touched on the UI thread. Workers run the network
    call alone and hand the result back through ``worker_state``; screens
    drop fetch results from a superseded load.
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("j", "cursor_down", "Down"),
        ("k", "cursor_up", "Up"),
        ("n", "next_page", "Next page"),
        ("p", "previous_page", "Prev page"),
        ("m", "toggle_menu", "Actions"),
        ("v", "row_action('view')", "View"),
        ("e", "row_action('edit')", "Edit"),
        ("d", "row_action('delete')", "Delete"),
        ("a", "row_action('accept')", "Accept"),
        ("r", "row_action('reject')", "Reject"),
        ("y", "confirm", "Confirm"),
        ("c", "create", "New"),
        ("t", "toggle_theme", "Theme"),
        ("ctrl+s", "save_form", "Save"),
        ("escape", "escape", "Close"),
    ]

    CSS = """
Screen {
    layout: vertical;
    background: $background;
}

#auth-screen {
    height: 1fr;
    align-horizontal: center;
    align-vertical: middle;
}

#auth-card {
    padding: 2;
    border: heavy $primary;
    background: $panel;
    width: 48;
    height: auto;
}

#auth-card Input,
#auth-card Button {
    width: 100%;
    margin-top: 1;
}

#middle {
    height: 1fr;
    layout: horizontal;
}

#sidebar {
    width: 24;
    padding: 1;
    border: heavy $primary;
    background: $panel;
}

#sidebar Button {
    width: 100%;
    margin-top: 1;
}

#main {
    border: heavy $primary;
    background: $surface;
    padding: 1;
}

#editor {
    height: 1fr;
}

#statusbar {
    height: 3;
    padding: 0 1;
}
"""

    def __init__(self, api: ApiClient | None = None, store: LocalStore | None = None) -> None:
        super().__init__()
        self._store = store or LocalStore()
        self._api = api or ApiClient(token_store=self._store)
        self._gate = AuthGate(self._api, self._store)
        self._shell: DashboardShell | None = None
        self._cursor = 0
        self._pending: tuple[Any, int, ActionItem] | None = None
        self._callbacks: dict[Worker, tuple[OnSuccess, OnError | None]] = {}
        self._ui_thread: int | None = None

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield Container(
            Container(
                Static("House Major admin"),
                Input(placeholder="Email", id="auth-email"),
                Input(placeholder="Password", password=True, id="auth-password"),
                Button("Log in", id="auth-btn-login", variant="primary"),
                id="auth-card",
            ),
            id="auth-screen",
        )
        yield Container(
            Container(
                VerticalScroll(
                    *(
                        Button(section.replace("-", " ").title(), id=f"nav-{section}")
                        for section in SECTION_ORDER
                    ),
                    Button("Log out", id="btn-logout", variant="error"),
                    id="sidebar",
                ),
                VerticalScroll(
                    Input(placeholder="Search…", id="search"),
                    Markdown("", id="output"),
                    TextArea("", id="editor", language=None),
                    id="main",
                ),
                id="middle",
            ),
            id="app-screen",
        )
        yield Container(Label("Ready.", id="status"), id="statusbar")
        yield Footer()

    def on_mount(self) -> None:
        self._ui_thread = threading.get_ident()
        self.query_one("#editor", TextArea).display = False
        self._gate.on_change(self._auth_changed)
        self._show_auth_state(self._gate.is_authenticated())

    def _auth_changed(self, authenticated: bool) -> None:
        # A 401 inside a worker clears the token off the UI thread.
        if threading.get_ident() == self._ui_thread:
            self.call_later(self._show_auth_state, authenticated)
        else:
            self.call_from_thread(self._show_auth_state, authenticated)

    def _show_auth_state(self, authenticated: bool) -> None:
        self.query_one("#auth-screen", Container).display = not authenticated
        self.query_one("#app-screen", Container).display = authenticated
        if authenticated and self._shell is None:
            # Destructive actions are confirmed with "y" before they reach a screen.
            self._shell = build_dashboard(self._api, self._gate, lambda prompt: True)
            self._switch("overview")
        elif not authenticated:
            self._shell = None
            self._pending = None

    def _status(self, text: str) -> None:
        self.query_one("#status", Label).update(text)

    # ---------------------------------------------------------------------
    # WORKERS
    # ---------------------------------------------------------------------

    def _start(
        self,
        name: str,
        work: Callable[[], Any],
        on_success: OnSuccess,
        on_error: OnError | None = None,
    ) -> None:
        worker = self.run_worker(work, name=name, group=name, thread=True, exit_on_error=False)
        self._callbacks[worker] = (on_success, on_error)

    @on(Worker.StateChanged)
    def worker_state(self, event: Worker.StateChanged) -> None:
        callbacks = self._callbacks.get(event.worker)
        if callbacks is None:
            return
        on_success, on_error = callbacks
        if event.state == WorkerState.SUCCESS:
            del self._callbacks[event.worker]
            on_success(event.worker.result)
            self._refresh()
        elif event.state == WorkerState.ERROR:
            del self._callbacks[event.worker]
            error = event.worker.error
            if isinstance(error, ApiError):
                self._status(error.message)
                if on_error is not None:
                    on_error(error)
            else:
                self._status(f"Error: {error}")
            self._refresh()
        elif event.state == WorkerState.CANCELLED:
            del self._callbacks[event.worker]

    def _load(self, screen: Any) -> None:
        """Fetch in a worker; the screen ignores the result if a newer load began."""
        generation = screen.begin_load()
        self._start(
            "load",
            screen.fetch,
            on_success=lambda result: screen.finish_load(generation, result),
            on_error=lambda exc: screen.finish_load(generation, error=exc.message or "Failed to load"),
        )

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    @on(Button.Pressed, "#auth-btn-login")
    def handle_login(self) -> None:
        email = self.query_one("#auth-email", Input).value.strip()
        password = self.query_one("#auth-password", Input).value
        if not email or not password:
            self._status("Email and password are required.")
            return
        self._status("Signing in…")
        self._start(
            "login",
            lambda: self._gate.request_login(email, password),
            on_success=lambda data: self._logged_in(email, data),
        )

    def _logged_in(self, email: str, data: dict[str, Any]) -> None:
        self._gate.store_login(email, data)
        self._status(f"Signed in as {email}.")

    @on(Button.Pressed, "#btn-logout")
    def handle_logout(self) -> None:
        self._start("logout", self._gate.logout, on_success=lambda _: self._status("Signed out."))

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @on(Button.Pressed)
    def handle_nav(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("nav-"):
            self._switch(button_id.removeprefix("nav-"))

    def _switch(self, section: str) -> None:
        if self._shell is None:
            return
        self._cursor = 0
        self._pending = None
        self.query_one("#search", Input).value = ""
        self._status(f"Loading {section}…")
        screen = self._shell.set_active_section(section, load=False)
        self._load(screen)
        self._refresh()

    @property
    def _screen(self) -> Any:
        return self._shell.active_screen if self._shell else None

    @property
    def _list_screen(self) -> ManagementScreen | ProfileScreen | None:
        screen = self._screen
        return screen if isinstance(screen, (ManagementScreen, ProfileScreen)) else None

    def _refresh(self) -> None:
        screen = self._screen
        output = self.query_one("#output", Markdown)
        editor = self.query_one("#editor", TextArea)
        search = self.query_one("#search", Input)
        search.display = self._list_screen is not None
        editor.display = False

        if isinstance(screen, OverviewScreen):
            output.update(render_overview_markdown(screen))
        elif isinstance(screen, ProfileScreen):
            self._clamp_cursor(screen)
            output.update(render_profile_markdown(screen, self._cursor))
        elif isinstance(screen, ManagementScreen):
            if screen.form is not None and screen.form.is_open:
                output.update(render_form_markdown(screen.section, screen.form))
                editor.display = True
            elif screen.viewing is not None:
                output.update(render_record_markdown(screen.section, screen.viewing))
            else:
                self._clamp_cursor(screen)
                output.update(
                    render_table_markdown(
                        screen.section,
                        screen.current_view(),
                        screen.menu,
                        screen.list_state.query,
                        self._cursor,
                    )
                )
            if screen.error:
                self._status(screen.error)
            elif not screen.loading:
                self._status(f"{screen.section.title}: {screen.current_view().total_items} item(s).")

    def _clamp_cursor(self, screen: ManagementScreen | ProfileScreen) -> None:
        count = len(screen.current_view().items)
        self._cursor = min(self._cursor, max(count - 1, 0))

    @on(Input.Changed, "#search")
    def handle_search(self, event: Input.Changed) -> None:
        screen = self._list_screen
        if screen is not None:
            screen.search(event.value)
            self._cursor = 0
            self._refresh()

    # ------------------------------------------------------------------
    # Table actions
    # ------------------------------------------------------------------

    def _selected_row(self) -> dict[str, Any] | None:
        screen = self._list_screen
        if screen is None:
            return None
        items = screen.current_view().items
        if not items:
            return None
        return items[min(self._cursor, len(items) - 1)]

    def action_cursor_down(self) -> None:
        self._cursor += 1
        self._refresh()

    def action_cursor_up(self) -> None:
        self._cursor = max(0, self._cursor - 1)
        self._refresh()

    def action_next_page(self) -> None:
        screen = self._screen
        if self._list_screen is not None:
            screen.next_page()
        elif isinstance(screen, OverviewScreen):
            screen.set_activity_page(screen.activity_page + 1)
        self._cursor = 0
        self._refresh()

    def action_previous_page(self) -> None:
        screen = self._screen
        if self._list_screen is not None:
            screen.previous_page()
        elif isinstance(screen, OverviewScreen):
            screen.set_activity_page(screen.activity_page - 1)
        self._cursor = 0
        self._refresh()

    def action_toggle_menu(self) -> None:
        row = self._selected_row()
        if row is not None:
            self._list_screen.menu.toggle(row["id"])
            self._refresh()

    def action_row_action(self, name: str) -> None:
        screen = self._list_screen
        row = self._selected_row()
        if screen is None or row is None:
            return
        action = ActionItem(name)
        if action not in screen.menu.actions:
            self._status(f"'{name}' is not available for this list.")
            return
        if action in DESTRUCTIVE_ACTIONS:
            self._pending = (screen, row["id"], action)
            self._status(f"Press y to {name} this {_noun(screen)}, escape to cancel.")
            return
        screen.perform(row["id"], action)
        if action is ActionItem.EDIT:
            self._load_editor(screen)
        self._refresh()

    def action_confirm(self) -> None:
        if self._pending is None:
            return
        screen, row_id, action = self._pending
        self._pending = None
        if screen is not self._screen:
            return
        screen.menu.select(row_id, action)
        try:
            _prompt, operation, fallback = screen.destructive_operation(row_id, action)
        except ValueError as exc:
            self._status(str(exc))
            return
        self._status(f"Working on {_noun(screen)} {row_id}…")
        self._start(
            "mutate",
            operation,
            on_success=lambda _: self._mutated(screen),
            on_error=lambda exc: screen.mutation_failed(fallback, exc),
        )

    def _mutated(self, screen: ManagementScreen | ProfileScreen) -> None:
        screen.mutation_succeeded()
        if screen is self._screen:
            self._load(screen)

    def action_create(self) -> None:
        screen = self._screen
        if isinstance(screen, ManagementScreen) and screen.form is not None:
            screen.open_create()
            self._load_editor(screen)
            self._refresh()

    def _load_editor(self, screen: ManagementScreen) -> None:
        draft: dict[str, Any] = dict(screen.form.draft)
        # File fields take a list of local paths.
        for spec in screen.form.fields:
            if isinstance(spec, FileField):
                draft[spec.name] = []
        self.query_one("#editor", TextArea).text = json.dumps(draft, indent=2)

    def _attach_files(self, screen: ManagementScreen, draft: dict[str, Any]) -> str | None:
        form = screen.form
        for spec in form.fields:
            if not isinstance(spec, FileField):
                continue
            paths = draft.pop(spec.name, None) or []
            if isinstance(paths, str):
                paths = [paths]
            if not paths:
                form.files.pop(spec.name, None)
                continue
            try:
                uploads = [FileUpload.from_path(path) for path in paths]
            except OSError as exc:
                return f"{spec.label}: cannot read {exc.filename}"
            error = form.select_files(spec.name, uploads)
            if error:
                return error
        return None

    def action_save_form(self) -> None:
        screen = self._screen
        if not isinstance(screen, ManagementScreen) or screen.form is None or not screen.form.is_open:
            return
        form = screen.form
        try:
            draft = json.loads(self.query_one("#editor", TextArea).text)
        except json.JSONDecodeError as exc:
            self._status(f"Form JSON is invalid: {exc.msg}")
            return
        if not isinstance(draft, dict):
            self._status("Form JSON must be an object of field values.")
            return
        error = self._attach_files(screen, draft)
        if error:
            self._status(error)
            return
        for key, value in draft.items():
            form.field_change(key, "" if value is None else str(value))
        payload = form.validate()
        if payload is None:
            self._status("; ".join(form.errors.values()))
            return
        self._status("Saving…")
        self._start(
            "save",
            lambda: form.save(payload),
            on_success=lambda record: self._saved(screen, record),
            on_error=form.fail,
        )

    def _saved(self, screen: ManagementScreen, record: dict[str, Any]) -> None:
        screen.form.finish(record, notify=False)
        if screen is self._screen:
            self._load(screen)

    def action_escape(self) -> None:
        screen = self._screen
        self._pending = None
        if isinstance(screen, ProfileScreen):
            if screen.menu.handle_key("escape"):
                self._status("Menu closed.")
        elif isinstance(screen, ManagementScreen):
            if screen.menu.handle_key("escape"):
                self._status("Menu closed.")
            elif screen.form is not None and screen.form.is_open:
                screen.form.close()
            elif screen.viewing is not None:
                screen.close_view()
        self._refresh()

    def action_toggle_theme(self) -> None:
        if self._shell is None:
            return
        dark = self._shell.toggle_theme()
        self.theme = "textual-dark" if dark else "textual-light"


def run_tui() -> None:
    HouseMajorTUI().run()
