from __future__ import annotations

import json
from typing import Any

from house_major.dashboard.action_menu import ActionMenu, MenuDirection, direction_for
from house_major.dashboard.forms import FileField, FormController
from house_major.dashboard.listing import PageView, field_value
from house_major.dashboard.overview import OverviewScreen
from house_major.dashboard.profile import ProfileScreen
from house_major.dashboard.resources import SectionConfig

_CELL_WIDTH = 48


def _cell(value: Any) -> str:
    if value is None:
        return ""
    text = " ".join(str(value).split())
    if len(text) > _CELL_WIDTH:
        text = text[: _CELL_WIDTH - 1] + "…"
    return text.replace("|", "\\|")


def render_table_markdown(
    section: SectionConfig,
    page: PageView[dict[str, Any]],
    menu: ActionMenu,
    query: str = "",
    selected_index: int | None = None,
) -> str:
    parts: list[str] = [f"# {section.title}\n"]
    if query:
        parts.append(f"Search: `{query}` ({page.total_items} match(es))\n")

    if not page.items:
        parts.append(f"_No {section.noun}s found._")
        return "\n".join(parts)

    headers = ["#", *(label for label, _ in section.columns)]
    parts.append("| " + " | ".join(headers) + " |")
    parts.append("|" + "---|" * len(headers))
    for index, item in enumerate(page.items):
        marker = "▶" if index == selected_index else str(index + 1)
        cells = [marker, *(_cell(field_value(item, path)) for _, path in section.columns)]
        parts.append("| " + " | ".join(cells) + " |")
        if menu.is_open(item.get("id")):
            arrow = "↑" if direction_for(index) is MenuDirection.UP else "↓"
            actions = " · ".join(action.value for action in menu.actions)
            parts.append(f"| {arrow} | {actions} |" + " |" * (len(headers) - 2))

    parts.append(f"\nPage {max(page.page, 1)} of {max(page.total_pages, 1)}")
    return "\n".join(parts)


def render_record_markdown(section: SectionConfig, record: dict[str, Any]) -> str:
    title = record.get("title") or record.get("name") or record.get("fullName") or section.noun
    parts = [f"# {title}\n"]
    for key, value in record.items():
        if isinstance(value, (list, dict)):
            if not value:
                continue
            parts.append(f"**{key}**")
            if isinstance(value, list):
                parts.extend(
                    f"- {json.dumps(v) if isinstance(v, dict) else v}" for v in value
                )
            else:
                parts.extend(f"- {k}: {v}" for k, v in value.items() if v)
            parts.append("")
        elif value not in (None, ""):
            parts.append(f"- **{key}**: {value}")
    return "\n".join(parts)


def render_form_markdown(section: SectionConfig, form: FormController) -> str:
    verb = "Edit" if form.is_editing else "New"
    parts = [f"# {verb} {section.noun}\n"]
    parts.append("Edit the JSON on the right and press Ctrl+S to save, Escape to cancel.\n")
    for spec in form.fields:
        if isinstance(spec, FileField):
            selected = form.files.get(spec.name, [])
            names = ", ".join(f.filename for f in selected) or "none"
            parts.append(f"- {spec.label} (list file paths under `{spec.name}`): {names}")
    if form.errors:
        parts.append("\n### Errors")
        parts.extend(f"- {key}: {message}" for key, message in form.errors.items())
    if form.server_error:
        parts.append(f"\n**{form.server_error}**")
    return "\n".join(parts)


def render_overview_markdown(overview: OverviewScreen) -> str:
    parts = ["# Overview\n", "| Resource | Count |", "|---|---|"]
    parts.extend(f"| {label} | {count} |" for label, count in overview.stats())

    activity = overview.activity_view()
    parts.append("\n## Recent activity")
    if not activity.items:
        parts.append("_Nothing yet._")
    for entry in activity.items:
        when = entry.created_at[:16].replace("T", " ") if entry.created_at else ""
        parts.append(f"- {entry.description} ({when})")
    if activity.total_pages > 1:
        parts.append(f"\nPage {activity.page} of {activity.total_pages}")
    return "\n".join(parts)


def render_profile_markdown(profile: ProfileScreen, selected_index: int | None = None) -> str:
    parts = ["# Profile\n", f"Signed in as **{profile.gate.get_user_email() or 'unknown'}**\n"]
    if profile.error:
        parts.append(f"> Error: {profile.error}\n")
    elif profile.message:
        parts.append(f"> {profile.message}\n")
    view = profile.current_view()
    parts.append("## Admin users")
    if profile.list_state.query:
        parts.append(f"Search: `{profile.list_state.query}` ({view.total_items} match(es))\n")
    if not view.items:
        parts.append("_No users found._")
        return "\n".join(parts)
    parts.append("| # | ID | Username | Email |")
    parts.append("|---|---|---|---|")
    for index, user in enumerate(view.items):
        marker = "▶" if index == selected_index else str(index + 1)
        parts.append(
            f"| {marker} | {user.get('id')} | {_cell(user.get('username'))} | {_cell(user.get('email'))} |"
        )
        if profile.menu.is_open(user.get("id")):
            arrow = "↑" if direction_for(index) is MenuDirection.UP else "↓"
            actions = " · ".join(action.value for action in profile.menu.actions)
            parts.append(f"| {arrow} | {actions} | | |")
    parts.append(f"\nPage {max(view.page, 1)} of {max(view.total_pages, 1)}")
    return "\n".join(parts)
