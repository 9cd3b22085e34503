"""Closed registry of service icons.

Service rows store an icon *name*; everything that renders one goes through
:func:`resolve_icon`, which never fails on an unknown name.
"""

from __future__ import annotations

from enum import StrEnum


class ServiceIcon(StrEnum):
    PAINT_BRUSH = "PaintBrushIcon"
    RECTANGLE_GROUP = "RectangleGroupIcon"
    CODE_BRACKET = "CodeBracketIcon"
    DEVICE_PHONE_MOBILE = "DevicePhoneMobileIcon"
    MEGAPHONE = "MegaphoneIcon"
    MAGNIFYING_GLASS = "MagnifyingGlassIcon"
    COG_6_TOOTH = "Cog6ToothIcon"
    SHIELD_CHECK = "ShieldCheckIcon"
    CLOUD = "CloudIcon"
    CHART_BAR = "ChartBarIcon"
    PLACEHOLDER = "PlaceholderIcon"


# Terminal glyphs used by the TUI and markdown renderers.
_GLYPHS: dict[ServiceIcon, str] = {
    ServiceIcon.PAINT_BRUSH: "🖌",
    ServiceIcon.RECTANGLE_GROUP: "▦",
    ServiceIcon.CODE_BRACKET: "</>",
    ServiceIcon.DEVICE_PHONE_MOBILE: "📱",
    ServiceIcon.MEGAPHONE: "📣",
    ServiceIcon.MAGNIFYING_GLASS: "🔍",
    ServiceIcon.COG_6_TOOTH: "⚙",
    ServiceIcon.SHIELD_CHECK: "🛡",
    ServiceIcon.CLOUD: "☁",
    ServiceIcon.CHART_BAR: "📊",
    ServiceIcon.PLACEHOLDER: "□",
}


def selectable_icons() -> list[ServiceIcon]:
    """Icons an admin may pick when creating or editing a service."""
    return [icon for icon in ServiceIcon if icon is not ServiceIcon.PLACEHOLDER]


def is_known_icon(name: str | None) -> bool:
    return bool(name) and name in {icon.value for icon in selectable_icons()}


def resolve_icon(name: str | None) -> ServiceIcon:
    """Map a stored icon name to its registry entry, or the placeholder."""
    if is_known_icon(name):
        return ServiceIcon(name)
    return ServiceIcon.PLACEHOLDER


def icon_glyph(name: str | None) -> str:
    return _GLYPHS[resolve_icon(name)]
