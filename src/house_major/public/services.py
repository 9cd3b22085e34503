"""Services section of the public site."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from house_major.client.resources import ServicesClient
from house_major.icons import ServiceIcon, icon_glyph, resolve_icon


@dataclass(frozen=True)
class ServiceCard:
    title: str
    description: str
    icon: ServiceIcon
    glyph: str


def to_card(service: dict[str, Any]) -> ServiceCard:
    """Build a card; an unknown icon name renders the placeholder."""
    name = service.get("icon")
    return ServiceCard(
        title=service.get("title", ""),
        description=service.get("description", ""),
        icon=resolve_icon(name),
        glyph=icon_glyph(name),
    )


def load_cards(client: ServicesClient) -> list[ServiceCard]:
    return [to_card(s) for s in client.list_public()]
