from __future__ import annotations

import pytest

from house_major.icons import ServiceIcon, icon_glyph, is_known_icon, resolve_icon, selectable_icons
from house_major.upload_rules import PROFILE_PHOTO_RULE, RESUME_RULE, check_upload


def test_placeholder_is_not_selectable() -> None:
    assert ServiceIcon.PLACEHOLDER not in selectable_icons()
    assert len(selectable_icons()) == len(ServiceIcon) - 1


@pytest.mark.parametrize("name", [None, "", "RocketIcon", "PlaceholderIcon"])
def test_unknown_names_resolve_to_placeholder(name: str | None) -> None:
    assert not is_known_icon(name)
    assert resolve_icon(name) is ServiceIcon.PLACEHOLDER
    assert icon_glyph(name) == icon_glyph(None)


def test_every_icon_has_a_glyph() -> None:
    for icon in ServiceIcon:
        assert icon_glyph(icon.value)


def test_resume_accepts_pdf_by_extension_when_type_missing() -> None:
    assert check_upload(RESUME_RULE, "cv.pdf", "application/octet-stream", 10) is None
    assert check_upload(RESUME_RULE, "cv.PDF", None, 10) is None
    assert check_upload(RESUME_RULE, "cv.txt", None, 10) == "Please upload a PDF file"


def test_photo_size_boundary() -> None:
    limit = PROFILE_PHOTO_RULE.max_bytes
    assert check_upload(PROFILE_PHOTO_RULE, "a.png", "image/png", limit) is None
    assert check_upload(PROFILE_PHOTO_RULE, "a.png", "image/png", limit + 1) == (
        "File size must be less than 3MB"
    )
