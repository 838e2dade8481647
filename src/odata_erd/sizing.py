"""Initial size estimate for an entity box, before the real size is measured."""

from __future__ import annotations

ENTITY_WIDTH: int = 300
HEADER_HEIGHT: int = 45
FOOTER_HEIGHT: int = 30
PROPERTY_ROW_HEIGHT: int = 24
NAVIGATION_ROW_HEIGHT: int = 28
MAX_VISIBLE_PROPERTIES: int = 12
MAX_VISIBLE_NAVIGATIONS: int = 8
NAVIGATION_SECTION_HEIGHT: int = 30
OVERFLOW_NOTE_HEIGHT: int = 20


def estimate_entity_size(property_count: int, navigation_count: int) -> tuple[int, int]:
    """Return (width, height) for an entity with the given member counts.

    Only the first MAX_VISIBLE_* rows are drawn; overflow adds a one-line note.
    """
    if property_count < 0 or navigation_count < 0:
        raise ValueError(
            f"member counts must be non-negative, got properties={property_count}, navigations={navigation_count}"
        )

    visible_props = min(property_count, MAX_VISIBLE_PROPERTIES)
    visible_navs = min(navigation_count, MAX_VISIBLE_NAVIGATIONS)
    extra = 0
    if navigation_count > 0:
        extra += NAVIGATION_SECTION_HEIGHT
    if property_count > MAX_VISIBLE_PROPERTIES:
        extra += OVERFLOW_NOTE_HEIGHT
    if navigation_count > MAX_VISIBLE_NAVIGATIONS:
        extra += OVERFLOW_NOTE_HEIGHT

    height = (
        HEADER_HEIGHT
        + visible_props * PROPERTY_ROW_HEIGHT
        + visible_navs * NAVIGATION_ROW_HEIGHT
        + extra
        + FOOTER_HEIGHT
    )
    return ENTITY_WIDTH, height
