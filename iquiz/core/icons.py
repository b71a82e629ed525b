"""Icon lookup for quiz topics."""

from __future__ import annotations

from iquiz.constants.quiz_constants import (
    ICON_FALLBACK,
    ICON_MARVEL,
    ICON_MATHEMATICS,
    ICON_SCIENCE,
)

_ICONS_BY_TITLE: dict[str, str] = {
    "Mathematics": ICON_MATHEMATICS,
    "Marvel Super Heroes": ICON_MARVEL,
    "Science": ICON_SCIENCE,
}


def icon_name_for(title: str) -> str:
    """Return the icon identifier for a topic title."""
    return _ICONS_BY_TITLE.get(title, ICON_FALLBACK)
