#!/usr/bin/env python3
"""Keyboard navigation: which date a key press moves focus to."""

from __future__ import annotations

from typing import Literal, Optional, Sequence

from date_utils import end_of_week, start_of_week
from temporal import PlainDate

NavKey = Literal[
    "ArrowLeft",
    "ArrowRight",
    "ArrowUp",
    "ArrowDown",
    "PageUp",
    "PageDown",
    "Home",
    "End",
]
NAV_KEYS: Sequence[NavKey] = (
    "ArrowLeft",
    "ArrowRight",
    "ArrowUp",
    "ArrowDown",
    "PageUp",
    "PageDown",
    "Home",
    "End",
)


def key_to_date(
    key: str,
    focused: PlainDate,
    *,
    shift: bool = False,
    is_rtl: bool = False,
    first_day_of_week: int = 0,
) -> Optional[PlainDate]:
    """Target of ``key`` from ``focused``, or None when the key is not a nav key.

    Left/Right swap under right-to-left text. Shift+PageUp/PageDown moves a year.
    """
    if key == "ArrowRight":
        return focused.add(days=-1 if is_rtl else 1)
    if key == "ArrowLeft":
        return focused.add(days=1 if is_rtl else -1)
    if key == "ArrowDown":
        return focused.add(days=7)
    if key == "ArrowUp":
        return focused.add(days=-7)
    if key == "PageUp":
        return focused.add(years=-1) if shift else focused.add(months=-1)
    if key == "PageDown":
        return focused.add(years=1) if shift else focused.add(months=1)
    if key == "Home":
        return start_of_week(focused, first_day_of_week)
    if key == "End":
        return end_of_week(focused, first_day_of_week)
    return None


__all__ = ["NavKey", "NAV_KEYS", "key_to_date"]
