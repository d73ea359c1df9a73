"""Help and cheatsheet content for the calpick TUI."""

from __future__ import annotations

HELP_LINES: tuple[str, ...] = (
    "Shortcuts",
    "",
    "arrows / hjkl     move one day / one week",
    "Home/End, 0/$     start / end of week",
    "PgUp/PgDn         previous / next month",
    "Shift+PgUp/PgDn   previous / next year (also K/J)",
    "n / p             next / previous page of months",
    "Enter / Space     select focused day",
    "t                 jump to today",
    "Esc               cancel range in progress / dismiss",
    "?                 toggle this help",
    "q                 quit and print the selection",
    "",
    "Range mode: the first pick starts the range,",
    "the second pick (before or after) completes it.",
)

__all__ = ["HELP_LINES"]
