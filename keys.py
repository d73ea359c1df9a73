#!/usr/bin/env python3
"""Key constants and curses-to-navigation mappings."""
from __future__ import annotations

import curses
from typing import Dict, Tuple

# Key constants
KEY_Q = ord("q")
KEY_CAP_Q = ord("Q")
KEY_HELP = ord("?")
KEY_TODAY = ord("t")
KEY_NEXT = ord("n")
KEY_PREV = ord("p")
KEY_ESC = 27
KEY_SPACE = ord(" ")
KEY_ENTER_KEYS = (10, 13, curses.KEY_ENTER)

# curses key -> (DOM-style key name, shift held)
NAV_KEYS: Dict[int, Tuple[str, bool]] = {
    curses.KEY_LEFT: ("ArrowLeft", False),
    curses.KEY_RIGHT: ("ArrowRight", False),
    curses.KEY_UP: ("ArrowUp", False),
    curses.KEY_DOWN: ("ArrowDown", False),
    ord("h"): ("ArrowLeft", False),
    ord("l"): ("ArrowRight", False),
    ord("k"): ("ArrowUp", False),
    ord("j"): ("ArrowDown", False),
    curses.KEY_PPAGE: ("PageUp", False),
    curses.KEY_NPAGE: ("PageDown", False),
    curses.KEY_SPREVIOUS: ("PageUp", True),
    curses.KEY_SNEXT: ("PageDown", True),
    ord("K"): ("PageUp", True),
    ord("J"): ("PageDown", True),
    curses.KEY_HOME: ("Home", False),
    curses.KEY_END: ("End", False),
    ord("0"): ("Home", False),
    ord("$"): ("End", False),
}


__all__ = [
    "KEY_Q",
    "KEY_CAP_Q",
    "KEY_HELP",
    "KEY_TODAY",
    "KEY_NEXT",
    "KEY_PREV",
    "KEY_ESC",
    "KEY_SPACE",
    "KEY_ENTER_KEYS",
    "NAV_KEYS",
]
