#!/usr/bin/env python3
"""App state container for the calpick TUI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from picker import CalendarState

OverlayKind = Literal["none", "help", "error", "message"]


@dataclass
class AppState:
    calendar: CalendarState
    overlay: OverlayKind = "none"
    overlay_message: str = ""
    committed: bool = False


__all__ = ["AppState", "OverlayKind"]
