#!/usr/bin/env python3
"""Clock sources for "today"."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Protocol

from temporal import PlainDate


class Clock(Protocol):
    def today(self) -> PlainDate: ...


@dataclass(frozen=True)
class SystemClock:
    """Wall clock, read in UTC."""

    now: Callable[[], datetime] = lambda: datetime.now(timezone.utc)

    def today(self) -> PlainDate:
        return PlainDate.from_date(self.now())


@dataclass(frozen=True)
class FixedClock:
    date: PlainDate

    def today(self) -> PlainDate:
        return self.date


__all__ = ["Clock", "SystemClock", "FixedClock"]
