#!/usr/bin/env python3
"""Civil date value types for calpick.

``PlainDate`` and ``PlainYearMonth`` are immutable, timezone-free calendar
values. Arithmetic works on a single unit at a time (days, months or years)
and month/year steps clamp the day to the last valid day of the target month.
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Dict, Literal, Mapping, Optional, Tuple, Union

ISO_DATE = re.compile(r"^(\d{4})-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[0-1])$")
ISO_YEAR_MONTH = re.compile(r"^(\d{4})-(0[1-9]|1[0-2])$")

MIN_YEAR = 1
MAX_YEAR = 9999

DurationUnit = Literal["days", "months", "years"]
DURATION_UNITS: Tuple[DurationUnit, ...] = ("days", "months", "years")

CompareResult = Literal[-1, 0, 1]


class FormatError(ValueError):
    """Raised when a string is not a valid ISO-8601 calendar value."""


class DurationError(TypeError):
    """Raised for a duration that is not exactly one known unit."""


def _merge_duration(
    duration: Optional[Mapping[str, int]], units: Dict[str, int]
) -> Dict[str, int]:
    if duration is not None and units:
        raise DurationError("Pass a duration mapping or keyword units, not both")
    merged = dict(duration) if duration is not None else dict(units)
    for unit, amount in merged.items():
        if unit not in DURATION_UNITS:
            raise DurationError(f"Unknown duration unit '{unit}'")
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise DurationError(f"Duration amount for '{unit}' must be an integer")
    return merged


def single_unit(
    duration: Optional[Mapping[str, int]] = None, **units: int
) -> Tuple[DurationUnit, int]:
    """Return ``(unit, amount)`` for a single-unit duration.

    Accepts either ``{"months": 1}`` or ``months=1``. Anything other than
    exactly one of days/months/years raises ``DurationError``.
    """
    merged = _merge_duration(duration, units)
    if len(merged) != 1:
        raise DurationError(
            f"Duration must have exactly one of {', '.join(DURATION_UNITS)}; got {merged!r}"
        )
    ((unit, amount),) = merged.items()
    return unit, amount  # type: ignore[return-value]


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def _compare(one: Tuple[int, ...], two: Tuple[int, ...]) -> CompareResult:
    if one < two:
        return -1
    if one > two:
        return 1
    return 0


def _shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    total = year * 12 + (month - 1) + delta
    return total // 12, total % 12 + 1


@dataclass(frozen=True, order=True)
class PlainDate:
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        # date() enforces month length and leap years
        try:
            date(self.year, self.month, self.day)
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"Invalid calendar date: {self.year}-{self.month}-{self.day}"
            ) from exc

    # Construction
    @classmethod
    def parse(cls, value: str) -> "PlainDate":
        match = ISO_DATE.match(value)
        if not match:
            raise FormatError(f"Invalid ISO date: {value!r}. Expected YYYY-MM-DD")
        year, month, day = (int(part) for part in match.groups())
        try:
            return cls(year, month, day)
        except ValueError as exc:
            raise FormatError(f"Invalid ISO date: {value!r}. No such day") from exc

    @classmethod
    def from_date(cls, value: Union[date, datetime]) -> "PlainDate":
        """Take the UTC calendar fields of a date/datetime.

        Aware datetimes are converted to UTC first; naive ones are read as UTC.
        """
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone(timezone.utc)
            return cls(value.year, value.month, value.day)
        return cls(value.year, value.month, value.day)

    @classmethod
    def from_value(cls, item: Union[str, date, datetime]) -> "PlainDate":
        if isinstance(item, str):
            return cls.parse(item)
        if isinstance(item, date):
            return cls.from_date(item)
        raise TypeError(f"Cannot build a PlainDate from {type(item).__name__}")

    # Arithmetic
    def add(
        self, duration: Optional[Mapping[str, int]] = None, **units: int
    ) -> "PlainDate":
        unit, amount = single_unit(duration, **units)
        if unit == "days":
            shifted = self.to_date() + timedelta(days=amount)
            return PlainDate(shifted.year, shifted.month, shifted.day)
        if unit == "months":
            year, month = _shift_month(self.year, self.month, amount)
        else:
            year, month = self.year + amount, self.month
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise OverflowError(f"Date out of range: year {year}")
        # Clamp to the end of the target month, e.g. Jan 31 + 1 month -> Feb 28/29
        day = min(self.day, days_in_month(year, month))
        return PlainDate(year, month, day)

    def subtract(
        self, duration: Optional[Mapping[str, int]] = None, **units: int
    ) -> "PlainDate":
        unit, amount = single_unit(duration, **units)
        return self.add({unit: -amount})

    # Conversion
    def to_string(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.to_string()

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_year_month(self) -> "PlainYearMonth":
        return PlainYearMonth(self.year, self.month)

    # Comparison
    def equals(self, other: object) -> bool:
        return (
            getattr(other, "year", None) == self.year
            and getattr(other, "month", None) == self.month
            and getattr(other, "day", None) == self.day
        )

    @staticmethod
    def compare(one: "PlainDate", two: "PlainDate") -> CompareResult:
        return _compare(
            (one.year, one.month, one.day), (two.year, two.month, two.day)
        )


@dataclass(frozen=True, order=True)
class PlainYearMonth:
    year: int
    month: int

    def __post_init__(self) -> None:
        if not (MIN_YEAR <= self.year <= MAX_YEAR and 1 <= self.month <= 12):
            raise ValueError(f"Invalid year-month: {self.year}-{self.month}")

    @classmethod
    def parse(cls, value: str) -> "PlainYearMonth":
        match = ISO_YEAR_MONTH.match(value)
        if not match:
            raise FormatError(f"Invalid ISO year-month: {value!r}. Expected YYYY-MM")
        year, month = (int(part) for part in match.groups())
        try:
            return cls(year, month)
        except ValueError as exc:
            raise FormatError(f"Invalid ISO year-month: {value!r}") from exc

    @property
    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    def _months(
        self, duration: Optional[Mapping[str, int]], units: Dict[str, int]
    ) -> int:
        merged = _merge_duration(duration, units)
        if "days" in merged:
            raise DurationError("A year-month has no day component")
        return merged.get("years", 0) * 12 + merged.get("months", 0)

    def add(
        self, duration: Optional[Mapping[str, int]] = None, **units: int
    ) -> "PlainYearMonth":
        year, month = _shift_month(self.year, self.month, self._months(duration, units))
        return PlainYearMonth(year, month)

    def subtract(
        self, duration: Optional[Mapping[str, int]] = None, **units: int
    ) -> "PlainYearMonth":
        year, month = _shift_month(self.year, self.month, -self._months(duration, units))
        return PlainYearMonth(year, month)

    def months_until(self, other: Union["PlainYearMonth", PlainDate]) -> int:
        """Whole months from ``self`` to ``other`` (negative if earlier)."""
        return (other.year - self.year) * 12 + other.month - self.month

    def to_plain_date(self, day: int = 1) -> PlainDate:
        return PlainDate(self.year, self.month, day)

    def to_string(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def __str__(self) -> str:
        return self.to_string()

    def equals(self, other: object) -> bool:
        return (
            getattr(other, "year", None) == self.year
            and getattr(other, "month", None) == self.month
        )

    @staticmethod
    def compare(
        one: Union["PlainYearMonth", PlainDate],
        two: Union["PlainYearMonth", PlainDate],
    ) -> CompareResult:
        return _compare((one.year, one.month), (two.year, two.month))


__all__ = [
    "PlainDate",
    "PlainYearMonth",
    "FormatError",
    "DurationError",
    "DurationUnit",
    "DURATION_UNITS",
    "ISO_DATE",
    "MIN_YEAR",
    "MAX_YEAR",
    "days_in_month",
    "single_unit",
]
