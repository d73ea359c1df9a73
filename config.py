#!/usr/bin/env python3
"""Configuration loading for calpick."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from date_window import DEFAULT_PAGE_BY, PAGE_BY_VALUES, PageBy
from formatting import WEEKDAY_STYLES, WeekdayStyle
from paths import config_dir, data_dir
from picker import DEFAULT_FIRST_DAY_OF_WEEK

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"
STATE_FILENAME = "selection.parquet"


def _default_state_path() -> Path:
    return data_dir() / STATE_FILENAME


@dataclass
class Config:
    first_day_of_week: int = DEFAULT_FIRST_DAY_OF_WEEK
    locale: Optional[str] = None
    months: int = 1
    page_by: PageBy = DEFAULT_PAGE_BY
    weekday_style: WeekdayStyle = "short"
    show_week_numbers: bool = False
    rtl: bool = False
    state_path: Path = field(default_factory=_default_state_path)


def default_config_path() -> Path:
    return config_dir() / CONFIG_FILENAME


def _int_option(raw: Dict[str, Any], key: str, default: int, low: int, high: int) -> int:
    if key not in raw:
        return default
    value = raw[key]
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        logger.warning("Ignoring config %s=%r; expected an integer %d-%d", key, value, low, high)
        return default
    return value


def _choice_option(raw: Dict[str, Any], key: str, default: str, choices: Sequence[str]) -> Any:
    if key not in raw:
        return default
    value = raw[key]
    if value not in choices:
        logger.warning("Ignoring config %s=%r; expected one of %s", key, value, ", ".join(choices))
        return default
    return value


def _bool_option(raw: Dict[str, Any], key: str, default: bool) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        logger.warning("Ignoring config %s=%r; expected true or false", key, value)
        return default
    return value


def _read_raw(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        return {}
    raw_text = config_path.read_text()
    try:
        raw = json.loads(raw_text)
    except json.JSONDecodeError:
        try:
            raw = json.loads(_strip_trailing_commas(raw_text))
        except json.JSONDecodeError as exc:
            logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
            return {}
    if not isinstance(raw, dict):
        logger.warning("Ignoring config %s: top level must be an object", config_path)
        return {}
    return raw


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load config from the XDG path, falling back to defaults.

    A missing file, invalid JSON or an invalid value only costs the affected
    setting its configured value; each problem is logged as a warning.
    """
    raw = _read_raw((config_path or default_config_path()).expanduser())
    defaults = Config()

    locale = raw.get("locale")
    if locale is not None and not isinstance(locale, str):
        logger.warning("Ignoring config locale=%r; expected a string", locale)
        locale = None

    state_path = raw.get("state_path")
    return Config(
        first_day_of_week=_int_option(raw, "first_day_of_week", defaults.first_day_of_week, 0, 6),
        locale=locale or None,
        months=_int_option(raw, "months", defaults.months, 1, 12),
        page_by=_choice_option(raw, "page_by", defaults.page_by, PAGE_BY_VALUES),
        weekday_style=_choice_option(raw, "weekday_style", defaults.weekday_style, WEEKDAY_STYLES),
        show_week_numbers=_bool_option(raw, "show_week_numbers", defaults.show_week_numbers),
        rtl=_bool_option(raw, "rtl", defaults.rtl),
        state_path=Path(state_path).expanduser() if isinstance(state_path, str) and state_path else defaults.state_path,
    )


def _strip_trailing_commas(text: str) -> str:
    """Remove trailing commas before closing braces/brackets."""
    return re.sub(r",(\s*[}\]])", r"\1", text)


__all__ = ["Config", "load_config", "default_config_path", "CONFIG_FILENAME", "STATE_FILENAME"]
