#!/usr/bin/env python3
"""XDG path helpers for calpick."""

from __future__ import annotations

import os
from pathlib import Path

APP_DIR = "calpick"


def xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME") or "~/.config").expanduser()


def xdg_data_home() -> Path:
    return Path(os.environ.get("XDG_DATA_HOME") or "~/.local/share").expanduser()


def config_dir() -> Path:
    return xdg_config_home() / APP_DIR


def data_dir() -> Path:
    return xdg_data_home() / APP_DIR


__all__ = ["APP_DIR", "xdg_config_home", "xdg_data_home", "config_dir", "data_dir"]
