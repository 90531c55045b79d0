"""Shared configuration values for aoc modules."""

from __future__ import annotations

import os
import pathlib
import shutil
import sys
from datetime import timedelta, timezone

from aoc import __version__
from aoc.errors import InvalidOutputWidth

FIRST_EVENT_YEAR = 2015
EVENT_MONTH = 12
FIRST_PUZZLE_DAY = 1
LAST_PUZZLE_DAY = 25
RELEASE_TIMEZONE = timezone(timedelta(hours=-5))

BASE_URL = "https://adventofcode.com"
USER_AGENT = f"aoc-cli/{__version__} (python)"

SESSION_COOKIE_ENV_VAR = "ADVENT_OF_CODE_SESSION"
SESSION_COOKIE_FILE = "adventofcode.session"
HIDDEN_SESSION_COOKIE_FILE = ".adventofcode.session"

DEFAULT_COL_WIDTH = 80
DEFAULT_INPUT_FILENAME = "input"
DEFAULT_PUZZLE_FILENAME = "puzzle.md"

_width_override: int | None = None
_color_override: bool | None = None


def get_config_dir() -> pathlib.Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return pathlib.Path(xdg)
    return pathlib.Path.home() / ".config"


def default_config_path() -> pathlib.Path:
    return get_config_dir() / "aoc" / "config.toml"


def configure(*, width: int | None = None, color: bool | None = None) -> None:
    global _width_override, _color_override
    if width is not None:
        if width <= 0:
            raise InvalidOutputWidth(width)
        _width_override = width
    if color is not None:
        _color_override = color


def get_output_width() -> int:
    if _width_override is not None:
        return _width_override
    return shutil.get_terminal_size((DEFAULT_COL_WIDTH, 24)).columns or DEFAULT_COL_WIDTH


def color_enabled() -> bool:
    if _color_override is not None:
        return _color_override
    return sys.stdout.isatty() and "NO_COLOR" not in os.environ


def _reset() -> None:
    """Reset runtime overrides. For testing only."""
    global _width_override, _color_override
    _width_override = None
    _color_override = None
