"""User configuration: optional TOML file with defaults for command-line flags.

Recognized keys::

    session_file = "~/.adventofcode.session"
    width = 100
    color = "auto"          # auto, always or never
    input_file = "input"
    puzzle_file = "puzzle.md"
    overwrite = false
"""

from __future__ import annotations

import pathlib
import sys
import tomllib

_STRING_KEYS = ("session_file", "input_file", "puzzle_file")
_COLOR_CHOICES = ("auto", "always", "never")
_KNOWN_KEYS = frozenset(_STRING_KEYS + ("width", "color", "overwrite"))


def load_config(path: pathlib.Path) -> dict:
    """Read and parse a TOML config file; a missing file is an empty config."""
    if not path.is_file():
        return {}
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        print(f"Error: malformed config file {path}: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    raise SystemExit(2)


def validate_config(config: dict) -> None:
    """Validate key names and value types in the parsed config."""
    for key in config:
        if key not in _KNOWN_KEYS:
            _fail(f"unknown config key '{key}'.")
    for key in _STRING_KEYS:
        if key in config and not isinstance(config[key], str):
            _fail(f"'{key}' must be a string.")
    width = config.get("width")
    if width is not None and (isinstance(width, bool) or not isinstance(width, int) or width <= 0):
        _fail("'width' must be a positive integer.")
    color = config.get("color")
    if color is not None and color not in _COLOR_CHOICES:
        _fail(f"'color' must be one of {', '.join(_COLOR_CHOICES)}.")
    overwrite = config.get("overwrite")
    if overwrite is not None and not isinstance(overwrite, bool):
        _fail("'overwrite' must be true or false.")
