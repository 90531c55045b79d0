"""ANSI terminal styling."""

from __future__ import annotations

import re

ESCAPE_RE = re.compile(r"\033\[[0-9;]*m")

RESET = "\033[0m"
BOLD = "\033[1m"
GOLD = "\033[33m"


def rgb(red: int, green: int, blue: int) -> str:
    return f"\033[38;2;{red};{green};{blue}m"


SILVER = rgb(160, 160, 160)
DARK_GRAY = rgb(96, 96, 96)


def paint(text: str, style: str, enabled: bool = True) -> str:
    if not enabled or not text:
        return text
    return f"{style}{text}{RESET}"


def hex_color(value: str) -> str:
    """Escape sequence for a 6-digit hex color such as ``ffff66``."""
    return rgb(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


def visible_width(text: str) -> int:
    return len(ESCAPE_RE.sub("", text))


def wrap_ansi(text: str, width: int) -> str:
    """Hard-wrap each line at *width* visible columns.

    Escape sequences take no columns and are never split.
    """
    out: list[str] = []
    for line in text.split("\n"):
        pieces: list[str] = []
        column = 0
        pos = 0
        for match in ESCAPE_RE.finditer(line):
            column = _append_wrapped(pieces, line[pos:match.start()], column, width)
            pieces.append(match.group())
            pos = match.end()
        _append_wrapped(pieces, line[pos:], column, width)
        out.append("".join(pieces))
    return "\n".join(out)


def _append_wrapped(pieces: list[str], chunk: str, column: int, width: int) -> int:
    for char in chunk:
        if column == width:
            pieces.append("\n")
            column = 0
        pieces.append(char)
        column += 1
    return column
