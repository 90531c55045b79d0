"""Pattern-based extraction from Advent of Code pages."""

from __future__ import annotations

import html
import re

from aoc.errors import ContentNotFound

_MAIN_RE = re.compile(r"<main>(?P<main>.*)</main>", re.IGNORECASE | re.DOTALL)
_LOGIN_LINK_RE = re.compile(r'href="/[0-9]{4}/auth/login"')
_TITLE_RE = re.compile(r"--- Day \d+: (.+?) ---")


def extract_main(page: str) -> str:
    """Return the text between the first <main> and the last </main>."""
    match = _MAIN_RE.search(page)
    if match is None:
        raise ContentNotFound()
    return match.group("main")


def looks_logged_out(page: str) -> bool:
    return _LOGIN_LINK_RE.search(page) is not None


def extract_title(page: str) -> str | None:
    match = _TITLE_RE.search(page)
    if match is None:
        return None
    return html.unescape(match.group(1))
