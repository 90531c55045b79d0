"""Calendar command – show the event calendar with collected stars."""

from __future__ import annotations

from aoc.calendar_view import render_calendar
from aoc.client import AocClient


def run(client: AocClient, year: int, *, width: int, color: bool) -> int:
    page = client.get_calendar_page(year)
    print()
    print(render_calendar(page, width=width, color=color))
    return 0
