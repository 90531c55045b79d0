"""Read command – print the puzzle statement in the terminal."""

from __future__ import annotations

from datetime import datetime

from aoc.client import AocClient
from aoc.models import PuzzleDate
from aoc.render import html_to_text


def run(
    client: AocClient,
    date: PuzzleDate,
    *,
    now: datetime,
    width: int,
    show_markup: bool = False,
) -> int:
    puzzle_html = client.get_puzzle_html(date, now)
    print()
    print(html_to_text(puzzle_html, width, show_markup=show_markup), end="")
    return 0
