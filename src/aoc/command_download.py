"""Download command – save puzzle input and a Markdown copy of the statement."""

from __future__ import annotations

import logging
from datetime import datetime

from aoc.client import AocClient
from aoc.files import save_file
from aoc.models import PuzzleDate
from aoc.render import html_to_markdown

log = logging.getLogger(__name__)


def run(
    client: AocClient,
    date: PuzzleDate,
    *,
    now: datetime,
    input_file: str,
    puzzle_file: str,
    overwrite: bool = False,
    input_only: bool = False,
    puzzle_only: bool = False,
) -> int:
    if not input_only:
        markdown = html_to_markdown(client.get_puzzle_html(date, now))
        save_file(puzzle_file, markdown, overwrite=overwrite)
        log.info("Saved puzzle to '%s'", puzzle_file)
    if not puzzle_only:
        save_file(input_file, client.get_input(date, now), overwrite=overwrite)
        log.info("Saved input to '%s'", input_file)
    return 0
