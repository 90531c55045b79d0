"""Submit command – post an answer and show the server's reply."""

from __future__ import annotations

import logging
from datetime import datetime

from aoc.client import AocClient
from aoc.models import PuzzleDate, PuzzlePart, SubmissionOutcome
from aoc.outcome import classify_outcome, wait_time
from aoc.render import html_to_text

log = logging.getLogger(__name__)


def run(
    client: AocClient,
    date: PuzzleDate,
    part: PuzzlePart,
    answer: str,
    *,
    now: datetime,
    width: int,
    show_markup: bool = False,
) -> int:
    """Exit status is 0 only for a correct answer."""
    reply = client.submit_answer_html(date, part, answer, now)
    print()
    print(html_to_text(reply, width, show_markup=show_markup), end="")

    outcome = classify_outcome(reply)
    log.debug("Submission outcome: %s", outcome.value)
    if outcome is SubmissionOutcome.RATE_LIMITED:
        seconds = wait_time(reply)
        if seconds is not None:
            log.info("You can submit again in %d seconds", seconds)
    return 0 if outcome is SubmissionOutcome.CORRECT else 1
