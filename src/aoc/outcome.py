"""Classify the server's reply to an answer submission."""

from __future__ import annotations

import re

from aoc.errors import UnparseableResponse
from aoc.models import SubmissionOutcome

# The markers are mutually exclusive in practice.
_OUTCOME_MARKERS: tuple[tuple[str, SubmissionOutcome], ...] = (
    ("That's the right answer", SubmissionOutcome.CORRECT),
    ("That's not the right answer", SubmissionOutcome.INCORRECT),
    ("You gave an answer too recently", SubmissionOutcome.RATE_LIMITED),
    ("You don't seem to be solving the right level", SubmissionOutcome.WRONG_PART),
)

_WAIT_RE = re.compile(r"You have (?:(\d+)m )?(\d+)s left to wait")


def classify_outcome(fragment: str) -> SubmissionOutcome:
    for marker, outcome in _OUTCOME_MARKERS:
        if marker in fragment:
            return outcome
    raise UnparseableResponse("unrecognized answer submission reply")


def wait_time(fragment: str) -> int | None:
    """Seconds left before another answer may be submitted, if stated."""
    match = _WAIT_RE.search(fragment)
    if match is None:
        return None
    minutes, seconds = match.groups()
    return int(minutes or 0) * 60 + int(seconds)
