"""Puzzle release timing.

Puzzles unlock at midnight UTC-05:00 on each of the first 25 days of
December, regardless of the local system timezone. Every function takes the
current instant as ``now`` so one captured value can be threaded through a
whole command.
"""

from __future__ import annotations

from datetime import datetime, timezone

from aoc.config import (
    EVENT_MONTH,
    FIRST_EVENT_YEAR,
    FIRST_PUZZLE_DAY,
    LAST_PUZZLE_DAY,
    RELEASE_TIMEZONE,
)
from aoc.errors import DayNotInferable, InvalidEventYear, LockedPuzzle
from aoc.models import PuzzleDate


def release_now(now: datetime | None = None) -> datetime:
    """Return *now* in the release timezone, truncated to milliseconds.

    A naive *now* is taken to be UTC. Without *now* the wall clock is read.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(RELEASE_TIMEZONE)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def unlock_instant(date: PuzzleDate) -> datetime:
    return datetime(date.year, EVENT_MONTH, date.day, tzinfo=RELEASE_TIMEZONE)


def latest_event_year(now: datetime | None = None) -> int:
    now = release_now(now)
    if now.month == EVENT_MONTH:
        return now.year
    return now.year - 1


def current_event_day(now: datetime | None, year: int) -> int | None:
    """Today's puzzle day if the *year* event is running, else None."""
    now = release_now(now)
    if now.year != year or now.month != EVENT_MONTH:
        return None
    return max(FIRST_PUZZLE_DAY, min(now.day, LAST_PUZZLE_DAY))


def is_unlocked(date: PuzzleDate, now: datetime | None = None) -> bool:
    return release_now(now) >= unlock_instant(date)


def ensure_unlocked(date: PuzzleDate, now: datetime | None = None) -> None:
    if not is_unlocked(date, now):
        raise LockedPuzzle(date.day, date.year)


def last_unlocked_day(year: int, now: datetime | None = None) -> int:
    now = release_now(now)
    if year == now.year and now.month == EVENT_MONTH:
        return min(now.day, LAST_PUZZLE_DAY)
    if FIRST_EVENT_YEAR <= year < now.year:
        return LAST_PUZZLE_DAY
    raise InvalidEventYear(year)


def resolve_event_year(year: int | None, now: datetime | None = None) -> int:
    if year is None:
        return latest_event_year(now)
    if year < FIRST_EVENT_YEAR:
        raise InvalidEventYear(year)
    return year


def resolve_puzzle_date(
    year: int | None, day: int | None, now: datetime | None = None
) -> PuzzleDate:
    """Build a PuzzleDate, inferring whatever the caller left out.

    The day is only inferred while the event is running; otherwise
    DayNotInferable is raised rather than guessing the first or last day.
    """
    year = resolve_event_year(year, now)
    if day is None:
        day = current_event_day(now, year)
        if day is None:
            raise DayNotInferable(year)
    return PuzzleDate(year=year, day=day)
