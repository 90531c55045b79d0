"""Private leaderboard command – show standings of an invite-only board."""

from __future__ import annotations

from datetime import datetime

from aoc.client import AocClient
from aoc.leaderboard import format_leaderboard
from aoc.unlock import last_unlocked_day


def run(
    client: AocClient,
    year: int,
    leaderboard_id: int,
    *,
    now: datetime,
    color: bool,
) -> int:
    last_day = last_unlocked_day(year, now)
    snapshot = client.get_private_leaderboard(year, leaderboard_id)
    print(format_leaderboard(snapshot, year=year, last_unlocked_day=last_day, color=color))
    return 0
