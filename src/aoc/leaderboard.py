"""Rank and format private leaderboard standings."""

from __future__ import annotations

from aoc.config import FIRST_PUZZLE_DAY, LAST_PUZZLE_DAY
from aoc.errors import UnparseableResponse
from aoc.models import LeaderboardSnapshot, Member
from aoc.style import BOLD, DARK_GRAY, GOLD, SILVER, paint

_DAY_HEADERS = ("         1111111111222222", "1234567890123456789012345")


def rank_members(snapshot: LeaderboardSnapshot) -> list[tuple[int, Member]]:
    """Highest score first; among equal scores the higher id ranks first."""
    members = sorted(
        snapshot.members.values(),
        key=lambda m: (m.local_score, m.id),
        reverse=True,
    )
    return list(enumerate(members, start=1))


def star_strip(member: Member, last_unlocked_day: int, *, color: bool) -> str:
    cells = []
    for day in range(FIRST_PUZZLE_DAY, LAST_PUZZLE_DAY + 1):
        if day > last_unlocked_day:
            cells.append(" ")
            continue
        stars = member.count_stars(day)
        if stars >= 2:
            cells.append(paint("*", GOLD, color))
        elif stars == 1:
            cells.append(paint("*", SILVER, color))
        else:
            cells.append(paint(".", DARK_GRAY, color))
    return "".join(cells)


def format_leaderboard(
    snapshot: LeaderboardSnapshot,
    *,
    year: int,
    last_unlocked_day: int,
    color: bool,
) -> str:
    owner_name = snapshot.owner_name()
    if owner_name is None:
        raise UnparseableResponse(f"leaderboard owner {snapshot.owner_id} is not a member")

    lines = [
        f"Private leaderboard of {paint(owner_name, BOLD, color)} "
        f"for Advent of Code {paint(str(year), BOLD, color)}.",
        "",
        f"{paint('Gold *', GOLD, color)} indicates the user got both stars for that day,",
        f"{paint('silver *', SILVER, color)} means just the first star, "
        f"and a {paint('gray dot (.)', DARK_GRAY, color)} means none.",
        "",
    ]

    ranked = rank_members(snapshot)
    score_width = max((len(str(m.local_score)) for _, m in ranked), default=1)
    rank_width = len(str(len(ranked))) if ranked else 1
    header_pad = " " * (rank_width + score_width)

    for header in _DAY_HEADERS:
        on, off = header[:last_unlocked_day], header[last_unlocked_day:]
        lines.append(f"{header_pad}   {on}{paint(off, DARK_GRAY, color)}")

    for rank, member in ranked:
        stars = star_strip(member, last_unlocked_day, color=color)
        lines.append(
            f"{rank:>{rank_width}}) {member.local_score:>{score_width}} "
            f"{stars}  {member.display_name}"
        )
    return "\n".join(lines)
