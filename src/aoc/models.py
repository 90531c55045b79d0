"""Shared domain models for aoc."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from aoc.config import FIRST_EVENT_YEAR, FIRST_PUZZLE_DAY, LAST_PUZZLE_DAY
from aoc.errors import InvalidEventYear, InvalidPuzzleDay, InvalidPuzzlePart


@dataclass(frozen=True)
class PuzzleDate:
    year: int
    day: int

    def __post_init__(self) -> None:
        if self.year < FIRST_EVENT_YEAR:
            raise InvalidEventYear(self.year)
        if not FIRST_PUZZLE_DAY <= self.day <= LAST_PUZZLE_DAY:
            raise InvalidPuzzleDay(self.day)

    def __str__(self) -> str:
        return f"day {self.day}, {self.year}"


class PuzzlePart(enum.Enum):
    ONE = "1"
    TWO = "2"

    @classmethod
    def parse(cls, value: str | int) -> PuzzlePart:
        try:
            return cls(str(value).strip())
        except ValueError:
            raise InvalidPuzzlePart(value) from None

    def __str__(self) -> str:
        return self.value


class SubmissionOutcome(enum.Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    RATE_LIMITED = "rate-limited"
    WRONG_PART = "wrong-part"


# ---------------------------------------------------------------------------
# Private leaderboard JSON
# ---------------------------------------------------------------------------

class Member(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    name: str | None = None
    local_score: int = Field(0, ge=0)
    # day -> {"1": {...}, "2": {...}}; the star payloads are never inspected
    completion_day_level: dict[int, dict[str, Any]] = Field(default_factory=dict)

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        return f"(anonymous user #{self.id})"

    def count_stars(self, day: int) -> int:
        return len(self.completion_day_level.get(day, {}))


class LeaderboardSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    owner_id: int = Field(ge=0)
    members: dict[int, Member]

    def owner_name(self) -> str | None:
        owner = self.members.get(self.owner_id)
        if owner is None:
            return None
        return owner.display_name
