"""Tests for the error hierarchy."""
from __future__ import annotations

import pytest

from aoc.errors import (
    AocError,
    InvalidEventYear,
    InvalidPuzzleDate,
    InvalidPuzzleDay,
    LockedPuzzle,
)


class TestPuzzleDateErrors:
    def test_generic_message(self):
        err = InvalidPuzzleDate(3, 2020)
        assert str(err) == "Invalid puzzle date: day 3, year 2020"
        assert (err.day, err.year) == (3, 2020)

    @pytest.mark.parametrize(
        "err,message,day,year",
        [
            (InvalidEventYear(2010), "2010 is not a valid Advent of Code year", None, 2010),
            (InvalidPuzzleDay(26), "26 is not a valid Advent of Code day", 26, None),
            (LockedPuzzle(5, 2030), "Puzzle 5 of 2030 is still locked", 5, 2030),
        ],
    )
    def test_subclasses(self, err, message, day, year):
        assert isinstance(err, InvalidPuzzleDate)
        assert isinstance(err, AocError)
        assert str(err) == message
        assert (err.day, err.year) == (day, year)
