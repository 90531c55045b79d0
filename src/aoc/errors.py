"""Exceptions raised by the aoc client.

Every error carries the context needed to print one actionable line:
the puzzle date, the HTTP status and URL, or the file involved.
"""

from __future__ import annotations


class AocError(Exception):
    """Base class for every error surfaced to the command line."""


# ---------------------------------------------------------------------------
# Puzzle dates
# ---------------------------------------------------------------------------

class InvalidPuzzleDate(AocError):
    def __init__(self, day: int | None, year: int | None, message: str | None = None) -> None:
        super().__init__(message or f"Invalid puzzle date: day {day}, year {year}")
        self.day = day
        self.year = year


class InvalidEventYear(InvalidPuzzleDate):
    def __init__(self, year: int) -> None:
        super().__init__(None, year, f"{year} is not a valid Advent of Code year")


class InvalidPuzzleDay(InvalidPuzzleDate):
    def __init__(self, day: int) -> None:
        super().__init__(day, None, f"{day} is not a valid Advent of Code day")


class LockedPuzzle(InvalidPuzzleDate):
    def __init__(self, day: int, year: int) -> None:
        super().__init__(day, year, f"Puzzle {day} of {year} is still locked")


class DayNotInferable(AocError):
    """No day was given and the event for *year* is not running."""

    def __init__(self, year: int) -> None:
        super().__init__(
            f"Could not infer puzzle day for {year}; pass one with --day"
        )
        self.year = year


class InvalidPuzzlePart(AocError):
    def __init__(self, part: object) -> None:
        super().__init__(f"Invalid puzzle part number: {part!r}")
        self.part = part


# ---------------------------------------------------------------------------
# Session cookie
# ---------------------------------------------------------------------------

class SessionError(AocError):
    """Raised when the session cookie cannot be loaded."""


class SessionFileNotFound(SessionError):
    def __init__(self) -> None:
        super().__init__("Session cookie file not found in home or config directory")


class SessionFileReadError(SessionError):
    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Failed to read session cookie from '{filename}': {reason}")
        self.filename = filename


class InvalidSessionCookie(SessionError):
    def __init__(self) -> None:
        super().__init__("Invalid session cookie")


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class ResponseParseError(AocError):
    """Raised when an Advent of Code response has an unexpected shape."""


class ContentNotFound(ResponseParseError):
    def __init__(self) -> None:
        super().__init__("Failed to parse Advent of Code response: no <main> element")


class UnparseableResponse(ResponseParseError):
    def __init__(self, detail: str = "unrecognized content") -> None:
        super().__init__(f"Failed to parse Advent of Code response: {detail}")
        self.detail = detail


class PrivateLeaderboardNotAvailable(AocError):
    def __init__(self, leaderboard_id: int) -> None:
        super().__init__(
            f"Private leaderboard {leaderboard_id} does not exist or you are not a member"
        )
        self.leaderboard_id = leaderboard_id


class HttpRequestError(AocError):
    """Raised for HTTP failures without a more specific meaning."""

    def __init__(self, url: str, status: int | None = None, reason: str | None = None) -> None:
        if status is not None:
            message = f"HTTP request error: status {status} for {url}"
        else:
            message = f"HTTP request error: {reason} for {url}"
        super().__init__(message)
        self.url = url
        self.status = status
        self.reason = reason


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

class FileWriteError(AocError):
    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Failed to write to file '{filename}': {reason}")
        self.filename = filename


class InvalidOutputWidth(AocError):
    def __init__(self, width: int) -> None:
        super().__init__(f"Output width must be greater than zero (got {width})")
        self.width = width
