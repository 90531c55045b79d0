"""Advent of Code HTTP client.

This module owns all network I/O. Requests are plain blocking urllib calls
that never follow redirects: a 302 from the server carries meaning of its own.
"""

from __future__ import annotations

import logging
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from pydantic import ValidationError

from aoc.config import BASE_URL, USER_AGENT
from aoc.errors import (
    HttpRequestError,
    InvalidEventYear,
    PrivateLeaderboardNotAvailable,
    UnparseableResponse,
)
from aoc.extract import extract_main, extract_title, looks_logged_out
from aoc.models import LeaderboardSnapshot, PuzzleDate, PuzzlePart, SubmissionOutcome
from aoc.outcome import classify_outcome
from aoc.unlock import ensure_unlocked

log = logging.getLogger(__name__)


@dataclass
class HttpResponse:
    status: int
    body: str


class _NoRedirect(urllib.request.HTTPRedirectHandler):
    def redirect_request(self, req, fp, code, msg, headers, newurl):
        return None


_OPENER = urllib.request.build_opener(_NoRedirect)


def http_request(
    url: str,
    *,
    session_cookie: str,
    content_type: str,
    data: bytes | None = None,
) -> HttpResponse:
    """Send a GET (or a POST when *data* is given) and return status and body.

    Every HTTP status comes back as a response; only transport failures raise.
    """
    req = urllib.request.Request(
        url,
        data=data,
        headers={
            "Cookie": f"session={session_cookie}",
            "Content-Type": content_type,
            "User-Agent": USER_AGENT,
        },
    )
    try:
        with _OPENER.open(req) as resp:
            return HttpResponse(resp.status, resp.read().decode("utf-8", errors="replace"))
    except urllib.error.HTTPError as err:
        with err:
            body = err.read().decode("utf-8", errors="replace")
        return HttpResponse(err.code, body)
    except urllib.error.URLError as err:
        raise HttpRequestError(url, reason=str(err.reason)) from err


Transport = Callable[..., HttpResponse]


class AocClient:
    def __init__(self, session_cookie: str, *, transport: Transport | None = None) -> None:
        self._session_cookie = session_cookie
        self._transport = transport or http_request

    def _send(self, url: str, content_type: str, data: bytes | None = None) -> HttpResponse:
        return self._transport(
            url,
            session_cookie=self._session_cookie,
            content_type=content_type,
            data=data,
        )

    def _get_ok(self, url: str, content_type: str, data: bytes | None = None) -> str:
        response = self._send(url, content_type, data)
        if response.status != 200:
            raise HttpRequestError(url, status=response.status)
        return response.body

    def get_puzzle_html(self, date: PuzzleDate, now: datetime | None = None) -> str:
        ensure_unlocked(date, now)
        log.debug("Fetching puzzle for %s", date)
        page = self._get_ok(f"{BASE_URL}/{date.year}/day/{date.day}", "text/html")
        title = extract_title(page)
        if title:
            log.debug("Puzzle title: %s", title)
        return extract_main(page)

    def get_input(self, date: PuzzleDate, now: datetime | None = None) -> str:
        ensure_unlocked(date, now)
        log.debug("Fetching input for %s", date)
        return self._get_ok(f"{BASE_URL}/{date.year}/day/{date.day}/input", "text/plain")

    def submit_answer_html(
        self,
        date: PuzzleDate,
        part: PuzzlePart,
        answer: str,
        now: datetime | None = None,
    ) -> str:
        ensure_unlocked(date, now)
        log.debug("Submitting answer for part %s, %s", part, date)
        body = urllib.parse.urlencode({"level": part.value, "answer": answer}).encode()
        page = self._get_ok(
            f"{BASE_URL}/{date.year}/day/{date.day}/answer",
            "application/x-www-form-urlencoded",
            body,
        )
        return extract_main(page)

    def submit_answer(
        self,
        date: PuzzleDate,
        part: PuzzlePart,
        answer: str,
        now: datetime | None = None,
    ) -> SubmissionOutcome:
        return classify_outcome(self.submit_answer_html(date, part, answer, now))

    def get_calendar_page(self, year: int) -> str:
        log.debug("Fetching %s calendar", year)
        url = f"{BASE_URL}/{year}"
        response = self._send(url, "text/html")
        if response.status == 404:
            raise InvalidEventYear(year)
        if response.status != 200:
            raise HttpRequestError(url, status=response.status)
        if looks_logged_out(response.body):
            log.warning("It looks like you are not logged in, try logging in again")
        return response.body

    def get_private_leaderboard(self, year: int, leaderboard_id: int) -> LeaderboardSnapshot:
        log.debug("Fetching private leaderboard %s", leaderboard_id)
        url = f"{BASE_URL}/{year}/leaderboard/private/view/{leaderboard_id}.json"
        response = self._send(url, "application/json")
        # 302: the board does not exist or we are not a member.
        if response.status == 302:
            raise PrivateLeaderboardNotAvailable(leaderboard_id)
        if response.status != 200:
            raise HttpRequestError(url, status=response.status)
        try:
            return LeaderboardSnapshot.model_validate_json(response.body)
        except ValidationError as err:
            raise UnparseableResponse(f"invalid leaderboard JSON ({err.error_count()} errors)") from err
