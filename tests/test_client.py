"""Tests for the Advent of Code HTTP client."""
from __future__ import annotations

import io
import json
import urllib.error
from datetime import datetime, timezone
from unittest import mock

import pytest

from aoc import client
from aoc.client import AocClient, HttpResponse, http_request
from aoc.errors import (
    ContentNotFound,
    HttpRequestError,
    InvalidEventYear,
    LockedPuzzle,
    PrivateLeaderboardNotAvailable,
    UnparseableResponse,
)
from aoc.models import PuzzleDate, PuzzlePart, SubmissionOutcome

COOKIE = "abc123"
NOW = datetime(2023, 12, 10, 12, 0, tzinfo=timezone.utc)
DATE = PuzzleDate(year=2023, day=5)

LEADERBOARD_JSON = json.dumps({
    "owner_id": 1,
    "event": "2023",
    "members": {
        "1": {"id": 1, "name": "Alice", "local_score": 12, "stars": 3,
              "completion_day_level": {"1": {"1": {}, "2": {}}, "2": {"1": {}}}},
        "2": {"id": 2, "name": None, "local_score": 4, "stars": 1,
              "completion_day_level": {"1": {"1": {}}}},
    },
})


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class FakeTransport:
    """Returns canned responses in order and records every request."""

    def __init__(self, *responses: HttpResponse) -> None:
        self.responses = list(responses)
        self.calls: list[dict] = []

    def __call__(self, url, *, session_cookie, content_type, data=None):
        self.calls.append({
            "url": url,
            "session_cookie": session_cookie,
            "content_type": content_type,
            "data": data,
        })
        return self.responses.pop(0)


def _client(*responses: HttpResponse) -> tuple[AocClient, FakeTransport]:
    transport = FakeTransport(*responses)
    return AocClient(COOKIE, transport=transport), transport


def _page(main: str) -> str:
    return f"<html><body><header>nav</header><main>{main}</main></body></html>"


# ---------------------------------------------------------------------------
# Puzzle, input and answers
# ---------------------------------------------------------------------------

class TestPuzzle:
    def test_get_puzzle_html(self):
        aoc, transport = _client(HttpResponse(200, _page("<article><h2>--- Day 5: X ---</h2></article>")))
        assert aoc.get_puzzle_html(DATE, NOW) == "<article><h2>--- Day 5: X ---</h2></article>"
        assert transport.calls == [{
            "url": "https://adventofcode.com/2023/day/5",
            "session_cookie": COOKIE,
            "content_type": "text/html",
            "data": None,
        }]

    def test_locked_puzzle_never_hits_network(self):
        aoc, transport = _client()
        with pytest.raises(LockedPuzzle):
            aoc.get_puzzle_html(PuzzleDate(year=2023, day=11), NOW)
        assert transport.calls == []

    def test_missing_main(self):
        aoc, _ = _client(HttpResponse(200, "<html>maintenance</html>"))
        with pytest.raises(ContentNotFound):
            aoc.get_puzzle_html(DATE, NOW)

    def test_error_status(self):
        aoc, _ = _client(HttpResponse(500, "oops"))
        with pytest.raises(HttpRequestError, match="status 500") as exc_info:
            aoc.get_puzzle_html(DATE, NOW)
        assert exc_info.value.url == "https://adventofcode.com/2023/day/5"

    def test_get_input(self):
        aoc, transport = _client(HttpResponse(200, "1\n2\n3\n"))
        assert aoc.get_input(DATE, NOW) == "1\n2\n3\n"
        assert transport.calls[0]["url"] == "https://adventofcode.com/2023/day/5/input"
        assert transport.calls[0]["content_type"] == "text/plain"

    def test_get_input_locked(self):
        aoc, transport = _client()
        with pytest.raises(LockedPuzzle):
            aoc.get_input(PuzzleDate(year=2024, day=1), NOW)
        assert transport.calls == []


class TestSubmit:
    def test_posts_form_body(self):
        aoc, transport = _client(HttpResponse(200, _page("<p>That's the right answer!</p>")))
        assert aoc.submit_answer(DATE, PuzzlePart.TWO, "4 2", NOW) is SubmissionOutcome.CORRECT
        call = transport.calls[0]
        assert call["url"] == "https://adventofcode.com/2023/day/5/answer"
        assert call["content_type"] == "application/x-www-form-urlencoded"
        assert call["data"] == b"level=2&answer=4+2"

    def test_reply_fragment(self):
        aoc, _ = _client(HttpResponse(200, _page("<p>That's not the right answer.</p>")))
        assert aoc.submit_answer_html(DATE, PuzzlePart.ONE, "1", NOW) == "<p>That's not the right answer.</p>"

    def test_unrecognized_reply(self):
        aoc, _ = _client(HttpResponse(200, _page("<p>Huh?</p>")))
        with pytest.raises(UnparseableResponse):
            aoc.submit_answer(DATE, PuzzlePart.ONE, "1", NOW)

    def test_locked(self):
        aoc, transport = _client()
        with pytest.raises(LockedPuzzle):
            aoc.submit_answer(PuzzleDate(year=2023, day=25), PuzzlePart.ONE, "1", NOW)
        assert transport.calls == []


# ---------------------------------------------------------------------------
# Calendar and leaderboard
# ---------------------------------------------------------------------------

class TestCalendarPage:
    def test_returns_whole_page(self):
        page = _page("<pre class=\"calendar\"></pre>")
        aoc, transport = _client(HttpResponse(200, page))
        assert aoc.get_calendar_page(2019) == page
        assert transport.calls[0]["url"] == "https://adventofcode.com/2019"

    def test_unknown_year(self):
        aoc, _ = _client(HttpResponse(404, "Not Found"))
        with pytest.raises(InvalidEventYear):
            aoc.get_calendar_page(2014)

    def test_other_error(self):
        aoc, _ = _client(HttpResponse(503, ""))
        with pytest.raises(HttpRequestError):
            aoc.get_calendar_page(2019)

    def test_logged_out_warning(self, caplog):
        aoc, _ = _client(HttpResponse(200, '<a href="/2019/auth/login">[Log In]</a><main></main>'))
        with caplog.at_level("WARNING", logger="aoc"):
            aoc.get_calendar_page(2019)
        assert "not logged in" in caplog.text


class TestPrivateLeaderboard:
    def test_parses_snapshot(self):
        aoc, transport = _client(HttpResponse(200, LEADERBOARD_JSON))
        snapshot = aoc.get_private_leaderboard(2023, 42)
        assert transport.calls[0]["url"] == (
            "https://adventofcode.com/2023/leaderboard/private/view/42.json"
        )
        assert transport.calls[0]["content_type"] == "application/json"
        assert snapshot.owner_id == 1
        assert snapshot.members[1].count_stars(1) == 2
        assert snapshot.members[2].name is None

    def test_redirect_means_not_available(self):
        aoc, _ = _client(HttpResponse(302, ""))
        with pytest.raises(PrivateLeaderboardNotAvailable, match="42"):
            aoc.get_private_leaderboard(2023, 42)

    @pytest.mark.parametrize("body", ["<html>login</html>", "{}", '{"owner_id": 1, "members": []}'])
    def test_invalid_json(self, body):
        aoc, _ = _client(HttpResponse(200, body))
        with pytest.raises(UnparseableResponse):
            aoc.get_private_leaderboard(2023, 42)

    def test_error_status(self):
        aoc, _ = _client(HttpResponse(500, ""))
        with pytest.raises(HttpRequestError):
            aoc.get_private_leaderboard(2023, 42)


# ---------------------------------------------------------------------------
# http_request
# ---------------------------------------------------------------------------

class TestHttpRequest:
    def _ok_response(self, body: bytes) -> mock.MagicMock:
        resp = mock.MagicMock()
        resp.__enter__.return_value = resp
        resp.status = 200
        resp.read.return_value = body
        return resp

    def test_sends_headers(self):
        with mock.patch.object(client, "_OPENER") as opener:
            opener.open.return_value = self._ok_response(b"hello")
            result = http_request("https://example.test/x", session_cookie=COOKIE, content_type="text/plain")
        assert result == HttpResponse(200, "hello")
        req = opener.open.call_args.args[0]
        assert req.get_header("Cookie") == f"session={COOKIE}"
        assert req.get_header("Content-type") == "text/plain"
        assert req.get_header("User-agent").startswith("aoc-cli/")
        assert req.get_method() == "GET"

    def test_post_with_data(self):
        with mock.patch.object(client, "_OPENER") as opener:
            opener.open.return_value = self._ok_response(b"")
            http_request("https://example.test/x", session_cookie=COOKIE, content_type="text/plain", data=b"a=1")
        assert opener.open.call_args.args[0].get_method() == "POST"

    def test_http_error_status_returned(self):
        error = urllib.error.HTTPError("https://example.test/x", 302, "Found", {}, io.BytesIO(b"moved"))
        with mock.patch.object(client, "_OPENER") as opener:
            opener.open.side_effect = error
            result = http_request("https://example.test/x", session_cookie=COOKIE, content_type="text/html")
        assert result == HttpResponse(302, "moved")

    def test_transport_failure(self):
        with mock.patch.object(client, "_OPENER") as opener:
            opener.open.side_effect = urllib.error.URLError("Name or service not known")
            with pytest.raises(HttpRequestError, match="Name or service not known"):
                http_request("https://example.test/x", session_cookie=COOKIE, content_type="text/html")

    def test_redirects_not_followed(self):
        handler = client._NoRedirect()
        assert handler.redirect_request(None, None, 302, "Found", {}, "https://example.test/y") is None
