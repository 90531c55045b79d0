"""Turn an Advent of Code calendar page into terminal text.

The calendar is drawn with markup and CSS that only make sense in a browser.
Rendering runs in fixed stages: extract the <main> fragment, strip each
year's decorative noise, fill in the collected stars, optionally recolor the
per-year color classes, then convert to text without mangling the ANSI
escapes inserted along the way.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from aoc.extract import extract_main
from aoc.render import html_to_text
from aoc.style import ESCAPE_RE, GOLD, hex_color, paint, wrap_ansi

PERFECT_MARKER = "calendar calendar-perfect"


@dataclass(frozen=True)
class NoiseRule:
    """One year's decorative markup that does not render in a terminal."""

    name: str
    year: int
    pattern: re.Pattern[str]

    def strip(self, html: str) -> str:
        return self.pattern.sub("", html)


# Append new years at the end; rules run in this order.
NOISE_RULES: tuple[NoiseRule, ...] = (
    NoiseRule(
        "calendar-bkg",
        2015,
        re.compile(r'<div class="calendar-bkg">\s*(?:<div>[^<]*</div>\s*)*</div>'),
    ),
    NoiseRule(
        "calendar-printer",
        2017,
        re.compile(r'<div class="calendar-printer">.*\|O\|</span></div>\s*', re.DOTALL),
    ),
    NoiseRule(
        "spacemug",
        2018,
        re.compile(r'<pre id="spacemug"[^>]*>[^<]*</pre>'),
    ),
    NoiseRule(
        "shadows",
        2019,
        re.compile(r'<span style="color[^>]*position:absolute[^>]*>\.</span>'),
    ),
    NoiseRule(
        "sunbeam",
        2019,
        re.compile(
            r'<span class="sunbeam"[^>]*>'
            r'<span style="animation-delay[^>]*>\*</span></span>'
        ),
    ),
)


def strip_decorations(html: str, rules: tuple[NoiseRule, ...] = NOISE_RULES) -> str:
    for rule in rules:
        html = rule.strip(html)
    return html


# ---------------------------------------------------------------------------
# Stars
# ---------------------------------------------------------------------------

class Completion(enum.Enum):
    NONE = "none"
    ONE_STAR = "one-star"
    TWO_STARS = "two-star"


@dataclass
class CalendarLine:
    markup: str
    completion: Completion


_ANCHOR_CLASS_RE = re.compile(r'<a [^>]*class="(?P<class>[^"]*)"')
_STAR_MARKER_RE = re.compile(
    r'<span class="calendar-mark-complete">\*</span>'
    r'<span class="calendar-mark-verycomplete">\*</span>'
)
_STARS = {Completion.NONE: "", Completion.ONE_STAR: "*", Completion.TWO_STARS: "**"}


def _line_completion(line: str, perfect: bool) -> Completion:
    match = _ANCHOR_CLASS_RE.search(line)
    css_class = match.group("class") if match else ""
    if "calendar-verycomplete" in css_class or perfect:
        return Completion.TWO_STARS
    if "calendar-complete" in css_class:
        return Completion.ONE_STAR
    return Completion.NONE


def classify_lines(html: str, *, perfect: bool = False) -> list[CalendarLine]:
    return [CalendarLine(line, _line_completion(line, perfect)) for line in html.split("\n")]


def fill_stars(lines: list[CalendarLine], *, color: bool) -> str:
    """Replace each line's star marker with the stars actually collected."""
    out = []
    for line in lines:
        stars = paint(_STARS[line.completion], GOLD, color)
        out.append(_STAR_MARKER_RE.sub(lambda _: stars, line.markup, count=1))
    return "\n".join(out)


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------

_COLOR_RULE_RE = re.compile(r"\.calendar \.(calendar-color-[^ ]+) \{ color:#([0-9a-f]{6})")


def recolor(html: str) -> str:
    """Paint the text of every ``calendar-color-*`` span with its CSS color."""
    colors = dict(_COLOR_RULE_RE.findall(html))
    for css_class, rgb in colors.items():
        span_re = re.compile(rf'(<span class="{re.escape(css_class)}">)([^<]*)(</span>)')
        style = hex_color(rgb)
        html = span_re.sub(lambda m: m.group(1) + paint(m.group(2), style) + m.group(3), html)
    return html


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _segment_text(segment: str) -> str:
    text = html_to_text(segment, preformatted=True)
    return text.removesuffix("\n")


def render_colored_html(html: str, width: int) -> str:
    """Convert HTML that already holds raw ANSI escapes into wrapped text.

    The text between escapes is converted piece by piece and the escapes are
    spliced back in untouched.
    """
    pieces: list[str] = []
    pos = 0
    for match in ESCAPE_RE.finditer(html):
        pieces.append(_segment_text(html[pos:match.start()]))
        pieces.append(match.group())
        pos = match.end()
    pieces.append(_segment_text(html[pos:]))
    return wrap_ansi("".join(pieces), width)


def render_calendar(page: str, *, width: int, color: bool) -> str:
    main = extract_main(page)
    perfect = PERFECT_MARKER in main
    cleaned = strip_decorations(main)
    calendar = fill_stars(classify_lines(cleaned, perfect=perfect), color=color)
    if color:
        calendar = recolor(calendar)
    return render_colored_html(calendar, width).strip("\n")
