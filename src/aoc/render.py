"""Render Advent of Code HTML fragments as terminal text or Markdown.

Extraction of the fragment is pattern based (see ``aoc.extract``); this module
only turns an already isolated fragment into text.
"""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from typing import Literal

from bs4 import BeautifulSoup, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

Mode = Literal["plain", "markup", "markdown"]

_SKIP_TAGS = frozenset({"script", "style", "head", "title", "noscript", "template"})
_NON_TEXT = (Comment, Declaration, Doctype, ProcessingInstruction)
_HEADINGS = {"h1": "#", "h2": "##", "h3": "###", "h4": "####", "h5": "#####", "h6": "######"}
_BLOCK_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "dd", "div", "dl", "dt",
    "fieldset", "figure", "footer", "form", "header", "hr", "main", "nav",
    "ol", "p", "section", "table", "tr", "ul",
}) | frozenset(_HEADINGS)


@dataclass
class _Block:
    text: str
    preformatted: bool = False
    bullet: str = ""


class _Walker:
    """Flattens a parsed fragment into paragraphs, headings and <pre> blocks."""

    def __init__(self, mode: Mode) -> None:
        self.mode = mode
        self.blocks: list[_Block] = []
        self._inline: list[str] = []
        self._pending_bullet = ""

    def walk(self, node: Tag) -> list[_Block]:
        self._walk(node)
        self._flush()
        return self.blocks

    def _walk(self, node: Tag) -> None:
        for child in node.children:
            if isinstance(child, _NON_TEXT):
                continue
            if isinstance(child, NavigableString):
                self._inline.append(str(child))
            elif child.name in _SKIP_TAGS:
                continue
            elif child.name == "br":
                self._inline.append("\n")
            elif child.name == "pre":
                self._flush()
                self.blocks.append(_Block(self._pre_text(child), preformatted=True))
            elif child.name == "li":
                self._flush()
                self._pending_bullet = "- " if self.mode == "markdown" else "* "
                self._walk(child)
                self._flush()
                self._pending_bullet = ""
            elif child.name in _BLOCK_TAGS:
                self._flush()
                self._walk(child)
                self._flush(heading=child.name if child.name in _HEADINGS else None)
            else:
                self._inline.append(self._inline_text(child))

    def _flush(self, heading: str | None = None) -> None:
        text = "".join(self._inline)
        self._inline.clear()
        if not text.strip():
            return
        if heading is not None and self.mode != "plain":
            text = f"{_HEADINGS[heading]} {' '.join(text.split())}"
        self.blocks.append(_Block(text, bullet=self._pending_bullet))
        self._pending_bullet = ""

    def _inline_text(self, node: Tag) -> str:
        parts: list[str] = []
        for child in node.children:
            if isinstance(child, _NON_TEXT):
                continue
            if isinstance(child, NavigableString):
                parts.append(str(child))
            elif child.name == "br":
                parts.append("\n")
            elif child.name not in _SKIP_TAGS:
                parts.append(self._inline_text(child))
        return self._decorate(node, "".join(parts))

    def _decorate(self, node: Tag, text: str) -> str:
        if self.mode == "plain" or not text.strip():
            return text
        if node.name in ("em", "i"):
            return f"*{text}*"
        if node.name in ("strong", "b"):
            return f"**{text}**"
        if node.name == "code":
            return f"`{text}`"
        if node.name == "a":
            href = node.get("href")
            if self.mode == "markdown" and href:
                return f"[{text}]({href})"
            return f"[{text}]"
        return text

    def _pre_text(self, node: Tag) -> str:
        text = node.get_text().strip("\n")
        if self.mode == "markdown":
            return f"```\n{text}\n```"
        return text


def _fill(block: _Block, width: int | None) -> str:
    if block.preformatted:
        return block.text
    indent = " " * len(block.bullet)
    lines: list[str] = []
    for raw in block.text.split("\n"):
        words = " ".join(raw.split())
        if not words:
            continue
        first = block.bullet if not lines else indent
        if width is None:
            lines.append(first + words)
        else:
            lines.extend(textwrap.wrap(
                words,
                width=width,
                initial_indent=first,
                subsequent_indent=indent,
                break_on_hyphens=False,
            ))
    return "\n".join(lines)


def _parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _verbatim_text(html: str) -> str:
    # Whitespace-only strings outside <pre> are collapsed by the parser.
    soup = _parse(f"<pre>{html}</pre>")
    for tag in soup.find_all(sorted(_SKIP_TAGS)):
        tag.decompose()
    for br in soup.find_all("br"):
        br.replace_with("\n")
    return "".join(
        str(s) for s in soup.find_all(string=True) if not isinstance(s, _NON_TEXT)
    )


def html_to_text(
    html: str,
    width: int | None = None,
    *,
    show_markup: bool = False,
    preformatted: bool = False,
) -> str:
    """Convert an HTML fragment to text wrapped at *width* columns.

    A *width* of None leaves paragraphs unwrapped. The result always ends
    with a newline. With *preformatted* every piece of text is kept exactly
    as written and tags are dropped without wrapping, as a fragment cut out
    of a ``<pre>`` block needs.
    """
    if preformatted:
        return _verbatim_text(html) + "\n"
    blocks = _Walker("markup" if show_markup else "plain").walk(_parse(html))
    return "\n\n".join(_fill(block, width) for block in blocks) + "\n"


def html_to_markdown(html: str) -> str:
    blocks = _Walker("markdown").walk(_parse(html))
    return "\n\n".join(_fill(block, None) for block in blocks) + "\n"
