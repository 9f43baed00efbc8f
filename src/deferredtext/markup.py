"""Default HTML formatter for HTML-flagged resources.

Converts the small tag vocabulary used in localized string resources into
RichText spans. Tokenizing is delegated to the standard library's
html.parser; this module only maps tags to styles.

Supported tags:
    Inline styles: b, strong, i, em, cite, dfn, u, ins, s, strike, del,
        sup, sub, tt, code, big, small
    Annotated: a (href), font (color)
    Line breaks: br; p, div, li and blockquote start and end on a new line

Unknown tags are dropped and their content kept. Character references are
decoded. Runs of whitespace collapse to a single space, as in HTML.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import html
import re
from collections.abc import Callable, Sequence
from html.parser import HTMLParser

from deferredtext.enums import SpanStyle
from deferredtext.rich_text import RichText, Span

__all__ = [
    "HtmlFormatter",
    "escape_format_args",
    "parse_html",
]

type HtmlFormatter = Callable[[str], RichText]
"""Converts an HTML-flagged resource string into rich text."""

_TAG_STYLES: dict[str, SpanStyle] = {
    "b": SpanStyle.BOLD,
    "strong": SpanStyle.BOLD,
    "i": SpanStyle.ITALIC,
    "em": SpanStyle.ITALIC,
    "cite": SpanStyle.ITALIC,
    "dfn": SpanStyle.ITALIC,
    "u": SpanStyle.UNDERLINE,
    "ins": SpanStyle.UNDERLINE,
    "s": SpanStyle.STRIKETHROUGH,
    "strike": SpanStyle.STRIKETHROUGH,
    "del": SpanStyle.STRIKETHROUGH,
    "sup": SpanStyle.SUPERSCRIPT,
    "sub": SpanStyle.SUBSCRIPT,
    "tt": SpanStyle.MONOSPACE,
    "code": SpanStyle.MONOSPACE,
    "big": SpanStyle.BIG,
    "small": SpanStyle.SMALL,
}

_BLOCK_TAGS = frozenset({"p", "div", "li", "blockquote"})

_WHITESPACE = re.compile(r"\s+")


class _RichTextBuilder(HTMLParser):
    """Accumulates text and spans while the parser walks the markup."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._chunks: list[str] = []
        self._length = 0
        # (tag, slot in _spans, start offset, style, value)
        self._open: list[tuple[str, int, int, SpanStyle, str | None]] = []
        self._spans: list[Span | None] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag == "br":
            self._append("\n")
            return
        if tag in _BLOCK_TAGS:
            self._break_line()
            return
        styled = _style_for(tag, dict(attrs))
        if styled is None:
            return
        style, value = styled
        self._open.append((tag, len(self._spans), self._length, style, value))
        self._spans.append(None)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        # Self-closing inline tags (<b/>) cover nothing
        if tag == "br":
            self._append("\n")
        elif tag in _BLOCK_TAGS:
            self._break_line()

    def handle_endtag(self, tag: str) -> None:
        if tag in _BLOCK_TAGS:
            self._break_line()
            return
        for index in range(len(self._open) - 1, -1, -1):
            if self._open[index][0] == tag:
                _, slot, start, style, value = self._open.pop(index)
                self._spans[slot] = Span(start, self._length, style, value)
                return

    def handle_data(self, data: str) -> None:
        collapsed = _WHITESPACE.sub(" ", data)
        if collapsed.startswith(" ") and (not self._chunks or self._chunks[-1][-1:].isspace()):
            collapsed = collapsed[1:]
        if collapsed:
            self._append(collapsed)

    def _append(self, chunk: str) -> None:
        self._chunks.append(chunk)
        self._length += len(chunk)

    def _break_line(self) -> None:
        if self._chunks and not self._chunks[-1].endswith("\n"):
            self._append("\n")

    def build(self) -> RichText:
        self.close()
        # Unclosed tags run to the end of the text
        for _, slot, start, style, value in self._open:
            self._spans[slot] = Span(start, self._length, style, value)
        self._open.clear()

        text = "".join(self._chunks).rstrip("\n")
        end = len(text)
        spans = tuple(
            Span(min(span.start, end), min(span.end, end), span.style, span.value)
            for span in self._spans
            if span is not None and min(span.start, end) < min(span.end, end)
        )
        return RichText(text, spans)


def _style_for(tag: str, attrs: dict[str, str | None]) -> tuple[SpanStyle, str | None] | None:
    if tag in _TAG_STYLES:
        return _TAG_STYLES[tag], None
    if tag == "a" and attrs.get("href"):
        return SpanStyle.LINK, attrs["href"]
    if tag == "font" and attrs.get("color"):
        return SpanStyle.COLOR, attrs["color"]
    return None


def parse_html(source: str) -> RichText:
    """Parse an HTML-flagged resource string into rich text.

    Example:
        >>> rich = parse_html("Hello <b>world</b>")
        >>> rich.text
        'Hello world'
        >>> rich.spans
        (Span(start=6, end=11, style=<SpanStyle.BOLD: 'bold'>, value=None),)
    """
    builder = _RichTextBuilder()
    builder.feed(source)
    return builder.build()


def escape_format_args(format_args: Sequence[object]) -> tuple[object, ...]:
    """Escape textual arguments before they are substituted into markup.

    Strings and rich text are HTML-escaped so user data cannot inject tags.
    Other values (numbers, dates) pass through untouched, keeping format
    specs such as {0:d} working.
    """
    return tuple(
        html.escape(str(arg)) if isinstance(arg, (str, RichText)) else arg
        for arg in format_args
    )
