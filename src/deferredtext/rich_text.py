"""Rich text: plain text plus positional style annotations.

RichText is the result type of both resolvers. Spans reference character
offsets into the text and never overlap the text bounds.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from deferredtext.enums import SpanStyle

__all__ = ["RichText", "Span"]


@dataclass(frozen=True, slots=True)
class Span:
    """Style annotation covering text[start:end].

    Attributes:
        start: Inclusive start offset
        end: Exclusive end offset
        style: Applied style
        value: Style payload (href for LINK, color for COLOR), else None
    """

    start: int
    end: int
    style: SpanStyle
    value: str | None = None

    def shifted(self, offset: int) -> Span:
        """Return the same span moved right by offset characters."""
        return Span(self.start + offset, self.end + offset, self.style, self.value)


@dataclass(frozen=True, slots=True)
class RichText:
    """Immutable annotated string.

    Attributes:
        text: Plain text content
        spans: Style annotations, in the order they were opened

    Example:
        >>> bold = RichText("Hi", (Span(0, 2, SpanStyle.BOLD),))
        >>> str(bold + "!")
        'Hi!'
    """

    text: str
    spans: tuple[Span, ...] = ()

    def __post_init__(self) -> None:
        """Validate span bounds against the text."""
        if not isinstance(self.spans, tuple):
            object.__setattr__(self, "spans", tuple(self.spans))
        length = len(self.text)
        for span in self.spans:
            if not 0 <= span.start <= span.end <= length:
                msg = f"Span {span!r} out of bounds for text of length {length}"
                raise ValueError(msg)

    @classmethod
    def of(cls, value: str | RichText) -> RichText:
        """Wrap a plain string; rich text passes through unchanged."""
        if isinstance(value, RichText):
            return value
        return cls(value)

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    def __add__(self, other: object) -> RichText:
        if isinstance(other, str):
            other = RichText(other)
        if not isinstance(other, RichText):
            return NotImplemented
        offset = len(self.text)
        return RichText(
            self.text + other.text,
            self.spans + tuple(span.shifted(offset) for span in other.spans),
        )

    def __radd__(self, other: object) -> RichText:
        if isinstance(other, str):
            return RichText(other) + self
        return NotImplemented

    def styles_at(self, index: int) -> tuple[SpanStyle, ...]:
        """Styles of every span covering the character at index."""
        return tuple(span.style for span in self.spans if span.start <= index < span.end)
