"""Enumerations for deferredtext type-safe constants.

Uses StrEnum for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class SpanStyle(StrEnum):
    """Style applied to a span of rich text.

    StrEnum provides automatic string conversion: str(SpanStyle.BOLD) == "bold"
    """

    BOLD = "bold"
    """<b>, <strong>"""

    ITALIC = "italic"
    """<i>, <em>, <cite>, <dfn>"""

    UNDERLINE = "underline"
    """<u>, <ins>"""

    STRIKETHROUGH = "strikethrough"
    """<s>, <strike>, <del>"""

    SUPERSCRIPT = "superscript"
    """<sup>"""

    SUBSCRIPT = "subscript"
    """<sub>"""

    MONOSPACE = "monospace"
    """<tt>, <code>"""

    BIG = "big"
    """<big>"""

    SMALL = "small"
    """<small>"""

    LINK = "link"
    """<a href="..."> - span value holds the href"""

    COLOR = "color"
    """<font color="..."> - span value holds the color"""


class PluralCategory(StrEnum):
    """CLDR plural category.

    StrEnum members compare equal to the plain strings Babel returns.
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


__all__ = [
    "PluralCategory",
    "SpanStyle",
]
