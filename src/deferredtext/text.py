"""Deferred text descriptors.

A Text value describes how to obtain user-facing text without resolving
it, so view-models and services can hand text to the UI without access to
a resource system. Resolution happens later through render() or resolve().

Text is a closed union of six immutable variants:
    Raw                - pre-resolved text, no lookup needed
    StringResource     - plain localized string
    StringResourceArgs - localized string with positional substitution
    HtmlResource       - localized string interpreted as HTML
    PluralResource     - quantity-sensitive localized string
    PluralResourceArgs - quantity-sensitive localized string with substitution

Variants are built with the from_* constructors and dispatched with
structural pattern matching:

    match text:
        case Raw(value=value): ...
        case PluralResource(id=id, quantity=quantity): ...

Equality is structural. The argument-carrying variants compare format
arguments element-wise and hash them through a hashable projection, so a
descriptor holding a list or dict argument is still usable as a dict key.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import final

from deferredtext.rich_text import RichText

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Union and variants
    "Text",
    "TEXT_TYPES",
    "Raw",
    "StringResource",
    "StringResourceArgs",
    "HtmlResource",
    "PluralResource",
    "PluralResourceArgs",
    # Constructors
    "from_literal",
    "from_string_resource",
    "from_html_resource",
    "from_plural_resource",
    # Accessors
    "raw_key",
]

# Hashable projection of an arbitrary format argument.
# Recursive definition: primitives plus tuple/frozenset of self.
type HashableValue = (
    str
    | int
    | float
    | bool
    | Decimal
    | datetime
    | date
    | None
    | tuple["HashableValue", ...]
    | frozenset["HashableValue"]
)


def _make_hashable(value: object) -> HashableValue:
    """Convert potentially unhashable value to hashable equivalent.

    Converts:
        - list/tuple -> tuple (recursively)
        - dict -> frozenset of (key, value) pairs (recursively)
        - set -> frozenset (recursively)
        - Other values -> unchanged (assumed hashable)
    """
    match value:
        case list() | tuple():
            return tuple(_make_hashable(v) for v in value)
        case dict():
            return frozenset((k, _make_hashable(v)) for k, v in value.items())
        case set() | frozenset():
            return frozenset(_make_hashable(v) for v in value)
        case _:
            return value  # type: ignore[return-value]


def _as_format_args(format_args: Sequence[object]) -> tuple[object, ...]:
    if isinstance(format_args, (str, bytes)):
        msg = (
            f"format_args must be a sequence of arguments, not {type(format_args).__name__}; "
            "wrap a single argument in a tuple"
        )
        raise TypeError(msg)
    return tuple(format_args)


@final
@dataclass(frozen=True, slots=True)
class Raw:
    """Pre-resolved text.

    Attributes:
        value: The text, returned verbatim by both resolvers
    """

    value: RichText


@final
@dataclass(frozen=True, slots=True)
class StringResource:
    """Reference to a plain localized string.

    Attributes:
        id: Resource identifier owned by the resource system
    """

    id: int


@final
@dataclass(frozen=True, slots=True)
class StringResourceArgs:
    """Reference to a localized string with positional format arguments.

    Attributes:
        id: Resource identifier owned by the resource system
        format_args: Arguments substituted in order
    """

    id: int
    format_args: tuple[object, ...]

    def __post_init__(self) -> None:
        """Store format arguments as a tuple."""
        object.__setattr__(self, "format_args", _as_format_args(self.format_args))

    def __hash__(self) -> int:
        return hash((self.id, _make_hashable(self.format_args)))


@final
@dataclass(frozen=True, slots=True)
class HtmlResource:
    """Reference to a localized string carrying HTML markup.

    Attributes:
        id: Resource identifier owned by the resource system
    """

    id: int


@final
@dataclass(frozen=True, slots=True)
class PluralResource:
    """Reference to a quantity-sensitive localized string.

    Attributes:
        id: Plural resource identifier owned by the resource system
        quantity: Number used to pick the plural form for the current locale
    """

    id: int
    quantity: int


@final
@dataclass(frozen=True, slots=True)
class PluralResourceArgs:
    """Reference to a quantity-sensitive localized string with arguments.

    Attributes:
        id: Plural resource identifier owned by the resource system
        quantity: Number used to pick the plural form for the current locale
        format_args: Arguments substituted in order
    """

    id: int
    quantity: int
    format_args: tuple[object, ...]

    def __post_init__(self) -> None:
        """Store format arguments as a tuple."""
        object.__setattr__(self, "format_args", _as_format_args(self.format_args))

    def __hash__(self) -> int:
        return hash((self.id, self.quantity, _make_hashable(self.format_args)))


type Text = (
    Raw
    | StringResource
    | StringResourceArgs
    | HtmlResource
    | PluralResource
    | PluralResourceArgs
)

# Runtime counterpart of Text for isinstance() checks.
TEXT_TYPES: tuple[type, ...] = (
    Raw,
    StringResource,
    StringResourceArgs,
    HtmlResource,
    PluralResource,
    PluralResourceArgs,
)


def from_literal(value: str | RichText) -> Text:
    """Wrap already resolved text.

    Example:
        >>> from_literal("hello")
        Raw(value=RichText(text='hello', spans=()))
    """
    return Raw(RichText.of(value))


def from_string_resource(id: int, format_args: Sequence[object] | None = None) -> Text:  # noqa: A002
    """Reference a localized string, optionally with format arguments.

    Passing format_args (even an empty sequence) selects
    StringResourceArgs; omitting it selects StringResource.

    Args:
        id: Resource identifier. 0 is invalid but not checked here;
            bad identifiers surface when the text is resolved.
        format_args: Positional arguments for substitution

    Example:
        >>> from_string_resource(0x7F0E0001)
        StringResource(id=2131623937)
        >>> from_string_resource(0x7F0E0002, ["Ada"])
        StringResourceArgs(id=2131623938, format_args=('Ada',))
    """
    if format_args is None:
        return StringResource(id)
    return StringResourceArgs(id, format_args)  # type: ignore[arg-type]


def from_html_resource(id: int) -> Text:  # noqa: A002
    """Reference a localized string whose content is HTML markup."""
    return HtmlResource(id)


def from_plural_resource(id: int, quantity: int, *format_args: object) -> Text:  # noqa: A002
    """Reference a plural resource.

    Args:
        id: Plural resource identifier. 0 is invalid but not checked here.
        quantity: Number used to pick the plural form for the current
            language's plural rules
        *format_args: Arguments for substitution. With none given the
            descriptor is a PluralResource, otherwise PluralResourceArgs.

    Example:
        >>> from_plural_resource(42, 3)
        PluralResource(id=42, quantity=3)
        >>> from_plural_resource(42, 3, 3)
        PluralResourceArgs(id=42, quantity=3, format_args=(3,))
    """
    if not format_args:
        return PluralResource(id, quantity)
    return PluralResourceArgs(id, quantity, format_args)


def raw_key(text: Text) -> int | str:
    """Return the unresolved payload of a descriptor.

    Raw yields its plain text; every other variant yields its resource
    identifier. Nothing is looked up.

    Raises:
        TypeError: If text is not a Text variant
    """
    match text:
        case Raw(value=value):
            return value.text
        case (
            StringResource(id=id)
            | StringResourceArgs(id=id)
            | HtmlResource(id=id)
            | PluralResource(id=id)
            | PluralResourceArgs(id=id)
        ):
            return id
        case _:
            msg = f"Expected a Text descriptor, got {type(text).__name__}"
            raise TypeError(msg)
