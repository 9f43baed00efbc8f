"""Render-time resolution of Text descriptors.

render() resolves a descriptor with everything a rendering layer has at
hand: a resource system and an HTML formatter, bundled in a RenderContext.

The context is either passed explicitly or installed for a block of code
with use_render_context(). The ambient context lives in a ContextVar, so
each thread and asyncio task sees its own value.

    context = RenderContext(table)
    render(text, context)            # explicit

    with use_render_context(context):
        render(text)                 # ambient

Python 3.13+.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar, Token
from dataclasses import dataclass

from deferredtext.constants import DEPRECATION_REMOVAL_VERSION
from deferredtext.deprecation import deprecated
from deferredtext.errors import MissingRenderContextError
from deferredtext.markup import HtmlFormatter, escape_format_args, parse_html
from deferredtext.resources import Resources
from deferredtext.rich_text import RichText
from deferredtext.text import (
    TEXT_TYPES,
    HtmlResource,
    PluralResource,
    PluralResourceArgs,
    Raw,
    StringResource,
    StringResourceArgs,
    Text,
)

__all__ = [
    "RenderContext",
    "RenderScope",
    "current_render_context",
    "obtain",
    "render",
    "use_render_context",
]

logger = logging.getLogger(__name__)

_render_context: ContextVar[RenderContext | None] = ContextVar(
    "deferredtext_render_context", default=None
)


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Everything render() may consult while resolving a descriptor.

    Attributes:
        resources: Resource system for string and plural lookups
        html: Formatter turning HTML-flagged strings into rich text
    """

    resources: Resources
    html: HtmlFormatter = parse_html


class RenderScope:
    """Context manager installing a RenderContext as the ambient context.

    Scopes nest; leaving a scope restores whatever context was active when
    it was entered.
    """

    __slots__ = ("_context", "_token")

    def __init__(self, context: RenderContext) -> None:
        self._context = context
        self._token: Token[RenderContext | None] | None = None

    def __enter__(self) -> RenderContext:
        self._token = _render_context.set(self._context)
        logger.debug("Render context installed: %r", self._context.resources)
        return self._context

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        if self._token is not None:
            _render_context.reset(self._token)
            self._token = None
            logger.debug("Render context restored")


def use_render_context(context: RenderContext) -> RenderScope:
    """Install context as the ambient render context for a with-block."""
    return RenderScope(context)


def current_render_context() -> RenderContext:
    """Return the ambient render context.

    Raises:
        MissingRenderContextError: If no context is installed
    """
    context = _render_context.get()
    if context is None:
        raise MissingRenderContextError()
    return context


def render(text: Text, context: RenderContext | None = None) -> RichText:
    """Resolve a descriptor to rich text at render time.

    Args:
        text: Descriptor to resolve
        context: Render context; defaults to the ambient one

    Returns:
        Resolved rich text:
            Raw                - the wrapped text, unchanged
            StringResource     - plain string lookup
            StringResourceArgs - string lookup with substitution
            HtmlResource       - string lookup parsed by the HTML formatter
            PluralResource     - plural lookup, plain text
            PluralResourceArgs - plural lookup with HTML-escaped arguments,
                                 parsed as HTML

    Raises:
        MissingRenderContextError: If a lookup is needed and no context is
            available
        TypeError: If text is not a Text variant
        Any error raised by the resource system propagates unchanged.
    """
    if not isinstance(text, TEXT_TYPES):
        msg = f"Expected a Text descriptor, got {type(text).__name__}"
        raise TypeError(msg)
    # Raw never consults the context
    if isinstance(text, Raw):
        return text.value

    if context is None:
        context = current_render_context()
    resources = context.resources

    match text:
        case StringResource(id=rid):
            return RichText(resources.get_string(rid))
        case StringResourceArgs(id=rid, format_args=args):
            return RichText(resources.get_string(rid, *args))
        case HtmlResource(id=rid):
            return context.html(resources.get_string(rid))
        case PluralResource(id=rid, quantity=quantity):
            return RichText(resources.get_quantity_string(rid, quantity))
        case PluralResourceArgs(id=rid, quantity=quantity, format_args=args):
            escaped = escape_format_args(args)
            return context.html(resources.get_quantity_string(rid, quantity, *escaped))
        case _:
            msg = f"Expected a Text descriptor, got {type(text).__name__}"
            raise TypeError(msg)


@deprecated(removal_version=DEPRECATION_REMOVAL_VERSION, alternative="render")
def obtain(text: Text, context: RenderContext | None = None) -> RichText:
    """Resolve a descriptor to rich text at render time."""
    return render(text, context)
