"""Resolution of Text descriptors against an explicit resource table.

resolve() needs nothing but a Resources implementation, so it can run in
services and background jobs. Without a render context there is no HTML
formatter, and HtmlResource descriptors are rejected.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import overload

from deferredtext.errors import UnsupportedTextError
from deferredtext.resources import Resources
from deferredtext.rich_text import RichText
from deferredtext.text import (
    HtmlResource,
    PluralResource,
    PluralResourceArgs,
    Raw,
    StringResource,
    StringResourceArgs,
    Text,
)

__all__ = ["resolve"]

logger = logging.getLogger(__name__)


@overload
def resolve(resources: Resources, text: Text) -> RichText: ...


@overload
def resolve(resources: Resources, text: None) -> None: ...


def resolve(resources: Resources, text: Text | None) -> RichText | None:
    """Resolve a descriptor using only a resource table.

    Args:
        resources: Resource system to look strings up in
        text: Descriptor to resolve, or None

    Returns:
        Plain rich text, or None when text is None (the table is not touched)

    Raises:
        UnsupportedTextError: For HtmlResource, whatever the table contains
        TypeError: If text is not a Text variant
        Any error raised by the resource system propagates unchanged.

    Example:
        >>> table = ResourceTable(plurals={42: {"one": "1 item", "other": "{} items"}})
        >>> resolve(table, from_plural_resource(42, 3, 3)).text
        '3 items'
    """
    match text:
        case None:
            return None
        case Raw(value=value):
            return value
        case StringResource(id=rid):
            return RichText(resources.get_string(rid))
        case StringResourceArgs(id=rid, format_args=args):
            return RichText(resources.get_string(rid, *args))
        case PluralResource(id=rid, quantity=quantity):
            return RichText(resources.get_quantity_string(rid, quantity))
        case PluralResourceArgs(id=rid, quantity=quantity, format_args=args):
            return RichText(resources.get_quantity_string(rid, quantity, *args))
        case HtmlResource():
            logger.debug("Rejected %r: no HTML formatter outside render()", text)
            raise UnsupportedTextError(
                text, "HTML resources can only be resolved with render()"
            )
        case _:
            msg = f"Expected a Text descriptor, got {type(text).__name__}"
            raise TypeError(msg)
