"""Exception hierarchy for deferred text resolution.

Every exception carries an ErrorCode so callers can branch on a stable
identifier instead of matching message text.

Resolvers never wrap failures raised by a resource system; a
ResourceLookupError raised by a table reaches the caller unchanged.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from deferredtext.text import Text

__all__ = [
    "ErrorCode",
    "MissingRenderContextError",
    "ResourceFormatError",
    "ResourceLookupError",
    "ResourceNotFoundError",
    "TextError",
    "UnsupportedTextError",
]


def _describe_id(resource_id: int) -> str:
    """Render a resource id the way resource tools print them (0x7f0e0001)."""
    if isinstance(resource_id, int) and not isinstance(resource_id, bool):
        return f"{resource_id:#x}"
    return repr(resource_id)


class ErrorCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Resource lookup errors (raised by resource tables)
        2000-2999: Resolution errors (raised by the resolvers)
    """

    # Resource lookup errors (1000-1999)
    RESOURCE_NOT_FOUND = 1001
    RESOURCE_FORMAT_FAILED = 1002

    # Resolution errors (2000-2999)
    UNSUPPORTED_TEXT = 2001
    RENDER_CONTEXT_MISSING = 2002


class TextError(Exception):
    """Base exception for all deferredtext errors.

    Attributes:
        code: Stable error code
    """

    code: ErrorCode

    def __init__(self, message: str, code: ErrorCode) -> None:
        super().__init__(message)
        self.code = code


class UnsupportedTextError(TextError):
    """Descriptor variant cannot be resolved on this path.

    Raised by resolve() for HtmlResource: resolving against a bare
    resource table has no HTML formatter available.

    Attributes:
        text: The descriptor that was rejected
    """

    def __init__(self, text: Text, reason: str) -> None:
        super().__init__(
            f"{type(text).__name__} is not supported: {reason}",
            ErrorCode.UNSUPPORTED_TEXT,
        )
        self.text = text


class ResourceLookupError(TextError):
    """Base for failures raised by a resource system during lookup.

    Attributes:
        resource_id: Identifier that was looked up
    """

    def __init__(self, message: str, code: ErrorCode, resource_id: int) -> None:
        super().__init__(message, code)
        self.resource_id = resource_id


class ResourceNotFoundError(ResourceLookupError):
    """No resource registered under the requested identifier.

    Attributes:
        resource_id: Identifier that was looked up
        locale: Locale of the table that was searched
    """

    def __init__(self, resource_id: int, locale: str, *, kind: str = "string") -> None:
        super().__init__(
            f"No {kind} resource with id {_describe_id(resource_id)} for locale '{locale}'",
            ErrorCode.RESOURCE_NOT_FOUND,
            resource_id,
        )
        self.locale = locale


class ResourceFormatError(ResourceLookupError):
    """Template and format arguments do not fit together.

    The original IndexError/KeyError/ValueError is chained as __cause__.
    """

    def __init__(self, resource_id: int, template: str, detail: str) -> None:
        super().__init__(
            f"Cannot format resource {_describe_id(resource_id)} ({template!r}): {detail}",
            ErrorCode.RESOURCE_FORMAT_FAILED,
            resource_id,
        )
        self.template = template


class MissingRenderContextError(TextError):
    """render() was called with no explicit and no ambient RenderContext."""

    def __init__(self) -> None:
        super().__init__(
            "No render context available. Pass one explicitly or "
            "install one with use_render_context().",
            ErrorCode.RENDER_CONTEXT_MISSING,
        )
