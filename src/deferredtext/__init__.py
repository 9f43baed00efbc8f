"""deferredtext - deferred, render-time resolution of user-facing text.

Non-UI code describes text as an immutable descriptor; the UI layer resolves
it once a resource system (locale, plural rules, HTML formatting) is at hand.

Public API:
    Text - Union of the six descriptor variants
    from_literal, from_string_resource, from_html_resource,
    from_plural_resource - Descriptor constructors
    raw_key - Unresolved payload (literal text or resource id)
    render - Render-time resolver (explicit or ambient RenderContext)
    resolve - Resolver against a bare resource table
    RenderContext, use_render_context - Render context management
    Resources, ResourceTable - Resource system protocol and in-memory table
    RichText, Span - Annotated text returned by the resolvers

Exceptions:
    TextError - Base exception class
    UnsupportedTextError - Descriptor not resolvable on the chosen path
    ResourceLookupError - Failures raised by resource tables
    MissingRenderContextError - render() without a context

Submodules:
    deferredtext.text - Descriptor variants and constructors
    deferredtext.markup - Default HTML formatter
    deferredtext.plural_rules - CLDR plural category selection
    deferredtext.locale_utils - Locale normalization and detection
"""

from .errors import (
    ErrorCode,
    MissingRenderContextError,
    ResourceFormatError,
    ResourceLookupError,
    ResourceNotFoundError,
    TextError,
    UnsupportedTextError,
)
from .render import RenderContext, current_render_context, obtain, render, use_render_context
from .resolve import resolve
from .resources import Resources, ResourceTable
from .rich_text import RichText, Span
from .text import (
    TEXT_TYPES,
    HtmlResource,
    PluralResource,
    PluralResourceArgs,
    Raw,
    StringResource,
    StringResourceArgs,
    Text,
    from_html_resource,
    from_literal,
    from_plural_resource,
    from_string_resource,
    raw_key,
)

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("deferredtext")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "TEXT_TYPES",
    "ErrorCode",
    "HtmlResource",
    "MissingRenderContextError",
    "PluralResource",
    "PluralResourceArgs",
    "Raw",
    "RenderContext",
    "ResourceFormatError",
    "ResourceLookupError",
    "ResourceNotFoundError",
    "ResourceTable",
    "Resources",
    "RichText",
    "Span",
    "StringResource",
    "StringResourceArgs",
    "Text",
    "TextError",
    "UnsupportedTextError",
    "__version__",
    "current_render_context",
    "from_html_resource",
    "from_literal",
    "from_plural_resource",
    "from_string_resource",
    "obtain",
    "raw_key",
    "render",
    "resolve",
    "use_render_context",
]
