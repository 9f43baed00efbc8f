"""Resource system interface and an in-memory implementation.

Components:
    Resources - Protocol for string lookups (structural typing)
    ResourceTable - Immutable in-memory table keyed by integer identifiers
    format_template - Positional substitution used by ResourceTable

Lookups are synchronous and served from memory. A Resources implementation
reports its own failures (ResourceLookupError subclasses for ResourceTable);
resolvers let them propagate unchanged.

Python 3.13+. Depends on Babel for plural rules.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Protocol

from deferredtext.constants import FALLBACK_PLURAL_CATEGORY
from deferredtext.errors import ResourceFormatError, ResourceNotFoundError
from deferredtext.locale_utils import get_system_locale, normalize_locale
from deferredtext.plural_rules import select_plural_category

__all__ = [
    "ResourceTable",
    "Resources",
    "format_template",
]

logger = logging.getLogger(__name__)


class Resources(Protocol):
    """Protocol for a locale-aware string resource system.

    This is a Protocol (structural typing) rather than ABC so that any
    platform adapter with matching methods can be passed to the resolvers.

    Example:
        >>> class GettextResources:
        ...     def get_string(self, resource_id, /, *format_args):
        ...         return _(CATALOG[resource_id]).format(*format_args)
        ...     def get_quantity_string(self, resource_id, quantity, /, *format_args):
        ...         singular, plural = PLURALS[resource_id]
        ...         return ngettext(singular, plural, quantity).format(*format_args)
    """

    def get_string(self, resource_id: int, /, *format_args: object) -> str:
        """Look up a string, substituting format_args in order if any are given."""
        ...

    def get_quantity_string(
        self, resource_id: int, quantity: int, /, *format_args: object
    ) -> str:
        """Look up the plural form for quantity, substituting format_args if given."""
        ...


def format_template(
    resource_id: int, template: str, format_args: tuple[object, ...]
) -> str:
    """Substitute positional arguments into a resource template.

    Templates use str.format() positional fields ({} or {0}). With no
    arguments the template is returned verbatim, braces included.

    Raises:
        ResourceFormatError: If the template is malformed or does not match
            the arguments
    """
    if not format_args:
        return template
    try:
        return template.format(*format_args)
    except (IndexError, KeyError, ValueError) as e:
        raise ResourceFormatError(resource_id, template, str(e)) from e


class ResourceTable:
    """In-memory resource table for a single locale.

    Implements the Resources protocol. Contents are copied into read-only
    mappings at construction, so a table can be shared freely between
    threads and render contexts.

    Attributes:
        locale: Normalized locale code used for plural selection

    Example:
        >>> table = ResourceTable(
        ...     strings={1: "Hello, {}!"},
        ...     plurals={2: {"one": "{} item", "other": "{} items"}},
        ...     locale="en-US",
        ... )
        >>> table.get_string(1, "Ada")
        'Hello, Ada!'
        >>> table.get_quantity_string(2, 3, 3)
        '3 items'
    """

    __slots__ = ("_locale", "_plurals", "_strings")

    def __init__(
        self,
        strings: Mapping[int, str] | None = None,
        plurals: Mapping[int, Mapping[str, str]] | None = None,
        *,
        locale: str | None = None,
    ) -> None:
        """Initialize resource table.

        Args:
            strings: Plain string templates by resource id
            plurals: Plural templates by resource id, then CLDR category
                ("zero", "one", "two", "few", "many", "other")
            locale: Locale for plural selection (default: system locale)
        """
        self._strings: Mapping[int, str] = MappingProxyType(dict(strings or {}))
        self._plurals: Mapping[int, Mapping[str, str]] = MappingProxyType(
            {rid: MappingProxyType(dict(forms)) for rid, forms in (plurals or {}).items()}
        )
        self._locale = normalize_locale(locale) if locale else get_system_locale()
        logger.debug(
            "ResourceTable created for locale %s: %d strings, %d plurals",
            self._locale,
            len(self._strings),
            len(self._plurals),
        )

    @property
    def locale(self) -> str:
        """Normalized locale code (read-only)."""
        return self._locale

    def with_locale(self, locale: str) -> ResourceTable:
        """Return a table with the same contents bound to another locale."""
        return ResourceTable(self._strings, self._plurals, locale=locale)

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._strings or resource_id in self._plurals

    def __repr__(self) -> str:
        return (
            f"ResourceTable(locale={self._locale!r}, "
            f"strings={len(self._strings)}, plurals={len(self._plurals)})"
        )

    def get_string(self, resource_id: int, /, *format_args: object) -> str:
        """Look up a plain string.

        Raises:
            ResourceNotFoundError: If no string has this id
            ResourceFormatError: If format_args do not fit the template
        """
        template = self._strings.get(resource_id)
        if template is None:
            raise ResourceNotFoundError(resource_id, self._locale)
        return format_template(resource_id, template, format_args)

    def get_quantity_string(
        self, resource_id: int, quantity: int, /, *format_args: object
    ) -> str:
        """Look up the plural form matching quantity in this table's locale.

        Falls back to the "other" form when the selected category is not
        defined for the resource.

        Raises:
            ResourceNotFoundError: If no plural has this id, or it defines
                neither the selected category nor "other"
            ResourceFormatError: If format_args do not fit the template
        """
        forms = self._plurals.get(resource_id)
        if forms is None:
            raise ResourceNotFoundError(resource_id, self._locale, kind="plural")

        category = select_plural_category(quantity, self._locale)
        template = forms.get(category)
        if template is None:
            logger.debug(
                "Plural %#x has no '%s' form for %s, using '%s'",
                resource_id,
                category,
                self._locale,
                FALLBACK_PLURAL_CATEGORY,
            )
            template = forms.get(FALLBACK_PLURAL_CATEGORY)
            if template is None:
                raise ResourceNotFoundError(resource_id, self._locale, kind="plural")
        return format_template(resource_id, template, format_args)
