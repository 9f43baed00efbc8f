"""Hypothesis strategies for deferredtext property-based testing.

Strategies are organized by domain:

- text: descriptor variants, format arguments and resource identifiers

Usage:
    from tests.strategies import texts, format_args
    from tests.strategies.text import resource_ids, quantities
"""

from .text import (
    format_args,
    html_resources,
    literal_texts,
    plural_resource_args,
    plural_resources,
    quantities,
    resource_ids,
    string_resource_args,
    string_resources,
    texts,
    unhashable_format_args,
)

__all__ = [
    "format_args",
    "html_resources",
    "literal_texts",
    "plural_resource_args",
    "plural_resources",
    "quantities",
    "resource_ids",
    "string_resource_args",
    "string_resources",
    "texts",
    "unhashable_format_args",
]
