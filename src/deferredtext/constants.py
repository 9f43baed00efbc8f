"""Shared constants for deferredtext.

Centralized configuration values used by the resource table, the locale
helpers and the deprecation shims. Placing them here avoids circular
imports between the text model and the resolution layers.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "LOCALE_ENV_VARS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Plural selection
    "FALLBACK_PLURAL_CATEGORY",
    # Deprecation policy
    "DEPRECATION_REMOVAL_VERSION",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used when the system locale cannot be detected.
DEFAULT_LOCALE: str = "en_US"

# Environment variables consulted (in order) by get_system_locale().
LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# PLURAL SELECTION
# ============================================================================

# CLDR category every plural resource is expected to define. Used when the
# category selected for a quantity is missing from the resource.
FALLBACK_PLURAL_CATEGORY: str = "other"

# ============================================================================
# DEPRECATION POLICY
# ============================================================================

# Version in which currently deprecated aliases are removed.
DEPRECATION_REMOVAL_VERSION: str = "1.0.0"
