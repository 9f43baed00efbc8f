"""Deprecation utilities for deferredtext.

Provides standardized deprecation warnings for aliases kept while callers
migrate to their replacements.

Policy:
    - Deprecated aliases keep working until DEPRECATION_REMOVAL_VERSION
    - Warnings name the removal version and the replacement

Python 3.13+.
"""

import functools
import warnings
from collections.abc import Callable
from typing import ParamSpec, TypeVar

__all__ = [
    "deprecated",
    "warn_deprecated",
]

P = ParamSpec("P")
R = TypeVar("R")


def warn_deprecated(
    feature: str,
    *,
    removal_version: str,
    alternative: str | None = None,
    stacklevel: int = 2,
) -> None:
    """Issue a deprecation warning with standardized message format.

    Args:
        feature: Name of the deprecated feature
        removal_version: Version when feature will be removed (e.g., "1.0.0")
        alternative: Suggested replacement (optional)
        stacklevel: Stack level for warning (default: 2, caller's caller)

    Example:
        >>> warn_deprecated("obtain()", removal_version="1.0.0", alternative="render()")
        # DeprecationWarning: obtain() is deprecated and will be removed in
        # version 1.0.0. Use render() instead.
    """
    msg = f"{feature} is deprecated and will be removed in version {removal_version}."
    if alternative:
        msg += f" Use {alternative} instead."

    warnings.warn(msg, DeprecationWarning, stacklevel=stacklevel)


def deprecated(
    *,
    removal_version: str,
    alternative: str | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator to mark a function as deprecated.

    Emits DeprecationWarning on each call and appends a notice to the
    docstring. The wrapped function's signature is preserved.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            warn_deprecated(
                f"{func.__qualname__}()",
                removal_version=removal_version,
                alternative=alternative,
                stacklevel=3,
            )
            return func(*args, **kwargs)

        deprecation_note = (
            f"\n\n.. deprecated::\n"
            f"    This function is deprecated and will be removed in version {removal_version}."
        )
        if alternative:
            deprecation_note += f"\n    Use :func:`{alternative}` instead."

        if wrapper.__doc__:
            wrapper.__doc__ += deprecation_note
        else:
            wrapper.__doc__ = deprecation_note.strip()

        return wrapper

    return decorator
