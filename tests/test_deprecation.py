"""Tests for deprecation.py: warning helpers and the deprecated decorator.

Python 3.13+.
"""

import warnings

import pytest

from deferredtext.deprecation import deprecated, warn_deprecated


class TestWarnDeprecated:
    """warn_deprecated() message format."""

    def test_message_without_alternative(self) -> None:
        with pytest.warns(DeprecationWarning) as record:
            warn_deprecated("old()", removal_version="2.0.0")
        assert str(record[0].message) == (
            "old() is deprecated and will be removed in version 2.0.0."
        )

    def test_message_with_alternative(self) -> None:
        with pytest.warns(DeprecationWarning) as record:
            warn_deprecated("old()", removal_version="2.0.0", alternative="new()")
        assert str(record[0].message).endswith("Use new() instead.")

    def test_warning_points_at_caller(self) -> None:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            warn_deprecated("old()", removal_version="2.0.0")
        assert caught[0].filename.endswith("test_deprecation.py")


class TestDeprecatedDecorator:
    """@deprecated wraps a function without changing its behaviour."""

    def test_wrapped_function_warns_and_returns(self) -> None:
        @deprecated(removal_version="2.0.0", alternative="double")
        def twice(value: int) -> int:
            """Return value doubled."""
            return value * 2

        with pytest.warns(DeprecationWarning, match=r"twice\(\) is deprecated"):
            assert twice(4) == 8

    def test_metadata_preserved(self) -> None:
        @deprecated(removal_version="2.0.0")
        def named() -> None:
            """Original docstring."""

        assert named.__name__ == "named"
        assert named.__doc__ is not None
        assert named.__doc__.startswith("Original docstring.")
        assert "version 2.0.0" in named.__doc__

    def test_docstring_created_when_missing(self) -> None:
        @deprecated(removal_version="2.0.0", alternative="other")
        def undocumented() -> None:
            pass

        assert undocumented.__doc__ is not None
        assert undocumented.__doc__.startswith(".. deprecated::")
        assert ":func:`other`" in undocumented.__doc__

    def test_warning_attributed_to_call_site(self) -> None:
        @deprecated(removal_version="2.0.0")
        def legacy() -> None:
            pass

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            legacy()
        assert caught[0].filename.endswith("test_deprecation.py")
