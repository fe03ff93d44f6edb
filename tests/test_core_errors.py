"""Tests for core error types.

Tests the error hierarchy and rich context functionality.
"""

from __future__ import annotations

import pytest

from tsframekit.core.errors import (
    ERROR_REGISTRY,
    EContractViolation,
    EEmptySeries,
    EUnsupportedMethod,
    TSFrameKitError,
    get_error_class,
)


class TestTSFrameKitError:
    """Test base error class."""

    def test_basic_error(self):
        """Basic error creation."""
        err = TSFrameKitError("Something went wrong")
        assert err.message == "Something went wrong"
        assert err.error_code == "E_UNKNOWN"
        assert err.context == {}

    def test_error_with_context(self):
        """Error with context."""
        err = TSFrameKitError("Test error", context={"arity": 2})
        assert err.context == {"arity": 2}
        assert "arity" in str(err)

    def test_error_str_format(self):
        """Error string formatting."""
        err = TSFrameKitError("Test message", context={"key": "value"}, fix_hint="Do this")
        assert str(err) == "[E_UNKNOWN] Test message (context: {'key': 'value'}) [hint: Do this]"

    def test_instance_hint_overrides_class_hint(self):
        err = EEmptySeries("empty", fix_hint="Append first")
        assert err.fix_hint == "Append first"
        assert EEmptySeries.fix_hint != "Append first"


class TestSubclasses:
    """Test error codes and catchability."""

    @pytest.mark.parametrize(
        "cls,code",
        [
            (EContractViolation, "E_CONTRACT_VIOLATION"),
            (EUnsupportedMethod, "E_UNSUPPORTED_METHOD"),
            (EEmptySeries, "E_EMPTY_SERIES"),
        ],
    )
    def test_codes(self, cls, code):
        err = cls("boom")
        assert err.error_code == code
        assert f"[{code}]" in str(err)
        assert err.fix_hint

    def test_catch_as_base(self):
        """Subclasses can be caught as TSFrameKitError."""
        with pytest.raises(TSFrameKitError):
            raise EUnsupportedMethod("spline")


class TestRegistry:
    def test_registry_complete(self):
        assert set(ERROR_REGISTRY) == {
            "E_CONTRACT_VIOLATION",
            "E_UNSUPPORTED_METHOD",
            "E_EMPTY_SERIES",
        }

    def test_get_error_class(self):
        assert get_error_class("E_EMPTY_SERIES") is EEmptySeries
        assert get_error_class("E_NOPE") is TSFrameKitError
