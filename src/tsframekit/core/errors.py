"""Core error types with rich context.

Structural invariant violations (programmer errors) raise one of the
error classes below. Expected runtime outcomes such as a refused append
are reported through return values instead.
"""

from __future__ import annotations

from typing import Any


class TSFrameKitError(Exception):
    """Base exception with rich context.

    Subclasses set a specific error_code and a default fix_hint.
    """

    error_code: str = "E_UNKNOWN"
    fix_hint: str = ""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        fix_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        if fix_hint:
            self.fix_hint = fix_hint

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context:
            parts.append(f"(context: {self.context})")
        if self.fix_hint:
            parts.append(f"[hint: {self.fix_hint}]")
        return " ".join(parts)


class EContractViolation(TSFrameKitError):
    """A structural invariant was violated by the caller."""

    error_code = "E_CONTRACT_VIOLATION"
    fix_hint = "Check key arity, index length and index order against the declared contract"


class EUnsupportedMethod(TSFrameKitError):
    """Estimation method is declared but not implemented."""

    error_code = "E_UNSUPPORTED_METHOD"
    fix_hint = "Use method='nearest' or method='nearlin'"


class EEmptySeries(TSFrameKitError):
    """Estimation requested from a series with no present data."""

    error_code = "E_EMPTY_SERIES"
    fix_hint = "Insert at least one non-missing value before querying"


# Error registry for lookup
ERROR_REGISTRY: dict[str, type[TSFrameKitError]] = {
    "E_CONTRACT_VIOLATION": EContractViolation,
    "E_UNSUPPORTED_METHOD": EUnsupportedMethod,
    "E_EMPTY_SERIES": EEmptySeries,
}


def get_error_class(error_code: str) -> type[TSFrameKitError]:
    """Get error class by code."""
    return ERROR_REGISTRY.get(error_code, TSFrameKitError)
