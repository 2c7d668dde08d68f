"""Structured error handling for Verspan.

This module provides the exception hierarchy shared by the version,
scheme and interval modules:
- Construction errors (invalid intervals, blank scheme codes)
- Operation errors (no overlap, unformattable build parts)
- Lookup and configuration errors

"No intersection" is not an error: ``Interval.try_intersect`` returns
``None`` for it.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Categories of Verspan errors."""

    INTERVAL = "interval"             # Invalid interval or interval operation
    FORMAT = "format"                 # Version text cannot be rendered
    SCHEME = "scheme"                 # Scheme definition or lookup problems
    CONFIGURATION = "configuration"   # Config file or environment problems


class VerspanError(Exception):
    """Base exception for all Verspan errors.

    Carries a human-readable description of the violated invariant plus
    optional structured context.
    """

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "message": self.message,
            "category": self.category.value,
            "context": {key: str(value) for key, value in self.context.items()},
        }

    def __str__(self) -> str:
        return f"[{self.category.value}] {self.message}"


class InvalidIntervalError(VerspanError, ValueError):
    """Interval endpoints violate the construction invariants."""

    def __init__(self, message: str, **kwargs: Any):
        super().__init__(message, category=ErrorCategory.INTERVAL, **kwargs)


class NoOverlapError(VerspanError, ValueError):
    """Two intervals have no common value."""

    def __init__(self, message: str = "Intervals do not overlap", **kwargs: Any):
        super().__init__(message, category=ErrorCategory.INTERVAL, **kwargs)


class VersionFormatError(VerspanError, ValueError):
    """A version or qualifier cannot be rendered under the given rules."""

    def __init__(self, message: str, **kwargs: Any):
        super().__init__(message, category=ErrorCategory.FORMAT, **kwargs)


class SchemeError(VerspanError, ValueError):
    """Invalid scheme definition."""

    def __init__(self, message: str, **kwargs: Any):
        super().__init__(message, category=ErrorCategory.SCHEME, **kwargs)


class UnknownSchemeError(SchemeError, LookupError):
    """No scheme is known under the requested code."""

    def __init__(self, code: str, **kwargs: Any):
        super().__init__(f"Unknown version scheme: {code!r}", **kwargs)
        self.code = code


class DuplicateSchemeError(SchemeError):
    """A scheme with the same code is already registered."""

    def __init__(self, code: str, **kwargs: Any):
        super().__init__(f"Version scheme already registered: {code!r}", **kwargs)
        self.code = code


class ConfigurationError(VerspanError):
    """Configuration file or value is invalid."""

    def __init__(self, message: str, **kwargs: Any):
        super().__init__(message, category=ErrorCategory.CONFIGURATION, **kwargs)
