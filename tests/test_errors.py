"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from verspan.errors import (
    ConfigurationError,
    DuplicateSchemeError,
    ErrorCategory,
    InvalidIntervalError,
    NoOverlapError,
    SchemeError,
    UnknownSchemeError,
    VerspanError,
    VersionFormatError,
)


class TestErrors:
    """Tests for VerspanError and its subclasses."""

    @pytest.mark.parametrize(
        "error, category",
        [
            (InvalidIntervalError("bad"), ErrorCategory.INTERVAL),
            (NoOverlapError(), ErrorCategory.INTERVAL),
            (VersionFormatError("bad"), ErrorCategory.FORMAT),
            (SchemeError("bad"), ErrorCategory.SCHEME),
            (UnknownSchemeError("x"), ErrorCategory.SCHEME),
            (DuplicateSchemeError("x"), ErrorCategory.SCHEME),
            (ConfigurationError("bad"), ErrorCategory.CONFIGURATION),
        ],
    )
    def test_categories(self, error, category):
        assert isinstance(error, VerspanError)
        assert error.category is category

    def test_str_includes_category(self):
        assert str(NoOverlapError()) == "[interval] Intervals do not overlap"

    def test_to_dict(self):
        error = InvalidIntervalError("Invalid interval", context={"left": 3, "right": 1})
        assert error.to_dict() == {
            "message": "Invalid interval",
            "category": "interval",
            "context": {"left": "3", "right": "1"},
        }

    def test_builtin_bases(self):
        assert isinstance(InvalidIntervalError("x"), ValueError)
        assert isinstance(UnknownSchemeError("x"), LookupError)
        assert not isinstance(ConfigurationError("x"), ValueError)

    def test_scheme_code_kept(self):
        error = UnknownSchemeError("custom")
        assert error.code == "custom"
        assert "'custom'" in error.message
