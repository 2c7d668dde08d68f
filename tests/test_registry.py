"""Tests for the scheme registry."""

from __future__ import annotations

import pytest

from verspan.errors import DuplicateSchemeError, SchemeError, UnknownSchemeError
from verspan.versioning.comparators import MAVEN_LIKE
from verspan.versioning.registry import SchemeRegistry, coerce_scheme
from verspan.versioning.schemes import BUILTIN_SCHEMES, SEMVER_DEFAULT, CustomVersionScheme
from verspan.versioning.structure import BUILD_AFTER_PLUS_ORDERED
from verspan.versioning.version import Version


@pytest.fixture
def registry():
    """Registry with the built-in schemes."""
    return SchemeRegistry()


class TestSchemeRegistry:
    """Tests for SchemeRegistry."""

    def test_builtins_registered(self, registry):
        assert len(registry) == len(BUILTIN_SCHEMES)
        assert registry.codes()[0] == "maven-default"
        assert "semver-default" in registry
        assert SEMVER_DEFAULT in registry

    def test_empty_registry(self):
        registry = SchemeRegistry(include_builtins=False)
        assert len(registry) == 0
        assert list(registry) == []

    def test_case_insensitive_lookup(self, registry):
        assert registry.get("SemVer-Default") is SEMVER_DEFAULT
        assert registry.find(" semver-default ") is SEMVER_DEFAULT

    def test_unknown_code(self, registry):
        assert registry.find("nope") is None
        assert registry.find("") is None
        with pytest.raises(UnknownSchemeError):
            registry.get("nope")

    def test_add_custom(self, registry):
        scheme = CustomVersionScheme("company", MAVEN_LIKE)
        assert registry.add(scheme) is scheme
        assert registry.get("COMPANY") is scheme
        assert registry.codes()[-1] == "company"

    def test_duplicate_rejected(self, registry):
        with pytest.raises(DuplicateSchemeError):
            registry.add(CustomVersionScheme("MAVEN-DEFAULT", MAVEN_LIKE))

    def test_register_decorator(self, registry):
        @registry.register("by-length", structure=BUILD_AFTER_PLUS_ORDERED)
        def by_length(left: Version, right: Version) -> int:
            return len(left.original_text) - len(right.original_text)

        scheme = registry.get("by-length")
        assert scheme.comparator is by_length
        assert scheme.structure is BUILD_AFTER_PLUS_ORDERED
        assert scheme.compare(Version("10+1"), Version("9+1")) > 0
        assert scheme.compare(Version("9+1"), Version("9+2")) < 0

    def test_register_duplicate(self, registry):
        with pytest.raises(DuplicateSchemeError):

            @registry.register("semver-default")
            def clash(left: Version, right: Version) -> int:
                return 0

    def test_registries_are_independent(self):
        first = SchemeRegistry()
        second = SchemeRegistry()
        first.add(CustomVersionScheme("only-first", MAVEN_LIKE))
        assert "only-first" not in second

    def test_iteration_is_snapshot(self, registry):
        for scheme in registry:
            if scheme.code == "maven-default":
                registry.add(CustomVersionScheme("added-while-iterating", MAVEN_LIKE))
        assert "added-while-iterating" in registry


class TestCoerceScheme:
    """Tests for coerce_scheme()."""

    def test_scheme_passes_through(self):
        assert coerce_scheme(SEMVER_DEFAULT) is SEMVER_DEFAULT

    def test_code_resolved(self, registry):
        assert coerce_scheme("semver-default") is SEMVER_DEFAULT
        custom = registry.add(CustomVersionScheme("custom", MAVEN_LIKE))
        assert coerce_scheme("custom", registry) is custom

    def test_invalid_type(self):
        with pytest.raises(SchemeError):
            coerce_scheme(42)  # type: ignore[arg-type]
