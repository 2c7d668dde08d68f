"""Version comparators.

Comparator families share the item pipeline from
:mod:`verspan.versioning.items` and differ in how qualifiers are ordered:

- Maven-like: case-folded qualifiers with aliases (``ga``/``final``/``release``
  mean no qualifier, ``cr`` means ``rc``) and a fixed rank table.
- SemVer-like: qualifiers compare as raw strings and everything after a
  ``+`` separator is ignored.
- CalVer-like: up to three leading numeric runs compare first, falling back
  to Maven-like comparison.

:class:`BuildAwareComparator` wraps any of them to split off and optionally
compare a build-identification part.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import Callable, Union

from verspan.types import BuildComparisonPolicy
from verspan.versioning.items import (
    QualifierOrdering,
    compare_item_sequences,
    normalize_items,
)
from verspan.versioning.structure import VersionStructure
from verspan.versioning.tokens import is_ascii_digits
from verspan.versioning.version import Version

logger = logging.getLogger(__name__)

ComparisonFunc = Callable[[Version, Version], int]


class VersionComparator(ABC):
    """Abstract base class for version comparators.

    Comparators return negative, zero or positive values and never raise
    for valid :class:`Version` inputs. Instances are stateless and may be
    shared freely.
    """

    @abstractmethod
    def compare(self, left: Version, right: Version) -> int:
        """Compare two versions.

        Args:
            left: Left version.
            right: Right version.

        Returns:
            Negative if left < right, zero if equal, positive otherwise.
        """
        pass

    def __call__(self, left: Version, right: Version) -> int:
        return self.compare(left, right)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


ComparatorLike = Union[VersionComparator, ComparisonFunc]


# =============================================================================
# Maven-like
# =============================================================================


MAVEN_QUALIFIER_RANKS: dict[str, int] = {
    "snapshot": -50,
    "alpha": -40,
    "a": -40,
    "beta": -30,
    "b": -30,
    "milestone": -20,
    "m": -20,
    "rc": -10,
    "": 0,
    "sp": 10,
}

_MAVEN_RELEASE_ALIASES = frozenset({"ga", "final", "release"})


def normalize_maven_qualifier(qualifier: str) -> str:
    """Lower-case a qualifier and resolve Maven aliases."""
    lowered = qualifier.lower()
    if lowered in _MAVEN_RELEASE_ALIASES:
        return ""
    if lowered == "cr":
        return "rc"
    return lowered


def _cmp(left, right) -> int:
    return (left > right) - (left < right)


class MavenLikeComparator(VersionComparator, QualifierOrdering):
    """Practical Maven/Gradle-friendly ordering, tolerant to common patterns.

    Unranked qualifiers rank like a release (0) and are then ordered
    lexicographically, so ``1.0-foo`` sorts after ``1.0``.
    """

    def compare(self, left: Version, right: Version) -> int:
        return compare_item_sequences(
            normalize_items(left.tokens),
            normalize_items(right.tokens),
            self,
        )

    def compare_qualifiers(self, left: str, right: str) -> int:
        left_norm = normalize_maven_qualifier(left)
        right_norm = normalize_maven_qualifier(right)

        left_rank = MAVEN_QUALIFIER_RANKS.get(left_norm, 0)
        right_rank = MAVEN_QUALIFIER_RANKS.get(right_norm, 0)
        if left_rank != right_rank:
            return _cmp(left_rank, right_rank)

        return _cmp(left_norm, right_norm)

    def compare_to_release(self, qualifier: str) -> int:
        # The end of a version behaves like the empty (release) qualifier.
        return self.compare_qualifiers(qualifier, "")


# =============================================================================
# SemVer-like
# =============================================================================


class SemverLikeComparator(VersionComparator, QualifierOrdering):
    """Semantic Versioning precedence.

    Pre-release identifiers compare as raw strings (by code point); numeric
    identifiers still compare by magnitude through the shared item pipeline.
    A version without pre-release identifiers outranks one with them.
    """

    def compare(self, left: Version, right: Version) -> int:
        return compare_item_sequences(
            normalize_items(left.tokens, truncate_at_build=True),
            normalize_items(right.tokens, truncate_at_build=True),
            self,
        )

    def compare_qualifiers(self, left: str, right: str) -> int:
        return _cmp(left, right)

    def compare_to_release(self, qualifier: str) -> int:
        return -1


# =============================================================================
# CalVer-like
# =============================================================================


CALVER_MAX_PARTS = 3

# Largest value a calendar part may take before extraction gives up.
CALVER_PART_LIMIT = 2**63 - 1

_DIGIT_RUN = re.compile(r"[0-9]+")


def extract_calver_parts(version: Version) -> list[int]:
    """Extract up to three numeric runs (year, month, patch) from a version.

    Returns:
        The extracted numbers, or an empty list if none were found or one
        of them exceeded :data:`CALVER_PART_LIMIT`.
    """
    parts: list[int] = []

    for token in version.tokens:
        if not token.is_alphanumeric:
            continue
        for match in _DIGIT_RUN.finditer(token.text):
            if len(parts) >= CALVER_MAX_PARTS:
                return parts
            value = int(match.group())
            if value > CALVER_PART_LIMIT:
                return []
            parts.append(value)

    return parts


class CalverLikeComparator(VersionComparator):
    """Calendar versioning comparator.

    Compares the extracted year/month/patch numbers first (missing parts
    count as 0) and falls back to :class:`MavenLikeComparator` when either
    side has no extractable parts or the numbers tie.
    """

    def __init__(self, fallback: VersionComparator | None = None) -> None:
        self._fallback = fallback or MAVEN_LIKE

    def compare(self, left: Version, right: Version) -> int:
        left_parts = extract_calver_parts(left)
        right_parts = extract_calver_parts(right)

        if not left_parts or not right_parts:
            logger.debug(
                "No calendar parts in %r or %r, using Maven-like comparison",
                left.original_text,
                right.original_text,
            )
            return self._fallback.compare(left, right)

        for index in range(max(len(left_parts), len(right_parts))):
            left_value = left_parts[index] if index < len(left_parts) else 0
            right_value = right_parts[index] if index < len(right_parts) else 0
            if left_value != right_value:
                return _cmp(left_value, right_value)

        return self._fallback.compare(left, right)


# =============================================================================
# Build-aware wrapper
# =============================================================================


_BUILD_TOKEN_SPLIT = re.compile(r"[^A-Za-z0-9]+")

BuildToken = Union[int, str]


def tokenize_build_text(text: str) -> list[BuildToken]:
    """Split build text on non-alphanumeric runs.

    All-digit tokens become integers; everything else stays a string.
    """
    return [
        int(part) if is_ascii_digits(part) else part
        for part in _BUILD_TOKEN_SPLIT.split(text)
        if part
    ]


def compare_build_tokens(left: BuildToken, right: BuildToken) -> int:
    """Numbers sort before strings; strings compare case-insensitively."""
    left_numeric = isinstance(left, int)
    right_numeric = isinstance(right, int)

    if left_numeric and right_numeric:
        return _cmp(left, right)
    if left_numeric != right_numeric:
        return -1 if left_numeric else 1
    return _cmp(str(left).lower(), str(right).lower())


def compare_build_texts(left_text: str, right_text: str) -> int:
    """Compare two build-identification parts token by token.

    A missing build part, or a shorter token sequence, sorts first.
    """
    if not left_text and not right_text:
        return 0
    if not left_text:
        return -1
    if not right_text:
        return 1

    left_tokens = tokenize_build_text(left_text)
    right_tokens = tokenize_build_text(right_text)

    for left_token, right_token in zip(left_tokens, right_tokens):
        result = compare_build_tokens(left_token, right_token)
        if result != 0:
            return result

    return _cmp(len(left_tokens), len(right_tokens))


class BuildAwareComparator(VersionComparator):
    """Comparator wrapper separating version and build parts.

    The base comparator sees only the precedence-relevant version part. The
    build parts are compared only when the base result is zero and the
    structure's policy is ``TOKEN_COMPARE``.
    """

    def __init__(self, base: ComparatorLike, structure: VersionStructure) -> None:
        self._base = base
        self._structure = structure

    @property
    def base(self) -> ComparatorLike:
        return self._base

    @property
    def structure(self) -> VersionStructure:
        return self._structure

    def compare(self, left: Version, right: Version) -> int:
        left_parts = self._structure.split_version_and_build_text(left.original_text)
        right_parts = self._structure.split_version_and_build_text(right.original_text)

        result = self._base(Version(left_parts.version_text), Version(right_parts.version_text))
        if result != 0:
            return result

        if self._structure.effective_comparison_policy is BuildComparisonPolicy.IGNORE:
            return 0

        return compare_build_texts(left_parts.build_text, right_parts.build_text)

    def __repr__(self) -> str:
        return f"BuildAwareComparator({self._base!r}, structure={self._structure.code!r})"


MAVEN_LIKE = MavenLikeComparator()
SEMVER_LIKE = SemverLikeComparator()
CALVER_LIKE = CalverLikeComparator()


def compare_maven_like(left: Version, right: Version) -> int:
    """Maven-like comparison of two versions."""
    return MAVEN_LIKE.compare(left, right)


def compare_semver_like(left: Version, right: Version) -> int:
    """SemVer-like comparison of two versions."""
    return SEMVER_LIKE.compare(left, right)


def compare_calver_like(left: Version, right: Version) -> int:
    """CalVer-like comparison of two versions."""
    return CALVER_LIKE.compare(left, right)
