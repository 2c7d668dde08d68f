"""Version schemes.

A version scheme is a named composite of:

- a comparator used for precedence,
- a :class:`VersionStructure` describing how text splits into version and
  build parts and whether the build part is compared,
- a :class:`VersionFormatSpec` describing how versions are rendered,
- a :class:`VersionCodec` for parse/format round trips.

Built-in schemes are fixed module constants; :class:`CustomVersionScheme`
builds new ones without touching the built-in set.

Example:
    >>> from verspan import SEMVER_DEFAULT, Version
    >>> SEMVER_DEFAULT.compare(Version("1.2.3+7"), Version("1.2.3+8"))
    0
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from verspan.errors import SchemeError, UnknownSchemeError
from verspan.types import SchemeOrigin
from verspan.versioning.codec import DEFAULT_CODEC, VersionCodec
from verspan.versioning.comparators import (
    CALVER_LIKE,
    MAVEN_LIKE,
    SEMVER_LIKE,
    BuildAwareComparator,
    ComparatorLike,
)
from verspan.versioning.format import (
    EMIT_BUILD,
    MAP_BUILD_TO_QUALIFIER,
    OMIT_BUILD,
    VersionFormatSpec,
)
from verspan.versioning.structure import (
    BUILD_AFTER_PLUS_IGNORED,
    BUILD_AFTER_PLUS_ORDERED,
    BUILD_BEFORE_PLUS_IGNORED,
    NO_BUILD,
    VersionStructure,
    VersionTextParts,
)
from verspan.versioning.version import Version


class VersionScheme(ABC):
    """Abstract base class for version schemes.

    Subclasses must provide :attr:`code` and :attr:`comparator`; the other
    components default to no build section, build omitted on formatting,
    and the default codec.
    """

    @property
    @abstractmethod
    def code(self) -> str:
        """Unique, non-blank identifier of the scheme."""
        pass

    @property
    @abstractmethod
    def comparator(self) -> ComparatorLike:
        """Base comparator, applied to version parts only."""
        pass

    @property
    def structure(self) -> VersionStructure:
        return NO_BUILD

    @property
    def format_spec(self) -> VersionFormatSpec:
        return OMIT_BUILD

    @property
    def codec(self) -> VersionCodec:
        return DEFAULT_CODEC

    @property
    def origin(self) -> SchemeOrigin:
        return SchemeOrigin.CUSTOM

    def split_version_and_build_text(self, text: str) -> VersionTextParts:
        """Split raw text into version and build parts using the structure."""
        return self.structure.split_version_and_build_text(text)

    def precedence_comparator(self) -> ComparatorLike:
        """Comparator honouring the structure.

        The base comparator is wrapped in a :class:`BuildAwareComparator`
        whenever the structure declares a build delimiter, places the build
        before the version, or compares build parts.
        """
        if self.structure.requires_build_awareness:
            return BuildAwareComparator(self.comparator, self.structure)
        return self.comparator

    def compare(self, left: Version, right: Version) -> int:
        """Compare two versions by this scheme's precedence."""
        return self.precedence_comparator()(left, right)

    def parse(self, text: str) -> Version:
        return self.codec.parse_version(text, self)

    def format(self, version: Version) -> str:
        return self.codec.format_version_text(version, self)

    def normalize(self, text: str) -> str:
        return self.codec.normalize_version_text(text, self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r})"


class CustomVersionScheme(VersionScheme):
    """Reusable, user-constructible version scheme.

    Args:
        code: Unique, non-blank identifier.
        comparator: Comparator object or plain ``(left, right) -> int`` function.
        structure: Build-part structure.
        format_spec: Formatting rules.
        codec: Parse/format codec.

    Raises:
        SchemeError: If the code is blank.
    """

    def __init__(
        self,
        code: str,
        comparator: ComparatorLike,
        structure: VersionStructure = NO_BUILD,
        format_spec: VersionFormatSpec = OMIT_BUILD,
        codec: VersionCodec = DEFAULT_CODEC,
    ) -> None:
        if not isinstance(code, str) or not code.strip():
            raise SchemeError("Scheme code must not be blank")
        if comparator is None:
            raise SchemeError("Scheme comparator must not be None", context={"code": code})

        self._code = code
        self._comparator = comparator
        self._structure = structure
        self._format_spec = format_spec
        self._codec = codec
        self._precedence = super().precedence_comparator()

    @property
    def code(self) -> str:
        return self._code

    @property
    def comparator(self) -> ComparatorLike:
        return self._comparator

    @property
    def structure(self) -> VersionStructure:
        return self._structure

    @property
    def format_spec(self) -> VersionFormatSpec:
        return self._format_spec

    @property
    def codec(self) -> VersionCodec:
        return self._codec

    def precedence_comparator(self) -> ComparatorLike:
        return self._precedence


class BuiltinVersionScheme(CustomVersionScheme):
    """Scheme shipped with Verspan."""

    @property
    def origin(self) -> SchemeOrigin:
        return SchemeOrigin.BUILTIN


MAVEN_DEFAULT = BuiltinVersionScheme(
    "maven-default",
    MAVEN_LIKE,
    structure=NO_BUILD,
    format_spec=OMIT_BUILD,
)
"""Practical Maven/Gradle-friendly ordering."""

MAVEN_BUILD_METADATA_IGNORED = BuiltinVersionScheme(
    "maven-build-metadata-ignored",
    MAVEN_LIKE,
    structure=BUILD_AFTER_PLUS_IGNORED,
    format_spec=MAP_BUILD_TO_QUALIFIER,
)
"""Maven ordering with ``+build`` ignored, mapped into the qualifier on output."""

SEMVER_DEFAULT = BuiltinVersionScheme(
    "semver-default",
    SEMVER_LIKE,
    structure=BUILD_AFTER_PLUS_IGNORED,
    format_spec=EMIT_BUILD,
)
"""Semantic Versioning; build metadata ignored for precedence but emitted."""

SEMVER_BUILD_FIRST = BuiltinVersionScheme(
    "semver-build-first",
    SEMVER_LIKE,
    structure=BUILD_BEFORE_PLUS_IGNORED,
    format_spec=EMIT_BUILD,
)
"""SemVer precedence with the build part written before ``+``."""

SEMVER_BUILD_ORDERED = BuiltinVersionScheme(
    "semver-build-ordered",
    SEMVER_LIKE,
    structure=BUILD_AFTER_PLUS_ORDERED,
    format_spec=EMIT_BUILD,
)
"""SemVer precedence; ties are broken by comparing build tokens."""

CALVER_DEFAULT = BuiltinVersionScheme(
    "calver-default",
    CALVER_LIKE,
    structure=NO_BUILD,
    format_spec=OMIT_BUILD,
)
"""Calendar versioning (year, month, patch)."""

BUILTIN_SCHEMES: tuple[VersionScheme, ...] = (
    MAVEN_DEFAULT,
    MAVEN_BUILD_METADATA_IGNORED,
    SEMVER_DEFAULT,
    SEMVER_BUILD_FIRST,
    SEMVER_BUILD_ORDERED,
    CALVER_DEFAULT,
)

DEFAULT_SCHEME: VersionScheme = MAVEN_DEFAULT


def find_builtin_scheme(code: str | None) -> VersionScheme | None:
    """Find a built-in scheme by code, ignoring case.

    Returns:
        The scheme, or None for blank or unknown codes.
    """
    if not code or not code.strip():
        return None
    key = code.strip().lower()
    for scheme in BUILTIN_SCHEMES:
        if scheme.code.lower() == key:
            return scheme
    return None


def get_builtin_scheme(code: str) -> VersionScheme:
    """Get a built-in scheme by code.

    Raises:
        UnknownSchemeError: If no built-in scheme has this code.
    """
    scheme = find_builtin_scheme(code)
    if scheme is None:
        raise UnknownSchemeError(code)
    return scheme
