"""Version parsing, comparison and formatting.

Versions are tokenized once and compared by comparator families
(Maven-like, SemVer-like, CalVer-like). Schemes bundle a comparator with
a build-part structure, a format spec and a codec.
"""

from verspan.versioning.codec import DEFAULT_CODEC, DefaultVersionCodec, VersionCodec
from verspan.versioning.comparators import (
    CALVER_LIKE,
    MAVEN_LIKE,
    SEMVER_LIKE,
    BuildAwareComparator,
    CalverLikeComparator,
    ComparatorLike,
    MavenLikeComparator,
    SemverLikeComparator,
    VersionComparator,
    compare_calver_like,
    compare_maven_like,
    compare_semver_like,
)
from verspan.versioning.compare import compare_versions, version_sort_key
from verspan.versioning.format import (
    EMIT_BUILD,
    MAP_BUILD_TO_QUALIFIER,
    OMIT_BUILD,
    DefaultVersionFormatter,
    VersionFormatSpec,
)
from verspan.versioning.interval import VersionInterval
from verspan.versioning.items import (
    Item,
    ItemKind,
    compare_item_sequences,
    normalize_items,
    split_alphanumeric,
    trim_trailing_items,
)
from verspan.versioning.qualifiers import QualifierKind, VersionQualifier, extract_qualifier
from verspan.versioning.registry import SchemeRegistry, coerce_scheme
from verspan.versioning.schemes import (
    BUILTIN_SCHEMES,
    CALVER_DEFAULT,
    DEFAULT_SCHEME,
    MAVEN_BUILD_METADATA_IGNORED,
    MAVEN_DEFAULT,
    SEMVER_BUILD_FIRST,
    SEMVER_BUILD_ORDERED,
    SEMVER_DEFAULT,
    BuiltinVersionScheme,
    CustomVersionScheme,
    VersionScheme,
    find_builtin_scheme,
    get_builtin_scheme,
)
from verspan.versioning.structure import (
    BUILD_AFTER_PLUS_IGNORED,
    BUILD_AFTER_PLUS_ORDERED,
    BUILD_BEFORE_PLUS_IGNORED,
    NO_BUILD,
    VersionStructure,
    VersionTextParts,
)
from verspan.versioning.tokens import Token, tokenize
from verspan.versioning.version import Version

__all__ = [
    # Values
    "Token",
    "Version",
    "tokenize",
    # Items
    "Item",
    "ItemKind",
    "compare_item_sequences",
    "normalize_items",
    "split_alphanumeric",
    "trim_trailing_items",
    # Comparators
    "BuildAwareComparator",
    "CalverLikeComparator",
    "ComparatorLike",
    "MavenLikeComparator",
    "SemverLikeComparator",
    "VersionComparator",
    "CALVER_LIKE",
    "MAVEN_LIKE",
    "SEMVER_LIKE",
    "compare_calver_like",
    "compare_maven_like",
    "compare_semver_like",
    "compare_versions",
    "version_sort_key",
    # Structure and formatting
    "VersionStructure",
    "VersionTextParts",
    "NO_BUILD",
    "BUILD_AFTER_PLUS_IGNORED",
    "BUILD_AFTER_PLUS_ORDERED",
    "BUILD_BEFORE_PLUS_IGNORED",
    "VersionFormatSpec",
    "DefaultVersionFormatter",
    "EMIT_BUILD",
    "OMIT_BUILD",
    "MAP_BUILD_TO_QUALIFIER",
    "VersionCodec",
    "DefaultVersionCodec",
    "DEFAULT_CODEC",
    # Qualifiers
    "QualifierKind",
    "VersionQualifier",
    "extract_qualifier",
    # Schemes
    "VersionScheme",
    "CustomVersionScheme",
    "BuiltinVersionScheme",
    "BUILTIN_SCHEMES",
    "DEFAULT_SCHEME",
    "MAVEN_DEFAULT",
    "MAVEN_BUILD_METADATA_IGNORED",
    "SEMVER_DEFAULT",
    "SEMVER_BUILD_FIRST",
    "SEMVER_BUILD_ORDERED",
    "CALVER_DEFAULT",
    "find_builtin_scheme",
    "get_builtin_scheme",
    "SchemeRegistry",
    "coerce_scheme",
    # Intervals
    "VersionInterval",
]
