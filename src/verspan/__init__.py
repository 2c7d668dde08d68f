"""Verspan - version comparison, version schemes and version intervals.

Example:
    >>> from verspan import SEMVER_DEFAULT, Version, VersionInterval
    >>> supported = VersionInterval.closed_open("1.0.0", "2.0.0", scheme=SEMVER_DEFAULT)
    >>> supported.contains(Version("1.9.9+meta"))
    True
"""

from importlib.metadata import PackageNotFoundError, version as _package_version

from verspan.config import SchemeDefinition, VerspanConfig, load_config
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
from verspan.interval import Boundary, Interval
from verspan.types import BuildComparisonPolicy, BuildFormatPolicy, SchemeOrigin, TokenKind
from verspan.versioning import (
    BUILTIN_SCHEMES,
    CALVER_DEFAULT,
    DEFAULT_SCHEME,
    MAVEN_BUILD_METADATA_IGNORED,
    MAVEN_DEFAULT,
    SEMVER_BUILD_FIRST,
    SEMVER_BUILD_ORDERED,
    SEMVER_DEFAULT,
    CustomVersionScheme,
    QualifierKind,
    SchemeRegistry,
    Version,
    VersionComparator,
    VersionInterval,
    VersionQualifier,
    VersionScheme,
    compare_versions,
    find_builtin_scheme,
    get_builtin_scheme,
    version_sort_key,
)

try:
    __version__ = _package_version("verspan")
except PackageNotFoundError:
    __version__ = "0.0.0.dev"

__all__ = [
    "__version__",
    # Values and comparison
    "Version",
    "VersionComparator",
    "compare_versions",
    "version_sort_key",
    # Schemes
    "VersionScheme",
    "CustomVersionScheme",
    "SchemeRegistry",
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
    # Qualifiers
    "QualifierKind",
    "VersionQualifier",
    # Intervals
    "Boundary",
    "Interval",
    "VersionInterval",
    # Configuration
    "SchemeDefinition",
    "VerspanConfig",
    "load_config",
    # Types
    "BuildComparisonPolicy",
    "BuildFormatPolicy",
    "SchemeOrigin",
    "TokenKind",
    # Errors
    "VerspanError",
    "ErrorCategory",
    "InvalidIntervalError",
    "NoOverlapError",
    "VersionFormatError",
    "SchemeError",
    "UnknownSchemeError",
    "DuplicateSchemeError",
    "ConfigurationError",
]
