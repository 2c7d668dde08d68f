"""Entry point for comparing versions by scheme or comparator."""

from __future__ import annotations

import functools

from verspan.versioning.comparators import ComparatorLike
from verspan.versioning.schemes import VersionScheme
from verspan.versioning.version import Version


def compare_versions(
    left: Version,
    right: Version,
    scheme_or_comparator: VersionScheme | ComparatorLike,
) -> int:
    """Compare two versions.

    Args:
        left: Left version.
        right: Right version.
        scheme_or_comparator: A scheme, whose precedence comparator (build
            aware when its structure requires it) is used, or a bare
            comparator, which is called as is.

    Returns:
        Negative, zero or positive.
    """
    if isinstance(scheme_or_comparator, VersionScheme):
        return scheme_or_comparator.compare(left, right)
    return scheme_or_comparator(left, right)


def version_sort_key(scheme: VersionScheme | ComparatorLike):
    """Key function ordering :class:`Version` objects by a scheme.

    Example:
        >>> from verspan import MAVEN_DEFAULT, Version
        >>> [str(v) for v in sorted(map(Version, ["1.10", "1.2"]), key=version_sort_key(MAVEN_DEFAULT))]
        ['1.2', '1.10']
    """
    return functools.cmp_to_key(lambda left, right: compare_versions(left, right, scheme))
