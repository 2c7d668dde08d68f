"""Intervals of versions ordered by a version scheme."""

from __future__ import annotations

from typing import Any, Optional, Union

from verspan.errors import SchemeError
from verspan.interval.boundary import Boundary
from verspan.interval.interval import Endpoint, Interval
from verspan.versioning.schemes import DEFAULT_SCHEME, VersionScheme
from verspan.versioning.version import Version

VersionLike = Union[Version, str]


class VersionInterval(Interval[Version]):
    """Interval whose values are ordered by a :class:`VersionScheme`.

    Validation, containment, intersection and ordering all use
    ``scheme.compare``, so ``[1.0.0, 2.0.0)`` under ``semver-default``
    contains ``1.9.9+meta`` whatever the build metadata says. Plain strings
    are parsed with the scheme's codec.

    Args:
        left_boundary: Kind of the left side.
        left_value: Left version; ignored when unbounded.
        right_boundary: Kind of the right side.
        right_value: Right version; ignored when unbounded.
        scheme: Scheme providing the order. Defaults to ``maven-default``.

    Example:
        >>> from verspan import SEMVER_DEFAULT
        >>> interval = VersionInterval.closed_open("1.0.0", "2.0.0", scheme=SEMVER_DEFAULT)
        >>> interval.contains(Version("1.9.9+meta"))
        True
    """

    __slots__ = ("_scheme",)

    def __init__(
        self,
        left_boundary: Boundary,
        left_value: Optional[VersionLike],
        right_boundary: Boundary,
        right_value: Optional[VersionLike],
        scheme: VersionScheme = DEFAULT_SCHEME,
    ) -> None:
        # Assigned first: base validation already compares values.
        self._scheme = scheme
        super().__init__(
            left_boundary,
            self._coerce(left_value),
            right_boundary,
            self._coerce(right_value),
        )

    def _coerce(self, value: Optional[VersionLike]) -> Optional[Version]:
        if isinstance(value, str):
            return self._scheme.parse(value)
        return value

    @property
    def scheme(self) -> VersionScheme:
        return self._scheme

    def compare_values(self, left: Version, right: Version) -> int:
        return self._scheme.compare(left, right)

    def contains(self, value: Any) -> bool:
        return super().contains(self._coerce(value))

    def try_intersect(self, other: Interval[Version]) -> Optional[VersionInterval]:
        """Intersect with another interval.

        Raises:
            SchemeError: If ``other`` is a :class:`VersionInterval` ordered by
                a different scheme.
        """
        if isinstance(other, VersionInterval) and other.scheme.code != self._scheme.code:
            raise SchemeError(
                "Cannot intersect intervals of different version schemes",
                context={"left": self._scheme.code, "right": other.scheme.code},
            )
        return super().try_intersect(other)

    def _derive(self, left: Endpoint, right: Endpoint) -> "VersionInterval":
        return VersionInterval(left.boundary, left.value, right.boundary, right.value, self._scheme)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        if not isinstance(other, VersionInterval) or other.scheme.code != self._scheme.code:
            return False
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash((super().__hash__(), self._scheme.code))

    def __repr__(self) -> str:
        return f"VersionInterval({self.to_string_representation()!r}, scheme={self._scheme.code!r})"
