"""Boundary-typed intervals over any total order.

An interval is two endpoints, each OPEN, CLOSED or UNBOUNDED. Construction
validates the endpoints: bounded sides need a value, the left value must
not exceed the right one, and a point interval must be closed on both
sides. Invalid intervals are rejected, never clamped.

Value comparisons go through :meth:`Interval.compare_values`, which uses
the natural ``<``/``>`` order. Subclasses replace it when the values have
no natural order of their own (see :class:`verspan.versioning.VersionInterval`).

Example:
    >>> a = Interval.closed(1, 3)
    >>> b = Interval.closed(3, 5)
    >>> str(a.intersect(b))
    '[3, 3]'
    >>> Interval.closed_open(1, 3).try_intersect(b) is None
    True
"""

from __future__ import annotations

import functools
from typing import Any, Generic, NamedTuple, Optional, TypeVar

from verspan.errors import InvalidIntervalError, NoOverlapError
from verspan.interval.boundary import UNBOUNDED_VALUE_TEXT, Boundary

T = TypeVar("T")


class Endpoint(NamedTuple):
    """One side of an interval."""

    boundary: Boundary
    value: Any

    @property
    def unbounded(self) -> bool:
        return self.boundary.ignores_value


class Interval(Generic[T]):
    """Immutable interval with open, closed or unbounded sides.

    Args:
        left_boundary: Kind of the left side.
        left_value: Left value; ignored when the left side is unbounded.
        right_boundary: Kind of the right side.
        right_value: Right value; ignored when the right side is unbounded.

    Raises:
        InvalidIntervalError: If a bounded side has no value, the left value
            is greater than the right value, or a point interval is not
            closed on both sides.
    """

    __slots__ = ("_left_boundary", "_left_value", "_right_boundary", "_right_value")

    def __init__(
        self,
        left_boundary: Boundary,
        left_value: Optional[T],
        right_boundary: Boundary,
        right_value: Optional[T],
    ) -> None:
        if not isinstance(left_boundary, Boundary):
            raise InvalidIntervalError("Left boundary must be a Boundary")
        if not isinstance(right_boundary, Boundary):
            raise InvalidIntervalError("Right boundary must be a Boundary")

        self._left_boundary = left_boundary
        self._left_value = None if left_boundary.ignores_value else left_value
        self._right_boundary = right_boundary
        self._right_value = None if right_boundary.ignores_value else right_value
        self._validate()

    # -------------------------------------------------------------------------
    # Construction helpers
    # -------------------------------------------------------------------------

    @classmethod
    def closed(cls, left: T, right: T, **kwargs: Any):
        """``[left, right]``"""
        return cls(Boundary.CLOSED, left, Boundary.CLOSED, right, **kwargs)

    @classmethod
    def open(cls, left: T, right: T, **kwargs: Any):
        """``(left, right)``"""
        return cls(Boundary.OPEN, left, Boundary.OPEN, right, **kwargs)

    @classmethod
    def closed_open(cls, left: T, right: T, **kwargs: Any):
        """``[left, right)``"""
        return cls(Boundary.CLOSED, left, Boundary.OPEN, right, **kwargs)

    @classmethod
    def open_closed(cls, left: T, right: T, **kwargs: Any):
        """``(left, right]``"""
        return cls(Boundary.OPEN, left, Boundary.CLOSED, right, **kwargs)

    @classmethod
    def point(cls, value: T, **kwargs: Any):
        """``[value, value]``"""
        return cls(Boundary.CLOSED, value, Boundary.CLOSED, value, **kwargs)

    @classmethod
    def at_least(cls, left: T, **kwargs: Any):
        """``[left, *)``"""
        return cls(Boundary.CLOSED, left, Boundary.UNBOUNDED, None, **kwargs)

    @classmethod
    def greater_than(cls, left: T, **kwargs: Any):
        """``(left, *)``"""
        return cls(Boundary.OPEN, left, Boundary.UNBOUNDED, None, **kwargs)

    @classmethod
    def at_most(cls, right: T, **kwargs: Any):
        """``(*, right]``"""
        return cls(Boundary.UNBOUNDED, None, Boundary.CLOSED, right, **kwargs)

    @classmethod
    def less_than(cls, right: T, **kwargs: Any):
        """``(*, right)``"""
        return cls(Boundary.UNBOUNDED, None, Boundary.OPEN, right, **kwargs)

    @classmethod
    def unbounded(cls, **kwargs: Any):
        """``(*, *)``"""
        return cls(Boundary.UNBOUNDED, None, Boundary.UNBOUNDED, None, **kwargs)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def left_boundary(self) -> Boundary:
        return self._left_boundary

    @property
    def left_value(self) -> Optional[T]:
        return self._left_value

    @property
    def right_boundary(self) -> Boundary:
        return self._right_boundary

    @property
    def right_value(self) -> Optional[T]:
        return self._right_value

    @property
    def left_endpoint(self) -> Endpoint:
        return Endpoint(self._left_boundary, self._left_value)

    @property
    def right_endpoint(self) -> Endpoint:
        return Endpoint(self._right_boundary, self._right_value)

    def is_left_unbounded(self) -> bool:
        return self._left_boundary.ignores_value

    def is_right_unbounded(self) -> bool:
        return self._right_boundary.ignores_value

    # -------------------------------------------------------------------------
    # Ordering hooks
    # -------------------------------------------------------------------------

    def compare_values(self, left: T, right: T) -> int:
        """Compare two values of this interval's domain."""
        return (left > right) - (left < right)

    def _derive(self, left: Endpoint, right: Endpoint) -> "Interval[T]":
        """Build a new interval of the same ordering from two endpoints."""
        return type(self)(left.boundary, left.value, right.boundary, right.value)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def _validate(self) -> None:
        if not self._left_boundary.ignores_value and self._left_value is None:
            raise InvalidIntervalError(
                "Left value must not be None when the left boundary is bounded",
                context={"left_boundary": self._left_boundary.value},
            )
        if not self._right_boundary.ignores_value and self._right_value is None:
            raise InvalidIntervalError(
                "Right value must not be None when the right boundary is bounded",
                context={"right_boundary": self._right_boundary.value},
            )
        if self.is_left_unbounded() or self.is_right_unbounded():
            return

        result = self.compare_values(self._left_value, self._right_value)
        if result > 0:
            raise InvalidIntervalError(
                "Invalid interval: left value is greater than right value",
                context={"left": self._left_value, "right": self._right_value},
            )
        if result == 0 and (self._left_boundary.is_open or self._right_boundary.is_open):
            raise InvalidIntervalError(
                "Invalid interval: point interval requires both boundaries to be closed",
                context={"value": self._left_value},
            )

    def contains(self, value: T) -> bool:
        """Whether the value lies inside the interval."""
        if value is None:
            raise ValueError("Value must not be None")

        if not self.is_left_unbounded():
            result = self.compare_values(value, self._left_value)
            if result < 0 or (result == 0 and self._left_boundary.is_open):
                return False

        if not self.is_right_unbounded():
            result = self.compare_values(value, self._right_value)
            if result > 0 or (result == 0 and self._right_boundary.is_open):
                return False

        return True

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def is_satisfiable(self) -> bool:
        """Whether the interval contains at least one value."""
        return self._endpoints_satisfiable(self.left_endpoint, self.right_endpoint)

    def _endpoints_satisfiable(self, left: Endpoint, right: Endpoint) -> bool:
        if left.unbounded or right.unbounded:
            return True

        result = self.compare_values(left.value, right.value)
        if result < 0:
            return True
        if result > 0:
            return False
        return not left.boundary.is_open and not right.boundary.is_open

    def _max_left(self, other: "Interval[T]") -> Endpoint:
        mine, theirs = self.left_endpoint, other.left_endpoint
        if mine.unbounded:
            return theirs
        if theirs.unbounded:
            return mine

        result = self.compare_values(mine.value, theirs.value)
        if result > 0:
            return mine
        if result < 0:
            return theirs

        inclusive = mine.boundary.is_closed and theirs.boundary.is_closed
        return Endpoint(Boundary.CLOSED if inclusive else Boundary.OPEN, mine.value)

    def _min_right(self, other: "Interval[T]") -> Endpoint:
        mine, theirs = self.right_endpoint, other.right_endpoint
        if mine.unbounded:
            return theirs
        if theirs.unbounded:
            return mine

        result = self.compare_values(mine.value, theirs.value)
        if result < 0:
            return mine
        if result > 0:
            return theirs

        inclusive = mine.boundary.is_closed and theirs.boundary.is_closed
        return Endpoint(Boundary.CLOSED if inclusive else Boundary.OPEN, mine.value)

    def try_intersect(self, other: "Interval[T]") -> "Interval[T] | None":
        """Intersect with another interval.

        Returns:
            The intersection, or None when the intervals share no value.
        """
        left = self._max_left(other)
        right = self._min_right(other)

        if not self._endpoints_satisfiable(left, right):
            return None
        return self._derive(left, right)

    def intersect(self, other: "Interval[T]") -> "Interval[T]":
        """Intersect with another interval.

        Raises:
            NoOverlapError: If the intervals share no value.
        """
        result = self.try_intersect(other)
        if result is None:
            raise NoOverlapError(
                "Intervals do not overlap",
                context={"left": str(self), "right": str(other)},
            )
        return result

    def overlaps(self, other: "Interval[T]") -> bool:
        return self.try_intersect(other) is not None

    def _compare_left_endpoints(self, other: "Interval[T]") -> int:
        mine_unbounded = self.is_left_unbounded()
        theirs_unbounded = other.is_left_unbounded()
        if mine_unbounded and theirs_unbounded:
            return 0
        if mine_unbounded:
            return -1
        if theirs_unbounded:
            return 1

        result = self.compare_values(self._left_value, other.left_value)
        if result != 0:
            return result

        mine_closed = self._left_boundary.is_closed
        if mine_closed == other.left_boundary.is_closed:
            return 0
        # A closed left side starts earlier.
        return -1 if mine_closed else 1

    def _compare_right_endpoints(self, other: "Interval[T]") -> int:
        mine_unbounded = self.is_right_unbounded()
        theirs_unbounded = other.is_right_unbounded()
        if mine_unbounded and theirs_unbounded:
            return 0
        if mine_unbounded:
            return 1
        if theirs_unbounded:
            return -1

        result = self.compare_values(self._right_value, other.right_value)
        if result != 0:
            return result

        mine_closed = self._right_boundary.is_closed
        if mine_closed == other.right_boundary.is_closed:
            return 0
        # A closed right side ends later.
        return 1 if mine_closed else -1

    def compare_to(self, other: "Interval[T]") -> int:
        """Order by left endpoint, then by right endpoint."""
        result = self._compare_left_endpoints(other)
        if result != 0:
            return result
        return self._compare_right_endpoints(other)

    def is_strictly_before(self, other: "Interval[T]") -> bool:
        """Whether this interval ends before the other one starts.

        Touching endpoints count as a gap when either of them is open.
        """
        if self.is_right_unbounded() or other.is_left_unbounded():
            return False

        result = self.compare_values(self._right_value, other.left_value)
        if result < 0:
            return True
        if result > 0:
            return False
        return self._right_boundary.is_open or other.left_boundary.is_open

    def to_string_representation(self) -> str:
        """Render as ``[1, 3]``, ``(1, 3)``, ``(*, 3]`` or ``[1, *)``."""
        left = UNBOUNDED_VALUE_TEXT if self.is_left_unbounded() else str(self._left_value)
        right = UNBOUNDED_VALUE_TEXT if self.is_right_unbounded() else str(self._right_value)
        return f"{self._left_boundary.left_glyph}{left}, {right}{self._right_boundary.right_glyph}"

    # -------------------------------------------------------------------------
    # Dunder methods
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string_representation()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string_representation()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        if type(other) is not type(self):
            return False
        return (
            self._left_boundary is other._left_boundary
            and self._right_boundary is other._right_boundary
            and self._left_value == other._left_value
            and self._right_value == other._right_value
        )

    def __hash__(self) -> int:
        return hash((self._left_boundary, self._left_value, self._right_boundary, self._right_value))


# =============================================================================
# Function API
# =============================================================================


def contains(interval: Interval[T], value: T) -> bool:
    return interval.contains(value)


def is_satisfiable(interval: Interval[T]) -> bool:
    return interval.is_satisfiable()


def try_intersect(left: Interval[T], right: Interval[T]) -> Interval[T] | None:
    return left.try_intersect(right)


def intersect(left: Interval[T], right: Interval[T]) -> Interval[T]:
    return left.intersect(right)


def overlaps(left: Interval[T], right: Interval[T]) -> bool:
    return left.overlaps(right)


def compare_intervals(left: Interval[T], right: Interval[T]) -> int:
    return left.compare_to(right)


def is_strictly_before(left: Interval[T], right: Interval[T]) -> bool:
    return left.is_strictly_before(right)


def to_string_representation(interval: Interval[Any]) -> str:
    return interval.to_string_representation()


sort_key = functools.cmp_to_key(compare_intervals)
"""Key function for ``sorted()`` over intervals."""
