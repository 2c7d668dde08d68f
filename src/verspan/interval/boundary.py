"""Interval boundary kinds."""

from __future__ import annotations

from enum import Enum

UNBOUNDED_VALUE_TEXT = "*"


class Boundary(str, Enum):
    """Kind of one side of an interval.

    OPEN and CLOSED carry a value and differ only in whether that value is
    included. UNBOUNDED carries no value and stands for minus or plus
    infinity.
    """

    OPEN = "open"
    CLOSED = "closed"
    UNBOUNDED = "unbounded"

    @property
    def is_open(self) -> bool:
        """Whether the boundary value itself is excluded."""
        return self is not Boundary.CLOSED

    @property
    def is_closed(self) -> bool:
        return self is Boundary.CLOSED

    @property
    def ignores_value(self) -> bool:
        """Whether the boundary has no value at all."""
        return self is Boundary.UNBOUNDED

    @property
    def left_glyph(self) -> str:
        return "[" if self is Boundary.CLOSED else "("

    @property
    def right_glyph(self) -> str:
        return "]" if self is Boundary.CLOSED else ")"
