"""Interval algebra over any total order.

Provides boundary-typed intervals (open, closed, unbounded) with
validation, containment, intersection, overlap and ordering.
"""

from verspan.interval.boundary import Boundary
from verspan.interval.interval import (
    Endpoint,
    Interval,
    compare_intervals,
    contains,
    intersect,
    is_satisfiable,
    is_strictly_before,
    overlaps,
    sort_key,
    to_string_representation,
    try_intersect,
)

__all__ = [
    "Boundary",
    "Endpoint",
    "Interval",
    "compare_intervals",
    "contains",
    "intersect",
    "is_satisfiable",
    "is_strictly_before",
    "overlaps",
    "sort_key",
    "to_string_representation",
    "try_intersect",
]
