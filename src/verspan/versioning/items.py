"""Comparison items derived from version tokens.

Alphanumeric tokens are split further into digit runs and letter runs, so
``"1a2"`` becomes ``Numeric(1), Qualifier("a"), Numeric(2)``. Separators are
dropped. Trailing zero numerics and trailing release markers are trimmed so
that ``1.0.0`` and ``1`` normalize to the same sequence.

Two sequences compare position by position, the shorter one padded with
release markers:

    Numeric   vs Numeric        magnitude
    Numeric   vs Qualifier      numeric is greater
    Marker    vs Numeric        equal to Numeric(0), otherwise lower
    Marker    vs Qualifier      decided by the family's QualifierOrdering
    Qualifier vs Qualifier      decided by the family's QualifierOrdering
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from verspan.versioning.tokens import Token


class ItemKind(Enum):
    """Kinds of comparison items."""

    NUMERIC = "numeric"
    QUALIFIER = "qualifier"
    RELEASE_MARKER = "release-marker"


@dataclass(frozen=True, slots=True)
class Item:
    """A single comparison item.

    Attributes:
        kind: Item kind.
        number: Magnitude of a numeric item, 0 otherwise.
        qualifier: Raw text of a qualifier item, empty otherwise.
    """

    kind: ItemKind
    number: int = 0
    qualifier: str = ""

    @classmethod
    def numeric(cls, text: str) -> "Item":
        try:
            value = int(text)
        except ValueError:
            value = 0
        return cls(ItemKind.NUMERIC, number=value)

    @classmethod
    def of_qualifier(cls, text: str) -> "Item":
        return cls(ItemKind.QUALIFIER, qualifier=text)

    def __repr__(self) -> str:
        if self.kind is ItemKind.NUMERIC:
            return f"Numeric({self.number})"
        if self.kind is ItemKind.QUALIFIER:
            return f"Qualifier({self.qualifier!r})"
        return "ReleaseMarker"


RELEASE_MARKER = Item(ItemKind.RELEASE_MARKER)


class QualifierOrdering(ABC):
    """Qualifier rules of a comparator family."""

    @abstractmethod
    def compare_qualifiers(self, left: str, right: str) -> int:
        """Compare two raw qualifier texts."""
        pass

    @abstractmethod
    def compare_to_release(self, qualifier: str) -> int:
        """Compare a raw qualifier with the end of a version (release marker).

        Returns:
            Negative when the qualifier sorts before a plain release.
        """
        pass


def split_alphanumeric(text: str) -> list[Item]:
    """Split an alphanumeric token into digit runs and letter runs."""
    items: list[Item] = []
    index = 0
    length = len(text)

    while index < length:
        digit = "0" <= text[index] <= "9"
        start = index
        index += 1
        while index < length and ("0" <= text[index] <= "9") == digit:
            index += 1

        part = text[start:index]
        items.append(Item.numeric(part) if digit else Item.of_qualifier(part))

    return items


def trim_trailing_items(items: list[Item]) -> list[Item]:
    """Drop trailing ``Numeric(0)`` items and release markers in place."""
    while items:
        last = items[-1]
        if last.kind is ItemKind.NUMERIC and last.number == 0:
            items.pop()
        elif last.kind is ItemKind.RELEASE_MARKER:
            items.pop()
        else:
            break
    return items


def normalize_items(tokens: Iterable[Token], truncate_at_build: bool = False) -> list[Item]:
    """Turn tokens into a trimmed item sequence.

    Args:
        tokens: Tokens of one version.
        truncate_at_build: Stop at the first separator containing ``+``
            (SemVer build metadata never affects precedence).

    Returns:
        Normalized item list.
    """
    items: list[Item] = []

    for token in tokens:
        if not token.is_alphanumeric:
            if truncate_at_build and "+" in token.text:
                break
            continue
        items.extend(split_alphanumeric(token.text))

    return trim_trailing_items(items)


def _compare_ints(left: int, right: int) -> int:
    return (left > right) - (left < right)


def compare_items(left: Item, right: Item, ordering: QualifierOrdering) -> int:
    """Compare two items according to the table in the module docstring."""
    if left.kind is ItemKind.NUMERIC and right.kind is ItemKind.NUMERIC:
        return _compare_ints(left.number, right.number)

    if left.kind is ItemKind.RELEASE_MARKER or right.kind is ItemKind.RELEASE_MARKER:
        return _compare_with_release_marker(left, right, ordering)

    if left.kind is ItemKind.NUMERIC:
        return 1
    if right.kind is ItemKind.NUMERIC:
        return -1

    return ordering.compare_qualifiers(left.qualifier, right.qualifier)


def _compare_with_release_marker(left: Item, right: Item, ordering: QualifierOrdering) -> int:
    if left.kind is ItemKind.RELEASE_MARKER and right.kind is ItemKind.RELEASE_MARKER:
        return 0

    if left.kind is ItemKind.RELEASE_MARKER:
        if right.kind is ItemKind.NUMERIC:
            return 0 if right.number == 0 else -1
        return -ordering.compare_to_release(right.qualifier)

    if left.kind is ItemKind.NUMERIC:
        return 0 if left.number == 0 else 1
    return ordering.compare_to_release(left.qualifier)


def compare_item_sequences(
    left: Sequence[Item],
    right: Sequence[Item],
    ordering: QualifierOrdering,
) -> int:
    """Compare two normalized sequences, padding the shorter with release markers."""
    for index in range(max(len(left), len(right))):
        left_item = left[index] if index < len(left) else RELEASE_MARKER
        right_item = right[index] if index < len(right) else RELEASE_MARKER

        result = compare_items(left_item, right_item, ordering)
        if result != 0:
            return result

    return 0
