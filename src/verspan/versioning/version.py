"""Immutable version value backed by tokenization."""

from __future__ import annotations

from typing import TYPE_CHECKING

from verspan.versioning.tokens import Token, tokenize

if TYPE_CHECKING:
    from verspan.versioning.comparators import ComparatorLike
    from verspan.versioning.schemes import VersionScheme


class Version:
    """A version string with its cached tokens.

    Equality and hashing use the original text only: ``Version("1.0")`` and
    ``Version("1.0.0")`` are different values even though most schemes give
    them equal precedence. Ordering operators (``<``, ``<=``, ...) use the
    ``maven-default`` scheme; pass an explicit scheme to :meth:`compare_to`
    for anything else.

    Example:
        >>> from verspan import SEMVER_DEFAULT
        >>> Version("1.10") > Version("1.2")
        True
        >>> Version("1.0-rc1").compare_to(Version("1.0"), SEMVER_DEFAULT) < 0
        True
    """

    __slots__ = ("_original_text", "_tokens")

    def __init__(self, original_text: str) -> None:
        if not isinstance(original_text, str):
            raise TypeError(f"Version text must be a string, got {type(original_text).__name__}")
        self._original_text = original_text
        self._tokens = tokenize(original_text)

    @property
    def original_text(self) -> str:
        return self._original_text

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    def compare_to(
        self,
        other: "Version",
        scheme: "VersionScheme | ComparatorLike | None" = None,
    ) -> int:
        """Compare with another version.

        Args:
            other: Version to compare with.
            scheme: Scheme or bare comparator; ``maven-default`` when omitted.

        Returns:
            Negative, zero or positive like a classic ``cmp``.
        """
        from verspan.versioning.compare import compare_versions
        from verspan.versioning.schemes import DEFAULT_SCHEME

        return compare_versions(self, other, scheme if scheme is not None else DEFAULT_SCHEME)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._original_text == other._original_text

    def __hash__(self) -> int:
        return hash(self._original_text)

    def __str__(self) -> str:
        return self._original_text

    def __repr__(self) -> str:
        return f"Version({self._original_text!r})"
