"""Version text tokenizer.

Splits version text into maximal runs of ASCII alphanumeric characters
(``[A-Za-z0-9]``) and runs of everything else. Concatenating the token
texts reproduces the trimmed input, and token kinds strictly alternate.
"""

from __future__ import annotations

from dataclasses import dataclass

from verspan.types import TokenKind


@dataclass(frozen=True, slots=True)
class Token:
    """A single run of version text.

    Attributes:
        kind: Whether the run is alphanumeric or a separator.
        text: The run itself, never empty.
    """

    kind: TokenKind
    text: str

    @property
    def is_alphanumeric(self) -> bool:
        return self.kind is TokenKind.ALPHANUMERIC

    def __str__(self) -> str:
        return self.text


def is_ascii_alphanumeric(char: str) -> bool:
    """Check a single character against ``[A-Za-z0-9]``."""
    return "0" <= char <= "9" or "a" <= char <= "z" or "A" <= char <= "Z"


def is_ascii_digits(text: str) -> bool:
    """Check that a non-empty string consists of ASCII digits only."""
    return bool(text) and all("0" <= char <= "9" for char in text)


def _kind_of(char: str) -> TokenKind:
    return TokenKind.ALPHANUMERIC if is_ascii_alphanumeric(char) else TokenKind.SEPARATOR


def tokenize(text: str) -> tuple[Token, ...]:
    """Tokenize version text.

    Args:
        text: Raw version text. Leading and trailing whitespace is ignored.

    Returns:
        Tuple of tokens; empty for blank input.
    """
    trimmed = text.strip()
    if not trimmed:
        return ()

    tokens: list[Token] = []
    start = 0
    current = _kind_of(trimmed[0])

    for index in range(1, len(trimmed)):
        kind = _kind_of(trimmed[index])
        if kind is not current:
            tokens.append(Token(current, trimmed[start:index]))
            start = index
            current = kind

    tokens.append(Token(current, trimmed[start:]))
    return tuple(tokens)
