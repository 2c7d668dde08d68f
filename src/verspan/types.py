"""Type definitions for Verspan."""

from __future__ import annotations

from enum import Enum


class TokenKind(str, Enum):
    """Kinds of runs produced by the version tokenizer."""

    ALPHANUMERIC = "alphanumeric"
    SEPARATOR = "separator"


class BuildComparisonPolicy(str, Enum):
    """Whether the build-identification part participates in precedence."""

    IGNORE = "ignore"
    TOKEN_COMPARE = "token-compare"

    @classmethod
    def from_string(cls, value: str) -> "BuildComparisonPolicy":
        """Convert a configuration string to a policy.

        Accepts the enum value, its name, and underscore/hyphen variants.
        """
        key = value.strip().lower().replace("_", "-")
        for policy in cls:
            if policy.value == key:
                return policy
        raise ValueError(f"Unknown build comparison policy: {value!r}")


class BuildFormatPolicy(str, Enum):
    """How the build-identification part is rendered when formatting.

    Formatting does not affect comparison; a scheme may ignore the build
    part for precedence and still emit it.
    """

    OMIT = "omit"
    EMIT = "emit"
    MAP_TO_QUALIFIER = "map-to-qualifier"

    @classmethod
    def from_string(cls, value: str) -> "BuildFormatPolicy":
        """Convert a configuration string to a policy."""
        key = value.strip().lower().replace("_", "-")
        for policy in cls:
            if policy.value == key:
                return policy
        raise ValueError(f"Unknown build format policy: {value!r}")


class SchemeOrigin(str, Enum):
    """Where a version scheme comes from."""

    BUILTIN = "builtin"
    CUSTOM = "custom"
