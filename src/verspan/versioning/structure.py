"""Structural interpretation of version text.

A structure says where the build-identification part sits (before or after
the precedence-relevant version part), how it is delimited, and whether it
takes part in comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from verspan.errors import SchemeError
from verspan.types import BuildComparisonPolicy


class VersionTextParts(NamedTuple):
    """Version text split into its precedence part and its build part."""

    version_text: str
    build_text: str


@dataclass(frozen=True)
class VersionStructure:
    """How version text is divided into version and build parts.

    Attributes:
        code: Unique identifier of the structure.
        version_before_build: True when the version part precedes the build part.
        build_delimiter: Delimiter between the two parts; empty means no build part.
        build_comparison_policy: Whether build parts are compared when versions tie.
    """

    code: str
    version_before_build: bool = True
    build_delimiter: str = ""
    build_comparison_policy: BuildComparisonPolicy = BuildComparisonPolicy.IGNORE

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.code or not self.code.strip():
            raise SchemeError("Structure code must not be blank")

    @property
    def has_build_section(self) -> bool:
        return bool(self.build_delimiter)

    @property
    def effective_comparison_policy(self) -> BuildComparisonPolicy:
        """Comparison policy, forced to IGNORE when there is no build section."""
        if not self.has_build_section:
            return BuildComparisonPolicy.IGNORE
        return self.build_comparison_policy

    @property
    def requires_build_awareness(self) -> bool:
        """Whether comparisons must split off the build part first."""
        return (
            self.has_build_section
            or not self.version_before_build
            or self.effective_comparison_policy is not BuildComparisonPolicy.IGNORE
        )

    def split_version_and_build_text(self, text: str) -> VersionTextParts:
        """Split raw text at the first build delimiter.

        Text without the delimiter is entirely version text.
        """
        if not self.build_delimiter:
            return VersionTextParts(text, "")

        first, found, second = text.partition(self.build_delimiter)
        if not found:
            return VersionTextParts(text, "")

        if self.version_before_build:
            return VersionTextParts(first, second)
        return VersionTextParts(second, first)


NO_BUILD = VersionStructure("no-build")

BUILD_AFTER_PLUS_IGNORED = VersionStructure(
    "build-after-plus-ignored",
    version_before_build=True,
    build_delimiter="+",
)

BUILD_AFTER_PLUS_ORDERED = VersionStructure(
    "build-after-plus-ordered",
    version_before_build=True,
    build_delimiter="+",
    build_comparison_policy=BuildComparisonPolicy.TOKEN_COMPARE,
)

BUILD_BEFORE_PLUS_IGNORED = VersionStructure(
    "build-before-plus-ignored",
    version_before_build=False,
    build_delimiter="+",
)

BUILTIN_STRUCTURES: tuple[VersionStructure, ...] = (
    NO_BUILD,
    BUILD_AFTER_PLUS_IGNORED,
    BUILD_AFTER_PLUS_ORDERED,
    BUILD_BEFORE_PLUS_IGNORED,
)
