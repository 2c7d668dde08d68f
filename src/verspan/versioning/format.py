"""Formatting rules for rendering versions back to text.

The format spec is kept apart from :class:`VersionStructure`: the structure
decides how text splits into version and build parts, the format spec
decides how those parts are rendered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from verspan.errors import SchemeError, VersionFormatError
from verspan.types import BuildFormatPolicy

if TYPE_CHECKING:
    from verspan.versioning.schemes import VersionScheme
    from verspan.versioning.version import Version


@dataclass(frozen=True)
class VersionFormatSpec:
    """Formatting preferences for a scheme.

    Attributes:
        code: Unique identifier of the format spec.
        build_format_policy: What happens to the build part when formatting.
        mapped_build_prefix: Token placed before the build part when it is
            mapped into the qualifier section.
        qualifier_delimiter: Starts the qualifier section (``-`` in SemVer).
        qualifier_token_delimiter: Separates tokens inside the qualifier
            section (``.`` in SemVer).
    """

    code: str
    build_format_policy: BuildFormatPolicy = BuildFormatPolicy.OMIT
    mapped_build_prefix: str = "build"
    qualifier_delimiter: str = "-"
    qualifier_token_delimiter: str = "."

    def __post_init__(self) -> None:
        if not self.code or not self.code.strip():
            raise SchemeError("Format spec code must not be blank")


EMIT_BUILD = VersionFormatSpec("emit-build", BuildFormatPolicy.EMIT)
OMIT_BUILD = VersionFormatSpec("omit-build", BuildFormatPolicy.OMIT)
MAP_BUILD_TO_QUALIFIER = VersionFormatSpec("map-build-to-qualifier", BuildFormatPolicy.MAP_TO_QUALIFIER)

BUILTIN_FORMAT_SPECS: tuple[VersionFormatSpec, ...] = (
    EMIT_BUILD,
    OMIT_BUILD,
    MAP_BUILD_TO_QUALIFIER,
)


class DefaultVersionFormatter:
    """Renders versions using the scheme's structure and format spec."""

    def format_version_text(self, version: "Version", scheme: "VersionScheme") -> str:
        """Format a version under a scheme.

        Args:
            version: Version to render.
            scheme: Scheme providing structure and format spec.

        Returns:
            Formatted text.

        Raises:
            VersionFormatError: If the policy is EMIT but the structure has
                no build delimiter.
        """
        structure = scheme.structure
        format_spec = scheme.format_spec

        version_part, build_part = scheme.split_version_and_build_text(version.original_text)
        policy = format_spec.build_format_policy

        if not build_part or policy is BuildFormatPolicy.OMIT:
            return version_part

        if policy is BuildFormatPolicy.EMIT:
            delimiter = structure.build_delimiter
            if not delimiter:
                raise VersionFormatError(
                    "Build format policy EMIT requires a non-empty build delimiter",
                    context={"scheme": scheme.code, "structure": structure.code},
                )
            if structure.version_before_build:
                return f"{version_part}{delimiter}{build_part}"
            return f"{build_part}{delimiter}{version_part}"

        return map_build_to_qualifier(version_part, build_part, format_spec)


def map_build_to_qualifier(version_part: str, build_part: str, format_spec: VersionFormatSpec) -> str:
    """Fold the build part into the qualifier section of the version part.

    ``1.2.3`` + ``7`` becomes ``1.2.3-build.7``; ``1.2.3-rc1`` + ``7`` becomes
    ``1.2.3-rc1.build.7``.
    """
    token_delimiter = format_spec.qualifier_token_delimiter
    mapped = f"{format_spec.mapped_build_prefix}{token_delimiter}{build_part}"

    if format_spec.qualifier_delimiter not in version_part:
        return f"{version_part}{format_spec.qualifier_delimiter}{mapped}"
    return f"{version_part}{token_delimiter}{mapped}"


DEFAULT_FORMATTER = DefaultVersionFormatter()
