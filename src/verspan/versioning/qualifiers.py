"""Qualifier kinds and canonical qualifier text.

A qualifier is the non-numeric part of a version that expresses release
status, for example ``SNAPSHOT``, ``rc1`` or ``sp2``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from verspan.errors import VersionFormatError

if TYPE_CHECKING:
    from verspan.versioning.schemes import VersionScheme
    from verspan.versioning.version import Version


SNAPSHOT_TEXT = "SNAPSHOT"


class QualifierKind(str, Enum):
    """Release status expressed by a qualifier."""

    SNAPSHOT = "snapshot"
    PRE_RELEASE = "pre-release"
    RELEASE = "release"
    POST_RELEASE = "post-release"

    @classmethod
    def find_by_code(cls, code: str) -> "QualifierKind | None":
        for kind in cls:
            if kind.value == code:
                return kind
        return None

    @classmethod
    def from_code(cls, code: str) -> "QualifierKind":
        """Get a kind by code.

        Raises:
            ValueError: If the code is unknown.
        """
        kind = cls.find_by_code(code)
        if kind is None:
            raise ValueError(f"Unsupported qualifier kind: {code!r}")
        return kind

    @property
    def label_allowed(self) -> bool:
        return self is not QualifierKind.RELEASE

    @property
    def label_required(self) -> bool:
        return self in (QualifierKind.PRE_RELEASE, QualifierKind.POST_RELEASE)

    def format_qualifier_text(self, label: str | None = None) -> str:
        """Produce canonical qualifier text, without the qualifier delimiter.

        Args:
            label: Optional label such as ``rc1``.

        Returns:
            ``""`` for RELEASE, the label for PRE/POST_RELEASE, and
            ``SNAPSHOT`` or ``SNAPSHOT.<label>`` for SNAPSHOT.

        Raises:
            VersionFormatError: If a label is given for RELEASE or missing
                where one is required.
        """
        blank = label is None or not label.strip()

        if not self.label_allowed:
            if not blank:
                raise VersionFormatError("Label must be empty for a release qualifier")
            return ""

        if self.label_required:
            if blank:
                raise VersionFormatError(f"Label is required for qualifier kind {self.value!r}")
            return label

        if blank:
            return SNAPSHOT_TEXT
        return f"{SNAPSHOT_TEXT}.{label}"

    @classmethod
    def detect(cls, qualifier_text: str | None) -> "QualifierKind":
        """Infer the kind from canonical qualifier text.

        Pre- and post-release qualifiers cannot be told apart from text
        alone; both are reported as PRE_RELEASE.
        """
        if qualifier_text is None or not qualifier_text.strip():
            return cls.RELEASE

        upper = qualifier_text.upper()
        if upper == SNAPSHOT_TEXT or upper.startswith(f"{SNAPSHOT_TEXT}."):
            return cls.SNAPSHOT
        return cls.PRE_RELEASE


@dataclass(frozen=True)
class VersionQualifier:
    """Qualifier kind together with its label."""

    kind: QualifierKind
    label: str | None = None

    @property
    def text(self) -> str:
        return self.kind.format_qualifier_text(self.label)

    @classmethod
    def parse(cls, qualifier_text: str | None) -> "VersionQualifier":
        kind = QualifierKind.detect(qualifier_text)
        if kind is QualifierKind.RELEASE:
            return cls(kind)
        if kind is QualifierKind.SNAPSHOT:
            rest = qualifier_text[len(SNAPSHOT_TEXT) + 1:]
            return cls(kind, rest or None)
        return cls(kind, qualifier_text)


def extract_qualifier(version: "Version", scheme: "VersionScheme") -> VersionQualifier:
    """Read the qualifier section of a version under a scheme.

    The section starts after the first qualifier delimiter in the version
    part; the build part is never included.
    """
    version_part, _ = scheme.split_version_and_build_text(version.original_text.strip())
    delimiter = scheme.format_spec.qualifier_delimiter
    if not delimiter:
        return VersionQualifier(QualifierKind.RELEASE)

    _, found, qualifier_text = version_part.partition(delimiter)
    if not found:
        return VersionQualifier(QualifierKind.RELEASE)
    return VersionQualifier.parse(qualifier_text)
