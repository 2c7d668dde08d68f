"""Parsing and formatting of version strings under a scheme."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from verspan.versioning.format import DEFAULT_FORMATTER, DefaultVersionFormatter
from verspan.versioning.version import Version

if TYPE_CHECKING:
    from verspan.versioning.schemes import VersionScheme


class VersionCodec(ABC):
    """Parses and formats version strings according to a scheme.

    Parsing is tolerant: any text yields a version, and the scheme mainly
    influences comparison and formatting afterwards.
    """

    @abstractmethod
    def parse_version(self, text: str, scheme: "VersionScheme") -> Version:
        """Parse text into a version."""
        pass

    @abstractmethod
    def format_version_text(self, version: Version, scheme: "VersionScheme") -> str:
        """Render a version as text."""
        pass

    def normalize_version_text(self, text: str, scheme: "VersionScheme") -> str:
        """Parse and re-format text under the scheme."""
        return self.format_version_text(self.parse_version(text, scheme), scheme)


class DefaultVersionCodec(VersionCodec):
    """Trims input on parse and delegates formatting to a formatter."""

    def __init__(self, formatter: DefaultVersionFormatter | None = None) -> None:
        self._formatter = formatter or DEFAULT_FORMATTER

    def parse_version(self, text: str, scheme: "VersionScheme") -> Version:
        return Version(text.strip())

    def format_version_text(self, version: Version, scheme: "VersionScheme") -> str:
        return self._formatter.format_version_text(version, scheme)


DEFAULT_CODEC = DefaultVersionCodec()
