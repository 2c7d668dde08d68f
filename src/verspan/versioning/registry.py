"""Scheme registry for built-in and caller-defined version schemes.

The registry is owned by its caller; there is no process-wide instance.
Codes are unique ignoring case and schemes are never replaced or removed.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from verspan.errors import DuplicateSchemeError, SchemeError, UnknownSchemeError
from verspan.versioning.codec import DEFAULT_CODEC, VersionCodec
from verspan.versioning.comparators import ComparisonFunc
from verspan.versioning.format import OMIT_BUILD, VersionFormatSpec
from verspan.versioning.schemes import BUILTIN_SCHEMES, CustomVersionScheme, VersionScheme
from verspan.versioning.structure import NO_BUILD, VersionStructure

logger = logging.getLogger(__name__)


class SchemeRegistry:
    """Registry of version schemes keyed by case-insensitive code.

    Example:
        >>> registry = SchemeRegistry()
        >>>
        >>> # Register with decorator
        >>> @registry.register("length")
        ... def by_length(left, right):
        ...     return len(left.original_text) - len(right.original_text)
        >>>
        >>> registry.get("LENGTH").code
        'length'
    """

    def __init__(self, include_builtins: bool = True) -> None:
        """Initialize the registry.

        Args:
            include_builtins: Pre-populate with the built-in schemes.
        """
        self._schemes: dict[str, VersionScheme] = {}
        if include_builtins:
            for scheme in BUILTIN_SCHEMES:
                self.add(scheme)

    @staticmethod
    def _key(code: str) -> str:
        return code.strip().lower()

    def add(self, scheme: VersionScheme) -> VersionScheme:
        """Add a scheme to the registry.

        Args:
            scheme: The scheme to add.

        Returns:
            The added scheme.

        Raises:
            DuplicateSchemeError: If a scheme with the same code exists.
        """
        key = self._key(scheme.code)
        if key in self._schemes:
            raise DuplicateSchemeError(scheme.code)

        self._schemes[key] = scheme
        logger.debug(f"Registered version scheme: {scheme.code} ({scheme.origin.value})")
        return scheme

    def register(
        self,
        code: str,
        structure: VersionStructure = NO_BUILD,
        format_spec: VersionFormatSpec = OMIT_BUILD,
        codec: VersionCodec = DEFAULT_CODEC,
    ) -> Callable[[ComparisonFunc], ComparisonFunc]:
        """Decorator turning a comparison function into a registered scheme.

        Args:
            code: Scheme code.
            structure: Build-part structure.
            format_spec: Formatting rules.
            codec: Parse/format codec.

        Returns:
            Decorator function.
        """

        def decorator(func: ComparisonFunc) -> ComparisonFunc:
            self.add(
                CustomVersionScheme(
                    code,
                    func,
                    structure=structure,
                    format_spec=format_spec,
                    codec=codec,
                )
            )
            return func

        return decorator

    def find(self, code: str | None) -> VersionScheme | None:
        """Find a scheme by code, or None for blank or unknown codes."""
        if not code or not code.strip():
            return None
        return self._schemes.get(self._key(code))

    def get(self, code: str) -> VersionScheme:
        """Get a scheme by code.

        Raises:
            UnknownSchemeError: If no scheme has this code.
        """
        scheme = self.find(code)
        if scheme is None:
            raise UnknownSchemeError(code, context={"known": ", ".join(self.codes())})
        return scheme

    def codes(self) -> list[str]:
        """Codes of all registered schemes in registration order."""
        return [scheme.code for scheme in self._schemes.values()]

    def __contains__(self, code: object) -> bool:
        if isinstance(code, VersionScheme):
            code = code.code
        if not isinstance(code, str):
            return False
        return self.find(code) is not None

    def __iter__(self) -> Iterator[VersionScheme]:
        return iter(list(self._schemes.values()))

    def __len__(self) -> int:
        return len(self._schemes)

    def __repr__(self) -> str:
        return f"SchemeRegistry({self.codes()!r})"


def coerce_scheme(value: VersionScheme | str, registry: SchemeRegistry | None = None) -> VersionScheme:
    """Resolve a scheme object or code.

    Raises:
        UnknownSchemeError: If a code is not registered.
        SchemeError: If the value is neither a scheme nor a string.
    """
    if isinstance(value, VersionScheme):
        return value
    if isinstance(value, str):
        return (registry or SchemeRegistry()).get(value)
    raise SchemeError(f"Expected a version scheme or code, got {type(value).__name__}")
