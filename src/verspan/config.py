"""Configuration for Verspan.

Configuration lives in a YAML, TOML or JSON file, optionally nested under a
top-level ``verspan`` table, and may be overridden by environment
variables:

- ``VERSPAN_DEFAULT_SCHEME``: code of the scheme used when none is given.
- ``VERSPAN_LOG_LEVEL``: logging level name.

Example (YAML):

    default_scheme: semver-default
    log_level: INFO
    schemes:
      - code: gradle-ordered
        comparator: maven-like
        build_delimiter: "+"
        build_comparison: token-compare
        build_format: emit
"""

from __future__ import annotations

import json
import logging
import os
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from verspan.errors import ConfigurationError, SchemeError
from verspan.types import BuildComparisonPolicy, BuildFormatPolicy
from verspan.versioning.comparators import CALVER_LIKE, MAVEN_LIKE, SEMVER_LIKE, VersionComparator
from verspan.versioning.format import VersionFormatSpec
from verspan.versioning.registry import SchemeRegistry
from verspan.versioning.schemes import CustomVersionScheme, VersionScheme
from verspan.versioning.structure import VersionStructure

logger = logging.getLogger(__name__)

ENV_DEFAULT_SCHEME = "VERSPAN_DEFAULT_SCHEME"
ENV_LOG_LEVEL = "VERSPAN_LOG_LEVEL"

CONFIG_TABLE = "verspan"

COMPARATORS: dict[str, VersionComparator] = {
    "maven-like": MAVEN_LIKE,
    "semver-like": SEMVER_LIKE,
    "calver-like": CALVER_LIKE,
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _normalize_keys(data: Mapping[str, Any], allowed: set[str], where: str) -> dict[str, Any]:
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"{where} must be a mapping, got {type(data).__name__}")

    result = {str(key).replace("-", "_"): value for key, value in data.items()}
    unknown = sorted(set(result) - allowed)
    if unknown:
        raise ConfigurationError(
            f"Unknown keys in {where}: {', '.join(unknown)}",
            context={"allowed": ", ".join(sorted(allowed))},
        )
    return result


@dataclass(frozen=True)
class SchemeDefinition:
    """Declarative description of a custom version scheme.

    Attributes:
        code: Unique scheme code.
        comparator: Comparator family: maven-like, semver-like or calver-like.
        version_before_build: Whether the version part precedes the build part.
        build_delimiter: Delimiter of the build part; empty for none.
        build_comparison: ``ignore`` or ``token-compare``.
        build_format: ``omit``, ``emit`` or ``map-to-qualifier``.
        mapped_build_prefix: Prefix used when mapping the build into the qualifier.
        qualifier_delimiter: Delimiter that starts the qualifier section.
        qualifier_token_delimiter: Delimiter between qualifier tokens.
    """

    code: str
    comparator: str = "maven-like"
    version_before_build: bool = True
    build_delimiter: str = ""
    build_comparison: str = BuildComparisonPolicy.IGNORE.value
    build_format: str = BuildFormatPolicy.OMIT.value
    mapped_build_prefix: str = "build"
    qualifier_delimiter: str = "-"
    qualifier_token_delimiter: str = "."

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not isinstance(self.code, str) or not self.code.strip():
            raise ConfigurationError("Scheme code must not be blank")
        for name in (
            "comparator",
            "build_delimiter",
            "build_comparison",
            "build_format",
            "mapped_build_prefix",
            "qualifier_delimiter",
            "qualifier_token_delimiter",
        ):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"{name} must be a string for scheme {self.code!r}",
                    context={"got": type(value).__name__},
                )
        if self.comparator not in COMPARATORS:
            raise ConfigurationError(
                f"Unknown comparator {self.comparator!r} for scheme {self.code!r}",
                context={"allowed": ", ".join(COMPARATORS)},
            )
        if not isinstance(self.version_before_build, bool):
            raise ConfigurationError(f"version_before_build must be a boolean for scheme {self.code!r}")
        try:
            BuildComparisonPolicy.from_string(self.build_comparison)
            BuildFormatPolicy.from_string(self.build_format)
        except ValueError as e:
            raise ConfigurationError(f"{e} (scheme {self.code!r})") from e

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SchemeDefinition":
        """Create from a dictionary, accepting hyphenated keys."""
        allowed = {f.name for f in fields(cls)}
        values = _normalize_keys(data, allowed, "scheme definition")
        if "code" not in values:
            raise ConfigurationError("Scheme definition requires a 'code'")
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_scheme(self) -> VersionScheme:
        """Build the scheme this definition describes."""
        structure = VersionStructure(
            f"{self.code}-structure",
            version_before_build=self.version_before_build,
            build_delimiter=self.build_delimiter,
            build_comparison_policy=BuildComparisonPolicy.from_string(self.build_comparison),
        )
        format_spec = VersionFormatSpec(
            f"{self.code}-format",
            build_format_policy=BuildFormatPolicy.from_string(self.build_format),
            mapped_build_prefix=self.mapped_build_prefix,
            qualifier_delimiter=self.qualifier_delimiter,
            qualifier_token_delimiter=self.qualifier_token_delimiter,
        )
        return CustomVersionScheme(
            self.code,
            COMPARATORS[self.comparator],
            structure=structure,
            format_spec=format_spec,
        )


@dataclass(frozen=True)
class VerspanConfig:
    """Top-level Verspan configuration.

    Attributes:
        default_scheme: Code of the scheme used when none is given.
        log_level: Logging level name.
        schemes: Custom scheme definitions added next to the built-ins.
    """

    default_scheme: str = "maven-default"
    log_level: str = "WARNING"
    schemes: tuple[SchemeDefinition, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not isinstance(self.default_scheme, str) or not self.default_scheme.strip():
            raise ConfigurationError("default_scheme must not be blank")
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {self.log_level!r}",
                context={"allowed": ", ".join(LOG_LEVELS)},
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "VerspanConfig":
        """Create from a dictionary.

        A top-level ``verspan`` table is unwrapped first.
        """
        if not data:
            return cls()
        if CONFIG_TABLE in data and isinstance(data[CONFIG_TABLE], Mapping):
            data = data[CONFIG_TABLE]

        allowed = {f.name for f in fields(cls)}
        values = _normalize_keys(data, allowed, "configuration")

        raw_schemes = values.pop("schemes", None) or []
        if not isinstance(raw_schemes, list):
            raise ConfigurationError("'schemes' must be a list of scheme definitions")
        values["schemes"] = tuple(SchemeDefinition.from_dict(item) for item in raw_schemes)

        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "default_scheme": self.default_scheme,
            "log_level": self.log_level,
            "schemes": [definition.to_dict() for definition in self.schemes],
        }

    def with_env_overrides(self, environ: Mapping[str, str] | None = None) -> "VerspanConfig":
        """Return a copy with environment overrides applied."""
        env = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}

        scheme = env.get(ENV_DEFAULT_SCHEME, "").strip()
        if scheme:
            overrides["default_scheme"] = scheme
        level = env.get(ENV_LOG_LEVEL, "").strip()
        if level:
            overrides["log_level"] = level.upper()

        if not overrides:
            return self
        logger.debug(f"Applying environment overrides: {sorted(overrides)}")
        return replace(self, **overrides)

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    def build_registry(self) -> SchemeRegistry:
        """Create a registry with the built-ins plus the configured schemes.

        Raises:
            ConfigurationError: If a configured scheme is invalid or clashes
                with an existing code.
        """
        registry = SchemeRegistry()
        for definition in self.schemes:
            try:
                registry.add(definition.to_scheme())
            except SchemeError as e:
                raise ConfigurationError(
                    f"Cannot register scheme {definition.code!r}: {e.message}",
                    context={"code": definition.code},
                ) from e
        return registry

    def resolve_default_scheme(self, registry: SchemeRegistry | None = None) -> VersionScheme:
        """Look up the configured default scheme.

        Raises:
            ConfigurationError: If the code is not registered.
        """
        registry = registry if registry is not None else self.build_registry()
        scheme = registry.find(self.default_scheme)
        if scheme is None:
            raise ConfigurationError(
                f"Default scheme {self.default_scheme!r} is not registered",
                context={"known": ", ".join(registry.codes())},
            )
        return scheme


def _read_file(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file: {path}", context={"error": e}) from e

    suffix = path.suffix.lower()
    try:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content) or {}
        elif suffix == ".toml":
            data = tomllib.loads(content)
        elif suffix == ".json":
            data = json.loads(content)
        else:
            raise ConfigurationError(f"Unsupported configuration format: {suffix or path.name}")
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to parse configuration file: {path}", context={"error": e}) from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration root must be a mapping: {path}")
    return data


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> VerspanConfig:
    """Load configuration from a file and the environment.

    Args:
        path: YAML, TOML or JSON file. None means defaults only.
        environ: Environment mapping; ``os.environ`` when omitted.

    Returns:
        The resulting configuration.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid.
    """
    if path is None:
        config = VerspanConfig()
    else:
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")
        logger.debug(f"Loading configuration from {config_path}")
        config = VerspanConfig.from_dict(_read_file(config_path))

    return config.with_env_overrides(environ)
