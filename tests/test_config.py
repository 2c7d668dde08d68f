"""Tests for configuration loading."""

from __future__ import annotations

import json
import logging

import pytest

from verspan.config import SchemeDefinition, VerspanConfig, load_config
from verspan.errors import ConfigurationError
from verspan.types import BuildComparisonPolicy, BuildFormatPolicy, SchemeOrigin
from verspan.versioning.comparators import CALVER_LIKE, SEMVER_LIKE
from verspan.versioning.schemes import MAVEN_DEFAULT, SEMVER_DEFAULT
from verspan.versioning.version import Version


# =============================================================================
# Fixtures
# =============================================================================


YAML_CONFIG = """\
default_scheme: gradle-ordered
log_level: info
schemes:
  - code: gradle-ordered
    comparator: semver-like
    build_delimiter: "+"
    build_comparison: token-compare
    build_format: emit
  - code: nightly
    comparator: calver-like
"""

TOML_CONFIG = """\
[verspan]
default_scheme = "semver-default"

[[verspan.schemes]]
code = "mapped"
comparator = "maven-like"
build-delimiter = "+"
build-format = "map-to-qualifier"
mapped-build-prefix = "b"
"""


@pytest.fixture
def yaml_file(tmp_path):
    path = tmp_path / "verspan.yaml"
    path.write_text(YAML_CONFIG)
    return path


@pytest.fixture
def toml_file(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text(TOML_CONFIG)
    return path


# =============================================================================
# SchemeDefinition
# =============================================================================


class TestSchemeDefinition:
    """Tests for SchemeDefinition."""

    def test_defaults(self):
        definition = SchemeDefinition("plain")
        scheme = definition.to_scheme()

        assert scheme.code == "plain"
        assert scheme.origin is SchemeOrigin.CUSTOM
        assert not scheme.structure.has_build_section
        assert scheme.format_spec.build_format_policy is BuildFormatPolicy.OMIT

    def test_to_scheme(self):
        definition = SchemeDefinition.from_dict(
            {
                "code": "ordered",
                "comparator": "semver-like",
                "build-delimiter": "+",
                "build_comparison": "TOKEN_COMPARE",
                "build_format": "emit",
            }
        )
        scheme = definition.to_scheme()

        assert scheme.comparator is SEMVER_LIKE
        assert scheme.structure.build_comparison_policy is BuildComparisonPolicy.TOKEN_COMPARE
        assert scheme.compare(Version("1.0.0+1"), Version("1.0.0+2")) < 0
        assert scheme.normalize("1.0.0+2") == "1.0.0+2"

    def test_unknown_comparator(self):
        with pytest.raises(ConfigurationError):
            SchemeDefinition("bad", comparator="lexical")

    def test_comparator_must_be_string(self):
        with pytest.raises(ConfigurationError) as exc_info:
            SchemeDefinition("bad", comparator=["maven-like"])
        assert "comparator" in exc_info.value.message

    @pytest.mark.parametrize(
        "field",
        [
            "build_delimiter",
            "build_comparison",
            "build_format",
            "mapped_build_prefix",
            "qualifier_delimiter",
            "qualifier_token_delimiter",
        ],
    )
    def test_text_fields_must_be_strings(self, field):
        with pytest.raises(ConfigurationError) as exc_info:
            SchemeDefinition.from_dict({"code": "x", field: 1})
        assert field in exc_info.value.message

    def test_config_rejects_non_string_delimiter(self):
        with pytest.raises(ConfigurationError):
            VerspanConfig.from_dict({"schemes": [{"code": "x", "build_delimiter": 1}]})

    def test_unknown_policy(self):
        with pytest.raises(ConfigurationError):
            SchemeDefinition("bad", build_format="drop")

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError) as exc_info:
            SchemeDefinition.from_dict({"code": "x", "colour": "red"})
        assert "colour" in exc_info.value.message

    def test_missing_code(self):
        with pytest.raises(ConfigurationError):
            SchemeDefinition.from_dict({"comparator": "maven-like"})

    def test_blank_code(self):
        with pytest.raises(ConfigurationError):
            SchemeDefinition(" ")

    def test_to_dict_round_trip(self):
        definition = SchemeDefinition("x", comparator="calver-like")
        assert SchemeDefinition.from_dict(definition.to_dict()) == definition


# =============================================================================
# VerspanConfig
# =============================================================================


class TestVerspanConfig:
    """Tests for VerspanConfig."""

    def test_defaults(self):
        config = VerspanConfig()
        assert config.default_scheme == "maven-default"
        assert config.log_level == "WARNING"
        assert config.logging_level == logging.WARNING
        assert config.resolve_default_scheme() is MAVEN_DEFAULT

    def test_from_empty_dict(self):
        assert VerspanConfig.from_dict({}) == VerspanConfig()
        assert VerspanConfig.from_dict(None) == VerspanConfig()

    def test_invalid_log_level(self):
        with pytest.raises(ConfigurationError):
            VerspanConfig(log_level="LOUD")

    def test_schemes_must_be_list(self):
        with pytest.raises(ConfigurationError):
            VerspanConfig.from_dict({"schemes": {"code": "x"}})

    def test_env_overrides(self):
        config = VerspanConfig().with_env_overrides(
            {"VERSPAN_DEFAULT_SCHEME": "semver-default", "VERSPAN_LOG_LEVEL": "debug"}
        )
        assert config.default_scheme == "semver-default"
        assert config.log_level == "DEBUG"

    def test_env_overrides_ignore_blank(self):
        config = VerspanConfig()
        assert config.with_env_overrides({"VERSPAN_DEFAULT_SCHEME": "  "}) is config

    def test_build_registry(self):
        config = VerspanConfig(schemes=(SchemeDefinition("custom"),))
        registry = config.build_registry()
        assert "custom" in registry
        assert "maven-default" in registry

    def test_build_registry_duplicate(self):
        config = VerspanConfig(schemes=(SchemeDefinition("semver-default"),))
        with pytest.raises(ConfigurationError):
            config.build_registry()

    def test_unknown_default_scheme(self):
        with pytest.raises(ConfigurationError):
            VerspanConfig(default_scheme="nope").resolve_default_scheme()


# =============================================================================
# load_config
# =============================================================================


class TestLoadConfig:
    """Tests for load_config()."""

    def test_no_path(self):
        assert load_config(environ={}) == VerspanConfig()

    def test_yaml(self, yaml_file):
        config = load_config(yaml_file, environ={})

        assert config.default_scheme == "gradle-ordered"
        assert [d.code for d in config.schemes] == ["gradle-ordered", "nightly"]

        scheme = config.resolve_default_scheme()
        assert scheme.compare(Version("1.0.0+7"), Version("1.0.0+8")) < 0
        assert config.build_registry().get("nightly").comparator is CALVER_LIKE

    def test_toml_with_table(self, toml_file):
        config = load_config(toml_file, environ={})

        assert config.resolve_default_scheme() is SEMVER_DEFAULT
        mapped = config.build_registry().get("mapped")
        assert mapped.normalize("1.2.3+7") == "1.2.3-b.7"

    def test_json(self, tmp_path):
        path = tmp_path / "verspan.json"
        path.write_text(json.dumps({"verspan": {"default_scheme": "calver-default"}}))
        assert load_config(path, environ={}).default_scheme == "calver-default"

    def test_env_wins_over_file(self, yaml_file):
        config = load_config(yaml_file, environ={"VERSPAN_DEFAULT_SCHEME": "maven-default"})
        assert config.resolve_default_scheme() is MAVEN_DEFAULT

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("VERSPAN_LOG_LEVEL", "error")
        assert load_config().log_level == "ERROR"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "absent.yaml", environ={})

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "verspan.ini"
        path.write_text("[verspan]")
        with pytest.raises(ConfigurationError):
            load_config(path, environ={})

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "verspan.yaml"
        path.write_text("schemes: [unclosed")
        with pytest.raises(ConfigurationError):
            load_config(path, environ={})

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "verspan.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationError):
            load_config(path, environ={})
