"""Tests for the verspan command-line interface."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from verspan.cli import ErrorCode, app

# Rich tables wrap at the default 80 columns.
WIDE = {"COLUMNS": "200"}


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's environment out of the configuration."""
    monkeypatch.delenv("VERSPAN_DEFAULT_SCHEME", raising=False)
    monkeypatch.delenv("VERSPAN_LOG_LEVEL", raising=False)


@pytest.fixture
def config_file(tmp_path):
    """YAML configuration with a custom default scheme."""
    path = tmp_path / "verspan.yaml"
    path.write_text(
        "default_scheme: ordered\n"
        "schemes:\n"
        "  - code: ordered\n"
        "    comparator: semver-like\n"
        "    build_delimiter: '+'\n"
        "    build_comparison: token-compare\n"
        "    build_format: emit\n"
    )
    return path


# =============================================================================
# Commands
# =============================================================================


class TestCompareCommand:
    """Tests for `verspan compare`."""

    def test_default_scheme(self, runner):
        result = runner.invoke(app, ["compare", "1.0-rc1", "1.0"])
        assert result.exit_code == 0
        assert result.output.strip() == "1.0-rc1 < 1.0"

    def test_equal(self, runner):
        result = runner.invoke(app, ["compare", "1.2.3+7", "1.2.3+8", "--scheme", "semver-default"])
        assert result.output.strip() == "1.2.3+7 = 1.2.3+8"

    def test_greater(self, runner):
        result = runner.invoke(app, ["compare", "1.10", "1.2"])
        assert result.output.strip() == "1.10 > 1.2"

    def test_config_default_scheme(self, runner, config_file):
        result = runner.invoke(app, ["--config", str(config_file), "compare", "1.0.0+7", "1.0.0+8"])
        assert result.exit_code == 0
        assert result.output.strip() == "1.0.0+7 < 1.0.0+8"

    def test_unknown_scheme(self, runner):
        result = runner.invoke(app, ["compare", "1", "2", "--scheme", "nope"])
        assert result.exit_code == ErrorCode.SCHEME_ERROR.value
        assert "Unknown version scheme" in result.output


class TestSortCommand:
    """Tests for `verspan sort`."""

    def test_sort(self, runner):
        result = runner.invoke(app, ["sort", "1.10", "1.2", "1.0-SNAPSHOT", "1.0"])
        assert result.exit_code == 0
        assert result.output.split() == ["1.0-SNAPSHOT", "1.0", "1.2", "1.10"]

    def test_reverse(self, runner):
        result = runner.invoke(app, ["sort", "--reverse", "--scheme", "semver-default", "1.0.0", "1.0.0-rc.1", "2.0.0"])
        assert result.output.split() == ["2.0.0", "1.0.0", "1.0.0-rc.1"]


class TestNormalizeCommand:
    """Tests for `verspan normalize`."""

    def test_map_build_to_qualifier(self, runner):
        result = runner.invoke(app, ["normalize", "1.2.3-rc1+7", "--scheme", "maven-build-metadata-ignored"])
        assert result.exit_code == 0
        assert result.output.strip() == "1.2.3-rc1.build.7"

    def test_emit(self, runner):
        result = runner.invoke(app, ["normalize", " 1.2.3+7 ", "-s", "semver-default"])
        assert result.output.strip() == "1.2.3+7"


class TestContainsCommand:
    """Tests for `verspan contains`."""

    def test_inside(self, runner):
        result = runner.invoke(app, ["contains", "1.5", "--lower", "1.0", "--upper", "2.0", "--upper-open"])
        assert result.exit_code == 0
        assert result.output.strip() == "1.5 in [1.0, 2.0): yes"

    def test_outside_strict(self, runner):
        result = runner.invoke(app, ["contains", "2.0", "--upper", "2.0", "--upper-open", "--strict"])
        assert result.exit_code == 1
        assert "(*, 2.0): no" in result.output

    def test_build_metadata_ignored(self, runner):
        result = runner.invoke(
            app,
            ["contains", "2.0.0+meta", "--upper", "2.0.0", "--scheme", "semver-default", "--strict"],
        )
        assert result.exit_code == 0
        assert result.output.strip().endswith("yes")

    def test_invalid_interval(self, runner):
        result = runner.invoke(app, ["contains", "1.0", "--lower", "2.0", "--upper", "1.0"])
        assert result.exit_code == ErrorCode.INTERVAL_ERROR.value
        assert "left value is greater" in result.output


class TestInspectCommand:
    """Tests for `verspan inspect`."""

    def test_inspect(self, runner):
        result = runner.invoke(app, ["inspect", "1.0.0-rc.1+build.5", "--scheme", "semver-default"], env=WIDE)
        assert result.exit_code == 0
        assert "pre-release" in result.output
        assert "build.5" in result.output
        assert "rc.1" in result.output


class TestSchemesCommand:
    """Tests for `verspan schemes`."""

    def test_lists_builtins(self, runner):
        result = runner.invoke(app, ["schemes"], env=WIDE)
        assert result.exit_code == 0
        for code in ("maven-default", "semver-default", "calver-default"):
            assert code in result.output

    def test_lists_configured(self, runner, config_file):
        result = runner.invoke(app, ["--config", str(config_file), "schemes"], env=WIDE)
        assert result.exit_code == 0
        assert "ordered" in result.output
        assert "custom" in result.output


class TestConfigErrors:
    """Tests for configuration failures."""

    def test_missing_config(self, runner, tmp_path):
        result = runner.invoke(app, ["--config", str(tmp_path / "absent.yaml"), "schemes"])
        assert result.exit_code == ErrorCode.CONFIG_INVALID.value
        assert "Configuration file not found" in result.output

    def test_non_string_comparator(self, runner, tmp_path):
        path = tmp_path / "verspan.yaml"
        path.write_text("schemes:\n  - code: broken\n    comparator: [maven-like]\n")
        result = runner.invoke(app, ["--config", str(path), "schemes"], env=WIDE)
        assert result.exit_code == ErrorCode.CONFIG_INVALID.value
        assert "comparator must be a string" in result.output

    def test_env_default_scheme(self, runner, monkeypatch):
        monkeypatch.setenv("VERSPAN_DEFAULT_SCHEME", "semver-default")
        result = runner.invoke(app, ["compare", "1.0.0+1", "1.0.0+2"])
        assert result.output.strip() == "1.0.0+1 = 1.0.0+2"
