"""Tests for the polars helpers."""

from __future__ import annotations

import polars as pl
import pytest

from verspan.frames import filter_in_interval, interval_mask, max_version, sort_versions
from verspan.interval import Interval
from verspan.versioning.interval import VersionInterval
from verspan.versioning.schemes import MAVEN_DEFAULT, SEMVER_DEFAULT
from verspan.versioning.version import Version
from verspan.errors import UnknownSchemeError


@pytest.fixture
def versions():
    """Series of SemVer strings with a null."""
    return pl.Series("version", ["1.10.0", "1.2.0", None, "1.2.0-rc.1", "2.0.0+build.5"])


@pytest.fixture
def releases(versions):
    return pl.DataFrame({"package": ["a", "b", "c", "d", "e"], "version": versions})


class TestSortVersions:
    """Tests for sort_versions()."""

    def test_ascending_nulls_last(self, versions):
        result = sort_versions(versions, SEMVER_DEFAULT)
        assert result.name == "version"
        assert result.to_list() == ["1.2.0-rc.1", "1.2.0", "1.10.0", "2.0.0+build.5", None]

    def test_descending(self, versions):
        result = sort_versions(versions, SEMVER_DEFAULT, descending=True)
        assert result.to_list() == ["2.0.0+build.5", "1.10.0", "1.2.0", "1.2.0-rc.1", None]

    def test_scheme_code(self):
        result = sort_versions(pl.Series(["1.0", "1.0-SNAPSHOT"]), "maven-default")
        assert result.to_list() == ["1.0-SNAPSHOT", "1.0"]

    def test_unknown_scheme_code(self, versions):
        with pytest.raises(UnknownSchemeError):
            sort_versions(versions, "nope")

    def test_requires_strings(self):
        with pytest.raises(TypeError):
            sort_versions(pl.Series([1, 2]), MAVEN_DEFAULT)


class TestIntervalMask:
    """Tests for interval_mask() and filter_in_interval()."""

    def test_mask_keeps_nulls(self, versions):
        interval = VersionInterval.closed_open("1.2.0", "2.0.0", scheme=SEMVER_DEFAULT)
        mask = interval_mask(versions, interval)
        assert mask.dtype == pl.Boolean
        assert mask.to_list() == [True, True, None, False, False]

    def test_generic_interval_of_versions(self):
        interval = Interval.at_least(Version("1.2"))
        mask = interval_mask(pl.Series(["1.10", "1.1"]), interval)
        assert mask.to_list() == [True, False]

    def test_filter(self, releases):
        interval = VersionInterval.at_least("1.2.0", scheme=SEMVER_DEFAULT)
        result = filter_in_interval(releases, "version", interval)
        assert result["package"].to_list() == ["a", "b", "e"]

    def test_filter_lazy_frame(self, releases):
        interval = VersionInterval.less_than("1.2.0", scheme=SEMVER_DEFAULT)
        result = filter_in_interval(releases.lazy(), "version", interval)
        assert isinstance(result, pl.DataFrame)
        assert result["package"].to_list() == ["d"]


class TestMaxVersion:
    """Tests for max_version()."""

    def test_max(self, versions):
        assert max_version(versions, SEMVER_DEFAULT) == "2.0.0+build.5"

    def test_magnitude_not_text(self):
        assert max_version(pl.Series(["1.9", "1.10"]), MAVEN_DEFAULT) == "1.10"

    def test_empty(self):
        assert max_version(pl.Series("v", [None, None], dtype=pl.String), MAVEN_DEFAULT) is None
        assert max_version(pl.Series("v", [], dtype=pl.String), MAVEN_DEFAULT) is None
