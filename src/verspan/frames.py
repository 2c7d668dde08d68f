"""Polars helpers for columns of version strings.

Polars has no notion of version precedence, so these helpers evaluate the
scheme in Python over the column values and hand the result back as a
Series. Nulls are preserved: they sort last and stay null in masks.

Example:
    >>> import polars as pl
    >>> from verspan import SEMVER_DEFAULT, VersionInterval
    >>> df = pl.DataFrame({"version": ["1.0.0", "2.1.0", "1.5.0-rc.1", None]})
    >>> interval = VersionInterval.closed_open("1.0.0", "2.0.0", scheme=SEMVER_DEFAULT)
    >>> filter_in_interval(df, "version", interval)["version"].to_list()
    ['1.0.0', '1.5.0-rc.1']
"""

from __future__ import annotations

import logging

import polars as pl

from verspan.interval.interval import Interval
from verspan.versioning.compare import version_sort_key
from verspan.versioning.interval import VersionInterval
from verspan.versioning.registry import coerce_scheme
from verspan.versioning.schemes import VersionScheme
from verspan.versioning.version import Version

logger = logging.getLogger(__name__)


def _require_strings(series: pl.Series) -> None:
    if series.dtype not in (pl.String, pl.Null):
        raise TypeError(f"Column {series.name!r} must hold strings, got {series.dtype}")


def _parse(value: str, interval: Interval[Version]) -> Version:
    if isinstance(interval, VersionInterval):
        return interval.scheme.parse(value)
    return Version(value.strip())


def sort_versions(
    series: pl.Series,
    scheme: VersionScheme | str,
    descending: bool = False,
) -> pl.Series:
    """Sort a string Series by version precedence.

    Args:
        series: Series of version strings.
        scheme: Scheme or scheme code.
        descending: Highest version first.

    Returns:
        Sorted Series with the same name; nulls last.
    """
    _require_strings(series)
    resolved = coerce_scheme(scheme)
    key = version_sort_key(resolved)

    values = series.to_list()
    present = [value for value in values if value is not None]
    missing = len(values) - len(present)

    ordered = sorted(present, key=lambda text: key(resolved.parse(text)), reverse=descending)
    return pl.Series(series.name, ordered + [None] * missing, dtype=pl.String)


def interval_mask(series: pl.Series, interval: Interval[Version]) -> pl.Series:
    """Boolean mask of the values lying inside an interval.

    Null values give null mask entries.
    """
    _require_strings(series)
    mask = [
        None if value is None else interval.contains(_parse(value, interval))
        for value in series.to_list()
    ]
    return pl.Series(series.name, mask, dtype=pl.Boolean)


def filter_in_interval(
    frame: pl.DataFrame | pl.LazyFrame,
    column: str,
    interval: Interval[Version],
) -> pl.DataFrame:
    """Keep the rows whose version column lies inside an interval.

    Rows with a null version are dropped.
    """
    df = frame.collect() if isinstance(frame, pl.LazyFrame) else frame
    mask = interval_mask(df.get_column(column), interval).fill_null(False)

    result = df.filter(mask)
    logger.debug(f"Kept {len(result)} of {len(df)} rows in {interval}")
    return result


def max_version(series: pl.Series, scheme: VersionScheme | str) -> str | None:
    """Highest version in a Series, or None if it holds no values."""
    _require_strings(series)
    resolved = coerce_scheme(scheme)
    key = version_sort_key(resolved)

    present = [value for value in series.to_list() if value is not None]
    if not present:
        return None
    return max(present, key=lambda text: key(resolved.parse(text)))
