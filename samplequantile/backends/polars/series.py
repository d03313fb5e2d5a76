"""
samplequantile.backends.polars.series
=====================================

Percentile estimation over Polars data.

This module contains no estimator logic; it checks that the column holds
numeric, non-null data and hands the values to `estimate`.

Examples
--------
>>> import polars as pl
>>> from samplequantile.backends.polars.series import series_percentile, column_percentile
>>> s = pl.Series("latency", [4.0, 1.0, 3.0, 2.0])
>>> series_percentile(s, 0.5)
2.5
>>> df = pl.DataFrame({"latency": [4.0, 1.0, 3.0, 2.0]})
>>> column_percentile(df, "latency", 0.25, method=6)
1.25
"""

from __future__ import annotations
from typing import Optional

import polars as pl

from samplequantile.core.config import EstimatorConfig, MethodLike
from samplequantile.core.errors import InvalidInputError
from samplequantile.stats.estimator import estimate


def series_percentile(
    series: pl.Series,
    p: float,
    method: MethodLike = None,
    *,
    config: Optional[EstimatorConfig] = None,
) -> Optional[float]:
    """
    Estimate the ``p``-th quantile of a numeric Polars Series.

    Decimal series are cast to Float64 first.

    Raises:
        InvalidInputError: if the series is not numeric or contains nulls
    """
    if series.dtype == pl.Decimal:
        series = series.cast(pl.Float64)
    if not series.dtype.is_numeric():
        raise InvalidInputError(
            f"Series {series.name!r} has non-numeric dtype {series.dtype}"
        )
    if series.null_count() > 0:
        raise InvalidInputError(
            f"Series {series.name!r} contains {series.null_count()} null value(s)"
        )
    return estimate(series.to_list(), p, method, config=config)


def column_percentile(
    df: pl.DataFrame,
    column: str,
    p: float,
    method: MethodLike = None,
    *,
    config: Optional[EstimatorConfig] = None,
) -> Optional[float]:
    """Estimate the ``p``-th quantile of one column of a Polars DataFrame."""
    if column not in df.columns:
        raise KeyError(f"Column {column!r} not found; available: {df.columns}")
    return series_percentile(df.get_column(column), p, method, config=config)
