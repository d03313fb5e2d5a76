"""
samplequantile.backends.polars
==============================

Polars adapters for the estimator.

>>> import polars as pl
>>> from samplequantile.backends.polars import series_percentile
>>> series_percentile(pl.Series([1, 2, 3]), 1.0)
3.0
"""

from __future__ import annotations

from samplequantile.backends.polars.series import column_percentile, series_percentile

__all__ = ["series_percentile", "column_percentile"]
