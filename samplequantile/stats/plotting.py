"""
samplequantile.stats.plotting
=============================

Rank-position (plotting position) formulas for the R6, R7 and R8 sample
quantile definitions of Hyndman & Fan (1996).

A formula produces one of two results:

- `RankPosition`: a 1-based, possibly fractional rank into the ordered sample,
  to be resolved by interpolation
- `ClampedValue`: an endpoint of the sample, already final (R8 only, for
  probabilities at or beyond its boundary thresholds)

Let N be the sample size.

=====  =====================================  ===========================
Method Rank position                          Boundaries
=====  =====================================  ===========================
R6     p (N + 1)                              none
R7     1 + p (N - 1)                          none
R8     p (N + 1/3 + 1/3)                      p <= (2/3)/(N + 1/3) -> min,
                                              p >= (N - 1/3)/(N + 1/3) -> max
=====  =====================================  ===========================

Examples
--------
>>> from samplequantile.core.names import QuantileMethod
>>> data = [1.0, 2.0, 3.0, 4.0]
>>> plotting_position(data, 0.5, QuantileMethod.R7)
RankPosition(position=2.5)
>>> plotting_position(data, 0.5, QuantileMethod.R6)
RankPosition(position=2.5)
>>> plotting_position(data, 0.1, QuantileMethod.R8)
ClampedValue(value=1.0)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from samplequantile.core.names import QuantileMethod

ONE_THIRD = 1.0 / 3.0
TWO_THIRDS = 2.0 / 3.0


@dataclass(frozen=True)
class RankPosition:
    """A 1-based fractional rank into the ordered sample."""

    position: float


@dataclass(frozen=True)
class ClampedValue:
    """An endpoint of the ordered sample returned without interpolation."""

    value: float


PlottingResult = Union[RankPosition, ClampedValue]


def r8_thresholds(n: int) -> Tuple[float, float]:
    """Return the (low, high) probability thresholds of R8 for a sample of size ``n``.

    >>> low, high = r8_thresholds(3)
    >>> round(low, 4), round(high, 4)
    (0.2, 0.8)
    """
    low = TWO_THIRDS / (n + ONE_THIRD)
    high = (n - ONE_THIRD) / (n + ONE_THIRD)
    return low, high


def plotting_position(
    ordered: Sequence[float], p: float, method: QuantileMethod
) -> PlottingResult:
    """
    Compute the rank position of probability ``p`` in an ordered sample.

    Args:
        ordered: Ascending, non-empty sample
        p: Target probability
        method: Estimator to apply

    Returns:
        `RankPosition` for interpolation, or `ClampedValue` for the R8 boundaries
    """
    n = len(ordered)

    if method is QuantileMethod.R6:
        return RankPosition(p * (n + 1))
    if method is QuantileMethod.R7:
        return RankPosition(1 + p * (n - 1))

    low, high = r8_thresholds(n)
    if p <= low:
        return ClampedValue(ordered[0])
    if p >= high:
        return ClampedValue(ordered[n - 1])
    return RankPosition(p * (n + ONE_THIRD + ONE_THIRD))
