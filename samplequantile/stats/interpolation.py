"""
samplequantile.stats.interpolation
==================================

Linear interpolation between adjacent order statistics.

>>> interpolate_order_statistics([10.0, 20.0, 30.0], 1.25)
12.5
>>> interpolate_order_statistics([10.0, 20.0, 30.0], 0.4)
10.0
>>> interpolate_order_statistics([10.0, 20.0, 30.0], 7.0)
30.0
>>> interpolate_order_statistics([10.0, 20.0, 30.0], -1.5) is None
True
"""

from __future__ import annotations
import math
from typing import Optional, Sequence, Tuple


def split_rank(position: float) -> Tuple[int, float]:
    """Split a rank position into its integer part ``k`` and fraction ``d``.

    ``k`` is the floor of the position, so ``d`` is always in ``[0, 1)``.

    >>> split_rank(6.5)
    (6, 0.5)
    >>> split_rank(-0.25)
    (-1, 0.75)
    """
    k = math.floor(position)
    return k, position - k


def interpolate_order_statistics(
    ordered: Sequence[float], position: float
) -> Optional[float]:
    """
    Resolve a 1-based fractional rank against an ordered sample.

    Args:
        ordered: Ascending, non-empty sample
        position: Rank position produced by a plotting-position formula

    Returns:
        The interpolated value, an endpoint when the rank falls on or beyond
        the ends of the sample, or ``None`` when the rank is negative

    Note:
        With ``k, d = split_rank(position)`` and N the sample size:
        ``0 < k < N`` interpolates between the k-th and (k+1)-th order
        statistics, ``k == 0`` gives the minimum, ``k >= N`` the maximum.
    """
    n = len(ordered)
    k, d = split_rank(position)

    if 0 < k < n:
        lower = ordered[k - 1]
        return lower + d * (ordered[k] - lower)
    if k == 0:
        return ordered[0]
    if k >= n:
        return ordered[n - 1]
    return None
