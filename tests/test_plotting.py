"""
Tests for rank-position formulas.
"""

import pytest

from samplequantile.core.names import QuantileMethod
from samplequantile.stats.plotting import (
    ClampedValue,
    RankPosition,
    plotting_position,
    r8_thresholds,
)

DATA = [1.0, 2.0, 3.0, 4.0, 5.0]


def test_r6_position():
    assert plotting_position(DATA, 0.5, QuantileMethod.R6) == RankPosition(3.0)
    assert plotting_position(DATA, 0.0, QuantileMethod.R6) == RankPosition(0.0)


def test_r7_position():
    assert plotting_position(DATA, 0.0, QuantileMethod.R7) == RankPosition(1.0)
    assert plotting_position(DATA, 1.0, QuantileMethod.R7) == RankPosition(5.0)
    assert plotting_position(DATA, 0.25, QuantileMethod.R7) == RankPosition(2.0)


def test_r8_interior_position():
    result = plotting_position(DATA, 0.5, QuantileMethod.R8)
    assert isinstance(result, RankPosition)
    assert result.position == pytest.approx(0.5 * (5 + 2 / 3))


def test_r8_boundaries_return_endpoint_values():
    low, high = r8_thresholds(len(DATA))
    assert plotting_position(DATA, low / 2, QuantileMethod.R8) == ClampedValue(1.0)
    assert plotting_position(DATA, high, QuantileMethod.R8) == ClampedValue(5.0)
    assert plotting_position(DATA, 1.0, QuantileMethod.R8) == ClampedValue(5.0)


@pytest.mark.parametrize("n", [1, 2, 3, 10, 100])
def test_r8_thresholds(n):
    low, high = r8_thresholds(n)
    assert low == pytest.approx((2 / 3) / (n + 1 / 3))
    assert high == pytest.approx((n - 1 / 3) / (n + 1 / 3))


def test_r8_single_element_is_always_clamped():
    for p in (0.0, 0.3, 0.5, 0.7, 1.0):
        assert plotting_position([42.0], p, QuantileMethod.R8) == ClampedValue(42.0)
