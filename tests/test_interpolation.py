"""
Tests for order-statistic interpolation.
"""

import pytest

from samplequantile.stats.interpolation import interpolate_order_statistics, split_rank

DATA = [10.0, 20.0, 40.0]


@pytest.mark.parametrize(
    "position, expected",
    [
        (1.0, 10.0),
        (1.5, 15.0),
        (2.0, 20.0),
        (2.25, 25.0),
        (2.999, 39.98),
    ],
)
def test_interior_ranks_interpolate(position, expected):
    assert interpolate_order_statistics(DATA, position) == pytest.approx(expected)


@pytest.mark.parametrize("position", [0.0, 0.5, 0.999])
def test_rank_below_one_gives_minimum(position):
    assert interpolate_order_statistics(DATA, position) == 10.0


@pytest.mark.parametrize("position", [3.0, 3.5, 100.0])
def test_rank_at_or_beyond_n_gives_maximum(position):
    assert interpolate_order_statistics(DATA, position) == 40.0


@pytest.mark.parametrize("position", [-0.001, -1.0, -7.5])
def test_negative_rank_gives_no_result(position):
    assert interpolate_order_statistics(DATA, position) is None


def test_split_rank():
    assert split_rank(3.0) == (3, 0.0)
    k, d = split_rank(2.75)
    assert k == 2 and d == pytest.approx(0.75)
