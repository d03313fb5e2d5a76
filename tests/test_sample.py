"""
Tests for sample normalization.
"""

from fractions import Fraction

import pytest

from samplequantile.core.errors import InvalidInputError
from samplequantile.stats.sample import sorted_sample


def test_returns_sorted_float_copy():
    data = [3, 1, 2]
    result = sorted_sample(data)
    assert result == [1.0, 2.0, 3.0]
    assert all(isinstance(v, float) for v in result)
    assert result is not data
    assert data == [3, 1, 2]


def test_accepts_fractions():
    assert sorted_sample([Fraction(1, 2), 3, -1]) == [-1.0, 0.5, 3.0]


@pytest.mark.parametrize("bad", [float("inf"), float("-inf")])
def test_infinite_values_are_rejected(bad):
    with pytest.raises(InvalidInputError, match="not finite"):
        sorted_sample([bad, 0.0, 1.0])


@pytest.mark.parametrize("huge", [10**400, -(10**400), Fraction(10**400, 3)])
def test_values_too_large_for_float_are_rejected(huge):
    with pytest.raises(InvalidInputError, match="too large"):
        sorted_sample([1, huge])


def test_error_names_the_offending_position():
    with pytest.raises(InvalidInputError, match="position 2"):
        sorted_sample([1.0, 2.0, "x"])


def test_nan_is_rejected():
    with pytest.raises(InvalidInputError, match="NaN"):
        sorted_sample([1.0, float("nan")])


def test_empty_is_rejected():
    with pytest.raises(InvalidInputError, match="at least one"):
        sorted_sample(iter(()))
