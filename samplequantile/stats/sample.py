"""
samplequantile.stats.sample
===========================

Input normalization for the estimator: every sample is copied into a list of
floats, checked, and sorted ascending. The caller's sequence is never touched.

Examples
--------
>>> from samplequantile.stats.sample import sorted_sample
>>> data = [3, 1.5, 2]
>>> sorted_sample(data)
[1.5, 2.0, 3.0]
>>> data
[3, 1.5, 2]
>>> sorted_sample([])
Traceback (most recent call last):
...
samplequantile.core.errors.InvalidInputError: Sample must contain at least one value
"""

from __future__ import annotations
import math
from numbers import Real
from typing import Iterable, List

from samplequantile.core.errors import InvalidInputError


def _as_float(value: object, position: int) -> float:
    # bool is an int subclass but has no meaningful order as a measurement
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(
            f"Sample element at position {position} is not a real number: {value!r}"
        )
    try:
        x = float(value)
    except OverflowError:
        raise InvalidInputError(
            f"Sample element at position {position} is too large for a float"
        ) from None
    if math.isnan(x):
        raise InvalidInputError(f"Sample element at position {position} is NaN")
    # inf - inf and 0 * inf make interpolation undefined
    if math.isinf(x):
        raise InvalidInputError(
            f"Sample element at position {position} is not finite: {x}"
        )
    return x


def sorted_sample(sample: Iterable[object]) -> List[float]:
    """Return an ascending copy of ``sample`` as floats.

    Args:
        sample: Any finite iterable of real numbers

    Returns:
        A new, sorted list

    Raises:
        InvalidInputError: if the sample is empty, or an element is not a real
            number, is NaN or infinite, or does not fit in a float
    """
    if isinstance(sample, (str, bytes)):
        raise InvalidInputError("Sample must be a collection of numbers, not a string")
    try:
        values = [_as_float(v, i) for i, v in enumerate(sample)]
    except TypeError:
        raise InvalidInputError(
            f"Sample must be an iterable of numbers, got {type(sample).__name__}"
        ) from None

    if not values:
        raise InvalidInputError("Sample must contain at least one value")

    values.sort()
    return values
