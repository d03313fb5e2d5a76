"""
samplequantile.core.names
=========================

Typed names shared across the package.

- `QuantileMethod`: an IntEnum for the implemented Hyndman & Fan estimators.
- `ProbabilityPolicy`: an Enum describing how out-of-range probabilities are treated.
- `DEFAULT_METHOD`: the estimator used when no method is given.

Examples
--------
>>> from samplequantile.core.names import QuantileMethod, ProbabilityPolicy
>>> int(QuantileMethod.R7)
7
>>> ProbabilityPolicy.CLAMP.value
'clamp'
>>> QuantileMethod.R8.label
'median-unbiased'
"""

from __future__ import annotations
from enum import Enum, IntEnum


class QuantileMethod(IntEnum):
    """Implemented sample quantile definitions (Hyndman & Fan, 1996).

    - R6: Weibull plotting position, ``p * (N + 1)``
    - R7: linear interpolation of the modes, ``1 + p * (N - 1)``
    - R8: approximately median-unbiased, with boundary short-circuits
    """

    R6 = 6
    R7 = 7
    R8 = 8

    @property
    def label(self) -> str:
        return _METHOD_LABELS[self]


_METHOD_LABELS = {
    QuantileMethod.R6: "weibull",
    QuantileMethod.R7: "linear",
    QuantileMethod.R8: "median-unbiased",
}

DEFAULT_METHOD = QuantileMethod.R7


class ProbabilityPolicy(str, Enum):
    """How probabilities outside ``[0, 1]`` are handled.

    - REJECT: raise `InvalidProbabilityError`
    - CLAMP: clamp into ``[0, 1]``
    - UNCHECKED: use the value as given; rank positions below zero yield no result
    """

    REJECT = "reject"
    CLAMP = "clamp"
    UNCHECKED = "unchecked"
