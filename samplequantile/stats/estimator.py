"""
samplequantile.stats.estimator
==============================

Percentile estimation from an unordered numeric sample.

The estimate is computed in three steps:

1. the sample is copied and sorted (`samplequantile.stats.sample`)
2. the probability is converted to a rank position, or directly to an
   endpoint for R8's boundary region (`samplequantile.stats.plotting`)
3. rank positions are resolved by interpolating between adjacent order
   statistics (`samplequantile.stats.interpolation`)

R7 is the default and matches the convention of Excel and R.

Examples
--------
>>> from samplequantile.stats.estimator import estimate, percentile
>>> data = [95.1772, 95.1567, 95.1937, 95.1959, 95.1442, 95.061,
...         95.1591, 95.1195, 95.1065, 95.0925, 95.199, 95.1682]
>>> round(percentile(data, 0.5), 4)
95.1579
>>> estimate([1, 2, 3, 4], 0.25, 6)
1.25
>>> estimate([1, 2, 3], 0.1, 8)
1.0
>>> estimate([5], 0.9)
5.0
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Iterable, Optional

from samplequantile.core.config import EstimatorConfig, MethodLike
from samplequantile.core.errors import InvalidProbabilityError
from samplequantile.core.names import ProbabilityPolicy, QuantileMethod
from samplequantile.stats.interpolation import interpolate_order_statistics
from samplequantile.stats.plotting import ClampedValue, plotting_position
from samplequantile.stats.sample import sorted_sample

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = EstimatorConfig()


def check_probability(p: object, policy: ProbabilityPolicy) -> float:
    """
    Apply the probability policy to ``p``.

    Args:
        p: Target probability
        policy: Treatment of values outside ``[0, 1]``

    Returns:
        The probability to use as a float

    Raises:
        InvalidProbabilityError: if ``p`` is not a real number or is NaN; if it
            lies outside ``[0, 1]`` under REJECT; if it is infinite under UNCHECKED

    Examples:
        >>> check_probability(1.5, ProbabilityPolicy.CLAMP)
        1.0
        >>> check_probability(-0.5, ProbabilityPolicy.UNCHECKED)
        -0.5
        >>> check_probability(1.5, ProbabilityPolicy.REJECT)
        Traceback (most recent call last):
        ...
        samplequantile.core.errors.InvalidProbabilityError: Probability must be in [0, 1], got 1.5
    """
    if isinstance(p, bool) or not isinstance(p, Real):
        raise InvalidProbabilityError(f"Probability must be a real number, got {p!r}")
    try:
        value = float(p)
    except OverflowError:
        # too large for a float; treated like an infinity of the same sign
        value = math.inf if p > 0 else -math.inf
    if math.isnan(value):
        raise InvalidProbabilityError("Probability must not be NaN")

    if policy is ProbabilityPolicy.CLAMP:
        return min(max(value, 0.0), 1.0)
    if policy is ProbabilityPolicy.UNCHECKED:
        if math.isinf(value):
            raise InvalidProbabilityError(f"Probability must be finite, got {value}")
        return value
    if not 0.0 <= value <= 1.0:
        raise InvalidProbabilityError(f"Probability must be in [0, 1], got {p}")
    return value


def estimate(
    sample: Iterable[object],
    p: float,
    method: MethodLike = None,
    *,
    config: Optional[EstimatorConfig] = None,
) -> Optional[float]:
    """
    Estimate the ``p``-th quantile of ``sample``.

    Args:
        sample: Non-empty collection of real numbers, in any order
        p: Target probability, conventionally in ``[0, 1]``
        method: 6, 7 or 8; ``None`` or any value below 6 selects 7.
            When given, overrides the method in ``config``.
        config: Estimator configuration (default: R7, reject out-of-range ``p``)

    Returns:
        The estimate, or ``None`` when the rank position is negative. That can
        only happen with ``p < 0`` under the UNCHECKED probability policy.

    Raises:
        InvalidInputError: empty sample; non-numeric, NaN, infinite or
            float-overflowing elements
        InvalidProbabilityError: see `check_probability`
        UnsupportedMethodError: method selector other than None, <6, 6, 7, 8
    """
    cfg = (config or DEFAULT_CONFIG).with_method(method)
    resolved = cfg.resolved_method
    prob = check_probability(p, cfg.policy)
    ordered = sorted_sample(sample)

    result = plotting_position(ordered, prob, resolved)
    if isinstance(result, ClampedValue):
        logger.debug(
            "R%d p=%s n=%d: clamped to endpoint %s",
            resolved, prob, len(ordered), result.value,
        )
        return result.value

    value = interpolate_order_statistics(ordered, result.position)
    if value is None:
        logger.warning(
            "R%d p=%s n=%d: rank position %s is negative; no estimate",
            resolved, prob, len(ordered), result.position,
        )
    else:
        logger.debug(
            "R%d p=%s n=%d: rank position %s -> %s",
            resolved, prob, len(ordered), result.position, value,
        )
    return value


def percentile(
    source_list: Iterable[object], p: float, method: MethodLike = None
) -> Optional[float]:
    """Estimate a value such that at most ``100 * p`` percent of the sample lies below it.

    Same as `estimate` with the default configuration.
    """
    return estimate(source_list, p, method)


@dataclass
class QuantileEstimator:
    """
    A configured, reusable estimator.

    Attributes
    ----------
    config : EstimatorConfig
        Method and probability policy; validated on construction.

    Examples
    --------
    >>> est = QuantileEstimator(EstimatorConfig(method=8, probability_policy="clamp"))
    >>> est([3, 1, 2], 2.0)
    3.0
    >>> est.method
    <QuantileMethod.R8: 8>
    """

    config: EstimatorConfig = field(default_factory=EstimatorConfig)

    def __post_init__(self) -> None:
        self.config.validate()

    @property
    def method(self) -> QuantileMethod:
        return self.config.resolved_method

    def __call__(self, sample: Iterable[object], p: float) -> Optional[float]:
        return estimate(sample, p, config=self.config)
