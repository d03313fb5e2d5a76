"""
samplequantile.core.config
==========================

Estimator configuration and method resolution.

A raw method selector is mapped onto `QuantileMethod` explicitly: a missing
selector or any value below 6 means R7, the values 6, 7 and 8 select their
estimator, and everything else is rejected.

Examples
--------
>>> from samplequantile.core.config import EstimatorConfig, resolve_method
>>> resolve_method(None), resolve_method(3), resolve_method(8)
(<QuantileMethod.R7: 7>, <QuantileMethod.R7: 7>, <QuantileMethod.R8: 8>)
>>> resolve_method(9)
Traceback (most recent call last):
...
samplequantile.core.errors.UnsupportedMethodError: Unsupported quantile method: 9 (implemented: 6, 7, 8)
>>> cfg = EstimatorConfig(method=6, probability_policy="clamp")
>>> cfg.validate()
>>> cfg.resolved_method, cfg.policy
(<QuantileMethod.R6: 6>, <ProbabilityPolicy.CLAMP: 'clamp'>)
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Optional, Union

from samplequantile.core.errors import UnsupportedMethodError
from samplequantile.core.names import DEFAULT_METHOD, ProbabilityPolicy, QuantileMethod

MethodLike = Union[QuantileMethod, int, float, None]
PolicyLike = Union[ProbabilityPolicy, str]


def resolve_method(method: Any) -> QuantileMethod:
    """Map a raw method selector onto an implemented estimator.

    Args:
        method: ``None``, a `QuantileMethod`, or a real number

    Returns:
        The selected `QuantileMethod`

    Raises:
        UnsupportedMethodError: for non-numeric selectors and for values of 6
            or more that are not exactly 6, 7 or 8
    """
    if method is None:
        return DEFAULT_METHOD
    if isinstance(method, QuantileMethod):
        return method
    if isinstance(method, bool) or not isinstance(method, Real) or math.isnan(method):
        raise UnsupportedMethodError(f"Unsupported quantile method: {method!r}")

    if method < 6:
        return DEFAULT_METHOD
    if math.isfinite(method) and method == int(method):
        if int(method) in {m.value for m in QuantileMethod}:
            return QuantileMethod(int(method))

    implemented = ", ".join(str(m.value) for m in QuantileMethod)
    raise UnsupportedMethodError(
        f"Unsupported quantile method: {method!r} (implemented: {implemented})"
    )


def resolve_policy(policy: PolicyLike) -> ProbabilityPolicy:
    """Map a policy name or enum member onto `ProbabilityPolicy`."""
    if isinstance(policy, ProbabilityPolicy):
        return policy
    try:
        return ProbabilityPolicy(str(policy).lower())
    except ValueError:
        choices = ", ".join(p.value for p in ProbabilityPolicy)
        raise ValueError(
            f"Probability policy must be one of {choices}, got {policy!r}"
        ) from None


@dataclass(frozen=True)
class EstimatorConfig:
    """
    Configuration for quantile estimation.

    Attributes
    ----------
    method : int or QuantileMethod, optional
        Estimator selector; ``None`` or values below 6 mean R7.
    probability_policy : ProbabilityPolicy or str, default="reject"
        Treatment of probabilities outside ``[0, 1]``.

    Examples
    --------
    >>> EstimatorConfig().resolved_method
    <QuantileMethod.R7: 7>
    >>> EstimatorConfig(probability_policy="sometimes").validate()
    Traceback (most recent call last):
    ...
    ValueError: Probability policy must be one of reject, clamp, unchecked, got 'sometimes'
    """

    method: MethodLike = DEFAULT_METHOD
    probability_policy: PolicyLike = ProbabilityPolicy.REJECT

    def validate(self) -> None:
        """Validate the configuration, raising a `ValueError` subclass."""
        resolve_method(self.method)
        resolve_policy(self.probability_policy)

    @property
    def resolved_method(self) -> QuantileMethod:
        return resolve_method(self.method)

    @property
    def policy(self) -> ProbabilityPolicy:
        return resolve_policy(self.probability_policy)

    def with_method(self, method: Optional[MethodLike]) -> "EstimatorConfig":
        """Return a copy using ``method``; ``None`` keeps the configured one."""
        if method is None:
            return self
        return EstimatorConfig(method=method, probability_policy=self.probability_policy)
