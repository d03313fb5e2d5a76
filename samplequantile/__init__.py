"""
samplequantile — percentile estimation from unordered numeric samples.

Statistical packages disagree on how a sample percentile should be computed.
Hyndman & Fan (1996) catalogued nine definitions; they differ only in how a
probability is mapped to a (fractional) rank in the ordered sample and in how
the ends of the sample are treated. samplequantile implements three of them:

- R6: the Weibull plotting position, ``p (N + 1)``
- R7: ``1 + p (N - 1)``, the default of Excel and R, and of this package
- R8: an approximately median-unbiased position with explicit boundaries

Every call copies and sorts the sample, computes a rank position, and
interpolates linearly between the neighbouring order statistics.

Example
-------
>>> import samplequantile
>>> samplequantile.percentile([3, 1, 4, 1, 5], 0.5)
3.0
>>> samplequantile.percentile([3, 1, 4, 1, 5], 0.5, method=6)
3.0
"""

import logging

from samplequantile.__version__ import __version__
from samplequantile.api import PERCENTILE_DOC, percentile
from samplequantile.core.config import EstimatorConfig
from samplequantile.core.errors import (
    InvalidInputError,
    InvalidProbabilityError,
    QuantileError,
    UnsupportedMethodError,
)
from samplequantile.core.names import ProbabilityPolicy, QuantileMethod
from samplequantile.stats.estimator import QuantileEstimator, estimate

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "estimate",
    "percentile",
    "PERCENTILE_DOC",
    "EstimatorConfig",
    "QuantileEstimator",
    "QuantileMethod",
    "ProbabilityPolicy",
    "QuantileError",
    "InvalidInputError",
    "InvalidProbabilityError",
    "UnsupportedMethodError",
]
