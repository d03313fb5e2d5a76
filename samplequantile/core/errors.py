"""
samplequantile.core.errors
==========================

Exceptions raised by the estimator. All derive from `ValueError`, so callers
may catch either the specific class or the builtin.

>>> from samplequantile.core.errors import InvalidInputError, QuantileError
>>> issubclass(InvalidInputError, QuantileError) and issubclass(InvalidInputError, ValueError)
True
"""

from __future__ import annotations


class QuantileError(ValueError):
    """Base class for estimator errors."""


class InvalidInputError(QuantileError):
    """The sample is empty or contains values that cannot be ordered."""


class InvalidProbabilityError(QuantileError):
    """The probability is NaN or lies outside ``[0, 1]`` under the reject policy."""


class UnsupportedMethodError(QuantileError):
    """The method selector does not map to an implemented estimator."""
