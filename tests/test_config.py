"""
Tests for configuration and method resolution.
"""

import pytest

from samplequantile.core.config import EstimatorConfig, resolve_method, resolve_policy
from samplequantile.core.errors import UnsupportedMethodError
from samplequantile.core.names import DEFAULT_METHOD, ProbabilityPolicy, QuantileMethod


def test_default_method_is_r7():
    assert DEFAULT_METHOD is QuantileMethod.R7
    assert EstimatorConfig().resolved_method is QuantileMethod.R7


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, QuantileMethod.R7),
        (1, QuantileMethod.R7),
        (5, QuantileMethod.R7),
        (6, QuantileMethod.R6),
        (7, QuantileMethod.R7),
        (8, QuantileMethod.R8),
        (8.0, QuantileMethod.R8),
        (QuantileMethod.R6, QuantileMethod.R6),
        (float("-inf"), QuantileMethod.R7),
    ],
)
def test_resolve_method(raw, expected):
    assert resolve_method(raw) is expected


@pytest.mark.parametrize("raw", [9, 100, 7.5, float("inf"), "R7", [7], False])
def test_resolve_method_rejects(raw):
    with pytest.raises(UnsupportedMethodError):
        resolve_method(raw)


def test_unsupported_method_message_lists_implemented_methods():
    with pytest.raises(UnsupportedMethodError, match="implemented: 6, 7, 8"):
        resolve_method(9)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("reject", ProbabilityPolicy.REJECT),
        ("CLAMP", ProbabilityPolicy.CLAMP),
        (ProbabilityPolicy.UNCHECKED, ProbabilityPolicy.UNCHECKED),
    ],
)
def test_resolve_policy(raw, expected):
    assert resolve_policy(raw) is expected


def test_resolve_policy_rejects_unknown():
    with pytest.raises(ValueError, match="Probability policy"):
        resolve_policy("lenient")


def test_with_method_keeps_policy():
    cfg = EstimatorConfig(method=6, probability_policy="clamp")
    assert cfg.with_method(None) is cfg
    other = cfg.with_method(8)
    assert other.resolved_method is QuantileMethod.R8
    assert other.policy is ProbabilityPolicy.CLAMP


def test_method_labels():
    assert [m.label for m in QuantileMethod] == ["weibull", "linear", "median-unbiased"]


def test_names_module_exports_only_used_types():
    from samplequantile.core import names

    assert not hasattr(names, "ClampedTag")
    assert not hasattr(names, "InterpolatedTag")
