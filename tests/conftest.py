"""
Pytest configuration for samplequantile tests.
"""

import pytest


WORKED_SAMPLE = [
    95.1772, 95.1567, 95.1937, 95.1959, 95.1442, 95.061,
    95.1591, 95.1195, 95.1065, 95.0925, 95.199, 95.1682,
]


@pytest.fixture
def worked_sample():
    """The twelve measurements used in the documented example."""
    return list(WORKED_SAMPLE)


@pytest.fixture
def small_sample():
    return [7.0, 1.0, 4.0, 10.0, 2.5]
