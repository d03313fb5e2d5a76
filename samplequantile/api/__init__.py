"""
samplequantile.api - Registered Functions
=========================================

The public, documented surface of the package. Importing this module
registers `percentile` in the `FunctionRegistry` as ``List.Percentile``
together with its description and worked example.

Examples
--------
>>> from samplequantile.api import percentile, PERCENTILE_DOC
>>> from samplequantile.core.registry import FunctionRegistry
>>> FunctionRegistry.get("List.Percentile") is percentile
True
>>> PERCENTILE_DOC.category
'List'
>>> PERCENTILE_DOC.check_examples(percentile)
[]
"""

from __future__ import annotations

from samplequantile.core.registry import FunctionDoc, FunctionExample, FunctionRegistry
from samplequantile.stats.estimator import percentile

WORKED_SAMPLE = (
    95.1772, 95.1567, 95.1937, 95.1959, 95.1442, 95.061,
    95.1591, 95.1195, 95.1065, 95.0925, 95.199, 95.1682,
)

PERCENTILE_DOC = FunctionDoc(
    name="List.Percentile",
    description=(
        "Estimate a proportion of the data that falls above and below a given value."
    ),
    long_description=(
        "Estimate a proportion of data above and below a percentage. The source_list "
        "is the source list for the method. The percentile, p, denotes a value such "
        "that at most (100 * p)% of the measurements are less than this value and at "
        "most 100(1 - p)% are greater. The optional parameter, method, selects one of "
        "the quantile algorithms detailed in Hyndman and Fan (1996). Only methods 6, "
        "7 and 8 are implemented; a missing method or any value below 6 uses method 7, "
        "the default of Excel and R."
    ),
    category="List",
    examples=(
        FunctionExample(
            description=(
                "Calculate the 50th percentile (50%) value from an ordered list of values."
            ),
            args=(list(WORKED_SAMPLE), 0.5),
            kwargs={},
            result=95.1579,
        ),
    ),
)

FunctionRegistry.register(percentile, PERCENTILE_DOC)

__all__ = ["percentile", "PERCENTILE_DOC"]
