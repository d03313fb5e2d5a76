"""
Sample quantile estimation.

The estimator is split into the stages it runs through:

1. **sample**: copy, check and sort the input
2. **plotting**: turn a probability into a rank position (R6, R7, R8)
3. **interpolation**: resolve a rank position against the order statistics
4. **estimator**: the public entry points tying the stages together

Example:
--------
>>> from samplequantile.stats.estimator import estimate
>>> estimate([10, 30, 20], 0.5)
20.0
"""
