"""
samplequantile.backends
=======================

Adapters that feed data from dataframe libraries into the estimator.
"""
