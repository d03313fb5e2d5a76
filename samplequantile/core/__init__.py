"""
samplequantile.core
===================

Names, configuration, errors and the function registry shared by the
estimator and its adapters.
"""
