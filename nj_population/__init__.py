"""
New Jersey Historical Population Estimator

Finds the recorded population of New Jersey for census decades between
1790 and 2010, and linearly interpolates it for the years in between.
"""

__version__ = "1.0.0"
