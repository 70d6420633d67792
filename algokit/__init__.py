"""Classic teaching algorithms and small numeric exercises.

Searching, sorting, primes, geometry, arithmetic, clock time, text, a
calculator, matrices and an ``algokit`` command line.
"""

__version__ = "0.1.0"