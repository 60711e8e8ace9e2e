"""
Number theory primitives for repeated primality and smallest prime
factor queries over a range known in advance.
"""

from .coprime import coprime_pairs
from .errors import (
    DomainError,
    NumberTheoryError,
    NumericCastError,
    OutOfRangeError,
    SieveOverflowError,
    WidthError,
)
from .factorization import EulerSieve
from .primes import Sieve, is_prime

__all__ = [
    'Sieve',
    'EulerSieve',
    'coprime_pairs',
    'is_prime',
    'NumberTheoryError',
    'OutOfRangeError',
    'DomainError',
    'SieveOverflowError',
    'NumericCastError',
    'WidthError',
]
