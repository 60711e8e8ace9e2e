"""
Prime generation utilities.

Responsibility: primality only. The bit-packed Eratosthenes sieve and a
small trial-division test. No factorization.
"""

import operator
from math import isqrt

import numpy as np

from .errors import NumericCastError, OutOfRangeError, WidthError
from .numeric import integer_dtype, sieve_limit

# Widest integer type accepted by the trial-division is_prime.
BOUNDED_BITS = 16


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses Sieve of Eratosthenes.

    Parameters
    ----------
    N : int
        Upper bound (inclusive), N >= 0. NumericCastError otherwise.

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    N = sieve_limit(N)
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, isqrt(N) + 1):
        if flags[p]:
            # smaller multiples were struck by smaller primes
            flags[p*p::p] = False
    return flags


def primes_upto(N: int) -> np.ndarray:
    """
    Return array of all primes <= N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Array of primes in ascending order.
    """
    flags = prime_flags_upto(N)
    return np.nonzero(flags)[0]


class Sieve:
    """
    Sieve of Eratosthenes over [0, limit].

    Answers primality queries in O(1) for every number up to the
    (inclusive) limit. Flags are stored bit-packed, one bit per number.

    Parameters
    ----------
    limit : int
        Largest number (inclusive) the sieve answers for.
    dtype : dtype-like
        Integer type of the numbers handled by the sieve. The limit must
        be representable in it.

    Raises
    ------
    NumericCastError
        If limit is negative or does not fit dtype.
    """

    def __init__(self, limit, dtype=np.int64):
        self._dtype = integer_dtype(dtype)
        self._limit = sieve_limit(limit, self._dtype)
        flags = prime_flags_upto(self._limit)
        self._bits = np.packbits(flags, bitorder='little')
        self._bits.setflags(write=False)

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def get_limit(self):
        """Return the maximum number (inclusive) the sieve holds."""
        return self._dtype.type(self._limit)

    def is_prime(self, number) -> bool:
        """
        Return whether number is prime.

        Negative numbers are never prime.

        Raises
        ------
        OutOfRangeError
            If number exceeds the limit of the sieve.
        """
        n = operator.index(number)
        if n < 0:
            return False
        if n > self._limit:
            raise OutOfRangeError(
                f"{n} exceeds the limit of Sieve ({self._limit})"
            )
        return bool((self._bits[n >> 3] >> (n & 7)) & 1)

    def __contains__(self, number) -> bool:
        n = operator.index(number)
        return 0 <= n <= self._limit and self.is_prime(n)

    def __len__(self) -> int:
        return self._limit + 1

    def copy(self) -> 'Sieve':
        """Return an independent sieve with its own storage."""
        return self.__copy__()

    def __copy__(self) -> 'Sieve':
        other = self.__class__.__new__(self.__class__)
        other._dtype = self._dtype
        other._limit = self._limit
        other._bits = self._bits.copy()
        other._bits.setflags(write=False)
        return other

    def __deepcopy__(self, memo) -> 'Sieve':
        return self.__copy__()

    def __repr__(self) -> str:
        return f"Sieve(limit={self._limit}, dtype={self._dtype.name})"


def is_prime(number) -> bool:
    """
    Test whether number is prime by trial division.

    Only for numbers of at most 16 bits: it is O(sqrt(n)) per call. Use
    Sieve or EulerSieve for anything larger.

    Parameters
    ----------
    number : int or np.integer
        Number to test. numpy scalars must have a dtype of at most 16
        bits; Python ints must lie in [-2**15, 2**16).

    Returns
    -------
    bool
        True iff number is prime.

    Raises
    ------
    WidthError
        If number is a numpy scalar wider than 16 bits.
    NumericCastError
        If number is a Python int outside the 16-bit range.
    """
    if isinstance(number, np.integer):
        if np.iinfo(number.dtype).bits > BOUNDED_BITS:
            raise WidthError(
                f"is_prime only accepts integer types of at most "
                f"{BOUNDED_BITS} bits, got {number.dtype}"
            )
        n = int(number)
    else:
        n = operator.index(number)
        if not -(1 << (BOUNDED_BITS - 1)) <= n < (1 << BOUNDED_BITS):
            raise NumericCastError(
                f"{n} does not fit in {BOUNDED_BITS} bits; use a sieve instead"
            )

    # There are no primes smaller than 2.
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True
