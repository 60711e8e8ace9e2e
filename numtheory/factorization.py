"""
Factorization utilities.

Responsibility: smallest prime factor information via the linear
(Euler) sieve. Only the smallest prime factor is provided, never a full
factorization.
"""

import operator
from typing import Tuple

import numpy as np

from .errors import DomainError, OutOfRangeError, SieveOverflowError
from .numeric import MULT_BITS, bit_width, integer_dtype, sieve_limit, unsigned_abs


def spf_sieve(N: int, dtype=np.int64) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute smallest prime factor for all integers up to N in linear time.

    Every composite is written exactly once, by its smallest prime factor.

    Parameters
    ----------
    N : int
        Upper bound (inclusive), N >= 0. NumericCastError otherwise.
    dtype : dtype-like
        Integer type of the returned arrays.

    Returns
    -------
    spf : np.ndarray
        Array of length N+1 where spf[i] is the smallest prime factor of i.
        spf[0] = spf[1] = 0, and spf[p] = p for primes.
    primes : np.ndarray
        All primes <= N in ascending order.

    Note
    ----
    The caller must make sure p * n cannot overflow; EulerSieve checks
    this before calling.
    """
    N = sieve_limit(N)
    spf = [0] * (N + 1)
    primes = []
    for n in range(2, N + 1):
        if spf[n] == 0:  # n is prime
            primes.append(n)
            spf[n] = n
        spf_n = spf[n]
        for p in primes:
            if p > spf_n:
                break
            x = p * n
            if x > N:
                break
            spf[x] = p
    return np.array(spf, dtype=dtype), np.array(primes, dtype=dtype)


class EulerSieve:
    """
    Sieve of Euler over [0, limit].

    Finds all primes up to the (inclusive) limit and the smallest prime
    factor of every number in range, both in O(limit) time.

    Parameters
    ----------
    limit : int
        Largest number (inclusive) the sieve answers for.
    dtype : dtype-like
        Integer type of the numbers handled by the sieve.

    Raises
    ------
    NumericCastError
        If limit is negative or does not fit dtype.
    SieveOverflowError
        If limit is too wide for products to fit the 64-bit
        multiplication type. Nothing is allocated in that case.
    """

    def __init__(self, limit, dtype=np.int64):
        self._dtype = integer_dtype(dtype)
        self._limit = sieve_limit(limit, self._dtype)
        self._check_overflow()
        self._spf, self._primes = spf_sieve(self._limit, self._dtype)
        self._spf.setflags(write=False)
        self._primes.setflags(write=False)

    def _check_overflow(self):
        """Raise SieveOverflowError if multiplication may overflow."""
        width = bit_width(self._limit)
        if width * 2 > MULT_BITS:
            raise SieveOverflowError(
                f"Multiplication will overflow when sieving up to {self._limit} "
                f"({width} bits, products need {MULT_BITS} or fewer). "
                f"Please use a smaller limit."
            )

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def get_limit(self):
        """Return the maximum number (inclusive) the sieve holds."""
        return self._dtype.type(self._limit)

    def primes(self) -> np.ndarray:
        """Return the read-only ascending array of primes <= limit."""
        return self._primes

    def min_prime_factor(self, number) -> int:
        """
        Return the smallest prime factor of number.

        The sign of number is ignored, so min_prime_factor(-12) == 2.

        Raises
        ------
        DomainError
            If |number| <= 1, which has no prime factor.
        OutOfRangeError
            If |number| exceeds the limit of the sieve.
        """
        abs_num = int(unsigned_abs(number))
        if abs_num <= 1:
            raise DomainError(f"Minimum prime factor of {number} does not exist")
        if abs_num > self._limit:
            raise OutOfRangeError(
                f"{abs_num} exceeds the limit of EulerSieve ({self._limit})"
            )
        return int(self._spf[abs_num])

    def is_prime(self, number) -> bool:
        """Return whether number is prime, using spf[n] == n."""
        n = operator.index(number)
        if n < 2:
            return False
        if n > self._limit:
            raise OutOfRangeError(
                f"{n} exceeds the limit of EulerSieve ({self._limit})"
            )
        return int(self._spf[n]) == n

    def __len__(self) -> int:
        return self._limit + 1

    def copy(self) -> 'EulerSieve':
        """Return an independent sieve with its own storage."""
        return self.__copy__()

    def __copy__(self) -> 'EulerSieve':
        other = self.__class__.__new__(self.__class__)
        other._dtype = self._dtype
        other._limit = self._limit
        other._spf = self._spf.copy()
        other._primes = self._primes.copy()
        other._spf.setflags(write=False)
        other._primes.setflags(write=False)
        return other

    def __deepcopy__(self, memo) -> 'EulerSieve':
        return self.__copy__()

    def __repr__(self) -> str:
        return f"EulerSieve(limit={self._limit}, dtype={self._dtype.name})"
