"""
Tests for the Eratosthenes sieve and the trial-division primality test.
"""

import copy

import numpy as np
import pytest

from numtheory.errors import (
    NumberTheoryError,
    NumericCastError,
    OutOfRangeError,
    WidthError,
)
from numtheory.primes import Sieve, is_prime, prime_flags_upto, primes_upto


# Known small primes for testing
SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
SMALL_COMPOSITES = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25]


class TestPrimeFlags:
    """Test the boolean flag builder."""

    def test_prime_flags_upto_matches_known_primes(self):
        """prime_flags_upto should correctly identify primes."""
        flags = prime_flags_upto(50)

        for p in SMALL_PRIMES:
            assert flags[p], f"prime_flags_upto: {p} should be prime"
        for n in SMALL_COMPOSITES:
            assert not flags[n], f"prime_flags_upto: {n} should not be prime"

        assert not flags[0]
        assert not flags[1]

    @pytest.mark.parametrize("N", [0, 1, 2])
    def test_tiny_limits(self, N):
        """Limits below the first prime square still work."""
        flags = prime_flags_upto(N)
        assert len(flags) == N + 1
        assert list(np.nonzero(flags)[0]) == [p for p in [2] if p <= N]

    def test_negative_bound_rejected(self):
        """Negative bounds raise the same error as spf_sieve."""
        with pytest.raises(NumericCastError):
            prime_flags_upto(-1)
        with pytest.raises(NumericCastError):
            primes_upto(-10)

    def test_prime_count(self):
        """There are 25 primes <= 100 and 168 primes <= 1000."""
        assert len(primes_upto(100)) == 25
        assert len(primes_upto(1000)) == 168


class TestSieve:
    """Test the bit-packed Sieve class."""

    def test_known_primes_and_composites(self):
        sieve = Sieve(100)

        for p in SMALL_PRIMES:
            assert sieve.is_prime(p), f"Sieve: {p} should be prime"
        for n in SMALL_COMPOSITES:
            assert not sieve.is_prime(n), f"Sieve: {n} should not be prime"

    def test_zero_and_one_not_prime(self):
        sieve = Sieve(10)
        assert not sieve.is_prime(0)
        assert not sieve.is_prime(1)

    def test_negative_numbers_not_prime(self):
        sieve = Sieve(10)
        assert not sieve.is_prime(-2)
        assert not sieve.is_prime(-7)

    def test_limit_is_inclusive(self):
        sieve = Sieve(97)
        assert sieve.is_prime(97)
        assert sieve.get_limit() == 97

    def test_exceeding_limit_raises(self):
        """Sieve(1).is_prime(2) is out of range."""
        with pytest.raises(OutOfRangeError):
            Sieve(1).is_prime(2)

    def test_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            Sieve(10).is_prime(11)

    def test_zero_limit(self):
        sieve = Sieve(0)
        assert len(sieve) == 1
        assert not sieve.is_prime(0)
        with pytest.raises(OutOfRangeError):
            sieve.is_prime(1)

    def test_matches_flags_across_byte_boundaries(self):
        """Bit packing must not shift flags between bytes."""
        N = 1000
        sieve = Sieve(N)
        flags = prime_flags_upto(N)
        for n in range(N + 1):
            assert sieve.is_prime(n) == flags[n], f"mismatch at n={n}"

    def test_storage_is_bit_packed(self):
        sieve = Sieve(8000)
        assert sieve._bits.nbytes == 1001

    def test_numpy_scalar_queries(self):
        sieve = Sieve(np.int16(100), dtype=np.int16)
        assert sieve.is_prime(np.int16(97))
        assert not sieve.is_prime(np.uint8(91))
        assert sieve.get_limit().dtype == np.int16

    def test_negative_limit_rejected(self):
        with pytest.raises(NumericCastError):
            Sieve(-1)
        with pytest.raises(NumberTheoryError):
            Sieve(np.int8(-3), dtype=np.int8)

    def test_limit_must_fit_dtype(self):
        with pytest.raises(NumericCastError):
            Sieve(300, dtype=np.int8)

    def test_non_integer_dtype_rejected(self):
        with pytest.raises(TypeError):
            Sieve(10, dtype=np.float64)

    def test_contains(self):
        sieve = Sieve(30)
        assert 29 in sieve
        assert 30 not in sieve
        assert 31 not in sieve
        assert -3 not in sieve

    def test_copy_is_independent(self):
        sieve = Sieve(100)
        for other in (sieve.copy(), copy.copy(sieve), copy.deepcopy(sieve)):
            assert other.get_limit() == sieve.get_limit()
            assert other._bits is not sieve._bits
            assert np.array_equal(other._bits, sieve._bits)

    def test_storage_is_read_only(self):
        sieve = Sieve(100)
        with pytest.raises(ValueError):
            sieve._bits[0] = 0


class TestBoundedIsPrime:
    """Test the trial-division is_prime."""

    @pytest.mark.parametrize("n, expected", [
        (1, False), (2, True), (15, False), (9973, True),
        (0, False), (-7, False), (3, True), (4, False), (65521, True),
    ])
    def test_known_values(self, n, expected):
        assert is_prime(n) is expected

    def test_matches_sieve(self):
        N = 5000
        sieve = Sieve(N)
        for n in range(N + 1):
            assert is_prime(n) == sieve.is_prime(n), f"mismatch at n={n}"

    def test_accepts_16_bit_numpy_types(self):
        assert is_prime(np.int16(31))
        assert is_prime(np.uint16(65521))
        assert not is_prime(np.int8(-128))
        assert is_prime(np.uint8(251))

    @pytest.mark.parametrize("dtype", [np.int32, np.uint32, np.int64, np.uint64])
    def test_rejects_wide_numpy_types(self, dtype):
        with pytest.raises(WidthError):
            is_prime(dtype(7))

    @pytest.mark.parametrize("n", [1 << 16, -(1 << 15) - 1, 10**9 + 7])
    def test_rejects_wide_python_ints(self, n):
        with pytest.raises(NumericCastError):
            is_prime(n)

    def test_rejects_floats(self):
        with pytest.raises(TypeError):
            is_prime(7.0)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
