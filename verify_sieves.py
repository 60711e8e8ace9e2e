#!/usr/bin/env python3
"""
Cross-validate the primality and factorization primitives.

Compares:
1. Sieve primality flags against EulerSieve smallest prime factors
2. EulerSieve primes list against primes_upto
3. coprime_pairs against a brute-force gcd count
4. Trial-division is_prime against the sieve (16-bit range)

Usage:
    python verify_sieves.py
    python verify_sieves.py --config config/custom.yaml --limit 1000000
"""

import argparse
import sys
import time

import numpy as np
import yaml

from numtheory.coprime import coprime_pairs, count_coprime_pairs
from numtheory.factorization import EulerSieve
from numtheory.primes import BOUNDED_BITS, Sieve, is_prime, primes_upto


def verify_primality(sieve: Sieve, euler: EulerSieve, verbose: bool = True) -> bool:
    """Verify both sieves agree on primality for every n in [2, limit]."""
    limit = min(sieve.limit, euler.limit)
    if verbose:
        print(f"\n=== Verifying primality for N={limit:,} ===")

    errors = 0
    for n in range(2, limit + 1):
        from_flags = sieve.is_prime(n)
        from_spf = euler.min_prime_factor(n) == n
        if from_flags != from_spf:
            errors += 1
            if errors <= 10:
                print(f"  MISMATCH at n={n}: sieve={from_flags}, euler={from_spf}")

    if verbose:
        if errors == 0:
            print(f"  ✓ All {max(limit - 1, 0):,} values agree")
        else:
            print(f"  ✗ {errors:,} mismatches found")

    return errors == 0


def verify_primes_list(euler: EulerSieve, verbose: bool = True) -> bool:
    """Verify EulerSieve.primes() is ascending and matches primes_upto."""
    if verbose:
        print(f"\n=== Verifying primes list for N={euler.limit:,} ===")

    primes = euler.primes()
    ascending = bool(np.all(np.diff(primes) > 0))
    matches = np.array_equal(primes, primes_upto(euler.limit))

    if verbose:
        print(f"  {len(primes):,} primes found")
        print(f"  {'✓' if ascending else '✗'} strictly ascending")
        print(f"  {'✓' if matches else '✗'} matches Eratosthenes")

    return ascending and matches


def verify_coprime_pairs(limit: int, verbose: bool = True) -> bool:
    """Verify coprime_pairs against a brute-force gcd scan."""
    if verbose:
        print(f"\n=== Verifying coprime pairs for L={limit:,} ===")

    pairs = coprime_pairs(limit)
    expected = count_coprime_pairs(limit)
    unique = len({(int(x), int(y)) for x, y in pairs})

    ok = len(pairs) == expected and unique == len(pairs)
    if len(pairs):
        x, y = pairs[:, 0], pairs[:, 1]
        ok = ok and bool(np.all((0 <= y) & (y <= x) & (x <= limit)))
        ok = ok and bool(np.all(np.gcd(x, y) == 1))

    if verbose:
        print(f"  Generated: {len(pairs):,}, brute force: {expected:,}, unique: {unique:,}")
        print(f"  {'✓' if ok else '✗'} coprime pairs")

    return ok


def verify_trial_division(sieve: Sieve, verbose: bool = True) -> bool:
    """Verify trial-division is_prime against the sieve within 16 bits."""
    limit = min(sieve.limit, (1 << BOUNDED_BITS) - 1)
    if verbose:
        print(f"\n=== Verifying trial division for N={limit:,} ===")

    mismatches = [n for n in range(limit + 1) if is_prime(n) != sieve.is_prime(n)]

    if verbose:
        if not mismatches:
            print(f"  ✓ All {limit + 1:,} values agree")
        else:
            print(f"  ✗ {len(mismatches):,} mismatches, first: {mismatches[:10]}")

    return not mismatches


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Cross-validate number theory sieves')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--limit', type=int, default=None,
                        help='Override sieve_limit from config')
    parser.add_argument('--coprime-limit', type=int, default=None,
                        help='Override coprime_limit from config')
    parser.add_argument('--quiet', action='store_true',
                        help='Only print the final verdict')
    args = parser.parse_args(argv)

    with open(args.config) as f:
        config = yaml.safe_load(f)

    limit = args.limit if args.limit is not None else config['sieve_limit']
    coprime_limit = (args.coprime_limit if args.coprime_limit is not None
                     else config['coprime_limit'])
    dtype = np.dtype(config.get('dtype', 'int64'))
    verbose = not args.quiet

    if verbose:
        print("=" * 60)
        print("Number Theory Primitives - Verification")
        print("=" * 60)
        print(f"\nConfiguration:")
        print(f"  sieve_limit = {limit:,}")
        print(f"  coprime_limit = {coprime_limit:,}")
        print(f"  dtype = {dtype.name}")

    t0 = time.time()
    sieve = Sieve(limit, dtype=dtype)
    t_sieve = time.time() - t0

    t0 = time.time()
    euler = EulerSieve(limit, dtype=dtype)
    t_euler = time.time() - t0

    if verbose:
        print(f"\n  Eratosthenes: {t_sieve:.2f}s")
        print(f"  Euler: {t_euler:.2f}s")

    results = [
        verify_primality(sieve, euler, verbose),
        verify_primes_list(euler, verbose),
        verify_coprime_pairs(coprime_limit, verbose),
        verify_trial_division(sieve, verbose),
    ]

    passed = all(results)
    print("\n" + "=" * 60)
    print("ALL CHECKS PASSED" if passed else "VERIFICATION FAILED")
    print("=" * 60)
    return 0 if passed else 1


if __name__ == '__main__':
    sys.exit(main())
