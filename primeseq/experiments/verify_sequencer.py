#!/usr/bin/env python3
"""
Cross-validate the oracle and the enumeration paths against each other.

Compares:
1. is_prime against brute-force divisibility
2. nth_prime(k) against first_n(k)[-1]
3. up_to(b) against between(2, b) and the general between() scan
4. PrimeGenerator after reset() against first_n

Run at a small limit first; every check is O(limit * sqrt(limit)).

Uses package-relative imports, so run it as a module from the repo root:
    python -m primeseq.experiments.verify_sequencer --limit 20000
"""

import time
import numpy as np

from ..config import load_config
from ..primality import is_prime
from ..sequencer import (
    PrimeGenerator,
    between,
    count_smaller_than,
    first_n,
    nth_prime,
    up_to,
)


def brute_force_is_prime(n: int) -> bool:
    """Reference test: any divisor in [2, n)."""
    if n < 2:
        return False
    return all(n % d != 0 for d in range(2, n))


def verify_oracle(limit: int, verbose: bool = True) -> bool:
    """is_prime must agree with brute force below limit."""
    if verbose:
        print(f"\n=== Verifying oracle for n < {limit:,} ===")

    # brute force is quadratic, cap it
    brute_limit = min(limit, 5_000)
    errors = [n for n in range(-10, brute_limit)
              if is_prime(n) != brute_force_is_prime(n)]

    if verbose:
        print(f"  Checked {brute_limit + 10:,} values, {len(errors)} mismatches")
        for n in errors[:10]:
            print(f"    n={n}: is_prime={is_prime(n)}")
    return not errors


def verify_nth_prime(limit: int, verbose: bool = True) -> bool:
    """nth_prime(k) must be the last element of first_n(k)."""
    count = count_smaller_than(limit)
    primes = first_n(count)

    if verbose:
        print(f"\n=== Verifying nth_prime for k <= {count:,} ===")

    errors = 0
    for k in range(1, count + 1, max(1, count // 200)):
        if nth_prime(k) != primes[k - 1]:
            errors += 1
            if verbose and errors <= 10:
                print(f"    k={k}: nth_prime={nth_prime(k)}, first_n={primes[k - 1]}")

    if verbose:
        print(f"  Mismatches: {errors}")
    return errors == 0


def verify_enumeration(limit: int, verbose: bool = True) -> bool:
    """up_to, between and between's general scan must agree."""
    if verbose:
        print(f"\n=== Verifying enumeration below {limit:,} ===")

    t0 = time.time()
    two_pass = up_to(limit)
    t_two_pass = time.time() - t0

    t0 = time.time()
    # lower=1 skips the up_to shortcut
    scanned = between(1, limit)
    t_scan = time.time() - t0

    ok = np.array_equal(two_pass, scanned) and np.array_equal(two_pass, between(2, limit))
    ok = ok and bool(np.all(np.diff(two_pass) > 0))

    if verbose:
        print(f"  up_to: {t_two_pass:.3f}s, between scan: {t_scan:.3f}s")
        print(f"  {len(two_pass):,} primes, match: {ok}")
    return ok


def verify_generator(limit: int, verbose: bool = True) -> bool:
    """Two passes of reset() + next() must both reproduce first_n."""
    expected = first_n(count_smaller_than(limit)).tolist()

    if verbose:
        print(f"\n=== Verifying generator for {len(expected):,} primes ===")

    gen = PrimeGenerator()
    ok = True
    for _ in range(2):
        gen.reset()
        drawn = [gen.next() for _ in range(len(expected))]
        ok = ok and drawn == expected

    if verbose:
        print(f"  match: {ok}")
    return ok


def run_verification(limit: int, verbose: bool = True) -> bool:
    results = [
        verify_oracle(limit, verbose),
        verify_nth_prime(limit, verbose),
        verify_enumeration(limit, verbose),
        verify_generator(limit, verbose),
    ]
    return all(results)


def main(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description='Verify sequencer correctness')
    parser.add_argument('--limit', type=int, default=None,
                        help='Upper limit (default: verify_limit from config)')
    parser.add_argument('--config', type=str, default=None)
    args = parser.parse_args(argv)

    limit = args.limit if args.limit is not None else load_config(args.config)['verify_limit']

    print("=" * 60)
    print("Prime Sequencer Verification")
    print("=" * 60)

    start = time.time()
    ok = run_verification(limit)

    print()
    print("=" * 60)
    print("ALL CHECKS PASSED" if ok else "VERIFICATION FAILED")
    print("=" * 60)
    print(f"Total runtime: {time.time() - start:.1f}s")
    return 0 if ok else 1


if __name__ == '__main__':
    import sys
    sys.exit(main())
