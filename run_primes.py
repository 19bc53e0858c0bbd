#!/usr/bin/env python3
"""
Command-line driver for primality testing and prime enumeration.

Usage:
    python run_primes.py is-prime 7919 7920
    python run_primes.py nth 1000
    python run_primes.py up-to 20
    python run_primes.py between 4 11
    python run_primes.py next --start 90 --count 3
    python run_primes.py random 100 200 --seed 1
    python run_primes.py --config config/custom.yaml random
"""

import argparse
import sys

from primeseq.config import load_config
from primeseq.errors import InvalidArgumentError, PrimeSeqError
from primeseq.primality import is_prime
from primeseq.sampler import random_prime
from primeseq.sequencer import (
    PrimeGenerator,
    between,
    count_smaller_than,
    first_n,
    nth_prime,
    up_to,
)


def _print_primes(primes):
    print(" ".join(str(p) for p in primes))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Prime testing and enumeration')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file (default: config/default.yaml)')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('is-prime', help='Test values for primality')
    p.add_argument('values', type=int, nargs='+')

    p = sub.add_parser('nth', help='k-th prime (1-based)')
    p.add_argument('k', type=int)

    p = sub.add_parser('count-below', help='Number of primes below N')
    p.add_argument('n', type=int)

    p = sub.add_parser('first', help='First N primes')
    p.add_argument('n', type=int)

    p = sub.add_parser('up-to', help='All primes below BOUND')
    p.add_argument('bound', type=int)

    p = sub.add_parser('between', help='All primes in [LOWER, UPPER)')
    p.add_argument('lower', type=int)
    p.add_argument('upper', type=int)

    p = sub.add_parser('next', help='Step a prime generator')
    p.add_argument('--start', type=int, default=2)
    p.add_argument('--count', type=int, default=1)

    p = sub.add_parser('random', help='Uniformly random prime below BOUND or in [LOWER, UPPER)')
    p.add_argument('bounds', type=int, nargs='*', metavar='BOUND')
    p.add_argument('--seed', type=int, default=None,
                   help='Random seed (overrides config)')

    return parser


def run(args, config) -> None:
    if args.command == 'is-prime':
        for n in args.values:
            print(f"{n}: {'prime' if is_prime(n) else 'not prime'}")
    elif args.command == 'nth':
        print(nth_prime(args.k))
    elif args.command == 'count-below':
        print(count_smaller_than(args.n))
    elif args.command == 'first':
        _print_primes(first_n(args.n))
    elif args.command == 'up-to':
        _print_primes(up_to(args.bound))
    elif args.command == 'between':
        _print_primes(between(args.lower, args.upper))
    elif args.command == 'next':
        gen = PrimeGenerator(args.start)
        _print_primes(gen.next() for _ in range(args.count))
    elif args.command == 'random':
        if len(args.bounds) > 2:
            raise InvalidArgumentError("random takes at most two bounds")
        bounds = args.bounds or [config['default_bound']]
        seed = args.seed if args.seed is not None else config['seed']
        print(random_prime(*bounds, seed=seed))


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        run(args, config)
    except PrimeSeqError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
