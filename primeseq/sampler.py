"""
Uniform random prime selection.

Responsibility: draw primes uniformly from an enumerated set. The random
source is injected as a numpy Generator (or built from a seed), so draws
are reproducible in tests.
"""

import numpy as np
from typing import Optional

from .errors import EmptySelectionError, InvalidArgumentError
from .primality import as_integer
from .sequencer import between, up_to

# Bound used when random_prime() is called without arguments
DEFAULT_BOUND = 10_000_000


def candidate_primes(bound=None, upper=None) -> np.ndarray:
    """
    Materialize the set a draw selects from.

    No arguments: primes below DEFAULT_BOUND. One: primes below bound.
    Two: primes in [bound, upper).
    """
    if bound is None:
        if upper is not None:
            raise InvalidArgumentError("upper given without a lower bound")
        return up_to(DEFAULT_BOUND)
    if upper is None:
        return up_to(bound)
    return between(bound, upper)


def _resolve_rng(seed: Optional[int], rng: Optional[np.random.Generator]) -> np.random.Generator:
    if rng is not None:
        if seed is not None:
            raise InvalidArgumentError("pass either seed or rng, not both")
        return rng
    if seed is not None:
        seed = as_integer(seed, "seed")
        if seed < 0:
            raise InvalidArgumentError(f"seed must be >= 0, got {seed}")
    return np.random.default_rng(seed)


def random_prime(bound=None, upper=None, *, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None) -> int:
    """
    Return a prime chosen uniformly at random.

    Parameters
    ----------
    bound : int, optional
        Exclusive upper bound, or the inclusive lower bound when upper
        is also given. Defaults to DEFAULT_BOUND.
    upper : int, optional
        Exclusive upper bound of the range [bound, upper).
    seed : int, optional
        Seed for a fresh numpy Generator.
    rng : np.random.Generator, optional
        Random source to draw the index from.

    Returns
    -------
    int

    Raises
    ------
    EmptySelectionError
        If there is no prime to choose from.
    """
    primes = candidate_primes(bound, upper)
    if len(primes) == 0:
        raise EmptySelectionError(_empty_message(bound, upper))
    generator = _resolve_rng(seed, rng)
    return int(primes[generator.integers(len(primes))])


def random_primes(count, bound=None, upper=None, *, seed: Optional[int] = None,
                  rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Draw count primes uniformly with replacement from the same set
    random_prime would use.
    """
    count = as_integer(count, "count")
    if count < 0:
        raise InvalidArgumentError(f"count must be >= 0, got {count}")
    primes = candidate_primes(bound, upper)
    if len(primes) == 0:
        raise EmptySelectionError(_empty_message(bound, upper))
    generator = _resolve_rng(seed, rng)
    return primes[generator.integers(len(primes), size=count)]


def _empty_message(bound, upper) -> str:
    if upper is None:
        return f"no primes below {DEFAULT_BOUND if bound is None else bound}"
    return f"no primes in [{bound}, {upper})"
