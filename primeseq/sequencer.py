"""
Prime enumeration and sequential generation.

Responsibility: everything built from repeated primality queries.
Fixed-bound queries (count, count_smaller_than, nth_prime), bulk
enumeration (first_n, up_to, between) and the resumable PrimeGenerator
cursor. No sieving: every candidate goes through the oracle.

Enumeration results are fresh int64 arrays, ascending, no duplicates.
"""

import numpy as np
from numba import njit

from .errors import InvalidArgumentError
from .primality import MAX_VALUE, as_integer, check_domain, is_prime, wheel_test


# ========== Compiled kernels ==========

@njit(cache=True)
def _count_values(values: np.ndarray) -> int:
    count = 0
    for i in range(values.shape[0]):
        if wheel_test(values[i]):
            count += 1
    return count


@njit(cache=True)
def _count_range(lower: int, upper: int) -> int:
    """Number of primes in [lower, upper)."""
    count = 0
    for i in range(lower, upper):
        if wheel_test(i):
            count += 1
    return count


@njit(cache=True)
def _collect_range(lower: int, upper: int) -> np.ndarray:
    """Primes in [lower, upper), counted first then filled."""
    out = np.empty(_count_range(lower, upper), dtype=np.int64)
    j = 0
    for i in range(lower, upper):
        if wheel_test(i):
            out[j] = i
            j += 1
    return out


@njit(cache=True)
def _first_n(n: int) -> np.ndarray:
    out = np.empty(n, dtype=np.int64)
    candidate = 2
    i = 0
    while i < n:
        if wheel_test(candidate):
            out[i] = candidate
            i += 1
        candidate += 1
    return out


@njit(cache=True)
def _nth_prime(k: int) -> int:
    """
    k-th prime for k >= 3.

    Walks 5, 7, 11, 13, 17, ... with alternating +2/+4 steps. The loop
    advances once more after the k-th hit, hence candidate - step.
    """
    candidate = 5
    step = 4
    count = 2
    while count < k:
        if wheel_test(candidate):
            count += 1
        step = 6 - step
        candidate += step
    return candidate - step


# ========== Fixed-bound queries ==========

def count(values) -> int:
    """
    Count how many of the given values are prime.

    Parameters
    ----------
    values : iterable of int or np.ndarray
        Values to test, in any order.

    Returns
    -------
    int
        Number of primes among values (0 for empty input).
    """
    try:
        arr = np.asarray(values if isinstance(values, np.ndarray) else list(values))
    except (TypeError, ValueError, OverflowError):
        raise InvalidArgumentError("values must be an iterable of integers") from None
    if arr.size == 0:
        return 0
    if arr.dtype.kind not in "iu":
        if arr.dtype == object and all(
                isinstance(v, int) and not isinstance(v, bool) for v in arr.ravel()):
            # Python ints beyond int64 end up as object arrays
            raise InvalidArgumentError("values exceed the supported 64-bit domain")
        raise InvalidArgumentError("values must be integers")
    if arr.dtype == np.uint64 and arr.max() > MAX_VALUE:
        raise InvalidArgumentError("values exceed the supported 64-bit domain")
    return int(_count_values(arr.astype(np.int64).ravel()))


def count_smaller_than(n) -> int:
    """
    Number of primes p with 2 <= p < n.

    Returns 0 for n <= 2 without scanning.
    """
    n = as_integer(n)
    if n <= 2:
        return 0
    check_domain(n)
    return int(_count_range(2, n))


def nth_prime(k) -> int:
    """
    Return the k-th prime (1-based), so nth_prime(1) == 2.

    Parameters
    ----------
    k : int
        Index in the ascending prime sequence, k >= 1.

    Returns
    -------
    int

    Raises
    ------
    InvalidArgumentError
        If k < 1 or k exceeds MAX_VALUE.
    """
    k = as_integer(k, "k")
    if k < 1:
        raise InvalidArgumentError(f"k must be >= 1, got {k}")
    check_domain(k, "k")
    if k == 1:
        return 2
    if k == 2:
        return 3
    return int(_nth_prime(k))


# ========== Bulk enumeration ==========

def first_n(n) -> np.ndarray:
    """
    Return the first n primes in ascending order.

    Parameters
    ----------
    n : int
        How many primes to generate, n >= 0.

    Returns
    -------
    np.ndarray
        int64 array of length n.
    """
    n = as_integer(n)
    if n < 0:
        raise InvalidArgumentError(f"n must be >= 0, got {n}")
    check_domain(n)
    return _first_n(n)


def up_to(bound) -> np.ndarray:
    """
    Return all primes strictly less than bound.

    Two passes: count the primes below bound, then regenerate exactly
    that many from the start.
    """
    return first_n(count_smaller_than(bound))


def between(lower, upper) -> np.ndarray:
    """
    Return all primes p with lower <= p < upper.

    Parameters
    ----------
    lower : int
        Inclusive lower bound.
    upper : int
        Exclusive upper bound.

    Returns
    -------
    np.ndarray
        Ascending int64 array; empty if upper <= lower.
    """
    lower = as_integer(lower, "lower")
    upper = as_integer(upper, "upper")
    if upper <= lower:
        return np.empty(0, dtype=np.int64)
    check_domain(upper, "upper")
    if lower == 2:
        return up_to(upper)
    lower = max(lower, 2)
    if upper <= lower:
        return np.empty(0, dtype=np.int64)
    return _collect_range(lower, upper)


# ========== Resumable cursor ==========

class PrimeGenerator:
    """
    Forward-only cursor over the ascending prime sequence.

    Holds a single candidate: the next value to probe. next() walks it
    forward to the next prime and leaves it one past that prime.
    reset() and start_from() are the only ways to move it backwards.

    Not thread-safe; callers sharing one generator must synchronize.

    Examples
    --------
    >>> gen = PrimeGenerator()
    >>> [gen.next() for _ in range(5)]
    [2, 3, 5, 7, 11]
    >>> gen.start_from(90)
    >>> gen.next()
    97
    """

    def __init__(self, start: int = 2):
        self._candidate = 2
        self.start_from(start)

    @property
    def candidate(self) -> int:
        """Next value the generator will probe."""
        return self._candidate

    def next(self) -> int:
        """Return the first prime >= candidate and move past it."""
        candidate = self._candidate
        while not is_prime(candidate):
            candidate += 1
            if candidate > MAX_VALUE:
                raise InvalidArgumentError(
                    f"no prime left below the supported maximum {MAX_VALUE}"
                )
        self._candidate = candidate + 1
        return candidate

    def reset(self) -> None:
        """Rewind to the start of the natural sequence."""
        self.start_from(2)

    def start_from(self, n) -> None:
        """
        Position the cursor so the next call to next() returns the
        first prime >= n. Values below 2 are clamped to 2.
        """
        n = as_integer(n)
        self._candidate = 2 if n < 2 else check_domain(n)

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.next()

    def __repr__(self) -> str:
        return f"PrimeGenerator(candidate={self._candidate})"
