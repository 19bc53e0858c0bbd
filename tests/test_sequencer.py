"""
Tests for enumeration and the resumable PrimeGenerator.

Reference values follow the first eight primes and the known
pi(x) / p_n tables.
"""

import numpy as np
import pytest

from primeseq.errors import InvalidArgumentError
from primeseq.primality import MAX_VALUE, is_prime
from primeseq.sequencer import (
    PrimeGenerator,
    between,
    count,
    count_smaller_than,
    first_n,
    nth_prime,
    up_to,
)


FIRST_EIGHT = [2, 3, 5, 7, 11, 13, 17, 19]


class TestCount:
    """count() over explicit values."""

    def test_all_primes(self):
        assert count(FIRST_EIGHT) == len(FIRST_EIGHT)

    def test_mixed_and_unordered(self):
        assert count([9, 2, -7, 0, 1, 13, 15, 4, 3]) == 3

    def test_empty(self):
        assert count([]) == 0
        assert count(np.array([], dtype=np.int64)) == 0

    def test_generator_input(self):
        assert count(n for n in range(20)) == 8

    def test_numpy_array(self):
        assert count(np.arange(100)) == 25

    def test_out_of_domain_values(self):
        with pytest.raises(InvalidArgumentError):
            count([2, 2 ** 70])

    def test_non_integer_values(self):
        with pytest.raises(InvalidArgumentError):
            count([2.0, 3.0])
        with pytest.raises(InvalidArgumentError):
            count(5)

    def test_non_numeric_elements(self):
        with pytest.raises(InvalidArgumentError, match="values must be integers"):
            count([2, None])
        with pytest.raises(InvalidArgumentError, match="values must be integers"):
            count([2, "3"])

    def test_ragged_nested_values(self):
        with pytest.raises(InvalidArgumentError):
            count([[2, 3], [5]])

    def test_overflow_message_only_for_ints(self):
        with pytest.raises(InvalidArgumentError, match="64-bit domain"):
            count([3, 2 ** 70])


class TestCountSmallerThan:

    def test_reference_values(self):
        assert count_smaller_than(5) == 2
        assert count_smaller_than(19) == 7
        assert count_smaller_than(20) == 8
        assert count_smaller_than(100) == 25
        assert count_smaller_than(10_000) == 1229

    def test_at_or_below_two(self):
        for n in [2, 1, 0, -5, -(10 ** 40)]:
            assert count_smaller_than(n) == 0

    def test_three(self):
        assert count_smaller_than(3) == 1

    def test_above_max_value(self):
        with pytest.raises(InvalidArgumentError):
            count_smaller_than(MAX_VALUE + 1)


class TestNthPrime:

    def test_reference_values(self):
        assert nth_prime(1) == 2
        assert nth_prime(2) == 3
        assert nth_prime(3) == 5
        assert nth_prime(6) == 13
        assert nth_prime(1000) == 7919
        assert nth_prime(10_000) == 104729

    def test_matches_first_n(self):
        primes = first_n(300)
        for k in range(1, 301):
            assert nth_prime(k) == primes[k - 1], f"k={k}"

    def test_returns_python_int(self):
        assert type(nth_prime(50)) is int

    def test_invalid_k(self):
        for k in [0, -1, -100]:
            with pytest.raises(InvalidArgumentError):
                nth_prime(k)

    def test_k_above_max_value(self):
        for k in [MAX_VALUE + 1, 2 ** 64]:
            with pytest.raises(InvalidArgumentError, match="k="):
                nth_prime(k)


class TestFirstN:

    def test_first_eight(self):
        assert first_n(8).tolist() == FIRST_EIGHT

    def test_zero(self):
        result = first_n(0)
        assert len(result) == 0
        assert result.dtype == np.int64

    def test_length_order_and_primality(self):
        for n in [1, 2, 10, 137]:
            result = first_n(n)
            assert len(result) == n
            assert np.all(np.diff(result) > 0)
            assert all(is_prime(int(p)) for p in result)

    def test_fresh_array_per_call(self):
        a = first_n(5)
        a[0] = -1
        assert first_n(5)[0] == 2

    def test_negative(self):
        with pytest.raises(InvalidArgumentError):
            first_n(-1)

    def test_n_above_max_value(self):
        for n in [MAX_VALUE + 1, 2 ** 64]:
            with pytest.raises(InvalidArgumentError):
                first_n(n)


class TestUpTo:

    def test_up_to_twenty(self):
        assert up_to(20).tolist() == FIRST_EIGHT

    def test_bound_is_exclusive(self):
        assert up_to(19).tolist() == FIRST_EIGHT[:-1]
        assert up_to(3).tolist() == [2]

    def test_small_bounds_empty(self):
        for bound in [2, 1, 0, -10]:
            assert len(up_to(bound)) == 0

    def test_length_matches_count(self):
        for bound in [50, 97, 98, 1000]:
            assert len(up_to(bound)) == count_smaller_than(bound)


class TestBetween:

    def test_reference_range(self):
        assert between(4, 11).tolist() == [5, 7]

    def test_from_two_equals_up_to(self):
        assert between(2, 20).tolist() == up_to(20).tolist()

    def test_general_scan_equals_up_to(self):
        """lower below 2 goes through the scan path, same result."""
        assert between(-50, 500).tolist() == up_to(500).tolist()
        assert between(0, 20).tolist() == FIRST_EIGHT

    def test_lower_is_inclusive(self):
        assert between(5, 12).tolist() == [5, 7, 11]
        assert between(7919, 7920).tolist() == [7919]

    def test_empty_ranges(self):
        assert len(between(11, 4)) == 0
        assert len(between(10, 10)) == 0
        assert len(between(24, 29)) == 0
        assert len(between(-10, 2)) == 0

    def test_above_max_value(self):
        with pytest.raises(InvalidArgumentError):
            between(10, MAX_VALUE + 1)


class TestPrimeGenerator:

    def test_next_yields_ascending_primes(self):
        gen = PrimeGenerator()
        assert [gen.next() for _ in FIRST_EIGHT] == FIRST_EIGHT

    def test_reset_reproduces_first_n(self):
        """Two reset() passes both reproduce first_n exactly."""
        gen = PrimeGenerator()
        expected = first_n(50).tolist()
        for _ in range(2):
            gen.reset()
            assert [gen.next() for _ in expected] == expected

    def test_reset_mid_sequence(self):
        gen = PrimeGenerator()
        for _ in range(5):
            gen.next()
        gen.reset()
        assert gen.next() == 2

    def test_start_from_composite(self):
        gen = PrimeGenerator()
        gen.start_from(90)
        assert gen.next() == 97
        assert gen.next() == 101

    def test_start_from_prime_returns_it(self):
        gen = PrimeGenerator()
        gen.start_from(13)
        assert gen.next() == 13

    def test_start_from_clamps(self):
        gen = PrimeGenerator()
        for n in [1, 0, -100]:
            gen.start_from(n)
            assert gen.candidate == 2
            assert gen.next() == 2

    def test_start_from_idempotent(self):
        gen = PrimeGenerator()
        gen.start_from(20)
        gen.start_from(20)
        assert gen.next() == 23

    def test_start_from_does_not_probe(self):
        gen = PrimeGenerator()
        gen.start_from(24)
        assert gen.candidate == 24

    def test_candidate_one_past_last_prime(self):
        gen = PrimeGenerator()
        assert gen.next() == 2
        assert gen.candidate == 3
        gen.next()
        gen.next()
        assert gen.candidate == 6

    def test_constructor_start(self):
        assert PrimeGenerator(100).next() == 101
        assert PrimeGenerator(-3).next() == 2

    def test_independent_generators(self):
        a = PrimeGenerator()
        b = PrimeGenerator()
        a.next()
        a.next()
        assert b.next() == 2
        assert a.next() == 5

    def test_iterator_protocol(self):
        gen = PrimeGenerator(10)
        assert next(gen) == 11
        taken = []
        for p in gen:
            taken.append(p)
            if len(taken) == 3:
                break
        assert taken == [13, 17, 19]

    def test_start_from_above_max_value(self):
        gen = PrimeGenerator()
        with pytest.raises(InvalidArgumentError):
            gen.start_from(MAX_VALUE + 1)
        assert gen.candidate == 2

    def test_next_past_max_value(self):
        """No prime remains in [MAX_VALUE, MAX_VALUE]; the cursor stays put."""
        gen = PrimeGenerator(MAX_VALUE)
        with pytest.raises(InvalidArgumentError):
            gen.next()
        assert gen.candidate == MAX_VALUE
        with pytest.raises(InvalidArgumentError):
            gen.next()
        assert gen.candidate == MAX_VALUE

    def test_repr(self):
        assert repr(PrimeGenerator(7)) == "PrimeGenerator(candidate=7)"


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
