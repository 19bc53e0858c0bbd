"""
Error taxonomy.

Responsibility: typed failures for argument and selection problems.
Every check happens before any computation starts.
"""


class PrimeSeqError(Exception):
    """Base class for all library errors."""


class InvalidArgumentError(PrimeSeqError, ValueError):
    """Argument is malformed or outside the supported integer domain."""


class EmptySelectionError(PrimeSeqError, LookupError):
    """Random selection was requested over an empty set of primes."""
