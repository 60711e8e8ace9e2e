"""
Exceptions raised by the number theory primitives.

Responsibility: error taxonomy only. Each class also derives from the
closest built-in exception so callers can catch either.
"""


class NumberTheoryError(Exception):
    """Base class for every error raised deliberately by this package."""


class OutOfRangeError(NumberTheoryError, IndexError):
    """A query exceeds the limit a sieve was built for."""


class DomainError(NumberTheoryError, ValueError):
    """The operation is undefined for the input (e.g. spf of 0 or 1)."""


class SieveOverflowError(NumberTheoryError, OverflowError):
    """Products needed by the linear sieve do not fit the multiplication type."""


class NumericCastError(NumberTheoryError, ValueError):
    """A value is not exactly representable in the destination integer type."""


class WidthError(NumberTheoryError, TypeError):
    """An integer type is too wide for the requested operation."""
