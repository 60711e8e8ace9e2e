"""
Overflow-safe integer conversion utilities.

Responsibility: integer width bookkeeping. Nothing here knows about
primes. Integer widths are expressed as numpy integer dtypes.
"""

import operator

import numpy as np

from .errors import NumericCastError

# Products inside the sieves are formed in this type.
MULT_DTYPE = np.dtype(np.uint64)
MULT_BITS = np.iinfo(MULT_DTYPE).bits


def integer_dtype(dtype) -> np.dtype:
    """
    Normalize a dtype-like to a numpy integer dtype.

    Raises
    ------
    TypeError
        If dtype is not a signed or unsigned integer type.
    """
    dtype = np.dtype(dtype)
    if dtype.kind not in 'iu':
        raise TypeError(f"{dtype} is not an integer type")
    return dtype


def numeric_cast(value, dtype):
    """
    Convert value to a scalar of the given integer dtype.

    Parameters
    ----------
    value : int or np.integer
        Value to convert. Floats are rejected.
    dtype : dtype-like
        Destination integer type.

    Returns
    -------
    np.integer
        value as a scalar of dtype.

    Raises
    ------
    NumericCastError
        If value lies outside the range of dtype.
    """
    dtype = integer_dtype(dtype)
    v = operator.index(value)
    info = np.iinfo(dtype)
    if v < info.min or v > info.max:
        raise NumericCastError(
            f"{v} is out of range for {dtype} [{info.min}, {info.max}]"
        )
    return dtype.type(v)


def unsigned_abs(value):
    """
    Absolute value that cannot overflow.

    Signed numpy scalars map to the unsigned type of the same width, so
    the most negative value (e.g. int8 -128) has a representable result.
    Python ints return a Python int.
    """
    if isinstance(value, np.signedinteger):
        unsigned = np.dtype(f'u{value.dtype.itemsize}')
        return unsigned.type(abs(int(value)))
    if isinstance(value, np.unsignedinteger):
        return value
    return abs(operator.index(value))


def bit_width(value) -> int:
    """Number of bits needed to represent a non-negative integer (0 -> 0)."""
    v = operator.index(value)
    if v < 0:
        raise ValueError(f"bit_width is undefined for negative value {v}")
    return v.bit_length()


def sieve_limit(limit, dtype=MULT_DTYPE) -> int:
    """
    Validate a sieve limit and return it as a Python int.

    The limit must fit dtype and be a valid (non-negative) index.

    Raises
    ------
    NumericCastError
        If limit is negative or does not fit dtype.
    """
    v = int(numeric_cast(limit, dtype))
    numeric_cast(v, MULT_DTYPE)
    return v
