# BigRational - IEEE-754 Conversion
# Copyright (c) 2024 BigRational Contributors. All rights reserved.

"""
Exact decomposition of doubles and correctly rounded ratio-to-float conversion.

Both directions work on integers only. A double is split into its integer
significand and binary exponent straight from the bit pattern, and a ratio
is rounded to a binary format with a single integer division, so no
intermediate decimal or float step can lose or double-round bits.

Example:
    >>> decompose_double(0.1)
    (7205759403792794, -56)
    >>> round_ratio(1, 10)
    0.1
"""

from __future__ import annotations
import math

import numpy as np

from .config import BinaryFormat, DOUBLE
from .exceptions import DivideByZeroError, FormatError


_FRACTION_BITS = 52
_FRACTION_MASK = (1 << _FRACTION_BITS) - 1
_EXPONENT_MASK = 0x7FF
_EXPONENT_BIAS = 1023


def double_bits(x: float) -> int:
    """Raw IEEE-754 binary64 bit pattern of x."""
    return int(np.array([x], dtype=np.float64).view(np.uint64)[0])


def single_bits(x: float) -> int:
    """
    Raw IEEE-754 binary32 bit pattern of x.

    x should already hold a single-precision value (for example the output
    of round_ratio with the single format); otherwise numpy rounds it first.
    """
    return int(np.array([x], dtype=np.float32).view(np.uint32)[0])


def decompose_double(x: float) -> tuple[int, int]:
    """
    Split a finite double into (mantissa, exponent) with x == mantissa * 2**exponent.

    The sign is carried by the mantissa. Subnormals decompose with the
    minimum exponent and no hidden bit.

    Raises:
        FormatError: If x is NaN or infinite.
    """
    if not math.isfinite(x):
        raise FormatError("Cannot convert non-finite value", repr(x))

    bits = double_bits(x)
    negative = bits >> 63
    biased = (bits >> _FRACTION_BITS) & _EXPONENT_MASK
    fraction = bits & _FRACTION_MASK

    if biased == 0:
        mantissa = fraction
        exponent = 1 - _EXPONENT_BIAS - _FRACTION_BITS
    else:
        mantissa = fraction | (1 << _FRACTION_BITS)
        exponent = biased - _EXPONENT_BIAS - _FRACTION_BITS

    if negative:
        mantissa = -mantissa
    return mantissa, exponent


def _scaled_divmod(n: int, d: int, exponent: int) -> tuple[int, int, int]:
    """Divide n by d * 2**exponent; returns (quotient, remainder, divisor)."""
    if exponent >= 0:
        divisor = d << exponent
        q, r = divmod(n, divisor)
    else:
        divisor = d
        q, r = divmod(n << -exponent, divisor)
    return q, r, divisor


def round_ratio(numerator: int, denominator: int, fmt: BinaryFormat = DOUBLE) -> float:
    """
    Round numerator/denominator to the nearest value of a binary format.

    Ties go to the even significand. Values beyond the largest finite
    number become infinities and values below half the smallest subnormal
    become signed zeros.

    Args:
        numerator: Any integer.
        denominator: Non-zero integer.
        fmt: Target format (binary64 by default).

    Returns:
        A Python float holding the rounded value exactly.

    Raises:
        DivideByZeroError: If denominator is zero.
    """
    if denominator == 0:
        raise DivideByZeroError()
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    if numerator == 0:
        return 0.0

    negative = numerator < 0
    n = -numerator if negative else numerator
    d = denominator

    # Start with the exponent that leaves `precision` or `precision + 1`
    # bits in the quotient, then correct for the larger case
    exponent = n.bit_length() - d.bit_length() - fmt.precision
    q, r, divisor = _scaled_divmod(n, d, exponent)
    if q.bit_length() > fmt.precision:
        exponent += 1
        q, r, divisor = _scaled_divmod(n, d, exponent)

    # Subnormal range: the ulp cannot get any smaller
    if exponent < fmt.min_exponent:
        exponent = fmt.min_exponent
        q, r, divisor = _scaled_divmod(n, d, exponent)

    twice = r << 1
    if twice > divisor or (twice == divisor and q & 1):
        q += 1

    if q and q.bit_length() + exponent > fmt.emax + 1:
        return -math.inf if negative else math.inf

    result = math.ldexp(float(q), exponent)
    return -result if negative else result
