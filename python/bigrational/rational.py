# BigRational - Rational Numbers
# Copyright (c) 2024 BigRational Contributors. All rights reserved.

"""
Immutable arbitrary-precision rational numbers.

A Rational is a numerator/denominator pair of Python ints kept in lowest
terms with a positive denominator, so zero is always 0/1 and two equal
values always have the same fields. Every constructor goes through
make_rational, and every operation returns a new normalized instance.

Example:
    >>> from bigrational.rational import Rational
    >>> Rational(1, 2) + Rational(1, 3)
    Rational('5/6')
    >>> Rational.from_string("6/-3")
    Rational('-2')
    >>> Rational.from_float(0.1)
    Rational('3602879701896397/36028797018963968')
"""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
import math
import re
from typing import Optional, Union

from .binary import decompose_double, round_ratio
from .config import DOUBLE, SINGLE
from .exceptions import DivideByZeroError, FormatError


# Things that to_rational() accepts
RationalLike = Union['Rational', int, float, str, Fraction]

# Operands accepted by the arithmetic methods and operators
Operand = Union['Rational', int]

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(
    r"(?P<sign>[+-]?)(?P<int>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?:[eE](?P<exp>[+-]?[0-9]+))?"
)

# Largest decimal exponent magnitude from_decimal accepts
MAX_DECIMAL_EXPONENT = 100_000


def _check_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def _truncating_div(n: int, d: int) -> int:
    """Integer quotient rounded toward zero (Python's // rounds toward -inf)."""
    q = abs(n) // abs(d)
    return -q if (n < 0) != (d < 0) else q


@dataclass(frozen=True)
class Rational:
    """
    An exact rational number numerator/denominator.

    Invariants:
        - denominator > 0
        - gcd(|numerator|, denominator) == 1
        - zero is 0/1

    Rationals are immutable, hashable and compare by value.
    """
    numerator: int
    denominator: int

    def __init__(self, numerator: int, denominator: int = 1):
        """
        Create the normalized rational numerator/denominator.

        Args:
            numerator: Any int.
            denominator: Non-zero int (defaults to 1).

        Raises:
            DivideByZeroError: If denominator is zero.
            TypeError: If either argument is not an int.
        """
        _check_int(numerator, "numerator")
        _check_int(denominator, "denominator")

        if denominator == 0:
            raise DivideByZeroError("Denominator is zero")

        # gcd(0, d) == |d|, which turns every zero into 0/1
        g = math.gcd(numerator, denominator)
        numerator //= g
        denominator //= g

        if denominator < 0:
            numerator = -numerator
            denominator = -denominator

        # Bypass frozen dataclass __setattr__
        object.__setattr__(self, 'numerator', numerator)
        object.__setattr__(self, 'denominator', denominator)

    @classmethod
    def _unchecked(cls, numerator: int, denominator: int) -> Rational:
        """Wrap a pair that is already in normal form."""
        r = object.__new__(cls)
        object.__setattr__(r, 'numerator', numerator)
        object.__setattr__(r, 'denominator', denominator)
        return r

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_int(cls, n: int) -> Rational:
        """Create n/1."""
        return cls(_check_int(n, "value"), 1)

    @classmethod
    def from_string(cls, s: str) -> Rational:
        """
        Parse "N" or "N/D".

        Both sides are optionally signed runs of decimal digits. Whitespace
        around either side is ignored.

        Raises:
            FormatError: If s is not of that form.
            DivideByZeroError: If D is zero.
        """
        if not isinstance(s, str):
            raise TypeError(f"Expected str, got {type(s).__name__}")

        tokens = s.split('/')
        if len(tokens) > 2:
            raise FormatError("Invalid rational literal", s)

        parts = []
        for token in tokens:
            token = token.strip()
            if not _INTEGER.fullmatch(token):
                raise FormatError("Invalid rational literal", s)
            parts.append(int(token))

        if len(parts) == 1:
            return cls(parts[0], 1)
        return cls(parts[0], parts[1])

    @classmethod
    def from_float(cls, x: float) -> Rational:
        """
        Create the exact value of a double.

        The result reproduces the binary value bit for bit, so
        Rational.from_float(0.1) is not 1/10.

        Raises:
            FormatError: If x is NaN or infinite.
        """
        if not isinstance(x, float):
            raise TypeError(f"Expected float, got {type(x).__name__}")

        mantissa, exponent = decompose_double(x)
        if exponent >= 0:
            return cls(mantissa << exponent, 1)
        return cls(mantissa, 1 << -exponent)

    @classmethod
    def from_decimal(cls, s: str) -> Rational:
        """
        Parse a decimal literal such as "-3.25", "1e16" or "4.9e-324".

        The literal is split into an unscaled integer and a decimal scale;
        a positive scale becomes a power-of-ten denominator and a negative
        one multiplies the numerator.

        Raises:
            FormatError: If s is not a decimal literal, or its exponent
                exceeds MAX_DECIMAL_EXPONENT in magnitude.
        """
        if not isinstance(s, str):
            raise TypeError(f"Expected str, got {type(s).__name__}")

        match = _DECIMAL.fullmatch(s.strip())
        if not match or not (match.group('int') or match.group('frac')):
            raise FormatError("Invalid decimal literal", s)

        frac = match.group('frac') or ''
        exp_digits = (match.group('exp') or '0').lstrip('+-').lstrip('0')
        if (len(exp_digits) > len(str(MAX_DECIMAL_EXPONENT))
                or int(exp_digits or 0) > MAX_DECIMAL_EXPONENT):
            raise FormatError("Decimal exponent out of range", s)

        exponent = int(match.group('exp') or 0)
        unscaled = int(match.group('sign') + (match.group('int') or '0') + frac)
        scale = len(frac) - exponent

        if scale > 0:
            return cls(unscaled, 10 ** scale)
        return cls(unscaled * 10 ** -scale, 1)

    @classmethod
    def from_fraction(cls, f: Fraction) -> Rational:
        """Create from a fractions.Fraction (already normalized)."""
        return cls(f.numerator, f.denominator)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Operand) -> Rational:
        """Return self + other."""
        b = _as_rational(other)
        return Rational(
            self.numerator * b.denominator + b.numerator * self.denominator,
            self.denominator * b.denominator,
        )

    def subtract(self, other: Operand) -> Rational:
        """Return self - other."""
        return self.add(_as_rational(other).negate())

    def multiply(self, other: Operand) -> Rational:
        """Return self * other."""
        b = _as_rational(other)
        return Rational(self.numerator * b.numerator, self.denominator * b.denominator)

    def negate(self) -> Rational:
        """Return -self."""
        return Rational._unchecked(-self.numerator, self.denominator)

    def reciprocal(self) -> Rational:
        """
        Return 1 / self.

        Raises:
            DivideByZeroError: If self is zero.
        """
        if self.numerator == 0:
            raise DivideByZeroError()
        return Rational(self.denominator, self.numerator)

    def divide(self, other: Operand) -> Rational:
        """
        Return self / other.

        Raises:
            DivideByZeroError: If other is zero.
        """
        return self.multiply(_as_rational(other).reciprocal())

    def int_divide(self, other: Operand) -> int:
        """
        Return self / other truncated toward zero.

        Raises:
            DivideByZeroError: If other is zero.
        """
        q = self.divide(other)
        return _truncating_div(q.numerator, q.denominator)

    def remainder(self, other: Operand) -> Rational:
        """
        Return self - other * self.int_divide(other).

        The result has the sign of self, so
        other * self.int_divide(other) + self.remainder(other) == self.

        Raises:
            DivideByZeroError: If other is zero.
        """
        b = _as_rational(other)
        q = self.int_divide(b)
        return self.subtract(b.multiply(q))

    def abs(self) -> Rational:
        """Return |self|."""
        return self.negate() if self.numerator < 0 else self

    def sign(self) -> int:
        """Return -1, 0 or 1."""
        return (self.numerator > 0) - (self.numerator < 0)

    def floor(self) -> int:
        return self.numerator // self.denominator

    def ceil(self) -> int:
        return -(-self.numerator // self.denominator)

    def is_integer(self) -> bool:
        return self.denominator == 1

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare(self, other: Operand) -> int:
        """Return -1, 0 or 1 as self is less than, equal to or greater than other."""
        b = _as_rational(other)
        lhs = self.numerator * b.denominator
        rhs = b.numerator * self.denominator
        return (lhs > rhs) - (lhs < rhs)

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_positive(self) -> bool:
        return self.numerator > 0

    def is_negative(self) -> bool:
        return self.numerator < 0

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_float(self) -> float:
        """Correctly rounded (half-to-even) IEEE double."""
        return round_ratio(self.numerator, self.denominator, DOUBLE)

    def to_single(self) -> float:
        """
        Correctly rounded IEEE single, returned as a Python float.

        The rounding happens once, directly at 24 bits, so the result can
        differ from float32(self.to_float()).
        """
        return round_ratio(self.numerator, self.denominator, SINGLE)

    def to_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def to_string(self) -> str:
        """Canonical text: "N" for integers, "N/D" otherwise."""
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Rational('{self.to_string()}')"

    def __hash__(self) -> int:
        # Integral values hash like the equal int
        if self.denominator == 1:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __eq__(self, other: object) -> bool:
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return self.numerator == b.numerator and self.denominator == b.denominator

    def __lt__(self, other: Operand) -> bool:
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return self.compare(b) < 0

    def __le__(self, other: Operand) -> bool:
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return self.compare(b) <= 0

    def __gt__(self, other: Operand) -> bool:
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return self.compare(b) > 0

    def __ge__(self, other: Operand) -> bool:
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return self.compare(b) >= 0

    def __bool__(self) -> bool:
        return self.numerator != 0

    def __neg__(self) -> Rational:
        return self.negate()

    def __pos__(self) -> Rational:
        return self

    def __abs__(self) -> Rational:
        return self.abs()

    def __add__(self, other: Operand) -> Rational:
        b = _coerce(other)
        return NotImplemented if b is None else self.add(b)

    def __radd__(self, other: Operand) -> Rational:
        b = _coerce(other)
        return NotImplemented if b is None else b.add(self)

    def __sub__(self, other: Operand) -> Rational:
        b = _coerce(other)
        return NotImplemented if b is None else self.subtract(b)

    def __rsub__(self, other: Operand) -> Rational:
        b = _coerce(other)
        return NotImplemented if b is None else b.subtract(self)

    def __mul__(self, other: Operand) -> Rational:
        b = _coerce(other)
        return NotImplemented if b is None else self.multiply(b)

    def __rmul__(self, other: Operand) -> Rational:
        b = _coerce(other)
        return NotImplemented if b is None else b.multiply(self)

    def __truediv__(self, other: Operand) -> Rational:
        b = _coerce(other)
        return NotImplemented if b is None else self.divide(b)

    def __rtruediv__(self, other: Operand) -> Rational:
        b = _coerce(other)
        return NotImplemented if b is None else b.divide(self)

    # // and % truncate toward zero, matching int_divide and remainder
    def __floordiv__(self, other: Operand) -> int:
        b = _coerce(other)
        return NotImplemented if b is None else self.int_divide(b)

    def __rfloordiv__(self, other: Operand) -> int:
        b = _coerce(other)
        return NotImplemented if b is None else b.int_divide(self)

    def __mod__(self, other: Operand) -> Rational:
        b = _coerce(other)
        return NotImplemented if b is None else self.remainder(b)

    def __rmod__(self, other: Operand) -> Rational:
        b = _coerce(other)
        return NotImplemented if b is None else b.remainder(self)

    def __pow__(self, n: int) -> Rational:
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        if n < 0:
            return self.reciprocal() ** -n
        return Rational(self.numerator ** n, self.denominator ** n)

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return _truncating_div(self.numerator, self.denominator)

    def __trunc__(self) -> int:
        return int(self)

    def __floor__(self) -> int:
        return self.floor()

    def __ceil__(self) -> int:
        return self.ceil()


Rational.ZERO = Rational(0)
Rational.ONE = Rational(1)
Rational.ONE_TENTH = Rational(1, 10)


def _coerce(value: object) -> Optional[Rational]:
    """Rational for Rational/int operands, None for anything else."""
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational._unchecked(value, 1)
    return None


def _as_rational(value: Operand) -> Rational:
    b = _coerce(value)
    if b is None:
        raise TypeError(f"Unsupported operand type: {type(value).__name__}")
    return b


def make_rational(numerator: int, denominator: int = 1) -> Rational:
    """
    Create the normalized rational numerator/denominator.

    Raises:
        DivideByZeroError: If denominator is zero.
    """
    return Rational(numerator, denominator)


def compare(a: Rational, b: Rational) -> int:
    """Return -1, 0 or 1 as a < b, a == b or a > b."""
    return a.compare(b)


def to_rational(x: RationalLike) -> Rational:
    """
    Convert a number or literal to a Rational.

    Strings are read as "N" or "N/D" first and as decimal literals second.
    Floats convert exactly.

    Examples:
        >>> to_rational("1/3")
        Rational('1/3')
        >>> to_rational("0.25")
        Rational('1/4')
        >>> to_rational(Fraction(2, 4))
        Rational('1/2')

    Raises:
        FormatError: For malformed strings or non-finite floats.
        TypeError: For unsupported types.
    """
    if isinstance(x, Rational):
        return x
    elif isinstance(x, bool):
        raise TypeError("Cannot convert bool to Rational")
    elif isinstance(x, int):
        return Rational.from_int(x)
    elif isinstance(x, Fraction):
        return Rational.from_fraction(x)
    elif isinstance(x, float):
        return Rational.from_float(x)
    elif isinstance(x, str):
        if '/' in x or _INTEGER.fullmatch(x.strip()):
            return Rational.from_string(x)
        return Rational.from_decimal(x)
    else:
        raise TypeError(f"Cannot convert {type(x).__name__} to Rational")
