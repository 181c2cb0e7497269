# BigRational - Exceptions
# Copyright (c) 2024 BigRational Contributors. All rights reserved.

"""Exception hierarchy for BigRational."""

from __future__ import annotations
from typing import Optional


class BigRationalError(Exception):
    """Base class for all BigRational exceptions."""
    pass


class DivideByZeroError(BigRationalError, ZeroDivisionError):
    """
    Raised when an operation needs a non-zero divisor and gets zero.

    Covers construction from a zero denominator, the reciprocal of zero and
    divide, int_divide or remainder with a zero right-hand operand.
    """

    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)


class FormatError(BigRationalError, ValueError):
    """Raised when input cannot be turned into a finite rational value."""

    def __init__(self, message: str, text: Optional[str] = None):
        if text is not None:
            message = f'{message}: "{text}"'
        super().__init__(message)
        self.text = text
