# BigRational
# Copyright (c) 2024 BigRational Contributors. All rights reserved.

"""
BigRational - Exact Arbitrary-Precision Rational Arithmetic.

Rationals are immutable numerator/denominator pairs of Python ints, always
in lowest terms with a positive denominator. Conversions to and from IEEE
floating point are exact or correctly rounded.

Example:
    >>> import bigrational as br
    >>> br.Rational(1, 2) + br.Rational(1, 3)
    Rational('5/6')
    >>> br.Rational.from_string("1/6") - br.Rational(-4, -8)
    Rational('-1/3')
    >>> br.Rational(1, 3).to_float()
    0.3333333333333333

Key Features:
    - Single normalization point for every constructor and operation
    - Exact construction from doubles and decimal literals
    - Correctly rounded conversion to double and single precision
    - Tagged results for batch evaluation and test-vector generation
"""

__version__ = "0.2.0"

# Core type and constructors
from .rational import (
    Rational,
    make_rational,
    compare,
    to_rational,
)

# IEEE-754 helpers
from .binary import (
    decompose_double,
    round_ratio,
    double_bits,
    single_bits,
)

# Configuration
from .config import BinaryFormat, Config, DOUBLE, SINGLE

# Result types
from .result import ResultInfo, OpResult, attempt

# Vector generation
from .vectors import VectorRow, VectorTable, VectorSet, generate

# Exceptions
from .exceptions import (
    BigRationalError,
    DivideByZeroError,
    FormatError,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Rational",
    "make_rational",
    "compare",
    "to_rational",
    # IEEE-754
    "decompose_double",
    "round_ratio",
    "double_bits",
    "single_bits",
    # Configuration
    "BinaryFormat",
    "Config",
    "DOUBLE",
    "SINGLE",
    # Results
    "ResultInfo",
    "OpResult",
    "attempt",
    # Vectors
    "VectorRow",
    "VectorTable",
    "VectorSet",
    "generate",
    # Exceptions
    "BigRationalError",
    "DivideByZeroError",
    "FormatError",
]
