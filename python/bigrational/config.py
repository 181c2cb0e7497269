# BigRational - Configuration
# Copyright (c) 2024 BigRational Contributors. All rights reserved.

"""Configuration settings for BigRational."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class BinaryFormat:
    """
    Shape of an IEEE-754 binary floating-point format.

    Attributes:
        precision: Significand bits, including the hidden leading bit.
        emin: Exponent of the smallest normal number.
        emax: Exponent of the largest finite number.
    """
    precision: int
    emin: int
    emax: int

    @classmethod
    def ieee_double(cls) -> BinaryFormat:
        """IEEE-754 binary64."""
        return cls(precision=53, emin=-1022, emax=1023)

    @classmethod
    def ieee_single(cls) -> BinaryFormat:
        """IEEE-754 binary32."""
        return cls(precision=24, emin=-126, emax=127)

    @property
    def min_exponent(self) -> int:
        """Exponent of one ulp of the smallest subnormal."""
        return self.emin - (self.precision - 1)


DOUBLE = BinaryFormat.ieee_double()
SINGLE = BinaryFormat.ieee_single()


# Literal tables used by the vector generator. Add new values at the end so
# existing row indices stay stable.

DEFAULT_ARGUMENTS = (
    "0",
    "1",
    "1/2",
    "-1/10",
    "1/100",
    "2/7",
    "-12345",
    "-345/679",
    "999999999999999/8888888888888",
    "100",
    "-10000000",
    "17",
    "1/17",
    "31/37",
    "1147/59",
    "67673",
)

DEFAULT_CTOR_DATA = (
    "1", "0", "-1", "2", "3", "4", "5", "6", "7", "8", "9", "10",
    "1000", "-1000000", "31", "37", "1147", "59", "1829", "2183", "67673",
)

DEFAULT_DOUBLE_DATA = (
    3.45845952089E-323,  # Denormal
    -6E+20, -1E+20,
    -3.51, -3.5, -3.49, -2.51, -2.5, -2.49,
    -2E-100, 0.0, 7E-08, 0.0001,
    0.1, 0.2, 0.3, 0.4, 0.49999999999999, 0.5, 0.50000001, 0.7, 0.9,
    1.0, 1.00000000000001, 1.1, 1.49999999999999, 1.5, 1.50000000000001,
    1.9999, 2.0, 2.49, 2.5, 2.51, 3.0, 3.49, 3.5, 3.51,
    4.0, 4.1, 4.2, 4.4, 4.5, 4.6, 4.9999, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0,
    15.0, 22.0, 44.0, 85.0, 128.0, 256.0, 256.1, 256.5, 256.7, 300.0,
    876.543210987654, 645000.0, 1000000.5, 1048576.1, 1048576.5,
    1E+10, 1.49E+10, 1.5E+10, 1.51E+10, 3.141592E+10,
    1E+11, 1E+12, 1E+13, 1E+14,
    1E+15, 2E+15, 4E+15, 4.9E+15, 8E+15,
    1E+16, 2E+16, 4E+16, 5E+16, 1E+17, 1E+18, 1E+19,
    1.23456789012346E+19, 1E+20,
    100000000000001.0, 100000000000002.0, 100000000000004.0,
    100000000000008.0, 100000000000016.0, 100000000000032.0,
    100000000000064.0, 100000000000128.0, 100000000000256.0,
    100000000000512.0,
    1E+80,
)

DEFAULT_DECIMAL_DATA = (
    "0", "-0.00", "1", "-1.00", "2.0000", "10", "1e16", "1e-16", "0.1",
    "1.79e+308", "3.79e+308", "4.940656458412465443e-324", "8.0e-324",
    "1.23456e-326", "0.001",
    "2.71828182845904523536028747135266249775724709369995",
    "3.14159265358979323851280895940618620443274267017841339111328125",
    "79228162514264337593543950335",
    "-79228162514264337593543950335",
    "27703302467091960609331879.532",
    "-27703302467091960609331879.532",
    "-3203854.9559968181492513385018",
    "-48466870444188873796420.028868",
    "-545193693242804794.30331374676",
    "0.7629234053338741809892531431",
    "-400453059665371395972.33474452",
    "222851627785191714190050.61676",
    "922337203685477.5811",
    "2305843009.213693953",
    "34359738.368",
    "14757395258967.6412928",
    "1.234e+17", "1.234e+2", "3.0", "5.0000001", "7.000000",
    "-130.00000000000000000750000001",
)

DEFAULT_COMPARISON_DATA = (
    "0", "1", "-1", "2", "10", "0.1", "0.11", "0.11000", "10.000",
    "-10.000", "-10",
    "79228162514264337593543950335",
    "-79228162514264337593543950335",
    "27703302467091960609331879.532",
    "-3203854.9559968181492513385018",
    "-3203854.9559968181492513385017",
    "-48466870444188873796420.0286",
    "-48466870444188873796420.0286000",
)


@dataclass
class Config:
    """
    Configuration for test-vector generation.

    Attributes:
        string_width: Width at which long result strings are split into
                      continuation chunks.
        arguments: Ratio literals combined pairwise by the dyadic tables.
        ctor_data: Integer literals combined pairwise as numerator/denominator.
        double_data: Doubles fed to the exact float constructor.
        decimal_data: Decimal literals fed to the decimal constructor.
        comparison_data: Decimal literals compared pairwise.
    """
    string_width: int = 64
    arguments: tuple[str, ...] = DEFAULT_ARGUMENTS
    ctor_data: tuple[str, ...] = DEFAULT_CTOR_DATA
    double_data: tuple[float, ...] = DEFAULT_DOUBLE_DATA
    decimal_data: tuple[str, ...] = DEFAULT_DECIMAL_DATA
    comparison_data: tuple[str, ...] = DEFAULT_COMPARISON_DATA

    def __post_init__(self):
        if self.string_width <= 0:
            raise ValueError(f"string_width must be positive, got {self.string_width}")
        # Accept lists from callers and keep the tables immutable
        self.arguments = tuple(self.arguments)
        self.ctor_data = tuple(self.ctor_data)
        self.double_data = tuple(float(d) for d in self.double_data)
        self.decimal_data = tuple(self.decimal_data)
        self.comparison_data = tuple(self.comparison_data)

    @classmethod
    def small(cls) -> Config:
        """Reduced tables for quick runs."""
        return cls(
            arguments=("0", "1", "1/2", "-1/10", "2/7", "-345/679"),
            ctor_data=("1", "0", "-1", "6", "-4"),
            double_data=(0.0, 0.1, -2.5, 1E+20, 3.45845952089E-323),
            decimal_data=("0", "-1.00", "0.1", "1e16", "1.234e+2"),
            comparison_data=("0", "1", "-1", "0.1", "0.11000"),
        )

    def __repr__(self) -> str:
        return (
            f"Config(string_width={self.string_width}, "
            f"arguments={len(self.arguments)}, "
            f"ctor_data={len(self.ctor_data)}, "
            f"double_data={len(self.double_data)})"
        )
