# Tests for binary.py - IEEE-754 decomposition and rounding

import math
import sys
import pytest

from bigrational.binary import decompose_double, round_ratio, double_bits, single_bits
from bigrational.config import BinaryFormat, DOUBLE, SINGLE
from bigrational.exceptions import DivideByZeroError, FormatError


class TestDecomposeDouble:
    """Tests for decompose_double()."""

    def test_one(self):
        assert decompose_double(1.0) == (2**52, -52)

    def test_negative(self):
        assert decompose_double(-2.5) == (-5 * 2**50, -51)

    def test_one_tenth(self):
        m, e = decompose_double(0.1)
        assert (m, e) == (7205759403792794, -56)

    def test_subnormal(self):
        assert decompose_double(5e-324) == (1, -1074)

    def test_zero(self):
        assert decompose_double(0.0) == (0, -1074)
        assert decompose_double(-0.0) == (0, -1074)

    def test_reconstructs_value(self):
        for x in (1e80, -6e20, 3.45845952089E-323, sys.float_info.max, 876.543210987654):
            m, e = decompose_double(x)
            assert math.ldexp(m, e) == x

    @pytest.mark.parametrize("x", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, x):
        with pytest.raises(FormatError, match="non-finite"):
            decompose_double(x)


class TestBits:
    """Raw bit patterns."""

    def test_double_bits(self):
        assert double_bits(1.0) == 0x3FF0000000000000
        assert double_bits(-0.0) == 0x8000000000000000
        assert double_bits(0.1) == 0x3FB999999999999A
        assert double_bits(math.inf) == 0x7FF0000000000000

    def test_single_bits(self):
        assert single_bits(1.0) == 0x3F800000
        assert single_bits(0.5) == 0x3F000000
        assert single_bits(-2.0) == 0xC0000000


class TestRoundRatio:
    """Tests for round_ratio() - correctly rounded conversion."""

    def test_zero(self):
        assert round_ratio(0, 7) == 0.0

    def test_exact(self):
        assert round_ratio(3, 8) == 0.375
        assert round_ratio(-5, 2) == -2.5

    def test_matches_int_true_division(self):
        # CPython's int / int is correctly rounded
        cases = [(1, 3), (2, 7), (-345, 679), (999999999999999, 8888888888888), (10**30 + 7, 3)]
        for n, d in cases:
            assert round_ratio(n, d) == n / d

    def test_negative_denominator(self):
        assert round_ratio(1, -4) == -0.25

    def test_zero_denominator(self):
        with pytest.raises(DivideByZeroError):
            round_ratio(1, 0)

    def test_ties_to_even(self):
        assert round_ratio(2**53 + 1, 1) == 2.0**53
        assert round_ratio(2**53 + 3, 1) == 2.0**53 + 4
        # Just above the tie rounds up
        assert round_ratio(2 * (2**53 + 1) + 1, 2) == 2.0**53 + 2

    def test_largest_finite(self):
        assert round_ratio((2**53 - 1) * 2**971, 1) == sys.float_info.max

    def test_overflow(self):
        assert round_ratio(2**1024, 1) == math.inf
        assert round_ratio(-(2**1024), 1) == -math.inf
        # Halfway between max and 2**1024 rounds to even, which overflows
        assert round_ratio((2**54 - 1) * 2**970, 1) == math.inf

    def test_subnormals(self):
        assert round_ratio(1, 2**1074) == 5e-324
        assert round_ratio(3, 2**1076) == 5e-324
        assert round_ratio(1, 2**1075) == 0.0
        assert round_ratio(3, 2**1075) == 2 * 5e-324

    def test_negative_underflow_keeps_sign(self):
        r = round_ratio(-1, 2**2000)
        assert r == 0.0
        assert math.copysign(1.0, r) == -1.0

    def test_single(self):
        assert round_ratio(1, 2, SINGLE) == 0.5
        assert single_bits(round_ratio(1, 3, SINGLE)) == 0x3EAAAAAB
        assert single_bits(round_ratio(1, 10, SINGLE)) == 0x3DCCCCCD

    def test_single_overflow(self):
        assert round_ratio(2**128, 1, SINGLE) == math.inf
        assert round_ratio((2**24 - 1) * 2**104, 1, SINGLE) == 3.4028234663852886e38

    def test_single_subnormal(self):
        assert round_ratio(1, 2**149, SINGLE) == 2.0**-149
        assert round_ratio(1, 2**150, SINGLE) == 0.0

    def test_custom_format(self):
        # 3-bit significand: 11/8 = 1.011b and 9/8 = 1.001b are both ties
        tiny = BinaryFormat(precision=3, emin=-2, emax=3)
        assert round_ratio(11, 8, tiny) == 1.5
        assert round_ratio(9, 8, tiny) == 1.0
        assert round_ratio(100, 1, tiny) == math.inf

    def test_default_is_double(self):
        assert round_ratio(1, 3) == round_ratio(1, 3, DOUBLE)
