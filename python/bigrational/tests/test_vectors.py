# Tests for vectors.py - result table generation

import logging
import pytest

from bigrational.config import Config
from bigrational.rational import Rational
from bigrational.result import OpResult, ResultInfo
from bigrational.vectors import (
    VectorSet,
    check_arguments,
    comparison_results,
    ctor_results,
    double_ctor_results,
    double_value_results,
    dyadic_results,
    format_result,
    generate,
    single_value_results,
    split_string,
)


@pytest.fixture(scope="module")
def small_set():
    return generate(Config.small())


class TestGenerate:
    """Tests for generate()."""

    def test_all_tables_present(self, small_set):
        assert len(small_set) == 15
        assert list(small_set.tables)[:4] == [
            'CtorResults', 'DoubleCtorResults', 'DecimalCtorResults', 'AddResults',
        ]

    def test_row_counts(self, small_set):
        n = len(Config.small().arguments)
        assert len(small_set.table('CtorResults')) == 25
        assert len(small_set.table('AddResults')) == n * n
        assert len(small_set.table('NegateResults')) == n
        assert len(small_set.table('CompResults')) == 25

    def test_add_row(self, small_set):
        row = small_set.table('AddResults').rows[2 * 6 + 3]
        assert row.label == "  15: (1/2) + (-1/10)"
        assert row.result.value == Rational(2, 5)

    def test_division_failures(self, small_set):
        # The argument "0" is the only zero divisor
        for name in ('DivideResults', 'IntDivideResults', 'RemainderResults'):
            failures = small_set.table(name).failures()
            assert len(failures) == 6
            assert all(f.result.info is ResultInfo.DIVIDE_BY_ZERO for f in failures)
        assert len(small_set.table('ReciprocalResults').failures()) == 1

    def test_non_failing_tables(self, small_set):
        for name in ('AddResults', 'SubtractResults', 'MultiplyResults', 'NegateResults',
                     'DoubleCtorResults', 'DecimalCtorResults', 'ToStringResults'):
            assert small_set.table(name).failures() == []

    def test_default_config(self):
        vs = generate()
        assert len(vs.table('AddResults')) == 16 * 16
        assert vs.table('IntDivideResults').rows[-1].result.value == 1

    def test_logs_tables(self, caplog):
        with caplog.at_level(logging.INFO, logger="bigrational.vectors"):
            generate(Config.small())
        assert "Generated AddResults" in caplog.text
        assert "Generated DivideResults: 36 rows, 6 failures" in caplog.text

    def test_warns_about_non_canonical_arguments(self, caplog):
        config = Config.small()
        config.arguments = ("1", "2/4")
        with caplog.at_level(logging.WARNING, logger="bigrational.vectors"):
            generate(config)
        assert "not in canonical form" in caplog.text


class TestTableBuilders:
    """Tests for individual table builders."""

    def test_ctor_results(self):
        table = ctor_results(("6", "-4", "0"))
        assert table.rows[1].result.value == Rational(-3, 2)
        assert table.rows[1].label == "( 0, 1)    1: 6/-4"
        assert table.rows[2].result.info is ResultInfo.DIVIDE_BY_ZERO
        zero_row = table.rows[2 * 3 + 0]
        assert zero_row.result.text() == "0"

    def test_double_ctor_results(self):
        table = double_ctor_results((0.5, 3.45845952089E-323))
        assert table.rows[0].result.value == Rational(1, 2)
        assert table.rows[1].result.value == Rational(7, 2**1074)

    def test_dyadic_with_custom_op(self):
        table = dyadic_results('Max', ("1/2", "1/3"), lambda a, b: a if a >= b else b, 'max')
        assert [row.result.value for row in table.rows] == [
            Rational(1, 2), Rational(1, 2), Rational(1, 2), Rational(1, 3),
        ]
        assert table.rows[1].label == "   1: (1/2) max (1/3)"

    def test_double_value_bits(self):
        table = double_value_results(("1/2", "1/10"))
        assert table.rows[0].bits == "$3FE0000000000000"
        assert table.rows[1].bits == "$3FB999999999999A"
        assert table.rows[1].result.value == 0.1

    def test_single_value_bits(self):
        table = single_value_results(("1/10", "1/3"))
        assert table.rows[0].bits == "$3DCCCCCD"
        assert table.rows[1].bits == "$3EAAAAAB"

    def test_comparison_results(self):
        table = comparison_results(("0.11", "0.11000", "-10"))
        assert [row.result.value for row in table.rows] == [0, 0, 1, 0, 0, 1, -1, -1, 0]

    def test_check_arguments(self):
        assert check_arguments(("1/2", "2/4", "-0", "17")) == [(1, "2/4", "1/2"), (2, "-0", "0")]


class TestTextLayout:
    """Tests for the fixed-column text output."""

    def test_split_string(self):
        assert split_string("abcdef", 4) == ["abcd", "ef"]
        assert split_string("", 4) == [""]

    def test_format_result_single_line(self):
        lines = format_result(OpResult.success(Rational(1, 2)), False, "x")
        assert len(lines) == 1
        assert lines[0].startswith(f"    (Info: {'triOk;':<17} Val: '1/2'),")
        assert lines[0].endswith("// x")

    def test_format_result_last_row(self):
        lines = format_result(OpResult.success(Rational(1, 2)), True, "x")
        assert "Val: '1/2') " in lines[0]

    def test_format_result_wraps(self):
        lines = format_result(OpResult.success(Rational(12345678, 7)), False, "long", width=4)
        assert len(lines) == 3
        assert lines[0].endswith("'1234' + ")
        assert lines[1].strip() == "'5678' +"
        assert "'/7')," in lines[2]

    def test_format_failure(self):
        lines = format_result(OpResult.failure(ResultInfo.DIVIDE_BY_ZERO, "Division by zero"), True, "c")
        assert "triDivideByZero;" in lines[0]

    def test_vector_set_text(self, small_set):
        text = small_set.to_text()
        assert "AddResults: array[0..35] of TTestResult =" in text
        assert "triDivideByZero" in text
        assert "$3FE0000000000000" in text


class TestPersistence:
    """Tests for VectorSet save/load."""

    def test_save_load(self, small_set, tmp_path):
        path = tmp_path / "vectors.json"
        small_set.save(str(path))
        loaded = VectorSet.load(str(path))

        assert loaded.generated == small_set.generated
        assert loaded.arguments == list(Config.small().arguments)
        assert list(loaded.tables) == list(small_set.tables)
        for name, table in small_set.tables.items():
            assert loaded.table(name).rows == table.rows
