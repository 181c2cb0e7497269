# Tests for cli.py - command line front-end

import json
import pytest

from bigrational.cli import main, build_parser
from bigrational.vectors import VectorSet


class TestEval:
    """Tests for the eval subcommand."""

    def test_add(self, capsys):
        assert main(['eval', '1/2', '+', '1/3']) == 0
        assert capsys.readouterr().out.strip() == "5/6"

    def test_subtract(self, capsys):
        assert main(['eval', '1/6', '-', '4/8']) == 0
        assert capsys.readouterr().out.strip() == "-1/3"

    def test_decimal_operand(self, capsys):
        assert main(['eval', '0.5', '*', '4']) == 0
        assert capsys.readouterr().out.strip() == "2"

    def test_int_divide_and_mod(self, capsys):
        assert main(['eval', '7/2', 'div', '-1']) == 0
        assert main(['eval', '7/2', 'mod', '-1']) == 0
        assert capsys.readouterr().out.split() == ["-3", "1/2"]

    def test_compare(self, capsys):
        assert main(['eval', '1/2', 'cmp', '1/3']) == 0
        assert capsys.readouterr().out.strip() == "1"

    def test_divide_by_zero(self, capsys):
        assert main(['eval', '1', '/', '0']) == 1
        assert capsys.readouterr().out.strip() == "error: Division by zero"

    def test_bad_operand(self, capsys):
        assert main(['eval', 'abc', '+', '1']) == 1
        assert capsys.readouterr().out.startswith("error: Invalid decimal literal")

    def test_unknown_operator(self):
        with pytest.raises(SystemExit):
            main(['eval', '1', '^', '2'])


class TestConvert:
    """Tests for the convert subcommand."""

    def test_decimal_literal(self, capsys):
        assert main(['convert', '0.1']) == 0
        out = capsys.readouterr().out
        assert "decimal: 1/10" in out
        assert "binary:  3602879701896397/36028797018963968" in out
        assert "double:  0.1 ($3FB999999999999A)" in out

    def test_ratio_single(self, capsys):
        assert main(['convert', '1/3', '--single']) == 0
        out = capsys.readouterr().out
        assert "ratio:   1/3" in out
        assert "($3EAAAAAB)" in out

    def test_decimal_beyond_double_range(self, capsys):
        assert main(['convert', '3.79e+308']) == 0
        out = capsys.readouterr().out
        assert out.startswith("decimal: 379")
        assert "binary:" not in out
        assert "double:  inf ($7FF0000000000000)" in out

    def test_invalid(self, capsys):
        assert main(['convert', 'nan']) == 1
        assert capsys.readouterr().out.startswith("error:")


class TestGenerate:
    """Tests for the generate subcommand."""

    def test_json(self, tmp_path, capsys):
        path = tmp_path / "v.json"
        assert main(['generate', '--small', '-o', str(path)]) == 0
        assert "Wrote 15 tables" in capsys.readouterr().out

        data = json.loads(path.read_text())
        assert len(data['tables']) == 15
        assert len(VectorSet.load(str(path)).table('AddResults')) == 36

    def test_text(self, tmp_path):
        path = tmp_path / "v.inc"
        assert main(['-v', 'generate', '--small', '--text', '-o', str(path)]) == 0
        assert "CtorResults: array" in path.read_text()


class TestParser:
    """Tests for argument parsing."""

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_defaults(self):
        args = build_parser().parse_args(['generate'])
        assert args.output == 'rational_vectors.json'
        assert not args.small
        assert not args.verbose
