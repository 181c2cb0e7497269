# BigRational - Command Line Interface
# Copyright (c) 2024 BigRational Contributors. All rights reserved.

"""Command-line interface for BigRational."""

from __future__ import annotations
import argparse
import logging
import math
from typing import Optional

from . import __version__
from .binary import double_bits, single_bits
from .config import Config
from .exceptions import BigRationalError
from .rational import Rational, to_rational
from .result import attempt
from .vectors import generate


logger = logging.getLogger(__name__)


OPERATIONS = {
    '+': Rational.add,
    '-': Rational.subtract,
    '*': Rational.multiply,
    '/': Rational.divide,
    'div': Rational.int_divide,
    'mod': Rational.remainder,
    'cmp': Rational.compare,
}


def run_generate(output: str, small: bool, text: bool) -> int:
    """Generate the vector tables and write them to output."""
    config = Config.small() if small else Config()
    logger.debug("Generating with %r", config)
    vs = generate(config)

    if text:
        with open(output, 'w') as f:
            f.write(vs.to_text(config.string_width))
    else:
        vs.save(output)

    print(f"Wrote {len(vs)} tables to {output}")
    return 0


def run_eval(lhs: str, op: str, rhs: str) -> int:
    """Evaluate a single binary operation and print the result."""
    try:
        a = to_rational(lhs)
        b = to_rational(rhs)
    except BigRationalError as e:
        print(f"error: {e}")
        return 1

    result = attempt(OPERATIONS[op], a, b)
    if not result.ok:
        print(f"error: {result.message}")
        return 1
    print(result.text())
    return 0


def run_convert(value: str, single: bool) -> int:
    """Show exact ratios for a literal and its correctly rounded float."""
    try:
        if '/' in value:
            r = Rational.from_string(value)
            print(f"ratio:   {r}")
        else:
            r = Rational.from_decimal(value)
            print(f"decimal: {r}")
            nearest = float(value)
            if math.isfinite(nearest):
                print(f"binary:  {Rational.from_float(nearest)}")
    except BigRationalError as e:
        print(f"error: {e}")
        return 1

    if single:
        f = r.to_single()
        print(f"single:  {f!r} (${single_bits(f):08X})")
    else:
        d = r.to_float()
        print(f"double:  {d!r} (${double_bits(d):016X})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='bigrational',
        description="Exact rational arithmetic and test-vector generation",
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    parser.add_argument('-v', '--verbose', action='store_true', help="enable debug logging")
    sub = parser.add_subparsers(dest='command', required=True)

    gen = sub.add_parser('generate', help="write result tables for the literal data")
    gen.add_argument('-o', '--output', default='rational_vectors.json', help="output file")
    gen.add_argument('--small', action='store_true', help="use the reduced literal tables")
    gen.add_argument('--text', action='store_true', help="write the fixed-column text layout instead of JSON")

    ev = sub.add_parser('eval', help="evaluate A OP B")
    ev.add_argument('lhs')
    ev.add_argument('op', choices=sorted(OPERATIONS))
    ev.add_argument('rhs')

    conv = sub.add_parser('convert', help="show exact and rounded forms of a value")
    conv.add_argument('value')
    conv.add_argument('--single', action='store_true', help="round to single precision")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Entry point for the bigrational command.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == 'generate':
        return run_generate(args.output, args.small, args.text)
    elif args.command == 'eval':
        return run_eval(args.lhs, args.op, args.rhs)
    else:
        return run_convert(args.value, args.single)
