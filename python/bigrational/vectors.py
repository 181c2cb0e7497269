# BigRational - Test Vector Generation
# Copyright (c) 2024 BigRational Contributors. All rights reserved.

"""
Result tables for a fixed set of rational literals.

Every operation is run over the literal tables in Config through attempt(),
so expected failures (division by zero, malformed input) end up as tagged
rows instead of aborting the run. The resulting VectorSet can be saved as
JSON or rendered in a fixed-column text layout for other test suites to
consume.

Example:
    >>> from bigrational.vectors import generate
    >>> from bigrational.config import Config
    >>> vs = generate(Config.small())
    >>> vs.table('AddResults').rows[3].label
    '   3: (0) + (-1/10)'
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
import json
import logging
from typing import Any, Callable, Optional

from .binary import double_bits, single_bits
from .config import Config
from .rational import Rational, make_rational
from .result import OpResult, ResultInfo, attempt


logger = logging.getLogger(__name__)


@dataclass
class VectorRow:
    """One labelled result, with the raw IEEE bits for float tables."""
    label: str
    result: OpResult
    bits: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data = {'label': self.label, **self.result.to_dict()}
        if self.bits is not None:
            data['bits'] = self.bits
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VectorRow:
        return cls(
            label=data['label'],
            result=OpResult.from_dict(data),
            bits=data.get('bits'),
        )


@dataclass
class VectorTable:
    """A named list of result rows."""
    name: str
    rows: list[VectorRow] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    def failures(self) -> list[VectorRow]:
        return [row for row in self.rows if not row.result.ok]

    def to_dict(self) -> dict[str, Any]:
        return {'name': self.name, 'rows': [row.to_dict() for row in self.rows]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VectorTable:
        return cls(data['name'], [VectorRow.from_dict(r) for r in data['rows']])

    def to_text(self, width: int = 64) -> str:
        """Render as a fixed-column array literal."""
        lines = [f"  {self.name}: array[0..{len(self.rows) - 1}] of TTestResult =", "  ("]
        for i, row in enumerate(self.rows):
            is_last = i == len(self.rows) - 1
            if row.bits is not None:
                lines.append(_format_bits(row, is_last))
            else:
                lines.extend(format_result(row.result, is_last, row.label, width))
        lines.append("  );")
        lines.append("")
        return '\n'.join(lines)


@dataclass
class VectorSet:
    """All generated tables plus generation metadata."""
    tables: dict[str, VectorTable] = field(default_factory=dict)
    generated: str = ""
    arguments: list[str] = field(default_factory=list)

    def add(self, table: VectorTable) -> None:
        self.tables[table.name] = table

    def table(self, name: str) -> VectorTable:
        return self.tables[name]

    def __len__(self) -> int:
        return len(self.tables)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            'generated': self.generated,
            'arguments': list(self.arguments),
            'tables': [t.to_dict() for t in self.tables.values()],
        }

    def save(self, path: str) -> None:
        """Save the vector set to a JSON file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: str) -> VectorSet:
        """Load a vector set from a JSON file."""
        with open(path) as f:
            data = json.load(f)

        vs = cls(generated=data.get('generated', ''), arguments=data.get('arguments', []))
        for t in data['tables']:
            vs.add(VectorTable.from_dict(t))
        return vs

    def to_text(self, width: int = 64) -> str:
        header = [
            "//",
            f"// Test data for rational arithmetic, generated {self.generated}.",
            "//",
            "// Do not modify the generated data in this file. Modify the data in the generator.",
            "//",
            "",
        ]
        return '\n'.join(header) + '\n' + '\n'.join(t.to_text(width) for t in self.tables.values())


# =============================================================================
# TEXT LAYOUT
# =============================================================================

def split_string(s: str, width: int) -> list[str]:
    """Split s into chunks of at most width characters ([''] for empty s)."""
    if not s:
        return [""]
    return [s[i:i + width] for i in range(0, len(s), width)]


def format_result(result: OpResult, is_last: bool, comment: str, width: int = 64) -> list[str]:
    """Lay out one result as '(Info: ...; Val: ...)' lines with a trailing comment."""
    info = f"tri{result.info.value};"
    chunks = split_string(result.text(), width)
    lines = []
    for k, chunk in enumerate(chunks):
        if k == 0:
            line = f"    (Info: {info:<17} Val: '{chunk}'"
        else:
            line = f"{' ' * 34}'{chunk}'"
        if k < len(chunks) - 1:
            lines.append(line + " + ")
        else:
            line_end = ")" + ("" if is_last else ",")
            pad = max(width + 4 - len(line_end) - len(chunk), 1)
            lines.append(f"{line}{line_end}{' ' * pad}// {comment}")
    return lines


def _format_bits(row: VectorRow, is_last: bool) -> str:
    sep = " " if is_last else ","
    return f"    {row.bits}{sep}    // {row.label} --> {row.result.text()}"


# =============================================================================
# TABLE BUILDERS
# =============================================================================

def _parse_arguments(arguments: tuple[str, ...]) -> list[Rational]:
    return [Rational.from_string(a) for a in arguments]


def check_arguments(arguments: tuple[str, ...]) -> list[tuple[int, str, str]]:
    """
    Find argument literals that are not in canonical form.

    Returns:
        (index, literal, canonical) for every literal whose canonical string
        differs from the literal itself.
    """
    mismatches = []
    for i, literal in enumerate(arguments):
        canonical = Rational.from_string(literal).to_string()
        if canonical.lower() != literal.strip().lower():
            mismatches.append((i, literal, canonical))
    return mismatches


def ctor_results(ctor_data: tuple[str, ...]) -> VectorTable:
    """Every ordered pair of integers as numerator/denominator."""
    table = VectorTable('CtorResults')
    values = [int(s) for s in ctor_data]
    n = 0
    for i, x in enumerate(values):
        for j, y in enumerate(values):
            table.rows.append(VectorRow(
                f"({i:2d},{j:2d}) {n:4d}: {x}/{y}",
                attempt(make_rational, x, y),
            ))
            n += 1
    return table


def double_ctor_results(double_data: tuple[float, ...]) -> VectorTable:
    table = VectorTable('DoubleCtorResults')
    for i, d in enumerate(double_data):
        table.rows.append(VectorRow(
            f"({i:2d}) {i:4d}: Rational.from_float({d:.20g})",
            attempt(Rational.from_float, d),
        ))
    return table


def decimal_ctor_results(decimal_data: tuple[str, ...]) -> VectorTable:
    table = VectorTable('DecimalCtorResults')
    for i, s in enumerate(decimal_data):
        table.rows.append(VectorRow(
            f"({i:2d}): Rational.from_decimal('{s}')",
            attempt(Rational.from_decimal, s),
        ))
    return table


def dyadic_results(
    name: str,
    arguments: tuple[str, ...],
    op: Callable[[Rational, Rational], Any],
    symbol: str,
) -> VectorTable:
    """Apply op to every ordered pair of arguments."""
    table = VectorTable(name)
    values = _parse_arguments(arguments)
    n = 0
    for i, a in enumerate(values):
        for j, b in enumerate(values):
            result = attempt(op, a, b)
            if result.info is ResultInfo.DIVIDE_BY_ZERO:
                logger.debug("(%2d,%2d) - Division error: %s -- %s %s %s",
                             i, j, result.message, a, symbol, b)
            table.rows.append(VectorRow(
                f"{n:4d}: ({arguments[i]}) {symbol} ({arguments[j]})",
                result,
            ))
            n += 1
    return table


def monadic_results(
    name: str,
    arguments: tuple[str, ...],
    op: Callable[[Rational], Any],
    prefix: str,
) -> VectorTable:
    """Apply op to every argument."""
    table = VectorTable(name)
    for literal, value in zip(arguments, _parse_arguments(arguments)):
        table.rows.append(VectorRow(f"{prefix}({literal})", attempt(op, value)))
    return table


def double_value_results(arguments: tuple[str, ...]) -> VectorTable:
    table = VectorTable('DoubleValueResults')
    for i, (literal, value) in enumerate(zip(arguments, _parse_arguments(arguments))):
        d = value.to_float()
        table.rows.append(VectorRow(
            f"{i:2d}: {literal}",
            OpResult.success(d),
            bits=f"${double_bits(d):016X}",
        ))
    return table


def single_value_results(arguments: tuple[str, ...]) -> VectorTable:
    table = VectorTable('SingleValueResults')
    for i, (literal, value) in enumerate(zip(arguments, _parse_arguments(arguments))):
        f = value.to_single()
        table.rows.append(VectorRow(
            f"{i:2d}: {literal}",
            OpResult.success(f),
            bits=f"${single_bits(f):08X}",
        ))
    return table


def comparison_results(comparison_data: tuple[str, ...]) -> VectorTable:
    """Sign of the comparison for every ordered pair of decimal literals."""
    table = VectorTable('CompResults')
    values = [Rational.from_decimal(s) for s in comparison_data]
    n = 0
    for i, a in enumerate(values):
        for j, b in enumerate(values):
            table.rows.append(VectorRow(
                f"{n:4d}: ({comparison_data[i]}) cmp ({comparison_data[j]})",
                OpResult.success(a.compare(b)),
            ))
            n += 1
    return table


def to_string_results(arguments: tuple[str, ...]) -> VectorTable:
    table = VectorTable('ToStringResults')
    for literal in arguments:
        table.rows.append(VectorRow(f"{literal}.to_string", attempt(Rational.from_string, literal)))
    return table


def generate(config: Optional[Config] = None) -> VectorSet:
    """
    Build every result table for the literals in config.

    Args:
        config: Literal tables to use (defaults to Config()).

    Returns:
        A VectorSet with one table per operation, in generation order.
    """
    if config is None:
        config = Config()

    for i, literal, canonical in check_arguments(config.arguments):
        logger.warning("%d: %s --> %s (argument is not in canonical form)", i, canonical, literal)

    args = config.arguments
    vs = VectorSet(
        generated=datetime.now(timezone.utc).strftime("%d %b, %Y, %H:%M:%S"),
        arguments=list(args),
    )

    builders: list[Callable[[], VectorTable]] = [
        lambda: ctor_results(config.ctor_data),
        lambda: double_ctor_results(config.double_data),
        lambda: decimal_ctor_results(config.decimal_data),
        lambda: dyadic_results('AddResults', args, Rational.add, '+'),
        lambda: dyadic_results('SubtractResults', args, Rational.subtract, '-'),
        lambda: dyadic_results('MultiplyResults', args, Rational.multiply, '*'),
        lambda: dyadic_results('DivideResults', args, Rational.divide, '/'),
        lambda: dyadic_results('IntDivideResults', args, Rational.int_divide, 'div'),
        lambda: dyadic_results('RemainderResults', args, Rational.remainder, 'mod'),
        lambda: monadic_results('NegateResults', args, Rational.negate, '-'),
        lambda: monadic_results('ReciprocalResults', args, Rational.reciprocal, '1/'),
        lambda: single_value_results(args),
        lambda: double_value_results(args),
        lambda: comparison_results(config.comparison_data),
        lambda: to_string_results(args),
    ]

    for build in builders:
        table = build()
        logger.info("Generated %s: %d rows, %d failures",
                    table.name, len(table), len(table.failures()))
        vs.add(table)

    return vs
