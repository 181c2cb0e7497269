# BigRational - Result Types
# Copyright (c) 2024 BigRational Contributors. All rights reserved.

"""
Tagged success/failure results for rational operations.

The operations in rational.py raise DivideByZeroError and FormatError.
attempt() runs an operation and turns those two failures into an OpResult
tag, so table builders and other batch callers can record the failure
instead of aborting.

Example:
    >>> from bigrational.rational import Rational
    >>> attempt(Rational(1, 2).divide, Rational(0))
    OpResult(info=DIVIDE_BY_ZERO, message='Division by zero')
    >>> attempt(Rational(1, 2).add, Rational(1, 3)).value
    Rational('5/6')
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

from .exceptions import DivideByZeroError, FormatError
from .rational import Rational


# Values an operation can produce
ResultValue = Union[Rational, int, float]


class ResultInfo(Enum):
    """Outcome tag of an operation."""
    OK = "Ok"
    DIVIDE_BY_ZERO = "DivideByZero"
    FORMAT = "Format"


@dataclass(frozen=True)
class OpResult:
    """
    Result of a single operation.

    Exactly one of value (for OK) or message (for failures) is meaningful.
    """
    info: ResultInfo
    value: Optional[ResultValue] = None
    message: str = ""

    @classmethod
    def success(cls, value: ResultValue) -> OpResult:
        return cls(ResultInfo.OK, value=value)

    @classmethod
    def failure(cls, info: ResultInfo, message: str) -> OpResult:
        if info is ResultInfo.OK:
            raise ValueError("A failure needs a failure tag")
        return cls(info, message=message)

    @property
    def ok(self) -> bool:
        return self.info is ResultInfo.OK

    def unwrap(self) -> ResultValue:
        """
        Return the value, or raise the exception the failure stands for.

        Raises:
            DivideByZeroError: For DIVIDE_BY_ZERO results.
            FormatError: For FORMAT results.
        """
        if self.info is ResultInfo.DIVIDE_BY_ZERO:
            raise DivideByZeroError(self.message)
        if self.info is ResultInfo.FORMAT:
            raise FormatError(self.message)
        return self.value

    def text(self) -> str:
        """Value in canonical text form, or the failure message."""
        if not self.ok:
            return self.message
        return str(self.value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        if isinstance(self.value, Rational):
            kind = 'rational'
        elif isinstance(self.value, float):
            kind = 'float'
        elif isinstance(self.value, int):
            kind = 'int'
        else:
            kind = None
        return {
            'info': self.info.value,
            'kind': kind,
            'val': self.text() if kind != 'float' else repr(self.value),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OpResult:
        """Rebuild a result written by to_dict()."""
        info = ResultInfo(data['info'])
        if info is not ResultInfo.OK:
            return cls.failure(info, data['val'])

        kind = data.get('kind')
        if kind == 'rational':
            value = Rational.from_string(data['val'])
        elif kind == 'float':
            value = float(data['val'])
        elif kind == 'int':
            value = int(data['val'])
        else:
            raise ValueError(f"Unknown result kind: {kind!r}")
        return cls.success(value)

    def __str__(self) -> str:
        return self.text()

    def __repr__(self) -> str:
        if self.ok:
            return f"OpResult(info=OK, value={self.value!r})"
        return f"OpResult(info={self.info.name}, message={self.message!r})"


def attempt(op: Callable[..., ResultValue], *args: Any) -> OpResult:
    """
    Run op(*args) and tag the outcome.

    Only DivideByZeroError and FormatError become failure tags; any other
    exception is a programming error and propagates.
    """
    try:
        value = op(*args)
    except DivideByZeroError as e:
        return OpResult.failure(ResultInfo.DIVIDE_BY_ZERO, str(e))
    except FormatError as e:
        return OpResult.failure(ResultInfo.FORMAT, str(e))
    return OpResult.success(value)
