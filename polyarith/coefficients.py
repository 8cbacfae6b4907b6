"""Coefficient kinds and the arithmetic that polynomials perform on them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

Number = Union[int, float]


class ValueKind(Enum):
    """The numeric kind stored in a polynomial's coefficients."""

    INT = "int"
    DOUBLE = "double"


@dataclass(frozen=True)
class CoefficientType:
    """Arithmetic and formatting rules for one kind of coefficient."""

    kind: ValueKind

    @property
    def one(self) -> Number:
        """The multiplicative identity of this kind."""
        return 1 if self.kind is ValueKind.INT else 1.0

    @property
    def zero(self) -> Number:
        """The additive identity of this kind."""
        return 0 if self.kind is ValueKind.INT else 0.0

    def coerce(self, value: Number) -> Number:
        """Convert ``value`` to this kind; integers truncate toward zero."""
        if self.kind is ValueKind.INT:
            return int(value)
        return float(value)

    def add(self, a: Number, b: Number) -> Number:
        return self.coerce(a + b)

    def multiply(self, a: Number, b: Number) -> Number:
        return self.coerce(a * b)

    def scale(self, a: Number, scalar: float) -> Number:
        """Multiply by a real scalar; integer results truncate toward zero."""
        return self.coerce(a * float(scalar))

    def display(self, value: Number) -> str:
        """Render a value the way a console listing shows it, with a trailing space."""
        if self.kind is ValueKind.INT:
            return f"{int(value):d} "
        return f"{float(value):f} "

    def format_plain(self, value: Number) -> str:
        """Render a value for a report: integers as-is, doubles with no decimals."""
        if self.kind is ValueKind.INT:
            return f"{int(value):d}"
        return f"{float(value):.0f}"


INT_TYPE = CoefficientType(ValueKind.INT)
DOUBLE_TYPE = CoefficientType(ValueKind.DOUBLE)