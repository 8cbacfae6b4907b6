"""Dense polynomials over integer or floating-point coefficients."""

from __future__ import annotations

from typing import IO, Iterable, Iterator, Optional

from .coefficients import DOUBLE_TYPE, CoefficientType, Number


class PolynomialReadError(ValueError):
    """Raised when a polynomial cannot be read from a stream."""


class Polynomial:
    """A polynomial stored as coefficients from the constant term upward."""

    def __init__(self, coeffs: Iterable[Number], ctype: CoefficientType = DOUBLE_TYPE) -> None:
        self.ctype = ctype
        self._coeffs = [ctype.coerce(c) for c in coeffs]
        if not self._coeffs:
            raise ValueError("a polynomial needs at least one coefficient")

    @classmethod
    def zero(cls, degree: int, ctype: CoefficientType = DOUBLE_TYPE) -> "Polynomial":
        """A polynomial of the given degree with every coefficient zero."""
        if degree < 0:
            raise ValueError(f"degree must be non-negative, got {degree}")
        return cls([ctype.zero] * (degree + 1), ctype)

    @property
    def degree(self) -> int:
        return len(self._coeffs) - 1

    def _check_index(self, index: int) -> None:
        if not 0 <= index <= self.degree:
            raise IndexError(f"index {index} out of range")

    def __getitem__(self, index: int) -> Number:
        self._check_index(index)
        return self._coeffs[index]

    def __setitem__(self, index: int, value: Number) -> None:
        self._check_index(index)
        self._coeffs[index] = self.ctype.coerce(value)

    def __iter__(self) -> Iterator[Number]:
        return iter(self._coeffs)

    def __len__(self) -> int:
        return len(self._coeffs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.ctype == other.ctype and self._coeffs == other._coeffs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Polynomial({self._coeffs!r}, {self.ctype.kind.name})"

    def copy(self) -> "Polynomial":
        return Polynomial(self._coeffs, self.ctype)

    def __str__(self) -> str:
        parts = []
        for power in range(self.degree, -1, -1):
            text = self.ctype.display(self._coeffs[power])
            if power == 1:
                text += "x + "
            elif power > 1:
                text += f"x^{power} + "
            parts.append(text)
        return "".join(parts)

    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial.zero(max(self.degree, other.degree), self.ctype)
        for power, coeff in enumerate(self._coeffs):
            result._coeffs[power] = coeff
        for power, coeff in enumerate(other._coeffs):
            result._coeffs[power] = self.ctype.add(result._coeffs[power], coeff)
        return result

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        ctype = self.ctype
        result = Polynomial.zero(self.degree + other.degree, ctype)
        for i, a in enumerate(self._coeffs):
            for j, b in enumerate(other._coeffs):
                result._coeffs[i + j] = ctype.add(result._coeffs[i + j], ctype.multiply(a, b))
        return result

    def scale(self, scalar: float) -> "Polynomial":
        """Multiply every coefficient by a real scalar."""
        return Polynomial((self.ctype.scale(c, scalar) for c in self._coeffs), self.ctype)

    def compose(self, other: "Polynomial") -> "Polynomial":
        """Return ``self(other(x))``."""
        result = Polynomial.zero(self.degree * other.degree, self.ctype)
        for power, coeff in enumerate(self._coeffs):
            term = Polynomial([coeff], self.ctype)
            other_power = Polynomial([other.ctype.one], other.ctype)
            for _ in range(power):
                other_power = other_power * other
            result = result + term * other_power
        return result

    def evaluate(self, x: float) -> Number:
        """Value of the polynomial at ``x``, in the coefficient kind."""
        ctype = self.ctype
        total = ctype.zero
        base = float(x)
        for power, coeff in enumerate(self._coeffs):
            total = ctype.add(total, ctype.scale(coeff, base ** power))
        return total

    def format(self, label: str) -> str:
        """One report line: the label, then terms from the highest power down."""
        parts = [f"{label}: "]
        for power in range(self.degree, -1, -1):
            parts.append(self.ctype.format_plain(self._coeffs[power]))
            if power > 0:
                parts.append(f"x^{power} + ")
        return "".join(parts)


def _next_token(stream: IO[str]) -> Optional[str]:
    chars = []
    while True:
        ch = stream.read(1)
        if not ch:
            break
        if ch.isspace():
            if chars:
                break
            continue
        chars.append(ch)
    return "".join(chars) or None


def read_polynomial(stream: IO[str], ctype: CoefficientType = DOUBLE_TYPE) -> Polynomial:
    """Read a degree followed by coefficients from the constant term upward."""
    token = _next_token(stream)
    try:
        degree = int(token) if token is not None else None
    except ValueError:
        degree = None
    if degree is None:
        raise PolynomialReadError("cannot read polynomial degree")
    if degree < 0:
        raise PolynomialReadError(f"cannot create polynomial of degree {degree}")

    coeffs = []
    for power in range(degree + 1):
        token = _next_token(stream)
        try:
            coeffs.append(float(token) if token is not None else None)
        except ValueError:
            coeffs.append(None)
        if coeffs[-1] is None:
            raise PolynomialReadError(f"cannot read coefficient of x^{power}")
    return Polynomial(coeffs, ctype)


def write_polynomial(stream: IO[str], poly: Polynomial, label: str) -> None:
    stream.write(poly.format(label) + "\n")


def format_value(ctype: CoefficientType, value: Number) -> str:
    return ctype.format_plain(value)