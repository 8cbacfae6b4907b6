"""Command line entry point: read three polynomials and write a report."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .coefficients import DOUBLE_TYPE
from .polynomial import Polynomial, PolynomialReadError, format_value, read_polynomial


def render_report(f: Polynomial, g: Polynomial, h: Polynomial) -> str:
    """Build the full report text for the polynomials f, g and h."""
    sum_fg = f + g
    sum_fgh = sum_fg + h
    product_gh = g * h
    product_fgh = f * product_gh
    f_of_g = f.compose(g)

    sections = [
        [(f, "f(x)"), (g, "g(x)"), (h, "h(x)")],
        [
            (sum_fg, "f(x) + g(x)"),
            (sum_fgh, "(f(x) + g(x)) + h(x)"),
            (product_gh, "g(x) * h(x)"),
            (product_fgh, "f(x) * (g(x) * h(x))"),
        ],
        [
            (f_of_g, "f(g(x))"),
            (g.compose(h), "g(h(x))"),
            (h.compose(f), "h(f(x))"),
        ],
        [
            (f.scale(5), "5 * f(x)"),
            (g.scale(10), "10 * g(x)"),
            (h.scale(333), "333 * h(x)"),
            (f_of_g.scale(-2), "(-2) * f(g(x))"),
        ],
    ]
    values = [
        ("f(2)", f.evaluate(2)),
        ("g(3)", g.evaluate(3)),
        ("h(-2)", h.evaluate(-2)),
        ("f(-1) * (g(-1) * h(-1))", product_fgh.evaluate(-1)),
    ]

    lines = []
    for section in sections:
        lines.extend(poly.format(label) + "\n" for poly, label in section)
        lines.append("\n")
    lines.extend(f"{label}: {format_value(f.ctype, value)}\n" for label, value in values)
    return "".join(lines)


def run(input_path: str, output_path: str) -> None:
    """Read f, g and h from ``input_path`` and write the report to ``output_path``."""
    with open(input_path, encoding="utf-8") as src, open(output_path, "w", encoding="utf-8") as dst:
        f = read_polynomial(src, DOUBLE_TYPE)
        g = read_polynomial(src, DOUBLE_TYPE)
        h = read_polynomial(src, DOUBLE_TYPE)
        dst.write(render_report(f, g, h))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage: polyarith <input file> <output file>")
        return 1
    try:
        run(args[0], args[1])
    except OSError as exc:
        print(f"Cannot open file {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1
    except PolynomialReadError as exc:
        print(exc, file=sys.stderr)
        print("Error reading polynomials", file=sys.stderr)
        return 1
    print("Your code is ready", end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())