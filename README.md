# polyarith

Arithmetic on dense polynomials with integer or real coefficients. The
package adds, multiplies and composes polynomials. It also scales them by a
real number, evaluates them at a point, reads them from text and writes
them out as report lines.

## Installation

```
pip install .
```

To install with the test dependencies, use `pip install .[test]`.

## Command line

```
polyarith INPUT OUTPUT
```

`INPUT` holds three polynomials: f, g and h. Each one is given as its degree
followed by its coefficients, from the constant term up to the highest
power. Any whitespace can separate the numbers. For example:

```
2  1 0 3
1  -1 2
0  4
```

This describes f(x) = 3x^2 + 1, g(x) = 2x - 1 and h(x) = 4.

The coefficients are read as real numbers. `OUTPUT` receives a report in
four blocks, with a blank line after each block:

- `f(x)`, `g(x)`, `h(x)`
- `f(x) + g(x)`, `(f(x) + g(x)) + h(x)`, `g(x) * h(x)`, `f(x) * (g(x) * h(x))`
- `f(g(x))`, `g(h(x))`, `h(f(x))`
- `5 * f(x)`, `10 * g(x)`, `333 * h(x)`, `(-2) * f(g(x))`

After the blocks come the values `f(2)`, `g(3)`, `h(-2)` and
`f(-1) * (g(-1) * h(-1))`.

Each polynomial line lists its terms from the highest power down, and every
coefficient is printed with no decimal places. For the example input, the
first line is:

```
f(x): 3x^2 + 0x^1 + 1
```

On success the command prints `Your code is ready`. With the wrong number of
arguments it prints a usage line. If a file cannot be opened or a
polynomial cannot be read, it prints the error to standard error. In each
of these error cases it exits with status 1.

The command can also be run as `python -m polyarith.cli INPUT OUTPUT`.

## Library

```python
import io
from polyarith.coefficients import DOUBLE_TYPE, INT_TYPE
from polyarith.polynomial import Polynomial, read_polynomial, write_polynomial

f = Polynomial([1.0, 0.0, 3.0], DOUBLE_TYPE)   # 3x^2 + 1
g = Polynomial([-1.0, 2.0], DOUBLE_TYPE)       # 2x - 1

total = f + g
product = f * g
fg = f.compose(g)                              # f(g(x))
doubled = f.scale(2)
value = f.evaluate(2)                          # 13.0

print(fg.format("f(g(x))"))

p = read_polynomial(io.StringIO("1 5 7"), DOUBLE_TYPE)
out = io.StringIO()
write_polynomial(out, p, "p(x)")               # "p(x): 7x^1 + 5\n"
```

### `polyarith.polynomial`

- `Polynomial(coeffs, ctype=DOUBLE_TYPE)` takes its coefficients from the
  constant term upward, so `poly[i]` is the coefficient of x^i. Each value is
  converted to the coefficient type. An empty list raises `ValueError`.
- `Polynomial.zero(degree, ctype)` builds an all-zero polynomial. A negative
  degree raises `ValueError`.
- `poly.degree` is the number of stored coefficients minus one. Leading
  zeros are kept, never trimmed.
- Reading or writing `poly[i]` with `i` outside `0..degree` raises
  `IndexError`.
- Polynomials support iteration, `len()`, `==` (both the coefficient type
  and the coefficients must match) and `copy()`.
- `+` and `*` take the result's coefficient type from the left operand.
- `compose(other)` returns `self(other(x))`, and `scale(scalar)` multiplies
  every coefficient by a real number.
- `evaluate(x)` returns the value at `x` in the coefficient type.
- `str(poly)` gives a console listing such as `3.000000 x^2 + 0.000000 x + 1.000000 `.
- `format(label)` gives one report line without a newline.
  `write_polynomial(stream, poly, label)` writes that line followed by a
  newline.
- `read_polynomial(stream, ctype=DOUBLE_TYPE)` reads a degree and then
  `degree + 1` coefficients. It raises `PolynomialReadError`, a subclass of
  `ValueError`, when the input is missing or malformed, or when the degree
  is negative.
- `format_value(ctype, value)` formats a single value the same way the
  report does.

### `polyarith.coefficients`

- `ValueKind` has two members, `INT` and `DOUBLE`.
- `CoefficientType(kind)` defines how coefficients are handled:
  - `coerce`, `add`, `multiply` and `scale` do the arithmetic;
  - `display` renders a value for console output, with a trailing space;
  - `format_plain` renders a value for the report;
  - `one` and `zero` are the identity values.
- `INT_TYPE` and `DOUBLE_TYPE` are the two ready-made types.
- With `INT_TYPE`, every arithmetic result is truncated toward zero. In
  evaluation, each term is truncated before it is added.

## Limits

The command line always reads real coefficients and always writes the same
fixed report on f, g and h. It cannot choose which operations to run, and it
has no interactive mode. Polynomials are never simplified, and there is no
division, differentiation or root finding.