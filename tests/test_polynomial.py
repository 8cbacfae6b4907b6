import io

import pytest

from polyarith.coefficients import DOUBLE_TYPE, INT_TYPE
from polyarith.polynomial import (
    Polynomial,
    PolynomialReadError,
    format_value,
    read_polynomial,
    write_polynomial,
)

F = Polynomial([1, 2, 3])
G = Polynomial([-1, 4])
H = Polynomial([2, 0, -1, 5])
POINTS = [-2, -1, 0, 1, 3]


def test_zero_polynomial():
    p = Polynomial.zero(3)
    assert p.degree == 3
    assert list(p) == [0.0] * 4


def test_zero_rejects_negative_degree():
    with pytest.raises(ValueError):
        Polynomial.zero(-1)


def test_empty_coefficients_rejected():
    with pytest.raises(ValueError):
        Polynomial([])


def test_get_and_set():
    p = Polynomial.zero(2)
    p[1] = 7
    assert p[1] == 7.0
    assert list(p) == [0.0, 7.0, 0.0]


@pytest.mark.parametrize("index", [-1, 3])
def test_index_out_of_range(index):
    p = Polynomial([1, 2, 3])
    with pytest.raises(IndexError):
        _ = p[index]
    with pytest.raises(IndexError):
        p[index] = 9
    assert list(p) == [1.0, 2.0, 3.0]
    assert p.degree == 2


def test_copy_is_independent():
    p = F.copy()
    p[0] = 100
    assert p != F
    assert list(F) == [1.0, 2.0, 3.0]


def test_equality_depends_on_type():
    assert Polynomial([1, 2], INT_TYPE) != Polynomial([1, 2], DOUBLE_TYPE)
    assert Polynomial([1, 2], INT_TYPE) == Polynomial([1.0, 2.0], INT_TYPE)


def test_add_commutes_and_keeps_max_degree():
    assert F + G == G + F
    assert (F + H).degree == max(F.degree, H.degree)


@pytest.mark.parametrize("x", POINTS)
def test_add_evaluates_pointwise(x):
    assert (F + H).evaluate(x) == F.evaluate(x) + H.evaluate(x)


def test_multiply_degree_adds():
    assert (F * H).degree == F.degree + H.degree
    assert F * G == G * F


@pytest.mark.parametrize("x", POINTS)
def test_multiply_evaluates_pointwise(x):
    assert (F * H).evaluate(x) == F.evaluate(x) * H.evaluate(x)


def test_multiply_associates():
    assert F * (G * H) == (F * G) * H


@pytest.mark.parametrize("x", POINTS)
def test_scale_evaluates_pointwise(x):
    assert F.scale(5).evaluate(x) == 5 * F.evaluate(x)


def test_scale_by_one_is_identity():
    assert H.scale(1) == H


@pytest.mark.parametrize("x", POINTS)
def test_compose_evaluates_nested(x):
    assert F.compose(G).evaluate(x) == F.evaluate(G.evaluate(x))
    assert H.compose(F).evaluate(x) == H.evaluate(F.evaluate(x))


def test_compose_degree_multiplies():
    assert F.compose(H).degree == F.degree * H.degree


def test_compose_with_identity():
    identity = Polynomial([0, 1])
    assert F.compose(identity) == F
    assert identity.compose(F) == F


def test_int_compose_keeps_int_type():
    f = Polynomial([1, 1], INT_TYPE)
    g = Polynomial([0, 2], INT_TYPE)
    result = f.compose(g)
    assert result.ctype == INT_TYPE
    assert all(isinstance(c, int) for c in result)


def test_evaluate_at_zero_is_constant_term():
    assert H.evaluate(0) == H[0]


def test_str_lists_terms_from_highest_power():
    assert str(F) == "3.000000 x^2 + 2.000000 x + 1.000000 "


def test_format_uses_plain_values():
    assert F.format("p") == "p: 3x^2 + 2x^1 + 1"


def test_write_polynomial_adds_newline():
    out = io.StringIO()
    write_polynomial(out, G, "g(x)")
    assert out.getvalue() == G.format("g(x)") + "\n"


def test_read_two_polynomials_in_sequence():
    stream = io.StringIO("2 1 2 3\n1\n-1 4\n")
    assert read_polynomial(stream, DOUBLE_TYPE) == F
    assert read_polynomial(stream, DOUBLE_TYPE) == G


def test_read_then_format_round_trip():
    stream = io.StringIO("3 2 0 -1 5")
    p = read_polynomial(stream, DOUBLE_TYPE)
    assert p.format("h") == H.format("h")


@pytest.mark.parametrize("text", ["", "abc 1 2", "2 1 2", "1 1 x", "-2 1"])
def test_read_errors(text):
    with pytest.raises(PolynomialReadError):
        read_polynomial(io.StringIO(text), DOUBLE_TYPE)


def test_format_value_matches_type_rules():
    assert format_value(DOUBLE_TYPE, 7.0) == "7"
    assert format_value(INT_TYPE, -4) == "-4"