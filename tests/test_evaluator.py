import math

import numpy as np
import pytest

from plot_expression import parse_expression, evaluate, evaluate_samples


@pytest.mark.parametrize("name, reference", [
    ("sin", math.sin),
    ("cos", math.cos),
    ("tan", math.tan),
    ("sec", lambda v: 1.0 / math.cos(v)),
    ("csc", lambda v: 1.0 / math.sin(v)),
    ("cot", lambda v: 1.0 / math.tan(v)),
    ("asin", math.asin),
    ("acos", math.acos),
    ("atan", math.atan),
    ("log", math.log),
    ("exp", math.exp),
])
def test_functions_match_math_module(name, reference):
    expression = parse_expression(f"{name}(x)")
    for x in (0.1, 0.3, 0.7):
        assert expression.evaluate(x) == pytest.approx(reference(x), rel=1e-12)


def test_arithmetic():
    expression = parse_expression("(x + 1) * (x - 2) / 4 ^ 0.5")
    assert expression.evaluate(3.0) == pytest.approx((3.0 + 1) * (3.0 - 2) / 2.0)


def test_division_by_zero_gives_infinities():
    assert evaluate(parse_expression("1 / 0").root, 0.0) == math.inf
    assert parse_expression("-1 / 0").evaluate(0.0) == -math.inf
    assert math.isnan(parse_expression("0 / 0").evaluate(0.0))
    assert parse_expression("1 / x").evaluate(0.0) == math.inf


def test_domain_errors_give_nan():
    assert math.isnan(parse_expression("(0 - 8) ^ (1 / 3)").evaluate(0.0))
    assert math.isnan(parse_expression("log(0 - 1)").evaluate(0.0))
    assert math.isnan(parse_expression("asin(2)").evaluate(0.0))
    assert math.isnan(parse_expression("acos x").evaluate(-1.5))
    assert parse_expression("log(0)").evaluate(0.0) == -math.inf


def test_overflow_gives_infinity():
    assert parse_expression("exp(1000)").evaluate(0.0) == math.inf
    assert parse_expression("10 ^ x").evaluate(400.0) == math.inf


def test_reciprocal_functions_inherit_poles():
    assert parse_expression("sec x").evaluate(0.0) == 1.0
    assert parse_expression("csc x").evaluate(0.0) == math.inf
    assert parse_expression("cot x").evaluate(0.0) == math.inf


def test_nan_propagates():
    expression = parse_expression("sin(log(x)) + 2")
    assert math.isnan(expression.evaluate(-1.0))


def test_evaluate_returns_python_float():
    assert type(parse_expression("x * 2").evaluate(1.5)) is float


def test_vector_evaluation_matches_scalar():
    expression = parse_expression("x ^ 3 - 2 * x + cos x")
    xs = np.linspace(-2.0, 2.0, 41)
    ys = expression.evaluate_many(xs)
    assert ys.shape == xs.shape
    assert ys.dtype == np.float64
    for x, y in zip(xs, ys):
        assert y == pytest.approx(expression.evaluate(x), rel=1e-12, abs=1e-15)


def test_constant_is_broadcast():
    ys = evaluate_samples(parse_expression("4.5").root, [1, 2, 3])
    assert ys.tolist() == [4.5, 4.5, 4.5]


def test_accepts_generators_and_integer_arrays():
    expression = parse_expression("x * x")
    assert expression.evaluate_many(v for v in range(4)).tolist() == [0.0, 1.0, 4.0, 9.0]
    assert expression.evaluate_many(np.arange(4)).tolist() == [0.0, 1.0, 4.0, 9.0]
    assert expression.evaluate_many([]).shape == (0,)


def test_evaluation_does_not_alias_or_mutate_input():
    xs = np.array([1.0, 2.0, 3.0])
    ys = parse_expression("x").evaluate_many(xs)
    assert ys is not xs
    ys[0] = 100.0
    assert xs.tolist() == [1.0, 2.0, 3.0]


def test_evaluation_is_repeatable():
    expression = parse_expression("x ^ 2 + sin(x) / 3")
    before = expression.to_string()
    first = expression.evaluate_many(np.linspace(-1, 1, 11))
    second = expression.evaluate_many(np.linspace(-1, 1, 11))
    assert np.array_equal(first, second)
    assert expression.to_string() == before


def test_callable_expression():
    expression = parse_expression("2 * x")
    assert expression(3.0) == 6.0
    assert expression([1.0, 2.0]).tolist() == [2.0, 4.0]
