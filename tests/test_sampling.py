import io
import math

import numpy as np
import pytest

from plot_expression import SamplingConfig, parse_expression, sample_expression, sample_formula
from plot_expression.cli import main


def test_default_config():
    config = SamplingConfig()
    xs = config.abscissas()
    assert len(xs) == 61
    assert xs[0] == -2.0
    assert xs[-1] == pytest.approx(2.0)
    assert config.step == pytest.approx(4.0 / 60)


@pytest.mark.parametrize("kwargs", [
    dict(width=0),
    dict(width=-3),
    dict(width=2.5),
    dict(x_min=-math.inf),
    dict(x_max=math.nan),
])
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        SamplingConfig(**kwargs)


def test_reversed_range_is_allowed():
    xs = SamplingConfig(x_min=1.0, x_max=-1.0, width=2).abscissas()
    assert xs.tolist() == [1.0, 0.0, -1.0]


def test_sample_formula():
    curve = sample_formula("x ^ 2", SamplingConfig(x_min=0, x_max=4, width=4))
    assert curve.parsed and not curve.is_blank
    assert curve.xs.tolist() == [0.0, 1.0, 2.0, 3.0, 4.0]
    assert curve.ys.tolist() == [0.0, 1.0, 4.0, 9.0, 16.0]
    assert list(curve.points())[2] == (2.0, 4.0)
    assert len(curve) == 5
    assert curve.formula == "x ^ 2"


def test_unparseable_formula_gives_blank_curve(log_stream):
    curve = sample_formula("foo(x)")
    assert curve.is_blank
    assert len(curve) == 61
    assert np.isnan(curve.ys).all()
    assert "plotting blank area" in log_stream.getvalue()


def test_degenerate_values_are_not_a_parse_failure():
    curve = sample_formula("1 / x", SamplingConfig(x_min=-1, x_max=1, width=2))
    assert curve.parsed
    assert curve.ys.tolist() == [-1.0, math.inf, 1.0]


def test_sample_expression_leaves_expression_usable():
    expression = parse_expression("2 * x")
    curve = sample_expression(expression, SamplingConfig(x_min=0, x_max=1, width=1))
    assert curve.ys.tolist() == [0.0, 2.0]
    assert not expression.released


def run_cli(*argv):
    out = io.StringIO()
    assert main(list(argv) + ["--log-level", "silent"], out=out) == 0
    return out.getvalue().splitlines()


def test_cli_samples_range():
    assert run_cli("x ^ 2", "--x-min", "0", "--x-max", "2", "--width", "2") == [
        "0\t0", "1\t1", "2\t4",
    ]


def test_cli_negative_bounds():
    assert run_cli("x * 3", "-x", "-1", "-X", "1", "-w", "2") == ["-1\t-3", "0\t0", "1\t3"]


def test_cli_blank_output_on_parse_failure():
    assert run_cli("foo(x)", "-w", "2") == ["-2\t", "0\t", "2\t"]


def test_cli_specific_points():
    assert run_cli("2 * x", "--at", "0.5", "--at", "2") == ["0.5\t1", "2\t4"]


def test_cli_precision():
    assert run_cli("x / 3", "--at", "1", "--precision", "3") == ["1\t0.333"]


def test_cli_rejects_bad_width():
    with pytest.raises(SystemExit):
        main(["x", "--width", "0", "--log-level", "silent"], out=io.StringIO())
