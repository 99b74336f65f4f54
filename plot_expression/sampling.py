"""
Sampling of expressions across a plot's x range.

This is the boundary with the renderers: they ask for a curve, draw it, and
draw a uniformly blank plot area when the formula did not parse.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import numpy as np

from .config import SamplingConfig
from .expression_tree import Expression, try_parse
from .logging_system import log_debug, log_warning


@dataclass
class SampledCurve:
    """Ordinates of a formula at evenly spaced abscissas"""
    xs: np.ndarray
    ys: np.ndarray
    parsed: bool = True
    formula: Optional[str] = None

    @property
    def is_blank(self) -> bool:
        """True when the renderer should draw nothing at all"""
        return not self.parsed

    def points(self) -> Iterator[Tuple[float, float]]:
        for x, y in zip(self.xs, self.ys):
            yield float(x), float(y)

    def __len__(self) -> int:
        return len(self.xs)


def sample_expression(expression: Expression,
                      config: Optional[SamplingConfig] = None) -> SampledCurve:
    """Evaluate `expression` at the width + 1 abscissas of `config`."""
    config = config or SamplingConfig()
    xs = config.abscissas()
    ys = expression.evaluate_many(xs)
    return SampledCurve(xs=xs, ys=ys, parsed=True, formula=expression.source)


def blank_curve(config: Optional[SamplingConfig] = None,
                formula: Optional[str] = None) -> SampledCurve:
    config = config or SamplingConfig()
    xs = config.abscissas()
    return SampledCurve(xs=xs, ys=np.full(xs.shape, np.nan), parsed=False, formula=formula)


def sample_formula(formula: str, config: Optional[SamplingConfig] = None) -> SampledCurve:
    """
    Parse and sample `formula`.

    A formula that does not parse yields a blank curve (parsed=False, all-NaN
    ordinates) instead of an error. The tree is released once sampled.
    """
    config = config or SamplingConfig()
    expression = try_parse(formula)
    if expression is None:
        log_warning(f"Could not parse {formula!r}; plotting blank area")
        return blank_curve(config, formula)

    with expression:
        log_debug(f"Sampling {expression.to_string()} at {config.width + 1} points")
        return sample_expression(expression, config)
