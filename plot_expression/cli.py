"""
Command line front-end: sample a formula in x and print the x/y table.
"""

import argparse
import sys
from typing import List, Optional, TextIO

import numpy as np

from .config import SamplingConfig
from .expression_tree import try_parse
from .logging_system import LOG_LEVEL_NAMES, configure_logging, log_warning
from .sampling import SampledCurve


def build_parser() -> argparse.ArgumentParser:
    defaults = SamplingConfig()
    parser = argparse.ArgumentParser(
        prog="plot_expression",
        description="Evaluate a function of x across a range and print tab separated x/y rows. "
                    "If the formula cannot be parsed the y column is left blank.")
    parser.add_argument("formula", help="Formula in x, e.g. 'sin(x) + x ^ 2'")
    parser.add_argument("-x", "--x-min", type=float, default=defaults.x_min, help="Lower bound for x")
    parser.add_argument("-X", "--x-max", type=float, default=defaults.x_max, help="Upper bound for x")
    parser.add_argument("-w", "--width", type=int, default=defaults.width,
                        help="Number of columns; width + 1 points are sampled")
    parser.add_argument("--at", type=float, action="append", metavar="X",
                        help="Evaluate at this x instead of sampling the range (repeatable)")
    parser.add_argument("--precision", type=int, default=6, help="Significant digits in the output")
    parser.add_argument("--log-level", choices=sorted(LOG_LEVEL_NAMES), default="minimal",
                        help="Verbosity of diagnostics on stderr")
    return parser


def format_value(value: float, precision: int) -> str:
    return f"{value:.{precision}g}"


def write_curve(curve: SampledCurve, precision: int, out: TextIO):
    for x, y in curve.points():
        y_text = "" if curve.is_blank else format_value(y, precision)
        out.write(f"{format_value(x, precision)}\t{y_text}\n")


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    out = out or sys.stdout

    configure_logging(log_level=LOG_LEVEL_NAMES[args.log_level])

    try:
        config = SamplingConfig(x_min=args.x_min, x_max=args.x_max, width=args.width)
    except ValueError as e:
        parser.error(str(e))

    if args.at:
        xs = np.array(args.at, dtype=np.float64)
    else:
        xs = config.abscissas()

    expression = try_parse(args.formula)
    if expression is None:
        log_warning(f"Could not parse {args.formula!r}; output is blank")
        curve = SampledCurve(xs=xs, ys=np.full(xs.shape, np.nan), parsed=False, formula=args.formula)
    else:
        with expression:
            curve = SampledCurve(xs=xs, ys=expression.evaluate_many(xs), formula=args.formula)

    write_curve(curve, args.precision, out)
    return 0
