import numpy as np
from typing import Iterable, Union
from .core.node import Node


def evaluate_samples(node: Node, xs: Union[Iterable[float], np.ndarray]) -> np.ndarray:
  """
  Evaluate the tree at every abscissa in `xs`.

  Arithmetic problems never raise: division by zero, negative bases with
  fractional exponents and out-of-domain log/asin/acos come back as
  inf or nan.
  """
  if isinstance(xs, np.ndarray):
    X = xs.astype(np.float64, copy=False).ravel()
  else:
    X = np.fromiter(xs, dtype=np.float64)
  X = np.ascontiguousarray(X)
  with np.errstate(all='ignore'):
    return node.evaluate(X)


def evaluate(node: Node, x: float) -> float:
  """Evaluate the tree at a single value of x."""
  return float(evaluate_samples(node, np.array([x], dtype=np.float64))[0])
