import numpy as np
import sympy as sp
from typing import Callable, Optional, Iterable, Union
from .core.node import Node, VARIABLE_NAME
from .evaluator import evaluate, evaluate_samples
from .optimization.memory_pool import get_global_pool
from .parsing.parser import parse_tree
from .utils.tree_utils import calculate_tree_depth
from ..exceptions import ExpressionError


class Expression:
  """Owning handle to a parsed expression tree in the variable x"""

  __slots__ = ('root', 'source', '_string_cache')

  def __init__(self, root: Node, source: Optional[str] = None):
    self.root = root
    self.source = source
    self._string_cache: Optional[str] = None

  @classmethod
  def from_string(cls, text: str) -> 'Expression':
    """Parse `text`; raises ExpressionError if it is not a valid formula."""
    return cls(parse_tree(text), source=text)

  def _require_root(self) -> Node:
    if self.root is None:
      raise ExpressionError("Expression has been released")
    return self.root

  def evaluate(self, x: float) -> float:
    return evaluate(self._require_root(), x)

  def evaluate_many(self, xs: Union[Iterable[float], np.ndarray]) -> np.ndarray:
    return evaluate_samples(self._require_root(), xs)

  def __call__(self, x):
    if np.ndim(x) == 0:
      return self.evaluate(x)
    return self.evaluate_many(x)

  def to_string(self) -> str:
    """Fully parenthesised text that parses back to the same tree"""
    if self._string_cache is None:
      self._string_cache = self._require_root().to_string()
    return self._string_cache

  def size(self) -> int:
    """Node count"""
    return self._require_root().size()

  def depth(self) -> int:
    return calculate_tree_depth(self._require_root())

  def to_sympy(self) -> sp.Expr:
    return self._require_root().to_sympy()

  def lambdify(self) -> Callable:
    """numpy callable built by sympy from the same tree (reference evaluator)"""
    return sp.lambdify(sp.Symbol(VARIABLE_NAME), self.to_sympy(), modules='numpy')

  @property
  def released(self) -> bool:
    return self.root is None

  def release(self) -> int:
    """
    Return every node of the tree to the node pool.

    Safe to call more than once: only the first call releases anything.

    Returns:
        Number of nodes released
    """
    if self.root is None:
      return 0
    root, self.root = self.root, None
    self._string_cache = None
    return get_global_pool().release_tree(root)

  def __enter__(self) -> 'Expression':
    return self

  def __exit__(self, exc_type, exc_value, traceback):
    self.release()

  def __hash__(self) -> int:
    return hash(self._require_root())

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return hash(self) == hash(other)

  def __repr__(self) -> str:
    if self.root is None:
      return "Expression(<released>)"
    return f"Expression({self.to_string()!r})"


def parse_expression(text: str) -> Expression:
  """
  Parse a formula in x.

  Raises:
      ExpressionError: unknown function name or malformed structure
  """
  return Expression.from_string(text)


def try_parse(text: str) -> Optional[Expression]:
  """Parse a formula in x, returning None instead of raising on failure."""
  try:
    return Expression.from_string(text)
  except ExpressionError:
    return None
