import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, List
from .operators import (
  NodeType, OpType, BINARY_OP_MAP, FUNCTION_MAP,
  evaluate_variable, evaluate_constant,
  evaluate_binary_op_fast, evaluate_unary_op_fast
)

# The single free variable of the expression language
VARIABLE_NAME = 'x'

SYMPY_FUNCTIONS = {
  OpType.SIN: sp.sin, OpType.COS: sp.cos, OpType.TAN: sp.tan,
  OpType.SEC: sp.sec, OpType.CSC: sp.csc, OpType.COT: sp.cot,
  OpType.ASIN: sp.asin, OpType.ACOS: sp.acos, OpType.ATAN: sp.atan,
  OpType.LOG: sp.log, OpType.EXP: sp.exp,
}


class Node(ABC):
  """Base node class. Nodes are immutable once wired into a tree."""

  __slots__ = ('_hash_cache', '_size_cache')

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  def _clear_cache(self):
    self._hash_cache = None
    self._size_cache = None

  @abstractmethod
  def evaluate(self, X: np.ndarray) -> np.ndarray:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def children(self) -> List['Node']:
    pass

  def arity(self) -> int:
    return len(self.children())

  def size(self) -> int:
    """Node count of the subtree rooted here"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children())
    return self._size_cache

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()!r})"


class VariableNode(Node):
  __slots__ = ()

  def evaluate(self, X: np.ndarray) -> np.ndarray:
    return evaluate_variable(X)

  def to_string(self) -> str:
    return VARIABLE_NAME

  def to_sympy(self):
    return sp.Symbol(VARIABLE_NAME)

  def children(self):
    return []

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, VARIABLE_NAME))


class ConstantNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    super().__init__()
    self.value = float(value)

  def evaluate(self, X: np.ndarray) -> np.ndarray:
    return evaluate_constant(X.shape[0], self.value)

  def to_string(self) -> str:
    # positional notation only; the tokenizer has no exponent syntax
    return np.format_float_positional(self.value, trim='-')

  def to_sympy(self):
    return sp.Float(self.value)

  def children(self):
    return []

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self.value))


class BinaryOpNode(Node):
  __slots__ = ('operator', 'op_type', 'left', 'right')

  def __init__(self, operator: str, left: Optional[Node] = None, right: Optional[Node] = None):
    super().__init__()
    self.operator = operator
    self.op_type = BINARY_OP_MAP[operator]
    self.left = left
    self.right = right

  def evaluate(self, X: np.ndarray) -> np.ndarray:
    left_val = self.left.evaluate(X)
    right_val = self.right.evaluate(X)
    return evaluate_binary_op_fast(left_val, right_val, self.op_type)

  def to_string(self) -> str:
    return f"({self.left.to_string()} {self.operator} {self.right.to_string()})"

  def to_sympy(self):
    left = self.left.to_sympy()
    right = self.right.to_sympy()
    # evaluate=False keeps sympy from folding the tree we are comparing against
    if self.op_type == OpType.ADD:
      return sp.Add(left, right, evaluate=False)
    elif self.op_type == OpType.SUB:
      return sp.Add(left, sp.Mul(-1, right, evaluate=False), evaluate=False)
    elif self.op_type == OpType.MUL:
      return sp.Mul(left, right, evaluate=False)
    elif self.op_type == OpType.DIV:
      return sp.Mul(left, sp.Pow(right, -1, evaluate=False), evaluate=False)
    elif self.op_type == OpType.POW:
      return sp.Pow(left, right, evaluate=False)
    raise RuntimeWarning(f"to_sympy reached unexpected operation: {self.operator}")

  def children(self):
    return [self.left, self.right]

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.op_type, hash(self.left), hash(self.right)))


class UnaryOpNode(Node):
  """Function application node: one of the eleven named functions"""

  __slots__ = ('operator', 'op_type', 'operand')

  def __init__(self, operator: str, operand: Optional[Node] = None):
    super().__init__()
    self.operator = operator
    self.op_type = FUNCTION_MAP[operator]
    self.operand = operand

  def evaluate(self, X: np.ndarray) -> np.ndarray:
    operand_val = self.operand.evaluate(X)
    return evaluate_unary_op_fast(operand_val, self.op_type)

  def to_string(self) -> str:
    return f"{self.operator}({self.operand.to_string()})"

  def to_sympy(self):
    return SYMPY_FUNCTIONS[self.op_type](self.operand.to_sympy(), evaluate=False)

  def children(self):
    return [self.operand]

  def _compute_hash(self) -> int:
    return hash((NodeType.UNARY_OP, self.op_type, hash(self.operand)))
