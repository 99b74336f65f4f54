import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2
  UNARY_OP = 3

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  # Unary ops (function application)
  SIN = 5
  COS = 6
  TAN = 7
  SEC = 8
  CSC = 9
  COT = 10
  ASIN = 11
  ACOS = 12
  ATAN = 13
  LOG = 14  # natural log
  EXP = 15

# Mapping dictionaries. Function names are matched case-sensitively.
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}
FUNCTION_MAP = {
    'sin': OpType.SIN, 'cos': OpType.COS, 'tan': OpType.TAN,
    'sec': OpType.SEC, 'csc': OpType.CSC, 'cot': OpType.COT,
    'asin': OpType.ASIN, 'acos': OpType.ACOS, 'atan': OpType.ATAN,
    'log': OpType.LOG, 'exp': OpType.EXP
}

# Precedence tiers used by the parser, lowest binding first
ADDITIVE_OPERATORS = frozenset('+-')
MULTIPLICATIVE_OPERATORS = frozenset('*/')
POWER_OPERATORS = frozenset('^')

# The kernels keep IEEE semantics: no clipping, no epsilon guards, and the
# numpy error model so that x/0 gives inf/nan instead of raising.

@numba.njit(cache=True, inline='always')
def evaluate_variable(X):
  return X.astype(np.float64)

@numba.njit(cache=True, inline='always')
def evaluate_constant(n_samples, value):
  return np.full(n_samples, value, dtype=np.float64)

@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op_fast(left_val, right_val, op_type):
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.SUB:
    return left_val - right_val
  elif op_type == OpType.MUL:
    return left_val * right_val
  elif op_type == OpType.DIV:
    return left_val / right_val
  elif op_type == OpType.POW:
    return np.power(left_val, right_val)
  return np.full(left_val.shape[0], np.nan)

@numba.njit(cache=True, error_model='numpy')
def evaluate_unary_op_fast(operand_val, op_type):
  if op_type == OpType.SIN:
    return np.sin(operand_val)
  elif op_type == OpType.COS:
    return np.cos(operand_val)
  elif op_type == OpType.TAN:
    return np.tan(operand_val)
  elif op_type == OpType.SEC:
    return 1.0 / np.cos(operand_val)
  elif op_type == OpType.CSC:
    return 1.0 / np.sin(operand_val)
  elif op_type == OpType.COT:
    return 1.0 / np.tan(operand_val)
  elif op_type == OpType.ASIN:
    return np.arcsin(operand_val)
  elif op_type == OpType.ACOS:
    return np.arccos(operand_val)
  elif op_type == OpType.ATAN:
    return np.arctan(operand_val)
  elif op_type == OpType.LOG:
    return np.log(operand_val)
  elif op_type == OpType.EXP:
    return np.exp(operand_val)
  return np.full(operand_val.shape[0], np.nan)
