from typing import Optional

from ..core.node import Node
from ..core.operators import BINARY_OP_MAP, FUNCTION_MAP
from ..optimization.memory_pool import NodePool, get_global_pool
from .tokenizer import Token, TokenKind, parse_number
from ...exceptions import UnexpectedTokenError, UnknownFunctionError


def build_leaf(token: Token, position: Optional[int] = None,
               pool: Optional[NodePool] = None) -> Node:
  """Map a NUMBER or VARIABLE token to a leaf node."""
  pool = pool or get_global_pool()
  if token.kind == TokenKind.VARIABLE:
    return pool.get_variable_node()
  if token.kind == TokenKind.NUMBER:
    return pool.get_constant_node(parse_number(token.text))
  if token.kind == TokenKind.IDENTIFIER:
    if token.text not in FUNCTION_MAP:
      raise UnknownFunctionError(token.text, position)
    raise UnexpectedTokenError(f"Function {token.text!r} is missing its argument", position)
  raise UnexpectedTokenError(f"Expected a number or 'x', got {token.text!r}", position)


def build_interior(token: Token, position: Optional[int] = None,
                   pool: Optional[NodePool] = None) -> Node:
  """
  Map an operator or function-name token to an interior node with its
  children left unset. The caller wires the children or releases the node.
  """
  pool = pool or get_global_pool()
  if token.kind == TokenKind.OPERATOR:
    if token.text not in BINARY_OP_MAP:
      raise UnexpectedTokenError(f"Unknown operator {token.text!r}", position)
    return pool.get_binary_node(token.text)
  if token.kind == TokenKind.IDENTIFIER:
    if token.text not in FUNCTION_MAP:
      raise UnknownFunctionError(token.text, position)
    return pool.get_unary_node(token.text)
  raise UnexpectedTokenError(f"Cannot split at {token.text!r}", position)
