"""
Operator-precedence parser over a token sequence.

A range of tokens is split at its lowest-precedence operator found outside
any parentheses, and each side is parsed recursively. Ties within a tier
are resolved scanning right to left: the last occurrence becomes the root,
so the leftmost group is built first and every tier, "^" included,
associates left to right. "2 ^ 3 ^ 2" parses as (2 ^ 3) ^ 2 and
"2 - 3 - 4" as (2 - 3) - 4. Function names bind tighter than every operator
and must be the first token of their range.

Ranges are half-open [start, end) index pairs into one shared token tuple,
so the recursion never copies tokens.
"""

from typing import Optional, Sequence

from ..core.node import Node
from ..core.operators import ADDITIVE_OPERATORS, MULTIPLICATIVE_OPERATORS, POWER_OPERATORS
from ..optimization.memory_pool import NodePool, get_global_pool
from .builder import build_leaf, build_interior
from .tokenizer import Token, TokenKind, tokenize
from ...exceptions import (
  ExpressionError, EmptyExpressionError, MisplacedFunctionError,
  UnbalancedParenthesesError, UnexpectedTokenError
)
from ...logging_system import log_debug


def find_split_point(tokens: Sequence[Token], start: int, end: int) -> Optional[int]:
  """
  Scan [start, end) at parenthesis depth 0 and return the split index.

  Priority: last +/-, else last * or /, else last ^, else first function
  name. Returns None when no candidate exists at depth 0.

  Raises:
      UnbalancedParenthesesError: depth drops below zero or does not return to zero
  """
  depth = 0
  additive = multiplicative = power = function = None

  for i in range(start, end):
    token = tokens[i]
    kind = token.kind

    if kind == TokenKind.OPEN_PAREN:
      depth += 1
    elif kind == TokenKind.CLOSE_PAREN:
      depth -= 1
    if depth < 0:
      raise UnbalancedParenthesesError("Unmatched ')'", i)
    if depth > 0:
      continue

    if kind == TokenKind.IDENTIFIER:
      if function is None:
        function = i
    elif kind == TokenKind.OPERATOR:
      if token.text in ADDITIVE_OPERATORS:
        additive = i
      elif token.text in MULTIPLICATIVE_OPERATORS:
        multiplicative = i
      elif token.text in POWER_OPERATORS:
        power = i

  if depth != 0:
    raise UnbalancedParenthesesError("Unmatched '('", start)

  for candidate in (additive, multiplicative, power, function):
    if candidate is not None:
      return candidate
  return None


def parse_range(tokens: Sequence[Token], start: int, end: int,
                pool: Optional[NodePool] = None) -> Node:
  """
  Build the expression tree for tokens[start:end].

  On failure every node built on the failing path is released to the pool
  before the error propagates, so no partial tree escapes.

  Raises:
      ExpressionError: the range is not a valid expression
  """
  pool = pool or get_global_pool()

  if end <= start:
    raise EmptyExpressionError("Missing operand", start)

  if end == start + 1:
    return build_leaf(tokens[start], start, pool)

  branch = find_split_point(tokens, start, end)

  if branch is None:
    # only valid when the whole range is one parenthesised group
    if tokens[start].kind != TokenKind.OPEN_PAREN or tokens[end - 1].kind != TokenKind.CLOSE_PAREN:
      raise UnexpectedTokenError("Expected an operator between operands", start)
    return parse_range(tokens, start + 1, end - 1, pool)

  branch_token = tokens[branch]
  middle = build_interior(branch_token, branch, pool)

  if branch_token.kind == TokenKind.OPERATOR:
    left = None
    try:
      left = parse_range(tokens, start, branch, pool)
      right = parse_range(tokens, branch + 1, end, pool)
    except ExpressionError:
      pool.release_tree(left)
      pool.release_tree(middle)
      raise
    middle.left = left
    middle.right = right
    return middle

  if branch != start:
    pool.release_tree(middle)
    raise MisplacedFunctionError(f"Function {branch_token.text!r} must start its group", branch)

  try:
    middle.operand = parse_range(tokens, start + 1, end, pool)
  except ExpressionError:
    pool.release_tree(middle)
    raise
  return middle


def parse_tokens(tokens: Sequence[Token], pool: Optional[NodePool] = None) -> Node:
  """Parse a complete token sequence into a tree."""
  if not tokens:
    raise EmptyExpressionError("Empty expression")
  return parse_range(tokens, 0, len(tokens), pool)


def parse_tree(text: str, pool: Optional[NodePool] = None) -> Node:
  """Tokenize and parse `text`, raising ExpressionError on failure."""
  tokens = tokenize(text)
  try:
    return parse_tokens(tokens, pool)
  except ExpressionError as e:
    log_debug(f"Could not parse {text!r}: {e}")
    raise
