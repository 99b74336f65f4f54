"""
Lexical segmentation of formula text.

The tokenizer never fails: anything it does not recognise ends up inside an
IDENTIFIER token and is rejected later by the builder. Whitespace separates
tokens but is otherwise dropped, so "4 5" is two numbers while "45" is one,
and "sin x" is a function name followed by the variable while "sinx" is a
single identifier.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from ..core.node import VARIABLE_NAME

OPERATOR_CHARS = '+*/^'
DELIMITER_CHARS = '+-*/^()'
NUMBER_CHARS = '0123456789.'

# strtod-style prefix: the longest leading run that is a valid decimal literal
_NUMERIC_PREFIX = re.compile(r'-?(?:\d+\.?\d*|\.\d+)')


class TokenKind(Enum):
  OPERATOR = 'operator'
  OPEN_PAREN = 'open_paren'
  CLOSE_PAREN = 'close_paren'
  NUMBER = 'number'
  VARIABLE = 'variable'
  IDENTIFIER = 'identifier'


@dataclass(frozen=True)
class Token:
  kind: TokenKind
  text: str

  def __repr__(self) -> str:
    return f"Token({self.kind.name}, {self.text!r})"


def parse_number(text: str) -> float:
  """
  Convert numeric token text to a float.

  Malformed literals such as "1.2.3" convert their longest valid prefix
  (1.2); text without any valid prefix, such as "." or "-.", is 0.0.
  """
  match = _NUMERIC_PREFIX.match(text)
  if match is None:
    return 0.0
  return float(match.group(0))


def _is_number_char(c: str) -> bool:
  return c in NUMBER_CHARS


def _is_identifier_char(c: str) -> bool:
  return not (c.isspace() or c in DELIMITER_CHARS or _is_number_char(c))


def _scan_number(text: str, start: int) -> int:
  # the first character (digit, '.', or a sign) is already accepted
  end = start + 1
  while end < len(text) and _is_number_char(text[end]):
    end += 1
  return end


def _scan_identifier(text: str, start: int) -> int:
  end = start + 1
  while end < len(text) and _is_identifier_char(text[end]):
    end += 1
  return end


def tokenize(text: str) -> Tuple[Token, ...]:
  """Split `text` into tokens, left to right, longest match first."""
  tokens: List[Token] = []
  i = 0
  n = len(text)

  while i < n:
    c = text[i]

    if c.isspace():
      i += 1
      continue

    if c in OPERATOR_CHARS:
      tokens.append(Token(TokenKind.OPERATOR, c))
      i += 1
    elif c == '(':
      tokens.append(Token(TokenKind.OPEN_PAREN, c))
      i += 1
    elif c == ')':
      tokens.append(Token(TokenKind.CLOSE_PAREN, c))
      i += 1
    elif c == '-':
      # a sign only when a digit or '.' follows directly
      if i + 1 < n and _is_number_char(text[i + 1]):
        end = _scan_number(text, i)
        tokens.append(Token(TokenKind.NUMBER, text[i:end]))
        i = end
      else:
        tokens.append(Token(TokenKind.OPERATOR, c))
        i += 1
    elif _is_number_char(c):
      end = _scan_number(text, i)
      tokens.append(Token(TokenKind.NUMBER, text[i:end]))
      i = end
    else:
      end = _scan_identifier(text, i)
      word = text[i:end]
      kind = TokenKind.VARIABLE if word == VARIABLE_NAME else TokenKind.IDENTIFIER
      tokens.append(Token(kind, word))
      i = end

  return tuple(tokens)
