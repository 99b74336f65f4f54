"""Tokenizer, node builder and precedence parser."""

from .tokenizer import Token, TokenKind, tokenize, parse_number
from .builder import build_leaf, build_interior
from .parser import find_split_point, parse_range, parse_tokens, parse_tree

__all__ = [
    'Token', 'TokenKind', 'tokenize', 'parse_number',
    'build_leaf', 'build_interior',
    'find_split_point', 'parse_range', 'parse_tokens', 'parse_tree'
]
