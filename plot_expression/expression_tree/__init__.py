"""Expression Tree Module

Parsing and evaluation of formulas in the single variable x.
"""

from .expression import Expression, parse_expression, try_parse
from .evaluator import evaluate, evaluate_samples
from .core.node import (
    Node,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    UnaryOpNode
)
from .core.operators import NodeType, OpType, BINARY_OP_MAP, FUNCTION_MAP
from .parsing import Token, TokenKind, tokenize, parse_range, parse_tokens
from .optimization import NodePool, get_global_pool, clear_global_pool

__all__ = [
    "Expression", "parse_expression", "try_parse",
    "evaluate", "evaluate_samples",
    "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
    "NodeType", "OpType", "BINARY_OP_MAP", "FUNCTION_MAP",
    "Token", "TokenKind", "tokenize", "parse_range", "parse_tokens",
    "NodePool", "get_global_pool", "clear_global_pool"
]
