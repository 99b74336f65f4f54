"""Formula Plotting Package

Parses formulas in the single variable x into expression trees and
evaluates them at the sample points a terminal plot needs.
"""

from .expression_tree import (
  Expression, parse_expression, try_parse, evaluate, evaluate_samples,
  Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
  Token, TokenKind, tokenize
)
from .exceptions import (
  ExpressionError, ExpressionSyntaxError, UnknownFunctionError,
  UnbalancedParenthesesError, EmptyExpressionError,
  MisplacedFunctionError, UnexpectedTokenError
)
from .config import SamplingConfig
from .sampling import SampledCurve, sample_expression, sample_formula
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Expression", "parse_expression", "try_parse", "evaluate", "evaluate_samples",
  "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
  "Token", "TokenKind", "tokenize",
  "ExpressionError", "ExpressionSyntaxError", "UnknownFunctionError",
  "UnbalancedParenthesesError", "EmptyExpressionError",
  "MisplacedFunctionError", "UnexpectedTokenError",
  "SamplingConfig", "SampledCurve", "sample_expression", "sample_formula",
  "LogLevel", "configure_logging", "get_logger", "set_log_level"
]
