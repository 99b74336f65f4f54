"""Core expression tree components."""

from .node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode, VARIABLE_NAME
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, FUNCTION_MAP,
    evaluate_variable, evaluate_constant,
    evaluate_binary_op_fast, evaluate_unary_op_fast
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'UnaryOpNode', 'VARIABLE_NAME',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'FUNCTION_MAP',
    'evaluate_variable', 'evaluate_constant',
    'evaluate_binary_op_fast', 'evaluate_unary_op_fast'
]
