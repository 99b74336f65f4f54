"""
Tree Utility Functions

Traversal and analysis helpers for expression trees.
"""

from typing import List

from ..core.node import Node, BinaryOpNode, UnaryOpNode, ConstantNode, VariableNode


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (recursive)"""
    nodes = [node]
    for child in node.children():
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    if isinstance(node, (ConstantNode, VariableNode)):
        return 1
    elif isinstance(node, UnaryOpNode):
        return 1 + calculate_tree_depth(node.operand)
    elif isinstance(node, BinaryOpNode):
        return 1 + max(calculate_tree_depth(node.left), calculate_tree_depth(node.right))
    else:
        return 1


def find_nodes_by_operator(node: Node, operator: str) -> List[Node]:
    """Find all operator or function nodes whose symbol/name is `operator`."""
    return [n for n in get_all_nodes(node)
            if isinstance(n, (BinaryOpNode, UnaryOpNode)) and n.operator == operator]


def get_constants(node: Node) -> List[float]:
    """Constant values in depth-first (left to right) order"""
    return [n.value for n in get_all_nodes(node, 'depth_first') if isinstance(n, ConstantNode)]


def validate_tree_structure(node: Node) -> bool:
    """
    Validate that every node is fully wired: leaves have no children, function
    nodes exactly one and operator nodes exactly two.
    """
    if isinstance(node, BinaryOpNode):
        if node.left is None or node.right is None:
            return False
        return validate_tree_structure(node.left) and validate_tree_structure(node.right)

    elif isinstance(node, UnaryOpNode):
        if node.operand is None:
            return False
        return validate_tree_structure(node.operand)

    elif isinstance(node, (VariableNode, ConstantNode)):
        return True

    # Unknown node type
    return False
