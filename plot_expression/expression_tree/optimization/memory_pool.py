from typing import List, TYPE_CHECKING, Optional
import threading

if TYPE_CHECKING:
  from ..core.node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode


class NodePool:
  """Free lists for node allocation and recursive release of whole trees"""

  max_pool_size = 500

  def __init__(self, initial_size: int = 200):
    self.variable_pool: List['VariableNode'] = []
    self.constant_pool: List['ConstantNode'] = []
    self.binary_pool: List['BinaryOpNode'] = []
    self.unary_pool: List['UnaryOpNode'] = []
    self._preallocate(initial_size)

  def _preallocate(self, size: int):
    # Import here to avoid circular imports
    from ..core.node import VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode

    quarter = size // 4
    for _ in range(quarter):
      self.variable_pool.append(VariableNode.__new__(VariableNode))
      self.constant_pool.append(ConstantNode.__new__(ConstantNode))
      self.binary_pool.append(BinaryOpNode.__new__(BinaryOpNode))
      self.unary_pool.append(UnaryOpNode.__new__(UnaryOpNode))

  def get_variable_node(self) -> 'VariableNode':
    from ..core.node import VariableNode
    if self.variable_pool:
      node = self.variable_pool.pop()
      node.__init__()
      return node
    return VariableNode()

  def get_constant_node(self, value: float) -> 'ConstantNode':
    from ..core.node import ConstantNode
    if self.constant_pool:
      node = self.constant_pool.pop()
      node.__init__(value)
      return node
    return ConstantNode(value)

  def get_binary_node(self, operator: str, left: Optional['Node'] = None,
                      right: Optional['Node'] = None) -> 'BinaryOpNode':
    from ..core.node import BinaryOpNode
    if self.binary_pool:
      node = self.binary_pool.pop()
      node.__init__(operator, left, right)
      return node
    return BinaryOpNode(operator, left, right)

  def get_unary_node(self, operator: str, operand: Optional['Node'] = None) -> 'UnaryOpNode':
    from ..core.node import UnaryOpNode
    if self.unary_pool:
      node = self.unary_pool.pop()
      node.__init__(operator, operand)
      return node
    return UnaryOpNode(operator, operand)

  def return_node(self, node: 'Node'):
    """Return a single node to the pool for reuse. Children are detached, not released."""
    from ..core.node import VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode

    if hasattr(node, '_clear_cache'):
      node._clear_cache()

    if isinstance(node, BinaryOpNode):
      node.left = None
      node.right = None
      if len(self.binary_pool) < self.max_pool_size:
        self.binary_pool.append(node)
    elif isinstance(node, UnaryOpNode):
      node.operand = None
      if len(self.unary_pool) < self.max_pool_size:
        self.unary_pool.append(node)
    elif isinstance(node, VariableNode) and len(self.variable_pool) < self.max_pool_size:
      self.variable_pool.append(node)
    elif isinstance(node, ConstantNode) and len(self.constant_pool) < self.max_pool_size:
      self.constant_pool.append(node)

  def release_tree(self, root: Optional['Node']) -> int:
    """
    Release every node of the tree rooted at `root`.

    Iterative so that deep trees cannot hit the recursion limit. Children are
    collected before their parent is detached, so each node is visited exactly
    once. Unwired children (None) are skipped, which lets the parser release
    half-built interior nodes.

    Returns:
        Number of nodes released
    """
    if root is None:
      return 0

    released = 0
    stack = [root]
    while stack:
      node = stack.pop()
      stack.extend(child for child in node.children() if child is not None)
      self.return_node(node)
      released += 1
    return released

  def get_stats(self) -> dict:
    """Get pool statistics"""
    return {
      'variable_pool_size': len(self.variable_pool),
      'constant_pool_size': len(self.constant_pool),
      'binary_pool_size': len(self.binary_pool),
      'unary_pool_size': len(self.unary_pool)
    }

  def clear(self):
    """Clear all pools"""
    self.variable_pool.clear()
    self.constant_pool.clear()
    self.binary_pool.clear()
    self.unary_pool.clear()


# Global instance - process-local initialization
_GLOBAL_POOL: Optional[NodePool] = None
_INITIALIZED = False
_POOL_LOCK = threading.Lock()


def get_global_pool() -> NodePool:
  """Get the global pool instance, creating it on first use"""
  global _GLOBAL_POOL, _INITIALIZED

  # Fast path - no locking needed once initialized
  if _INITIALIZED and _GLOBAL_POOL is not None:
    return _GLOBAL_POOL

  with _POOL_LOCK:
    if not _INITIALIZED or _GLOBAL_POOL is None:
      _GLOBAL_POOL = NodePool()
      _INITIALIZED = True

  return _GLOBAL_POOL


def clear_global_pool():
  """Clear the global pool"""
  global _GLOBAL_POOL, _INITIALIZED
  with _POOL_LOCK:
    if _GLOBAL_POOL is not None:
      _GLOBAL_POOL.clear()
    _GLOBAL_POOL = None
    _INITIALIZED = False


def reset_global_pool():
  """Drop the global pool without clearing it (e.g. in a forked worker)"""
  global _GLOBAL_POOL, _INITIALIZED
  _GLOBAL_POOL = None
  _INITIALIZED = False
