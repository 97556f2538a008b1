"""
Tree Utility Functions

Centralized traversal and analysis helpers for expression trees, so that
callers never have to special-case the node variants themselves.
"""

from typing import List, Dict, Tuple
from collections import Counter, deque

from ..core.node import Node, NegNode, NaryOpNode, fold_tree
from ..core.operators import NodeType


def get_children(node: Node) -> Tuple[Node, ...]:
    """Ordered direct children of a node (empty for leaves)."""
    return node.children()


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
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (iterative, explicit stack)"""
    stack = [node]
    nodes = []

    while stack:
        current_node = stack.pop()
        nodes.append(current_node)
        stack.extend(reversed(current_node.children()))

    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes and empty operators have depth 1)
    """
    return fold_tree(node, lambda _, depths: 1 + max(depths, default=0))


def count_nodes(node: Node) -> int:
    return node.size()


def find_nodes_by_type(node: Node, node_type: NodeType) -> List[Node]:
    """Find all nodes of a specific variant, in depth-first order."""
    return [n for n in _depth_first_traversal(node) if n.node_type == node_type]


def get_constants(node: Node) -> List[float]:
    """Constant values in depth-first (left to right) order."""
    return [n.value for n in find_nodes_by_type(node, NodeType.CONSTANT)]


def get_variables(node: Node) -> List[str]:
    """Distinct variable names in first-seen order."""
    return list(get_variable_usage_counts(node))


def get_variable_usage_counts(node: Node) -> Dict[str, int]:
    """Count how many times each variable name occurs."""
    return dict(Counter(n.name for n in find_nodes_by_type(node, NodeType.VARIABLE)))


def contains_variables(node: Node) -> bool:
    return fold_tree(
        node, lambda current, flags: current.node_type == NodeType.VARIABLE or any(flags)
    )


def clone_tree(node: Node) -> Node:
    """Create a deep copy of the tree."""
    return node.copy()


def validate_tree_structure(node: Node) -> bool:
    """
    Validate that the tree is well formed.

    Every child must be a Node, a negation must wrap exactly one node and
    no node object may appear twice (each node owns its children).
    """
    seen = set()
    stack = [node]

    while stack:
        current = stack.pop()
        if not isinstance(current, Node):
            return False
        if id(current) in seen:
            return False
        seen.add(id(current))

        if isinstance(current, NegNode):
            if not isinstance(current.operand, Node):
                return False
        elif isinstance(current, NaryOpNode):
            if not isinstance(current.terms, tuple):
                return False

        stack.extend(current.children())

    return True
