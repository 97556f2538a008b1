import numpy as np
from ..core.node import Node
from ..core.operators import NodeType
from .tree_utils import validate_tree_structure, contains_variables, get_constants
from ...logging_system import log_warning


class ExpressionValidator:

  @staticmethod
  def is_valid_expression(node: Node, require_evaluable: bool = False) -> bool:
    if not validate_tree_structure(node):
      log_warning(f"Malformed expression tree: {node!r}")
      return False

    if require_evaluable:
      return not contains_variables(node)

    return True

  @staticmethod
  def is_normalized_sum(node: Node) -> bool:
    """Check the invariants `add` guarantees for its Addition results.

    At least two terms, no term is itself an Addition, and at most one
    constant term which is nonzero and comes first.
    """
    if node.node_type != NodeType.ADDITION:
      return False

    terms = node.terms
    if len(terms) < 2:
      return False

    for i, term in enumerate(terms):
      if term.node_type == NodeType.ADDITION:
        return False
      if term.node_type == NodeType.CONSTANT:
        if i != 0 or term.value == 0.0:
          return False

    return True

  @staticmethod
  def has_finite_constants(node: Node) -> bool:
    """True if no constant in the tree is NaN or infinite"""
    return bool(np.all(np.isfinite(get_constants(node))))
