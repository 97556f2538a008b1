"""Utilities for expression trees."""

from .sympy_utils import to_sympy, latex_representation
from .tree_utils import (
    get_children, get_all_nodes, calculate_tree_depth, count_nodes,
    find_nodes_by_type, get_constants, get_variables,
    get_variable_usage_counts, contains_variables, clone_tree,
    validate_tree_structure
)
from .validator import ExpressionValidator

__all__ = [
    'to_sympy', 'latex_representation',
    'get_children', 'get_all_nodes', 'calculate_tree_depth', 'count_nodes',
    'find_nodes_by_type', 'get_constants', 'get_variables',
    'get_variable_usage_counts', 'contains_variables', 'clone_tree',
    'validate_tree_structure',
    'ExpressionValidator'
]
