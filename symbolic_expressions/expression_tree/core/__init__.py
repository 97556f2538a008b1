"""Core expression tree components."""

from .node import (
    fold_tree, Node, ConstantNode, VariableNode, NaryOpNode,
    AdditionNode, SubtractNode, MultiplyNode, DivideNode, PowNode, NegNode
)
from .operators import (
    NodeType, OPERATOR_SYMBOLS, FOLD_KERNELS,
    format_constant, evaluate_nary_op,
    fold_sum, fold_difference, fold_product, fold_quotient, fold_power
)

__all__ = [
    'fold_tree', 'Node', 'ConstantNode', 'VariableNode', 'NaryOpNode',
    'AdditionNode', 'SubtractNode', 'MultiplyNode', 'DivideNode', 'PowNode', 'NegNode',
    'NodeType', 'OPERATOR_SYMBOLS', 'FOLD_KERNELS',
    'format_constant', 'evaluate_nary_op',
    'fold_sum', 'fold_difference', 'fold_product', 'fold_quotient', 'fold_power'
]
