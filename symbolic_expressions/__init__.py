# Python

"""Symbolic Expressions Package

An in-memory arithmetic expression tree with normalizing construction,
infix formatting and IEEE-754 evaluation.
"""

from .expression_tree import (
  Expression, EvaluationResult,
  format_expression, evaluate_expression, try_evaluate,
  Node, ConstantNode, VariableNode, NaryOpNode,
  AdditionNode, SubtractNode, MultiplyNode, DivideNode, PowNode, NegNode,
  NodeType,
  constant, variable, add, multiply, subtract, divide, power, negate,
  ExpressionError, UnevaluableSymbolError, InvalidExpressionError,
  ExpressionValidator, to_sympy, latex_representation
)
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger

__version__ = "0.1.0"
__all__ = [
  "Expression", "EvaluationResult",
  "format_expression", "evaluate_expression", "try_evaluate",
  "Node", "ConstantNode", "VariableNode", "NaryOpNode",
  "AdditionNode", "SubtractNode", "MultiplyNode", "DivideNode", "PowNode", "NegNode",
  "NodeType",
  "constant", "variable", "add", "multiply", "subtract", "divide", "power", "negate",
  "ExpressionError", "UnevaluableSymbolError", "InvalidExpressionError",
  "ExpressionValidator", "to_sympy", "latex_representation",
  "LogLevel", "configure_logging", "set_log_level", "get_logger"
]
