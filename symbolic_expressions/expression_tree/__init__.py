"""Expression Tree Module

Expression data model, smart constructors, formatting and evaluation.
"""

from .expression import (
    Expression, EvaluationResult,
    format_expression, evaluate_expression, try_evaluate
)
from .core.node import (
    Node,
    ConstantNode,
    VariableNode,
    NaryOpNode,
    AdditionNode,
    SubtractNode,
    MultiplyNode,
    DivideNode,
    PowNode,
    NegNode
)
from .core.operators import NodeType, OPERATOR_SYMBOLS, format_constant
from .builder import (
    constant, variable, add, multiply, subtract, divide, pow, power, negate,
    c, v, mul, sub, div, neg
)
from .errors import ExpressionError, UnevaluableSymbolError, InvalidExpressionError
from .utils import ExpressionValidator, to_sympy, latex_representation

__all__ = [
    "Expression", "EvaluationResult",
    "format_expression", "evaluate_expression", "try_evaluate",
    "Node", "ConstantNode", "VariableNode", "NaryOpNode",
    "AdditionNode", "SubtractNode", "MultiplyNode", "DivideNode", "PowNode", "NegNode",
    "NodeType", "OPERATOR_SYMBOLS", "format_constant",
    "constant", "variable", "add", "multiply", "subtract", "divide", "pow", "power", "negate",
    "c", "v", "mul", "sub", "div", "neg",
    "ExpressionError", "UnevaluableSymbolError", "InvalidExpressionError",
    "ExpressionValidator", "to_sympy", "latex_representation"
]
