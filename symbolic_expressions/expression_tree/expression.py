import sympy as sp
from dataclasses import dataclass
from typing import List, Optional, Union
from .core.node import Node
from .errors import InvalidExpressionError, UnevaluableSymbolError
from .utils.tree_utils import (
  calculate_tree_depth, get_constants, get_variables, contains_variables
)
from ..logging_system import log_debug


class Expression:
  """Owning handle around the root node of an expression tree"""

  __slots__ = ('root',)

  def __init__(self, root: Node):
    if not isinstance(root, Node):
      raise InvalidExpressionError(root)
    self.root = root

  def evaluate(self) -> float:
    return self.root.evaluate()

  def to_string(self) -> str:
    return self.root.to_string()

  def copy(self) -> 'Expression':
    return Expression(self.root.copy())

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def variables(self) -> List[str]:
    """Distinct variable names in first-seen order"""
    return get_variables(self.root)

  def constants(self) -> tuple:
    return tuple(get_constants(self.root))

  def is_evaluable(self) -> bool:
    return not contains_variables(self.root)

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.root!r})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root


@dataclass
class EvaluationResult:
  """Result of expression evaluation."""

  value: Optional[float]
  """The evaluated value, None when evaluation failed."""

  success: bool
  """Whether evaluation succeeded."""

  error: Optional[str] = None
  """Error message if evaluation failed."""

  symbol: Optional[str] = None
  """Name of the variable that stopped evaluation."""


ExpressionLike = Union[Node, Expression]


def _root_of(expr: ExpressionLike) -> Node:
  if isinstance(expr, Expression):
    return expr.root
  if isinstance(expr, Node):
    return expr
  raise InvalidExpressionError(expr)


def format_expression(expr: ExpressionLike) -> str:
  """Canonical infix text of an expression."""
  return _root_of(expr).to_string()


def evaluate_expression(expr: ExpressionLike) -> float:
  """Reduce an expression to a float.

  Raises UnevaluableSymbolError when a variable is reached. Every other
  numeric edge case follows IEEE-754 and yields inf or nan.
  """
  return _root_of(expr).evaluate()


def try_evaluate(expr: ExpressionLike) -> EvaluationResult:
  """Evaluate without raising on unevaluable symbols."""
  try:
    return EvaluationResult(value=evaluate_expression(expr), success=True)
  except UnevaluableSymbolError as e:
    log_debug(f"Evaluation stopped at variable '{e.name}'")
    return EvaluationResult(value=None, success=False, error=e.message, symbol=e.name)

