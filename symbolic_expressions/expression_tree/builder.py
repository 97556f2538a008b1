"""Smart constructors for well-formed expression trees.

`add` is the only normalizing constructor: it flattens directly nested sums,
folds constant terms into a single leading constant, drops zero terms and
collapses degenerate sums. The remaining operator constructors wrap their
terms as given.
"""

from typing import Iterable, List
from .core.node import (
  Node, ConstantNode, VariableNode,
  AdditionNode, SubtractNode, MultiplyNode, DivideNode, PowNode, NegNode
)
from .core.operators import NodeType
from .errors import InvalidExpressionError
from ..logging_system import log_debug


def constant(value: float) -> ConstantNode:
  return ConstantNode(value)


def variable(name: str) -> VariableNode:
  return VariableNode(name)


def add(terms: Iterable[Node]) -> Node:
  """Build a normalized sum.

  Addition terms are spliced in place (one level only), every constant is
  accumulated into a running total and zero constants are dropped. A nonzero
  total is prepended as a single constant. The result is Constant(0) for no
  surviving terms, the term itself for one, and an AdditionNode otherwise.
  """
  flat: List[Node] = []
  c_sum = 0.0
  folded = 0

  for term in terms:
    if not isinstance(term, Node):
      raise InvalidExpressionError(term)

    if term.node_type == NodeType.CONSTANT:
      if term.value == 0.0:
        continue
      c_sum += term.value
      folded += 1
    elif term.node_type == NodeType.ADDITION:
      flat.extend(term.terms)
    else:
      flat.append(term)

  if c_sum != 0.0:
    flat.insert(0, ConstantNode(c_sum))

  if folded > 1:
    log_debug(f"add folded {folded} constants into {c_sum!r}")

  if not flat:
    return ConstantNode(0.0)
  if len(flat) == 1:
    return flat[0]
  return AdditionNode(flat)


def multiply(terms: Iterable[Node]) -> MultiplyNode:
  return MultiplyNode(terms)


def subtract(terms: Iterable[Node]) -> SubtractNode:
  return SubtractNode(terms)


def divide(terms: Iterable[Node]) -> DivideNode:
  return DivideNode(terms)


def pow(terms: Iterable[Node]) -> PowNode:
  return PowNode(terms)


def negate(expr: Node) -> NegNode:
  return NegNode(expr)


# Short aliases
c = constant
v = variable
mul = multiply
sub = subtract
div = divide
neg = negate
power = pow
