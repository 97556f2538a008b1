import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Tuple
from .operators import (
  NodeType, OPERATOR_SYMBOLS, LEAF_TYPES,
  SUBTRACT_TAIL_PAREN_TYPES, MULTIPLY_PAREN_TYPES, NEG_PAREN_TYPES,
  format_constant, evaluate_nary_op
)
from ..errors import UnevaluableSymbolError, InvalidExpressionError


def fold_tree(root: 'Node', combine: Callable[['Node', List[Any]], Any]) -> Any:
  """Post-order fold over the tree with an explicit stack.

  `combine(node, child_results)` receives the results of the node's children
  in order. Children are visited left to right, so the first failing leaf is
  the leftmost one. Depth is bounded by memory, not the recursion limit.
  """
  results: List[Any] = []
  stack: List[Tuple['Node', bool]] = [(root, False)]

  while stack:
    node, expanded = stack.pop()
    children = node.children()

    if expanded or not children:
      if children:
        child_results = results[-len(children):]
        del results[-len(children):]
      else:
        child_results = []
      results.append(combine(node, child_results))
    else:
      stack.append((node, True))
      stack.extend((child, False) for child in reversed(children))

  return results[0]


class Node(ABC):
  """Base node class. Nodes are immutable once constructed."""

  __slots__ = ()

  node_type: NodeType

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def evaluate(self) -> float:
    return fold_tree(self, lambda node, values: node._fold_values(values))

  def to_string(self) -> str:
    return fold_tree(self, lambda node, texts: node._render(texts))

  def copy(self) -> 'Node':
    return fold_tree(self, lambda node, children: node._rebuild(children))

  def size(self) -> int:
    """Node count"""
    return fold_tree(self, lambda node, sizes: 1 + sum(sizes))

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  @abstractmethod
  def _fold_values(self, values: List[float]) -> float:
    pass

  @abstractmethod
  def _render(self, texts: List[str]) -> str:
    pass

  @abstractmethod
  def _rebuild(self, children: List['Node']) -> 'Node':
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def _payload(self) -> tuple:
    pass

  def is_leaf(self) -> bool:
    return self.node_type in LEAF_TYPES

  def __str__(self) -> str:
    return self.to_string()

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    return self.node_type == other.node_type and self._payload() == other._payload()

  def __hash__(self) -> int:
    return hash((self.node_type, self._payload()))


class ConstantNode(Node):
  __slots__ = ('value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    object.__setattr__(self, 'value', float(value))

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _fold_values(self, values: List[float]) -> float:
    return self.value

  def _render(self, texts: List[str]) -> str:
    return format_constant(self.value)

  def _rebuild(self, children: List[Node]) -> 'ConstantNode':
    return ConstantNode(self.value)

  def to_sympy(self) -> sp.Expr:
    if np.isnan(self.value):
      return sp.nan
    if np.isinf(self.value):
      return sp.oo if self.value > 0 else -sp.oo
    if self.value.is_integer():
      return sp.Integer(int(self.value))
    return sp.Float(self.value)

  def _payload(self) -> tuple:
    # NaN != NaN, so compare NaN constants by their text
    if np.isnan(self.value):
      return ('NaN',)
    return (self.value,)

  def __repr__(self) -> str:
    return f"ConstantNode({self.value!r})"


class VariableNode(Node):
  __slots__ = ('name',)

  node_type = NodeType.VARIABLE

  def __init__(self, name: str):
    object.__setattr__(self, 'name', name)

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _fold_values(self, values: List[float]) -> float:
    raise UnevaluableSymbolError(self.name)

  def _render(self, texts: List[str]) -> str:
    return self.name

  def _rebuild(self, children: List[Node]) -> 'VariableNode':
    return VariableNode(self.name)

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name)

  def _payload(self) -> tuple:
    return (self.name,)

  def __repr__(self) -> str:
    return f"VariableNode({self.name!r})"


class NaryOpNode(Node):
  """Operator over an ordered sequence of terms, folded left to right"""

  __slots__ = ('terms',)

  def __init__(self, terms: Iterable[Node] = ()):
    terms = tuple(terms)
    for term in terms:
      if not isinstance(term, Node):
        raise InvalidExpressionError(term)
    object.__setattr__(self, 'terms', terms)

  @property
  def operator(self) -> str:
    return OPERATOR_SYMBOLS[self.node_type]

  def children(self) -> Tuple[Node, ...]:
    return self.terms

  def _fold_values(self, values: List[float]) -> float:
    return evaluate_nary_op(np.array(values, dtype=np.float64), self.node_type)

  def _rebuild(self, children: List[Node]) -> 'NaryOpNode':
    return type(self)(children)

  def _payload(self) -> tuple:
    return self.terms

  def _joined(self, texts: List[str]) -> str:
    return f" {self.operator} ".join(texts)

  def __repr__(self) -> str:
    return f"{type(self).__name__}({list(self.terms)!r})"


class AdditionNode(NaryOpNode):
  __slots__ = ()

  node_type = NodeType.ADDITION

  def _render(self, texts: List[str]) -> str:
    # add() never nests an Addition directly, so no child needs parens
    return self._joined(texts)

  def to_sympy(self) -> sp.Expr:
    if not self.terms:
      return sp.Integer(0)
    if len(self.terms) == 1:
      return self.terms[0].to_sympy()
    return sp.Add(*(term.to_sympy() for term in self.terms), evaluate=False)


class SubtractNode(NaryOpNode):
  __slots__ = ()

  node_type = NodeType.SUBTRACT

  def _render(self, texts: List[str]) -> str:
    if not texts:
      return "0"

    parts = [texts[0]]
    for term, text in zip(self.terms[1:], texts[1:]):
      if term.node_type in SUBTRACT_TAIL_PAREN_TYPES:
        parts.append(f" - ({text})")
      else:
        parts.append(f" - {text}")
    return "".join(parts)

  def to_sympy(self) -> sp.Expr:
    if not self.terms:
      return sp.Integer(0)
    first = self.terms[0].to_sympy()
    if len(self.terms) == 1:
      return first
    negated = [sp.Mul(sp.Integer(-1), term.to_sympy(), evaluate=False) for term in self.terms[1:]]
    return sp.Add(first, *negated, evaluate=False)


class MultiplyNode(NaryOpNode):
  __slots__ = ()

  node_type = NodeType.MULTIPLY

  def _render(self, texts: List[str]) -> str:
    parts = []
    for term, text in zip(self.terms, texts):
      if term.node_type in MULTIPLY_PAREN_TYPES:
        parts.append(f"({text})")
      else:
        parts.append(text)
    return " * ".join(parts)

  def to_sympy(self) -> sp.Expr:
    if not self.terms:
      return sp.Integer(1)
    if len(self.terms) == 1:
      return self.terms[0].to_sympy()
    return sp.Mul(*(term.to_sympy() for term in self.terms), evaluate=False)


class DivideNode(NaryOpNode):
  __slots__ = ()

  node_type = NodeType.DIVIDE

  def _render(self, texts: List[str]) -> str:
    return f"({self._joined(texts)})"

  def to_sympy(self) -> sp.Expr:
    if not self.terms:
      return sp.Integer(1)
    result = self.terms[0].to_sympy()
    for term in self.terms[1:]:
      result = sp.Mul(result, sp.Pow(term.to_sympy(), -1, evaluate=False), evaluate=False)
    return result


class PowNode(NaryOpNode):
  __slots__ = ()

  node_type = NodeType.POW

  def _render(self, texts: List[str]) -> str:
    return f"({self._joined(texts)})"

  def to_sympy(self) -> sp.Expr:
    if not self.terms:
      return sp.Integer(1)
    result = self.terms[0].to_sympy()
    for term in self.terms[1:]:
      result = sp.Pow(result, term.to_sympy(), evaluate=False)
    return result


class NegNode(Node):
  __slots__ = ('operand',)

  node_type = NodeType.NEG

  def __init__(self, operand: Node):
    if not isinstance(operand, Node):
      raise InvalidExpressionError(operand)
    object.__setattr__(self, 'operand', operand)

  def children(self) -> Tuple[Node, ...]:
    return (self.operand,)

  def _fold_values(self, values: List[float]) -> float:
    return -values[0]

  def _render(self, texts: List[str]) -> str:
    if self.operand.node_type in NEG_PAREN_TYPES:
      return f"-({texts[0]})"
    # Negated leaves and Multiply/Divide/Pow print without a sign
    return texts[0]

  def _rebuild(self, children: List[Node]) -> 'NegNode':
    return NegNode(children[0])

  def to_sympy(self) -> sp.Expr:
    return sp.Mul(sp.Integer(-1), self.operand.to_sympy(), evaluate=False)

  def _payload(self) -> tuple:
    return (self.operand,)

  def __repr__(self) -> str:
    return f"NegNode({self.operand!r})"
