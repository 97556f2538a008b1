import numpy as np
import numba
from enum import IntEnum
from typing import Dict, FrozenSet

class NodeType(IntEnum):
  # Leaves
  CONSTANT = 0
  VARIABLE = 1
  # N-ary ops
  ADDITION = 2
  SUBTRACT = 3
  MULTIPLY = 4
  DIVIDE = 5
  POW = 6
  # Unary ops
  NEG = 7

# Infix symbols used when joining the children of an n-ary node
OPERATOR_SYMBOLS: Dict[NodeType, str] = {
  NodeType.ADDITION: '+',
  NodeType.SUBTRACT: '-',
  NodeType.MULTIPLY: '*',
  NodeType.DIVIDE: '/',
  NodeType.POW: '^',
}

LEAF_TYPES: FrozenSet[NodeType] = frozenset({NodeType.CONSTANT, NodeType.VARIABLE})

# Children of these types get parenthesized in the given position
SUBTRACT_TAIL_PAREN_TYPES: FrozenSet[NodeType] = frozenset({
  NodeType.ADDITION, NodeType.SUBTRACT, NodeType.NEG,
  NodeType.MULTIPLY, NodeType.DIVIDE, NodeType.POW,
})
MULTIPLY_PAREN_TYPES: FrozenSet[NodeType] = frozenset({
  NodeType.ADDITION, NodeType.SUBTRACT, NodeType.NEG,
})
NEG_PAREN_TYPES: FrozenSet[NodeType] = MULTIPLY_PAREN_TYPES


def format_constant(value: float) -> str:
  """Shortest positional decimal text that round-trips the value.

  Integral values drop the fractional part (3.0 -> "3"), non-finite values
  print as NaN / inf / -inf.
  """
  if np.isnan(value):
    return "NaN"
  if np.isinf(value):
    return "inf" if value > 0 else "-inf"
  return np.format_float_positional(value, unique=True, trim='-')


# Fold kernels. error_model='numpy' keeps IEEE-754 results (inf/nan) on
# division by zero instead of raising ZeroDivisionError.

@numba.njit(cache=True, error_model='numpy')
def fold_sum(values):
  total = 0.0
  for i in range(values.shape[0]):
    total += values[i]
  return total

@numba.njit(cache=True, error_model='numpy')
def fold_difference(values):
  if values.shape[0] == 0:
    return 0.0
  rest = 0.0
  for i in range(1, values.shape[0]):
    rest += -values[i]
  return values[0] + rest

@numba.njit(cache=True, error_model='numpy')
def fold_product(values):
  total = 1.0
  for i in range(values.shape[0]):
    total *= values[i]
  return total

@numba.njit(cache=True, error_model='numpy')
def fold_quotient(values):
  if values.shape[0] == 0:
    return 1.0
  divisor = 1.0
  for i in range(1, values.shape[0]):
    divisor *= values[i]
  return values[0] / divisor

@numba.njit(cache=True, error_model='numpy')
def fold_power(values):
  if values.shape[0] == 0:
    return 1.0
  base = values[0]
  for i in range(1, values.shape[0]):
    base = base ** values[i]
  return base


FOLD_KERNELS = {
  NodeType.ADDITION: fold_sum,
  NodeType.SUBTRACT: fold_difference,
  NodeType.MULTIPLY: fold_product,
  NodeType.DIVIDE: fold_quotient,
  NodeType.POW: fold_power,
}


def evaluate_nary_op(values: np.ndarray, node_type: NodeType) -> float:
  return float(FOLD_KERNELS[node_type](values))
