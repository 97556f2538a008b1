import sympy as sp
from ..core.node import Node


def to_sympy(node: Node) -> sp.Expr:
  """Convert an expression tree into an equivalent, unsimplified SymPy expression"""
  return node.to_sympy()


def latex_representation(node: Node) -> str:
  """Get LaTeX representation of the expression"""
  return sp.latex(to_sympy(node))

