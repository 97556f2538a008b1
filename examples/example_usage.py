import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from symbolic_expressions import try_evaluate, LogLevel, configure_logging
from symbolic_expressions.expression_tree import format_constant
from symbolic_expressions.expression_tree.builder import c, v, add, mul, sub, neg
from symbolic_expressions.logging_system import log_milestone, log_warning


def build_sample():
  """3 + 9 + 4 + 2*3*4*5 + 14 + 7 + 6*2"""
  return add([
    c(3), c(9), c(4),
    mul([c(2), c(3), c(4), c(5)]),
    c(5 + 9), c(7), mul([c(6), c(2)])
  ])


def main():
  configure_logging(LogLevel.MODERATE)

  expr = build_sample()
  log_milestone("Sample expression built")
  print(expr)
  print(format_constant(try_evaluate(expr).value))

  # A symbolic expression cannot be evaluated without a value for x
  symbolic = sub([c(1), neg(add([v("x"), c(2)]))])
  print(symbolic)
  result = try_evaluate(symbolic)
  if not result.success:
    log_warning(result.error)


if __name__ == "__main__":
  main()
