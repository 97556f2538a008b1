"""
Error types for the expression engine.

All expression errors extend ExpressionError for consistent handling.
"""

from typing import Optional


class ExpressionError(Exception):
    """
    Base error class for all expression-related errors.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnevaluableSymbolError(ExpressionError):
    """
    Error thrown when evaluation reaches a variable.

    Variables have no numeric value of their own and the evaluator has no
    substitution environment, so only the current evaluation is aborted.
    """

    def __init__(self, name: str, message: Optional[str] = None):
        if message is None:
            message = f"Can't evaluate variable '{name}' directly"
        super().__init__(message)
        self.name = name


class InvalidExpressionError(ExpressionError):
    """
    Error thrown when something that is not an expression node is used as one.
    """

    def __init__(self, value: object):
        message = f"Expected an expression node, got {type(value).__name__}"
        super().__init__(message)
        self.value = value
