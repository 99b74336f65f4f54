"""
Error types raised while turning formula text into an expression tree.

Evaluation never raises for arithmetic reasons (division by zero, domain
errors); those surface as NaN or infinity in the result.
"""

from typing import Optional


class ExpressionError(Exception):
    """Base class for every error the package raises on purpose"""


class ExpressionSyntaxError(ExpressionError):
    """The token sequence does not form a valid expression"""

    def __init__(self, reason: str, position: Optional[int] = None):
        self.reason = reason
        self.position = position
        if position is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason} (at token {position})")


class UnbalancedParenthesesError(ExpressionSyntaxError):
    pass


class EmptyExpressionError(ExpressionSyntaxError):
    pass


class MisplacedFunctionError(ExpressionSyntaxError):
    pass


class UnexpectedTokenError(ExpressionSyntaxError):
    pass


class UnknownFunctionError(ExpressionError):
    """An identifier that is not one of the supported function names"""

    def __init__(self, name: str, position: Optional[int] = None):
        self.name = name
        self.position = position
        message = f"Unknown function: {name!r}"
        if position is not None:
            message += f" (at token {position})"
        super().__init__(message)
