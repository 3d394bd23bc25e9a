"""
Error types for the expression engine.

All expression errors extend ExpressionError for consistent handling.
Every concrete error carries an ErrorKind tag so callers can switch on
the failure without matching on classes.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Tags for every failure the engine can report."""

    EMPTY_EXPRESSION = "EmptyExpression"
    INVALID_CHARACTER = "InvalidCharacter"
    UNMATCHED_CLOSE_PAREN = "UnmatchedCloseParen"
    UNMATCHED_OPEN_PAREN = "UnmatchedOpenParen"
    INVALID_LITERAL = "InvalidLiteral"
    DIVISION_BY_ZERO = "DivisionByZero"
    MALFORMED_EXPRESSION = "MalformedExpression"
    NUMERIC_OVERFLOW = "NumericOverflow"
    LIMIT_EXCEEDED = "LimitExceeded"


class ExpressionError(Exception):
    """
    Base error class for all expression-related errors.
    """

    kind: ErrorKind = ErrorKind.MALFORMED_EXPRESSION

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.position = position
        self.expression = expression

    def format_with_context(self) -> str:
        """
        Returns a formatted error message with position context.
        """
        if self.expression is None or self.position is None:
            return self.message

        pointer = " " * self.position + "^"
        return f"{self.message}\n  {self.expression}\n  {pointer}"


class EmptyExpressionError(ExpressionError):
    """
    Error thrown when the expression holds nothing but whitespace.
    """

    kind = ErrorKind.EMPTY_EXPRESSION

    def __init__(self, expression: Optional[str] = None):
        super().__init__("Empty expression", None, expression)


class TokenizerError(ExpressionError):
    """
    Error thrown during tokenization (lexical analysis).
    """

    pass


class InvalidCharacterError(TokenizerError):
    kind = ErrorKind.INVALID_CHARACTER

    def __init__(
        self,
        character: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        super().__init__(
            f"Unexpected character: {character!r}", position, expression
        )
        self.character = character


class ParseError(ExpressionError):
    """
    Error thrown while reordering tokens into postfix (syntax analysis).
    """

    pass


class UnmatchedCloseParenError(ParseError):
    kind = ErrorKind.UNMATCHED_CLOSE_PAREN

    def __init__(
        self, position: Optional[int] = None, expression: Optional[str] = None
    ):
        super().__init__("Unmatched ')': missing '('", position, expression)


class UnmatchedOpenParenError(ParseError):
    kind = ErrorKind.UNMATCHED_OPEN_PAREN

    def __init__(
        self, position: Optional[int] = None, expression: Optional[str] = None
    ):
        super().__init__("Unmatched '(': missing ')'", position, expression)


class EvaluationError(ExpressionError):
    """
    Error thrown during evaluation of a postfix sequence (runtime error).
    """

    pass


class InvalidLiteralError(EvaluationError):
    kind = ErrorKind.INVALID_LITERAL

    def __init__(
        self,
        literal: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        super().__init__(f"Invalid number: '{literal}'", position, expression)
        self.literal = literal


class DivisionByZeroError(EvaluationError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(
        self, position: Optional[int] = None, expression: Optional[str] = None
    ):
        super().__init__("Division by zero", position, expression)


class MalformedExpressionError(EvaluationError):
    kind = ErrorKind.MALFORMED_EXPRESSION


class NumericOverflowError(EvaluationError):
    kind = ErrorKind.NUMERIC_OVERFLOW

    def __init__(
        self,
        operator: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        super().__init__(
            f"Numeric overflow evaluating '{operator}'", position, expression
        )
        self.operator = operator


class LimitExceededError(ExpressionError):
    """
    Error thrown when expression limits are exceeded.
    """

    kind = ErrorKind.LIMIT_EXCEEDED

    def __init__(self, limit_name: str, limit: int, actual: int):
        message = f"Limit exceeded: {limit_name} (limit: {limit}, actual: {actual})"
        super().__init__(message)
        self.limit_name = limit_name
        self.limit = limit
        self.actual = actual
