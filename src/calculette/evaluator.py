"""
Postfix (RPN) evaluator.

Consumes a postfix token list with an operand stack and produces a single
number.

Numeric semantics:
- Integer literals evaluate to int, decimal literals to float.
- Exact integer quotients stay int (6/3 -> 2), other quotients are floats.
- The first fault aborts evaluation; the stack is never used past an error.
"""

import logging
import math
import re
from typing import List, Optional, Sequence

from .errors import (
    DivisionByZeroError,
    InvalidLiteralError,
    MalformedExpressionError,
    NumericOverflowError,
)
from .limits import (
    DEFAULT_EXPRESSION_LIMITS,
    ExpressionLimits,
    check_exponent,
    check_integer_bits,
)
from .operators import Number, OperatorInfo, get_operator, is_operator
from .tokenizer import Token, TokenType

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[0-9]+")
_DECIMAL_PATTERN = re.compile(r"(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)(?:[eE][0-9]+)?")


def parse_number(text: str) -> Optional[Number]:
    """
    Parses literal text into a number.

    Returns None when the text is not a plain unsigned decimal number.
    Underscores, signs and non-finite spellings such as 'inf' are rejected.
    """
    if _INTEGER_PATTERN.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # Longer than the interpreter converts from a string
            return None
    if _DECIMAL_PATTERN.fullmatch(text):
        value = float(text)
        if not math.isfinite(value):
            return None
        return value
    return None


class RpnEvaluator:
    """Evaluates a postfix token sequence and returns the result."""

    def __init__(
        self,
        source: Optional[str] = None,
        limits: ExpressionLimits = DEFAULT_EXPRESSION_LIMITS,
    ):
        self._source = source
        self._limits = limits

    def evaluate(self, postfix: Sequence[Token]) -> Number:
        """Evaluates the postfix sequence."""
        stack: List[Number] = []

        for token in postfix:
            if token.type == TokenType.LITERAL:
                stack.append(self._evaluate_literal(token))
                continue

            if not is_operator(token.type):
                # Parentheses never survive a correct conversion
                raise MalformedExpressionError(
                    f"Unexpected token in postfix input: '{token.value}'",
                    token.position,
                    self._source,
                )

            info = get_operator(token.type)
            if len(stack) < info.arity:
                raise MalformedExpressionError(
                    f"Missing operand for '{token.value}'",
                    token.position,
                    self._source,
                )

            right = stack.pop()
            left = stack.pop()
            stack.append(self._apply(info, left, right, token))

        if not stack:
            raise MalformedExpressionError(
                "Expression produced no value", None, self._source
            )

        if len(stack) > 1:
            raise MalformedExpressionError(
                f"Missing operator: {len(stack)} values left after evaluation",
                None,
                self._source,
            )

        return stack[0]

    def _evaluate_literal(self, token: Token) -> Number:
        value = parse_number(token.value)
        if value is None:
            raise InvalidLiteralError(token.value, token.position, self._source)
        if isinstance(value, int):
            check_integer_bits(value.bit_length(), self._limits)
        return value

    def _apply(
        self, info: OperatorInfo, left: Number, right: Number, token: Token
    ) -> Number:
        """Applies `left <op> right`; `right` is the operand pushed last."""
        if info.symbol == "/" and right == 0:
            raise DivisionByZeroError(token.position, self._source)
        if info.symbol == "^":
            self._check_power(left, right, token)

        try:
            result = info.apply(left, right)
        except OverflowError:
            raise NumericOverflowError(info.symbol, token.position, self._source)

        if isinstance(result, complex):
            raise MalformedExpressionError(
                f"No real result for {left} ^ {right}",
                token.position,
                self._source,
            )

        if isinstance(result, float) and not math.isfinite(result):
            raise NumericOverflowError(info.symbol, token.position, self._source)

        if isinstance(result, int):
            check_integer_bits(result.bit_length(), self._limits)

        return result

    def _check_power(self, base: Number, exponent: Number, token: Token) -> None:
        """Rejects powers that are undefined or too large to compute."""
        if base == 0 and exponent < 0:
            raise DivisionByZeroError(token.position, self._source)

        if isinstance(exponent, int) and isinstance(base, int) and abs(base) > 1:
            check_exponent(exponent, self._limits)
            if exponent > 0:
                # |base| >= 2**(n - 1) for an n-bit base
                min_bits = exponent * (abs(base).bit_length() - 1) + 1
                check_integer_bits(min_bits, self._limits)


def evaluate(
    postfix: Sequence[Token],
    source: Optional[str] = None,
    limits: Optional[ExpressionLimits] = None,
) -> Number:
    """
    Evaluates a postfix token sequence.

    Args:
        postfix: Tokens in postfix order
        source: Optional source expression for error reporting
        limits: Optional expression limits

    Returns:
        The numeric result

    Raises:
        InvalidLiteralError: If a literal is not a number
        DivisionByZeroError: If a divisor is zero
        LimitExceededError: If an exponent or integer result is too large
        NumericOverflowError: If a float result is not finite
        MalformedExpressionError: If operands and operators do not balance
    """
    evaluator = RpnEvaluator(source, limits or DEFAULT_EXPRESSION_LIMITS)
    value = evaluator.evaluate(postfix)
    logger.debug("evaluated_postfix", extra={"result": value})
    return value
