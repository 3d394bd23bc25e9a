"""
Resource limits for expression conversion and evaluation.

These limits protect against resource exhaustion from overly long
expressions and runaway integer exponentiation.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import LimitExceededError


@dataclass(frozen=True)
class ExpressionLimits:
    """Expression limits configuration."""

    # Maximum expression string length in characters
    max_expression_length: int = 4096

    # Maximum number of tokens produced by the tokenizer
    max_token_count: int = 1024

    # Maximum parenthesis nesting level
    max_nesting_depth: int = 64

    # Maximum absolute value of an integer exponent
    max_exponent: int = 10000

    # Maximum bit length of any integer operand or result; keeps results
    # printable under the interpreter's integer string conversion limit
    max_integer_bits: int = 8192


# Default expression limits.
#
# These values are chosen to allow any hand-written expression while
# keeping big-integer arithmetic bounded.
DEFAULT_EXPRESSION_LIMITS = ExpressionLimits()


def check_expression_length(
    expression: str, limits: Optional[ExpressionLimits] = None
) -> None:
    """Validates that expression length is within limits."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if len(expression) > limits.max_expression_length:
        raise LimitExceededError(
            "max_expression_length", limits.max_expression_length, len(expression)
        )


def check_token_count(count: int, limits: Optional[ExpressionLimits] = None) -> None:
    """Validates the number of tokens produced so far."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if count > limits.max_token_count:
        raise LimitExceededError("max_token_count", limits.max_token_count, count)


def check_nesting_depth(
    depth: int, limits: Optional[ExpressionLimits] = None
) -> None:
    """Validates parenthesis nesting during conversion."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if depth > limits.max_nesting_depth:
        raise LimitExceededError("max_nesting_depth", limits.max_nesting_depth, depth)


def check_exponent(exponent: int, limits: Optional[ExpressionLimits] = None) -> None:
    """Validates an integer exponent before exponentiation."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if abs(exponent) > limits.max_exponent:
        raise LimitExceededError("max_exponent", limits.max_exponent, abs(exponent))


def check_integer_bits(bits: int, limits: Optional[ExpressionLimits] = None) -> None:
    """Validates the bit length of an integer value or a lower bound for it."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if bits > limits.max_integer_bits:
        raise LimitExceededError("max_integer_bits", limits.max_integer_bits, bits)
