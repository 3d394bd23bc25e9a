"""
Expression engine entry point.

Runs tokenizer, shunting-yard converter and RPN evaluator in order and
reports either a number or the first error encountered.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .converter import convert, to_rpn_string
from .errors import EmptyExpressionError, ErrorKind, ExpressionError
from .evaluator import evaluate
from .limits import ExpressionLimits
from .operators import Number
from .tokenizer import is_blank, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComputeResult:
    """Result of computing one expression."""

    expression: str
    """The expression as submitted."""

    value: Optional[Number] = None
    """The numeric result, when computation succeeded."""

    error: Optional[ExpressionError] = None
    """The error that stopped computation, if any."""

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None


def compute_or_raise(
    expression: str, limits: Optional[ExpressionLimits] = None
) -> Number:
    """
    Computes an expression, raising the first error encountered.

    Raises:
        ExpressionError: One of its subclasses, tagged with an ErrorKind
    """
    if is_blank(expression):
        raise EmptyExpressionError(expression)

    tokens = tokenize(expression, limits)
    postfix = convert(tokens, expression, limits)
    return evaluate(postfix, expression, limits)


def compute(
    expression: str, limits: Optional[ExpressionLimits] = None
) -> ComputeResult:
    """
    Computes an infix arithmetic expression.

    Args:
        expression: The expression text, e.g. "(2+3)*4"
        limits: Optional expression limits

    Returns:
        A ComputeResult holding either the value or the error
    """
    try:
        value = compute_or_raise(expression, limits)
    except ExpressionError as error:
        if error.expression is None:
            error.expression = expression
        logger.debug(
            "compute_failed",
            extra={"expression": expression, "error_kind": error.kind.value},
        )
        return ComputeResult(expression=expression, error=error)

    logger.debug("compute_succeeded", extra={"expression": expression, "result": value})
    return ComputeResult(expression=expression, value=value)


def postfix_notation(
    expression: str, limits: Optional[ExpressionLimits] = None
) -> str:
    """Returns the postfix form of an expression (`2 3 4 * +` for `2+3*4`)."""
    if is_blank(expression):
        raise EmptyExpressionError(expression)
    return to_rpn_string(convert(tokenize(expression, limits), expression, limits))


def format_number(value: Number) -> str:
    """
    Formats a result for display.

    Integers print as-is; floats use the shortest repr, dropping a trailing
    '.0' on integral values (2.0 -> '2').
    """
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)
