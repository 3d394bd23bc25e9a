"""
Shunting-yard converter.

Reorders an infix token list into postfix (Reverse Polish) order using an
operator stack and an output queue, both local to a single call.
"""

import logging
from typing import List, Optional, Sequence

from .errors import UnmatchedCloseParenError, UnmatchedOpenParenError
from .limits import DEFAULT_EXPRESSION_LIMITS, ExpressionLimits, check_nesting_depth
from .operators import get_operator, is_operator, should_pop
from .tokenizer import Token, TokenType

logger = logging.getLogger(__name__)


class ShuntingYardConverter:
    """Converts one infix token sequence into postfix order."""

    def __init__(
        self,
        tokens: Sequence[Token],
        source: Optional[str] = None,
        limits: ExpressionLimits = DEFAULT_EXPRESSION_LIMITS,
    ):
        self._tokens = tokens
        self._source = source
        self._limits = limits
        self._operator_stack: List[Token] = []
        self._output_queue: List[Token] = []
        self._depth = 0

    def convert(self) -> List[Token]:
        """Runs the conversion and returns the postfix token list."""
        for token in self._tokens:
            if token.type == TokenType.LITERAL:
                self._output_queue.append(token)
            elif token.type == TokenType.LPAREN:
                self._open_paren(token)
            elif token.type == TokenType.RPAREN:
                self._close_paren(token)
            else:
                self._push_operator(token)

        # Drain the remaining operators
        while self._operator_stack:
            token = self._operator_stack.pop()
            if token.type == TokenType.LPAREN:
                raise UnmatchedOpenParenError(token.position, self._source)
            self._output_queue.append(token)

        return self._output_queue

    def _open_paren(self, token: Token) -> None:
        self._depth += 1
        check_nesting_depth(self._depth, self._limits)
        self._operator_stack.append(token)

    def _close_paren(self, token: Token) -> None:
        while self._operator_stack:
            top = self._operator_stack.pop()
            if top.type == TokenType.LPAREN:
                self._depth -= 1
                return
            self._output_queue.append(top)

        raise UnmatchedCloseParenError(token.position, self._source)

    def _push_operator(self, token: Token) -> None:
        incoming = get_operator(token.type)

        while self._operator_stack:
            top = self._operator_stack[-1]
            if not is_operator(top.type):
                break
            if not should_pop(incoming, get_operator(top.type)):
                break
            self._output_queue.append(self._operator_stack.pop())

        self._operator_stack.append(token)


def convert(
    tokens: Sequence[Token],
    source: Optional[str] = None,
    limits: Optional[ExpressionLimits] = None,
) -> List[Token]:
    """
    Converts infix tokens to postfix order.

    Args:
        tokens: Infix tokens as produced by the tokenizer
        source: Optional source expression for error reporting
        limits: Optional expression limits

    Returns:
        The tokens in postfix order, without parentheses

    Raises:
        UnmatchedCloseParenError: If a ')' has no matching '('
        UnmatchedOpenParenError: If a '(' is never closed
    """
    converter = ShuntingYardConverter(
        tokens, source, limits or DEFAULT_EXPRESSION_LIMITS
    )
    postfix = converter.convert()
    logger.debug("converted_to_postfix", extra={"postfix": to_rpn_string(postfix)})
    return postfix


def to_rpn_string(tokens: Sequence[Token]) -> str:
    """Renders a token sequence as space-separated values (`2 3 4 * +`)."""
    return " ".join(token.value for token in tokens)
