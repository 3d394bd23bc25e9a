"""
Tokenizer (lexer) for arithmetic expressions.

Converts expression strings into a flat list of tokens for the
shunting-yard converter.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from .errors import InvalidCharacterError
from .limits import ExpressionLimits, check_expression_length, check_token_count

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token types produced by the tokenizer."""

    # Operands
    LITERAL = "LITERAL"

    # Operators
    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"
    POW = "POW"

    # Delimiters
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"


@dataclass(frozen=True)
class Token:
    """A token produced by the tokenizer."""

    type: TokenType
    value: str
    position: int

    def __str__(self) -> str:
        return self.value


# Single-character symbols recognized by the tokenizer
SYMBOLS: Dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "+": TokenType.ADD,
    "-": TokenType.SUB,
    "*": TokenType.MUL,
    "/": TokenType.DIV,
    "^": TokenType.POW,
}


def _is_whitespace(ch: str) -> bool:
    """Checks if a character is whitespace."""
    return ch in (" ", "\t", "\n", "\r")


def is_blank(source: str) -> bool:
    """Checks if a source string holds nothing but tokenizer whitespace."""
    return all(_is_whitespace(ch) for ch in source)


def _is_unclassifiable(ch: str) -> bool:
    """Control characters can never be part of a literal."""
    return not ch.isprintable()


class Tokenizer:
    """Tokenizer for expression strings."""

    def __init__(self, source: str, limits: Optional[ExpressionLimits] = None):
        self._source = source
        self._limits = limits
        self._position = 0
        self._tokens: List[Token] = []
        self._buffer = ""
        self._buffer_start = 0

    def tokenize(self) -> List[Token]:
        """Tokenizes the source expression and returns all tokens."""
        check_expression_length(self._source, self._limits)

        while not self._is_at_end():
            self._scan_token()

        self._flush_literal()

        logger.debug(
            "tokenized_expression",
            extra={"expression": self._source, "token_count": len(self._tokens)},
        )
        return self._tokens

    def _is_at_end(self) -> bool:
        return self._position >= len(self._source)

    def _advance(self) -> str:
        ch = self._source[self._position]
        self._position += 1
        return ch

    def _add_token(self, token_type: TokenType, value: str, position: int) -> None:
        self._tokens.append(Token(token_type, value, position))
        check_token_count(len(self._tokens), self._limits)

    def _flush_literal(self) -> None:
        if not self._buffer:
            return
        self._add_token(TokenType.LITERAL, self._buffer, self._buffer_start)
        self._buffer = ""

    def _scan_token(self) -> None:
        ch = self._advance()
        start_position = self._position - 1

        # Whitespace separates tokens, it does not end the input
        if _is_whitespace(ch):
            self._flush_literal()
            return

        if ch in SYMBOLS:
            self._flush_literal()
            self._add_token(SYMBOLS[ch], ch, start_position)
            return

        if _is_unclassifiable(ch):
            raise InvalidCharacterError(ch, start_position, self._source)

        if not self._buffer:
            self._buffer_start = start_position
        self._buffer += ch


def tokenize(source: str, limits: Optional[ExpressionLimits] = None) -> List[Token]:
    """
    Tokenizes an expression string into tokens.

    Args:
        source: The expression string to tokenize
        limits: Optional expression limits

    Returns:
        List of tokens in source order

    Raises:
        InvalidCharacterError: If the expression contains a control character
        LimitExceededError: If the expression or its token list is too long
    """
    tokenizer = Tokenizer(source, limits)
    return tokenizer.tokenize()
