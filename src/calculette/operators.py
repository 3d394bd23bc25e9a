"""
Operator metadata shared by the converter and the evaluator.

The table is built once at import time and exposed read-only, so it can be
consulted from any number of concurrent callers.
"""

import operator
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Union

from .tokenizer import TokenType

Number = Union[int, float]


def _divide(left: Number, right: Number) -> Number:
    """True division that keeps exact integer quotients as int (6/3 -> 2)."""
    if isinstance(left, int) and isinstance(right, int) and left % right == 0:
        return left // right
    return left / right


class Associativity(Enum):
    """Grouping direction for operators of equal precedence."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class OperatorInfo:
    """Precedence, associativity and arity of a binary operator."""

    symbol: str
    precedence: int
    associativity: Associativity
    apply: Callable[[Number, Number], Number]
    arity: int = 2

    @property
    def is_left_associative(self) -> bool:
        return self.associativity is Associativity.LEFT

    @property
    def is_right_associative(self) -> bool:
        return self.associativity is Associativity.RIGHT


OPERATORS: Mapping[TokenType, OperatorInfo] = MappingProxyType(
    {
        TokenType.POW: OperatorInfo("^", 4, Associativity.RIGHT, operator.pow),
        TokenType.MUL: OperatorInfo("*", 3, Associativity.LEFT, operator.mul),
        TokenType.DIV: OperatorInfo("/", 3, Associativity.LEFT, _divide),
        TokenType.ADD: OperatorInfo("+", 2, Associativity.LEFT, operator.add),
        TokenType.SUB: OperatorInfo("-", 2, Associativity.LEFT, operator.sub),
    }
)


def is_operator(token_type: TokenType) -> bool:
    """Checks if a token type is a binary operator (parentheses are not)."""
    return token_type in OPERATORS


def get_operator(token_type: TokenType) -> OperatorInfo:
    """Returns the metadata for an operator token type."""
    return OPERATORS[token_type]


def should_pop(incoming: OperatorInfo, top: OperatorInfo) -> bool:
    """
    Decides whether the operator on top of the stack leaves before `incoming`.

    Left-associative operators pop an equal-precedence top so that chains
    group left to right; right-associative operators only pop a strictly
    higher top so that `2^3^2` groups as `2^(3^2)`.
    """
    if incoming.is_left_associative:
        return incoming.precedence <= top.precedence
    return incoming.precedence < top.precedence
