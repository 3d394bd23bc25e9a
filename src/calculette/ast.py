"""
Expression tree built from a postfix token sequence.

Evaluation never needs the tree; it is used to render an expression in
fully parenthesized form and for debugging output.
"""

from abc import ABC
from dataclasses import dataclass
from typing import List, Literal, Sequence, Union

from .errors import MalformedExpressionError
from .operators import is_operator
from .tokenizer import Token, TokenType

BinaryOperator = Literal["+", "-", "*", "/", "^"]


# ============================================================
# AST Node Types
# ============================================================


@dataclass(frozen=True)
class AstNodeBase(ABC):
    """Base class for all AST nodes."""

    position: int
    """Position in source expression (for error reporting)."""


@dataclass(frozen=True)
class NumberLiteralNode(AstNodeBase):
    """Number literal node, kept as source text."""

    text: str

    @property
    def type(self) -> Literal["NumberLiteral"]:
        return "NumberLiteral"


@dataclass(frozen=True)
class BinaryOpNode(AstNodeBase):
    """Binary operation node."""

    operator: BinaryOperator
    left: "AstNode"
    right: "AstNode"

    @property
    def type(self) -> Literal["BinaryOp"]:
        return "BinaryOp"


AstNode = Union[NumberLiteralNode, BinaryOpNode]


# ============================================================
# Construction
# ============================================================


def build_ast(postfix: Sequence[Token], source: str = "") -> AstNode:
    """
    Rebuilds an expression tree from postfix tokens.

    Operands pair up the same way the evaluator pairs them: the node
    popped first becomes the right child.
    """
    stack: List[AstNode] = []

    for token in postfix:
        if token.type == TokenType.LITERAL:
            stack.append(NumberLiteralNode(position=token.position, text=token.value))
            continue

        if not is_operator(token.type) or len(stack) < 2:
            raise MalformedExpressionError(
                f"Cannot build tree at '{token.value}'", token.position, source
            )

        right = stack.pop()
        left = stack.pop()
        stack.append(
            BinaryOpNode(
                position=token.position,
                operator=token.value,  # type: ignore[arg-type]
                left=left,
                right=right,
            )
        )

    if len(stack) != 1:
        raise MalformedExpressionError(
            "Postfix sequence does not form a single expression", None, source
        )

    return stack[0]


# ============================================================
# Utilities
# ============================================================


def count_ast_nodes(node: AstNode) -> int:
    """Counts the total number of nodes in an AST."""
    if isinstance(node, BinaryOpNode):
        return 1 + count_ast_nodes(node.left) + count_ast_nodes(node.right)
    return 1


def calculate_ast_depth(node: AstNode) -> int:
    """Calculates the maximum depth of an AST."""
    if isinstance(node, BinaryOpNode):
        return 1 + max(calculate_ast_depth(node.left), calculate_ast_depth(node.right))
    return 1


def ast_to_infix(node: AstNode) -> str:
    """Renders the tree as fully parenthesized infix: `(2 ^ (3 ^ 2))`."""
    if isinstance(node, BinaryOpNode):
        return f"({ast_to_infix(node.left)} {node.operator} {ast_to_infix(node.right)})"
    return node.text


def ast_to_string(node: AstNode, indent: int = 0) -> str:
    """Returns a human-readable representation of an AST node for debugging."""
    prefix = "  " * indent

    if isinstance(node, BinaryOpNode):
        return (
            f"{prefix}BinaryOp: {node.operator}\n"
            f"{ast_to_string(node.left, indent + 1)}\n"
            f"{ast_to_string(node.right, indent + 1)}"
        )

    return f"{prefix}Number: {node.text}"
