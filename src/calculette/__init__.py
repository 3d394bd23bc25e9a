"""
Arithmetic expression engine.

This package evaluates infix expressions over `+ - * / ^` and parentheses
with a tokenizer, a shunting-yard converter and a postfix evaluator.
"""

# Tree
from .ast import (
    AstNode,
    AstNodeBase,
    BinaryOpNode,
    NumberLiteralNode,
    ast_to_infix,
    ast_to_string,
    build_ast,
    calculate_ast_depth,
    count_ast_nodes,
)

# Configuration
from .config import CalculatorConfig, load_config

# Converter
from .converter import ShuntingYardConverter, convert, to_rpn_string

# Engine
from .engine import (
    ComputeResult,
    compute,
    compute_or_raise,
    format_number,
    postfix_notation,
)
from .errors import (
    DivisionByZeroError,
    EmptyExpressionError,
    ErrorKind,
    EvaluationError,
    ExpressionError,
    InvalidCharacterError,
    InvalidLiteralError,
    LimitExceededError,
    MalformedExpressionError,
    NumericOverflowError,
    ParseError,
    TokenizerError,
    UnmatchedCloseParenError,
    UnmatchedOpenParenError,
)

# Evaluator
from .evaluator import RpnEvaluator, evaluate, parse_number
from .limits import DEFAULT_EXPRESSION_LIMITS, ExpressionLimits

# Operators
from .operators import (
    OPERATORS,
    Associativity,
    Number,
    OperatorInfo,
    get_operator,
    is_operator,
)
from .session import CalculatorSession, HistoryEntry

# Tokenizer
from .tokenizer import Token, Tokenizer, TokenType, tokenize

__all__ = [
    # Tree
    "AstNode",
    "AstNodeBase",
    "NumberLiteralNode",
    "BinaryOpNode",
    "build_ast",
    "ast_to_infix",
    "ast_to_string",
    "count_ast_nodes",
    "calculate_ast_depth",
    # Configuration
    "CalculatorConfig",
    "load_config",
    # Errors
    "ErrorKind",
    "ExpressionError",
    "EmptyExpressionError",
    "TokenizerError",
    "InvalidCharacterError",
    "ParseError",
    "UnmatchedCloseParenError",
    "UnmatchedOpenParenError",
    "EvaluationError",
    "InvalidLiteralError",
    "DivisionByZeroError",
    "MalformedExpressionError",
    "NumericOverflowError",
    "LimitExceededError",
    # Limits
    "ExpressionLimits",
    "DEFAULT_EXPRESSION_LIMITS",
    # Tokenizer
    "Token",
    "TokenType",
    "Tokenizer",
    "tokenize",
    # Operators
    "Number",
    "Associativity",
    "OperatorInfo",
    "OPERATORS",
    "is_operator",
    "get_operator",
    # Converter
    "ShuntingYardConverter",
    "convert",
    "to_rpn_string",
    # Evaluator
    "RpnEvaluator",
    "evaluate",
    "parse_number",
    # Engine
    "ComputeResult",
    "compute",
    "compute_or_raise",
    "postfix_notation",
    "format_number",
    # Session
    "CalculatorSession",
    "HistoryEntry",
]
