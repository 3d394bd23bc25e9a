"""
Tests for the shunting-yard converter.
"""

import pytest

from calculette import (
    ExpressionLimits,
    LimitExceededError,
    TokenType,
    UnmatchedCloseParenError,
    UnmatchedOpenParenError,
    convert,
    to_rpn_string,
    tokenize,
)


def postfix(expression: str) -> str:
    """Helper to convert an expression and render the postfix form."""
    return to_rpn_string(convert(tokenize(expression), expression))


class TestPrecedence:
    """Tests for operator precedence."""

    @pytest.mark.parametrize(
        "expression,expected",
        [
            ("1", "1"),
            ("1+2", "1 2 +"),
            ("2+3*4", "2 3 4 * +"),
            ("2*3+4", "2 3 * 4 +"),
            ("2*3^2", "2 3 2 ^ *"),
            ("2^3*4", "2 3 ^ 4 *"),
            ("1+2*3^4-5", "1 2 3 4 ^ * + 5 -"),
        ],
    )
    def test_orders_by_precedence(self, expression, expected):
        assert postfix(expression) == expected


class TestAssociativity:
    """Tests for equal-precedence tie breaking."""

    def test_subtraction_groups_left(self):
        assert postfix("10-3-2") == "10 3 - 2 -"

    def test_division_groups_left(self):
        assert postfix("8/4/2") == "8 4 / 2 /"

    def test_mixed_additive_groups_left(self):
        assert postfix("1-2+3") == "1 2 - 3 +"

    def test_power_groups_right(self):
        assert postfix("2^3^2") == "2 3 2 ^ ^"


class TestParentheses:
    """Tests for parenthesis handling."""

    def test_parentheses_override_precedence(self):
        assert postfix("(2+3)*4") == "2 3 + 4 *"

    def test_parentheses_override_associativity(self):
        assert postfix("(2^3)^2") == "2 3 ^ 2 ^"
        assert postfix("10-(3-2)") == "10 3 2 - -"

    def test_parentheses_are_not_emitted(self):
        tokens = convert(tokenize("((1+2))*(3)"))
        assert all(
            t.type not in (TokenType.LPAREN, TokenType.RPAREN) for t in tokens
        )
        assert to_rpn_string(tokens) == "1 2 + 3 *"

    def test_empty_parentheses_produce_nothing(self):
        assert convert(tokenize("()")) == []

    def test_unmatched_open_paren(self):
        with pytest.raises(UnmatchedOpenParenError) as exc_info:
            postfix("(1+2")
        assert exc_info.value.position == 0
        assert exc_info.value.expression == "(1+2"

    def test_unmatched_open_paren_reports_innermost(self):
        with pytest.raises(UnmatchedOpenParenError) as exc_info:
            postfix("(1+(2")
        assert exc_info.value.position == 3

    def test_unmatched_close_paren(self):
        with pytest.raises(UnmatchedCloseParenError) as exc_info:
            postfix("1+2)")
        assert exc_info.value.position == 3

    def test_close_before_open(self):
        with pytest.raises(UnmatchedCloseParenError) as exc_info:
            postfix(")(")
        assert exc_info.value.position == 0

    def test_nesting_limit(self):
        limits = ExpressionLimits(max_nesting_depth=1)
        with pytest.raises(LimitExceededError):
            convert(tokenize("((1))"), limits=limits)

    def test_sibling_groups_do_not_count_as_nesting(self):
        limits = ExpressionLimits(max_nesting_depth=1)
        tokens = convert(tokenize("(1)+(2)"), limits=limits)
        assert to_rpn_string(tokens) == "1 2 +"


class TestStructure:
    """Tests for structural properties of the output."""

    @pytest.mark.parametrize(
        "expression", ["1", "1+2", "2+3*4", "2^3^2", "10-3-2", "1*2/3+4-5^6"]
    )
    def test_length_preserved_without_parentheses(self, expression):
        tokens = tokenize(expression)
        assert len(convert(tokens)) == len(tokens)

    def test_operands_keep_their_order(self):
        tokens = convert(tokenize("5-4*3/2+1"))
        literals = [t.value for t in tokens if t.type == TokenType.LITERAL]
        assert literals == ["5", "4", "3", "2", "1"]

    def test_does_not_validate_operand_count(self):
        assert postfix("+") == "+"
        assert postfix("1 2") == "1 2"

    def test_empty_input(self):
        assert convert([]) == []

    def test_input_is_not_modified(self):
        tokens = tokenize("(1+2)*3")
        snapshot = list(tokens)
        convert(tokens)
        assert tokens == snapshot
