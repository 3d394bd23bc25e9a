"""
Tests for the expression tokenizer.
"""

import pytest

from calculette import (
    ExpressionLimits,
    InvalidCharacterError,
    LimitExceededError,
    tokenize,
)
from calculette.tokenizer import SYMBOLS, TokenType, is_blank


def values(source: str) -> list[str]:
    return [token.value for token in tokenize(source)]


class TestLiterals:
    """Tests for literal tokenization."""

    def test_tokenizes_integer_literals(self):
        tokens = tokenize("42")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.LITERAL
        assert tokens[0].value == "42"
        assert tokens[0].position == 0

    def test_tokenizes_decimal_literals(self):
        tokens = tokenize("3.14159")
        assert tokens[0].type == TokenType.LITERAL
        assert tokens[0].value == "3.14159"

    def test_literal_is_maximal_run_of_non_symbols(self):
        # Validation of the literal text happens at evaluation time
        assert values("12ab.c") == ["12ab.c"]

    def test_literal_position_is_first_character(self):
        tokens = tokenize("   42")
        assert tokens[0].position == 3

    def test_non_ascii_characters_are_literal_text(self):
        assert values("五+1") == ["五", "+", "1"]


class TestSymbols:
    """Tests for operator and parenthesis tokenization."""

    @pytest.mark.parametrize("symbol,token_type", list(SYMBOLS.items()))
    def test_tokenizes_each_symbol(self, symbol, token_type):
        tokens = tokenize(symbol)
        assert len(tokens) == 1
        assert tokens[0].type == token_type
        assert tokens[0].value == symbol

    def test_flushes_literal_before_symbol(self):
        tokens = tokenize("12+(3.5*x)")
        assert [t.value for t in tokens] == ["12", "+", "(", "3.5", "*", "x", ")"]
        assert [t.type for t in tokens] == [
            TokenType.LITERAL,
            TokenType.ADD,
            TokenType.LPAREN,
            TokenType.LITERAL,
            TokenType.MUL,
            TokenType.LITERAL,
            TokenType.RPAREN,
        ]

    def test_tracks_symbol_positions(self):
        tokens = tokenize("1 + 2")
        assert [t.position for t in tokens] == [0, 2, 4]

    def test_adjacent_operators_are_separate_tokens(self):
        assert values("1+-2") == ["1", "+", "-", "2"]


class TestWhitespace:
    """Tests for whitespace handling."""

    def test_empty_input_produces_no_tokens(self):
        assert tokenize("") == []

    def test_whitespace_only_input_produces_no_tokens(self):
        assert tokenize(" \t\n ") == []

    def test_whitespace_does_not_end_the_scan(self):
        assert values("1 + 2 * 3") == ["1", "+", "2", "*", "3"]

    def test_whitespace_separates_literals(self):
        assert values("12 34") == ["12", "34"]

    @pytest.mark.parametrize("source", ["1+2", "1 + 2", " 1  +   2 ", "1\t+\n2\r\n"])
    def test_whitespace_is_insignificant_around_symbols(self, source):
        assert values(source) == ["1", "+", "2"]

    def test_no_empty_literals(self):
        tokens = tokenize("(  )")
        assert [t.type for t in tokens] == [TokenType.LPAREN, TokenType.RPAREN]

    @pytest.mark.parametrize("source", ["", " ", " \t\r\n"])
    def test_is_blank(self, source):
        assert is_blank(source)

    @pytest.mark.parametrize("source", ["1", " ( ", "\x0b", "\xa0", "\f"])
    def test_is_not_blank(self, source):
        assert not is_blank(source)


class TestErrors:
    """Tests for tokenizer errors."""

    def test_throws_on_control_character(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            tokenize("1+\x002")
        assert exc_info.value.position == 2
        assert exc_info.value.character == "\x00"

    def test_error_includes_source_expression(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            tokenize("1\x07")
        assert exc_info.value.expression == "1\x07"

    def test_enforces_expression_length_limit(self):
        with pytest.raises(LimitExceededError) as exc_info:
            tokenize("1+1", ExpressionLimits(max_expression_length=2))
        assert exc_info.value.limit_name == "max_expression_length"
        assert exc_info.value.actual == 3

    def test_enforces_token_count_limit(self):
        with pytest.raises(LimitExceededError) as exc_info:
            tokenize("1+1+1", ExpressionLimits(max_token_count=4))
        assert exc_info.value.limit_name == "max_token_count"

    def test_token_count_at_limit_is_allowed(self):
        assert len(tokenize("1+1", ExpressionLimits(max_token_count=3))) == 3


class TestTokenValue:
    """Tests for the Token value type."""

    def test_tokens_are_immutable(self):
        token = tokenize("7")[0]
        with pytest.raises(AttributeError):
            token.value = "8"  # type: ignore[misc]

    def test_tokens_compare_by_value(self):
        assert tokenize("1+2") == tokenize("1+2")

    def test_str_is_source_text(self):
        assert [str(t) for t in tokenize("2^3")] == ["2", "^", "3"]
