"""Tests for the arith tokenizer.

Covers:
- Single-character tokens and numbers
- Digit-group separators
- Offsets, whitespace, single-pass behaviour
- Lexical failures
"""

from __future__ import annotations

import pytest

from arith.core.errors import EmptyExpressionError, LexError, NumberConversionError
from arith.core.expression_lang.tokenizer import Lexer, Token, TokenKind, tokenize


def _num(value: float) -> Token:
    return Token(TokenKind.NUMBER, value)


PLUS = Token(TokenKind.PLUS)
MINUS = Token(TokenKind.MINUS)
STAR = Token(TokenKind.STAR)
SLASH = Token(TokenKind.SLASH)
LPAREN = Token(TokenKind.LPAREN)
RPAREN = Token(TokenKind.RPAREN)


class TestTokenizer:
    """Tokenizer produces correct token sequences."""

    def test_simple_expression(self) -> None:
        assert tokenize("1 + 2") == [_num(1.0), PLUS, _num(2.0)]

    def test_parentheses(self) -> None:
        assert tokenize("(1 + 2) * 3") == [
            LPAREN,
            _num(1.0),
            PLUS,
            _num(2.0),
            RPAREN,
            STAR,
            _num(3.0),
        ]

    def test_division_and_subtraction(self) -> None:
        assert tokenize("10 / 2 - 3") == [_num(10.0), SLASH, _num(2.0), MINUS, _num(3.0)]

    def test_number_before_parenthesis_has_no_synthetic_token(self) -> None:
        assert tokenize("2(3 + 4)") == [
            _num(2.0),
            LPAREN,
            _num(3.0),
            PLUS,
            _num(4.0),
            RPAREN,
        ]

    def test_adjacent_groups(self) -> None:
        kinds = [t.kind for t in tokenize("(2)(3 + 4)")]
        assert kinds == [
            TokenKind.LPAREN,
            TokenKind.NUMBER,
            TokenKind.RPAREN,
            TokenKind.LPAREN,
            TokenKind.NUMBER,
            TokenKind.PLUS,
            TokenKind.NUMBER,
            TokenKind.RPAREN,
        ]

    def test_complex_expression(self) -> None:
        assert tokenize("3 + 4 * 2 / (1 - 5)") == [
            _num(3.0),
            PLUS,
            _num(4.0),
            STAR,
            _num(2.0),
            SLASH,
            LPAREN,
            _num(1.0),
            MINUS,
            _num(5.0),
            RPAREN,
        ]

    def test_decimal_numbers(self) -> None:
        assert tokenize("1.5 + 2.25") == [_num(1.5), PLUS, _num(2.25)]

    def test_leading_minus_is_plain_minus(self) -> None:
        assert tokenize("-3 + 2") == [MINUS, _num(3.0), PLUS, _num(2.0)]

    def test_no_end_of_input_token(self) -> None:
        tokens = tokenize("42")
        assert len(tokens) == 1
        assert tokens[0].value == 42.0

    def test_whitespace_handling(self) -> None:
        assert tokenize(" \t 1\n+\r2  ") == [_num(1.0), PLUS, _num(2.0)]


class TestDigitSeparators:
    """Comma and underscore grouping are dropped from numbers."""

    @pytest.mark.parametrize("source", ["1000", "1,000", "1_000", "1,0_00"])
    def test_thousand(self, source: str) -> None:
        assert tokenize(source) == [_num(1000.0)]

    def test_grouped_decimal(self) -> None:
        assert tokenize("1_234.5") == [_num(1234.5)]

    def test_trailing_separator(self) -> None:
        assert tokenize("7,") == [_num(7.0)]

    def test_trailing_point(self) -> None:
        assert tokenize("7.") == [_num(7.0)]


class TestTokenPositions:
    """Tokens record the offset of their first character."""

    def test_offsets(self) -> None:
        tokens = tokenize("12 + (3)")
        assert [t.pos for t in tokens] == [0, 3, 5, 6, 7]

    def test_position_ignored_in_equality(self) -> None:
        assert Token(TokenKind.PLUS, pos=0) == Token(TokenKind.PLUS, pos=9)

    def test_tokens_are_immutable(self) -> None:
        tok = tokenize("1")[0]
        with pytest.raises(AttributeError):
            tok.value = 2.0  # type: ignore[misc]


class TestLexer:
    """Lexer is a single pass over its input."""

    def test_tokens_then_exhausted(self) -> None:
        lexer = Lexer("1 + 2")
        assert len(lexer.tokens()) == 3
        assert lexer.tokens() == []

    def test_new_instance_restarts(self) -> None:
        assert Lexer("1 + 2").tokens() == Lexer("1 + 2").tokens()

    def test_iteration(self) -> None:
        kinds = [t.kind for t in Lexer("4 * 5")]
        assert kinds == [TokenKind.NUMBER, TokenKind.STAR, TokenKind.NUMBER]

    def test_iteration_stops_at_bad_character(self) -> None:
        it = iter(Lexer("1 ? 2"))
        assert next(it) == _num(1.0)
        with pytest.raises(LexError):
            next(it)


class TestTokenizerErrors:
    """Invalid input fails immediately."""

    def test_empty_input(self) -> None:
        with pytest.raises(EmptyExpressionError, match="empty expression"):
            Lexer("")

    def test_unknown_character(self) -> None:
        with pytest.raises(LexError, match="Unknown character '&' at position 2") as exc_info:
            tokenize("1 & 2")
        assert exc_info.value.char == "&"
        assert exc_info.value.pos == 2

    def test_letter(self) -> None:
        with pytest.raises(LexError) as exc_info:
            tokenize("1 + x")
        assert exc_info.value.char == "x"
        assert exc_info.value.pos == 4

    def test_leading_decimal_point(self) -> None:
        with pytest.raises(LexError) as exc_info:
            tokenize(".5")
        assert exc_info.value.char == "."
        assert exc_info.value.pos == 0

    def test_exponent_symbol(self) -> None:
        with pytest.raises(LexError, match="'\\^'"):
            tokenize("2 ^ 3")

    def test_multiple_decimal_points(self) -> None:
        with pytest.raises(NumberConversionError) as exc_info:
            tokenize("1 + 1.2.3")
        assert exc_info.value.text == "1.2.3"
        assert exc_info.value.pos == 4

    def test_non_ascii_digit(self) -> None:
        with pytest.raises(LexError):
            tokenize("٣")
