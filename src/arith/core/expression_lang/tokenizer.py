"""
Tokenizer for arith expressions.

Converts an expression string into a sequence of typed tokens.
"""

from __future__ import annotations

import logging
import string
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto

from arith.core.errors import EmptyExpressionError, LexError, NumberConversionError

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    # Literals
    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()


@dataclass(frozen=True)
class Token:
    """A single token from the expression tokenizer.

    ``value`` is set for NUMBER tokens only. ``pos`` is the character offset
    of the token and takes no part in equality.
    """

    kind: TokenKind
    value: float | None = None
    pos: int = field(default=0, compare=False)

    @property
    def is_number(self) -> bool:
        return self.kind == TokenKind.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.kind in _OPERATOR_KINDS

    def __repr__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return f"Token({self.kind}, {self.value!r}, pos={self.pos})"
        return f"Token({self.kind}, pos={self.pos})"


_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_OPERATOR_KINDS = frozenset({TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH})

# Digit-grouping separators: 1,000 and 1_000 both read as 1000
_SEPARATORS = ",_"


class Lexer:
    """Single-pass scanner over one expression.

    The scan position is kept on the instance, so a lexer is consumed by
    reading its tokens once. Build a new one to scan again.
    """

    def __init__(self, source: str) -> None:
        if not source:
            raise EmptyExpressionError()
        self.source = source
        self.pos = 0

    def __iter__(self) -> Iterator[Token]:
        while (tok := self._next_token()) is not None:
            yield tok

    def tokens(self) -> list[Token]:
        """Scan the remaining input into a list of tokens."""
        tokens = list(self)
        logger.debug("Scanned %d tokens from %r", len(tokens), self.source)
        return tokens

    def _peek(self) -> str | None:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    def _skip_whitespace(self) -> None:
        while (c := self._peek()) is not None and c.isspace():
            self.pos += 1

    def _next_token(self) -> Token | None:
        self._skip_whitespace()
        c = self._peek()
        if c is None:
            return None

        if c in _SINGLE_CHAR:
            tok = Token(_SINGLE_CHAR[c], pos=self.pos)
            self.pos += 1
            return tok

        if c in string.digits:
            return self._read_number()

        raise LexError(c, self.pos)

    def _read_number(self) -> Token:
        """Read a digit run, dropping grouping separators."""
        start = self.pos
        chars: list[str] = []

        while (c := self._peek()) is not None:
            if c in string.digits or c == ".":
                chars.append(c)
            elif c not in _SEPARATORS:
                break
            self.pos += 1

        text = "".join(chars)
        try:
            value = float(text)
        except ValueError as e:
            raise NumberConversionError(self.source[start : self.pos], start) from e
        return Token(TokenKind.NUMBER, value, start)


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Raises:
        EmptyExpressionError: If ``source`` is empty.
        LexError: On an unrecognized character.
        NumberConversionError: If a digit run is not a valid number.
    """
    return Lexer(source).tokens()
