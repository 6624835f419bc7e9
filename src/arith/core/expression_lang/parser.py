"""
Operator-precedence parser for arith expressions.

A two-stack shunting-yard variant: operands and pending operators are kept
on separate stacks and reduced into AST nodes as precedence allows.

Grammar (precedence low to high):
    expr    → term (("+"|"-") term)*
    term    → factor (("*"|"/") factor)*  |  factor factor   (juxtaposition)
    factor  → ("+"|"-") factor | NUMBER | "(" expr ")"

Juxtaposition (``2(3+4)``, ``(1)(2)``) multiplies, at the same tier as an
explicit ``*``. The tokenizer emits no token for it; the parser supplies the
operator when an operand follows an operand.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from arith.core.errors import MissingOperandError, UnmatchedParenthesisError
from arith.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from arith.core.ir.expressions import (
    UNARY_PRECEDENCE,
    AstNode,
    BinaryExpr,
    Number,
    Operator,
    UnaryExpr,
    UnaryOp,
)

logger = logging.getLogger(__name__)

_BINARY_OPS: dict[TokenKind, Operator] = {
    TokenKind.PLUS: Operator.ADD,
    TokenKind.MINUS: Operator.SUBTRACT,
    TokenKind.STAR: Operator.MULTIPLY,
    TokenKind.SLASH: Operator.DIVIDE,
}

_SIGN_OPS: dict[TokenKind, UnaryOp] = {
    TokenKind.PLUS: UnaryOp.POSITIVE,
    TokenKind.MINUS: UnaryOp.NEGATIVE,
}

_OPERAND_START = frozenset({TokenKind.NUMBER, TokenKind.LPAREN})
_OPERAND_END = frozenset({TokenKind.NUMBER, TokenKind.RPAREN})


@dataclass(frozen=True)
class _Pending:
    """An operator-stack entry. ``op`` is None for an open-parenthesis marker."""

    op: Operator | UnaryOp | None
    pos: int

    @property
    def is_group(self) -> bool:
        return self.op is None

    @property
    def precedence(self) -> int:
        if isinstance(self.op, UnaryOp):
            return UNARY_PRECEDENCE
        assert self.op is not None
        return self.op.precedence


class Parser:
    """Builds one AST from a complete token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens

    def parse(self) -> AstNode:
        """Parse the whole token list into a single expression tree.

        Raises:
            MissingOperandError: If an operator lacks an operand.
            UnmatchedParenthesisError: If parentheses do not pair up.
        """
        operands: list[AstNode] = []
        operators: list[_Pending] = []
        prev: Token | None = None

        for tok in self.tokens:
            if prev is not None and prev.kind in _OPERAND_END and tok.kind in _OPERAND_START:
                _push_binary(operands, operators, _Pending(Operator.MULTIPLY, tok.pos))

            if tok.kind == TokenKind.NUMBER:
                assert tok.value is not None
                operands.append(Number(value=tok.value))
            elif tok.kind == TokenKind.LPAREN:
                operators.append(_Pending(None, tok.pos))
            elif tok.kind == TokenKind.RPAREN:
                _close_group(operands, operators, tok)
            elif _expects_operand(prev) and tok.kind in _SIGN_OPS:
                # Prefix operators wait for their operand; nothing to reduce yet
                operators.append(_Pending(_SIGN_OPS[tok.kind], tok.pos))
            else:
                _push_binary(operands, operators, _Pending(_BINARY_OPS[tok.kind], tok.pos))
            prev = tok

        while operators:
            entry = operators.pop()
            if entry.is_group:
                raise UnmatchedParenthesisError("Unmatched '(': group is never closed", entry.pos)
            _reduce(operands, entry)

        if not operands:
            raise MissingOperandError("Failed to parse expression: no operand", 0)
        # Juxtaposed operands always get an implicit operator, so one node remains
        assert len(operands) == 1

        root = operands.pop()
        logger.debug("Parsed expression tree %s", root)
        return root


def _expects_operand(prev: Token | None) -> bool:
    """True at the start of input, after an operator, or after ``(``."""
    return prev is None or prev.is_operator or prev.kind == TokenKind.LPAREN


def _push_binary(operands: list[AstNode], operators: list[_Pending], incoming: _Pending) -> None:
    """Reduce while the stack top binds at least as tightly, then push ``incoming``."""
    while operators:
        top = operators[-1]
        if top.is_group or top.precedence < incoming.precedence:
            break
        _reduce(operands, operators.pop())
    operators.append(incoming)


def _close_group(operands: list[AstNode], operators: list[_Pending], tok: Token) -> None:
    """Reduce back to the matching open-parenthesis marker and discard it."""
    while operators:
        entry = operators.pop()
        if entry.is_group:
            return
        _reduce(operands, entry)
    raise UnmatchedParenthesisError("Unmatched ')': no open group to close", tok.pos)


def _reduce(operands: list[AstNode], entry: _Pending) -> None:
    """Combine the top operand(s) with ``entry`` and push the result."""
    if isinstance(entry.op, UnaryOp):
        if not operands:
            raise MissingOperandError(f"No operand for unary '{entry.op.value}'", entry.pos)
        operands.append(UnaryExpr(op=entry.op, operand=operands.pop()))
        return

    assert entry.op is not None
    if not operands:
        raise MissingOperandError(f"No right operand for '{entry.op.value}'", entry.pos)
    right = operands.pop()
    if not operands:
        raise MissingOperandError(f"No left operand for '{entry.op.value}'", entry.pos)
    left = operands.pop()
    operands.append(BinaryExpr(left=left, op=entry.op, right=right))


def parse(tokens: list[Token]) -> AstNode:
    """Parse a token list into an AST."""
    return Parser(tokens).parse()


def parse_expr(source: str) -> AstNode:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "2 + 3 * 4")

    Returns:
        Parsed expression AST.

    Raises:
        EmptyExpressionError: If ``source`` is empty.
        LexError: If tokenization fails.
        NumberConversionError: If a numeric literal is malformed.
        ParseError: If the expression is structurally invalid.
    """
    return parse(tokenize(source))
