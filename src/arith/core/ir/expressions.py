"""
Arithmetic expression types for the arith IR.

This module defines the typed AST produced by the parser and consumed by
the evaluator.

Supports:
- Numeric literals: 42, 3.5, 1_000
- Binary arithmetic: +, -, *, /
- Unary sign: -x, +x
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class Operator(StrEnum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def precedence(self) -> int:
        """Binding strength; higher binds tighter. Operators within a tier are left-associative."""
        return _PRECEDENCE[self]


_PRECEDENCE: dict[Operator, int] = {
    Operator.ADD: 0,
    Operator.SUBTRACT: 0,
    Operator.MULTIPLY: 1,
    Operator.DIVIDE: 1,
}

# Prefix sign operators bind tighter than any binary operator
UNARY_PRECEDENCE = 2


class UnaryOp(StrEnum):
    """Unary (prefix) operators."""

    POSITIVE = "+"
    NEGATIVE = "-"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Number(BaseModel):
    """A numeric literal."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        if self.value.is_integer() and abs(self.value) < 1e16:
            return str(int(self.value))
        return repr(self.value)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    left: AstNode
    op: Operator
    right: AstNode

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


class UnaryExpr(BaseModel):
    """Unary operation: op operand."""

    op: UnaryOp
    operand: AstNode

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.op.value}{self.operand}"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

AstNode = Number | BinaryExpr | UnaryExpr

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
UnaryExpr.model_rebuild()
