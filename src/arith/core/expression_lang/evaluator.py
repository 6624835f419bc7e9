"""
Expression evaluator for arith.

Walks the AST produced by the parser and computes a float. Pure evaluation:
no I/O, no shared state, and no use of Python's eval().
"""

from __future__ import annotations

import math

from arith.core.errors import EvaluationError
from arith.core.ir.expressions import (
    AstNode,
    BinaryExpr,
    Number,
    Operator,
    UnaryExpr,
    UnaryOp,
)


def evaluate(expr: AstNode) -> float:
    """Evaluate an expression tree.

    Division follows IEEE-754 rather than raising: ``x / 0`` is ``±inf``
    and ``0 / 0`` is ``nan``.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed value.

    Raises:
        EvaluationError: If the tree contains an unknown node type.
    """
    return _interpret(expr)


def _interpret(expr: AstNode) -> float:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, Number):
        return expr.value

    if isinstance(expr, BinaryExpr):
        return _interpret_binary(expr)

    if isinstance(expr, UnaryExpr):
        return _interpret_unary(expr)

    raise EvaluationError(f"Unknown expression type: {type(expr).__name__}")


def _interpret_binary(expr: BinaryExpr) -> float:
    """Evaluate a binary expression, left operand first."""
    left = _interpret(expr.left)
    right = _interpret(expr.right)

    if expr.op == Operator.ADD:
        return left + right
    if expr.op == Operator.SUBTRACT:
        return left - right
    if expr.op == Operator.MULTIPLY:
        return left * right
    if expr.op == Operator.DIVIDE:
        return _divide(left, right)

    raise EvaluationError(f"Unknown binary op: {expr.op}")


def _divide(left: float, right: float) -> float:
    """IEEE-754 division; Python raises ZeroDivisionError for float / 0."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _interpret_unary(expr: UnaryExpr) -> float:
    """Evaluate a unary expression."""
    val = _interpret(expr.operand)
    if expr.op == UnaryOp.NEGATIVE:
        return -val
    if expr.op == UnaryOp.POSITIVE:
        return val
    raise EvaluationError(f"Unknown unary op: {expr.op}")
