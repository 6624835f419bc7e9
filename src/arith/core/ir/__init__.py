"""
arith Internal Representation (IR).

Typed AST nodes shared by the parser and the evaluator.
"""

from .expressions import (
    UNARY_PRECEDENCE,
    AstNode,
    BinaryExpr,
    Number,
    Operator,
    UnaryExpr,
    UnaryOp,
)

__all__ = [
    "UNARY_PRECEDENCE",
    "AstNode",
    "BinaryExpr",
    "Number",
    "Operator",
    "UnaryExpr",
    "UnaryOp",
]
