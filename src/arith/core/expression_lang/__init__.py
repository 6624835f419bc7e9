"""
arith expression language.

Tokenizer, parser, and evaluator for plain arithmetic expressions.

Usage:
    from arith.core.expression_lang import parse_expr, evaluate

    expr = parse_expr("2(3 + 4)")
    result = evaluate(expr)
    # result == 14.0
"""

from arith.core.expression_lang.evaluator import evaluate
from arith.core.expression_lang.parser import Parser, parse, parse_expr
from arith.core.expression_lang.tokenizer import Lexer, Token, TokenKind, tokenize

__all__ = [
    "Lexer",
    "Parser",
    "Token",
    "TokenKind",
    "evaluate",
    "parse",
    "parse_expr",
    "tokenize",
]
