"""
End-to-end evaluation of a single arithmetic expression.

Runs the tokenizer, parser, and evaluator in order and formats the result
for display.
"""

from __future__ import annotations

import logging
import math

from arith.core.errors import ArithError
from arith.core.expression_lang.evaluator import evaluate
from arith.core.expression_lang.parser import parse
from arith.core.expression_lang.tokenizer import tokenize

logger = logging.getLogger(__name__)


def calculate(source: str) -> float:
    """
    Evaluate one expression string.

    Leading and trailing whitespace is trimmed before scanning.

    Args:
        source: Expression text, e.g. "(2 + 3) * 4"

    Returns:
        The computed value.

    Raises:
        ArithError: Any scanning or parsing failure, with the expression
            attached for caret diagnostics.
    """
    expr = source.strip()
    try:
        tree = parse(tokenize(expr))
    except ArithError as e:
        e.with_source(expr)
        raise
    result = evaluate(tree)
    logger.debug("%s evaluated to %r", tree, result)
    return result


def format_number(value: float) -> str:
    """Render a result: integral values without a fractional part."""
    if math.isnan(value):
        return "NaN"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_result(expr: str, value: float) -> str:
    """Render ``<expr> = <result>``."""
    return f"{expr} = {format_number(value)}"
