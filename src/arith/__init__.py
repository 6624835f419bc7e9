"""
arith - scan, parse, and evaluate arithmetic expressions.

Supports + - * /, parentheses, implicit multiplication ``2(3 + 4)``,
unary signs, and digit grouping ``1,000`` / ``1_000``.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.calculator import calculate
from .core.errors import ArithError, LexError, ParseError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "calculate",
    "ArithError",
    "LexError",
    "ParseError",
]
