"""Core arith functionality: IR, tokenizer, parser, evaluator, configuration."""

from . import ir
from .calculator import calculate, format_number, format_result
from .config import CalcConfig, load_config
from .errors import (
    ArithError,
    ConfigError,
    EmptyExpressionError,
    ErrorContext,
    EvaluationError,
    LexError,
    MissingOperandError,
    NumberConversionError,
    ParseError,
    UnmatchedParenthesisError,
)

__all__ = [
    "ir",
    "calculate",
    "format_number",
    "format_result",
    "CalcConfig",
    "load_config",
    "ArithError",
    "ConfigError",
    "EmptyExpressionError",
    "ErrorContext",
    "EvaluationError",
    "LexError",
    "MissingOperandError",
    "NumberConversionError",
    "ParseError",
    "UnmatchedParenthesisError",
]
