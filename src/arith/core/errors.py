"""
Error types for arith expression scanning, parsing, and evaluation.

Every failure is fatal for the expression being processed: there is no
recovery and no partial result. Errors carry the character offset of the
offending input so callers can point at it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ErrorContext:
    """
    Source location for an error.

    Attributes:
        source: The expression text being processed
        pos: Character offset (0-indexed) of the offending input
    """

    source: str
    pos: int

    def format(self) -> str:
        """
        Format the expression with a caret under the offending column.

        Returns:
            Two lines, e.g.::

                1 & 2
                  ^
        """
        return f"{self.source}\n{' ' * self.pos}^"


class ArithError(Exception):
    """Base exception for all arith errors."""

    def __init__(self, message: str, pos: int | None = None, context: ErrorContext | None = None):
        self.message = message
        self.pos = pos
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message

    def with_source(self, source: str) -> ArithError:
        """Attach the expression text so the message shows where it failed."""
        if self.pos is not None and self.context is None:
            self.context = ErrorContext(source=source, pos=self.pos)
            self.args = (self._format_message(),)
        return self


class EmptyExpressionError(ArithError):
    """Raised when a zero-length expression is supplied, before any scanning."""

    def __init__(self) -> None:
        super().__init__("Cannot evaluate empty expression")


class LexError(ArithError):
    """
    Raised when the tokenizer meets a character it does not recognize.

    Examples:
    - Letters (``1 + x``)
    - Unsupported symbols (``1 & 2``, ``2 ^ 3``)
    - A leading decimal point (``.5``)
    """

    def __init__(self, char: str, pos: int):
        self.char = char
        super().__init__(f"Unknown character {char!r} at position {pos}", pos)


class NumberConversionError(ArithError):
    """Raised when a scanned digit run cannot be converted to a float (``1.2.3``)."""

    def __init__(self, text: str, pos: int):
        self.text = text
        super().__init__(f"Failed to convert {text!r} to a number at position {pos}", pos)


class ParseError(ArithError):
    """
    Raised when a token sequence does not form a single expression.

    Examples:
    - Dangling operators
    - Unmatched parentheses
    - Empty groups
    """

    pass


class MissingOperandError(ParseError):
    """Raised when an operator has nothing to apply to."""

    pass


class UnmatchedParenthesisError(ParseError):
    """Raised for a ``)`` with no open group, or a ``(`` never closed."""

    pass


class EvaluationError(ArithError):
    """Raised when the evaluator is handed a node it does not know."""

    pass


class ConfigError(ArithError):
    """Raised when a configuration file cannot be read or validated."""

    pass
