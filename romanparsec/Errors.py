from typing import Optional

from .Parsec import ParseError


class EvalError(Exception):
    """Base class for every evaluation failure."""

    def __init__(self, message: str, expression: str = "", offset: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.expression = expression
        self.offset = offset

    def __str__(self) -> str:
        if self.offset is None:
            return self.message
        return f"{self.message} (at offset {self.offset})"


class ParseFailure(EvalError):
    """No alternative of the grammar matched."""

    def __init__(self, message: str, expression: str = "", offset: Optional[int] = None,
                 parse_error: Optional[ParseError] = None):
        super().__init__(message, expression, offset)
        self.parse_error = parse_error


class TrailingInput(ParseFailure):
    """The grammar matched a strict prefix of the expression."""


class ArithmeticOverflow(EvalError):
    """A result does not fit in a signed 64-bit integer."""


class DivisionByZero(EvalError):
    """The right operand of a division is zero."""


class RenderError(ValueError):
    """The value cannot be written as a numeral."""
