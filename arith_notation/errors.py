"""Error kinds raised by the notation engine."""

from __future__ import annotations
from enum import Enum


class ErrorKind(Enum):
    MALFORMED_TOKEN = "malformed_token"
    STRUCTURAL = "structural"
    DIVISION_BY_ZERO = "division_by_zero"
    UNSUPPORTED_OPERATOR = "unsupported_operator"
    OVERFLOW = "overflow"


class NotationError(ValueError):
    """Base class for notation engine errors."""

    kind: ErrorKind

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position


class MalformedTokenError(NotationError):
    """A token that is neither an operator nor an integer literal."""

    kind = ErrorKind.MALFORMED_TOKEN


class StructuralError(NotationError):
    """Operand/operator imbalance: stack underflow or leftover values."""

    kind = ErrorKind.STRUCTURAL


class DivisionByZeroError(NotationError, ZeroDivisionError):
    """Integer division with a zero divisor."""

    kind = ErrorKind.DIVISION_BY_ZERO


class UnsupportedOperatorError(NotationError):
    """Operator recognized by the grammar but without evaluation semantics (``^``)."""

    kind = ErrorKind.UNSUPPORTED_OPERATOR


class IntegerOverflowError(NotationError, OverflowError):
    """Result outside the configured integer width with wrapping disabled."""

    kind = ErrorKind.OVERFLOW
