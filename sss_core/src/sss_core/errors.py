"""Central exception hierarchy for SSS Core."""
from __future__ import annotations

from typing import Any

from .utils.text import int_to_text


class ShareRecoveryError(Exception):
    """Base exception for all reconstruction failures"""


class InvalidBase(ShareRecoveryError, ValueError):
    """Raised when a declared radix lies outside [2, 36]"""

    def __init__(self, base: Any) -> None:
        super().__init__(f"Base {base!r} is outside the supported range 2..36")
        self.base = base


class InvalidDigit(ShareRecoveryError, ValueError):
    """Raised when a value string holds a character that is not a digit of its radix"""

    def __init__(self, char: str, base: int, position: int) -> None:
        if not char:
            message = f"Empty value is not a valid base {base} number"
        else:
            message = f"Digit {char!r} at position {position} is invalid for base {base}"
        super().__init__(message)
        self.char = char
        self.base = base
        self.position = position


class DuplicateXCoordinate(ShareRecoveryError, ValueError):
    """Raised when two interpolation points share the same x value"""

    def __init__(self, x: int) -> None:
        super().__init__(f"Duplicate x coordinate {int_to_text(x)} among interpolation points")
        self.x = x


class DivisionByZero(ShareRecoveryError, ZeroDivisionError):
    """Raised when an exact rational is built with a zero denominator"""

    def __init__(self, numerator: int) -> None:
        super().__init__(f"Division by zero: {int_to_text(numerator)}/0")
        self.numerator = numerator


class NonIntegralResult(ShareRecoveryError, ArithmeticError):
    """Raised when the interpolated constant term is not an integer"""

    def __init__(self, numerator: int, denominator: int) -> None:
        super().__init__(
            f"Cannot convert fraction to integer: {int_to_text(numerator)}/{int_to_text(denominator)}"
        )
        self.numerator = numerator
        self.denominator = denominator


class InsufficientShares(ShareRecoveryError, ValueError):
    """Raised when fewer shares are available than the threshold requires"""

    def __init__(self, available: int, required: int) -> None:
        super().__init__(f"Not enough shares: need {required}, got {available}")
        self.available = available
        self.required = required


class InvalidThreshold(ShareRecoveryError, ValueError):
    """Raised when the threshold k is not a positive integer"""

    def __init__(self, k: Any) -> None:
        super().__init__(f"Threshold must be at least 1, got {k!r}")
        self.k = k


class CaseFormatError(ShareRecoveryError, ValueError):
    """Raised when a test-case document is missing fields or cannot be parsed"""


__all__ = [
    "ShareRecoveryError",
    "InvalidBase",
    "InvalidDigit",
    "DuplicateXCoordinate",
    "DivisionByZero",
    "NonIntegralResult",
    "InsufficientShares",
    "InvalidThreshold",
    "CaseFormatError",
]
