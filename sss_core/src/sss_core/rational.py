"""Exact rational arithmetic kept in lowest terms."""
from __future__ import annotations

from dataclasses import dataclass
from math import gcd

from .errors import DivisionByZero, NonIntegralResult
from .utils.text import int_to_text


@dataclass(frozen=True, slots=True)
class ExactRational:
    """Arbitrary-precision fraction in canonical form.

    Every instance satisfies ``denominator > 0`` and
    ``gcd(|numerator|, denominator) == 1``; zero is ``0/1``. The form is
    enforced on construction, so values produced by :meth:`add` and
    :meth:`multiply` stay reduced and intermediate magnitudes stay bounded.
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        numerator, denominator = self.numerator, self.denominator
        if denominator == 0:
            raise DivisionByZero(numerator)
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        # gcd(0, d) == d, so a zero numerator reduces to 0/1
        divisor = gcd(numerator, denominator)
        object.__setattr__(self, "numerator", numerator // divisor)
        object.__setattr__(self, "denominator", denominator // divisor)

    @classmethod
    def make(cls, numerator: int, denominator: int) -> "ExactRational":
        return cls(numerator, denominator)

    @classmethod
    def of(cls, value: int) -> "ExactRational":
        return cls(value, 1)

    def add(self, other: "ExactRational") -> "ExactRational":
        return ExactRational(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def multiply(self, other: "ExactRational") -> "ExactRational":
        return ExactRational(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def to_integer(self) -> int:
        if self.numerator % self.denominator != 0:
            raise NonIntegralResult(self.numerator, self.denominator)
        return self.numerator // self.denominator

    def __add__(self, other: object) -> "ExactRational":
        if isinstance(other, int) and not isinstance(other, bool):
            other = ExactRational.of(other)
        if not isinstance(other, ExactRational):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __mul__(self, other: object) -> "ExactRational":
        if isinstance(other, int) and not isinstance(other, bool):
            other = ExactRational.of(other)
        if not isinstance(other, ExactRational):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"{int_to_text(self.numerator)}/{int_to_text(self.denominator)}"


ZERO = ExactRational(0, 1)
ONE = ExactRational(1, 1)


__all__ = ["ExactRational", "ZERO", "ONE"]
