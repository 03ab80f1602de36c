"""Positional-notation decoding of share values in radix 2..36."""
from __future__ import annotations

from .errors import InvalidBase, InvalidDigit

MIN_BASE = 2
MAX_BASE = 36

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def _check_base(base: int) -> None:
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(base)
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(base)


def digit_value(char: str) -> int | None:
    """Return the value of ``char`` as a base-36 digit, or ``None``."""
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 10
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    return None


def decode(digits: str, base: int) -> int:
    """Decode ``digits`` written in ``base`` into an integer.

    Letters are case-insensitive and leading zeros are allowed. Signs,
    separators and whitespace are rejected.

    Raises
    ------
    InvalidBase
        If ``base`` is outside [2, 36].
    InvalidDigit
        If ``digits`` is empty or holds a character that is not a digit of ``base``.
    """

    _check_base(base)
    if not digits:
        raise InvalidDigit("", base, 0)
    result = 0
    for position, char in enumerate(digits):
        value = digit_value(char)
        if value is None or value >= base:
            raise InvalidDigit(char, base, position)
        result = result * base + value
    return result


def encode(value: int, base: int) -> str:
    """Render ``value`` in ``base`` using lowercase letters."""
    _check_base(base)
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    value = abs(value)
    chars = []
    while value:
        value, remainder = divmod(value, base)
        chars.append(_ALPHABET[remainder])
    return sign + "".join(reversed(chars))


__all__ = ["MIN_BASE", "MAX_BASE", "decode", "digit_value", "encode"]
