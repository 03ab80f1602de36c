"""Text rendering helpers shared across modules."""
from __future__ import annotations

from typing import List

# str(int) is capped by sys.get_int_max_str_digits(); chunks stay well below it
_CHUNK_DIGITS = 18
_CHUNK = 10**_CHUNK_DIGITS


def int_to_text(value: int) -> str:
    """Render ``value`` in decimal regardless of its number of digits."""
    if value < 0:
        return "-" + int_to_text(-value)
    if value < _CHUNK:
        return str(value)
    chunks: List[int] = []
    while value:
        value, remainder = divmod(value, _CHUNK)
        chunks.append(remainder)
    head = str(chunks.pop())
    return head + "".join(f"{chunk:0{_CHUNK_DIGITS}d}" for chunk in reversed(chunks))


__all__ = ["int_to_text"]
