"""Shared domain models used across SSS Core."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .utils.text import int_to_text


@dataclass(frozen=True, slots=True)
class Share:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({int_to_text(self.x)}, {int_to_text(self.y)})"


@dataclass(frozen=True, slots=True)
class ShareRecord:
    """A share as read from input, before its value is decoded."""

    x: int
    base: int
    value: str


@dataclass(slots=True)
class ShareCase:
    n: int
    k: int
    records: List[ShareRecord] = field(default_factory=list)
    skipped_keys: Tuple[str, ...] = ()

    @property
    def degree(self) -> int:
        return self.k - 1


@dataclass(slots=True)
class SubsetMismatch:
    xs: Tuple[int, ...]
    secret: Optional[int]
    reason: str


@dataclass(slots=True)
class ConsistencyReport:
    """Outcome of interpolating several k-subsets of the same share list."""

    secret: int
    subsets_checked: int
    mismatches: List[SubsetMismatch] = field(default_factory=list)
    truncated: bool = False

    @property
    def consistent(self) -> bool:
        return not self.mismatches


@dataclass(slots=True)
class CaseResult:
    source: str
    n: Optional[int] = None
    k: Optional[int] = None
    records: List[ShareRecord] = field(default_factory=list)
    points: List[Share] = field(default_factory=list)
    secret: Optional[int] = None
    error: Optional[str] = None
    consistency: Optional[ConsistencyReport] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.secret is not None

    def to_dict(self) -> Dict[str, Any]:
        # integers are rendered as decimal strings
        payload: Dict[str, Any] = {
            "source": self.source,
            "n": self.n,
            "k": self.k,
            "points": [{"x": int_to_text(p.x), "y": int_to_text(p.y)} for p in self.points],
            "records": [
                {"x": int_to_text(r.x), "base": r.base, "value": r.value} for r in self.records
            ],
            "secret": None if self.secret is None else int_to_text(self.secret),
            "error": self.error,
        }
        if self.consistency is not None:
            payload["consistency"] = {
                "consistent": self.consistency.consistent,
                "subsets_checked": self.consistency.subsets_checked,
                "truncated": self.consistency.truncated,
                "mismatches": [
                    {
                        "xs": [int_to_text(x) for x in mismatch.xs],
                        "secret": None if mismatch.secret is None else int_to_text(mismatch.secret),
                        "reason": mismatch.reason,
                    }
                    for mismatch in self.consistency.mismatches
                ],
            }
        return payload


__all__ = [
    "Share",
    "ShareRecord",
    "ShareCase",
    "SubsetMismatch",
    "ConsistencyReport",
    "CaseResult",
]
