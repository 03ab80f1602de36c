"""Share selection and reconstruction contract."""
from __future__ import annotations

from itertools import combinations, islice
from math import comb
from typing import Iterable, List, Optional, Sequence

from .errors import (
    DuplicateXCoordinate,
    InsufficientShares,
    InvalidThreshold,
    NonIntegralResult,
)
from .lagrange import interpolate_at_zero
from .models import ConsistencyReport, Share, ShareRecord, SubsetMismatch
from .radix import decode
from .utils.text import int_to_text


def _check_threshold(shares: Sequence[Share], k: int) -> None:
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise InvalidThreshold(k)
    if len(shares) < k:
        raise InsufficientShares(available=len(shares), required=k)


def decode_shares(records: Iterable[ShareRecord]) -> List[Share]:
    """Decode raw records into points, keeping their order."""
    return [Share(x=record.x, y=decode(record.value, record.base)) for record in records]


def reconstruct(shares: Sequence[Share], k: int) -> int:
    """Recover the secret from the first ``k`` shares.

    No attempt is made to pick a better subset; use :func:`verify_subsets` to
    check that other subsets agree.
    """

    _check_threshold(shares, k)
    return interpolate_at_zero(list(shares[:k]))


def verify_subsets(
    shares: Sequence[Share],
    k: int,
    *,
    max_subsets: Optional[int] = None,
) -> ConsistencyReport:
    """Interpolate k-subsets of ``shares`` and report those disagreeing with the first ``k``.

    Subsets are visited in lexicographic index order, so the first one checked
    is always the first-k selection used by :func:`reconstruct`. At most
    ``max_subsets`` subsets are evaluated.
    """

    secret = reconstruct(shares, k)
    report = ConsistencyReport(secret=secret, subsets_checked=0)
    subsets = combinations(shares, k)
    if max_subsets is not None:
        subsets = islice(subsets, max_subsets)
    for subset in subsets:
        report.subsets_checked += 1
        xs = tuple(point.x for point in subset)
        try:
            value = interpolate_at_zero(subset)
        except NonIntegralResult:
            report.mismatches.append(SubsetMismatch(xs=xs, secret=None, reason="non-integral"))
            continue
        except DuplicateXCoordinate as exc:
            report.mismatches.append(
                SubsetMismatch(xs=xs, secret=None, reason=f"duplicate x {int_to_text(exc.x)}")
            )
            continue
        if value != secret:
            report.mismatches.append(SubsetMismatch(xs=xs, secret=value, reason="differs"))
    if max_subsets is not None:
        report.truncated = comb(len(shares), k) > report.subsets_checked
    return report


__all__ = ["decode_shares", "reconstruct", "verify_subsets"]
