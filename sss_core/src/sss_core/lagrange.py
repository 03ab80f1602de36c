"""Lagrange interpolation of share points at x = 0."""
from __future__ import annotations

from typing import Sequence, Set

from .errors import DuplicateXCoordinate, InsufficientShares
from .models import Share
from .rational import ONE, ZERO, ExactRational


def _ensure_distinct(points: Sequence[Share]) -> None:
    seen: Set[int] = set()
    for point in points:
        if point.x in seen:
            raise DuplicateXCoordinate(point.x)
        seen.add(point.x)


def basis_at_zero(points: Sequence[Share], index: int) -> ExactRational:
    """Return ``L_i(0) = prod_{j != i} (-x_j) / (x_i - x_j)`` for ``points[index]``."""
    x_i = points[index].x
    basis = ONE
    for j, other in enumerate(points):
        if j == index:
            continue
        basis = basis.multiply(ExactRational.make(-other.x, x_i - other.x))
    return basis


def interpolate_at_zero(points: Sequence[Share]) -> int:
    """Return the constant term of the polynomial through ``points``.

    Points are visited in the order given. The sum is exact; a non-integral
    result raises :class:`~sss_core.errors.NonIntegralResult`.
    """

    if not points:
        raise InsufficientShares(available=0, required=1)
    _ensure_distinct(points)
    total = ZERO
    for index, point in enumerate(points):
        term = basis_at_zero(points, index).multiply(ExactRational.of(point.y))
        total = total.add(term)
    return total.to_integer()


__all__ = ["basis_at_zero", "interpolate_at_zero"]
