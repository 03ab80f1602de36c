from typing import List, Sequence

import pytest

from sss_core.errors import DuplicateXCoordinate, InsufficientShares, NonIntegralResult
from sss_core.lagrange import basis_at_zero, interpolate_at_zero
from sss_core.models import Share
from sss_core.rational import ExactRational


def _sample(coeffs: Sequence[int], xs: Sequence[int]) -> List[Share]:
    points = []
    for x in xs:
        y = 0
        for coeff in reversed(coeffs):
            y = y * x + coeff
        points.append(Share(x=x, y=y))
    return points


def test_points_on_x_squared_plus_three() -> None:
    points = [Share(1, 4), Share(2, 7), Share(3, 12)]
    assert interpolate_at_zero(points) == 3


def test_points_on_x_squared_plus_two_x_plus_one() -> None:
    points = _sample([1, 2, 1], [1, 2, 3])
    assert [point.y for point in points] == [4, 9, 16]
    assert interpolate_at_zero(points) == 1


def test_single_point_returns_y() -> None:
    assert interpolate_at_zero([Share(7, 123456789)]) == 123456789


def test_large_coefficients() -> None:
    coeffs = [10**21, 3, 2, 1]
    assert interpolate_at_zero(_sample(coeffs, [1, 2, 3, 5])) == 10**21


def test_negative_secret_and_coordinates() -> None:
    coeffs = [-987654321987654321, 17, -4]
    assert interpolate_at_zero(_sample(coeffs, [-3, 4, 11])) == -987654321987654321


def test_basis_values_sum_to_one() -> None:
    points = _sample([5, 1, 1], [2, 5, 9])
    total = ExactRational.of(0)
    for index in range(len(points)):
        total = total.add(basis_at_zero(points, index))
    assert total == ExactRational.of(1)


def test_duplicate_x_rejected() -> None:
    with pytest.raises(DuplicateXCoordinate) as excinfo:
        interpolate_at_zero([Share(1, 4), Share(2, 7), Share(1, 5)])
    assert excinfo.value.x == 1


def test_empty_points_rejected() -> None:
    with pytest.raises(InsufficientShares):
        interpolate_at_zero([])


def test_non_integral_result() -> None:
    # (1, 0) and (3, 1) give the line through (0, -1/2)
    with pytest.raises(NonIntegralResult):
        interpolate_at_zero([Share(1, 0), Share(3, 1)])
