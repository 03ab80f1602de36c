import pytest

from sss_core.errors import (
    DuplicateXCoordinate,
    InsufficientShares,
    InvalidDigit,
    InvalidThreshold,
)
from sss_core.models import Share, ShareRecord
from sss_core.service import decode_shares, reconstruct, verify_subsets

# f(x) = x^2 + 3
_SHARES = [Share(1, 4), Share(2, 7), Share(3, 12), Share(6, 39)]


def test_reconstruct_uses_first_k() -> None:
    assert reconstruct(_SHARES, 3) == 3


def test_reconstruct_ignores_shares_after_k() -> None:
    shares = _SHARES[:3] + [Share(9, 1), Share(1, 0)]
    assert reconstruct(shares, 3) == 3


def test_reconstruct_k_one_returns_first_y() -> None:
    assert reconstruct(_SHARES, 1) == 4


def test_reconstruct_insufficient_shares() -> None:
    with pytest.raises(InsufficientShares) as excinfo:
        reconstruct(_SHARES[:2], 3)
    assert excinfo.value.available == 2
    assert excinfo.value.required == 3


@pytest.mark.parametrize("k", [0, -1])
def test_reconstruct_rejects_non_positive_threshold(k: int) -> None:
    with pytest.raises(InvalidThreshold):
        reconstruct(_SHARES, k)


def test_reconstruct_duplicate_in_selection() -> None:
    with pytest.raises(DuplicateXCoordinate):
        reconstruct([Share(1, 4), Share(1, 4), Share(3, 12)], 3)


def test_reconstruct_accepts_tuple_input() -> None:
    assert reconstruct(tuple(_SHARES), 2) == 1


def test_decode_shares_keeps_order() -> None:
    records = [
        ShareRecord(x=6, base=4, value="213"),
        ShareRecord(x=1, base=10, value="4"),
        ShareRecord(x=2, base=2, value="111"),
    ]
    assert decode_shares(records) == [Share(6, 39), Share(1, 4), Share(2, 7)]


def test_decode_shares_propagates_digit_errors() -> None:
    with pytest.raises(InvalidDigit):
        decode_shares([ShareRecord(x=1, base=2, value="102")])


def test_verify_subsets_consistent() -> None:
    report = verify_subsets(_SHARES, 3)
    assert report.secret == 3
    assert report.subsets_checked == 4
    assert report.consistent
    assert not report.truncated


def test_verify_subsets_flags_tampered_share() -> None:
    shares = _SHARES[:3] + [Share(6, 40)]
    report = verify_subsets(shares, 3)
    assert report.secret == 3
    assert not report.consistent
    assert len(report.mismatches) == 3
    assert all(6 in mismatch.xs for mismatch in report.mismatches)


def test_verify_subsets_reports_differing_value() -> None:
    # any two points give an integral line; a tampered one changes the intercept
    shares = [Share(1, 4), Share(2, 5), Share(3, 100)]
    report = verify_subsets(shares, 2)
    assert report.secret == 3
    differing = [m for m in report.mismatches if m.reason == "differs"]
    assert differing
    assert all(m.secret is not None and m.secret != 3 for m in differing)


def test_verify_subsets_truncates() -> None:
    report = verify_subsets(_SHARES, 3, max_subsets=2)
    assert report.subsets_checked == 2
    assert report.truncated


def test_verify_subsets_duplicate_outside_first_k() -> None:
    shares = _SHARES[:3] + [Share(2, 7)]
    report = verify_subsets(shares, 3)
    assert report.secret == 3
    assert any(m.reason.startswith("duplicate x") for m in report.mismatches)
