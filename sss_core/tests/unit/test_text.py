import pytest

from sss_core.models import CaseResult, Share
from sss_core.radix import decode
from sss_core.rational import ExactRational
from sss_core.utils.text import int_to_text


@pytest.mark.parametrize(
    "value",
    [0, 7, -7, 10**18 - 1, 10**18, -(10**18), 10**18 + 1, 123456789012345678901234567890],
)
def test_int_to_text_matches_str_for_small_values(value: int) -> None:
    assert int_to_text(value) == str(value)


def test_int_to_text_beyond_interpreter_digit_limit() -> None:
    value = 10**5000 + 42
    text = int_to_text(value)
    assert len(text) == 5001
    assert text.startswith("1")
    assert text.endswith("0042")
    assert decode(text, 10) == value
    assert int_to_text(-value) == "-" + text


def test_large_values_render_everywhere() -> None:
    big = 16**4000 - 1
    assert decode(str(Share(1, big)).split(", ")[1].rstrip(")"), 10) == big
    assert str(ExactRational.make(big, 2)).endswith("/2")
    payload = CaseResult(source="mem", n=1, k=1, points=[Share(1, big)], secret=big).to_dict()
    assert decode(payload["secret"], 10) == big
