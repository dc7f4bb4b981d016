import pytest

from degree_audit.models import split_reference
from degree_audit.utils import collapse_whitespace, digits_only, is_numeric_label, to_number


@pytest.mark.parametrize("value, expected", [
    (3, 3),
    (4.5, 4.5),
    ("5", 5.0),
    (" 3.0 ", 3.0),
    ("4 hrs", 4.0),
    (".5", 0.5),
    ("TBD", 0),
    ("", 0),
    (None, 0),
    (float("nan"), 0),
    (True, 0),
    ([3], 0),
])
def test_to_number(value, expected):
    assert to_number(value) == expected


def test_is_numeric_label():
    assert is_numeric_label("2321")
    assert not is_numeric_label("2321H")
    assert not is_numeric_label("CSE 2321")
    assert not is_numeric_label("")


def test_digits_only():
    assert digits_only("2231H") == "2231"
    assert digits_only("H") == ""


def test_collapse_whitespace():
    assert collapse_whitespace("  CSE\n\t 2231 ") == "CSE 2231"
    assert collapse_whitespace(None) == ""


def test_split_reference():
    assert split_reference(" CSE  2231H ") == ("CSE", "2231H")
    assert split_reference("CSE") == ("CSE", "")
    assert split_reference("") == ("", "")
