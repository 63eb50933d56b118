# tests/griddata/test_json_utils.py
import pytest

from griddata.utils.json_utils import get_bool, get_int, get_optional_int


@pytest.mark.parametrize("value, expected", [
    (12, 12),
    ("12", 12),
    ("6.0", 6),
    ("1e999", 0),
    (float("inf"), 0),
    (float("-inf"), 0),
    ("nan", 0),
    ("abc", 0),
    (True, 0),
    (None, 0),
])
def test_get_int(value, expected):
    assert get_int({"grid": value}, "grid") == expected


def test_get_optional_int_out_of_range():
    assert get_optional_int({"width": float("inf")}, "width") is None
    assert get_optional_int({"width": "800"}, "width") == 800


@pytest.mark.parametrize("value, expected", [("false", False), ("True", True), (0, False), (1, True), ([], False)])
def test_get_bool(value, expected):
    assert get_bool({"flag": value}, "flag") is expected
