import pytest

from typings.tuple import Tuple, new_point, new_vector
from tuple_parser import format_tuple, parse_tuple


@pytest.mark.parametrize(
    "text, expected",
    [
        ("point 3 -2 5", new_point(3.0, -2.0, 5.0)),
        ("vector -2 3 1", new_vector(-2.0, 3.0, 1.0)),
        ("tuple 1 -2 3 -4", Tuple(1.0, -2.0, 3.0, -4.0)),
        ("  Point 1.5, 2.5, 3.5  ", new_point(1.5, 2.5, 3.5)),
        ("vector 1e-7,0,0", new_vector(1e-7, 0.0, 0.0)),
    ],
)
def test_parse_tuple(text, expected):
    assert parse_tuple(text) == expected


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "empty tuple description"),
        ("color 1 0 0", "unknown tuple type: color"),
        ("point 1 2", "point expects 3 values, got 2"),
        ("tuple 1 2 3", "tuple expects 4 values, got 3"),
        ("vector 1 2 3 4", "vector expects 3 values, got 4"),
    ],
)
def test_parse_tuple_errors(text, message):
    with pytest.raises(ValueError, match=message):
        parse_tuple(text)


def test_parse_tuple_rejects_non_numeric_values():
    with pytest.raises(ValueError):
        parse_tuple("point 1 two 3")


def test_format_tuple():
    assert format_tuple(new_point(1.0, 1.0, 6.0)) == "point 1.0 1.0 6.0"
    assert format_tuple(new_vector(-2.0, 0.5, 1.0)) == "vector -2.0 0.5 1.0"
    assert format_tuple(Tuple(6.0, -4.0, 10.0, 2.0)) == "tuple 6.0 -4.0 10.0 2.0"


@pytest.mark.parametrize(
    "value",
    [
        new_point(0.1, 0.2, 0.3),
        new_vector(1.0 / 3.0, -2.0 / 7.0, 1e-12),
        Tuple(1.0, -2.0, 3.0, -1.0),
    ],
)
def test_format_tuple_output_parses_back(value):
    assert parse_tuple(format_tuple(value)) == value
