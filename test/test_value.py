import math

import pytest

from aqlfilter import WhereTypeError
from aqlfilter.filter.value import escape_string, render_number, render_value


def test_escape_string():
    assert escape_string("O'Hare") == "O\\'Hare"


def test_escape_string_leaves_other_characters():
    assert escape_string('a "b" \\ %_') == 'a "b" \\ %_'


@pytest.mark.parametrize(
    "value, expected",
    [
        (22.0, "22"),
        (-3.0, "-3"),
        (0.0, "0"),
        (3000.55, "3000.55"),
        (0.1, "0.1"),
        (1e21, "1e+21"),
    ],
)
def test_render_number(value, expected):
    assert render_number(value) == expected


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_render_number_non_finite(value):
    with pytest.raises(WhereTypeError):
        render_number(value)


def test_render_scalars():
    assert render_value(True) == "true"
    assert render_value(False) == "false"
    assert render_value("Macon") == "'Macon'"


def test_render_list():
    assert render_value(["a'b", 1.5, True]) == "['a\\'b', 1.5, true]"
    assert render_value([]) == "[]"


@pytest.mark.parametrize("value", [1, None, {"a": 1.0}, [[1.0]], [1]])
def test_render_unsupported(value):
    with pytest.raises(WhereTypeError):
        render_value(value)
