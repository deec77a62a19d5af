from decimal import Decimal

import numpy as np
import pytest

from seqkit.errors import NullInputError, UnsupportedPatternError
from seqkit.services.formatting import is_primitive_like, to_display_string


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __str__(self):
        return f"({self.x};{self.y})"


def test_brackets_and_separator():
    assert to_display_string([2, 3, 4], "[,]") == "[2, 3, 4]"


def test_default_pattern_strings():
    assert to_display_string(["a", "b"]) == "a b"
    assert to_display_string(["Bill", "Bob", "Tom", "Joe"]) == "Bill Bob Tom Joe"


def test_no_separator_pattern():
    assert to_display_string([1, 2, 3], "/0+") == "123"


def test_no_separator_ignores_even_spacing():
    assert to_display_string([1, 2, 3], "/0+", True) == "123"


def test_single_character_separator():
    assert to_display_string([1, 2, 3], ",") == "1, 2, 3"


def test_single_character_separator_evenly_spaced():
    assert to_display_string([1, 2, 3], ",", True) == "1 , 2 , 3"


def test_brackets_only():
    assert to_display_string([1, 2, 3], "[]") == "[1 2 3]"
    assert to_display_string([1, 2, 3], "[]", True) == "[1 2 3]"


def test_three_character_pattern_evenly_spaced():
    assert to_display_string([2, 3, 4], "(|)", True) == "(2 | 3 | 4)"


def test_empty_sequence_keeps_brackets():
    assert to_display_string([], "[,]") == "[]"
    assert to_display_string([]) == ""


def test_single_element_has_no_separator():
    assert to_display_string([7], "[,]", True) == "[7]"


def test_decimal_and_numpy_are_primitive_like():
    assert to_display_string([Decimal("1.5"), Decimal("2")]) == "1.5 2"
    assert to_display_string(np.array([1, 2, 3]), "[,]") == "[1, 2, 3]"


def test_non_primitive_elements_get_bare_separator():
    points = [Point(0, 1), Point(2, 3)]
    assert to_display_string(points, "[,]") == "[(0;1),(2;3)]"
    assert to_display_string(points, "[,]", True) == "[(0;1),(2;3)]"
    assert to_display_string(points) == "(0;1)(2;3)"


def test_primitive_like_override():
    assert to_display_string(["a", "b"], "[,]", primitive_like=False) == "[a,b]"
    assert to_display_string([Point(0, 0), Point(1, 1)], ",", primitive_like=True) == "(0;0), (1;1)"


def test_generator_input():
    assert to_display_string((n * n for n in range(1, 4)), "{;}") == "{1; 4; 9}"


@pytest.mark.parametrize("pattern", ["abcd", "[, ]", "/0+/", "((((("])
def test_unsupported_pattern(pattern):
    with pytest.raises(UnsupportedPatternError):
        to_display_string([1, 2], pattern)


def test_unsupported_pattern_is_value_error():
    with pytest.raises(ValueError):
        to_display_string([1], "<<>>")


def test_none_sequence():
    with pytest.raises(NullInputError):
        to_display_string(None, "[,]")


def test_none_pattern():
    with pytest.raises(NullInputError):
        to_display_string([1], None)


def test_is_primitive_like():
    assert is_primitive_like([1, 2.0, "x", Decimal("3"), np.float32(1)])
    assert not is_primitive_like([1, Point(0, 0)])
    assert not is_primitive_like([None])
