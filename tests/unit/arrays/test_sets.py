"""Unit tests for utilkit.arrays.sets module."""

import pytest

from utilkit.arrays.sets import intersection, unique_array
from utilkit.errors import InvalidInputTypeError


def test_unique_array_keeps_first_occurrence_order():
    """Duplicates are dropped, first occurrences kept in order."""
    assert unique_array([1, 2, 2, 3, 1]) == [1, 2, 3]
    assert unique_array(("b", "a", "b")) == ["b", "a"]
    assert not unique_array([])


def test_unique_array_primitive_equality():
    """1 and 1.0 are equal, True is not 1, NaNs collapse."""
    nan = float("nan")
    result = unique_array([1, 1.0, True, "1", None, None, nan, float("nan")])
    assert result[:4] == [1, True, "1", None]
    assert len(result) == 5


def test_unique_array_objects_by_identity():
    """Equal but distinct containers are both kept; repeats of one object are not."""
    first = [1]
    second = [1]
    result = unique_array([first, first, second, {"a": 1}])
    assert len(result) == 3
    assert result[0] is first
    assert result[1] is second


def test_unique_array_does_not_mutate_input():
    """The input keeps its duplicates."""
    seq = [1, 1]
    unique_array(seq)
    assert seq == [1, 1]


def test_intersection_preserves_first_order_and_duplicates():
    """Order and duplicates come from the first argument."""
    assert intersection([1, 2, 2, 3], [3, 2, 4]) == [2, 2, 3]
    assert not intersection([1, 2], [])


def test_intersection_objects_by_identity():
    """Objects match only when the same instance appears in both."""
    shared = {"id": 1}
    assert intersection([shared, {"id": 1}], [shared]) == [shared]


@pytest.mark.parametrize("first, second", [("ab", ["a"]), (["a"], "ab"), (None, None)])
def test_intersection_requires_two_arrays(first, second):
    """Either argument failing the array check raises."""
    with pytest.raises(InvalidInputTypeError, match="Both inputs must be arrays"):
        intersection(first, second)
