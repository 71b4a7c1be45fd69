import array
import collections
import os
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from protochain.datastructures.custom_array import CustomArray
from protochain.datastructures.persistent_list import EMPTY, cons


class SlottedPoint:
    __slots__ = ("x", "y")

    def __init__(self, x, y):
        self.x = x
        self.y = y


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


def test_new_array_holds_initial_value():
    arr = CustomArray(3, initial=0)
    assert len(arr) == 3
    assert arr.to_py() == [0, 0, 0]
    assert CustomArray(2).to_py() == [None, None]
    assert CustomArray(0).to_py() == []


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        CustomArray(-1)


def test_indexing_matches_builtin_list():
    data = [10, 20, 30, 40]
    arr = CustomArray(len(data))
    for i, v in enumerate(data):
        arr[i] = v
    for i in range(-len(data), len(data)):
        assert arr[i] == data[i]
    with pytest.raises(IndexError):
        arr[4]
    with pytest.raises(IndexError):
        arr[-5] = 1
    assert list(arr) == data


def test_fill_shares_one_object():
    arr = CustomArray(3).fill([])
    arr[0].append("x")
    assert arr.to_py() == [["x"], ["x"], ["x"]]


def test_fill_unique_list_gives_independent_copies():
    template = [1]
    arr = CustomArray(3).fill_unique(template)
    arr[0].append(2)

    assert arr.to_py() == [[1, 2], [1], [1]]
    assert template == [1]
    assert all(slot is not template for slot in arr)
    assert all(type(slot) is list for slot in arr)


def test_fill_unique_dict_gives_independent_copies():
    arr = CustomArray(2).fill_unique({"a": 1})
    arr[1]["b"] = 2
    assert arr.to_py() == [{"a": 1}, {"a": 1, "b": 2}]
    assert all(type(slot) is dict for slot in arr)


def test_fill_unique_copies_are_shallow():
    inner = []
    arr = CustomArray(2).fill_unique([inner])
    assert arr[0] is not arr[1]
    assert arr[0][0] is arr[1][0] is inner


def test_fill_unique_copies_plain_objects():
    p = Point(1, 2)
    arr = CustomArray(2).fill_unique(p)
    arr[0].x = 99
    assert arr[1].x == 1
    assert p.x == 1
    assert isinstance(arr[0], Point)


def test_fill_unique_sets_and_bytearrays():
    arr = CustomArray(2).fill_unique({1})
    arr[0].add(2)
    assert arr.to_py() == [{1, 2}, {1}]

    arr = CustomArray(2).fill_unique(bytearray(b"a"))
    arr[0].extend(b"b")
    assert arr.to_py() == [bytearray(b"ab"), bytearray(b"a")]


def test_fill_unique_copies_deque():
    arr = CustomArray(2).fill_unique(collections.deque([1]))
    arr[0].append(2)
    assert arr[0] is not arr[1]
    assert list(arr[1]) == [1]


def test_fill_unique_copies_array_module_arrays():
    arr = CustomArray(2).fill_unique(array.array("i", [1]))
    arr[0].append(2)
    assert arr[0].tolist() == [1, 2]
    assert arr[1].tolist() == [1]


def test_fill_unique_copies_slotted_objects():
    p = SlottedPoint(1, 2)
    arr = CustomArray(2).fill_unique(p)
    arr[0].x = 99
    assert arr[1].x == 1
    assert p.x == 1


def test_fill_unique_shares_persistent_lists():
    lst = cons(1, EMPTY)
    arr = CustomArray(2).fill_unique(lst)
    assert arr[0] is arr[1] is lst


@pytest.mark.parametrize("value", [None, 0, 7, 1.5, "s", b"b", (1, 2), frozenset({1}), True])
def test_fill_unique_immutable_behaves_like_fill(value):
    arr = CustomArray(3).fill_unique(value)
    assert all(slot is value for slot in arr)


def test_fill_returns_self():
    arr = CustomArray(2)
    assert arr.fill(1) is arr
    assert arr.fill_unique([]) is arr


@pytest.mark.parametrize("start,end,expected", [
    (None, None, ["x", "x", "x", "x", "x"]),
    (1, None, [0, "x", "x", "x", "x"]),
    (1, 3, [0, "x", "x", 0, 0]),
    (-2, None, [0, 0, 0, "x", "x"]),
    (None, -1, ["x", "x", "x", "x", 0]),
    (-10, 2, ["x", "x", 0, 0, 0]),
    (3, 99, [0, 0, 0, "x", "x"]),
    (4, 2, [0, 0, 0, 0, 0]),
    (0, 0, [0, 0, 0, 0, 0]),
])
def test_fill_range_clamping(start, end, expected):
    assert CustomArray(5, initial=0).fill("x", start, end).to_py() == expected
    unique = CustomArray(5, initial=0).fill_unique(["x"], start, end).to_py()
    assert unique == [["x"] if v == "x" else v for v in expected]
