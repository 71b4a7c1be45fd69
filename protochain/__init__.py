"""Persistent linked lists, copy-per-slot arrays and a zig-zag text reflow."""

from .errors import EmptyListAccess
from .datastructures import (
    EMPTY,
    CustomArray,
    PersistentList,
    cons,
    empty_list,
    first,
    is_empty,
    print_list,
    replace_first,
    replace_rest,
    rest,
)
from .algorithms import zigzag_conversion, zigzag_rows

__version__ = "0.1.0"

__all__ = [
    "CustomArray",
    "EMPTY",
    "EmptyListAccess",
    "PersistentList",
    "cons",
    "empty_list",
    "first",
    "is_empty",
    "print_list",
    "replace_first",
    "replace_rest",
    "rest",
    "zigzag_conversion",
    "zigzag_rows",
]
