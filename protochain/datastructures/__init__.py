from .custom_array import CustomArray
from .persistent_list import (
    EMPTY,
    Node,
    PersistentList,
    cons,
    empty_list,
    first,
    is_empty,
    iter_values,
    print_list,
    replace_first,
    replace_rest,
    rest,
)

__all__ = [
    "CustomArray",
    "EMPTY",
    "Node",
    "PersistentList",
    "cons",
    "empty_list",
    "first",
    "is_empty",
    "iter_values",
    "print_list",
    "replace_first",
    "replace_rest",
    "rest",
]
