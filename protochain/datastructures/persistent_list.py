from __future__ import annotations
import logging
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from ..errors import EmptyListAccess

T = TypeVar("T")

log = logging.getLogger(__name__)


class PersistentList(Generic[T]):
    """Base type shared by list nodes and the empty sentinel.

    A list is either the single :data:`EMPTY` sentinel or a :class:`Node`
    whose ``parent`` is the rest of the list. Instances never change after
    construction, so any number of lists may share the same tail.

    Equality is identity: two lists are "the same" only when they are the
    same object, which is what structural sharing relies on.
    """

    __slots__ = ()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "PersistentList[T]":
        return self

    def __deepcopy__(self, memo: dict) -> "PersistentList[T]":
        return self

    def __iter__(self) -> Iterator[T]:
        """Yield values from head to tail."""
        return iter_values(self)

    def __repr__(self) -> str:
        return f"PersistentList({list(iter_values(self))!r})"


class _EmptyList(PersistentList[Any]):
    """The empty list. Only one instance ever exists (see :data:`EMPTY`)."""

    __slots__ = ()

    _instance: Optional["_EmptyList"] = None

    # The sentinel is the only list without a parent.
    parent = None

    def __new__(cls) -> "_EmptyList":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False


class Node(PersistentList[T]):
    """One list cell: a value plus the list it extends.

    Build nodes through :func:`cons`, :func:`replace_first` or
    :func:`replace_rest` rather than directly.
    """

    __slots__ = ("value", "parent")

    def __init__(self, value: T, parent: PersistentList[T]) -> None:
        # Requiring an existing list as parent keeps every chain acyclic.
        if not isinstance(parent, PersistentList):
            raise TypeError(
                f"parent must be a PersistentList, not {type(parent).__name__}"
            )
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "parent", parent)

    def __bool__(self) -> bool:
        return True


#: The canonical empty list, shared process-wide.
EMPTY: PersistentList[Any] = _EmptyList()


def _require_node(lst: PersistentList[T], operation: str) -> Node[T]:
    if lst is EMPTY:
        raise EmptyListAccess(operation)
    if not isinstance(lst, Node):
        raise TypeError(f"{operation}() expects a PersistentList, not {type(lst).__name__}")
    return lst


def empty_list() -> PersistentList[Any]:
    """Return the shared empty list."""
    return EMPTY


def cons(element: T, lst: PersistentList[T]) -> Node[T]:
    """Return a new list with *element* in front of *lst*. O(1).

    *lst* is reused as the tail, never copied.
    """
    return Node(element, lst)


def first(lst: PersistentList[T]) -> T:
    """Return the head value of *lst*.

    Raises:
        EmptyListAccess: if *lst* is the empty list.
    """
    return _require_node(lst, "first").value


def rest(lst: PersistentList[T]) -> PersistentList[T]:
    """Return the tail of *lst* (the very object it was built on).

    Raises:
        EmptyListAccess: if *lst* is the empty list.
    """
    return _require_node(lst, "rest").parent


def is_empty(lst: PersistentList[T]) -> bool:
    """Return True iff *lst* is the empty sentinel. O(1)."""
    return lst is EMPTY


def replace_first(element: T, lst: PersistentList[T]) -> Node[T]:
    """Return a list with head *element* and the same tail as *lst*."""
    return Node(element, _require_node(lst, "replace_first").parent)


def replace_rest(new_rest: PersistentList[T], lst: PersistentList[T]) -> Node[T]:
    """Return a list with the head value of *lst* followed by *new_rest*."""
    return Node(_require_node(lst, "replace_rest").value, new_rest)


def iter_values(lst: PersistentList[T]) -> Iterator[T]:
    """Return a one-shot iterator over the values of *lst*, head first."""
    if not isinstance(lst, PersistentList):
        raise TypeError(f"iter_values() expects a PersistentList, not {type(lst).__name__}")
    return _walk(lst)


def _walk(lst: PersistentList[T]) -> Iterator[T]:
    while lst is not EMPTY:
        yield lst.value  # type: ignore[attr-defined]
        lst = lst.parent  # type: ignore[attr-defined]


def print_list(lst: PersistentList[T], out: Callable[[T], Any] = print) -> None:
    """Debugging aid: pass every value of *lst* to *out*, head first."""
    count = 0
    for value in iter_values(lst):
        out(value)
        count += 1
    log.debug("print_list visited %d value(s)", count)
