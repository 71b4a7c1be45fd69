from __future__ import annotations
import copy
import ctypes
import logging
from typing import Any, Generic, Iterator, List, Optional, Tuple, TypeVar

from .persistent_list import PersistentList

T = TypeVar("T")

log = logging.getLogger(__name__)

# Values that are already safe to share between slots. Persistent lists
# never change either, so they are shared as well.
_IMMUTABLE_TYPES = (type(None), bool, int, float, complex, str, bytes, tuple, frozenset, range)


class CustomArray(Generic[T]):
    """A fixed-length, typed array with a copy-per-slot fill.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • The length is fixed at construction; there is no append or pop.
    • Negative indices are normalized (like built-in list semantics).
    • `fill_unique()` gives every slot its own shallow copy of any mutable
      value, so mutating one slot never shows up in another.
    """

    __slots__ = ("_buf", "_size")

    def __init__(self, length: int, initial: Optional[T] = None) -> None:
        if length < 0:
            raise ValueError("length must be >= 0")
        self._size = length
        self._buf = self._make_array(length)
        for i in range(length):
            self._buf[i] = initial

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        if capacity <= 0:
            capacity = 1  # ctypes arrays cannot be zero-length
        return (capacity * ctypes.py_object)()

    @staticmethod
    def _normalize_index(idx: int, size: int) -> int:
        """Map negative indices and validate bounds.

        Returns the non-negative index in [0, size).
        Raises IndexError if out of range.
        """
        if idx < 0:
            idx += size
        if idx < 0 or idx >= size:
            raise IndexError("array index out of range")
        return idx

    def _span(self, start: Optional[int], end: Optional[int]) -> Tuple[int, int]:
        """Clamp a fill range to [0, len] using slice rules."""
        lo, hi, _ = slice(start, end).indices(self._size)
        return lo, max(lo, hi)

    @staticmethod
    def _is_shareable(value: Any) -> bool:
        return isinstance(value, (_IMMUTABLE_TYPES, PersistentList))

    @staticmethod
    def _shallow_copy(value: Any) -> Any:
        if isinstance(value, list):
            return list(value)
        if isinstance(value, dict):
            return dict(value)
        return copy.copy(value)

    # --------------------------------- API -----------------------------------

    def fill(self, value: T, start: Optional[int] = None, end: Optional[int] = None) -> "CustomArray[T]":
        """Store the same `value` object in every slot of [start, end)."""
        lo, hi = self._span(start, end)
        for i in range(lo, hi):
            self._buf[i] = value
        return self

    def fill_unique(self, value: T, start: Optional[int] = None, end: Optional[int] = None) -> "CustomArray[T]":
        """Like `fill`, but each slot gets its own shallow copy of a mutable `value`.

        Lists stay lists and dicts stay dicts; every other object is copied
        with `copy.copy`. Immutable values (numbers, strings, tuples, None,
        persistent lists, ...) are stored as-is, exactly like `fill`.
        """
        if self._is_shareable(value):
            return self.fill(value, start, end)

        lo, hi = self._span(start, end)
        log.debug("fill_unique: copying %s into slots [%d, %d)", type(value).__name__, lo, hi)
        for i in range(lo, hi):
            self._buf[i] = self._shallow_copy(value)
        return self

    def __len__(self) -> int:
        """Number of slots. O(1)."""
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Yield items from left to right."""
        for i in range(self._size):
            yield self._buf[i]  # type: ignore[misc]

    def __getitem__(self, idx: int) -> T:
        """Get the element at `idx` (supports negative indices)."""
        i = self._normalize_index(idx, self._size)
        return self._buf[i]  # type: ignore[return-value]

    def __setitem__(self, idx: int, value: T) -> None:
        """Set the element at `idx` to `value` (supports negative indices)."""
        i = self._normalize_index(idx, self._size)
        self._buf[i] = value

    def to_py(self) -> List[T]:
        """Convert to a plain Python `list` (slots are not copied)."""
        return [self._buf[i] for i in range(self._size)]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"CustomArray({self.to_py()!r})"
