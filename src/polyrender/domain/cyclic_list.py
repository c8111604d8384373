"""Ordered point container with wraparound indexing.

Closed paths treat their last element as adjacent to the first, so every
index-taking operation here wraps modulo the current size.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class CyclicList(Generic[T]):
    """A list whose indices wrap around.

    ``get(size)`` is ``get(0)`` and ``get(-1)`` is the last element.

    Attributes:
        items: Underlying elements in insertion order
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self.items: list[T] = list(items) if items is not None else []

    def __iter__(self) -> Iterator[T]:
        return iter(list(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"CyclicList({self.items!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CyclicList):
            return NotImplemented
        return self.items == other.items

    @property
    def size(self) -> int:
        """Number of elements."""
        return len(self.items)

    def _wrap(self, i: int) -> int:
        if not self.items:
            raise IndexError("CyclicList is empty")
        return i % len(self.items)

    def get(self, i: int) -> T:
        """Get the element at index i modulo size.

        Raises:
            IndexError: If the list is empty
        """
        return self.items[self._wrap(i)]

    def push(self, *items: T) -> None:
        """Append elements at the end."""
        self.items.extend(items)

    def pop(self) -> T:
        """Remove and return the last element.

        Raises:
            IndexError: If the list is empty
        """
        if not self.items:
            raise IndexError("pop from empty CyclicList")
        return self.items.pop()

    def delete(self, i: int) -> None:
        del self.items[self._wrap(i)]

    def insert(self, i: int, *items: T) -> None:
        """Insert elements before the element at index i modulo size.

        On an empty list the elements are simply appended.
        """
        idx = self._wrap(i) if self.items else 0
        self.items[idx:idx] = items

    def rotate(self, k: int) -> None:
        """Shift elements left by k so that ``get(k)`` becomes ``get(0)``."""
        if not self.items:
            return
        k = self._wrap(k)
        self.items = self.items[k:] + self.items[:k]

    def map(self, fn: Callable[[T, int], U]) -> "CyclicList[U]":
        """Build a new list from ``fn(value, index)`` for every element."""
        return CyclicList(fn(item, i) for i, item in enumerate(self.items))

    def clone(self) -> "CyclicList[T]":
        """Shallow copy with its own item storage."""
        return CyclicList(self.items)

    def to_list(self) -> list[T]:
        return list(self.items)
