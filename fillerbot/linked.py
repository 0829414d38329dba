"""A singly linked list with constant-time insertion at the front."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class _Node(Generic[T]):
    item: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list; iteration runs from the front."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0
        for item in reversed(list(items)):
            self.push_front(item)

    def push_front(self, item: T) -> None:
        """Insert ``item`` at the front."""
        self._head = _Node(item, self._head)
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the front item; raise ``IndexError`` when empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.item

    def clear(self, callback: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every item, front first, passing each to ``callback`` if given."""
        while self._head is not None:
            item = self.pop_front()
            if callback is not None:
                callback(item)

    def for_each(self, f: Callable[[T], Any]) -> None:
        """Call ``f`` on every item, front first."""
        for item in self:
            f(item)

    def map(self, f: Callable[[T], U]) -> "LinkedList[U]":
        """Return a new list of ``f`` applied to every item, in the same order."""
        return LinkedList(f(item) for item in self)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.item
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"