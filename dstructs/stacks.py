"""Last-in, first-out stacks: a bounded array stack and an unbounded linked one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class StackEmptyError(IndexError):
    """Raised when an item is taken from or looked up on an empty stack."""


class StackFullError(OverflowError):
    """Raised when an item is pushed onto a stack that has no room left."""


def _render(items: Iterator[Any]) -> str:
    return "STACK [ " + "".join(f"{item} " for item in items) + "]"


class ArrayStack(Generic[T]):
    """A stack with a fixed capacity, iterated from bottom to top."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Put item on top; raise StackFullError when the stack is full."""
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return _render(iter(self))


@dataclass(eq=False)
class _StackNode(Generic[T]):
    data: T
    link: Optional["_StackNode[T]"] = None


class LinkedStack(Generic[T]):
    """An unbounded stack of linked nodes, iterated from top to bottom."""

    def __init__(self) -> None:
        self._top: Optional[_StackNode[T]] = None
        self._size = 0

    def push(self, item: T) -> None:
        """Put item on top."""
        self._top = _StackNode(item, self._top)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top item."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        node = self._top
        self._top = node.link
        self._size -= 1
        return node.data

    def peek(self) -> T:
        """Return the top item without removing it."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._top
        while node is not None:
            yield node.data
            node = node.link

    def __str__(self) -> str:
        return _render(iter(self))