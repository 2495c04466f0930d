"""Double-ended queue with insertion and removal at both ends."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class DequeEmptyError(IndexError):
    """Raised when an item is taken from or looked up on an empty deque."""


class LinkedDeque(Generic[T]):
    """An unbounded deque, iterated from front to rear."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def insert_front(self, item: T) -> None:
        """Put item before the current front."""
        self._items.appendleft(item)

    def insert_rear(self, item: T) -> None:
        """Put item after the current rear."""
        self._items.append(item)

    def delete_front(self) -> T:
        """Remove and return the front item."""
        if not self._items:
            raise DequeEmptyError("linked deque is empty")
        return self._items.popleft()

    def delete_rear(self) -> T:
        """Remove and return the rear item."""
        if not self._items:
            raise DequeEmptyError("linked deque is empty")
        return self._items.pop()

    def peek_front(self) -> T:
        """Return the front item without removing it."""
        if not self._items:
            raise DequeEmptyError("linked deque is empty")
        return self._items[0]

    def peek_rear(self) -> T:
        """Return the rear item without removing it."""
        if not self._items:
            raise DequeEmptyError("linked deque is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return "DeQue : [" + "".join(f"{item!s:>3}" for item in self) + " ]"