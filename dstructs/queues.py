"""First-in, first-out queues: linear array, circular array and linked."""

from __future__ import annotations

from collections import deque
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 4


class QueueEmptyError(IndexError):
    """Raised when an item is taken from or looked up on an empty queue."""


class QueueFullError(OverflowError):
    """Raised when an item is added to a queue that has no room left."""


def _render(title: str, items: Iterable[Any]) -> str:
    return f"{title} : [" + "".join(f"{item!s:>3}" for item in items) + " ]"


class LinearQueue(Generic[T]):
    """An array queue whose rear never moves back.

    Slots freed by dequeue are not reused, so once capacity items have
    been enqueued in total the queue reports itself full.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[T] = []
        self._front = 0

    def enqueue(self, item: T) -> None:
        """Add item at the rear; raise QueueFullError when the rear is at the end."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the front item."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        item = self._items[self._front]
        self._front += 1
        return item

    def peek(self) -> T:
        """Return the front item without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items[self._front]

    def is_empty(self) -> bool:
        return self._front == len(self._items)

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items) - self._front

    def __iter__(self) -> Iterator[T]:
        return iter(self._items[self._front :])

    def __str__(self) -> str:
        return _render("Queue", self)


class CircularQueue(Generic[T]):
    """A ring-buffer queue that keeps one slot free, holding capacity - 1 items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Optional[T]] = [None] * capacity
        self._front = 0
        self._rear = 0

    def _advance(self, index: int) -> int:
        return (index + 1) % self.capacity

    def enqueue(self, item: T) -> None:
        """Add item at the rear; raise QueueFullError when no slot is left."""
        if self.is_full():
            raise QueueFullError("circular queue is full")
        self._rear = self._advance(self._rear)
        self._slots[self._rear] = item

    def dequeue(self) -> T:
        """Remove and return the front item."""
        if self.is_empty():
            raise QueueEmptyError("circular queue is empty")
        self._front = self._advance(self._front)
        item = self._slots[self._front]
        self._slots[self._front] = None
        return item  # type: ignore[return-value]

    def peek(self) -> T:
        """Return the front item without removing it."""
        if self.is_empty():
            raise QueueEmptyError("circular queue is empty")
        return self._slots[self._advance(self._front)]  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return self._advance(self._rear) == self._front

    def __len__(self) -> int:
        return (self._rear - self._front) % self.capacity

    def __iter__(self) -> Iterator[T]:
        index = self._front
        while index != self._rear:
            index = self._advance(index)
            yield self._slots[index]  # type: ignore[misc]

    def __str__(self) -> str:
        return _render("Circular Queue", self)


class LinkedQueue(Generic[T]):
    """An unbounded queue."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def enqueue(self, item: T) -> None:
        """Add item at the rear."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the front item."""
        if not self._items:
            raise QueueEmptyError("linked queue is empty")
        return self._items.popleft()

    def peek(self) -> T:
        """Return the front item without removing it."""
        if not self._items:
            raise QueueEmptyError("linked queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return _render("Linked Queue", self)