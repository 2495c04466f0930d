"""Array-backed max heap."""

from __future__ import annotations

from typing import Iterator


class HeapEmptyError(IndexError):
    """Raised when an item is removed from an empty heap."""


class MaxHeap:
    """A max heap stored level by level in a list."""

    def __init__(self) -> None:
        self._heap: list[int] = []

    def insert(self, item: int) -> None:
        """Add item, moving it up past smaller parents."""
        heap = self._heap
        heap.append(item)
        i = len(heap) - 1
        while i > 0 and item > heap[(i - 1) // 2]:
            parent = (i - 1) // 2
            heap[i] = heap[parent]
            i = parent
        heap[i] = item

    def delete(self) -> int:
        """Remove and return the largest item."""
        heap = self._heap
        if not heap:
            raise HeapEmptyError("heap is empty")
        item = heap[0]
        last = heap.pop()
        if not heap:
            return item
        size = len(heap)
        parent, child = 0, 1
        while child < size:
            if child + 1 < size and heap[child] < heap[child + 1]:
                child += 1
            if last >= heap[child]:
                break
            heap[parent] = heap[child]
            parent = child
            child = 2 * child + 1
        heap[parent] = last
        return item

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[int]:
        return iter(self._heap)

    def __str__(self) -> str:
        return "Heap : " + "".join(f"[{item}] " for item in self._heap)