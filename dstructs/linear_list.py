"""Ordered insertion and deletion in a Python list, counting element moves."""

from __future__ import annotations

from typing import MutableSequence


def insert_sorted(items: MutableSequence[int], x: int) -> int:
    """Insert x between the first neighbours that bracket it, else at the end.

    Returns how many existing elements had to shift one place right.
    """
    position = next(
        (i + 1 for i, (a, b) in enumerate(zip(items, items[1:])) if a <= x <= b),
        len(items),
    )
    moves = len(items) - position
    items.insert(position, x)
    return moves


def delete_element(items: MutableSequence[int], x: int) -> int:
    """Remove the first occurrence of x and return how many elements shifted left.

    Raises ValueError when x is not present.
    """
    try:
        position = items.index(x)
    except ValueError:
        raise ValueError(f"{x} is not in the list") from None
    del items[position]
    return len(items) - position