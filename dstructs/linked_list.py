"""Singly linked list of short strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """A list node holding data and a link to the next node."""

    data: str
    link: Optional["Node"] = None


class LinkedList:
    """Singly linked list with a head pointer."""

    def __init__(self) -> None:
        self.head: Optional[Node] = None

    def insert_first(self, data: str) -> Node:
        """Insert data as the first node and return that node."""
        node = Node(data, self.head)
        self.head = node
        return node

    def insert_after(self, pre: Optional[Node], data: str) -> Node:
        """Insert data after pre; at the front if pre is None or the list is empty."""
        if self.head is None or pre is None:
            return self.insert_first(data)
        node = Node(data, pre.link)
        pre.link = node
        return node

    def insert_last(self, data: str) -> Node:
        """Append data as the last node and return that node."""
        node = Node(data)
        if self.head is None:
            self.head = node
            return node
        last = self.head
        while last.link is not None:
            last = last.link
        last.link = node
        return node

    def delete(self, node: Optional[Node]) -> None:
        """Unlink node from the list.

        An empty list is left alone; a one-node list is emptied; a None
        node on a longer list does nothing. A node not in the list raises
        ValueError.
        """
        if self.head is None:
            return
        if self.head.link is None:
            self.head = None
            return
        if node is None:
            return
        if node is self.head:
            self.head = node.link
            return
        pre = self.head
        while pre.link is not None and pre.link is not node:
            pre = pre.link
        if pre.link is None:
            raise ValueError("node is not in this list")
        pre.link = node.link

    def search(self, data: str) -> Optional[Node]:
        """Return the first node holding data, or None."""
        node = self.head
        while node is not None and node.data != data:
            node = node.link
        return node

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Optional[Node] = None
        current = self.head
        while current is not None:
            current.link, previous, current = previous, current, current.link
        self.head = previous

    def clear(self) -> None:
        """Remove every node."""
        self.head = None

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.link

    def __iter__(self) -> Iterator[str]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "L = (" + ", ".join(self) + ")"