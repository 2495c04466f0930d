"""Graphs stored as an adjacency matrix or as adjacency lists, with depth-first search."""

from __future__ import annotations

from typing import Iterator

from dstructs.stacks import LinkedStack

MAX_VERTEX = 30


class GraphError(ValueError):
    """Raised for a vertex that does not exist or one too many vertices."""


def _label(vertex: int) -> str:
    return chr(vertex + ord("A"))


class _VertexCount:
    """Shared vertex bookkeeping for both graph representations."""

    def __init__(self, max_vertices: int) -> None:
        if max_vertices < 1:
            raise ValueError("max_vertices must be at least 1")
        self.max_vertices = max_vertices
        self._n = 0

    def _add_vertex(self) -> int:
        if self._n + 1 > self.max_vertices:
            raise GraphError(
                f"a graph holds at most {self.max_vertices} vertices"
            )
        self._n += 1
        return self._n - 1

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < self._n:
                raise GraphError(f"vertex {vertex} is not in the graph")


class AdjacencyMatrixGraph(_VertexCount):
    """A graph whose edges are marked in a square 0/1 matrix."""

    def __init__(self, max_vertices: int = MAX_VERTEX) -> None:
        super().__init__(max_vertices)
        self._matrix = [[0] * max_vertices for _ in range(max_vertices)]

    def insert_vertex(self) -> int:
        """Add the next vertex and return its number."""
        return self._add_vertex()

    def insert_edge(self, u: int, v: int) -> None:
        """Mark the edge from u to v; both vertices must already exist."""
        self._check(u, v)
        self._matrix[u][v] = 1

    def matrix(self) -> list[list[int]]:
        """Return a copy of the matrix restricted to the existing vertices."""
        return [row[: self._n] for row in self._matrix[: self._n]]

    def __len__(self) -> int:
        return self._n

    def __str__(self) -> str:
        return "\n".join(
            "\t\t" + "".join(f"{cell:2d}" for cell in row) for row in self.matrix()
        )


class AdjacencyListGraph(_VertexCount):
    """A graph whose edges are kept per vertex, newest edge first."""

    def __init__(self, max_vertices: int = MAX_VERTEX) -> None:
        super().__init__(max_vertices)
        self._adjacency: list[list[int]] = [[] for _ in range(max_vertices)]

    def insert_vertex(self) -> int:
        """Add the next vertex and return its number."""
        return self._add_vertex()

    def insert_edge(self, u: int, v: int) -> None:
        """Put v at the head of u's adjacency list; both vertices must exist."""
        self._check(u, v)
        self._adjacency[u].insert(0, v)

    def neighbors(self, u: int) -> list[int]:
        """Return the vertices adjacent to u in list order."""
        self._check(u)
        return list(self._adjacency[u])

    def _first_unvisited(self, vertex: int, visited: list[bool]) -> int | None:
        return next((w for w in self._adjacency[vertex] if not visited[w]), None)

    def dfs(self, start: int) -> list[int]:
        """Return the vertices in the order a depth-first search from start visits them."""
        self._check(start)
        visited = [False] * self._n
        order = [start]
        visited[start] = True
        stack: LinkedStack[int] = LinkedStack()
        stack.push(start)
        vertex = start
        while not stack.is_empty():
            nxt = self._first_unvisited(vertex, visited)
            while nxt is not None:
                stack.push(nxt)
                visited[nxt] = True
                order.append(nxt)
                vertex = nxt
                nxt = self._first_unvisited(vertex, visited)
            vertex = stack.pop()
        return order

    def __len__(self) -> int:
        return self._n

    def _lines(self) -> Iterator[str]:
        for vertex in range(self._n):
            arrows = "".join(f" -> {_label(w)}" for w in self._adjacency[vertex])
            yield f"\t\t정점 {_label(vertex)}의 인접 리스트{arrows}"

    def __str__(self) -> str:
        return "\n".join(self._lines())