"""Sparse matrices stored as (row, col, value) triples with a header term."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Term:
    """One triple; the first term of a matrix holds rows, columns and count."""

    row: int
    col: int
    value: int


def transpose(matrix: Sequence[Term]) -> list[Term]:
    """Return the transpose of a triple-form sparse matrix, ordered by new row."""
    if not matrix:
        raise ValueError("a sparse matrix needs at least its header term")
    header = matrix[0]
    count = header.value
    result = [Term(header.col, header.row, count)]
    if count > 0:
        entries = matrix[1 : count + 1]
        for column in range(header.col):
            result.extend(
                Term(t.col, t.row, t.value) for t in entries if t.col == column
            )
    return result