"""Polynomials as ordered lists of (coefficient, exponent) terms."""

from __future__ import annotations

from typing import Iterable, Iterator


class Polynomial:
    """A polynomial whose terms are kept in the order they were appended."""

    def __init__(self, terms: Iterable[tuple[float, int]] = ()) -> None:
        self._terms: list[tuple[float, int]] = []
        for coef, expo in terms:
            self.append_term(coef, expo)

    def append_term(self, coef: float, expo: int) -> None:
        """Append a term after the existing ones."""
        self._terms.append((float(coef), int(expo)))

    def __add__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial()
        a, b = self._terms, other._terms
        i = j = 0
        while i < len(a) and j < len(b):
            (ca, ea), (cb, eb) = a[i], b[j]
            if ea == eb:
                result.append_term(ca + cb, ea)
                i += 1
                j += 1
            elif ea > eb:
                result.append_term(ca, ea)
                i += 1
            else:
                result.append_term(cb, eb)
                j += 1
        for coef, expo in a[i:] + b[j:]:
            result.append_term(coef, expo)
        return result

    def __iter__(self) -> Iterator[tuple[float, int]]:
        return iter(self._terms)

    def __str__(self) -> str:
        return " +".join(f"{coef:3.0f}x^{expo}" for coef, expo in self._terms)