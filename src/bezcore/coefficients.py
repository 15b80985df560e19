"""Memoized triangular marker counts and binomial coefficients."""

from __future__ import annotations

import threading
from typing import List


###############################################################################
# CoefficientCache
###############################################################################
class CoefficientCache:
    """Growable tables of triangular numbers and binomial coefficients.

    Both tables start small and are extended on demand. Growth builds a new backing
    list and swaps it in under a lock, so readers never observe a half-built table.
    Rows that already exist are never modified.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._markers: List[int] = [0, 1, 3, 6, 10]
        self._binomials: List[List[float]] = [
            [1.0],
            [1.0, 1.0],
            [1.0, 2.0, 1.0],
            [1.0, 3.0, 3.0, 1.0],
        ]

    def markers(self, n: int) -> int:
        """Return the triangular number T(n) = n(n+1)/2."""
        if n < 0:
            raise ValueError(f"Marker index must not be negative, got {n}")
        table = self._markers
        if n >= len(table):
            with self._lock:
                table = self._markers
                if n >= len(table):
                    grown = list(table)
                    while len(grown) <= n:
                        size = len(grown)
                        grown.append(grown[-1] + size)
                    self._markers = grown
                    table = grown
        return table[n]

    def binomials(self, n: int, k: int) -> float:
        """Return the binomial coefficient C(n, k) from Pascal's triangle.

        Args:
            n: Row of the triangle (curve order).
            k: Position inside the row, 0 <= k <= n.

        Returns:
            float: C(n, k)

        Raises:
            ValueError: If n is negative or k lies outside [0, n].
        """
        if n < 0 or not 0 <= k <= n:
            raise ValueError(f"Binomial C({n}, {k}) is undefined, need 0 <= k <= n")
        table = self._binomials
        if n >= len(table):
            with self._lock:
                table = self._binomials
                if n >= len(table):
                    grown = list(table)
                    while len(grown) <= n:
                        prev = grown[-1]
                        row = [1.0]
                        for j in range(1, len(prev)):
                            row.append(prev[j] + prev[j - 1])
                        row.append(1.0)
                        grown.append(row)
                    self._binomials = grown
                    table = grown
        return table[n][k]

    @property
    def rows(self) -> int:
        """Number of binomial rows built so far."""
        return len(self._binomials)


# Shared instance used by the evaluator
COEFFICIENTS = CoefficientCache()


def markers(n: int) -> int:
    """Triangular number T(n) from the shared cache."""
    return COEFFICIENTS.markers(n)


def binomials(n: int, k: int) -> float:
    """Binomial coefficient C(n, k) from the shared cache."""
    return COEFFICIENTS.binomials(n, k)
