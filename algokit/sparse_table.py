"""Sparse table for constant-time range queries under an idempotent operation."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


class SparseTable:
    """Static range query; ``op`` must be associative and idempotent (min, max, gcd)."""

    def __init__(self, values: Iterable, op: Callable[[Any, Any], Any]) -> None:
        self._op = op
        level = list(values)
        self._n = len(level)
        self._table = [level]
        width = 1
        while 2 * width <= self._n:
            prev = self._table[-1]
            self._table.append([op(a, b) for a, b in zip(prev, prev[width:])])
            width *= 2

    def __len__(self) -> int:
        return self._n

    def query(self, left: int, right: int):
        """Result of ``op`` over the non-empty range ``[left, right)``."""
        if not (0 <= left and right <= self._n):
            raise IndexError(f"range [{left}, {right}) out of bounds")
        if left >= right:
            raise ValueError(f"empty range [{left}, {right})")
        k = (right - left).bit_length() - 1
        row = self._table[k]
        return self._op(row[left], row[right - (1 << k)])