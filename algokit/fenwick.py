"""Fenwick tree (binary indexed tree) for point updates and prefix sums."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _ascending(i: int, limit: int) -> Iterator[int]:
    while i <= limit:
        yield i
        i += i & -i


def _descending(i: int) -> Iterator[int]:
    while i > 0:
        yield i
        i -= i & -i


class FenwickTree:
    """Point-add, range-sum array over indices ``0 .. n-1``.

    Built either from a length (all zeros) or from initial values.
    """

    def __init__(self, values: int | Iterable = 0) -> None:
        if isinstance(values, int):
            self._data = [0] * values
            return
        data = list(values)
        n = len(data)
        for i in range(1, n + 1):
            parent = i + (i & -i)
            if parent <= n:
                data[parent - 1] += data[i - 1]
        self._data = data

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, x: int):
        return self.get(x)

    def add(self, x: int, y) -> None:
        """Add ``y`` to element ``x``."""
        if not 0 <= x < len(self._data):
            raise IndexError(f"index {x} out of range")
        for i in _ascending(x + 1, len(self._data)):
            self._data[i - 1] += y

    def set(self, x: int, y) -> None:
        """Make element ``x`` equal to ``y``."""
        self.add(x, y - self.get(x))

    def get(self, x: int):
        """Value of element ``x``."""
        if not 0 <= x < len(self._data):
            raise IndexError(f"index {x} out of range")
        return self._prefix(x + 1) - self._prefix(x)

    def _prefix(self, x: int):
        if not 0 <= x <= len(self._data):
            raise IndexError(f"prefix length {x} out of range")
        total = 0
        for i in _descending(x):
            total += self._data[i - 1]
        return total

    def sum(self, left: int, right: int | None = None):
        """Sum over ``[left, right)``; with one argument, of the first ``left`` elements."""
        if right is None:
            return self._prefix(left)
        if left > right:
            raise ValueError(f"empty range [{left}, {right})")
        return self._prefix(right) - self._prefix(left)