"""Disjoint-set forest with union by size and path compression."""

from __future__ import annotations

from typing import Callable


class UnionFind:
    """Disjoint sets over ``0 .. n-1``."""

    def __init__(self, n: int) -> None:
        # A negative entry marks a root and holds minus its set size.
        self._data = [-1] * n

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, k: int) -> int:
        return self.root(k)

    def root(self, k: int) -> int:
        """Representative of the set holding ``k``."""
        top = k
        while self._data[top] >= 0:
            top = self._data[top]
        while k != top:
            self._data[k], k = top, self._data[k]
        return top

    def merge(self, x: int, y: int, callback: Callable[[int, int], None] | None = None) -> bool:
        """Join the sets of ``x`` and ``y``; False if they were already one.

        Without a callback, ties make ``y``'s root the new root. With a callback,
        ties keep ``x``'s root, and ``callback(root, absorbed)`` is called after
        the join.
        """
        x, y = self.root(x), self.root(y)
        if x == y:
            return False
        data = self._data
        if callback is None:
            if data[x] < data[y]:
                x, y = y, x
            data[y] += data[x]
            data[x] = y
            return True
        if data[y] < data[x]:
            x, y = y, x
        data[x] += data[y]
        data[y] = x
        callback(x, y)
        return True

    def size(self, k: int) -> int:
        """Number of elements in the set holding ``k``."""
        return -self._data[self.root(k)]

    def same(self, x: int, y: int) -> bool:
        """Whether ``x`` and ``y`` are in one set."""
        return self.root(x) == self.root(y)

    def groups(self) -> list[list[int]]:
        """All sets, each in increasing order, listed by representative."""
        buckets: list[list[int]] = [[] for _ in self._data]
        for k in range(len(self._data)):
            buckets[self.root(k)].append(k)
        return [bucket for bucket in buckets if bucket]

    def components(self) -> int:
        """Number of disjoint sets."""
        return sum(1 for v in self._data if v < 0)