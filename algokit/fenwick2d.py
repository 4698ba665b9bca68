"""Two-dimensional Fenwick trees: a dense grid and an offline compressed form."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterator


def _ascending(i: int, limit: int) -> Iterator[int]:
    while i <= limit:
        yield i
        i += i & -i


def _descending(i: int) -> Iterator[int]:
    while i > 0:
        yield i
        i -= i & -i


class FenwickTree2D:
    """Point-add, rectangle-sum over a dense ``h`` by ``w`` grid, 1-indexed."""

    def __init__(self, h: int, w: int) -> None:
        self.h = h
        self.w = w
        self._tree = [[0] * (w + 1) for _ in range(h + 1)]

    def add(self, x: int, y: int, v) -> None:
        """Add ``v`` at cell ``(x, y)``."""
        if not (1 <= x <= self.h and 1 <= y <= self.w):
            raise IndexError(f"cell ({x}, {y}) out of range")
        for i in _ascending(x, self.h):
            row = self._tree[i]
            for j in _ascending(y, self.w):
                row[j] += v

    def prefix_sum(self, x: int, y: int):
        """Sum over ``[1, x] x [1, y]``."""
        if not (0 <= x <= self.h and 0 <= y <= self.w):
            raise IndexError(f"corner ({x}, {y}) out of range")
        total = 0
        for i in _descending(x):
            row = self._tree[i]
            for j in _descending(y):
                total += row[j]
        return total

    def sum(self, lx: int, rx: int, ly: int, ry: int):
        """Sum over the inclusive rectangle ``[lx, rx] x [ly, ry]``."""
        return (
            self.prefix_sum(rx, ry)
            - self.prefix_sum(lx - 1, ry)
            - self.prefix_sum(rx, ly - 1)
            + self.prefix_sum(lx - 1, ly - 1)
        )


class CompressedFenwickTree2D:
    """Offline 2D Fenwick tree: x in ``1 .. n``, y any orderable value.

    Every point that will be updated is first registered with ``reserve``;
    ``build`` then fixes the structure, after which ``add`` and sums work.
    """

    def __init__(self, n: int) -> None:
        self.n = n
        self._ys: list[list] = [[] for _ in range(n + 1)]
        self._tree: list[list] = [[] for _ in range(n + 1)]
        self.built = False

    def reserve(self, x: int, y) -> None:
        """Register point ``(x, y)`` for later updates."""
        if self.built:
            raise RuntimeError("points must be reserved before build")
        if not 1 <= x <= self.n:
            raise IndexError(f"x {x} out of range")
        for i in _ascending(x, self.n):
            self._ys[i].append(y)

    def build(self) -> None:
        """Fix the set of y coordinates for every node."""
        for i in range(1, self.n + 1):
            ys = sorted(set(self._ys[i]))
            self._ys[i] = ys
            self._tree[i] = [0] * (len(ys) + 1)
        self.built = True

    def _require_built(self) -> None:
        if not self.built:
            raise RuntimeError("build must be called first")

    def add(self, x: int, y, v) -> None:
        """Add ``v`` at point ``(x, y)``."""
        self._require_built()
        if not 1 <= x <= self.n:
            raise IndexError(f"x {x} out of range")
        for i in _ascending(x, self.n):
            ys, node = self._ys[i], self._tree[i]
            for j in _ascending(bisect_left(ys, y) + 1, len(ys)):
                node[j] += v

    def prefix_sum(self, x: int, y):
        """Sum over points with x coordinate at most ``x`` and y at most ``y``."""
        self._require_built()
        if not 0 <= x <= self.n:
            raise IndexError(f"x {x} out of range")
        total = 0
        for i in _descending(x):
            node = self._tree[i]
            for j in _descending(bisect_right(self._ys[i], y)):
                total += node[j]
        return total

    def sum(self, lx: int, rx: int, ly, ry):
        """Sum over the inclusive rectangle ``[lx, rx] x [ly, ry]`` (integer y)."""
        return (
            self.prefix_sum(rx, ry)
            - self.prefix_sum(lx - 1, ry)
            - self.prefix_sum(rx, ly - 1)
            + self.prefix_sum(lx - 1, ly - 1)
        )