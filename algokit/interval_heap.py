"""Double-ended priority queue built on an interval heap."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any


class IntervalHeap:
    """Priority queue with O(1) access to both ends and O(log n) removal from either.

    Each node holds an interval ``[lo, hi]``. The ``lo`` ends form a min-heap and
    the ``hi`` ends a max-heap, so the root holds the global minimum and maximum.
    ``less(a, b)`` is true iff ``a`` orders strictly before ``b``.
    """

    def __init__(self, values: Iterable = (), less: Callable[[Any, Any], bool] | None = None) -> None:
        self._less = operator.lt if less is None else less
        self._nodes: list[list] = []
        self._size = 0
        for value in values:
            self.push(value)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def _is_partial(self, i: int) -> bool:
        return i == len(self._nodes) - 1 and self._size % 2 == 1

    def _hi(self, i: int):
        node = self._nodes[i]
        return node[0] if self._is_partial(i) else node[1]

    def _set_hi(self, i: int, value) -> None:
        self._nodes[i][0 if self._is_partial(i) else 1] = value

    def _fix_node(self, i: int) -> None:
        hi = self._hi(i)
        node = self._nodes[i]
        if self._less(hi, node[0]):
            lo = node[0]
            node[0] = hi
            self._set_hi(i, lo)

    def _sift_up_min(self, i: int) -> None:
        nodes, less = self._nodes, self._less
        while i > 0:
            p = (i - 1) // 2
            if not less(nodes[i][0], nodes[p][0]):
                break
            nodes[i][0], nodes[p][0] = nodes[p][0], nodes[i][0]
            i = p

    def _sift_up_max(self, i: int) -> None:
        nodes, less = self._nodes, self._less
        while i > 0:
            p = (i - 1) // 2
            child_hi = self._hi(i)
            if not less(nodes[p][1], child_hi):
                break
            self._set_hi(i, nodes[p][1])
            nodes[p][1] = child_hi
            i = p

    def _sift_down_min(self, i: int) -> None:
        nodes, less = self._nodes, self._less
        n = len(nodes)
        while True:
            c = 2 * i + 1
            if c >= n:
                break
            if c + 1 < n and less(nodes[c + 1][0], nodes[c][0]):
                c += 1
            if not less(nodes[c][0], nodes[i][0]):
                break
            nodes[i][0], nodes[c][0] = nodes[c][0], nodes[i][0]
            self._fix_node(c)
            i = c

    def _sift_down_max(self, i: int) -> None:
        nodes, less = self._nodes, self._less
        n = len(nodes)
        while True:
            c = 2 * i + 1
            if c >= n:
                break
            if c + 1 < n and less(self._hi(c), self._hi(c + 1)):
                c += 1
            child_hi = self._hi(c)
            if not less(nodes[i][1], child_hi):
                break
            self._set_hi(c, nodes[i][1])
            nodes[i][1] = child_hi
            self._fix_node(c)
            i = c

    def _require_items(self) -> None:
        if self._size == 0:
            raise IndexError("the heap is empty")

    def push(self, x) -> None:
        """Insert ``x``."""
        nodes = self._nodes
        if self._size % 2 == 0:
            nodes.append([x, x])
        else:
            node = nodes[-1]
            if self._less(x, node[0]):
                node[1] = node[0]
                node[0] = x
            else:
                node[1] = x
        self._size += 1
        i = len(nodes) - 1
        self._sift_up_min(i)
        self._sift_up_max(i)

    def top_min(self):
        """Smallest element."""
        self._require_items()
        return self._nodes[0][0]

    def top_max(self):
        """Largest element."""
        self._require_items()
        return self._hi(0)

    def _take_last(self):
        if self._size % 2 == 1:
            x = self._nodes.pop()[0]
        else:
            x = self._nodes[-1][1]
        self._size -= 1
        return x

    def pop_min(self):
        """Remove and return the smallest element."""
        self._require_items()
        root = self._nodes[0]
        smallest = root[0]
        if self._size == 1:
            self._nodes.pop()
            self._size = 0
            return smallest
        if self._size == 2:
            root[0] = root[1]
            self._size = 1
            return smallest
        root[0] = self._take_last()
        if self._less(root[1], root[0]):
            root[0], root[1] = root[1], root[0]
        self._sift_down_min(0)
        return smallest

    def pop_max(self):
        """Remove and return the largest element."""
        self._require_items()
        root = self._nodes[0]
        largest = self._hi(0)
        if self._size == 1:
            self._nodes.pop()
            self._size = 0
            return largest
        if self._size == 2:
            self._size = 1
            return largest
        root[1] = self._take_last()
        if self._less(root[1], root[0]):
            root[0], root[1] = root[1], root[0]
        self._sift_down_max(0)
        return largest