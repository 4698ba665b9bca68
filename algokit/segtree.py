"""Segment tree over a monoid with binary searches on prefix products."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


class SegTree:
    """Point update, range product over ``(op, e)``; ``op`` must be associative.

    ``e`` is a zero-argument callable returning the identity.
    """

    def __init__(self, values: int | Iterable, op: Callable[[Any, Any], Any], e: Callable[[], Any]) -> None:
        self._op = op
        self._e = e
        items = [e() for _ in range(values)] if isinstance(values, int) else list(values)
        self._n = len(items)
        self._size = 1 if self._n <= 1 else 1 << (self._n - 1).bit_length()
        self._data = [e() for _ in range(2 * self._size)]
        self._data[self._size : self._size + self._n] = items
        for i in range(self._size - 1, 0, -1):
            self._update(i)

    def _update(self, k: int) -> None:
        self._data[k] = self._op(self._data[2 * k], self._data[2 * k + 1])

    def __len__(self) -> int:
        return self._n

    def __getitem__(self, x: int):
        return self.get(x)

    def _check_index(self, x: int) -> None:
        if not 0 <= x < self._n:
            raise IndexError(f"index {x} out of range")

    def set(self, x: int, y) -> None:
        """Replace element ``x`` with ``y``."""
        self._check_index(x)
        x += self._size
        self._data[x] = y
        x >>= 1
        while x:
            self._update(x)
            x >>= 1

    def add(self, x: int, y) -> None:
        """Replace element ``x`` with ``op(element, y)``."""
        self.set(x, self._op(self.get(x), y))

    def get(self, x: int):
        """Element ``x``."""
        self._check_index(x)
        return self._data[self._size + x]

    def all_prod(self):
        """Product of every element."""
        return self._data[1]

    def values(self) -> list:
        """All elements in order."""
        return self._data[self._size : self._size + self._n]

    def prod(self, left: int, right: int):
        """Product over ``[left, right)``."""
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}) out of bounds")
        op, data = self._op, self._data
        left += self._size
        right += self._size
        acc_left, acc_right = self._e(), self._e()
        while left < right:
            if left & 1:
                acc_left = op(acc_left, data[left])
                left += 1
            if right & 1:
                right -= 1
                acc_right = op(data[right], acc_right)
            left >>= 1
            right >>= 1
        return op(acc_left, acc_right)

    def max_right(self, left: int, pred: Callable[[Any], bool]) -> int:
        """Largest ``r`` with ``pred(prod(left, r))`` true; ``pred`` must be monotone."""
        if not 0 <= left <= self._n:
            raise IndexError(f"index {left} out of range")
        if not pred(self._e()):
            raise ValueError("predicate must hold for the identity")
        if left == self._n:
            return self._n
        op, data, size = self._op, self._data, self._size
        x = left + size
        acc = self._e()
        while True:
            while x % 2 == 0:
                x >>= 1
            if not pred(op(acc, data[x])):
                while x < size:
                    x *= 2
                    if pred(op(acc, data[x])):
                        acc = op(acc, data[x])
                        x += 1
                return x - size
            acc = op(acc, data[x])
            x += 1
            if x & -x == x:
                return self._n

    def min_left(self, right: int, pred: Callable[[Any], bool]) -> int:
        """Smallest ``l`` with ``pred(prod(l, right))`` true; needs ``0 <= right < len``."""
        if not 0 <= right < self._n:
            raise IndexError(f"index {right} out of range")
        if not pred(self._e()):
            raise ValueError("predicate must hold for the identity")
        if right == 0:
            return 0
        op, data, size = self._op, self._data, self._size
        x = right + size
        acc = self._e()
        while True:
            x -= 1
            while x > 1 and x & 1:
                x >>= 1
            if not pred(op(data[x], acc)):
                while x < size:
                    x = 2 * x + 1
                    if pred(op(data[x], acc)):
                        acc = op(data[x], acc)
                        x -= 1
                return x + 1 - size
            acc = op(data[x], acc)
            if x & -x == x:
                return 0