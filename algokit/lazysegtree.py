"""Segment tree with lazy propagation of range updates."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


class LazySegTree:
    """Range update, range product.

    Values form a monoid ``(op, e)``; updates form a monoid
    ``(composition, id_)`` acting on values through ``mapping(f, s)``.
    ``e`` and ``id_`` are zero-argument callables returning identities.
    """

    def __init__(
        self,
        values: int | Iterable,
        op: Callable[[Any, Any], Any],
        e: Callable[[], Any],
        mapping: Callable[[Any, Any], Any],
        composition: Callable[[Any, Any], Any],
        id_: Callable[[], Any],
    ) -> None:
        self._op = op
        self._e = e
        self._mapping = mapping
        self._composition = composition
        self._id = id_
        items = [e() for _ in range(values)] if isinstance(values, int) else list(values)
        self._n = len(items)
        size = 1
        while size < self._n:
            size <<= 1
        self._size = size
        self._log = size.bit_length() - 1
        self._data = [e() for _ in range(2 * size)]
        self._lazy = [id_() for _ in range(2 * size)]
        self._data[size : size + self._n] = items
        for k in range(size - 1, 0, -1):
            self._pull(k)

    def __len__(self) -> int:
        return self._n

    def _pull(self, k: int) -> None:
        self._data[k] = self._op(self._data[2 * k], self._data[2 * k + 1])

    def _apply_node(self, k: int, f) -> None:
        self._data[k] = self._mapping(f, self._data[k])
        self._lazy[k] = self._composition(f, self._lazy[k])

    def _push_down(self, k: int) -> None:
        pending = self._lazy[k]
        if pending == self._id():
            return
        self._apply_node(2 * k, pending)
        self._apply_node(2 * k + 1, pending)
        self._lazy[k] = self._id()

    def _check_range(self, left: int, right: int) -> None:
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}) out of bounds")

    def _apply(self, left: int, right: int, f, k: int, lo: int, hi: int) -> None:
        if right <= lo or hi <= left:
            return
        if left <= lo and hi <= right:
            self._apply_node(k, f)
            return
        self._push_down(k)
        mid = (lo + hi) // 2
        self._apply(left, right, f, 2 * k, lo, mid)
        self._apply(left, right, f, 2 * k + 1, mid, hi)
        self._pull(k)

    def _prod(self, left: int, right: int, k: int, lo: int, hi: int):
        if right <= lo or hi <= left:
            return self._e()
        if left <= lo and hi <= right:
            return self._data[k]
        self._push_down(k)
        mid = (lo + hi) // 2
        return self._op(
            self._prod(left, right, 2 * k, lo, mid),
            self._prod(left, right, 2 * k + 1, mid, hi),
        )

    def apply(self, left: int, right: int, f) -> None:
        """Apply update ``f`` to every element of ``[left, right)``."""
        self._check_range(left, right)
        self._apply(left, right, f, 1, 0, self._size)

    def apply_point(self, i: int, f) -> None:
        """Apply update ``f`` to element ``i``."""
        self.apply(i, i + 1, f)

    def prod(self, left: int, right: int):
        """Product over ``[left, right)``."""
        self._check_range(left, right)
        return self._prod(left, right, 1, 0, self._size)

    def get(self, i: int):
        """Element ``i``."""
        return self.prod(i, i + 1)

    def set(self, i: int, value) -> None:
        """Replace element ``i`` with ``value``."""
        if not 0 <= i < self._n:
            raise IndexError(f"index {i} out of range")
        i += self._size
        for k in range(self._log, 0, -1):
            self._push_down(i >> k)
        self._data[i] = value
        for k in range(1, self._log + 1):
            self._pull(i >> k)