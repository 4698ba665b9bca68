"""Segment tree over a huge index range whose nodes are created on demand."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class DynamicSegTree:
    """Point update, range product over ``[lo, hi)`` with lazily allocated nodes.

    ``op`` must be associative; ``e`` is a zero-argument callable returning its
    identity. Untouched positions hold the identity.
    """

    def __init__(self, lo: int, hi: int, op: Callable[[Any, Any], Any], e: Callable[[], Any]) -> None:
        if lo >= hi:
            raise ValueError(f"empty index range [{lo}, {hi})")
        self.lo = lo
        self.hi = hi
        self._op = op
        self._e = e
        self._val: list = []
        self._left: list[int] = []
        self._right: list[int] = []
        self._root = -1

    def _new_node(self) -> int:
        self._val.append(self._e())
        self._left.append(-1)
        self._right.append(-1)
        return len(self._val) - 1

    def _node_val(self, v: int):
        return self._e() if v == -1 else self._val[v]

    def _pull(self, v: int) -> None:
        self._val[v] = self._op(self._node_val(self._left[v]), self._node_val(self._right[v]))

    def _prod(self, v: int, l: int, r: int, ql: int, qr: int):
        if v == -1 or qr <= l or r <= ql:
            return self._e()
        if ql <= l and r <= qr:
            return self._val[v]
        m = l + (r - l) // 2
        return self._op(self._prod(self._left[v], l, m, ql, qr), self._prod(self._right[v], m, r, ql, qr))

    def _update(self, v: int, l: int, r: int, pos: int, leaf: Callable[[Any], Any]) -> int:
        if v == -1:
            v = self._new_node()
        if r - l == 1:
            self._val[v] = leaf(self._val[v])
            return v
        m = l + (r - l) // 2
        if pos < m:
            self._left[v] = self._update(self._left[v], l, m, pos, leaf)
        else:
            self._right[v] = self._update(self._right[v], m, r, pos, leaf)
        self._pull(v)
        return v

    def _max_right(self, v: int, l: int, r: int, ql: int, acc, pred):
        if r <= ql or v == -1:
            return self.hi, acc
        if ql <= l:
            nxt = self._op(acc, self._val[v])
            if pred(nxt):
                return self.hi, nxt
            if r - l == 1:
                return l, acc
        m = l + (r - l) // 2
        res, acc = self._max_right(self._left[v], l, m, ql, acc, pred)
        if res != self.hi:
            return res, acc
        return self._max_right(self._right[v], m, r, ql, acc, pred)

    def _min_left(self, v: int, l: int, r: int, qr: int, acc, pred):
        if qr <= l or v == -1:
            return self.lo, acc
        if r <= qr:
            nxt = self._op(self._val[v], acc)
            if pred(nxt):
                return self.lo, nxt
            if r - l == 1:
                return r, acc
        m = l + (r - l) // 2
        res, acc = self._min_left(self._right[v], m, r, qr, acc, pred)
        if res != self.lo:
            return res, acc
        return self._min_left(self._left[v], l, m, qr, acc, pred)

    def _check_pos(self, pos: int) -> None:
        if not self.lo <= pos < self.hi:
            raise IndexError(f"position {pos} outside [{self.lo}, {self.hi})")

    def _check_bound(self, bound: int) -> None:
        if not self.lo <= bound <= self.hi:
            raise IndexError(f"bound {bound} outside [{self.lo}, {self.hi}]")

    def _check_pred(self, pred: Callable[[Any], bool]) -> None:
        if not pred(self._e()):
            raise ValueError("predicate must hold for the identity")

    def prod(self, left: int, right: int):
        """Product over ``[left, right)``; the identity when the range is empty."""
        if not (self.lo <= left and right <= self.hi):
            raise IndexError(f"range [{left}, {right}) outside [{self.lo}, {self.hi})")
        return self._prod(self._root, self.lo, self.hi, left, right)

    def all_prod(self):
        """Product over the whole index range."""
        return self._node_val(self._root)

    def get(self, pos: int):
        """Value at ``pos``."""
        self._check_pos(pos)
        return self._prod(self._root, self.lo, self.hi, pos, pos + 1)

    def set(self, pos: int, value) -> None:
        """Replace the value at ``pos``."""
        self._check_pos(pos)
        self._root = self._update(self._root, self.lo, self.hi, pos, lambda _old: value)

    def apply(self, pos: int, value) -> None:
        """Replace the value at ``pos`` with ``op(old, value)``."""
        self._check_pos(pos)
        op = self._op
        self._root = self._update(self._root, self.lo, self.hi, pos, lambda old: op(old, value))

    def max_right(self, left: int, pred: Callable[[Any], bool]) -> int:
        """Largest ``r`` in ``[left, hi]`` with ``pred(prod(left, r))``; ``pred`` must be monotone."""
        self._check_bound(left)
        self._check_pred(pred)
        return self._max_right(self._root, self.lo, self.hi, left, self._e(), pred)[0]

    def min_left(self, right: int, pred: Callable[[Any], bool]) -> int:
        """Smallest ``l`` in ``[lo, right]`` with ``pred(prod(l, right))``; ``pred`` must be monotone."""
        self._check_bound(right)
        self._check_pred(pred)
        return self._min_left(self._root, self.lo, self.hi, right, self._e(), pred)[0]