"""Boyer-Moore majority voting, streaming and over ranges."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any

Vote = tuple[Any, int]
_IDENTITY: Vote = (None, 0)


def bm_op(a: Vote, b: Vote) -> Vote:
    """Merge two ``(candidate, excess)`` summaries of adjacent ranges."""
    candidate_a, excess_a = a
    candidate_b, excess_b = b
    if excess_a == 0:
        return candidate_b, excess_b
    if excess_b == 0:
        return candidate_a, excess_a
    if candidate_a == candidate_b:
        return candidate_a, excess_a + excess_b
    if excess_a > excess_b:
        return candidate_a, excess_a - excess_b
    if excess_a < excess_b:
        return candidate_b, excess_b - excess_a
    return candidate_b, 0


class MajorityVote:
    """Single-pass majority candidate.

    The candidate is the majority only if one exists; check its count separately.
    """

    def __init__(self) -> None:
        self._candidate: Any = None
        self._count = 0

    def push(self, x: Hashable) -> None:
        """Feed one element."""
        if self._count == 0:
            self._candidate = x
            self._count = 1
        elif self._candidate == x:
            self._count += 1
        else:
            self._count -= 1

    def query(self):
        """Current candidate (``None`` before anything was pushed)."""
        return self._candidate

    def has_candidate(self) -> bool:
        """Whether the running excess is positive."""
        return self._count > 0

    def clear(self) -> None:
        """Forget everything pushed so far."""
        self._candidate = None
        self._count = 0


class MajoritySegTree:
    """Majority candidates of ranges under point assignment.

    A returned candidate is the majority only if one exists in the range.
    """

    def __init__(self, values: Iterable) -> None:
        items = list(values)
        if not items:
            raise ValueError("majority tree needs at least one element")
        self._n = len(items)
        self._seg: list[Vote] = [_IDENTITY] * (4 * self._n)
        self._build(items, 1, 0, self._n)

    def __len__(self) -> int:
        return self._n

    def _build(self, items: list, v: int, lo: int, hi: int) -> None:
        if hi - lo == 1:
            self._seg[v] = (items[lo], 1)
            return
        mid = (lo + hi) // 2
        self._build(items, 2 * v, lo, mid)
        self._build(items, 2 * v + 1, mid, hi)
        self._seg[v] = bm_op(self._seg[2 * v], self._seg[2 * v + 1])

    def _set(self, i: int, x, v: int, lo: int, hi: int) -> None:
        if hi - lo == 1:
            self._seg[v] = (x, 1)
            return
        mid = (lo + hi) // 2
        if i < mid:
            self._set(i, x, 2 * v, lo, mid)
        else:
            self._set(i, x, 2 * v + 1, mid, hi)
        self._seg[v] = bm_op(self._seg[2 * v], self._seg[2 * v + 1])

    def _query(self, left: int, right: int, v: int, lo: int, hi: int) -> Vote:
        if right <= lo or hi <= left:
            return _IDENTITY
        if left <= lo and hi <= right:
            return self._seg[v]
        mid = (lo + hi) // 2
        return bm_op(
            self._query(left, right, 2 * v, lo, mid),
            self._query(left, right, 2 * v + 1, mid, hi),
        )

    def set(self, i: int, x) -> None:
        """Replace element ``i`` with ``x``."""
        if not 0 <= i < self._n:
            raise IndexError(f"index {i} out of range")
        self._set(i, x, 1, 0, self._n)

    def query(self, left: int, right: int) -> Vote:
        """``(candidate, excess)`` for ``[left, right)``; ``(None, 0)`` for an empty range."""
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}) out of bounds")
        return self._query(left, right, 1, 0, self._n)