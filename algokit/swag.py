"""Sliding window aggregation: a queue that folds its contents in O(1) amortised."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class SlidingWindowAggregation:
    """FIFO queue over a monoid ``(op, e)``; ``op`` need not be commutative.

    ``e`` is a zero-argument callable returning the identity.
    """

    def __init__(self, op: Callable[[Any, Any], Any], e: Callable[[], Any]) -> None:
        self._op = op
        self._e = e
        # Each stack holds (value, accumulated product) pairs.
        self._front: list[tuple[Any, Any]] = []
        self._back: list[tuple[Any, Any]] = []

    def __len__(self) -> int:
        return len(self._front) + len(self._back)

    def push_back(self, x) -> None:
        """Append ``x`` at the back of the queue."""
        acc = self._op(self._back[-1][1], x) if self._back else x
        self._back.append((x, acc))

    def pop_front(self):
        """Remove and return the element at the front of the queue."""
        if not self._front:
            if not self._back:
                raise IndexError("pop from an empty window")
            while self._back:
                x, _ = self._back.pop()
                acc = self._op(x, self._front[-1][1]) if self._front else x
                self._front.append((x, acc))
        return self._front.pop()[0]

    def fold(self):
        """Product of all elements from front to back."""
        if not self._front and not self._back:
            return self._e()
        if not self._front:
            return self._back[-1][1]
        if not self._back:
            return self._front[-1][1]
        return self._op(self._front[-1][1], self._back[-1][1])