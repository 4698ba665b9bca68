"""Mo's algorithm for answering offline range queries."""

from __future__ import annotations

import math
from collections.abc import Callable


class Mo:
    """Offline half-open range queries over ``0 .. n-1`` answered in Mo order.

    The window ``[l, r)`` starts empty at 0 and is moved one index at a time,
    calling the supplied callbacks before each query is answered.
    """

    def __init__(self, n: int) -> None:
        self.n = n
        self.queries: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self.queries)

    def add(self, left: int, right: int) -> None:
        """Register the query ``[left, right)``; its number is the order of registration."""
        if not 0 <= left <= right:
            raise ValueError(f"invalid range [{left}, {right})")
        self.queries.append((left, right))

    def run(
        self,
        add_left: Callable[[int], None],
        del_left: Callable[[int], None],
        add_right: Callable[[int], None],
        del_right: Callable[[int], None],
        query: Callable[[int], None],
    ) -> None:
        """Sweep the window over every query.

        ``add_left(i)`` extends the window left to include ``i``, ``del_left(i)``
        drops ``i`` from the left, ``add_right(i)`` takes in the new last index
        ``i`` and ``del_right(i)`` drops the old last index ``i``. ``query(qi)``
        is called when the window equals query ``qi``.
        """
        if not self.queries:
            return
        block = max(1, math.isqrt(self.n))
        qs = self.queries

        def order_key(qi: int) -> tuple[int, int]:
            left, right = qs[qi]
            b = left // block
            return b, -right if b & 1 else right

        l = r = 0
        for qi in sorted(range(len(qs)), key=order_key):
            ql, qr = qs[qi]
            while r < qr:
                add_right(r)
                r += 1
            while l > ql:
                l -= 1
                add_left(l)
            while r > qr:
                r -= 1
                del_right(r)
            while l < ql:
                del_left(l)
                l += 1
            query(qi)