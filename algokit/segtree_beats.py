"""Segment tree beats: range chmin, chmax, add and assign with range max, min and sum."""

from __future__ import annotations

from collections.abc import Iterable

LINF = 2 * 10**18
"""Sentinel bound; every stored value must stay strictly inside ``(-LINF, LINF)``."""


class SegTreeBeats:
    """Integer array supporting range clamping, adding and assigning.

    All ranges are half-open ``[left, right)``. Amortised cost is
    O((n + q) log^2 n). On an empty range ``query_max`` gives ``-LINF``,
    ``query_min`` gives ``LINF`` and ``query_sum`` gives 0.
    """

    def __init__(self, values: int | Iterable[int] = 0, init_val: int = 0) -> None:
        items = [init_val] * values if isinstance(values, int) else [int(v) for v in values]
        n = len(items)
        n0 = 1
        while n0 < n:
            n0 <<= 1
        self._n = n
        self._n0 = n0
        size = 2 * n0 + 2
        self._max = [-LINF] * size
        self._smax = [-LINF] * size
        self._maxc = [0] * size
        self._min = [LINF] * size
        self._smin = [LINF] * size
        self._minc = [0] * size
        self._sum = [0] * size
        self._sz = [0] * size
        self._ladd = [0] * size
        self._lval = [LINF] * size
        for i, v in enumerate(items):
            k = n0 + i
            self._max[k] = self._min[k] = v
            self._maxc[k] = self._minc[k] = 1
            self._sum[k] = v
            self._sz[k] = 1
        for k in range(n0 - 1, 0, -1):
            self._sz[k] = self._sz[2 * k] + self._sz[2 * k + 1]
            self._pull(k)

    def __len__(self) -> int:
        return self._n

    # ---- node helpers ----

    def _addall(self, k: int, x: int) -> None:
        if not self._sz[k]:
            return
        self._max[k] += x
        if self._smax[k] != -LINF:
            self._smax[k] += x
        self._min[k] += x
        if self._smin[k] != LINF:
            self._smin[k] += x
        self._sum[k] += self._sz[k] * x
        if self._lval[k] != LINF:
            self._lval[k] += x
        else:
            self._ladd[k] += x

    def _setall(self, k: int, x: int) -> None:
        if not self._sz[k]:
            return
        self._max[k] = self._min[k] = x
        self._smax[k] = -LINF
        self._smin[k] = LINF
        self._maxc[k] = self._minc[k] = self._sz[k]
        self._sum[k] = self._sz[k] * x
        self._lval[k] = x
        self._ladd[k] = 0

    def _push_chmin(self, k: int, x: int) -> None:
        # Precondition: smax < x < max.
        self._sum[k] -= (self._max[k] - x) * self._maxc[k]
        if self._max[k] == self._min[k]:
            self._max[k] = self._min[k] = x
        elif self._max[k] == self._smin[k]:
            self._max[k] = self._smin[k] = x
        else:
            self._max[k] = x
        if self._lval[k] != LINF and self._lval[k] > x:
            self._lval[k] = x

    def _push_chmax(self, k: int, x: int) -> None:
        # Precondition: min < x < smin.
        self._sum[k] += (x - self._min[k]) * self._minc[k]
        if self._max[k] == self._min[k]:
            self._max[k] = self._min[k] = x
        elif self._smax[k] == self._min[k]:
            self._min[k] = self._smax[k] = x
        else:
            self._min[k] = x
        if self._lval[k] != LINF and self._lval[k] < x:
            self._lval[k] = x

    def _pull(self, k: int) -> None:
        mx, smx, mc = self._max, self._smax, self._maxc
        mn, smn, nc = self._min, self._smin, self._minc
        l, r = 2 * k, 2 * k + 1
        self._sum[k] = self._sum[l] + self._sum[r]
        if mx[l] < mx[r]:
            mx[k], mc[k], smx[k] = mx[r], mc[r], max(mx[l], smx[r])
        elif mx[l] > mx[r]:
            mx[k], mc[k], smx[k] = mx[l], mc[l], max(smx[l], mx[r])
        else:
            mx[k], mc[k], smx[k] = mx[l], mc[l] + mc[r], max(smx[l], smx[r])
        if mn[l] < mn[r]:
            mn[k], nc[k], smn[k] = mn[l], nc[l], min(smn[l], mn[r])
        elif mn[l] > mn[r]:
            mn[k], nc[k], smn[k] = mn[r], nc[r], min(mn[l], smn[r])
        else:
            mn[k], nc[k], smn[k] = mn[l], nc[l] + nc[r], min(smn[l], smn[r])

    def _push(self, k: int) -> None:
        if k >= self._n0:
            return
        l, r = 2 * k, 2 * k + 1
        if self._lval[k] != LINF:
            self._setall(l, self._lval[k])
            self._setall(r, self._lval[k])
            self._lval[k] = LINF
            self._ladd[k] = 0
            return
        if self._ladd[k]:
            self._addall(l, self._ladd[k])
            self._addall(r, self._ladd[k])
            self._ladd[k] = 0
        for child in (l, r):
            if self._max[k] < self._max[child]:
                self._push_chmin(child, self._max[k])
            if self._min[child] < self._min[k]:
                self._push_chmax(child, self._min[k])

    # ---- recursive operations ----

    def _chmin(self, x: int, a: int, b: int, k: int, l: int, r: int) -> None:
        if b <= l or r <= a or self._max[k] <= x:
            return
        if a <= l and r <= b and self._smax[k] < x:
            self._push_chmin(k, x)
            return
        self._push(k)
        m = (l + r) // 2
        self._chmin(x, a, b, 2 * k, l, m)
        self._chmin(x, a, b, 2 * k + 1, m, r)
        self._pull(k)

    def _chmax(self, x: int, a: int, b: int, k: int, l: int, r: int) -> None:
        if b <= l or r <= a or x <= self._min[k]:
            return
        if a <= l and r <= b and x < self._smin[k]:
            self._push_chmax(k, x)
            return
        self._push(k)
        m = (l + r) // 2
        self._chmax(x, a, b, 2 * k, l, m)
        self._chmax(x, a, b, 2 * k + 1, m, r)
        self._pull(k)

    def _add(self, x: int, a: int, b: int, k: int, l: int, r: int) -> None:
        if b <= l or r <= a:
            return
        if a <= l and r <= b:
            self._addall(k, x)
            return
        self._push(k)
        m = (l + r) // 2
        self._add(x, a, b, 2 * k, l, m)
        self._add(x, a, b, 2 * k + 1, m, r)
        self._pull(k)

    def _set(self, x: int, a: int, b: int, k: int, l: int, r: int) -> None:
        if b <= l or r <= a:
            return
        if a <= l and r <= b:
            self._setall(k, x)
            return
        self._push(k)
        m = (l + r) // 2
        self._set(x, a, b, 2 * k, l, m)
        self._set(x, a, b, 2 * k + 1, m, r)
        self._pull(k)

    def _qmax(self, a: int, b: int, k: int, l: int, r: int) -> int:
        if b <= l or r <= a:
            return -LINF
        if a <= l and r <= b:
            return self._max[k]
        self._push(k)
        m = (l + r) // 2
        return max(self._qmax(a, b, 2 * k, l, m), self._qmax(a, b, 2 * k + 1, m, r))

    def _qmin(self, a: int, b: int, k: int, l: int, r: int) -> int:
        if b <= l or r <= a:
            return LINF
        if a <= l and r <= b:
            return self._min[k]
        self._push(k)
        m = (l + r) // 2
        return min(self._qmin(a, b, 2 * k, l, m), self._qmin(a, b, 2 * k + 1, m, r))

    def _qsum(self, a: int, b: int, k: int, l: int, r: int) -> int:
        if b <= l or r <= a:
            return 0
        if a <= l and r <= b:
            return self._sum[k]
        self._push(k)
        m = (l + r) // 2
        return self._qsum(a, b, 2 * k, l, m) + self._qsum(a, b, 2 * k + 1, m, r)

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}) out of bounds for length {self._n}")

    # ---- public interface ----

    def range_chmin(self, left: int, right: int, x: int) -> None:
        """Replace each element of ``[left, right)`` by ``min(element, x)``."""
        self._check(left, right)
        self._chmin(x, left, right, 1, 0, self._n0)

    def range_chmax(self, left: int, right: int, x: int) -> None:
        """Replace each element of ``[left, right)`` by ``max(element, x)``."""
        self._check(left, right)
        self._chmax(x, left, right, 1, 0, self._n0)

    def range_add(self, left: int, right: int, x: int) -> None:
        """Add ``x`` to each element of ``[left, right)``."""
        self._check(left, right)
        self._add(x, left, right, 1, 0, self._n0)

    def range_set(self, left: int, right: int, x: int) -> None:
        """Assign ``x`` to each element of ``[left, right)``."""
        self._check(left, right)
        self._set(x, left, right, 1, 0, self._n0)

    def query_max(self, left: int, right: int) -> int:
        """Maximum over ``[left, right)``."""
        self._check(left, right)
        return self._qmax(left, right, 1, 0, self._n0)

    def query_min(self, left: int, right: int) -> int:
        """Minimum over ``[left, right)``."""
        self._check(left, right)
        return self._qmin(left, right, 1, 0, self._n0)

    def query_sum(self, left: int, right: int) -> int:
        """Sum over ``[left, right)``."""
        self._check(left, right)
        return self._qsum(left, right, 1, 0, self._n0)