"""Double polynomial rolling hash over a fixed string."""

from __future__ import annotations

from collections.abc import Sequence


class RollingHash:
    """Prefix hashes of a string under two moduli, for O(1) substring hashes.

    A ``str`` is hashed by code point; any other sequence must hold integers.
    """

    MOD1 = 1000000007
    MOD2 = 998244353
    BASE1 = 131
    BASE2 = 137

    def __init__(self, s: str | Sequence[int]) -> None:
        codes = [ord(ch) for ch in s] if isinstance(s, str) else [int(c) for c in s]
        self._n = len(codes)
        self._h1 = [0]
        self._h2 = [0]
        self._pw1 = [1]
        self._pw2 = [1]
        for code in codes:
            self._h1.append((self._h1[-1] * self.BASE1 + code) % self.MOD1)
            self._h2.append((self._h2[-1] * self.BASE2 + code) % self.MOD2)
            self._pw1.append(self._pw1[-1] * self.BASE1 % self.MOD1)
            self._pw2.append(self._pw2[-1] * self.BASE2 % self.MOD2)

    def __len__(self) -> int:
        return self._n

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}) out of bounds for length {self._n}")

    def get(self, left: int, right: int) -> tuple[int, int]:
        """Hash pair of the half-open slice ``[left, right)``."""
        self._check(left, right)
        width = right - left
        v1 = (self._h1[right] - self._h1[left] * self._pw1[width]) % self.MOD1
        v2 = (self._h2[right] - self._h2[left] * self._pw2[width]) % self.MOD2
        return v1, v2

    def lcp(self, l1: int, r1: int, l2: int, r2: int) -> int:
        """Longest common prefix length of ``[l1, r1)`` and ``[l2, r2)``."""
        self._check(l1, r1)
        self._check(l2, r2)
        lo, hi = 0, min(r1 - l1, r2 - l2)
        while lo < hi:
            mid = (lo + hi + 1) // 2
            if self.get(l1, l1 + mid) == self.get(l2, l2 + mid):
                lo = mid
            else:
                hi = mid - 1
        return lo

    def eq(self, l1: int, r1: int, l2: int, r2: int) -> bool:
        """Whether slices ``[l1, r1)`` and ``[l2, r2)`` hash equal."""
        if r1 - l1 != r2 - l2:
            return False
        return self.get(l1, r1) == self.get(l2, r2)