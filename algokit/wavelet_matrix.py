"""Wavelet matrix over a static sequence of small non-negative integers."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate


class WaveletMatrix:
    """Order-statistic and counting queries on a fixed sequence.

    Every value must lie in ``[0, 2**bits)``. Each query costs O(bits).
    Ranges are half-open ``[left, right)``.
    """

    def __init__(self, values: Iterable[int], bits: int = 20) -> None:
        if bits < 1:
            raise ValueError("bits must be positive")
        items = list(values)
        limit = 1 << bits
        for x in items:
            if not isinstance(x, int) or not 0 <= x < limit:
                raise ValueError(f"value {x!r} outside [0, {limit})")
        self.bits = bits
        self._limit = limit
        self._n = len(items)
        self._ones: list[list[int]] = [[] for _ in range(bits)]
        self._zeros = [0] * bits
        current = items
        for d in reversed(range(bits)):
            ones = list(accumulate(((x >> d) & 1 for x in current), initial=0))
            self._ones[d] = ones
            self._zeros[d] = self._n - ones[-1]
            current = [x for x in current if not (x >> d) & 1] + [x for x in current if (x >> d) & 1]
            self._on_level(d, current)

    def _on_level(self, d: int, arrangement: list[int]) -> None:
        """Called with the sequence as reordered after level ``d``."""

    def __len__(self) -> int:
        return self._n

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}) out of bounds for length {self._n}")

    def _down(self, d: int, left: int, right: int, bit: int) -> tuple[int, int]:
        ones = self._ones[d]
        if bit == 0:
            return left - ones[left], right - ones[right]
        zeros = self._zeros[d]
        return zeros + ones[left], zeros + ones[right]

    def kth(self, left: int, right: int, k: int) -> int:
        """The ``k``-th smallest (0-indexed) value in ``[left, right)``."""
        self._check(left, right)
        if not 0 <= k < right - left:
            raise IndexError(f"k={k} out of range for {right - left} elements")
        result = 0
        for d in reversed(range(self.bits)):
            ones = self._ones[d]
            zeros_here = (right - ones[right]) - (left - ones[left])
            if k < zeros_here:
                left, right = self._down(d, left, right, 0)
            else:
                k -= zeros_here
                result |= 1 << d
                left, right = self._down(d, left, right, 1)
        return result

    def count_lt(self, left: int, right: int, x: int) -> int:
        """Number of values below ``x`` in ``[left, right)``."""
        self._check(left, right)
        if x <= 0:
            return 0
        if x >= self._limit:
            return right - left
        count = 0
        for d in reversed(range(self.bits)):
            bit = (x >> d) & 1
            if bit:
                ones = self._ones[d]
                count += (right - ones[right]) - (left - ones[left])
            left, right = self._down(d, left, right, bit)
        return count

    def count(self, left: int, right: int, x: int) -> int:
        """Number of occurrences of ``x`` in ``[left, right)``."""
        self._check(left, right)
        if not 0 <= x < self._limit:
            return 0
        for d in reversed(range(self.bits)):
            left, right = self._down(d, left, right, (x >> d) & 1)
        return right - left

    def range_freq(self, left: int, right: int, lo: int, hi: int) -> int:
        """Number of values in ``[lo, hi)`` within ``[left, right)``."""
        return self.count_lt(left, right, hi) - self.count_lt(left, right, lo)


class WaveletMatrixSum(WaveletMatrix):
    """Wavelet matrix that can also sum the values below a bound."""

    def __init__(self, values: Iterable[int], bits: int = 20) -> None:
        items = list(values)
        self._level_sums: list[list[int]] = [[] for _ in range(max(bits, 0))]
        super().__init__(items, bits)
        self._prefix = list(accumulate(items, initial=0))

    def _on_level(self, d: int, arrangement: list[int]) -> None:
        self._level_sums[d] = list(accumulate(arrangement, initial=0))

    def sum_lt(self, left: int, right: int, x: int) -> int:
        """Sum of the values below ``x`` in ``[left, right)``."""
        self._check(left, right)
        if x <= 0:
            return 0
        if x >= self._limit:
            return self._prefix[right] - self._prefix[left]
        total = 0
        for d in reversed(range(self.bits)):
            bit = (x >> d) & 1
            ones = self._ones[d]
            l0, r0 = left - ones[left], right - ones[right]
            if bit:
                sums = self._level_sums[d]
                total += sums[r0] - sums[l0]
                zeros = self._zeros[d]
                left, right = zeros + ones[left], zeros + ones[right]
            else:
                left, right = l0, r0
        return total

    def range_sum(self, left: int, right: int, lo: int, hi: int) -> int:
        """Sum of the values in ``[lo, hi)`` within ``[left, right)``."""
        return self.sum_lt(left, right, hi) - self.sum_lt(left, right, lo)