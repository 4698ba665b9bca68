"""Combinatorial and bit helpers: combinations, bit counts, subsets, powers and nested folds."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any


def _rotate(seq: MutableSequence, first: int, middle: int, last: int) -> None:
    seq[first:last] = [*seq[middle:last], *seq[first:middle]]


def next_combination(seq: MutableSequence, k: int) -> bool:
    """Advance ``seq[:k]`` to the next combination in lexicographic order, in place.

    ``seq`` must start sorted to enumerate every combination. Returns False
    once the last combination has been passed, leaving ``seq`` sorted again.
    Repeated values give each distinct combination once.
    """
    n = len(seq)
    if not 0 <= k <= n:
        raise ValueError(f"k={k} outside [0, {n}]")
    if n == 0 or k == 0 or k == n:
        return False
    last = seq[n - 1]
    for t in range(k - 1, -1, -1):
        if seq[t] < last:
            d = k
            while seq[d] <= seq[t]:
                d += 1
            seq[t], seq[d] = seq[d], seq[t]
            _rotate(seq, t + 1, d + 1, n)
            _rotate(seq, k, k + (n - d) - 1, n)
            return True
    _rotate(seq, 0, k, n)
    return False


def _require_non_negative(x: int) -> None:
    if x < 0:
        raise ValueError(f"expected a non-negative integer, got {x}")


def popcount(x: int) -> int:
    """Number of set bits in a non-negative integer."""
    _require_non_negative(x)
    return bin(x).count("1")


def topbit(x: int) -> int:
    """Index of the highest set bit, or -1 for zero."""
    _require_non_negative(x)
    return x.bit_length() - 1


def subsets(mask: int) -> Iterator[int]:
    """Every submask of ``mask``, from ``mask`` itself down to 0."""
    _require_non_negative(mask)
    s = mask
    while True:
        yield s
        if s == 0:
            return
        s = (s - 1) & mask


def _one(x: Any) -> Any:
    try:
        return type(x)(1)
    except (TypeError, ValueError):
        return 1


def enum_pow(x: Any, n: int) -> list:
    """The powers ``x**0, x**1, ..., x**n``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    powers = [_one(x)]
    for _ in range(n):
        powers.append(powers[-1] * x)
    return powers


def power(x: Any, n: int) -> Any:
    """``x`` raised to the integer ``n`` by repeated squaring; negative ``n`` inverts ``x``."""
    one = _one(x)
    result = one
    if n < 0:
        x = one / x
        n = -n
    while n > 0:
        if n & 1:
            result = result * x
        x = x * x
        n >>= 1
    return result


def _is_container(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray))


def deep_min(value: Any) -> Any:
    """Smallest scalar inside arbitrarily nested iterables; strings count as scalars."""
    if not _is_container(value):
        return value
    found = False
    best = None
    for item in value:
        candidate = deep_min(item)
        if not found or candidate < best:
            best = candidate
            found = True
    if not found:
        raise ValueError("deep_min of an empty collection")
    return best


def deep_max(value: Any) -> Any:
    """Largest scalar inside arbitrarily nested iterables; strings count as scalars."""
    if not _is_container(value):
        return value
    found = False
    best = None
    for item in value:
        candidate = deep_max(item)
        if not found or best < candidate:
            best = candidate
            found = True
    if not found:
        raise ValueError("deep_max of an empty collection")
    return best


def deep_sum(value: Any) -> Any:
    """Sum of every scalar inside arbitrarily nested iterables; empty collections sum to 0."""
    if not _is_container(value):
        return value
    total = None
    for item in value:
        part = deep_sum(item)
        total = part if total is None else total + part
    return 0 if total is None else total