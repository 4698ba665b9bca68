"""Open-addressing hash map for integer and integer-pair keys."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping
from typing import Any

_MASK = (1 << 64) - 1
_MUL1 = 11995408973635179863
_MUL2 = 10150724397891781847
_SEED = random.getrandbits(64)
_DEFAULT_CAPACITY = 4


class HashMap(MutableMapping):
    """Mapping keyed by integers or pairs of integers, with a per-process random hash.

    Slots are probed linearly; deleted slots stay as tombstones until the
    table is rebuilt. With ``default_factory`` set, reading a missing key
    stores and returns ``default_factory()``; otherwise it raises KeyError.
    """

    def __init__(
        self,
        items: Mapping | Iterable[tuple[Any, Any]] | None = None,
        default_factory: Callable[[], Any] | None = None,
    ) -> None:
        self.default_factory = default_factory
        self._reset(_DEFAULT_CAPACITY)
        self._size = 0
        if items is not None:
            self.update(items)

    def _reset(self, capacity: int) -> None:
        self._cap = capacity
        self._shift = 64 - (capacity.bit_length() - 1)
        self._keys: list = [None] * capacity
        self._vals: list = [None] * capacity
        self._used = bytearray(capacity)
        self._dead = bytearray(capacity)
        self._occupied = 0

    def _hash(self, key) -> int:
        if isinstance(key, int):
            return (((key & _MASK) ^ _SEED) * _MUL1 & _MASK) >> self._shift
        if isinstance(key, tuple) and len(key) == 2 and all(isinstance(k, int) for k in key):
            a = ((key[0] & _MASK) ^ _SEED) * _MUL1 & _MASK
            b = ((key[1] & _MASK) ^ _SEED) * _MUL2 & _MASK
            return ((a + b) & _MASK) >> self._shift
        raise TypeError(f"unsupported key {key!r}: use an int or a pair of ints")

    def _find(self, key) -> int:
        h = self._hash(key)
        mask = self._cap - 1
        while self._used[h]:
            if not self._dead[h] and self._keys[h] == key:
                return h
            h = (h + 1) & mask
        return -1

    def _reallocate(self, capacity: int) -> None:
        live = [(self._keys[h], self._vals[h]) for h in range(self._cap) if self._used[h] and not self._dead[h]]
        self._reset(capacity)
        mask = capacity - 1
        for key, value in live:
            h = self._hash(key)
            while self._used[h]:
                h = (h + 1) & mask
            self._keys[h] = key
            self._vals[h] = value
            self._used[h] = 1
        self._occupied = len(live)

    def _store(self, key, value) -> None:
        h = self._hash(key)
        while True:
            if not self._used[h]:
                if (self._occupied + 1) * 2 >= self._cap:
                    self._reallocate(self._cap << 1)
                    h = self._hash(key)
                    continue
                self._keys[h] = key
                self._vals[h] = value
                self._used[h] = 1
                self._occupied += 1
                self._size += 1
                return
            if self._keys[h] == key:
                if self._dead[h]:
                    self._dead[h] = 0
                    self._size += 1
                self._vals[h] = value
                return
            h = (h + 1) & (self._cap - 1)

    def __getitem__(self, key):
        h = self._find(key)
        if h >= 0:
            return self._vals[h]
        if self.default_factory is None:
            raise KeyError(key)
        value = self.default_factory()
        self._store(key, value)
        return value

    def __setitem__(self, key, value) -> None:
        self._store(key, value)

    def __delitem__(self, key) -> None:
        h = self._find(key)
        if h < 0:
            raise KeyError(key)
        self._dead[h] = 1
        self._vals[h] = None
        self._size -= 1
        if _DEFAULT_CAPACITY < self._cap and self._size * 10 <= self._cap:
            self._reallocate(self._cap >> 1)

    def __contains__(self, key) -> bool:
        return self._find(key) >= 0

    def get(self, key, default=None):
        h = self._find(key)
        return self._vals[h] if h >= 0 else default

    def __iter__(self) -> Iterator:
        for h in range(self._cap):
            if self._used[h] and not self._dead[h]:
                yield self._keys[h]

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"{type(self).__name__}({{{body}}})"

    @property
    def capacity(self) -> int:
        """Current number of slots."""
        return self._cap

    def reserve(self, n: int) -> None:
        """Grow the table so that ``n`` keys fit without rebuilding."""
        if n <= 0:
            return
        capacity = _DEFAULT_CAPACITY
        while capacity < n * 2:
            capacity <<= 1
        if self._cap < capacity:
            self._reallocate(capacity)

    def clear(self) -> None:
        """Remove every key, keeping the current capacity."""
        self._reset(self._cap)
        self._size = 0