"""Integers modulo a fixed prime, and binomial tables over them."""

from __future__ import annotations

from itertools import accumulate
from operator import mul
from typing import Callable, ClassVar


class ModInt:
    """An integer modulo ``MOD``; subclasses fix ``MOD``."""

    MOD: ClassVar[int] = 0
    __slots__ = ("val",)

    def __init__(self, value: int = 0) -> None:
        if not self.MOD:
            raise TypeError("ModInt needs a subclass that sets MOD")
        if isinstance(value, ModInt):
            value = value.val
        self.val = int(value) % self.MOD

    def _other(self, other: object) -> int | None:
        if isinstance(other, ModInt):
            if other.MOD != self.MOD:
                raise TypeError("cannot mix residues of different moduli")
            return other.val
        if isinstance(other, int):
            return other % self.MOD
        return None

    def _combine(self, other: object, fn: Callable[[int, int], int]):
        value = self._other(other)
        if value is None:
            return NotImplemented
        return type(self)(fn(self.val, value))

    def __add__(self, other):
        return self._combine(other, lambda a, b: a + b)

    def __radd__(self, other):
        return self._combine(other, lambda a, b: b + a)

    def __sub__(self, other):
        return self._combine(other, lambda a, b: a - b)

    def __rsub__(self, other):
        return self._combine(other, lambda a, b: b - a)

    def __mul__(self, other):
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other):
        return self._combine(other, lambda a, b: b * a)

    def __truediv__(self, other):
        value = self._other(other)
        if value is None:
            return NotImplemented
        return self * type(self)(value).inv()

    def __rtruediv__(self, other):
        value = self._other(other)
        if value is None:
            return NotImplemented
        return type(self)(value) * self.inv()

    def __neg__(self):
        return type(self)(-self.val)

    def __pow__(self, n: int):
        return self.pow(n)

    def __eq__(self, other: object) -> bool:
        value = self._other(other)
        if value is None:
            return NotImplemented
        return self.val == value

    def __hash__(self) -> int:
        return hash(self.val)

    def __int__(self) -> int:
        return self.val

    def __str__(self) -> str:
        return str(self.val)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.val})"

    def pow(self, n: int):
        """Raise to the power ``n``; a non-positive exponent gives 1."""
        if n <= 0:
            return type(self)(1)
        return type(self)(pow(self.val, n, self.MOD))

    def inv(self):
        """Multiplicative inverse by Fermat's little theorem; ``MOD`` must be prime."""
        if self.val == 0:
            raise ZeroDivisionError("zero has no inverse")
        return self.pow(self.MOD - 2)


class Mint(ModInt):
    """Residues modulo 998244353."""

    MOD = 998244353
    __slots__ = ()


class Mint7(ModInt):
    """Residues modulo 1000000007."""

    MOD = 1000000007
    __slots__ = ()


class Combination:
    """Factorial tables up to ``n`` for counting modulo a prime."""

    def __init__(self, n: int, modint: type[ModInt] = Mint) -> None:
        if n < 0:
            raise ValueError("table size must be non-negative")
        self._mint = modint
        self.fact = list(accumulate(range(1, n + 1), mul, initial=modint(1)))
        backwards = accumulate(range(n, 0, -1), mul, initial=self.fact[n].inv())
        self.inv_fact = list(backwards)[::-1]

    def c(self, n: int, r: int) -> ModInt:
        """Binomial coefficient nCr, zero outside ``0 <= r <= n``."""
        if r < 0 or r > n or n < 0:
            return self._mint(0)
        return self.fact[n] * self.inv_fact[r] * self.inv_fact[n - r]

    def p(self, n: int, r: int) -> ModInt:
        """Number of ordered selections nPr, zero outside ``0 <= r <= n``."""
        if r < 0 or r > n or n < 0:
            return self._mint(0)
        return self.fact[n] * self.inv_fact[n - r]

    def h(self, n: int, r: int) -> ModInt:
        """Multiset coefficient H(n, r) = C(n + r - 1, r)."""
        if n == 0 and r == 0:
            return self._mint(1)
        return self.c(n + r - 1, r)