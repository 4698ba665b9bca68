"""Primality testing, prime enumeration and integer factorisation."""

from __future__ import annotations

import math
import random
from itertools import compress

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23)
_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
_rng = random.Random()


def _witness(a: int, n: int, d: int, s: int) -> bool:
    x = pow(a, d, n)
    if x in (1, n - 1):
        return True
    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return True
    return False


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test, exact for every 64-bit ``n``."""
    if n < 2:
        return False
    for p in _SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    return all(_witness(a, n, d, s) for a in _WITNESSES if a < n)


def enumprimes(n: int) -> list[int]:
    """Return every prime ``<= n`` in increasing order."""
    if n < 2:
        return []
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for p in range(2, math.isqrt(n) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
    return list(compress(range(n + 1), sieve))


def _rho_step(n: int) -> int:
    """One Pollard's rho attempt: a non-trivial factor of ``n``, or 0 on failure."""
    if n % 2 == 0:
        return 2
    x = y = _rng.randrange(2, n)
    c = _rng.randrange(1, n)
    d = 1
    while d == 1:
        x = (x * x + c) % n
        y = (y * y + c) % n
        y = (y * y + c) % n
        d = math.gcd(abs(x - y), n)
    return 0 if d == n else d


def factorize(n: int) -> list[int]:
    """Return the prime factors of ``n`` in increasing order, with repetition."""
    if n <= 1:
        return []
    if is_prime(n):
        return [n]
    d = 0
    while not d:
        d = _rho_step(n)
    return sorted(factorize(d) + factorize(n // d))