"""Extended Euclid, modular inverse and the Chinese remainder theorem."""

from __future__ import annotations


def extgcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    x0, y0, x1, y1 = 1, 0, 0, 1
    while b:
        q = a // b
        a, b = b, a - q * b
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return a, x0, y0


def modinv(a: int, mod: int) -> int:
    """Return the inverse of ``a`` modulo ``mod``; ``mod`` need not be prime."""
    g, x, _ = extgcd(a, mod)
    if abs(g) != 1:
        raise ValueError(f"{a} has no inverse modulo {mod}")
    return x % mod


def crt(r1: int, m1: int, r2: int, m2: int) -> tuple[int, int]:
    """Solve ``x = r1 (mod m1)`` and ``x = r2 (mod m2)``.

    Returns ``(r, lcm(m1, m2))``, or ``(0, 0)`` when there is no solution.
    """
    g, x, _ = extgcd(m1, m2)
    if (r2 - r1) % g != 0:
        return 0, 0
    step = m2 // g
    m = m1 // g * m2
    k = (r2 - r1) // g % step * (x % step) % step
    return (r1 + m1 * k) % m, m