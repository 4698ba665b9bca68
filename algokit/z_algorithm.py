"""Z-array computation and pattern search built on it."""

from __future__ import annotations

from collections.abc import Sequence

_SEPARATOR = object()


def z_algorithm(s: Sequence) -> list[int]:
    """Return ``z`` where ``z[i]`` is the longest common prefix of ``s`` and ``s[i:]``.

    By convention ``z[0] == len(s)``.
    """
    n = len(s)
    if n == 0:
        return []
    z = [0] * n
    z[0] = n
    left = right = 0
    for i in range(1, n):
        if i < right:
            z[i] = min(right - i, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] > right:
            left, right = i, i + z[i]
    return z


def z_search(text: Sequence, pattern: Sequence) -> list[int]:
    """Return every start position of ``pattern`` in ``text``.

    An empty pattern matches at every index of ``text``.
    """
    m = len(pattern)
    combined = [*pattern, _SEPARATOR, *text]
    z = z_algorithm(combined)
    return [i - m - 1 for i in range(m + 1, len(combined)) if z[i] >= m]