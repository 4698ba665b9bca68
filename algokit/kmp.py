"""Knuth-Morris-Pratt failure function, substring search and string period."""

from __future__ import annotations

from collections.abc import Sequence


def kmp_failure(pattern: Sequence) -> list[int]:
    """Return ``fail`` where ``fail[i]`` is the longest proper border of ``pattern[: i + 1]``."""
    fail = [0] * len(pattern)
    for i in range(1, len(pattern)):
        j = fail[i - 1]
        while j > 0 and pattern[i] != pattern[j]:
            j = fail[j - 1]
        if pattern[i] == pattern[j]:
            j += 1
        fail[i] = j
    return fail


def kmp_search(text: Sequence, pattern: Sequence) -> list[int]:
    """Return every start position of ``pattern`` in ``text``, overlaps included.

    An empty pattern matches nowhere.
    """
    if not pattern:
        return []
    fail = kmp_failure(pattern)
    m = len(pattern)
    found = []
    j = 0
    for i, item in enumerate(text):
        while j > 0 and item != pattern[j]:
            j = fail[j - 1]
        if item == pattern[j]:
            j += 1
        if j == m:
            found.append(i - m + 1)
            j = fail[j - 1]
    return found


def string_period(s: Sequence) -> int:
    """Length of the shortest unit that ``s`` is a whole repetition of.

    ``"ababab"`` gives 2; a sequence that is no such repetition gives its length.
    """
    if not s:
        raise ValueError("the period of an empty sequence is undefined")
    n = len(s)
    period = n - kmp_failure(s)[-1]
    return period if n % period == 0 else n