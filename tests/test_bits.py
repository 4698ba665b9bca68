import itertools
from fractions import Fraction

import pytest

from algokit.bits import (
    deep_max,
    deep_min,
    deep_sum,
    enum_pow,
    next_combination,
    popcount,
    power,
    subsets,
    topbit,
)


def _all_combinations(seq, k):
    seen = [tuple(seq[:k])]
    while next_combination(seq, k):
        seen.append(tuple(seq[:k]))
    return seen


@pytest.mark.parametrize("n,k", [(5, 2), (6, 3), (4, 1), (5, 4)])
def test_next_combination_enumerates_all(n, k):
    seq = list(range(n))
    assert _all_combinations(seq, k) == list(itertools.combinations(range(n), k))
    assert seq == list(range(n))


def test_next_combination_with_duplicates_yields_distinct():
    seq = [1, 1, 2, 2, 3]
    got = _all_combinations(seq, 2)
    assert got == sorted(set(itertools.combinations([1, 1, 2, 2, 3], 2)))
    assert seq == [1, 1, 2, 2, 3]


@pytest.mark.parametrize("k", [0, 3])
def test_next_combination_trivial_k(k):
    seq = [1, 2, 3]
    assert next_combination(seq, k) is False
    assert seq == [1, 2, 3]


@pytest.mark.parametrize("k", [-1, 4])
def test_next_combination_bad_k(k):
    with pytest.raises(ValueError):
        next_combination([1, 2, 3], k)


@pytest.mark.parametrize("i", range(0, 70, 7))
def test_popcount_powers_and_masks(i):
    assert popcount(1 << i) == 1
    assert popcount((1 << i) - 1) == i


def test_popcount_disjoint_union():
    a, b = 0b1011_0000, 0b0000_0110
    assert popcount(a | b) == popcount(a) + popcount(b)
    assert popcount(0) == 0


def test_topbit_zero():
    assert topbit(0) == -1


@pytest.mark.parametrize("i", range(0, 70, 5))
def test_topbit_powers(i):
    assert topbit(1 << i) == i
    assert topbit((1 << (i + 1)) - 1) == i


@pytest.mark.parametrize("func", [popcount, topbit])
def test_negative_rejected(func):
    with pytest.raises(ValueError):
        func(-1)


@pytest.mark.parametrize("mask", [0, 1, 0b101, 0b110110, 0b1111])
def test_subsets_invariants(mask):
    subs = list(subsets(mask))
    assert len(subs) == 2 ** popcount(mask)
    assert subs[0] == mask
    assert subs[-1] == 0
    assert all(s & mask == s for s in subs)
    assert all(a > b for a, b in zip(subs, subs[1:]))


def test_subsets_negative_rejected():
    with pytest.raises(ValueError):
        list(subsets(-3))


def test_enum_pow_matches_builtin():
    powers = enum_pow(3, 6)
    assert len(powers) == 7
    assert powers == [3**k for k in range(7)]


def test_enum_pow_fraction():
    x = Fraction(2, 5)
    assert enum_pow(x, 4) == [x**k for k in range(5)]


def test_enum_pow_negative_rejected():
    with pytest.raises(ValueError):
        enum_pow(2, -1)


@pytest.mark.parametrize("x,n", [(2, 10), (7, 0), (3, 13), (-5, 3)])
def test_power_matches_builtin(x, n):
    assert power(x, n) == x**n


def test_power_negative_exponent():
    x = Fraction(2, 3)
    assert power(x, -3) == x**-3
    assert power(2.0, -2) == 0.25


def test_deep_min_max_nested():
    data = [[3, 7], (2, 9), [[5]]]
    assert deep_min(data) == 2
    assert deep_max(data) == 9


def test_deep_scalars_pass_through():
    assert deep_min(5) == 5
    assert deep_max(5) == 5
    assert deep_sum(5) == 5


def test_deep_strings_are_scalars():
    words = ["apple", "pear", "fig"]
    assert deep_max(words) == max(words)
    assert deep_min(words) == min(words)
    assert deep_sum(words) == "".join(words)


def test_deep_sum_nested():
    data = [[3, 7], (2, 9), [[5]], []]
    assert deep_sum(data) == sum([3, 7, 2, 9, 5])
    assert deep_sum([]) == 0


@pytest.mark.parametrize("func", [deep_min, deep_max])
def test_deep_min_max_empty(func):
    with pytest.raises(ValueError):
        func([[], []])