import math
import random

import pytest

from algokit.lazysegtree import LazySegTree
from algokit.modint import Mint


def _affine_tree(values):
    return LazySegTree(
        [(Mint(v), Mint(1)) for v in values],
        op=lambda x, y: (x[0] + y[0], x[1] + y[1]),
        e=lambda: (Mint(0), Mint(0)),
        mapping=lambda f, s: (f[0] * s[0] + f[1] * s[1], s[1]),
        composition=lambda f, g: (f[0] * g[0], f[0] * g[1] + f[1]),
        id_=lambda: (Mint(1), Mint(0)),
    )


def _add_min_tree(values):
    return LazySegTree(
        values,
        op=min,
        e=lambda: math.inf,
        mapping=lambda f, s: f + s,
        composition=lambda f, g: f + g,
        id_=lambda: 0,
    )


def test_range_affine_range_sum_matches_brute_force():
    rng = random.Random(8)
    mod = Mint.MOD
    values = [rng.randrange(mod) for _ in range(25)]
    tree = _affine_tree(values)
    for _ in range(300):
        left, right = sorted(rng.randrange(len(values) + 1) for _ in range(2))
        if rng.random() < 0.5:
            b, c = rng.randrange(mod), rng.randrange(mod)
            tree.apply(left, right, (Mint(b), Mint(c)))
            values[left:right] = [(b * v + c) % mod for v in values[left:right]]
        else:
            assert tree.prod(left, right)[0] == sum(values[left:right]) % mod


def test_range_add_range_min_matches_brute_force():
    rng = random.Random(10)
    values = [rng.randrange(-100, 100) for _ in range(30)]
    tree = _add_min_tree(values)
    for _ in range(300):
        left, right = sorted(rng.randrange(len(values) + 1) for _ in range(2))
        if rng.random() < 0.5:
            x = rng.randrange(-20, 20)
            tree.apply(left, right, x)
            values[left:right] = [v + x for v in values[left:right]]
        elif left < right:
            assert tree.prod(left, right) == min(values[left:right])
    assert [tree.get(i) for i in range(len(values))] == values


def test_set_after_pending_updates():
    values = [4, 1, 7, 3, 9]
    tree = _add_min_tree(values)
    tree.apply(0, 5, 10)
    tree.set(2, -1)
    expected = [v + 10 for v in values]
    expected[2] = -1
    assert [tree.get(i) for i in range(5)] == expected
    assert tree.prod(0, 5) == min(expected)


def test_apply_point_changes_one_element():
    values = [2, 2, 2]
    tree = _add_min_tree(values)
    tree.apply_point(1, -5)
    assert [tree.get(i) for i in range(3)] == [2, 2 - 5, 2]


def test_empty_range_gives_identity():
    tree = _add_min_tree([1, 2, 3])
    assert tree.prod(1, 1) == math.inf


@pytest.mark.parametrize("left, right", [(-1, 1), (2, 1), (0, 4)])
def test_bad_range_raises(left, right):
    with pytest.raises(IndexError):
        _add_min_tree([1, 2, 3]).apply(left, right, 1)


def test_set_out_of_range_raises():
    with pytest.raises(IndexError):
        _add_min_tree([1, 2, 3]).set(3, 0)