import random

import pytest

from algokit.segtree_beats import LINF, SegTreeBeats


def _check_all(tree, model, rng, samples=10):
    n = len(model)
    assert tree.query_sum(0, n) == sum(model)
    if n:
        assert tree.query_max(0, n) == max(model)
        assert tree.query_min(0, n) == min(model)
    for _ in range(samples):
        l = rng.randrange(n)
        r = rng.randrange(l + 1, n + 1)
        part = model[l:r]
        assert tree.query_max(l, r) == max(part)
        assert tree.query_min(l, r) == min(part)
        assert tree.query_sum(l, r) == sum(part)


@pytest.mark.parametrize("n", [1, 2, 7, 13, 32])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_random_operations_match_plain_list(n, seed):
    rng = random.Random(seed * 100 + n)
    model = [rng.randint(-50, 50) for _ in range(n)]
    tree = SegTreeBeats(model)
    for _ in range(300):
        l = rng.randrange(n)
        r = rng.randrange(l + 1, n + 1)
        x = rng.randint(-60, 60)
        kind = rng.randrange(4)
        if kind == 0:
            tree.range_chmin(l, r, x)
            model[l:r] = [min(v, x) for v in model[l:r]]
        elif kind == 1:
            tree.range_chmax(l, r, x)
            model[l:r] = [max(v, x) for v in model[l:r]]
        elif kind == 2:
            tree.range_add(l, r, x)
            model[l:r] = [v + x for v in model[l:r]]
        else:
            tree.range_set(l, r, x)
            model[l:r] = [x] * (r - l)
        _check_all(tree, model, rng, samples=3)


def test_clamp_then_raise_two_valued_node():
    model = [1, 5]
    tree = SegTreeBeats(model)
    tree.range_chmin(0, 2, 3)
    tree.range_chmax(0, 2, 4)
    assert tree.query_min(0, 2) == tree.query_max(0, 2)
    assert tree.query_sum(0, 2) == 2 * tree.query_min(0, 2)


def test_length_constructor_uses_initial_value():
    tree = SegTreeBeats(5, 3)
    assert len(tree) == 5
    assert tree.query_min(0, 5) == 3
    assert tree.query_max(0, 5) == 3
    assert tree.query_sum(0, 5) == 3 * 5


def test_default_construction_is_zero_filled():
    tree = SegTreeBeats(4)
    assert tree.query_sum(0, 4) == 0
    assert tree.query_max(0, 4) == 0


def test_empty_range_sentinels():
    tree = SegTreeBeats([4, 8, 15])
    assert tree.query_sum(1, 1) == 0
    assert tree.query_max(2, 2) == -LINF
    assert tree.query_min(0, 0) == LINF


def test_operations_outside_range_leave_values():
    model = [9, 2, 7, 4]
    tree = SegTreeBeats(model)
    tree.range_set(1, 3, 100)
    assert tree.query_max(0, 1) == 9
    assert tree.query_min(3, 4) == 4
    assert tree.query_sum(1, 3) == 200


@pytest.mark.parametrize("left, right", [(0, 4), (-1, 2), (2, 1)])
def test_bad_ranges_raise(left, right):
    tree = SegTreeBeats([1, 2, 3])
    with pytest.raises(IndexError):
        tree.query_sum(left, right)
    with pytest.raises(IndexError):
        tree.range_add(left, right, 1)