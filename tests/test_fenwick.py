import random

import pytest

from algokit.fenwick import FenwickTree


def test_zero_initialised_tree_sums_to_zero():
    tree = FenwickTree(5)
    assert len(tree) == 5
    assert tree.sum(0, 5) == 0


def test_built_tree_matches_prefix_sums():
    values = [5, -3, 8, 1, 0, 7, 2, 9, 4]
    tree = FenwickTree(values)
    for left in range(len(values) + 1):
        for right in range(left, len(values) + 1):
            assert tree.sum(left, right) == sum(values[left:right])
    for k in range(len(values) + 1):
        assert tree.sum(k) == sum(values[:k])


def test_random_updates_match_plain_list():
    rng = random.Random(1)
    values = [rng.randrange(-50, 50) for _ in range(40)]
    tree = FenwickTree(values)
    for _ in range(500):
        if rng.random() < 0.5:
            p, x = rng.randrange(len(values)), rng.randrange(-20, 20)
            values[p] += x
            tree.add(p, x)
        else:
            left, right = sorted(rng.randrange(len(values) + 1) for _ in range(2))
            assert tree.sum(left, right) == sum(values[left:right])


def test_set_and_get():
    tree = FenwickTree([1, 2, 3, 4])
    tree.set(2, 10)
    assert tree.get(2) == 10
    assert tree[2] == 10
    assert tree.sum(0, 4) == 1 + 2 + 10 + 4


@pytest.mark.parametrize("index", [-1, 4])
def test_add_out_of_range_raises(index):
    with pytest.raises(IndexError):
        FenwickTree(4).add(index, 1)


def test_reversed_range_raises():
    with pytest.raises(ValueError):
        FenwickTree(4).sum(3, 1)


def test_prefix_past_end_raises():
    with pytest.raises(IndexError):
        FenwickTree(4).sum(0, 5)