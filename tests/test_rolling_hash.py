import os
import random

import pytest

from algokit.rolling_hash import RollingHash


def test_equal_substrings_compare_equal():
    rh = RollingHash("abcabc")
    assert rh.eq(0, 3, 3, 6)
    assert not rh.eq(0, 2, 1, 3)


def test_different_lengths_are_not_equal():
    rh = RollingHash("aaaa")
    assert not rh.eq(0, 2, 0, 3)


def test_hash_independent_of_surrounding_text():
    assert RollingHash("xxabc").get(2, 5) == RollingHash("abc").get(0, 3)


def test_empty_range_hash_is_zero():
    rh = RollingHash("hello")
    assert rh.get(2, 2) == (0, 0)


def test_single_character_hash_is_its_code():
    rh = RollingHash("a")
    assert rh.get(0, 1) == (ord("a"), ord("a"))


def test_integer_sequence_matches_string():
    text = "banana"
    assert RollingHash(text).get(1, 4) == RollingHash([ord(c) for c in text]).get(1, 4)


def test_length():
    assert len(RollingHash("abcdef")) == len("abcdef")


def test_lcp_matches_common_prefix():
    rng = random.Random(7)
    s = "".join(rng.choice("ab") for _ in range(60))
    rh = RollingHash(s)
    for _ in range(300):
        l1, r1 = sorted(rng.randrange(len(s) + 1) for _ in range(2))
        l2, r2 = sorted(rng.randrange(len(s) + 1) for _ in range(2))
        expected = len(os.path.commonprefix([s[l1:r1], s[l2:r2]]))
        assert rh.lcp(l1, r1, l2, r2) == expected


def test_eq_agrees_with_slices():
    rng = random.Random(11)
    s = "".join(rng.choice("abc") for _ in range(40))
    rh = RollingHash(s)
    for _ in range(300):
        l1 = rng.randrange(len(s))
        l2 = rng.randrange(len(s))
        width = rng.randrange(min(len(s) - l1, len(s) - l2) + 1)
        assert rh.eq(l1, l1 + width, l2, l2 + width) == (s[l1 : l1 + width] == s[l2 : l2 + width])


@pytest.mark.parametrize("left, right", [(-1, 2), (3, 2), (0, 6)])
def test_out_of_range_raises(left, right):
    rh = RollingHash("abcde")
    with pytest.raises(IndexError):
        rh.get(left, right)