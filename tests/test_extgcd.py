import math

import pytest

from algokit.extgcd import crt, extgcd, modinv


@pytest.mark.parametrize("a,b", [(240, 46), (17, 5), (0, 7), (7, 0), (1, 1), (1000000007, 998244353)])
def test_bezout_identity(a, b):
    g, x, y = extgcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


@pytest.mark.parametrize("a,mod", [(3, 7), (10, 17), (5, 1000000007), (12, 35)])
def test_modinv(a, mod):
    inv = modinv(a, mod)
    assert 0 <= inv < mod
    assert a * inv % mod == 1


def test_modinv_without_inverse_raises():
    with pytest.raises(ValueError):
        modinv(6, 9)


@pytest.mark.parametrize("r1,m1,r2,m2", [(2, 3, 3, 5), (2, 4, 4, 6), (0, 7, 6, 11), (5, 12, 1, 8)])
def test_crt_solves_both_congruences(r1, m1, r2, m2):
    r, m = crt(r1, m1, r2, m2)
    assert m == math.lcm(m1, m2)
    assert 0 <= r < m
    assert r % m1 == r1 % m1
    assert r % m2 == r2 % m2


def test_crt_without_solution():
    assert crt(1, 2, 0, 4) == (0, 0)