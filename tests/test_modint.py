import math

import pytest

from algokit.modint import Combination, Mint, Mint7, ModInt

MOD = 998244353


def test_negative_values_are_normalised():
    assert Mint(-1).val == Mint.MOD - 1
    assert str(Mint(-1)) == "998244352"


@pytest.mark.parametrize("a,b", [(5, 7), (MOD - 1, MOD - 2), (123456789, 987654321), (0, 42)])
def test_ring_operations_match_integers(a, b):
    assert (Mint(a) + Mint(b)).val == (a + b) % MOD
    assert (Mint(a) - Mint(b)).val == (a - b) % MOD
    assert (Mint(a) * Mint(b)).val == (a * b) % MOD


def test_ints_on_either_side():
    assert 3 - Mint(5) == Mint(-2)
    assert Mint(5) + 3 == 8
    assert 2 * Mint(MOD - 1) == Mint(-2)


@pytest.mark.parametrize("a,b", [(1, 2), (10, 3), (MOD - 1, 12345)])
def test_division_inverts_multiplication(a, b):
    assert Mint(a) / Mint(b) * Mint(b) == Mint(a)
    assert Mint(b) * Mint(b).inv() == 1


def test_inverse_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Mint(0).inv()


def test_pow_matches_builtin():
    assert Mint(3).pow(10**18).val == pow(3, 10**18, MOD)
    assert (Mint7(7) ** 100).val == pow(7, 100, Mint7.MOD)


def test_pow_non_positive_gives_one():
    assert Mint(5).pow(0) == 1
    assert Mint(5).pow(-3) == 1


def test_moduli_do_not_mix():
    with pytest.raises(TypeError):
        Mint(1) + Mint7(1)


def test_base_class_needs_modulus():
    with pytest.raises(TypeError):
        ModInt(3)


def test_binomials_match_math_comb():
    table = Combination(30)
    for n in range(31):
        for r in range(n + 1):
            assert table.c(n, r) == math.comb(n, r) % MOD


def test_permutations_match_math_perm():
    table = Combination(20, Mint7)
    for n in range(21):
        for r in range(n + 1):
            assert table.p(n, r) == math.perm(n, r) % Mint7.MOD


def test_out_of_range_is_zero():
    table = Combination(10)
    assert table.c(3, 4) == 0
    assert table.c(3, -1) == 0
    assert table.p(2, 3) == 0


def test_multiset_coefficient():
    table = Combination(20)
    assert table.h(0, 0) == 1
    assert table.h(3, 2) == table.c(4, 2)
    assert table.h(5, 4) == math.comb(8, 4)