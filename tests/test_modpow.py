"""Tests for square-and-multiply modular exponentiation."""

import pytest

from primefield.config import BN254_R, M61, SECP256K1_P
from primefield.crypto.errors import DivisionByZeroError
from primefield.crypto.modpow import mod_inv, mod_pow


def test_small_values():
    assert mod_pow(2, 10, 1000) == 24
    assert mod_pow(3, 0, 7) == 1
    assert mod_pow(0, 5, 7) == 0


def test_base_reduced_first():
    assert mod_pow(33, 2, 31) == 4


def test_matches_builtin():
    for base, exp, mod in [(5, 117, 19), (M61 - 3, 2**80 + 1, M61), (7, SECP256K1_P - 2, SECP256K1_P)]:
        assert mod_pow(base, exp, mod) == pow(base, exp, mod)


def test_fermat():
    assert mod_pow(12345, BN254_R - 1, BN254_R) == 1


@pytest.mark.parametrize("base, exp", [(0, 0), (1, 1), (5, 3), (10**40, 10**20)])
def test_modulus_one(base, exp):
    assert mod_pow(base, exp, 1) == 0


def test_negative_exponent():
    with pytest.raises(ValueError):
        mod_pow(2, -1, 7)


def test_bad_modulus():
    with pytest.raises(ValueError):
        mod_pow(2, 3, 0)


def test_inv():
    a_inv = mod_inv(18, 31)
    assert a_inv == 19
    assert (18 * a_inv) % 31 == 1


def test_inv_zero():
    with pytest.raises(DivisionByZeroError):
        mod_inv(0, 31)
    with pytest.raises(DivisionByZeroError):
        mod_inv(62, 31)
