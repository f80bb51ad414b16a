import math
import random

import pytest

from dlp_utils import (
    InvalidModulusError, NotInvertibleError, extended_gcd, inverse, mod_inv, normalize, powm,
)
from dlp_utils import mod_utils


def test_normalize_into_range(backend):
    n = backend.convert(5)
    assert normalize(backend.convert(12), n) == 2
    assert normalize(backend.convert(-7), n) == 3
    assert normalize(backend.convert(0), n) == 0
    assert normalize(backend.convert(-5), n) == 0


@pytest.mark.parametrize("n", [0, -3])
def test_normalize_rejects_bad_modulus(n):
    with pytest.raises(InvalidModulusError):
        normalize(4, n)


@pytest.mark.parametrize("a,b", [
    (240, 46), (46, 240), (17, 5), (0, 9), (9, 0), (0, 0), (-4, 6), (4, -6),
    (-12, -18), (1, 1), (2 ** 127 - 1, 2 ** 89 - 1), (3 * 2 ** 70, 9 * 2 ** 40),
])
def test_extended_gcd_bezout(backend, a, b):
    a, b = backend.convert(a), backend.convert(b)
    d, c1, c2 = extended_gcd(a, b)
    assert d >= 0
    assert d == c1 * a + c2 * b
    assert d == math.gcd(int(a), int(b))
    if d != 0:
        assert a % d == 0
        assert b % d == 0


def test_extended_gcd_of_zeros():
    assert extended_gcd(0, 0).gcd == 0


def test_extended_gcd_fields():
    result = extended_gcd(240, 46)
    assert result.gcd == 2
    assert result.c1 * 240 + result.c2 * 46 == 2


def test_inverse_exists_iff_coprime(backend):
    for n in range(2, 40):
        for a in range(-40, 40):
            inv = inverse(backend.convert(a), backend.convert(n))
            if math.gcd(a, n) == 1:
                assert inv is not None
                assert 0 <= inv < n
                assert (a * inv) % n == 1
            else:
                assert inv is None


def test_inverse_large_prime(backend):
    p = backend.convert(2 ** 127 - 1)
    a = backend.convert(123456789123456789)
    inv = inverse(a, p)
    assert (a * inv) % p == 1


def test_mod_inv_alias():
    assert mod_inv is inverse
    assert mod_inv(3, 11) == 4


def test_inverse_rejects_bad_modulus():
    with pytest.raises(InvalidModulusError):
        inverse(3, 0)


def test_powm_known_value(backend):
    assert powm(backend.convert(4), backend.convert(13), backend.convert(497)) == 445
    assert backend.powm(backend.convert(4), backend.convert(13), backend.convert(497)) == 445


@pytest.mark.parametrize("modulus", [2, 7, 10, 497, 2 ** 61 - 1])
def test_powm_matches_repeated_multiplication(backend, modulus):
    m = backend.convert(modulus)
    for base in (-9, 0, 1, 2, 3, 12345, 2 ** 64 + 3):
        expected = 1 % modulus
        for exp in range(21):
            assert powm(backend.convert(base), backend.convert(exp), m) == expected
            expected = (expected * (base % modulus)) % modulus


def test_powm_negative_exponent(backend):
    m = backend.convert(497)
    for base in (4, 5, 13, 496):
        b = backend.convert(base)
        inv = inverse(b, m)
        for exp in range(1, 15):
            e = backend.convert(exp)
            assert powm(b, -e, m) == powm(inv, e, m)


def test_powm_negative_exponent_not_invertible():
    with pytest.raises(NotInvertibleError) as excinfo:
        powm(6, -1, 9)
    assert isinstance(excinfo.value, ValueError)


def test_powm_modulus_one():
    assert powm(5, 0, 1) == 0
    assert powm(5, 3, 1) == 0


@pytest.mark.parametrize("modulus", [0, -497])
def test_powm_rejects_bad_modulus(backend, modulus):
    with pytest.raises(InvalidModulusError):
        powm(4, 13, modulus)
    with pytest.raises(InvalidModulusError):
        backend.powm(backend.convert(4), backend.convert(13), backend.convert(modulus))


def test_native_and_generic_powm_agree(backend):
    rng = random.Random(7)
    p = backend.convert(2 ** 127 - 1)
    for _ in range(50):
        base = backend.convert(rng.randrange(-2 ** 130, 2 ** 130))
        exp = backend.convert(rng.randrange(-2 ** 40, 2 ** 40))
        if base % p == 0 and exp < 0:
            continue
        assert backend.powm(base, exp, p) == mod_utils.powm(base, exp, p)


def test_native_powm_not_invertible(backend):
    with pytest.raises(NotInvertibleError):
        backend.powm(backend.convert(6), backend.convert(-3), backend.convert(9))
