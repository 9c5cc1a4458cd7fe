import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from acl.convolution import convolution, convolution_ll

MOD = 998244353


def _eval_mod(poly, x, mod):
    acc = 0
    for coef in reversed(poly):
        acc = (acc * x + coef) % mod
    return acc


def _eval_exact(poly, x):
    acc = 0
    for coef in reversed(poly):
        acc = acc * x + coef
    return acc


def test_documented_example():
    assert convolution([1, 2, 3, 4], [5, 6, 7, 8, 9]) == [5, 16, 34, 60, 70, 70, 59, 36]


def test_empty_inputs():
    assert convolution([], [1, 2]) == []
    assert convolution([1], []) == []
    assert convolution_ll([], []) == []


def test_identity_on_transform_path():
    rng = random.Random(1)
    a = [rng.randrange(MOD) for _ in range(100)]
    unit = [1] + [0] * 80
    assert convolution(a, unit) == a + [0] * 80


def test_commutative_on_transform_path():
    rng = random.Random(2)
    a = [rng.randrange(MOD) for _ in range(90)]
    b = [rng.randrange(MOD) for _ in range(130)]
    assert convolution(a, b) == convolution(b, a)


@pytest.mark.parametrize("n,m", [(3, 5), (61, 61), (100, 200), (257, 64)])
def test_polynomial_evaluation_matches(n, m):
    rng = random.Random(n * 1000 + m)
    a = [rng.randrange(MOD) for _ in range(n)]
    b = [rng.randrange(MOD) for _ in range(m)]
    c = convolution(a, b)
    assert len(c) == n + m - 1
    assert all(0 <= v < MOD for v in c)
    for x in (0, 1, 2, 12345, MOD - 1):
        assert _eval_mod(c, x, MOD) == _eval_mod(a, x, MOD) * _eval_mod(b, x, MOD) % MOD


@pytest.mark.parametrize("mod", [754974721, 167772161, 469762049])
def test_other_ntt_primes(mod):
    rng = random.Random(mod)
    a = [rng.randrange(mod) for _ in range(70)]
    b = [rng.randrange(mod) for _ in range(75)]
    c = convolution(a, b, mod)
    for x in (3, 7):
        assert _eval_mod(c, x, mod) == _eval_mod(a, x, mod) * _eval_mod(b, x, mod) % mod


def test_negative_inputs_are_reduced():
    assert convolution([-1], [1]) == [MOD - 1]


def test_unfit_modulus_raises():
    with pytest.raises(ValueError):
        convolution([1] * 100, [1] * 100, 1000000007)


def test_non_positive_modulus_raises():
    with pytest.raises(ValueError):
        convolution([1], [1], 0)


@settings(max_examples=30, deadline=None)
@given(
    st.lists(st.integers(-(10**9), 10**9), min_size=1, max_size=80),
    st.lists(st.integers(-(10**9), 10**9), min_size=1, max_size=80),
)
def test_convolution_ll_exact(a, b):
    c = convolution_ll(a, b)
    assert len(c) == len(a) + len(b) - 1
    for x in (-2, -1, 1, 2, 3):
        assert _eval_exact(c, x) == _eval_exact(a, x) * _eval_exact(b, x)


def test_convolution_ll_large_transform_path():
    rng = random.Random(5)
    a = [rng.randint(-(10**9), 10**9) for _ in range(150)]
    b = [rng.randint(-(10**9), 10**9) for _ in range(120)]
    c = convolution_ll(a, b)
    assert c[0] == a[0] * b[0]
    assert c[-1] == a[-1] * b[-1]
    assert sum(c) == sum(a) * sum(b)