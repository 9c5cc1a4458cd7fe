"""Convolution of integer sequences by number-theoretic transform."""

from __future__ import annotations

import functools
from collections.abc import Sequence

from acl.internal_math import bsf, ceil_pow2, inv_gcd, primitive_root

_MASK32 = (1 << 32) - 1
_NAIVE_LIMIT = 60

_MOD1 = 754974721  # 2**24 divides MOD1 - 1
_MOD2 = 167772161  # 2**25 divides MOD2 - 1
_MOD3 = 469762049  # 2**26 divides MOD3 - 1
_M2M3 = _MOD2 * _MOD3
_M1M3 = _MOD1 * _MOD3
_M1M2 = _MOD1 * _MOD2
_M1M2M3 = _MOD1 * _MOD2 * _MOD3
_I1 = inv_gcd(_M2M3, _MOD1)[1]
_I2 = inv_gcd(_M1M3, _MOD2)[1]
_I3 = inv_gcd(_M1M2, _MOD3)[1]


@functools.lru_cache(maxsize=None)
def _root_tables(mod: int) -> tuple[int, tuple[int, ...], tuple[int, ...]]:
    """Return ``(cnt2, sum_e, sum_ie)`` for the transform modulo the prime ``mod``."""
    g = primitive_root(mod)
    cnt2 = bsf(mod - 1)
    e = pow(g, (mod - 1) >> cnt2, mod)
    ie = pow(e, mod - 2, mod)
    es = [0] * max(cnt2 - 1, 0)
    ies = [0] * max(cnt2 - 1, 0)
    for i in range(cnt2, 1, -1):
        es[i - 2] = e
        ies[i - 2] = ie
        e = e * e % mod
        ie = ie * ie % mod
    sum_e = []
    now = 1
    for root, iroot in zip(es, ies):
        sum_e.append(root * now % mod)
        now = now * iroot % mod
    sum_ie = []
    now = 1
    for root, iroot in zip(es, ies):
        sum_ie.append(iroot * now % mod)
        now = now * root % mod
    return cnt2, tuple(sum_e), tuple(sum_ie)


def _trailing_ones(s: int) -> int:
    return bsf(~s & _MASK32)


def _butterfly(a: list[int], mod: int, sum_e: Sequence[int]) -> None:
    h = ceil_pow2(len(a))
    for ph in range(1, h + 1):
        w = 1 << (ph - 1)
        p = 1 << (h - ph)
        now = 1
        for s in range(w):
            offset = s << (h - ph + 1)
            for i in range(offset, offset + p):
                left = a[i]
                right = a[i + p] * now % mod
                a[i] = (left + right) % mod
                a[i + p] = (left - right) % mod
            if s + 1 < w:
                now = now * sum_e[_trailing_ones(s)] % mod


def _butterfly_inv(a: list[int], mod: int, sum_ie: Sequence[int]) -> None:
    h = ceil_pow2(len(a))
    for ph in range(h, 0, -1):
        w = 1 << (ph - 1)
        p = 1 << (h - ph)
        inow = 1
        for s in range(w):
            offset = s << (h - ph + 1)
            for i in range(offset, offset + p):
                left = a[i]
                right = a[i + p]
                a[i] = (left + right) % mod
                a[i + p] = (left - right) * inow % mod
            if s + 1 < w:
                inow = inow * sum_ie[_trailing_ones(s)] % mod


def convolution(a: Sequence[int], b: Sequence[int], mod: int = 998244353) -> list[int]:
    """Return ``c[k] = sum(a[i] * b[j] for i + j == k) mod mod``.

    Inputs may be any integers; results lie in ``[0, mod)``. Long inputs need
    a prime ``mod`` with ``2**c`` dividing ``mod - 1`` for ``2**c >= len(a) + len(b) - 1``.
    """
    if mod < 1:
        raise ValueError(f"modulus must be positive, got {mod}")
    n, m = len(a), len(b)
    if not n or not m:
        return []
    x = [v % mod for v in a]
    y = [v % mod for v in b]
    if min(n, m) <= _NAIVE_LIMIT:
        if n < m:
            x, y = y, x
        ans = [0] * (n + m - 1)
        for i, xi in enumerate(x):
            for j, yj in enumerate(y):
                ans[i + j] += xi * yj
        return [v % mod for v in ans]

    h = ceil_pow2(n + m - 1)
    cnt2, sum_e, sum_ie = _root_tables(mod)
    if h > cnt2:
        raise ValueError(
            f"modulus {mod} cannot transform sequences of length {1 << h}"
        )
    z = 1 << h
    x.extend([0] * (z - n))
    y.extend([0] * (z - m))
    _butterfly(x, mod, sum_e)
    _butterfly(y, mod, sum_e)
    prod = [xi * yi % mod for xi, yi in zip(x, y)]
    _butterfly_inv(prod, mod, sum_ie)
    iz = pow(z, mod - 2, mod)
    return [v * iz % mod for v in prod[: n + m - 1]]


def convolution_ll(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the exact convolution of ``a`` and ``b``.

    Exact as long as every result fits in a signed 64-bit integer.
    """
    n, m = len(a), len(b)
    if not n or not m:
        return []
    c1 = convolution(a, b, _MOD1)
    c2 = convolution(a, b, _MOD2)
    c3 = convolution(a, b, _MOD3)
    half = _M1M2M3 // 2
    result = []
    for v1, v2, v3 in zip(c1, c2, c3):
        x = (
            v1 * _I1 % _MOD1 * _M2M3
            + v2 * _I2 % _MOD2 * _M1M3
            + v3 * _I3 % _MOD3 * _M1M2
        ) % _M1M2M3
        if x > half:
            x -= _M1M2M3
        result.append(x)
    return result