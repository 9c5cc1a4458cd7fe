"""Modular exponentiation, inverses, the Chinese remainder theorem and floor sums."""

from __future__ import annotations

from collections.abc import Sequence

from acl.internal_math import Barrett, inv_gcd, safe_mod


def pow_mod(x: int, n: int, m: int) -> int:
    """Return ``x**n mod m`` for ``n >= 0`` and ``1 <= m < 2**31``."""
    if n < 0:
        raise ValueError(f"exponent must be non-negative, got {n}")
    if m < 1:
        raise ValueError(f"modulus must be positive, got {m}")
    if m == 1:
        return 0
    bt = Barrett(m)
    r = 1
    y = safe_mod(x, m)
    while n:
        if n & 1:
            r = bt.mul(r, y)
        y = bt.mul(y, y)
        n >>= 1
    return r


def inv_mod(x: int, m: int) -> int:
    """Return ``y`` in ``[0, m)`` with ``x*y = 1 (mod m)``."""
    if m < 1:
        raise ValueError(f"modulus must be positive, got {m}")
    g, y = inv_gcd(x, m)
    if g != 1:
        raise ValueError(f"{x} is not invertible modulo {m}")
    return y


def crt(r: Sequence[int], m: Sequence[int]) -> tuple[int, int]:
    """Solve ``x = r[i] (mod m[i])``; return ``(x, lcm)`` or ``(0, 0)`` if unsolvable."""
    if len(r) != len(m):
        raise ValueError("r and m must have the same length")
    r0, m0 = 0, 1
    for ri, mi in zip(r, m):
        if mi < 1:
            raise ValueError(f"modulus must be positive, got {mi}")
        r1, m1 = ri % mi, mi
        if m0 < m1:
            r0, r1 = r1, r0
            m0, m1 = m1, m0
        if m0 % m1 == 0:
            if r0 % m1 != r1:
                return 0, 0
            continue
        g, im = inv_gcd(m0, m1)
        u1 = m1 // g
        if (r1 - r0) % g:
            return 0, 0
        x = (r1 - r0) // g % u1 * im % u1
        r0 += x * m0
        m0 *= u1
        if r0 < 0:
            r0 += m0
    return r0, m0


def floor_sum(n: int, m: int, a: int, b: int) -> int:
    """Return the sum of ``(a*i + b) // m`` for ``i`` in ``range(n)``; needs ``a, b >= 0``."""
    ans = 0
    while True:
        if a >= m:
            ans += (n - 1) * n * (a // m) // 2
            a %= m
        if b >= m:
            ans += n * (b // m)
            b %= m
        y_max = (a * n + b) // m
        if y_max == 0:
            return ans
        x_max = y_max * m - b
        ans += (n - (x_max + a - 1) // a) * y_max
        n, m, a, b = y_max, a, m, (a - x_max % a) % a