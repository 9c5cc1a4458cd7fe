"""Number-theoretic and bit helpers shared by the rest of the package."""

from __future__ import annotations

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1

# Primes used by the convolution code, with their smallest primitive roots.
_KNOWN_PRIMITIVE_ROOTS = {
    2: 1,
    167772161: 3,
    469762049: 3,
    754974721: 11,
    998244353: 3,
}


def safe_mod(x: int, m: int) -> int:
    """Return ``x mod m`` in the range ``[0, m)``."""
    if m < 1:
        raise ValueError(f"modulus must be positive, got {m}")
    return x % m


class Barrett:
    """Modular multiplication by Barrett reduction for a modulus below 2**31."""

    __slots__ = ("_m", "_im")

    def __init__(self, m: int) -> None:
        if not 1 <= m < (1 << 31):
            raise ValueError(f"modulus must satisfy 1 <= m < 2**31, got {m}")
        self._m = m
        self._im = (_MASK64 // m + 1) & _MASK64

    def umod(self) -> int:
        """Return the modulus."""
        return self._m

    def mul(self, a: int, b: int) -> int:
        """Return ``a * b % m`` for ``0 <= a, b < m``."""
        z = a * b
        x = (z * self._im) >> 64
        v = (z - x * self._m) & _MASK32
        if self._m <= v:
            v = (v + self._m) & _MASK32
        return v


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test for ``n < 2**32``."""
    if n >= (1 << 32):
        raise ValueError("is_prime supports only n < 2**32")
    if n <= 1:
        return False
    if n in (2, 7, 61):
        return True
    if n % 2 == 0:
        return False
    d = n - 1
    while d % 2 == 0:
        d //= 2
    for a in (2, 7, 61):
        t = d
        y = pow(a, t, n)
        while t != n - 1 and y != 1 and y != n - 1:
            y = y * y % n
            t <<= 1
        if y != n - 1 and t % 2 == 0:
            return False
    return True


def inv_gcd(a: int, b: int) -> tuple[int, int]:
    """Return ``(g, x)`` with ``g = gcd(a, b)``, ``x*a = g (mod b)`` and ``0 <= x < b/g``."""
    if b < 1:
        raise ValueError(f"b must be positive, got {b}")
    a %= b
    if a == 0:
        return b, 0
    s, t = b, a
    m0, m1 = 0, 1
    while t:
        u = s // t
        s -= t * u
        m0 -= m1 * u
        s, t = t, s
        m0, m1 = m1, m0
    if m0 < 0:
        m0 += b // s
    return s, m0


def primitive_root(m: int) -> int:
    """Return the smallest primitive root of the prime ``m``."""
    if m in _KNOWN_PRIMITIVE_ROOTS:
        return _KNOWN_PRIMITIVE_ROOTS[m]
    if not is_prime(m):
        raise ValueError(f"{m} is not prime")
    divs = [2]
    x = (m - 1) // 2
    while x % 2 == 0:
        x //= 2
    i = 3
    while i * i <= x:
        if x % i == 0:
            divs.append(i)
            while x % i == 0:
                x //= i
        i += 2
    if x > 1:
        divs.append(x)
    g = 2
    while True:
        if all(pow(g, (m - 1) // d, m) != 1 for d in divs):
            return g
        g += 1


def ceil_pow2(n: int) -> int:
    """Return the smallest non-negative ``x`` with ``n <= 2**x``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return (n - 1).bit_length() if n > 0 else 0


def bsf(n: int) -> int:
    """Return the index of the lowest set bit of ``n``."""
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    return (n & -n).bit_length() - 1