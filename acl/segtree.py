"""Segment tree over a monoid."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from acl.internal_math import ceil_pow2

S = TypeVar("S")


class SegTree(Generic[S]):
    """Array of monoid elements with point updates and range products.

    ``op`` is the associative operation and ``e`` returns its identity.
    ``v`` is either a length (filled with the identity) or the initial values.
    """

    def __init__(
        self,
        op: Callable[[S, S], S],
        e: Callable[[], S],
        v: int | Iterable[S] = 0,
    ) -> None:
        self._op = op
        self._e = e
        if isinstance(v, int):
            if v < 0:
                raise ValueError(f"size must be non-negative, got {v}")
            values = [e() for _ in range(v)]
        else:
            values = list(v)
        self._n = len(values)
        self._log = ceil_pow2(self._n)
        self._size = 1 << self._log
        self._d = [e() for _ in range(2 * self._size)]
        self._d[self._size : self._size + self._n] = values
        for i in range(self._size - 1, 0, -1):
            self._update(i)

    def __len__(self) -> int:
        return self._n

    def _update(self, k: int) -> None:
        self._d[k] = self._op(self._d[2 * k], self._d[2 * k + 1])

    def _check_index(self, p: int) -> None:
        if not 0 <= p < self._n:
            raise IndexError(f"index {p} out of range [0, {self._n})")

    def set(self, p: int, x: S) -> None:
        """Replace the element at ``p`` with ``x``."""
        self._check_index(p)
        p += self._size
        self._d[p] = x
        for i in range(1, self._log + 1):
            self._update(p >> i)

    def get(self, p: int) -> S:
        """Return the element at ``p``."""
        self._check_index(p)
        return self._d[p + self._size]

    def prod(self, l: int, r: int) -> S:
        """Return the product of the elements in ``[l, r)``."""
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}) invalid for size {self._n}")
        op, d = self._op, self._d
        sml, smr = self._e(), self._e()
        l += self._size
        r += self._size
        while l < r:
            if l & 1:
                sml = op(sml, d[l])
                l += 1
            if r & 1:
                r -= 1
                smr = op(d[r], smr)
            l >>= 1
            r >>= 1
        return op(sml, smr)

    def all_prod(self) -> S:
        """Return the product of all elements."""
        return self._d[1]

    def max_right(self, l: int, f: Callable[[S], bool]) -> int:
        """Return the largest ``r`` such that ``f(prod(l, r))`` holds, for monotone ``f``."""
        if not 0 <= l <= self._n:
            raise IndexError(f"index {l} out of range [0, {self._n}]")
        if not f(self._e()):
            raise ValueError("predicate must hold for the identity")
        if l == self._n:
            return self._n
        op, d, size = self._op, self._d, self._size
        l += size
        sm = self._e()
        while True:
            while l % 2 == 0:
                l >>= 1
            if not f(op(sm, d[l])):
                while l < size:
                    l *= 2
                    if f(op(sm, d[l])):
                        sm = op(sm, d[l])
                        l += 1
                return l - size
            sm = op(sm, d[l])
            l += 1
            if (l & -l) == l:
                return self._n

    def min_left(self, r: int, f: Callable[[S], bool]) -> int:
        """Return the smallest ``l`` such that ``f(prod(l, r))`` holds, for monotone ``f``."""
        if not 0 <= r <= self._n:
            raise IndexError(f"index {r} out of range [0, {self._n}]")
        if not f(self._e()):
            raise ValueError("predicate must hold for the identity")
        if r == 0:
            return 0
        op, d, size = self._op, self._d, self._size
        r += size
        sm = self._e()
        while True:
            r -= 1
            while r > 1 and r % 2:
                r >>= 1
            if not f(op(d[r], sm)):
                while r < size:
                    r = 2 * r + 1
                    if f(op(d[r], sm)):
                        sm = op(d[r], sm)
                        r -= 1
                return r + 1 - size
            sm = op(d[r], sm)
            if (r & -r) == r:
                return 0