"""Segment tree with lazy propagation of range maps."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from acl.internal_math import ceil_pow2

S = TypeVar("S")
F = TypeVar("F")


class LazySegTree(Generic[S, F]):
    """Monoid array supporting range products and range application of maps.

    ``op``/``e`` describe the monoid, ``mapping(f, x)`` applies a map,
    ``composition(f, g)`` returns ``f`` after ``g`` and ``id_`` returns the
    identity map. ``v`` is a length or the initial values.
    """

    def __init__(
        self,
        op: Callable[[S, S], S],
        e: Callable[[], S],
        mapping: Callable[[F, S], S],
        composition: Callable[[F, F], F],
        id_: Callable[[], F],
        v: int | Iterable[S] = 0,
    ) -> None:
        self._op = op
        self._e = e
        self._mapping = mapping
        self._composition = composition
        self._id = id_
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
        self._lz = [id_() for _ in range(self._size)]
        self._d[self._size : self._size + self._n] = values
        for i in range(self._size - 1, 0, -1):
            self._update(i)

    def __len__(self) -> int:
        return self._n

    def _update(self, k: int) -> None:
        self._d[k] = self._op(self._d[2 * k], self._d[2 * k + 1])

    def _all_apply(self, k: int, f: F) -> None:
        self._d[k] = self._mapping(f, self._d[k])
        if k < self._size:
            self._lz[k] = self._composition(f, self._lz[k])

    def _push(self, k: int) -> None:
        self._all_apply(2 * k, self._lz[k])
        self._all_apply(2 * k + 1, self._lz[k])
        self._lz[k] = self._id()

    def _check_index(self, p: int) -> None:
        if not 0 <= p < self._n:
            raise IndexError(f"index {p} out of range [0, {self._n})")

    def _check_range(self, l: int, r: int) -> None:
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}) invalid for size {self._n}")

    def _push_path(self, p: int) -> None:
        for i in range(self._log, 0, -1):
            self._push(p >> i)

    def _update_path(self, p: int) -> None:
        for i in range(1, self._log + 1):
            self._update(p >> i)

    def set(self, p: int, x: S) -> None:
        """Replace the element at ``p`` with ``x``."""
        self._check_index(p)
        p += self._size
        self._push_path(p)
        self._d[p] = x
        self._update_path(p)

    def get(self, p: int) -> S:
        """Return the element at ``p``."""
        self._check_index(p)
        p += self._size
        self._push_path(p)
        return self._d[p]

    def prod(self, l: int, r: int) -> S:
        """Return the product of the elements in ``[l, r)``."""
        self._check_range(l, r)
        if l == r:
            return self._e()
        l += self._size
        r += self._size
        for i in range(self._log, 0, -1):
            if ((l >> i) << i) != l:
                self._push(l >> i)
            if ((r >> i) << i) != r:
                self._push(r >> i)
        op, d = self._op, self._d
        sml, smr = self._e(), self._e()
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

    def apply(self, p: int, f: F) -> None:
        """Apply ``f`` to the element at ``p``."""
        self._check_index(p)
        p += self._size
        self._push_path(p)
        self._d[p] = self._mapping(f, self._d[p])
        self._update_path(p)

    def apply_range(self, l: int, r: int, f: F) -> None:
        """Apply ``f`` to every element in ``[l, r)``."""
        self._check_range(l, r)
        if l == r:
            return
        l += self._size
        r += self._size
        for i in range(self._log, 0, -1):
            if ((l >> i) << i) != l:
                self._push(l >> i)
            if ((r >> i) << i) != r:
                self._push((r - 1) >> i)
        l2, r2 = l, r
        while l2 < r2:
            if l2 & 1:
                self._all_apply(l2, f)
                l2 += 1
            if r2 & 1:
                r2 -= 1
                self._all_apply(r2, f)
            l2 >>= 1
            r2 >>= 1
        for i in range(1, self._log + 1):
            if ((l >> i) << i) != l:
                self._update(l >> i)
            if ((r >> i) << i) != r:
                self._update((r - 1) >> i)

    def max_right(self, l: int, g: Callable[[S], bool]) -> int:
        """Return the largest ``r`` such that ``g(prod(l, r))`` holds, for monotone ``g``."""
        if not 0 <= l <= self._n:
            raise IndexError(f"index {l} out of range [0, {self._n}]")
        if not g(self._e()):
            raise ValueError("predicate must hold for the identity")
        if l == self._n:
            return self._n
        op, d, size = self._op, self._d, self._size
        l += size
        self._push_path(l)
        sm = self._e()
        while True:
            while l % 2 == 0:
                l >>= 1
            if not g(op(sm, d[l])):
                while l < size:
                    self._push(l)
                    l *= 2
                    if g(op(sm, d[l])):
                        sm = op(sm, d[l])
                        l += 1
                return l - size
            sm = op(sm, d[l])
            l += 1
            if (l & -l) == l:
                return self._n

    def min_left(self, r: int, g: Callable[[S], bool]) -> int:
        """Return the smallest ``l`` such that ``g(prod(l, r))`` holds, for monotone ``g``."""
        if not 0 <= r <= self._n:
            raise IndexError(f"index {r} out of range [0, {self._n}]")
        if not g(self._e()):
            raise ValueError("predicate must hold for the identity")
        if r == 0:
            return 0
        op, d, size = self._op, self._d, self._size
        r += size
        for i in range(self._log, 0, -1):
            self._push((r - 1) >> i)
        sm = self._e()
        while True:
            r -= 1
            while r > 1 and r % 2:
                r >>= 1
            if not g(op(d[r], sm)):
                while r < size:
                    self._push(r)
                    r = 2 * r + 1
                    if g(op(d[r], sm)):
                        sm = op(d[r], sm)
                        r -= 1
                return r + 1 - size
            sm = op(d[r], sm)
            if (r & -r) == r:
                return 0