"""Suffix arrays, longest common prefix arrays and the Z algorithm."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def sa_naive(s: Sequence[int]) -> list[int]:
    """Suffix array by direct comparison of suffixes; quadratic, for short inputs."""
    seq = list(s)
    return sorted(range(len(seq)), key=lambda i: seq[i:])


def sa_doubling(s: Sequence[int]) -> list[int]:
    """Suffix array by prefix doubling."""
    n = len(s)
    sa = list(range(n))
    rnk = list(s)
    k = 1
    while k < n:
        def key(x: int, k: int = k, rnk: list[int] = rnk) -> tuple[int, int]:
            return rnk[x], rnk[x + k] if x + k < n else -1

        sa.sort(key=key)
        tmp = [0] * n
        for prev, cur in zip(sa, sa[1:]):
            tmp[cur] = tmp[prev] + (1 if key(prev) < key(cur) else 0)
        rnk = tmp
        k *= 2
    return sa


def sa_is(
    s: Sequence[int],
    upper: int,
    threshold_naive: int = 10,
    threshold_doubling: int = 40,
) -> list[int]:
    """Suffix array by SA-IS for values in ``[0, upper]``."""
    n = len(s)
    if n == 0:
        return []
    if n == 1:
        return [0]
    if n == 2:
        return [0, 1] if s[0] < s[1] else [1, 0]
    if n < threshold_naive:
        return sa_naive(s)
    if n < threshold_doubling:
        return sa_doubling(s)

    sa = [0] * n
    ls = [False] * n
    for i in range(n - 2, -1, -1):
        ls[i] = ls[i + 1] if s[i] == s[i + 1] else s[i] < s[i + 1]

    sum_l = [0] * (upper + 1)
    sum_s = [0] * (upper + 1)
    for c, is_s in zip(s, ls):
        if is_s:
            sum_l[c + 1] += 1
        else:
            sum_s[c] += 1
    for i in range(upper + 1):
        sum_s[i] += sum_l[i]
        if i < upper:
            sum_l[i + 1] += sum_s[i]

    def induce(lms: Sequence[int]) -> None:
        sa[:] = [-1] * n
        buf = sum_s[:]
        for d in lms:
            if d == n:
                continue
            sa[buf[s[d]]] = d
            buf[s[d]] += 1
        buf = sum_l[:]
        sa[buf[s[n - 1]]] = n - 1
        buf[s[n - 1]] += 1
        for i in range(n):
            v = sa[i]
            if v >= 1 and not ls[v - 1]:
                sa[buf[s[v - 1]]] = v - 1
                buf[s[v - 1]] += 1
        buf = sum_l[:]
        for i in range(n - 1, -1, -1):
            v = sa[i]
            if v >= 1 and ls[v - 1]:
                buf[s[v - 1] + 1] -= 1
                sa[buf[s[v - 1] + 1]] = v - 1

    lms = [i for i in range(1, n) if not ls[i - 1] and ls[i]]
    m = len(lms)
    lms_map = [-1] * (n + 1)
    for idx, pos in enumerate(lms):
        lms_map[pos] = idx

    induce(lms)

    if m:
        sorted_lms = [v for v in sa if lms_map[v] != -1]
        rec_s = [0] * m
        rec_upper = 0
        rec_s[lms_map[sorted_lms[0]]] = 0
        for prev, cur in zip(sorted_lms, sorted_lms[1:]):
            l, r = prev, cur
            end_l = lms[lms_map[l] + 1] if lms_map[l] + 1 < m else n
            end_r = lms[lms_map[r] + 1] if lms_map[r] + 1 < m else n
            same = True
            if end_l - l != end_r - r:
                same = False
            else:
                while l < end_l and s[l] == s[r]:
                    l += 1
                    r += 1
                if l == n or r == n or s[l] != s[r]:
                    same = False
            if not same:
                rec_upper += 1
            rec_s[lms_map[cur]] = rec_upper

        rec_sa = sa_is(rec_s, rec_upper, threshold_naive, threshold_doubling)
        induce([lms[i] for i in rec_sa])
    return sa


def _compress(s: Sequence[Any]) -> tuple[list[int], int]:
    order = sorted(range(len(s)), key=lambda i: s[i])
    ranks = [0] * len(s)
    now = 0
    for k, (prev, cur) in enumerate(zip([None, *order], order)):
        if k and s[prev] != s[cur]:
            now += 1
        ranks[cur] = now
    return ranks, now


def suffix_array(s: Sequence[Any] | str | bytes, upper: int | None = None) -> list[int]:
    """Return the suffix array of ``s``.

    With ``upper`` given, ``s`` must hold integers in ``[0, upper]``. Without
    it, bytes use their values and any other sequence (strings included) is
    ordered by comparing its elements.
    """
    if upper is not None:
        if upper < 0:
            raise ValueError(f"upper must be non-negative, got {upper}")
        values = list(s)
        for d in values:
            if not 0 <= d <= upper:
                raise ValueError(f"value {d} outside [0, {upper}]")
        return sa_is(values, upper)
    if isinstance(s, (bytes, bytearray)):
        return sa_is(list(s), 255)
    ranks, top = _compress(s)
    return sa_is(ranks, top)


def lcp_array(s: Sequence[Any] | str | bytes, sa: Sequence[int]) -> list[int]:
    """Return the longest common prefix lengths of adjacent suffixes in ``sa``."""
    n = len(s)
    if n < 1:
        raise ValueError("sequence must not be empty")
    if len(sa) != n:
        raise ValueError("suffix array length does not match the sequence")
    rnk = [0] * n
    for i, p in enumerate(sa):
        rnk[p] = i
    lcp = [0] * (n - 1)
    h = 0
    for i in range(n):
        if h > 0:
            h -= 1
        if rnk[i] == 0:
            continue
        j = sa[rnk[i] - 1]
        while j + h < n and i + h < n and s[j + h] == s[i + h]:
            h += 1
        lcp[rnk[i] - 1] = h
    return lcp


def z_algorithm(s: Sequence[Any] | str | bytes) -> list[int]:
    """Return ``z`` where ``z[i]`` is the common prefix length of ``s`` and ``s[i:]``."""
    n = len(s)
    if n == 0:
        return []
    z = [0] * n
    j = 0
    for i in range(1, n):
        k = 0 if j + z[j] <= i else min(j + z[j] - i, z[i - j])
        while i + k < n and s[k] == s[i + k]:
            k += 1
        z[i] = k
        if j + z[j] < i + z[i]:
            j = i
    z[0] = n
    return z