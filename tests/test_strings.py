import os.path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from acl.strings import (
    lcp_array,
    sa_doubling,
    sa_is,
    sa_naive,
    suffix_array,
    z_algorithm,
)


def _assert_is_suffix_array(s, sa):
    assert sorted(sa) == list(range(len(s)))
    for a, b in zip(sa, sa[1:]):
        assert list(s[a:]) < list(s[b:])


def test_banana_suffix_array():
    assert suffix_array("banana") == [5, 3, 1, 0, 4, 2]


def test_banana_lcp():
    assert lcp_array("banana", suffix_array("banana")) == [1, 3, 0, 0, 2]


def test_z_abracadabra():
    assert z_algorithm("abracadabra") == [11, 0, 0, 1, 0, 1, 0, 4, 0, 0, 1]


def test_empty_inputs():
    assert suffix_array("") == []
    assert suffix_array([], 5) == []
    assert z_algorithm("") == []


def test_single_and_pair():
    assert sa_is([3], 3) == [0]
    assert sa_is([1, 0], 1) == [1, 0]
    assert sa_is([0, 1], 1) == [0, 1]


def test_bytes_and_str_agree():
    text = "mississippi"
    assert suffix_array(text.encode()) == suffix_array(text)


def test_generic_sequence_matches_ints():
    words = ["pear", "apple", "pear", "fig", "apple", "pear"]
    mapping = {"apple": 0, "fig": 1, "pear": 2}
    assert suffix_array(words) == suffix_array([mapping[w] for w in words], 2)


def test_unicode_string():
    text = "こんにちはこんにちは"
    _assert_is_suffix_array(text, suffix_array(text))


def test_long_repetitive_input_uses_sa_is():
    s = [0, 1] * 60 + [0]
    sa = suffix_array(s, 1)
    _assert_is_suffix_array(s, sa)
    assert sa == sa_naive(s)


def test_all_equal_values():
    s = [2] * 50
    assert suffix_array(s, 2) == list(range(49, -1, -1))
    assert z_algorithm(s) == list(range(50, 0, -1))


def test_upper_negative_raises():
    with pytest.raises(ValueError):
        suffix_array([0, 1], -1)


def test_value_out_of_range_raises():
    with pytest.raises(ValueError):
        suffix_array([0, 4, 1], 3)


def test_lcp_empty_raises():
    with pytest.raises(ValueError):
        lcp_array([], [])


def test_lcp_length_mismatch_raises():
    with pytest.raises(ValueError):
        lcp_array("abc", [0, 1])


@settings(max_examples=200)
@given(st.lists(st.integers(min_value=0, max_value=3), max_size=120))
def test_all_constructions_agree(s):
    expected = sa_naive(s)
    _assert_is_suffix_array(s, expected)
    assert sa_doubling(s) == expected
    assert sa_is(s, 3) == expected
    assert sa_is(s, 3, 1, 1) == expected
    assert sa_is(s, 3, 1, 1000) == expected
    assert suffix_array(s, 3) == expected


@settings(max_examples=100)
@given(st.lists(st.integers(min_value=0, max_value=1), min_size=1, max_size=80))
def test_lcp_invariant(s):
    sa = suffix_array(s, 1)
    lcp = lcp_array(s, sa)
    assert len(lcp) == len(s) - 1
    for h, a, b in zip(lcp, sa, sa[1:]):
        assert h == len(os.path.commonprefix([s[a:], s[b:]]))


@settings(max_examples=100)
@given(st.text(alphabet="ab", max_size=60))
def test_z_invariant(s):
    z = z_algorithm(s)
    assert len(z) == len(s)
    if s:
        assert z[0] == len(s)
    for i in range(1, len(s)):
        assert z[i] == len(os.path.commonprefix([s, s[i:]]))