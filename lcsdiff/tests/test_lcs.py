# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from lcsdiff import lcs
from lcsdiff.diffing.subsequence import lcs_indices
from lcsdiff.diffing.table import build_table


def is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(x == y for y in it) for x in sub)


@pytest.mark.parametrize("a, b, expected", [
    ([], [], []),
    ([], ["x"], []),
    (["x"], [], []),
    (["a", "b", "c"], ["b", "c", "d"], ["b", "c"]),
    (list("abcab"), list("ayb"), ["a", "b"]),
    (list("xaxcxabc"), list("abcy"), ["a", "b", "c"]),
    ([1, 2, 3, 4, 1, 2], [3, 4, 2, 3], [3, 4, 2]),
])
def test_lcs_examples(a, b, expected):
    assert lcs(a, b) == expected


def test_lcs_of_identical_sequences():
    x = ["a", "b", "a", "c"]
    assert lcs(x, x) == x
    assert lcs(x, list(x)) == x


def test_lcs_is_common_subsequence():
    examples = [
        (list("abcbdab"), list("bdcaba")),
        (list("ACCGGTCGAGTGCGCGGAAGCCGGCCGAA"), list("GTCGTTCGGAATGCCGTTGCTCTGTAAA")),
        ([1, 2, 1, 2], [2, 1, 2, 1]),
    ]
    for a, b in examples:
        common = lcs(a, b)
        assert len(common) <= min(len(a), len(b))
        assert is_subsequence(common, a)
        assert is_subsequence(common, b)
        assert len(common) == build_table(a, b)[len(a)][len(b)]


def test_lcs_tie_prefers_stepping_along_first_sequence():
    # Both [1] and [2] are longest common subsequences,
    # walking back along a first finds the earlier element of a
    assert lcs([1, 2], [2, 1]) == [1]
    assert lcs([2, 1], [1, 2]) == [2]


def test_lcs_indices():
    a = list("xaxcxabc")
    b = list("abcy")
    R = build_table(a, b)
    A_indices, B_indices = lcs_indices(a, b, R)
    assert len(A_indices) == len(B_indices) == R[len(a)][len(b)]
    assert all(a[i] == b[j] for i, j in zip(A_indices, B_indices))
    assert A_indices == sorted(A_indices)
    assert B_indices == sorted(B_indices)


def test_lcs_of_strings():
    assert "".join(lcs("hello world", "yellow word")) == "ello word"


def test_lcs_long_sequences_do_not_recurse():
    a = list(range(1200))
    assert lcs(a, a[::2]) == a[::2]
