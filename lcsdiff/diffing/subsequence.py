# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator

from .table import build_table

__all__ = ["lcs", "lcs_indices"]


def lcs_indices(A, B, R, compare=operator.__eq__):
    """Compute the indices of the lcs of A and B by walking back through R.

    Returns two lists (A_indices, B_indices) with length == llcs(A, B),
    such that lcs(A, B) == A[A_indices] == B[B_indices].

    When the two neighbours of a cell hold the same length, the walk
    steps along A first. This decides which lcs is found when there
    are several.
    """
    A_indices = []
    B_indices = []
    x = len(A)
    y = len(B)
    while x > 0 and y > 0:
        if compare(A[x-1], B[y-1]):
            assert R[x][y] == R[x-1][y-1] + 1
            x -= 1
            y -= 1
            A_indices.append(x)
            B_indices.append(y)
        elif R[x-1][y] >= R[x][y-1]:
            x -= 1
        else:
            y -= 1
    A_indices.reverse()
    B_indices.reverse()
    return A_indices, B_indices


def lcs(a, b):
    "Return the longest common subsequence of a and b as a list."
    R = build_table(a, b)
    A_indices, _ = lcs_indices(a, b, R)
    return [a[i] for i in A_indices]
