# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator

__all__ = ["compare_grid", "llcs_grid", "build_table"]


def compare_grid(A, B, compare=operator.__eq__):
    "Compute grid G[i][j] == compare(A[i], B[j])."
    return [[compare(a, b) for b in B] for a in A]


def llcs_grid(G, M=None):
    """Compute grid R[x][y] == llcs(A[:x], B[:y]), given G[i][j] = compare(A[i], B[j]).

    M is the length of B, needed when A is empty.
    """
    N = len(G)
    if M is None:
        M = len(G[0]) if N else 0

    R = [[0]*(M+1) for i in range(N+1)]
    for x in range(1, N+1):
        for y in range(1, M+1):
            if G[x-1][y-1]:
                R[x][y] = R[x-1][y-1] + 1
            else:
                R[x][y] = max(R[x-1][y], R[x][y-1])
    return R


def build_table(A, B, compare=operator.__eq__):
    """Build the table of longest common subsequence lengths of A and B.

    Returns R with len(A)+1 rows of len(B)+1 ints, such that R[x][y]
    is the length of the lcs of A[:x] and B[:y].
    """
    return llcs_grid(compare_grid(A, B, compare), len(B))
