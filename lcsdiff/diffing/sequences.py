# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import Diff, op_insert, op_delete
from .table import build_table

__all__ = ["diff", "diff_from_table"]


def diff_from_table(A, B, R):
    """Walk back through the lcs table R of A and B to build their diff.

    Where both an insertion and a deletion would keep the path on an
    lcs, the insertion is chosen.

    The step found last by the walk (closest to the start of the
    sequences) comes first in the result.
    """
    steps = []
    x = len(A)
    y = len(B)
    while x > 0 or y > 0:
        if x == 0:
            y -= 1
            steps.append(op_insert(y, B[y]))
        elif y == 0:
            x -= 1
            steps.append(op_delete(x, A[x]))
        elif R[x][y] == R[x][y-1]:
            y -= 1
            steps.append(op_insert(y, B[y]))
        elif R[x][y] == R[x-1][y]:
            x -= 1
            steps.append(op_delete(x, A[x]))
        else:
            # A[x-1] == B[y-1], part of the lcs
            x -= 1
            y -= 1
    steps.reverse()
    return Diff(steps)


def diff(a, b):
    """Compute the diff transforming sequence a into sequence b.

    The result only holds insert and delete steps, use the
    `operations` view of the returned diff to pair them into moves.
    """
    R = build_table(a, b)
    return diff_from_table(a, b, R)
