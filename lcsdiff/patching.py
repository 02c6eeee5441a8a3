# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diff_format import Diff, DiffOp
from .log import DiffApplyError, DiffFormatError, debug


__all__ = ["apply"]


def apply(source, diff, check=True):
    """Produce the target sequence of diff from its source.

    The diff must have been computed from source, i.e. for all
    sequences x, y: apply(x, diff(x, y)) == list(y).

    Deletions are removed from a copy of source highest position
    first, then insertions are inserted lowest position first.

    With check enabled, a diff that does not fit source raises a
    DiffApplyError instead of producing an arbitrary result.
    """
    if not isinstance(diff, Diff):
        diff = Diff(diff)
    if any(s.op == DiffOp.MOVE for s in diff):
        raise DiffFormatError(
            "Cannot apply a diff with move steps, apply the insert/delete diff instead.")

    result = list(source)
    deletions = diff.deletions
    insertions = diff.insertions
    debug("Applying %d deletions and %d insertions to sequence of length %d",
          len(deletions), len(insertions), len(result))

    for step in deletions:
        index = step.position
        if index >= len(result):
            raise DiffApplyError(
                "Cannot delete position {} from sequence of length {}.".format(
                    index, len(result)))
        if check and result[index] != step.value:
            raise DiffApplyError(
                "Deleted value {!r} does not match {!r} at position {}.".format(
                    step.value, result[index], index))
        del result[index]

    for step in insertions:
        index = step.position
        if index > len(result):
            raise DiffApplyError(
                "Cannot insert at position {} in sequence of length {}.".format(
                    index, len(result)))
        result.insert(index, step.value)

    return result
