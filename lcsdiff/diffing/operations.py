# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import defaultdict, deque

from ..diff_format import Operations, op_move, remove_steps_at

__all__ = ["classify_steps", "diff_operations"]


def _identity(value):
    return value


def classify_steps(insertions, deletions, key=None):
    """Pair up insertions and deletions of equal values into moves.

    Returns an Operations tuple (moves, insertions, deletions) where
    each of the given steps ends up in exactly one group. A move is
    made from a deletion and an insertion with equal key(value), key
    defaulting to the value itself, so values must be hashable.

    If a key occurs more than once, deletions and insertions with that
    key are paired in ascending position order: the lowest deletion
    with the lowest insertion, and so on, until one side runs out.

    Moves are sorted by destination position, the remaining insertions
    ascending and the remaining deletions descending by position.
    """
    if key is None:
        key = _identity

    candidates = defaultdict(deque)
    for insertion in sorted(insertions, key=lambda s: s.position):
        candidates[key(insertion.value)].append(insertion)

    moves = []
    moved_from = []
    moved_to = []
    for deletion in sorted(deletions, key=lambda s: s.position):
        queue = candidates.get(key(deletion.value))
        if not queue:
            continue
        insertion = queue.popleft()
        moves.append(op_move(deletion.position, insertion.position, insertion.value))
        moved_from.append(deletion.position)
        moved_to.append(insertion.position)

    moves.sort(key=lambda s: s.position)
    remaining_insertions = sorted(remove_steps_at(insertions, moved_to),
                                  key=lambda s: s.position)
    remaining_deletions = sorted(remove_steps_at(deletions, moved_from),
                                 key=lambda s: s.position, reverse=True)
    return Operations(moves, remaining_insertions, remaining_deletions)


def diff_operations(diff, key=None):
    "Classify the steps of diff into (moves, insertions, deletions)."
    return classify_steps(diff.insertions, diff.deletions, key=key)
