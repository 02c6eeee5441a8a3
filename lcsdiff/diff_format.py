# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

from .log import DiffFormatError


class DiffOp:
    "Collection of valid values for the op field in diff steps."
    INSERT = "insert"
    DELETE = "delete"
    MOVE = "move"


class DiffStep(namedtuple("DiffStep", ["op", "origin", "position", "value"])):
    """A single step of a sequence diff.

    For insert and delete steps origin == position, and position is
    given in target and source coordinates respectively. For move
    steps origin is the source position and position the destination.

    Two steps compare equal only if all fields are equal. Matching
    steps by position alone is done with `remove_steps_at`.
    """
    __slots__ = ()

    def __str__(self):
        if self.op == DiffOp.INSERT:
            return "+{}@{}".format(self.value, self.position)
        elif self.op == DiffOp.DELETE:
            return "-{}@{}".format(self.value, self.position)
        elif self.op == DiffOp.MOVE:
            return "-{v}@{}+{v}@{}".format(self.origin, self.position, v=self.value)
        raise DiffFormatError("Unknown diff op '{}'.".format(self.op))


def op_insert(index, value):
    "Create a diff step inserting value at index of the target."
    return DiffStep(DiffOp.INSERT, index, index, value)

def op_delete(index, value):
    "Create a diff step deleting value at index of the source."
    return DiffStep(DiffOp.DELETE, index, index, value)

def op_move(origin, position, value):
    "Create a diff step moving value from origin to position."
    return DiffStep(DiffOp.MOVE, origin, position, value)


def reversed_step(step):
    "Return the step undoing the given step."
    if step.op == DiffOp.INSERT:
        return op_delete(step.position, step.value)
    elif step.op == DiffOp.DELETE:
        return op_insert(step.position, step.value)
    elif step.op == DiffOp.MOVE:
        return op_move(step.position, step.origin, step.value)
    raise DiffFormatError("Unknown diff op '{}'.".format(step.op))


def remove_steps_at(steps, positions):
    "Return the steps whose position is not among the given positions."
    positions = set(positions)
    return [s for s in steps if s.position not in positions]


Operations = namedtuple("Operations", ["moves", "insertions", "deletions"])


class Diff(object):
    """An immutable sequence of diff steps.

    Steps are kept in the order they were produced by the diff
    algorithm. Use the `insertions` and `deletions` views when a
    sorted order is needed.
    """

    __slots__ = ("_steps",)

    def __init__(self, steps=()):
        self._steps = tuple(steps)

    @property
    def steps(self):
        return self._steps

    @property
    def insertions(self):
        "All insert steps, ascending by position."
        return sorted((s for s in self._steps if s.op == DiffOp.INSERT),
                      key=lambda s: s.position)

    @property
    def deletions(self):
        """All delete steps, descending by position.

        Removing them in this order from a copy of the source never
        shifts the position of a step not yet processed.
        """
        return sorted((s for s in self._steps if s.op == DiffOp.DELETE),
                      key=lambda s: s.position, reverse=True)

    @property
    def operations(self):
        "The (moves, insertions, deletions) classification of this diff."
        from .diffing.operations import diff_operations
        return diff_operations(self)

    def reversed(self):
        "Return the diff transforming the target of this diff back into its source."
        return Diff(reversed_step(s) for s in reversed(self._steps))

    def __add__(self, step):
        if not isinstance(step, DiffStep):
            return NotImplemented
        return Diff(self._steps + (step,))

    def __iter__(self):
        return iter(self._steps)

    def __len__(self):
        return len(self._steps)

    def __getitem__(self, index):
        return self._steps[index]

    def __bool__(self):
        return bool(self._steps)

    def __eq__(self, other):
        if not isinstance(other, Diff):
            return NotImplemented
        return self._steps == other._steps

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._steps)

    def __repr__(self):
        return "Diff([{}])".format(", ".join(str(s) for s in self._steps))


def is_valid_diff(diff):
    """Checks wheter a diff (sequence of diff steps) is well formed.

    Returns a boolean indicating the well-formedness of the diff.
    """
    try:
        validate_diff(diff)
        result = True
    except DiffFormatError:
        result = False
    return result


def validate_diff(diff):
    """Check wheter a diff (sequence of diff steps) is well formed.

    Raises a DiffFormatError if not well formed.
    """
    if not isinstance(diff, (Diff, list, tuple)):
        raise DiffFormatError("Diff must be a Diff or a list of steps.")
    for s in diff:
        validate_diff_step(s)


def validate_diff_step(s):
    """Check that s is a well formed diff step.

    Raises a DiffFormatError if not well formed.
    """
    if not isinstance(s, DiffStep):
        raise DiffFormatError("Diff step '{}' is not a diff step type.".format(s))

    for name in ("origin", "position"):
        index = getattr(s, name)
        # bool is an int subclass, but never a valid position
        if not isinstance(index, int) or isinstance(index, bool) or index < 0:
            raise DiffFormatError(
                "Invalid {} '{}' in diff step, expecting a non-negative int.".format(
                    name, index))

    if s.op in (DiffOp.INSERT, DiffOp.DELETE):
        if s.origin != s.position:
            raise DiffFormatError(
                "{} step has differing origin {} and position {}.".format(
                    s.op, s.origin, s.position))
    elif s.op != DiffOp.MOVE:
        raise DiffFormatError("Unknown diff op '{}'.".format(s.op))
