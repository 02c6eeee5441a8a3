# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diff_format import Diff, DiffOp, DiffStep, validate_diff
from .log import DiffFormatError


def to_step_dicts(diff):
    """Convert a diff to a list of json-ready dicts.

    Insert and delete steps become {"op", "position", "value"},
    move steps additionally carry "origin".
    """
    result = []
    for s in diff:
        d = {"op": s.op, "position": s.position, "value": s.value}
        if s.op == DiffOp.MOVE:
            d["origin"] = s.origin
        result.append(d)
    return result


def from_step_dicts(dicts):  # TODO: Accept the compact "+v@i" string form as well?
    "Convert a list of step dicts, as produced by to_step_dicts, back to a validated Diff."
    if not isinstance(dicts, list):
        raise DiffFormatError("Diff must be a list of step dicts, not {}.".format(
            type(dicts).__name__))
    steps = []
    for d in dicts:
        if not isinstance(d, dict):
            raise DiffFormatError("Diff step '{}' is not a dict.".format(d))
        missing = {"op", "position", "value"} - set(d)
        if missing:
            raise DiffFormatError("Diff step {} is missing keys {}.".format(
                d, sorted(missing)))
        position = d["position"]
        origin = d.get("origin", position)
        steps.append(DiffStep(d["op"], origin, position, d["value"]))
    validate_diff(steps)
    return Diff(steps)
