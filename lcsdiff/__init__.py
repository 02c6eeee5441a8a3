# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diff_format import (
    Diff, DiffOp, DiffStep, Operations, op_insert, op_delete, op_move,
)
from .diffing import diff, lcs
from .log import DiffApplyError, DiffFormatError
from .patching import apply


__all__ = [
    "__version__",
    "diff", "lcs", "apply",
    "Diff", "DiffOp", "DiffStep", "Operations",
    "op_insert", "op_delete", "op_move",
    "DiffApplyError", "DiffFormatError",
    ]
