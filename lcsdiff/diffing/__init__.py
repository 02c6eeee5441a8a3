# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .subsequence import lcs
from .operations import classify_steps, diff_operations
from .sequences import diff

__all__ = ["diff", "lcs", "classify_steps", "diff_operations"]
