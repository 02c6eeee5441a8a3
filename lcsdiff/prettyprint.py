# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import pprint
import sys

import colorama

from .diff_format import DiffOp
from .log import DiffFormatError


# Indentation offset in pretty-print
IND = "  "


DIFF_ENTRY_END = '\n'

ColoredConstants = namedtuple('ColoredConstants', (
    'REMOVE',
    'ADD',
    'MOVE',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        MOVE   = '{color}>  '.format(color=colorama.Fore.YELLOW),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        REMOVE = '-  ',
        ADD    = '+  ',
        MOVE   = '>  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            ):
        self.out = out
        self.use_color = use_color

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def MOVE(self):
        return col_const[self.use_color].MOVE

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if os.path.exists(filename):
        t = os.path.getmtime(filename)
        dt = datetime.datetime.fromtimestamp(t)
        return dt.isoformat(str(" "))
    else:
        return "(no timestamp)"


def format_value(v):
    "Format simple value for printing. Uses pprint for anything but strings."
    if not isinstance(v, str):
        return pprint.pformat(v)
    return v


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_value(value, prefix="", config=DefaultConfig):
    "Print a value with all its lines prefixed."
    pretty_print_multiline(format_value(value), prefix, config)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_diff_action(msg, where, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, where, config.RESET))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            # Singleline strings
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        v = d[k]
        pretty_print_item(k, v, prefix, config)


def pretty_print_sequence(seq, prefix="", config=DefaultConfig):
    "Pretty-print the elements of a sequence, one per line."
    for value in seq:
        pretty_print_value(value, prefix, config)


def pretty_print_diff_step(step, config=DefaultConfig):
    op = step.op
    if op == DiffOp.INSERT:
        pretty_print_diff_action("inserted at", step.position, config)
        pretty_print_value(step.value, config.ADD, config)

    elif op == DiffOp.DELETE:
        pretty_print_diff_action("deleted at", step.position, config)
        pretty_print_value(step.value, config.REMOVE, config)

    elif op == DiffOp.MOVE:
        where = "{} to {}".format(step.origin, step.position)
        pretty_print_diff_action("moved from", where, config)
        pretty_print_value(step.value, config.MOVE, config)

    else:
        raise DiffFormatError("Unknown diff op {}".format(op))

    config.out.write(DIFF_ENTRY_END + config.RESET)


def pretty_print_diff(di, config=DefaultConfig):
    "Pretty-print a diff, step by step in diff order."
    for step in di:
        pretty_print_diff_step(step, config)


def pretty_print_operations(operations, config=DefaultConfig):
    "Pretty-print the (moves, insertions, deletions) classification of a diff."
    moves, insertions, deletions = operations
    for step in deletions:
        pretty_print_diff_step(step, config)
    for step in moves:
        pretty_print_diff_step(step, config)
    for step in insertions:
        pretty_print_diff_step(step, config)


sequence_diff_header = """\
lcsdiff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""

def pretty_print_sequence_diff(afn, bfn, di, moves=False, config=DefaultConfig):
    """Pretty-print a sequence diff

    Parameters
    ----------

    afn: str
        Filename of a, the base sequence
    bfn: str
        Filename of b, the updated sequence
    di: Diff
        The diff object describing the transformation from a to b
    moves: bool
        Whether to print the moves/insertions/deletions classification
        of the diff instead of its raw steps
    config: PrettyPrintConfig
        Config object determining what gets printed and where
    """
    if di:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(sequence_diff_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        if moves:
            pretty_print_operations(di.operations, config)
        else:
            pretty_print_diff(di, config)
