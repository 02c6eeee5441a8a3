# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    ConfigBackedParser, add_generic_args, add_input_args, add_filename_args,
    )
from .diffing import lcs
from .log import error
from .utils import EXPLICIT_MISSING_FILE, read_sequence, setup_std_streams


_description = "Print the longest common subsequence of two sequences."


def main_lcs(args):
    for fn in (args.a, args.b):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    try:
        a = read_sequence(args.a, args.input_format)
        b = read_sequence(args.b, args.input_format)
    except ValueError as e:
        error("Could not read input: %s", e)
        return 1
    common = lcs(a, b)

    if args.input_format == 'json':
        print(json.dumps(common, indent=2, separators=(",", ": ")))
    else:
        for line in common:
            print(line)
    return 0


def _build_arg_parser(prog='lcsdiff-lcs'):
    """Creates an argument parser for the lcs command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_input_args(parser)
    add_filename_args(parser, ["a", "b"])
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_lcs(arguments)


if __name__ == "__main__":
    sys.exit(main())
