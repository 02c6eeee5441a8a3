# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import sys

from .args import (
    ConfigBackedParser, add_generic_args, add_input_args, add_filename_args,
    add_prettyprint_args, prettyprint_config_from_args,
    )
from .diff_utils import from_step_dicts
from .log import DiffApplyError, DiffFormatError, error
from .patching import apply
from .prettyprint import pretty_print_sequence
from .utils import EXPLICIT_MISSING_FILE, read_sequence, write_sequence, setup_std_streams


_description = "Apply patch from lcsdiff diff to a sequence."


def main_patch(args):
    base_filename = args.base
    patch_filename = args.patch
    output_filename = args.output

    for fn in (base_filename, patch_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    try:
        before = read_sequence(base_filename, args.input_format)
        with io.open(patch_filename, encoding="utf8") as patch_file:
            diff = json.load(patch_file)
    except ValueError as e:
        error("Could not read input: %s", e)
        return 1

    try:
        diff = from_step_dicts(diff)
        after = apply(before, diff, check=args.check)
    except (DiffFormatError, DiffApplyError) as e:
        error("Could not apply %s to %s: %s", patch_filename, base_filename, e)
        return 1

    if output_filename:
        write_sequence(after, output_filename, args.input_format)
    else:
        # This printer is to keep the unit tests passing,
        # some tests capture output with capsys which doesn't
        # pick up on sys.stdout.write()
        class Printer:
            def write(self, text):
                print(text, end="")

        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_sequence(after, config=config)

    return 0


def _build_arg_parser(prog='lcsdiff-patch'):
    """Creates an argument parser for the patch command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        add_help=True,
        )
    add_generic_args(parser)
    add_input_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["base", "patch"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched sequence is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    parser.add_argument(
        '--no-check',
        dest='check',
        action='store_false',
        default=True,
        help="do not verify that deleted elements match the base sequence.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
