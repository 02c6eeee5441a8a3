# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io

import colorama

from lcsdiff import diff, op_move
from lcsdiff.prettyprint import (
    PrettyPrintConfig, pretty_print_diff, pretty_print_diff_step,
    pretty_print_dict, pretty_print_operations, pretty_print_sequence,
    pretty_print_sequence_diff,
)


def plain_config():
    return PrettyPrintConfig(out=io.StringIO(), use_color=False)


def test_pretty_print_diff():
    config = plain_config()
    pretty_print_diff(diff(["a", "b", "c"], ["b", "c", "d"]), config)
    assert config.out.getvalue() == (
        "## deleted at 0:\n"
        "-  a\n"
        "\n"
        "## inserted at 2:\n"
        "+  d\n"
        "\n"
    )


def test_pretty_print_move():
    config = plain_config()
    pretty_print_diff_step(op_move(0, 1, "a"), config)
    assert config.out.getvalue() == "## moved from 0 to 1:\n>  a\n\n"


def test_pretty_print_operations():
    config = plain_config()
    pretty_print_operations(diff(["a", "b", "x"], ["b", "a", "y"]).operations, config)
    text = config.out.getvalue()
    assert "## moved from 0 to 1:\n>  a\n" in text
    assert "## deleted at 2:\n-  x\n" in text
    assert "## inserted at 2:\n+  y\n" in text


def test_pretty_print_non_string_values():
    config = plain_config()
    pretty_print_diff(diff([], [{"k": 1}]), config)
    assert "+  {'k': 1}\n" in config.out.getvalue()


def test_pretty_print_colors():
    config = PrettyPrintConfig(out=io.StringIO(), use_color=True)
    pretty_print_diff(diff(["a"], []), config)
    text = config.out.getvalue()
    assert colorama.Fore.RED in text
    assert colorama.Style.RESET_ALL in text


def test_pretty_print_sequence_diff_header(tmpdir):
    afn = str(tmpdir.join("a.txt"))
    config = plain_config()
    pretty_print_sequence_diff(afn, "b.txt", diff(["a"], ["b"]), config=config)
    text = config.out.getvalue()
    assert text.startswith("lcsdiff %s b.txt\n--- %s  (no timestamp)\n" % (afn, afn))
    assert "+++ b.txt  (no timestamp)\n" in text


def test_pretty_print_sequence_diff_empty_prints_nothing():
    config = plain_config()
    pretty_print_sequence_diff("a", "b", diff(["a"], ["a"]), config=config)
    assert config.out.getvalue() == ""


def test_pretty_print_sequence():
    config = plain_config()
    pretty_print_sequence(["x", 2], config=config)
    assert config.out.getvalue() == "x\n2\n"


def test_pretty_print_dict():
    config = plain_config()
    pretty_print_dict({"b": "2", "a": {"c": "1"}}, config=config)
    assert config.out.getvalue() == "a:\n  c: 1\nb: 2\n"
