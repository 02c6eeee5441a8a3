# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import json
import locale
import os
import sys

from .log import DiffFormatError


if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


def read_sequence(f, input_format='lines'):
    """Read and return a sequence from filename

    Parameters:
        f:  The filename to read from or null filename
            ("/dev/null" on *nix, "nul" on Windows), which
            reads as the empty sequence.
            Alternatively a file-like object can be passed.
        input_format: How to read the file
            "lines": a list of text lines, without line endings
            "json": a JSON array
    """
    if input_format not in ('lines', 'json'):
        raise ValueError(
            'Not valid value for `input_format`: %r. Valid values '
            'are "lines" or "json"' % (input_format,))
    if f == EXPLICIT_MISSING_FILE:
        return []
    if isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            text = fo.read()
    else:
        text = f.read()

    if input_format == 'lines':
        return text.splitlines()
    seq = json.loads(text)
    if not isinstance(seq, list):
        raise DiffFormatError(
            "Expected a JSON array, got {}.".format(type(seq).__name__))
    return seq


def write_sequence(seq, f, input_format='lines'):
    "Write a sequence to filename f in the given format."
    with io.open(f, 'w', encoding='utf-8') as fo:
        if input_format == 'json':
            json.dump(seq, fo, indent=2, separators=(",", ": "))
            fo.write("\n")
        else:
            for line in seq:
                fo.write("%s\n" % (line,))


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        # if error-handler is strict, switch to replace
        if errors == 'strict' or errors.startswith('surrogate'):
            bin_stream = stream.buffer
            new_stream = codecs.getwriter(enc)(bin_stream, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """

    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
