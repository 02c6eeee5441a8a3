# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import random


def write_lines(path, lines):
    with io.open(path, 'w', encoding='utf-8') as f:
        for line in lines:
            f.write(line + "\n")
    return path


def write_json(path, obj):
    with io.open(path, 'w', encoding='utf-8') as f:
        json.dump(obj, f)
    return path


def random_sequence(rng, max_length, alphabet="abcde"):
    "Return a random list drawn from a small alphabet, so that elements repeat."
    return [rng.choice(alphabet) for _ in range(rng.randint(0, max_length))]


def random_sequence_pairs(seed, count, max_length):
    rng = random.Random(seed)
    for _ in range(count):
        yield random_sequence(rng, max_length), random_sequence(rng, max_length)
