# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""Deterministic test inputs.

Each generator takes a dict mapping input names to byte lengths and yields
(inputs, description) pairs. Everything is seeded from the lengths, so
regenerating vectors gives identical files.
"""

import random

example_count = 12

def _rng(*seed):
    return random.Random(repr(seed))

def oneset(l, b):
    l = bytearray(l)
    l[b >> 3] |= (1 << (b & 7))
    return bytes(l)

def rangeset(l, s):
    return bytes((b & 0xff) for b in range(s, s+l))

def sample_including_ends(hi, c):
    """c sorted values from range(hi), always including 0 and hi - 1."""
    r = _rng(hi, c)
    s = {0, hi - 1}
    while len(s) < min(c, hi):
        s.add(r.randrange(hi))
    return sorted(s)

def _zeros(lengths):
    return {k: bytes(v) for k, v in lengths.items()}

def generate_onebit(lengths):
    for k, v in lengths.items():
        if v*8 < example_count:
            continue
        for i in sample_including_ends(v*8, example_count):
            d = _zeros(lengths)
            d[k] = oneset(v, i)
            yield d, f"Set bit {i} of {k}"

def generate_allones(lengths):
    for k, v in lengths.items():
        if v < 1:
            continue
        d = _zeros(lengths)
        d[k] = b'\xff' * v
        yield d, f"All bits set in {k}"

def generate_ranges(lengths):
    for k, v in lengths.items():
        if v < 1:
            continue
        for i in sample_including_ends(0x100, example_count):
            d = _zeros(lengths)
            d[k] = rangeset(v, i)
            yield d, f"Incrementing bytes from 0x{i:02x} for {k}"

def generate_repeated(lengths):
    for r in sample_including_ends(1<<(len(lengths)*8), example_count):
        values = {k:((r>>(8*i))&0xff) for i, k in enumerate(lengths)}
        d = {k:bytes([values[k]])*v for k,v in lengths.items()}
        yield d, "Repeated bytes: {}".format(" ".join(
            f"{k}: 0x{v:02x}" for k, v in values.items()))

def generate_random(lengths):
    for i in range(1, example_count +1):
        r = _rng(sorted(lengths.items()), i)
        d = {k: bytes(r.randrange(0x100) for _ in range(v)) for k, v in lengths.items()}
        yield d, f"Random ({i:2})"

def generate_testinputs(lengths):
    yield from generate_onebit(lengths)
    yield from generate_allones(lengths)
    yield from generate_ranges(lengths)
    yield from generate_repeated(lengths)
    yield from generate_random(lengths)
