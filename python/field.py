# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""Arithmetic in the prime field of order 2^130 - 5.

Elements are plain Python ints in [0, P). Products are formed in full
(up to about 260 bits) before reduction.
"""

P = (1 << 130) - 5

ELEMENT_BYTES = 16

def from_bytes(b):
    """Little-endian bytes to an int; at most 17 bytes (one padded block)."""
    assert len(b) <= ELEMENT_BYTES + 1
    return int.from_bytes(b, byteorder='little')

def to_bytes(i, length=ELEMENT_BYTES):
    """The low length bytes of i, little-endian; i is taken mod 2^(8*length)."""
    return (i & ((1 << (8 * length)) - 1)).to_bytes(length, byteorder='little')

def reduce(i):
    return i % P

def add(a, b):
    return reduce(a + b)

def mul(a, b):
    return reduce(a * b)
