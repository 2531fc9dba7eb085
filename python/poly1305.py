# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import cipher
import field

BLOCK_BYTES = 16

rclamp =  0x0ffffffc0ffffffc0ffffffc0fffffff

def read_r(b):
    assert len(b) == BLOCK_BYTES
    return field.from_bytes(b) & rclamp

def poly1305_h_rbar(rbar, m):
    assert rbar == rbar & rclamp
    h = 0
    while len(m) > 0:
        chunk = m[:BLOCK_BYTES]
        c = field.from_bytes(chunk)
        c += (1 << (8 * len(chunk)))
        m = m[BLOCK_BYTES:]
        h = field.mul(field.add(h, c), rbar)
    return h

# Byte-level clamping used by the one-time authenticator. Unlike rclamp,
# it forces bit 2 of each clamped byte on and leaves bytes 4, 8 and 12 alone.
CLAMPED_BYTES = (3, 7, 11, 15)

def clamp_multiplier(b):
    assert len(b) == BLOCK_BYTES
    r = bytearray(b)
    for i in CLAMPED_BYTES:
        r[i] &= 0x0f
        r[i] |= 0x04
    return bytes(r)

def terminated_blocks(m):
    """Split m into 16-byte blocks; the last is zero-padded and has 0x80 ORed
    into byte 15. A message whose length is a multiple of 16 (including the
    empty message) gets an extra block of fifteen zeros and 0x80."""
    full = len(m) - len(m) % BLOCK_BYTES
    for i in range(0, full, BLOCK_BYTES):
        yield bytes(m[i:i + BLOCK_BYTES])
    last = bytearray(m[full:])
    last.extend(b'\0' * (BLOCK_BYTES - len(last)))
    last[-1] |= 0x80
    yield bytes(last)

def accumulate(r, m):
    h = 0
    for block in terminated_blocks(m):
        h = field.mul(field.add(h, field.from_bytes(block)), r)
    return h

def finalize(h, pad):
    return field.to_bytes(h + field.from_bytes(pad))

class Mac(cipher.Cipher):
    def make_testvector(self, input, description):
        return {
            "cipher": self.variant,
            "description": description,
            "input": input,
            "mac": self.mac(**input),
        }

    def check_testvector(self, tv):
        self.variant = tv["cipher"]
        assert tv["mac"] == self.mac(**tv["input"])

    def test_input_lengths(self):
        v = dict(self.lengths())
        del v["output"]
        for mlen in 0, 1, 15, 16, 17, 47, 64:
            yield {**v, "message": mlen}

class Poly1305(Mac):
    """Poly1305 as specified in RFC 8439, with a 32-byte one-time key r || s."""

    def __init__(self):
        super().__init__()
        self.choose_variant(lambda x: True)

    def variants(self):
        yield {'cipher': 'Poly1305',
            'lengths': {'key': 32, 'output': 16}}

    def mac(self, message, key):
        cipher.check_length("key", key, self.lengths()["key"])
        r = read_r(key[:BLOCK_BYTES])
        return finalize(poly1305_h_rbar(r, message), key[BLOCK_BYTES:])
