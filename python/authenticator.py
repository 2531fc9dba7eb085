# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""One-time polynomial authenticator over GF(2^130 - 5).

The 32-byte key splits into a multiplier r (first half, clamped byte by
byte with poly1305.clamp_multiplier) and a pad s (second half). The message
is folded block by block into h = (h + block) * r mod 2^130 - 5, the last
block always carrying a 0x80 terminator in byte 15, and the tag is
(h + s) mod 2^128. A key must authenticate only one message.
"""

import hmac

import cipher
import field
import poly1305

KEY_BYTES = 32
TAG_BYTES = 16

class Authenticator(object):
    __slots__ = ("_r", "_pad")

    def __init__(self, key):
        cipher.check_length("key", key, KEY_BYTES)
        half = KEY_BYTES // 2
        self._r = field.from_bytes(poly1305.clamp_multiplier(key[:half]))
        self._pad = bytes(key[half:])

    @property
    def r(self):
        return self._r

    def compute(self, message):
        return poly1305.finalize(poly1305.accumulate(self._r, message), self._pad)

    def verify(self, message, tag):
        if len(tag) != TAG_BYTES:
            return False
        return hmac.compare_digest(self.compute(message), bytes(tag))

class ClampedPoly1305(poly1305.Mac):
    """The authenticator in the test-vector framework."""

    def __init__(self):
        super().__init__()
        self.choose_variant(lambda x: True)

    def variants(self):
        yield {'cipher': 'ClampedPoly1305',
            'lengths': {'key': KEY_BYTES, 'output': TAG_BYTES}}

    def mac(self, message, key):
        return Authenticator(key).compute(message)
