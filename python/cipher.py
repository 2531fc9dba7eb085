# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import copy

class SizeError(ValueError):
    """A key, nonce or other fixed-size input had the wrong length."""

    def __init__(self, what, expected, got):
        super().__init__(f"Expected {expected} bytes for {what}, got {got}")
        self.what = what
        self.expected = expected
        self.got = got

def check_length(what, value, expected):
    if len(value) != expected:
        raise SizeError(what, expected, len(value))

def xor_bytes(a, b):
    assert len(a) <= len(b)
    return bytes(x ^ y for x, y in zip(a, b))

class Cipher(object):
    def copy(self): return copy.deepcopy(self)

    def name(self):
        return type(self).__name__

    def variant_name(self):
        return self.name()

    @property
    def variant(self):
        return self._variant

    def _setup_variant(self):
        pass

    @variant.setter
    def variant(self, value):
        if value not in self.variants():
            raise Exception(f"Not a variant of {self.name()}: {value}")
        self._variant = value
        self._setup_variant()

    def choose_variant(self, criterion):
        for v in self.variants():
            if criterion(v):
                self.variant = v
                return
        raise Exception(f"No variant of {self.name()} matching criterion")

    def lengths(self):
        return self.variant["lengths"]

    def test_input_lengths(self):
        yield self.lengths()

class ARXCipher(Cipher):
    """Helpers for ciphers built from add, rotate and xor on fixed-size words."""

    def _to_ints(self, b):
        assert len(b) % self._word_bytes == 0
        return [int.from_bytes(b[i:i + self._word_bytes], byteorder=self._byteorder)
            for i in range(0, len(b), self._word_bytes)]

    def _from_ints(self, ints):
        return b''.join(i.to_bytes(self._word_bytes, byteorder=self._byteorder) for i in ints)

    def _mod(self, i):
        return i & ((1 << (self._word_bytes * 8))-1)

    def _rotl(self, i, r):
        return self._mod((i << r) | (i >> (self._word_bytes * 8 - r)))
