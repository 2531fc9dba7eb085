# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""XChaCha20 stream cipher: ChaCha20 with a 192-bit nonce.

The cipher object is an immutable (key, nonce, counter) value. It is not a
running stream: every call to keystream(), encrypt() or decrypt() derives
the subkey again and starts from the counter given at construction. Two
calls with inputs of the same length therefore use the same keystream, so
encrypting two different messages with one object leaks their XOR exactly
as nonce reuse would. Callers that want a cursor must track the block
counter themselves and build a new object per position.
"""

import cipher
import latindance
import xconstruct

KEY_BYTES = 32
NONCE_BYTES = 24
BLOCK_BYTES = 64
COUNTER_LIMIT = 1 << 32

def new_stream():
    x = xconstruct.XConstruct(latindance.ChaCha20RFC())
    x.set_rounds_keylen(20, KEY_BYTES)
    return x

def xchacha20_stream(key, nonce, counter, length):
    """length bytes of XChaCha20 keystream starting at block counter."""
    return new_stream().keystream(length, key=key, nonce=nonce, offset=counter)

class XChaCha20(object):
    __slots__ = ("_key", "_nonce", "_counter")

    def __init__(self, key, nonce, counter=0):
        cipher.check_length("key", key, KEY_BYTES)
        cipher.check_length("nonce", nonce, NONCE_BYTES)
        if not 0 <= counter < COUNTER_LIMIT:
            raise ValueError(f"Counter must be an unsigned 32-bit value, got {counter}")
        self._key = bytes(key)
        self._nonce = bytes(nonce)
        self._counter = counter

    @property
    def key(self):
        return self._key

    @property
    def nonce(self):
        return self._nonce

    @property
    def counter(self):
        return self._counter

    def __repr__(self):
        return f"XChaCha20(nonce={self._nonce.hex()}, counter={self._counter})"

    def keystream(self, length):
        return xchacha20_stream(self._key, self._nonce, self._counter, length)

    def encrypt(self, data):
        return cipher.xor_bytes(data, self.keystream(len(data)))

    def decrypt(self, data):
        return self.encrypt(data)
