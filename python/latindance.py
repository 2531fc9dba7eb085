# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import cipher

SIGMA = b"expand 32-byte k"
CONSTANT_WORDS = tuple(int.from_bytes(SIGMA[i:i + 4], byteorder='little')
    for i in range(0, len(SIGMA), 4))

class Latinlike(cipher.Cipher):
    """A stream cipher whose keystream is a sequence of independently computed
    blocks, each addressed by a block counter ("offset")."""

    _tests = [{"offset": o} for o in [0, 1, 1023, 1024, 2048, 0xffffffff]]

    def keystream(self, length, offset=0, **d):
        if length < 0:
            raise ValueError(f"Keystream length must not be negative, got {length}")
        result = []
        while length > 0:
            block = self.gen_output(offset=offset, **d)
            result.append(block[:length])
            length -= len(block)
            offset += 1
        return b''.join(result)

    def encrypt(self, plaintext, offset=0, **d):
        return cipher.xor_bytes(plaintext, self.keystream(len(plaintext), offset=offset, **d))

    def decrypt(self, ciphertext, offset=0, **d):
        return self.encrypt(ciphertext, offset=offset, **d)

    def set_rounds_keylen(self, rounds, keylen):
        self.choose_variant(lambda v: v["rounds"] == rounds and v["lengths"]["key"] == keylen)

    def make_testvector(self, input, description):
        return {
            "cipher": self.variant,
            "description": description,
            "input": input,
            "tests": [dict(input=t, result=self.gen_output(**dict(input, **t)))
                for t in self._tests]
        }

    def check_testvector(self, tv):
        self.variant = tv["cipher"]
        if 'tests' in tv:
            for s in tv["tests"]:
                d = tv["input"].copy()
                d.update(s["input"])
                result = self.gen_output(**d)
                assert result == s["result"]
        elif 'ciphertext' in tv:
            assert tv["ciphertext"] == self.encrypt(tv["plaintext"], **tv['input'])
            assert tv["plaintext"] == self.decrypt(tv["ciphertext"], **tv['input'])
        else:
            raise Exception("invalid test vector")

class Latindance(Latinlike, cipher.ARXCipher):
    """Block function and subkey hash shared by the ChaCha family.

    The 16-word state holds the constant, the key, and a counter/nonce area
    whose word positions are given by the subclass in _positions. Blocks
    are the permuted state plus the initial state; the subkey hash skips
    that feed-forward and reads back only the constant and counter/nonce
    words, which keeps the key words out of the output.
    """
    _byteorder = 'little'
    _word_bytes = 4
    _state_words = 16

    def _length(self, k):
        return self._word_bytes * len(self._positions[k])

    def _write_initstate(self, d):
        self._initstate = [0] * self._state_words
        for p, w in zip(self._positions["const"], CONSTANT_WORDS):
            self._initstate[p] = w
        for k, v in d.items():
            cipher.check_length(k, v, self._length(k))
            for p, vv in zip(self._positions[k], self._to_ints(v)):
                self._initstate[p] = vv

    def setup(self, key, nonce, offset):
        offset %= 1 << (8 * self._length("offset"))
        self._write_initstate(dict(key=key, nonce=nonce,
            offset=offset.to_bytes(self._length("offset"), byteorder=self._byteorder)))

    def before_rounds(self):
        self._state = self._initstate[:]

    def doubleround(self):
        for positions in self._round_positions:
            result = self.quarterround([self._state[p] for p in positions])
            for p, r in zip(positions, result):
                self._state[p] = r

    def apply_rounds(self):
        for i in range(self.variant["rounds"] // 2):
            self.doubleround()

    def permute(self, words):
        """Return the result of applying all rounds to a copy of words."""
        assert len(words) == self._state_words
        self._state = list(words)
        self.apply_rounds()
        return self._state[:]

    def _read_state(self, positions):
        return self._from_ints(self._state[i] for i in positions)

    def add_initstate(self):
        for i in range(len(self._state)):
            self._state[i] = self._mod(self._state[i] + self._initstate[i])

    def run(self):
        self.before_rounds()
        self.apply_rounds()
        self.add_initstate()

    def cipher_output(self):
        return self._read_state(range(len(self._state)))

    def gen_output(self, *args, **kw):
        self.setup(*args, **kw)
        self.run()
        return self.cipher_output()

    def hash_lengths(self):
        return {"key": self.lengths()["key"], "nonceoffset": self._length("nonceoffset"),
            "output": self._length("const") + self._length("nonceoffset")}

    def setup_hash(self, key, nonceoffset):
        self._write_initstate(dict(key=key, nonceoffset=nonceoffset))

    def hash_output(self):
        return self._read_state(self._positions["const"] + self._positions["nonceoffset"])

    def hash(self, *args, **kw):
        self.setup_hash(*args, **kw)
        self.before_rounds()
        self.apply_rounds()
        return self.hash_output()

class ChaCha20RFC(Latindance):
    """ChaCha20 with the RFC 8439 layout: a 32-bit block counter in word 12
    and a 96-bit nonce in words 13-15."""

    _positions = {
        "const": list(range(4)),
        "key": list(range(4, 12)),
        "offset": [12],
        "nonce": [13, 14, 15],
    }
    _positions["nonceoffset"] = _positions["offset"] + _positions["nonce"]

    # Four columns, then four diagonals.
    _round_positions = [
        [0, 4, 8, 12],
        [1, 5, 9, 13],
        [2, 6, 10, 14],
        [3, 7, 11, 15],
        [0, 5, 10, 15],
        [1, 6, 11, 12],
        [2, 7, 8, 13],
        [3, 4, 9, 14]
    ]

    _rotls = [16, 12, 8, 7]

    def variants(self):
        yield {"cipher": self.name(), "rounds": 20, "lengths": {
            "key": self._length("key"), "nonce": self._length("nonce")}}

    def quarterround(self, l):
        a, b, c, d = tuple(l)
        r = self._rotls
        a = self._mod(a + b); d ^= a; d = self._rotl(d, r[0])
        c = self._mod(c + d); b ^= c; b = self._rotl(b, r[1])
        a = self._mod(a + b); d ^= a; d = self._rotl(d, r[2])
        c = self._mod(c + d); b ^= c; b = self._rotl(b, r[3])
        return [a, b, c, d]
