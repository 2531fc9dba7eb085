# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import paths

def parse(fn):
    d = {}
    with (paths.other_vectors / fn).open() as f:
        for l in f:
            l = l.strip()
            if l:
                k, v = l.split("=", 1)
                d[k] = v
            elif d:
                yield d
                d = {}
    if d:
        yield d

def hash_vectors():
    """HChaCha20 subkey derivation vectors as (key, nonceoffset, subkey)."""
    for d in parse("hchacha20.txt"):
        yield {
            'description': d['COUNT'],
            'input': {'key': bytes.fromhex(d["KEY"]),
                'nonceoffset': bytes.fromhex(d["NONCE"])},
            'hash': bytes.fromhex(d["SUBKEY"]),
        }

def test_vectors(x):
    for d in parse("xchacha20.txt"):
        bd = {k: bytes.fromhex(d[k]) for k in ["KEY", "IV", "PLAINTEXT", "CIPHERTEXT"]}
        x.set_rounds_keylen(20, len(bd["KEY"]))
        yield {
            'cipher': x.variant,
            'description': d['COUNT'],
            'input': {'key': bd["KEY"], 'nonce': bd["IV"], 'offset': int(d["COUNTER"])},
            'plaintext': bd["PLAINTEXT"],
            'ciphertext': bd["CIPHERTEXT"],
        }
