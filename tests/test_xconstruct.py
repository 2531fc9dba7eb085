# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import pytest

import cipher
import latindance
import vectors_xchacha20
import xconstruct

@pytest.fixture
def xchacha():
    x = xconstruct.XConstruct(latindance.ChaCha20RFC())
    x.set_rounds_keylen(20, 32)
    return x

def test_names(xchacha):
    assert xchacha.name() == "XChaCha20RFC"
    assert xchacha.variant_name() == "XChaCha20RFC"
    assert xchacha.lengths() == {"key": 32, "nonce": 24}

def test_hchacha20_vectors():
    ch = latindance.ChaCha20RFC()
    ch.set_rounds_keylen(20, 32)
    tvs = list(vectors_xchacha20.hash_vectors())
    assert tvs
    for tv in tvs:
        assert ch.hash(**tv["input"]) == tv["hash"]

def test_xchacha20_vectors(xchacha):
    tvs = list(vectors_xchacha20.test_vectors(xchacha))
    assert len(tvs) == 2
    for tv in tvs:
        xchacha.check_testvector(tv)

def test_subkey_and_padded_nonce(xchacha):
    key = bytes(range(32))
    nonce = bytes(range(50, 74))
    ch = latindance.ChaCha20RFC()
    ch.set_rounds_keylen(20, 32)
    subkey, dnonce = xchacha.subkey(key, nonce)
    assert subkey == ch.hash(key=key, nonceoffset=nonce[:16])
    assert dnonce == b'\0\0\0\0' + nonce[16:]

def test_keystream_matches_blocks(xchacha):
    key = bytes(range(32))
    nonce = bytes(range(50, 74))
    stream = xchacha.keystream(130, key=key, nonce=nonce, offset=3)
    blocks = b''.join(xchacha.gen_output(key=key, nonce=nonce, offset=o) for o in (3, 4, 5))
    assert stream == blocks[:130]

def test_wrong_nonce_size(xchacha):
    with pytest.raises(cipher.SizeError) as e:
        xchacha.keystream(10, key=bytes(32), nonce=bytes(16))
    assert e.value.what == "nonce"
    assert e.value.expected == 24

def test_wrong_key_size(xchacha):
    with pytest.raises(cipher.SizeError) as e:
        xchacha.keystream(10, key=bytes(16), nonce=bytes(24))
    assert e.value.what == "key"
