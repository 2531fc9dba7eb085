# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import pytest

import cipher
import latindance
import vectors_chacha20rfc

@pytest.fixture
def chacha():
    c = latindance.ChaCha20RFC()
    c.set_rounds_keylen(20, 32)
    return c

def test_constant_is_expand_32_byte_k():
    assert latindance.CONSTANT_WORDS == (0x61707865, 0x3320646e, 0x79622d32, 0x6b206574)

def test_quarterround_rfc8439_2_1_1(chacha):
    # RFC 8439 section 2.1.1
    result = chacha.quarterround([0x11111111, 0x01020304, 0x9b8d6f43, 0x01234567])
    assert result == [0xea2a92f4, 0xcb1cf8ce, 0x4581472e, 0x5881c4bb]

def test_rotl_is_circular(chacha):
    assert chacha._rotl(0x80000001, 1) == 0x00000003
    assert chacha._rotl(0x12345678, 16) == 0x56781234
    for r in chacha._rotls:
        assert chacha._rotl(chacha._rotl(0xdeadbeef, r), 32 - r) == 0xdeadbeef

def test_additions_wrap(chacha):
    assert chacha._mod(0xffffffff + 1) == 0

def test_rfc_vectors(chacha):
    tvs = list(vectors_chacha20rfc.test_vectors(chacha))
    assert len(tvs) == 2
    for tv in tvs:
        chacha.check_testvector(tv)

def test_permute_is_pure(chacha):
    words = list(range(16))
    first = chacha.permute(words)
    assert words == list(range(16))
    assert chacha.permute(words) == first
    assert first != words

def test_block_is_permutation_plus_feed_forward(chacha):
    key = bytes(range(32))
    nonce = bytes(range(100, 112))
    block = chacha.gen_output(key=key, nonce=nonce, offset=7)
    initial = list(latindance.CONSTANT_WORDS) + chacha._to_ints(key) + [7] + chacha._to_ints(nonce)
    permuted = chacha.permute(initial)
    expected = [(a + b) & 0xffffffff for a, b in zip(permuted, initial)]
    assert block == chacha._from_ints(expected)

def test_hash_reads_first_and_last_four_words(chacha):
    key = bytes(range(32))
    nonceoffset = bytes(range(200, 216))
    initial = list(latindance.CONSTANT_WORDS) + chacha._to_ints(key) + chacha._to_ints(nonceoffset)
    permuted = chacha.permute(initial)
    subkey = chacha.hash(key=key, nonceoffset=nonceoffset)
    assert subkey == chacha._from_ints(permuted[:4] + permuted[12:])
    assert chacha.hash_lengths() == {"key": 32, "nonceoffset": 16, "output": 32}

def test_keystream_counter_wraps(chacha):
    key = b'\x07' * 32
    nonce = b'\x09' * 12
    stream = chacha.keystream(128, key=key, nonce=nonce, offset=0xffffffff)
    assert stream[:64] == chacha.gen_output(key=key, nonce=nonce, offset=0xffffffff)
    assert stream[64:] == chacha.gen_output(key=key, nonce=nonce, offset=0)

def test_keystream_truncates(chacha):
    key = b'\x07' * 32
    nonce = b'\x09' * 12
    full = chacha.keystream(192, key=key, nonce=nonce)
    for n in 0, 1, 63, 64, 65, 191:
        assert chacha.keystream(n, key=key, nonce=nonce) == full[:n]

def test_negative_keystream_length(chacha):
    with pytest.raises(ValueError):
        chacha.keystream(-1, key=bytes(32), nonce=bytes(12))

@pytest.mark.parametrize("key,nonce,what", [
    (bytes(31), bytes(12), "key"),
    (bytes(32), bytes(8), "nonce"),
])
def test_wrong_sizes(chacha, key, nonce, what):
    with pytest.raises(cipher.SizeError) as e:
        chacha.gen_output(key=key, nonce=nonce, offset=0)
    assert e.value.what == what

def test_only_twenty_rounds():
    assert [v["rounds"] for v in latindance.ChaCha20RFC().variants()] == [20]

def test_unknown_variant(chacha):
    with pytest.raises(Exception, match="Not a variant"):
        chacha.variant = {"cipher": "ChaCha20RFC", "rounds": 8, "lengths": {"key": 32, "nonce": 12}}
