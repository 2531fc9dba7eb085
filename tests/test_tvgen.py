# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import json

import pytest

import cipherlist
import inputgen
import tvgen

@pytest.mark.parametrize("name", ["ClampedPoly1305", "Poly1305", "XChaCha20RFC"])
def test_write_then_check(tmp_path, capsys, name):
    tvgen.main(["write", "--path", str(tmp_path), "--cipher", name])
    fn = tmp_path / name / f"{name}.json"
    assert fn.exists()
    tvgen.main(["check", "--path", str(tmp_path), "--cipher", name])
    out = capsys.readouterr().out
    assert f"Writing: {fn}" in out
    assert f"{name} vectors" in out

def test_check_detects_corruption(tmp_path):
    tvgen.main(["write", "--path", str(tmp_path), "--cipher", "ClampedPoly1305"])
    fn = tmp_path / "ClampedPoly1305" / "ClampedPoly1305.json"
    with fn.open() as f:
        tvs = json.load(f)
    tvs[0]["mac_hex"] = "00" * 16
    with fn.open("w") as f:
        json.dump(tvs, f)
    c = next(cipherlist.lookup(["ClampedPoly1305"]))
    with pytest.raises(AssertionError):
        tvgen.check_tests(c, tmp_path, False)

def test_vectors_cover_counter_wrap():
    c = next(cipherlist.lookup(["XChaCha20RFC"]))
    c.set_rounds_keylen(20, 32)
    tv = next(tvgen.generate_testvectors(c))
    offsets = [t["input"]["offset"] for t in tv["tests"]]
    assert 0 in offsets
    assert 0xffffffff in offsets

def test_lookup_unknown():
    with pytest.raises(Exception, match="Unknown cipher"):
        list(cipherlist.lookup(["AES"]))

def test_inputs_are_deterministic():
    lengths = {"key": 32, "message": 17}
    first = list(inputgen.generate_testinputs(lengths))
    assert first == list(inputgen.generate_testinputs(lengths))
    for d, description in first:
        assert {k: len(v) for k, v in d.items()} == lengths

def test_onebit_inputs():
    inputs = list(inputgen.generate_onebit({"key": 4}))
    assert len(inputs) == inputgen.example_count
    assert inputs[0] == ({"key": b'\x01\0\0\0'}, "Set bit 0 of key")
    assert inputs[-1] == ({"key": b'\0\0\0\x80'}, "Set bit 31 of key")

def test_empty_message_inputs():
    inputs = list(inputgen.generate_testinputs({"key": 32, "message": 0}))
    assert inputs
    assert all(d["message"] == b"" for d, _ in inputs)
