# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import crosscheck
import demo
import dumphex

def test_crosscheck(capsys):
    crosscheck.main(["--num-msgs", "6", "--avg-msgsize", "150", "--seed", "1"])
    assert "OK: 6 messages" in capsys.readouterr().out

def test_stream_demo(capsys):
    assert demo.main(["stream", "--key", "01" * 32, "--nonce", "02" * 24, "--length", "64"]) == 0
    out = capsys.readouterr().out
    assert "Matches pycryptodomex keystream: YES" in out
    assert "Round trip: YES" in out
    assert "c1 XOR c2 == m1 XOR m2: YES" in out
    assert "b6 bb 0e e1" in out

def test_stream_demo_random_key():
    assert demo.main(["stream", "--counter", "9"]) == 0

def test_mac_demo(capsys):
    assert demo.main(["mac", "--key", "01" * 32, "--message", "x"]) == 0
    out = capsys.readouterr().out
    assert "191a9afc1b1a9afc1b1a9afc1b1a9adc" in out
    assert "Tampered verifies:     NO" in out
    assert "Tags differ across keys: YES" in out

def test_mac_demo_default_messages():
    assert demo.main(["mac"]) == 0

def test_bad_key(capsys):
    assert demo.main(["mac", "--key", "0102"]) == 2
    assert "Expected 32 bytes" in capsys.readouterr().err

def test_hexlines():
    lines = list(dumphex.hexlines(b"Hello, World!\x00\x01\x02\x03 more"))
    assert len(lines) == 2
    assert lines[0].startswith("       0  48 65 6c 6c 6f")
    assert lines[0].endswith("Hello, World!...")
    assert lines[1].startswith("      10  ")
    assert lines[1].endswith(" more")
