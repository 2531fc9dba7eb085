#!/usr/bin/env python3
#
# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""Demonstrate XChaCha20 and the one-time authenticator."""

import argparse
import sys

import Cryptodome.Cipher.ChaCha20
import Cryptodome.Random

import authenticator
import cipher
import dumphex
import xchacha20

def fixed_or_random(hexvalue, length):
    if hexvalue is None:
        return Cryptodome.Random.get_random_bytes(length)
    b = bytes.fromhex(hexvalue)
    cipher.check_length("hex argument", b, length)
    return b

def show(label, b):
    print(f"{label} ({len(b)} bytes):")
    dumphex.dumphex(b)
    print()

def yes_no(flag):
    return "YES" if flag else "NO"

def stream_demo(args):
    key = fixed_or_random(args.key, xchacha20.KEY_BYTES)
    nonce = fixed_or_random(args.nonce, xchacha20.NONCE_BYTES)
    show("Key", key)
    show("Nonce", nonce)

    ours = xchacha20.XChaCha20(key, nonce, args.counter)
    stream = ours.keystream(args.length)
    show("Keystream", stream)

    lib = Cryptodome.Cipher.ChaCha20.new(key=key, nonce=nonce)
    lib.seek(args.counter * xchacha20.BLOCK_BYTES)
    lib_stream = lib.encrypt(bytes(args.length))
    print(f"Matches pycryptodomex keystream: {yes_no(stream == lib_stream)}")
    print()

    message = args.message.encode()
    ciphertext = ours.encrypt(message)
    show("Ciphertext", ciphertext)
    lib = Cryptodome.Cipher.ChaCha20.new(key=key, nonce=nonce)
    lib.seek(args.counter * xchacha20.BLOCK_BYTES)
    decrypted = lib.decrypt(ciphertext)
    print(f"Decrypted by pycryptodomex: {decrypted.decode(errors='replace')}")
    print(f"Round trip: {yes_no(decrypted == message)}")
    print()

    # The object restarts from its counter on every call, like reusing a nonce.
    other = bytes(reversed(message))
    leaked = cipher.xor_bytes(ciphertext, ours.encrypt(other))
    print("Encrypting a second message with the same object:")
    print(f"  c1 XOR c2 == m1 XOR m2: {yes_no(leaked == cipher.xor_bytes(message, other))}")
    return stream == lib_stream and decrypted == message

def mac_messages(args):
    if args.message:
        return [m.encode() for m in args.message]
    return [
        b"Hello, World!",
        b"This is a test message for the one-time authenticator.",
        b"",
        b"A" * 16,
        b"B" * 32,
        b"Short",
        b"Long message for testing. " * 10,
        bytes(range(16)),
    ]

def mac_demo(args):
    key = fixed_or_random(args.key, authenticator.KEY_BYTES)
    show("Key", key)
    auth = authenticator.Authenticator(key)
    ok = True
    for message in mac_messages(args):
        tag = auth.compute(message)
        valid = auth.verify(message, tag)
        tampered = auth.verify(message + b"tampered", tag)
        ok = ok and valid and not tampered
        print(f"Message: {message[:50]!r} ({len(message)} bytes)")
        print(f"  Tag:                   {tag.hex()}")
        print(f"  Verifies:              {yes_no(valid)}")
        print(f"  Tampered verifies:     {yes_no(tampered)}")

    message = b"Same message, different keys"
    tag1 = authenticator.Authenticator(b"\x01" * authenticator.KEY_BYTES).compute(message)
    tag2 = authenticator.Authenticator(b"\x02" * authenticator.KEY_BYTES).compute(message)
    print(f"Tags differ across keys: {yes_no(tag1 != tag2)}")
    return ok and tag1 != tag2

def parse_args(argv=None):
    p = argparse.ArgumentParser(description=__doc__)
    sub = p.add_subparsers(dest='command', required=True)

    s = sub.add_parser('stream', help='keystream, encryption and nonce reuse')
    s.add_argument('--key', help='32-byte key in hex (default: random)')
    s.add_argument('--nonce', help='24-byte nonce in hex (default: random)')
    s.add_argument('--counter', type=int, default=0, help='initial block counter')
    s.add_argument('--length', type=int, default=128, help='keystream bytes to show')
    s.add_argument('--message', default="Hello, this is a secret message!")
    s.set_defaults(func=stream_demo)

    m = sub.add_parser('mac', help='tag and verify messages')
    m.add_argument('--key', help='32-byte key in hex (default: random)')
    m.add_argument('--message', action='append',
                   help='message to authenticate (may be repeated)')
    m.set_defaults(func=mac_demo)
    return p.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    try:
        ok = args.func(args)
    except ValueError as e:
        sys.stderr.write(f'Error: {e}\n')
        return 2
    return 0 if ok else 1

if __name__ == "__main__":
    sys.exit(main())
