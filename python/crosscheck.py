#!/usr/bin/env python3
#
# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import argparse
import random
import sys

import Cryptodome.Cipher.ChaCha20

import xchacha20

def fail(msg):
    sys.stderr.write(f'Error: {msg}\n')
    sys.exit(1)

class LibraryImpl():
    """XChaCha20 from pycryptodomex, which selects it for 24-byte nonces."""

    def _cipher(self, key, nonce, counter):
        c = Cryptodome.Cipher.ChaCha20.new(key=key, nonce=nonce)
        c.seek(counter * xchacha20.BLOCK_BYTES)
        return c

    def encrypt(self, plaintext, key, nonce, counter):
        return self._cipher(key, nonce, counter).encrypt(plaintext)

    def decrypt(self, ciphertext, key, nonce, counter):
        return self._cipher(key, nonce, counter).decrypt(ciphertext)

class ReferenceImpl():
    def encrypt(self, plaintext, key, nonce, counter):
        return xchacha20.XChaCha20(key, nonce, counter).encrypt(plaintext)

    def decrypt(self, ciphertext, key, nonce, counter):
        return xchacha20.XChaCha20(key, nonce, counter).decrypt(ciphertext)

def random_counter(r, size):
    # The library refuses to run its 32-bit block counter past the end.
    blocks = -(-size // xchacha20.BLOCK_BYTES)
    if r.randrange(4) == 0:
        return 0
    return r.randrange((1 << 32) - blocks)

def do_test_impl(args, lib_impl, ref_impl):
    r = random.Random(args.seed)
    sizes = []

    for _ in range(args.num_msgs):
        size = max(1, int(r.expovariate(1 / args.avg_msgsize)))
        orig_msg = bytes(r.getrandbits(8) for _ in range(size))
        key = bytes(r.getrandbits(8) for _ in range(xchacha20.KEY_BYTES))
        nonce = bytes(r.getrandbits(8) for _ in range(xchacha20.NONCE_BYTES))
        counter = random_counter(r, size)

        sizes.append(size)

        ref_ctext = ref_impl.encrypt(orig_msg, key, nonce, counter)
        lib_ctext = lib_impl.encrypt(orig_msg, key, nonce, counter)
        if ref_ctext != lib_ctext:
            fail(f'Encryption results differed (size {size}, counter {counter})')

        ref_ptext = ref_impl.decrypt(ref_ctext, key, nonce, counter)
        lib_ptext = lib_impl.decrypt(ref_ctext, key, nonce, counter)
        if ref_ptext != lib_ptext:
            fail(f'Decryption results differed (size {size}, counter {counter})')
        if ref_ptext != orig_msg:
            fail("Decryption didn't invert encryption")

    return sizes

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="""Verify that the
    reference XChaCha20 produces the same results as pycryptodomex.""")
    parser.add_argument('--num-msgs', type=int, default=128,
                        help='number of messages to test')
    parser.add_argument('--avg-msgsize', type=int, default=1024,
                        help='typical message size in bytes')
    parser.add_argument('--seed', type=int, default=None,
                        help='random seed, for a repeatable run')
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)

    print('Arguments:')
    print(f'\tNumber of messages:                 {args.num_msgs}')
    print(f'\tTypical message size:               {args.avg_msgsize}')
    print(f'\tSeed:                               {args.seed}')
    print('')

    sizes = do_test_impl(args, LibraryImpl(), ReferenceImpl())
    print(f'OK: {len(sizes)} messages, {sum(sizes)} bytes')

if __name__ == "__main__":
    main()
