#!/usr/bin/env python3
#
# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""Write or check test vectors for the ciphers in cipherlist."""

import argparse
import pathlib

import cipherlist
import hexjson
import inputgen
import paths

def generate_testvectors(cipher):
    for lengths in cipher.test_input_lengths():
        for tv, d in inputgen.generate_testinputs(lengths):
            yield cipher.make_testvector(tv, d)

def vector_file(cipher, path):
    return path / cipher.name() / "{}.json".format(cipher.variant_name())

def write_tests(cipher, path):
    for v in cipher.variants():
        cipher.variant = v
        p = vector_file(cipher, path)
        print(f"Writing: {p}")
        hexjson.write_using_hex(p, generate_testvectors(cipher))

def check_testvector(cipher, tv, verbose):
    cipher.check_testvector(tv)
    if verbose:
        print(f"OK: {tv['description']}")

def check_tests(cipher, path, verbose):
    count = 0
    for fn in sorted((path / cipher.name()).iterdir()):
        print(f"======== {fn.name} ========")
        for tv in hexjson.iter_unhex(fn):
            check_testvector(cipher, tv, verbose)
            count += 1
    return count

def parse_args(argv=None):
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument('action', choices=['write', 'check'])
    p.add_argument('--path', type=pathlib.Path, default=paths.our_vectors,
                   help='directory holding one subdirectory per cipher')
    p.add_argument('--cipher', action='append', dest='ciphers',
                   help='only this cipher (may be repeated)')
    p.add_argument('-v', '--verbose', action='store_true')
    return p.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    ciphers = cipherlist.lookup(args.ciphers) if args.ciphers else cipherlist.all_ciphers
    for c in ciphers:
        if args.action == 'write':
            write_tests(c, args.path)
        else:
            print(f"Checked {check_tests(c, args.path, args.verbose)} {c.name()} vectors")

if __name__ == "__main__":
    main()
