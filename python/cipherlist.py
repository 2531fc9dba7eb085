# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import authenticator
import latindance
import poly1305
import xconstruct

all_ciphers = [
    latindance.ChaCha20RFC(),
    xconstruct.XConstruct(latindance.ChaCha20RFC()),
    poly1305.Poly1305(),
    authenticator.ClampedPoly1305(),
]

def lookup(names):
    by_name = {c.name(): c for c in all_ciphers}
    for n in names:
        if n not in by_name:
            raise Exception(f"Unknown cipher {n}, expected one of: {', '.join(by_name)}")
        yield by_name[n]
