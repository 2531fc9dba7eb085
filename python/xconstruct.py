# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import cipher
import latindance

class XConstruct(latindance.Latinlike):
    """Extended-nonce construction over a Latindance delegate.

    The first part of the nonce and the key go through the delegate's hash
    to make a subkey; the remaining nonce bytes, left-padded with zeros to
    the delegate's nonce length, key the delegate under that subkey.
    """

    # draft-irtf-cfrg-xchacha: eight nonce bytes reach the delegate
    _nonce_suffix = 8

    def __init__(self, delegate):
        self._delegate = delegate

    def name(self):
        return "X" + self._delegate.name()

    def variant_name(self):
        return "X" + self._delegate.variant_name()

    def variants(self):
        d = self._delegate.copy()
        for v in d.variants():
            d.variant = v
            dhl = d.hash_lengths()
            dl = d.lengths()
            # The subkey must be usable as a delegate key.
            if dhl["output"] == dl["key"] and dl["nonce"] >= self._nonce_suffix:
                yield {"cipher": self.name(), "rounds": v["rounds"],
                    "delegatevariant": v, "lengths": {
                        "key": dhl["key"],
                        "nonce": dhl["nonceoffset"] + self._nonce_suffix}}

    def _setup_variant(self):
        self._delegate.variant = self.variant["delegatevariant"]

    def subkey(self, key, nonce):
        """Returns the delegate key and nonce for the given key and extended nonce."""
        cipher.check_length("nonce", nonce, self.lengths()["nonce"])
        ks = self._delegate.copy()
        nl = ks.hash_lengths()["nonceoffset"]
        subkey = ks.hash(key=key, nonceoffset=nonce[:nl])
        return subkey, nonce[nl:].rjust(ks.lengths()["nonce"], b'\0')

    def keystream(self, length, key, nonce, offset=0):
        subkey, dnonce = self.subkey(key, nonce)
        ks = self._delegate.copy()
        return ks.keystream(length, key=subkey, nonce=dnonce, offset=offset)

    def gen_output(self, key, nonce, offset):
        subkey, dnonce = self.subkey(key, nonce)
        return self._delegate.copy().gen_output(key=subkey, nonce=dnonce, offset=offset)
