# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import hexjson
import paths

def test_vectors(ch):
    for t in hexjson.iter_unhex(paths.other_vectors / "poly1305.json"):
        yield {
            'cipher': ch.variant,
            'description': f"{t['description']}: message of length {len(t['message'])}",
            'input': {
                'key': t["key"],
                'message': t["message"],
            },
            'mac': t["mac"],
        }
