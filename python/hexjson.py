# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""JSON with bytes values stored under keys ending "_hex".

A value longer than one line is written as a list of hex strings of at
most line_bytes bytes each; either form is read back.
"""

import json

line_bytes = 32

def _hex_value(b):
    if len(b) <= line_bytes:
        return b.hex()
    return [b[i:i + line_bytes].hex() for i in range(0, len(b), line_bytes)]

def _unhex_value(v):
    if type(v) == list:
        return b''.join(bytes.fromhex(l) for l in v)
    return bytes.fromhex(v)

def recursive_hex(o):
    if type(o) == dict:
        res = {}
        for k, v in o.items():
            if k.endswith("_hex"):
                raise Exception(f"Disallowed dict key {k}: we reserve keys that end _hex")
            if type(v) in (bytes, bytearray):
                res[k + "_hex"] = _hex_value(v)
            else:
                res[k] = recursive_hex(v)
        return res
    elif type(o) == list:
        return [recursive_hex(i) for i in o]
    elif type(o) in (bytes, bytearray):
        raise Exception("Can't recursive_hex bytes not contained in dict")
    else:
        return o

def recursive_unhex(o):
    if type(o) == dict:
        res = {}
        for k, v in o.items():
            if k.endswith("_hex"):
                res[k[:-4]] = _unhex_value(v)
            else:
                res[k] = recursive_unhex(v)
        return res
    elif type(o) == list:
        return [recursive_unhex(i) for i in o]
    else:
        return o

def write_using_hex(fn, it):
    fn.parent.mkdir(parents=True, exist_ok=True)
    with fn.open("w") as f:
        json.dump([recursive_hex(tv) for tv in it], f, indent=4)

def loadjson(fn):
    with fn.open() as f:
        return json.load(f)

def iter_unhex(fn):
    for htv in loadjson(fn):
        yield recursive_unhex(htv)
