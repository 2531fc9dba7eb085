# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

def groupto(it, l):
    res = []
    for i in it:
        res.append(i)
        if len(res) == l:
            yield res
            res = []
    if res:
        yield res

def hexlines(b, width=16):
    """Offset, hex bytes and printable ASCII, one line per width bytes."""
    for i, l in enumerate(groupto(b, width)):
        text = ''.join(chr(e) if 0x20 <= e < 0x7f else '.' for e in l)
        yield f"{i*width:8x}  {' '.join(f'{e:02x}' for e in l):<{3*width - 1}}  {text}"

def dumphex(b, width=16):
    for l in hexlines(b, width):
        print(l)
