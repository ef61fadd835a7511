#!/usr/bin/env python3
# tools/scan_strings.py
# Try read_string at every offset of a captured packet and print plausible hits.
from pathlib import Path
from cubecode.binary.reader import _load_bytes
from cubecode.binary.codecs.cursor import Cursor, CursorError
from cubecode.binary.codecs.cubeint import read_string
from cubecode.text import sanitize

def main(path: Path, min_len: int = 3):
    cur = Cursor(_load_bytes(str(path)))
    for off in range(len(cur)):
        sub = cur.sub_range(off, len(cur))
        try:
            s = read_string(sub)
        except CursorError:
            continue  # no terminator before the end
        clean = sanitize(s)
        if len(clean) >= min_len and clean.isprintable():
            print(f"@{off:5d} len={sub.tell():3d} {clean!r}")

if __name__ == "__main__":
    import sys
    if len(sys.argv) < 2:
        print("usage: scan_strings.py PACKET [MIN_LEN]", file=sys.stderr)
        raise SystemExit(2)
    main(Path(sys.argv[1]), int(sys.argv[2]) if len(sys.argv) > 2 else 3)
