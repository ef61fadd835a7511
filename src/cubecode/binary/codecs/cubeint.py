from __future__ import annotations
from .cursor import Cursor, BufferTooShort
from ..charset import cube_to_uni

# Lead bytes selecting a wider little-endian payload; neither carries value bits.
INT16_MARK = 0x80
INT32_MARK = 0x81

_WIDTHS = {INT16_MARK: 2, INT32_MARK: 4}


def _read_le(cur: Cursor, n: int) -> int:
    # byte by byte so a truncated payload leaves pos after the last byte read
    raw = bytes(cur.read_byte() for _ in range(n))
    return int.from_bytes(raw, "little", signed=True)


def read_int(cur: Cursor) -> int:
    """
    Decode one compressed int:
      0x80 + 2 bytes  -> int16 LE
      0x81 + 4 bytes  -> int32 LE
      anything else   -> the byte itself as int8 (0xFF is -1)
    """
    if len(cur) < 1:
        raise BufferTooShort()

    b = cur.read_byte()
    width = _WIDTHS.get(b)
    if width is None:
        return b - 256 if b & 0x80 else b
    return _read_le(cur, width)


def read_string(cur: Cursor) -> str:
    """Read ints up to a decoded 0 and map each through the cube charset."""
    out = []
    v = read_int(cur)
    while v != 0:
        out.append(cube_to_uni(v))
        v = read_int(cur)
    return "".join(out)
