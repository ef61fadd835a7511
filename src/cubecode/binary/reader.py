from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional, Union

from .codecs.cursor import Cursor
from .codecs.cubeint import read_int, read_string
from cubecode.models.config import DecodeOptions
from cubecode.models.packet import DecodedField, DecodedPacket, FieldKind
from cubecode.text import sanitize

log = logging.getLogger(__name__)

BytesLike = Union[str, Path, bytes, bytearray, memoryview]


class LayoutError(ValueError):
    pass


_READERS: Dict[FieldKind, Callable[[Cursor], Union[int, str]]] = {
    FieldKind.BYTE: Cursor.read_byte,
    FieldKind.INT: read_int,
    FieldKind.STRING: read_string,
}


# -----------------------------
# Helpers
# -----------------------------

def _load_bytes(inp: BytesLike) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    p = Path(str(inp))
    return p.read_bytes()


def parse_layout(layout: str) -> List[FieldKind]:
    """'iis' -> [INT, INT, STRING]; whitespace is ignored."""
    kinds = []
    for pos, ch in enumerate(layout):
        if ch.isspace():
            continue
        try:
            kinds.append(FieldKind(ch))
        except ValueError:
            raise LayoutError(f"unknown field kind {ch!r} at layout position {pos}") from None
    return kinds


# -----------------------------
# Decoding
# -----------------------------

def decode_layout(
    data: BytesLike,
    layout: str,
    *,
    offset: int = 0,
    options: Optional[DecodeOptions] = None,
) -> DecodedPacket:
    """
    Decode the fields named by `layout` starting at `offset`.
    Cursor errors (Overread, BufferTooShort, InvalidRange) propagate as-is.
    """
    opts = options or DecodeOptions()
    kinds = parse_layout(layout)

    raw = _load_bytes(data)
    cur = Cursor(raw).sub_range(offset, len(raw))

    fields: List[DecodedField] = []
    for i, kind in enumerate(kinds):
        start = cur.tell()
        value = _READERS[kind](cur)
        if kind is FieldKind.STRING and opts.sanitize_strings:
            value = sanitize(value, strip_nulls=opts.strip_nulls)
        fields.append(DecodedField(
            index=i, kind=kind, offset=offset + start, size=cur.tell() - start, value=value,
        ))
        log.debug("field %d %s @%d: %r", i, kind.value, offset + start, value)

    return DecodedPacket(
        length=len(raw),
        fields=fields,
        consumed=cur.tell(),
        remaining=cur.remaining(),
    )


def iter_ints(data: BytesLike) -> Iterator[int]:
    """Stream every compressed int until the buffer is exhausted."""
    cur = Cursor(_load_bytes(data))
    while cur.has_remaining():
        yield read_int(cur)
