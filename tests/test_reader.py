import pytest

from cubecode.binary.codecs.cursor import BufferTooShort, InvalidRange, Overread
from cubecode.binary.reader import LayoutError, decode_layout, iter_ints, parse_layout
from cubecode.models.config import DecodeOptions, FormatRevision
from cubecode.models.packet import FieldKind

# N_TEXT-like message: type, client num, colored text
PACKET = b"\x05\x80\x2c\x01\f3hi\x00\x00\x09"


def test_parse_layout():
    assert parse_layout("i i s b") == [FieldKind.INT, FieldKind.INT, FieldKind.STRING, FieldKind.BYTE]
    with pytest.raises(LayoutError):
        parse_layout("ix")


def test_decode_layout_fields_and_offsets():
    pkt = decode_layout(PACKET, "iis")
    assert pkt.length == len(PACKET)
    assert [f.value for f in pkt.fields] == [5, 300, "\f3hi"]
    assert [(f.offset, f.size) for f in pkt.fields] == [(0, 1), (1, 3), (4, 5)]
    assert pkt.consumed == 9 and pkt.remaining == 2


def test_decode_layout_sanitizes_when_asked():
    pkt = decode_layout(PACKET, "iis", options=DecodeOptions(sanitize_strings=True))
    assert pkt.fields[-1].value == "hi"


def test_decode_layout_legacy_keeps_nuls():
    data = b"a\x80\x00\x01\x00"  # 'a', then 256 -> NUL, then terminator
    current = decode_layout(data, "s", options=DecodeOptions(sanitize_strings=True))
    legacy = decode_layout(data, "s", options=DecodeOptions(
        sanitize_strings=True, revision=FormatRevision.LEGACY,
    ))
    assert current.fields[0].value == "a"
    assert legacy.fields[0].value == "a\x00"


def test_decode_layout_offset():
    pkt = decode_layout(PACKET, "ib", offset=9)
    assert [f.value for f in pkt.fields] == [0, 9]
    assert pkt.fields[1].offset == 10
    assert pkt.remaining == 0


def test_decode_layout_errors_propagate():
    with pytest.raises(Overread):
        decode_layout(PACKET, "iisbbb")
    with pytest.raises(InvalidRange):
        decode_layout(PACKET, "i", offset=len(PACKET) + 1)
    with pytest.raises(BufferTooShort):
        decode_layout(PACKET, "i", offset=len(PACKET))


def test_decode_layout_from_path(tmp_path):
    p = tmp_path / "pkt.bin"
    p.write_bytes(PACKET)
    pkt = decode_layout(p, "i")
    assert pkt.fields[0].value == 5


def test_json_dump_uses_kind_codes():
    dumped = decode_layout(PACKET, "ib").model_dump(mode="json")
    assert dumped["fields"][0]["kind"] == "i"
    assert dumped["fields"][1] == {"index": 1, "kind": "b", "offset": 1, "size": 1, "value": 0x80}


def test_iter_ints():
    assert list(iter_ints(b"\x01\xff\x80\x00\x01")) == [1, -1, 256]
    with pytest.raises(Overread):
        list(iter_ints(b"\x01\x81\x00"))
