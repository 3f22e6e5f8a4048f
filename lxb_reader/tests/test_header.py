"""Tests for HEADER parsing and segment bound checks."""

from __future__ import annotations

import pytest

from lxb_reader.errors import BadMagic, MalformedOffsets, SegmentOutOfRange, TruncatedHeader
from lxb_reader.ingest.header import HEADER_SIZE, MAGIC, parse_header
from lxb_reader.models.buffer import RawBuffer
from lxb_reader.models.segments import SegmentBounds


def _header(offsets=(58, 90, 90, 98, 0, 0), magic: bytes = MAGIC) -> bytes:
    return magic + b"".join(f"{o:>8d}".encode("ascii") for o in offsets)


def test_parse_offsets() -> None:
    hdr = parse_header(_header((58, 190, 190, 1214, 0, 0)))
    assert hdr == SegmentBounds(58, 190, 190, 1214, 0, 0)


def test_parse_is_idempotent() -> None:
    buf = _header((100, 200, 300, 400, 500, 600))
    assert parse_header(buf) == parse_header(buf)


def test_exactly_58_bytes_accepted() -> None:
    buf = _header()
    assert len(buf) == HEADER_SIZE
    assert parse_header(buf).begin_text == 58


def test_57_bytes_truncated() -> None:
    with pytest.raises(TruncatedHeader):
        parse_header(_header()[:57])


def test_bad_magic() -> None:
    with pytest.raises(BadMagic):
        parse_header(_header(magic=b"FCS2.0    "))


def test_magic_requires_space_padding() -> None:
    with pytest.raises(BadMagic):
        parse_header(_header(magic=b"FCS3.0\x00\x00\x00\x00"))


def test_fields_are_whitespace_tolerant() -> None:
    buf = MAGIC + b"58      " + b"     90 " + b"\t90     " + b"      98" + b"       0" + b"       0"
    assert parse_header(buf) == SegmentBounds(58, 90, 90, 98, 0, 0)


def test_blank_field_is_malformed() -> None:
    buf = MAGIC + b"      58" + b"      90" + b"      90" + b"      98" + b" " * 8 + b"       0"
    with pytest.raises(MalformedOffsets, match="begin_analysis"):
        parse_header(buf)


def test_non_numeric_field_is_malformed() -> None:
    buf = MAGIC + b"     abc" + b"      90" + b"      90" + b"      98" + b"       0" + b"       0"
    with pytest.raises(MalformedOffsets):
        parse_header(buf)


def test_accepts_buffer_view() -> None:
    with RawBuffer(_header() + b"/a/b/") as raw:
        assert parse_header(raw.whole()).end_data == 98


# -----------------------------------------------------------------------
# SegmentBounds range checks
# -----------------------------------------------------------------------


def test_text_range_ok() -> None:
    b = SegmentBounds(58, 90, 90, 98, 0, 0)
    assert b.text_range(98) == (58, 32)
    assert b.data_range(98) == (90, 8)


@pytest.mark.parametrize(
    "begin,end,size",
    [
        (0, 10, 100),    # begin must be > 0
        (50, 50, 100),   # empty
        (60, 50, 100),   # reversed
        (58, 101, 100),  # past end of file
    ],
)
def test_range_rejects(begin: int, end: int, size: int) -> None:
    b = SegmentBounds(begin, end, begin, end, 0, 0)
    with pytest.raises(SegmentOutOfRange, match="TEXT"):
        b.text_range(size)
    with pytest.raises(SegmentOutOfRange, match="DATA"):
        b.data_range(size)
