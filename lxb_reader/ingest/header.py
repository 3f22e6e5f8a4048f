"""HEADER segment parsing.

Layout (0-based byte offsets)::

    [0, 10)    version, "FCS3.0" padded with spaces
    [10, 18)   TEXT begin
    [18, 26)   TEXT end
    [26, 34)   DATA begin
    [34, 42)   DATA end
    [42, 50)   ANALYSIS begin
    [50, 58)   ANALYSIS end

Offsets are right-justified ASCII decimal integers.
"""

from __future__ import annotations

import re
from typing import Union

from lxb_reader.errors import BadMagic, MalformedOffsets, TruncatedHeader
from lxb_reader.models.buffer import BufferView
from lxb_reader.models.segments import SegmentBounds

MAGIC = b"FCS3.0    "
HEADER_SIZE = 58
FIELD_WIDTH = 8

_FIELDS = (
    ("begin_text", 10),
    ("end_text", 18),
    ("begin_data", 26),
    ("end_data", 34),
    ("begin_analysis", 42),
    ("end_analysis", 50),
)

_INT_FIELD = re.compile(rb"[ \t\n\r\f\v]*([+-]?[0-9]+)")


def _parse_field(raw: bytes, name: str) -> int:
    m = _INT_FIELD.match(raw)
    if not m:
        raise MalformedOffsets(f"failed to parse segment offsets: {name}={raw!r}")
    return int(m.group(1))


def parse_header(buf: Union[bytes, bytearray, memoryview, BufferView]) -> SegmentBounds:
    if isinstance(buf, BufferView):
        buf = buf.memory()
    size = len(buf)
    if size < HEADER_SIZE:
        raise TruncatedHeader(f"header data is too small ({size} bytes, need {HEADER_SIZE})")

    head = bytes(buf[:HEADER_SIZE])
    if head[: len(MAGIC)] != MAGIC:
        raise BadMagic(f"magic bytes do not match: expected {MAGIC!r}, got {head[:len(MAGIC)]!r}")

    values = {name: _parse_field(head[off : off + FIELD_WIDTH], name) for name, off in _FIELDS}
    return SegmentBounds(**values)
