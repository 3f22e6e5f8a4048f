from __future__ import annotations

from typing import Iterator, List, Tuple, Union

from lxb_reader.errors import TruncatedText, UndecodableText
from lxb_reader.models.buffer import BufferView
from lxb_reader.models.metadata import LxbMetadata


def iter_pairs(tokens: List[str]) -> Iterator[Tuple[str, str]]:
    """Consume tokens as (key, value); stop at the first key without a value."""
    for i in range(0, len(tokens) - 1, 2):
        yield tokens[i], tokens[i + 1]


def _decode(token: bytes, index: int, encoding: str) -> str:
    try:
        return token.decode(encoding)
    except UnicodeDecodeError as e:
        raise UndecodableText(
            f"TEXT token {index} ({token!r}) is not valid {encoding}: {e.reason} at byte {e.start}"
        ) from e


def parse_text(
    segment: Union[bytes, bytearray, memoryview, BufferView],
    encoding: str = "latin-1",
) -> LxbMetadata:
    """
    Parse a TEXT segment into keyword/value pairs.

    The first byte is the delimiter. Doubled delimiters are not treated as
    escapes: ``/k//ey/value/`` gives ``{"k": "", "ey": "value"}``.
    """
    raw = segment.tobytes() if isinstance(segment, BufferView) else bytes(segment)
    if len(raw) < 2:
        raise TruncatedText(f"TEXT segment too short ({len(raw)} bytes)")

    delim = raw[:1]
    tokens = [_decode(t, i, encoding) for i, t in enumerate(raw[1:].split(delim))]
    return LxbMetadata(iter_pairs(tokens))
