"""Builders for synthetic LXB files, shared by the test suite."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from lxb_reader.ingest.header import MAGIC


def build_text(pairs: Sequence[Tuple[str, str]], delim: str = "/") -> bytes:
    body = delim + "".join(f"{k}{delim}{v}{delim}" for k, v in pairs)
    return body.encode("latin-1")


def build_lxb(
    pairs: Sequence[Tuple[str, str]],
    values: Sequence[int] = (),
    delim: str = "/",
    magic: bytes = MAGIC,
    data_bytes: Optional[bytes] = None,
) -> bytes:
    """Synthetic LXB file: HEADER at 0, TEXT at 58, DATA right after TEXT."""
    text = build_text(pairs, delim)
    data = data_bytes if data_bytes is not None else np.asarray(values, dtype="<i4").tobytes()
    begin_text = 58
    end_text = begin_text + len(text)
    begin_data = end_text
    end_data = begin_data + len(data)
    offsets = (begin_text, end_text, begin_data, end_data, 0, 0)
    header = magic + b"".join(f"{o:>8d}".encode("ascii") for o in offsets)
    return header + text + data


def fsc_pairs(**overrides: str) -> List[Tuple[str, str]]:
    """Keywords of the one-parameter, two-event reference file."""
    base = [
        ("$PAR", "1"),
        ("$DATATYPE", "I"),
        ("$MODE", "L"),
        ("$BYTEORD", "1,2,3,4"),
        ("$TOT", "2"),
        ("$P1B", "32"),
        ("$P1N", "FSC"),
        ("$P1R", "1024"),
    ]
    out = [(k, overrides.pop(k[1:], v)) for k, v in base]
    out.extend((f"${name}", v) for name, v in overrides.items())
    return out
