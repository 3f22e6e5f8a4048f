"""LXB Reader -- decoding of Luminex LXB (FCS3.0) flow-cytometry files.

This package provides tools for:
- Parsing the fixed-offset HEADER and the delimited TEXT keywords
- Checking that the file uses the supported sub-format
  (32-bit little-endian integers in list mode)
- Decoding the DATA segment into a parameters x events int32 matrix with
  per-parameter ``$PnR`` bit masks applied

Key principles:
- Malformed input never raises out of the reader: failures are logged and
  the coarsest valid partial result (metadata without data) is returned
- No global state: one parse, one mask table

Main subpackages:
- ingest: decoding stages and the LxbReader pipeline
- models: data models (RawBuffer, SegmentBounds, LxbMetadata, LxbFrame)
"""

from lxb_reader.ingest.reader_lxb import LxbReader, LxbReaderConfig, read_lxb, read_lxb_matrix
from lxb_reader.models.frames import LxbFrame

__version__ = "0.1.0"

__all__ = [
    "LxbReader",
    "LxbReaderConfig",
    "LxbFrame",
    "read_lxb",
    "read_lxb_matrix",
]
