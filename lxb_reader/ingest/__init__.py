"""Ingest package - LXB decoding stages.

Stages, in pipeline order:
- source: whole-file read into a RawBuffer
- header: fixed-offset HEADER -> SegmentBounds
- text: delimiter-split TEXT segment -> LxbMetadata
- validate: supported sub-format checks -> ParameterMasks
- data: DATA segment -> masked int32 matrix

LxbReader (reader_lxb) runs them in order and turns failures into
partial LxbFrame results instead of exceptions.
"""
