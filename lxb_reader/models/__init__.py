from .buffer import BufferView, RawBuffer
from .frames import LxbFrame
from .masks import ParameterMasks
from .metadata import MAX_PAR, LxbMetadata, parameter_key
from .segments import SegmentBounds

__all__ = [
    "BufferView",
    "RawBuffer",
    "LxbFrame",
    "ParameterMasks",
    "MAX_PAR",
    "LxbMetadata",
    "parameter_key",
    "SegmentBounds",
]
