from __future__ import annotations

import logging
from typing import Mapping, Union

import numpy as np

from lxb_reader.errors import InvalidDimensions, SegmentOutOfRange
from lxb_reader.models.buffer import BufferView
from lxb_reader.models.masks import ParameterMasks
from lxb_reader.models.metadata import as_metadata

logger = logging.getLogger(__name__)

WORD = np.dtype("<i4")


def decode_data(
    meta: Mapping[str, str],
    masks: ParameterMasks,
    segment: Union[bytes, bytearray, memoryview, BufferView],
    strict_length: bool = False,
) -> np.ndarray:
    """
    Decode the DATA segment into an int32 matrix of shape ``($PAR, $TOT)``.

    On disk values are event-major: all parameters of event 0, then event 1, ...
    The result is addressed ``matrix[param, event]``. A non-zero mask is
    ANDed into every value of its parameter; a zero mask leaves raw values.

    ``$PAR * $TOT`` words are a hard cap: a segment shorter than that is
    rejected instead of read past its end.
    """
    txt = as_metadata(meta)
    npar = txt.get_int("$PAR")
    ntot = txt.get_int("$TOT")
    if npar < 0 or ntot < 0:
        raise InvalidDimensions(f"negative matrix dimensions ($PAR={npar}, $TOT={ntot})")

    mem = segment.memory() if isinstance(segment, BufferView) else memoryview(segment)
    n = npar * ntot
    need = n * WORD.itemsize
    have = len(mem)
    if have < need:
        raise SegmentOutOfRange(
            f"DATA segment too small: {have} bytes for $PAR={npar} x $TOT={ntot} (need {need})"
        )
    if have != need:
        if strict_length:
            raise SegmentOutOfRange(
                f"DATA segment length {have} does not match $PAR={npar} x $TOT={ntot} (expected {need})"
            )
        logger.debug("DATA segment has %d trailing bytes beyond %d expected", have - need, need)

    if n == 0:
        return np.zeros((npar, ntot), dtype=np.int32)

    # Copy out of the view: the matrix must outlive the file buffer.
    raw = np.frombuffer(mem, dtype=WORD, count=n).astype(np.int32)
    mat = raw.reshape((ntot, npar)).T.copy()

    m = masks.as_array(npar)
    bits = mat.view(np.uint32)
    np.bitwise_and(bits, m, out=bits, where=(m != 0))

    mat.setflags(write=False)
    return mat
