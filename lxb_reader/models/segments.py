from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from lxb_reader.errors import SegmentOutOfRange


@dataclass(frozen=True)
class SegmentBounds:
    """
    Byte offsets of the TEXT, DATA and ANALYSIS segments, as written in the HEADER.

    Values are stored exactly as parsed; nothing is checked at construction.
    Consumers call :meth:`text_range` / :meth:`data_range`, which require
    ``end > begin > 0`` and ``end <= size`` and return ``(offset, length)``
    of the half-open range ``[begin, end)``. ANALYSIS offsets are kept for
    completeness only.
    """
    begin_text: int
    end_text: int
    begin_data: int
    end_data: int
    begin_analysis: int
    end_analysis: int

    def text_range(self, size: int) -> Tuple[int, int]:
        return _checked("TEXT", self.begin_text, self.end_text, size)

    def data_range(self, size: int) -> Tuple[int, int]:
        return _checked("DATA", self.begin_data, self.end_data, size)


def _checked(name: str, begin: int, end: int, size: int) -> Tuple[int, int]:
    if not (end - begin > 0 and begin > 0 and end <= size):
        raise SegmentOutOfRange(
            f"could not locate {name} segment: begin={begin}, end={end}, file size={size}"
        )
    return begin, end - begin
