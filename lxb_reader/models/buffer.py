from __future__ import annotations

from pathlib import Path
from typing import Optional

from lxb_reader.errors import BufferReleasedError


class RawBuffer:
    """
    Owner of the full contents of one LXB file for the duration of a parse.

    Contract:
      - contents are immutable bytes.
      - all segment access goes through :class:`BufferView` objects created by
        :meth:`view`; a view refuses access once the buffer has been released.
      - :meth:`release` is idempotent; using the buffer as a context manager
        releases it on every exit path.
    """

    def __init__(self, data: bytes, source_path: Optional[Path] = None):
        self._data: Optional[bytes] = bytes(data)
        self._mv: Optional[memoryview] = memoryview(self._data)
        self._size = len(self._data)
        self.source_path = source_path

    def __enter__(self) -> "RawBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __len__(self) -> int:
        return self._size

    @property
    def size(self) -> int:
        return self._size

    @property
    def released(self) -> bool:
        return self._mv is None

    def release(self) -> None:
        if self._mv is None:
            return
        self._mv.release()
        self._mv = None
        self._data = None

    def memory(self) -> memoryview:
        if self._mv is None:
            raise BufferReleasedError("buffer has been released")
        return self._mv

    def view(self, offset: int, length: int) -> "BufferView":
        return BufferView(self, offset, length)

    def whole(self) -> "BufferView":
        return BufferView(self, 0, self._size)


class BufferView:
    """Non-owning ``(owner, offset, length)`` sub-range of a :class:`RawBuffer`."""

    __slots__ = ("owner", "offset", "length")

    def __init__(self, owner: RawBuffer, offset: int, length: int):
        offset = int(offset)
        length = int(length)
        if offset < 0 or length < 0 or offset + length > owner.size:
            raise IndexError(
                f"view [{offset}, {offset + length}) outside buffer of {owner.size} bytes"
            )
        self.owner = owner
        self.offset = offset
        self.length = length

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"BufferView(offset={self.offset}, length={self.length})"

    def memory(self) -> memoryview:
        """Zero-copy slice; only valid while the owner is alive."""
        return self.owner.memory()[self.offset : self.offset + self.length]

    def tobytes(self) -> bytes:
        return self.memory().tobytes()
