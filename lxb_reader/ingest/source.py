from __future__ import annotations

import logging
from pathlib import Path

from lxb_reader.errors import IoFailure
from lxb_reader.models.buffer import RawBuffer

logger = logging.getLogger(__name__)


def read_file(file_path: str | Path) -> RawBuffer:
    """
    Read a whole file into a :class:`RawBuffer`.

    Raises IoFailure when the file is missing, unreadable or empty.
    """
    fp = Path(file_path).expanduser()
    try:
        data = fp.read_bytes()
    except OSError as e:
        raise IoFailure(f"could not read file: {fp} ({type(e).__name__}: {e})") from e
    if not data:
        raise IoFailure(f"could not read file: {fp} (empty)")
    logger.debug("read %d bytes from %s", len(data), fp)
    return RawBuffer(data, source_path=fp)
