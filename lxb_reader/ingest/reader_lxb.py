from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from lxb_reader.errors import LxbError
from lxb_reader.ingest.data import decode_data
from lxb_reader.ingest.header import parse_header
from lxb_reader.ingest.source import read_file
from lxb_reader.ingest.text import parse_text
from lxb_reader.ingest.validate import check_format
from lxb_reader.models.frames import LxbFrame
from lxb_reader.models.metadata import MAX_PAR, LxbMetadata

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LxbReaderConfig:
    """
    Reader configuration for LXB (FCS3.0) files.

    max_parameters:
      Largest accepted ``$PAR``; values above MAX_PAR are clamped to it.
    text_encoding:
      Codec for TEXT keywords. latin-1 maps every byte and never fails;
      with other codecs an undecodable token fails the parse as
      UndecodableText. Unicode TEXT is not supported either way.
    strict_data_length:
      - False: accept a DATA segment longer than ``4 * $PAR * $TOT`` bytes.
      - True: require the exact length.
    include_text:
      Default for the ``text`` flag of :func:`read_lxb`.
    """
    max_parameters: int = MAX_PAR
    text_encoding: str = "latin-1"
    strict_data_length: bool = False
    include_text: bool = False


class LxbReader:
    """
    Reads LXB files into :class:`LxbFrame` objects.

    Contract:
      - never raises for unreadable, malformed or unsupported files; the
        error is logged and stored in ``LxbFrame.errors``.
      - header/TEXT failures give a frame without ``text``; validation and
        DATA failures keep the parsed ``text`` and give ``data=None``.
      - the file buffer is released before :meth:`read` returns.
    """

    def __init__(self, config: Optional[LxbReaderConfig] = None):
        self.config = config or LxbReaderConfig()

    def read(self, file_path: str | Path) -> LxbFrame:
        fp = Path(file_path).expanduser()
        warnings: List[str] = []
        text: Optional[LxbMetadata] = None
        try:
            raw = read_file(fp)
        except LxbError as e:
            return self._fail(fp, e, "Bad LXB")

        with raw:
            try:
                hdr = parse_header(raw.whole())
                logger.debug("%s: %s", fp.name, hdr)
                off, length = hdr.text_range(raw.size)
                text = parse_text(raw.view(off, length), encoding=self.config.text_encoding)
            except LxbError as e:
                return self._fail(fp, e, "Bad LXB")

            try:
                report = check_format(text, max_parameters=self.config.max_parameters)
            except LxbError as e:
                return self._fail(fp, e, "Unsupported LXB", text=text)
            for w in report.warnings:
                logger.warning("Unsupported LXB: %s (%s)", w, fp)
            warnings.extend(report.warnings)

            try:
                off, length = hdr.data_range(raw.size)
                data = decode_data(
                    text,
                    report.masks,
                    raw.view(off, length),
                    strict_length=self.config.strict_data_length,
                )
            except LxbError as e:
                return self._fail(fp, e, "Bad LXB", text=text, warnings=warnings)

        logger.debug("%s: decoded %d parameters x %d events", fp.name, data.shape[0], data.shape[1])
        return LxbFrame(
            source_path=fp,
            text=text,
            data=data,
            parameter_names=text.parameter_names(),
            warnings=tuple(warnings),
        )

    @staticmethod
    def _fail(
        fp: Path,
        err: LxbError,
        prefix: str,
        text: Optional[LxbMetadata] = None,
        warnings: Optional[List[str]] = None,
    ) -> LxbFrame:
        logger.warning("%s: %s: %s (%s)", prefix, err.code, err, fp)
        return LxbFrame(
            source_path=fp,
            text=text,
            data=None,
            parameter_names=() if text is None else text.parameter_names(),
            warnings=tuple(warnings or ()),
            errors=(err,),
        )


def read_lxb(
    file_path: str | Path,
    text: Optional[bool] = None,
    config: Optional[LxbReaderConfig] = None,
) -> Optional[Dict[str, Any]]:
    """
    Read an LXB file the way a host environment consumes it.

    Returns None when the file could not be read or its TEXT segment could
    not be located; otherwise ``{"data": DataFrame | None}`` plus
    ``"text"`` (keywords with ``$`` stripped) when ``text`` is true.
    """
    reader = LxbReader(config)
    include_text = reader.config.include_text if text is None else bool(text)
    return reader.read(file_path).to_host(include_text=include_text)


def read_lxb_matrix(file_path: str | Path, config: Optional[LxbReaderConfig] = None) -> Optional[np.ndarray]:
    """Decoded int32 matrix only, or None on any failure."""
    return LxbReader(config).read(file_path).data
