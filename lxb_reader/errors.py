"""Error taxonomy for LXB decoding.

Every decoding stage raises a subclass of :class:`LxbError`.  The reader
catches them at the pipeline boundary, so callers of
:func:`lxb_reader.read_lxb` never see them; callers of the individual
stages do.

``code`` is a stable identifier that ends up in log records and in
``LxbFrame.errors``.
"""

from __future__ import annotations


class LxbError(ValueError):
    """Base class for malformed or unsupported LXB input."""

    code = "LxbError"


class IoFailure(LxbError):
    """The file could not be read."""

    code = "IoFailure"


class TruncatedHeader(LxbError):
    code = "TruncatedHeader"


class BadMagic(LxbError):
    code = "BadMagic"


class MalformedOffsets(LxbError):
    code = "MalformedOffsets"


class SegmentOutOfRange(LxbError):
    """A TEXT or DATA segment does not lie inside the file."""

    code = "SegmentOutOfRange"


class TruncatedText(LxbError):
    code = "TruncatedText"


class UndecodableText(LxbError):
    """A TEXT token is not valid in the configured encoding."""

    code = "UndecodableText"


class TooManyParameters(LxbError):
    code = "TooManyParameters"


class UnsupportedDataType(LxbError):
    code = "UnsupportedDataType"


class UnsupportedMode(LxbError):
    code = "UnsupportedMode"


class UnsupportedByteOrder(LxbError):
    code = "UnsupportedByteOrder"


class UnsupportedBitWidth(LxbError):
    code = "UnsupportedBitWidth"


class InvalidDimensions(LxbError):
    """``$PAR`` or ``$TOT`` is negative."""

    code = "InvalidDimensions"


class UnicodeUnsupported(LxbError):
    """Advisory only: the TEXT segment declares ``$UNICODE``.

    Never raised by the reader; its message is recorded as a warning.
    """

    code = "UnicodeUnsupported"


class BufferReleasedError(RuntimeError):
    """A view was used after its owning buffer was released."""


__all__ = [
    "LxbError",
    "IoFailure",
    "TruncatedHeader",
    "BadMagic",
    "MalformedOffsets",
    "SegmentOutOfRange",
    "TruncatedText",
    "UndecodableText",
    "TooManyParameters",
    "UnsupportedDataType",
    "UnsupportedMode",
    "UnsupportedByteOrder",
    "UnsupportedBitWidth",
    "InvalidDimensions",
    "UnicodeUnsupported",
    "BufferReleasedError",
]
