from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple

from lxb_reader.errors import (
    TooManyParameters,
    UnsupportedBitWidth,
    UnsupportedByteOrder,
    UnsupportedDataType,
    UnsupportedMode,
    UnicodeUnsupported,
)
from lxb_reader.models.masks import ParameterMasks
from lxb_reader.models.metadata import MAX_PAR, as_metadata, parameter_key


@dataclass(frozen=True)
class ValidationReport:
    masks: ParameterMasks
    warnings: Tuple[str, ...] = ()


def check_format(meta: Mapping[str, str], max_parameters: int = MAX_PAR) -> ValidationReport:
    """
    Decide whether the DATA segment can be decoded, and build the mask table.

    Supported: integer data (``$DATATYPE=I``), list mode (``$MODE=L``),
    little-endian words (``$BYTEORD=1,2,3,4``) and 32 bits per parameter.
    Missing keywords read as ``""`` and simply fail their check.
    """
    txt = as_metadata(meta)
    limit = min(int(max_parameters), MAX_PAR)

    npar = txt.get_int("$PAR")
    if npar > limit:
        raise TooManyParameters(f"too many parameters ($PAR={npar}, max {limit})")

    data_type = txt.get_str("$DATATYPE")
    if data_type.lower() != "i":
        raise UnsupportedDataType(f"data is not integral ($DATATYPE={data_type!r}, expected 'I')")

    mode = txt.get_str("$MODE")
    if mode.lower() != "l":
        raise UnsupportedMode(f"data not in list format ($MODE={mode!r}, expected 'L')")

    byteord = txt.get_str("$BYTEORD")
    if byteord != "1,2,3,4":
        raise UnsupportedByteOrder(
            f"data not in little endian format ($BYTEORD={byteord!r}, expected '1,2,3,4')"
        )

    warnings = []
    unicode_flag = txt.get_str("$UNICODE")
    if unicode_flag:
        warnings.append(
            f"{UnicodeUnsupported.code}: Unicode flag detected ($UNICODE={unicode_flag!r}), output may be corrupted"
        )

    masks = ParameterMasks.from_metadata(txt)

    for i in range(npar):
        key = parameter_key(i, "B")
        bits = txt.get_int(key)
        if bits != 32:
            raise UnsupportedBitWidth(f"parameter {i} is not 32 bits ({key}={bits})")

    return ValidationReport(masks=masks, warnings=tuple(warnings))
