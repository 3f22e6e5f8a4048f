from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from lxb_reader.models.metadata import MAX_PAR, LxbMetadata, parameter_key


@dataclass(frozen=True)
class ParameterMasks:
    """
    Per-parameter bit masks derived from ``$PnR``.

    Entry ``i`` belongs to parameter ``i + 1``. ``$PnR`` is a range (value
    count), so the mask is ``$PnR - 1``; absent or non-positive ranges give
    0, which means "do not mask" rather than "clear all bits".
    """
    values: Tuple[int, ...] = (0,) * MAX_PAR

    def __post_init__(self) -> None:
        if len(self.values) > MAX_PAR:
            raise ValueError(f"at most {MAX_PAR} masks supported, got {len(self.values)}")
        if any(v < 0 for v in self.values):
            raise ValueError("masks must be non-negative")

    @classmethod
    def from_metadata(cls, meta: LxbMetadata) -> "ParameterMasks":
        vals = [0] * MAX_PAR
        npar = min(meta.n_parameters, MAX_PAR)
        for i in range(npar):
            r = meta.get_int(parameter_key(i, "R"))
            vals[i] = r - 1 if r > 0 else 0
        return cls(values=tuple(vals))

    def mask(self, n: int) -> int:
        return self.values[n] if 0 <= n < len(self.values) else 0

    def as_array(self, npar: int) -> np.ndarray:
        """Masks for the first ``npar`` parameters as a uint32 column vector.

        Values wider than 32 bits keep their low 32 bits.
        """
        m = np.array([self.mask(i) & 0xFFFFFFFF for i in range(npar)], dtype=np.uint32)
        return m.reshape((npar, 1))
