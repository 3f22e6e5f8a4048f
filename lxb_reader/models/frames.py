from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import numpy as np
import pandas as pd

from lxb_reader.errors import LxbError
from lxb_reader.models.metadata import LxbMetadata


@dataclass(frozen=True)
class LxbFrame:
    """
    In-memory representation of one LXB file after decoding.

    Notes
    - ``text`` is None when decoding stopped before the TEXT segment was parsed.
    - ``data`` is None whenever validation or decoding failed; it is an int32
      array of shape ``(n_parameters, n_events)`` otherwise, with masks applied.
    - ``errors`` holds at most one fatal error; ``warnings`` holds advisories.
    """
    source_path: Optional[Path]
    text: Optional[LxbMetadata] = None
    data: Optional[np.ndarray] = None
    parameter_names: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    errors: Tuple[LxbError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.data is not None and not self.errors

    @property
    def n_parameters(self) -> int:
        return 0 if self.data is None else int(self.data.shape[0])

    @property
    def n_events(self) -> int:
        return 0 if self.data is None else int(self.data.shape[1])

    @property
    def error_codes(self) -> Tuple[str, ...]:
        return tuple(e.code for e in self.errors)

    def to_dataframe(self) -> Optional[pd.DataFrame]:
        """Matrix as a DataFrame: rows labelled by ``$PnN``, columns by event index."""
        if self.data is None:
            return None
        return pd.DataFrame(
            self.data,
            index=pd.Index(list(self.parameter_names), dtype=object),
            columns=pd.RangeIndex(self.data.shape[1]),
            copy=False,
        )

    def to_host(self, include_text: bool = False) -> Optional[Dict[str, Any]]:
        """
        Result shape handed to callers of :func:`lxb_reader.read_lxb`.

        ``None`` when nothing could be parsed; otherwise a dict with ``data``
        (DataFrame or None) and, if requested, ``text`` (keys without ``$``).
        """
        if self.text is None:
            return None
        out: Dict[str, Any] = {"data": self.to_dataframe()}
        if include_text:
            out["text"] = self.text.to_host_dict()
        return out
