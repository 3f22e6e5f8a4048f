from __future__ import annotations

from pathlib import Path

import numpy as np

from lxb_reader.errors import UnsupportedMode
from lxb_reader.models.frames import LxbFrame
from lxb_reader.models.metadata import LxbMetadata


def _meta() -> LxbMetadata:
    return LxbMetadata([("$PAR", "2"), ("$P1N", "FSC"), ("$P2N", "SSC"), ("NOTE", "x")])


def test_to_host_without_text_is_none() -> None:
    frame = LxbFrame(source_path=Path("x.lxb"))
    assert frame.to_host(include_text=True) is None
    assert frame.to_dataframe() is None
    assert not frame.ok


def test_to_host_partial() -> None:
    frame = LxbFrame(source_path=None, text=_meta(), errors=(UnsupportedMode("bad"),))
    out = frame.to_host(include_text=True)
    assert out["data"] is None
    assert out["text"] == {"PAR": "2", "P1N": "FSC", "P2N": "SSC", "NOTE": "x"}
    assert frame.error_codes == ("UnsupportedMode",)


def test_dataframe_labels() -> None:
    data = np.array([[1, 2, 3], [4, 5, 6]], dtype=np.int32)
    frame = LxbFrame(source_path=None, text=_meta(), data=data, parameter_names=("FSC", "SSC"))
    df = frame.to_dataframe()
    assert list(df.index) == ["FSC", "SSC"]
    assert list(df.columns) == [0, 1, 2]
    assert df.to_numpy().dtype == np.int32
    assert frame.ok
    assert (frame.n_parameters, frame.n_events) == (2, 3)
