from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence, Tuple

import pytest

from lxb_reader.testing import build_lxb


@pytest.fixture
def lxb_file(tmp_path: Path) -> Callable[..., Path]:
    counter = {"n": 0}

    def _write(pairs: Sequence[Tuple[str, str]], values: Sequence[int] = (), **kwargs) -> Path:
        counter["n"] += 1
        p = tmp_path / f"sample_{counter['n']}.lxb"
        p.write_bytes(build_lxb(pairs, values, **kwargs))
        return p

    return _write
