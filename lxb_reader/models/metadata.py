from __future__ import annotations

import re
from typing import Dict, Iterable, Iterator, Mapping, Tuple

# Parameters 1..MAX_PAR are addressable by parameter_key().
MAX_PAR = 99

_ATOI = re.compile(r"[ \t\n\r\f\v]*([+-]?[0-9]+)")


def atoi(text: str) -> int:
    """Leading integer of ``text``, or 0 when there is none (C ``atoi``)."""
    m = _ATOI.match(text)
    return int(m.group(1)) if m else 0


def parameter_key(n: int, kind: str) -> str:
    """Key ``$P{n+1}{kind}`` for 0-based parameter ``n``; ``""`` when out of range."""
    if n < 0 or n >= MAX_PAR:
        return ""
    return f"$P{n + 1}{kind}"


class LxbMetadata(Mapping[str, str]):
    """
    Read-only view of the TEXT segment keywords.

    Keys are unique (the parser lets the last pair win) and iterate in
    first-insertion order. Lookups through :meth:`get_str` / :meth:`get_int`
    never fail: a missing key reads as ``""`` / ``0``.
    """

    def __init__(self, pairs: Iterable[Tuple[str, str]] = ()):
        self._d: Dict[str, str] = {}
        for k, v in pairs:
            self._d[k] = v

    def __getitem__(self, key: str) -> str:
        return self._d[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._d)

    def __len__(self) -> int:
        return len(self._d)

    def __repr__(self) -> str:
        return f"LxbMetadata({self._d!r})"

    def get_str(self, key: str) -> str:
        return self._d.get(key, "")

    def get_int(self, key: str) -> int:
        return atoi(self.get_str(key))

    def host_items(self) -> Iterator[Tuple[str, str]]:
        """
        Lazily yield ``(key, value)`` with one leading ``$`` removed from the key.

        Each call starts a fresh pass over the keywords.
        """
        for k, v in self._d.items():
            yield (k[1:] if k.startswith("$") else k), v

    def to_host_dict(self) -> Dict[str, str]:
        return dict(self.host_items())

    @property
    def n_parameters(self) -> int:
        return self.get_int("$PAR")

    @property
    def n_events(self) -> int:
        return self.get_int("$TOT")

    def parameter_names(self) -> Tuple[str, ...]:
        return tuple(self.get_str(parameter_key(i, "N")) for i in range(max(self.n_parameters, 0)))


def as_metadata(m: Mapping[str, str]) -> LxbMetadata:
    return m if isinstance(m, LxbMetadata) else LxbMetadata(m.items())
