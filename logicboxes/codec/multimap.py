"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Multi-valued query parameter collection.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
from urllib.parse import urlencode

Pair = Tuple[str, str]


class WireMultiMap:
    """
    Insertion-ordered mapping from a wire key to one or more string values.

    Writes go through ``add()``, which holds a single lock, so one map may
    be filled from several worker threads. ``freeze()`` turns the map
    read-only; the codec freezes every map it returns.
    """

    def __init__(self, pairs: Optional[Iterable[Pair]] = None) -> None:
        self._values: Dict[str, List[str]] = {}
        self._lock = threading.Lock()
        self._frozen = False
        if pairs is not None:
            self.extend(pairs)

    def add(self, key: str, value: str) -> None:
        """Append ``value`` under ``key``."""
        if self._frozen:
            raise TypeError("WireMultiMap is frozen")
        with self._lock:
            self._values.setdefault(key, []).append(value)

    def extend(self, pairs: Iterable[Pair]) -> None:
        for key, value in pairs:
            self.add(key, value)

    def freeze(self) -> "WireMultiMap":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """First value stored under ``key``."""
        values = self._values.get(key)
        return values[0] if values else default

    def getall(self, key: str) -> List[str]:
        """All values stored under ``key`` (empty list if none)."""
        return list(self._values.get(key, ()))

    def keys(self) -> List[str]:
        return list(self._values)

    def items(self) -> List[Pair]:
        """Flattened ``(key, value)`` pairs, repeated keys included."""
        return [(key, value) for key, values in self._values.items() for value in values]

    def to_dict(self) -> Dict[str, List[str]]:
        return {key: list(values) for key, values in self._values.items()}

    def copy(self) -> "WireMultiMap":
        """Mutable copy of this map."""
        return WireMultiMap(self.items())

    def urlencode(self) -> str:
        """Percent-encoded query string; repeated keys become repeated pairs."""
        return urlencode(self.items())

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WireMultiMap):
            return self._values == other._values
        return NotImplemented

    def __repr__(self) -> str:
        return f"WireMultiMap({self.items()!r})"
