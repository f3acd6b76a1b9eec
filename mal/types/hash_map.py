from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from mal import MalValue


class HashMap(Mapping):
    """Immutable map `{k v ...}` from values to values.

    Keys are compared with value equality, so a List key and a Vector key with
    equal elements address the same entry.
    """

    __slots__ = ("_data",)

    def __init__(self, pairs: Mapping | Iterable[tuple[Any, Any]] = ()):
        self._data: dict[MalValue, MalValue] = dict(pairs)

    def __getitem__(self, key: MalValue) -> MalValue:
        return self._data[key]

    def __iter__(self) -> Iterator[MalValue]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self):
        return f"HashMap({self._data!r})"
