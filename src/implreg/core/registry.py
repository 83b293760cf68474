from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from .entries import ImplementorEntry
from .errors import ImplementorFormatError


class ImplementorRegistry(Mapping[str, tuple[ImplementorEntry, ...]]):
    """Namespace (crate) name -> implementor entries, as authored.

    Notes:
    - Keys are unique; building from pairs that repeat a namespace raises ValueError.
    - Immutable after construction. Entries are frozen and stored as tuples.
    - `trait_path` names the trait page this data belongs to, when known.
    """

    __slots__ = ("_data", "trait_path")

    def __init__(
        self,
        pairs: Iterable[tuple[str, Iterable[ImplementorEntry]]] | Mapping[str, Iterable[ImplementorEntry]] = (),
        *,
        trait_path: str | None = None,
    ) -> None:
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        data: dict[str, tuple[ImplementorEntry, ...]] = {}
        for name, entries in items:
            ns = str(name)
            if ns in data:
                raise ValueError(f"Duplicate namespace in implementor registry: {ns!r}")
            data[ns] = tuple(entries)
        self._data = MappingProxyType(data)
        self.trait_path = trait_path

    @classmethod
    def from_wire(cls, data: Any, *, trait_path: str | None = None) -> "ImplementorRegistry":
        """Build from the JSON shape `{namespace: [[markup], ...]}`."""

        if not isinstance(data, Mapping):
            raise ImplementorFormatError("Implementor data must be an object keyed by namespace")
        pairs: list[tuple[str, list[ImplementorEntry]]] = []
        for name, entries in data.items():
            if not isinstance(entries, list):
                raise ImplementorFormatError(f"Entries for namespace {name!r} must be a list")
            pairs.append((str(name), [ImplementorEntry.from_wire(e) for e in entries]))
        return cls(pairs, trait_path=trait_path)

    def to_wire(self) -> dict[str, list[list[Any]]]:
        return {name: [e.to_wire() for e in entries] for name, entries in self._data.items()}

    def __getitem__(self, key: str) -> tuple[ImplementorEntry, ...]:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ImplementorRegistry):
            return self.trait_path == other.trait_path and dict(self._data) == dict(other._data)
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        counts = ", ".join(f"{k}={len(v)}" for k, v in self._data.items())
        return f"ImplementorRegistry(trait_path={self.trait_path!r}, {counts})"

    @property
    def entry_count(self) -> int:
        return sum(len(v) for v in self._data.values())
