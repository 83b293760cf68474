from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass

from .entries import ImplementorEntry
from .registry import ImplementorRegistry

logger = logging.getLogger(__name__)

UNKNOWN_TRAIT = "<unknown>"


@dataclass(frozen=True)
class ListedImplementor:
    namespace: str
    entry: ImplementorEntry


class ImplementorIndex:
    """Host-side store of every implementor registry handed to it, keyed by trait path.

    Use `register_implementors` as the hook of a `RegistrationContext`.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._traits: dict[str, dict[str, tuple[ImplementorEntry, ...]]] = {}
        self._global_revision = 0

    def register_implementors(self, registry: ImplementorRegistry) -> None:
        trait = registry.trait_path or UNKNOWN_TRAIT
        with self._lock:
            by_ns = self._traits.setdefault(trait, {})
            for ns, entries in registry.items():
                by_ns[ns] = entries
            self._global_revision += 1
        logger.debug("Registered %d namespaces for %s", len(registry), trait)

    # The index itself can be installed as a hook.
    __call__ = register_implementors

    def global_revision(self) -> int:
        with self._lock:
            return self._global_revision

    def traits(self) -> list[str]:
        with self._lock:
            return sorted(self._traits)

    def get(self, trait: str) -> ImplementorRegistry | None:
        with self._lock:
            by_ns = self._traits.get(trait)
            if by_ns is None:
                return None
            return ImplementorRegistry(by_ns.items(), trait_path=trait)

    def implementors_for(
        self,
        trait: str,
        *,
        current_crate: str | None = None,
        ignore_crates: Iterable[str] = (),
    ) -> list[ListedImplementor]:
        """Entries a trait page would list, in namespace order.

        Notes:
        - The page's own crate renders its impls inline, so it is skipped here.
        - Each synthetic (auto trait) impl is shown once per covered type.
        """

        registry = self.get(trait)
        if registry is None:
            raise KeyError(trait)

        skip = set(ignore_crates)
        if current_crate:
            skip.add(current_crate)

        seen_types: set[str] = set()
        out: list[ListedImplementor] = []
        for ns, entries in registry.items():
            if ns in skip:
                continue
            for entry in entries:
                if entry.synthetic and not _claim_types(entry.types, seen_types):
                    continue
                out.append(ListedImplementor(namespace=ns, entry=entry))
        return out

    def summary(self) -> list[dict[str, object]]:
        with self._lock:
            return [
                {
                    "trait": trait,
                    "namespaces": list(by_ns),
                    "count": sum(len(v) for v in by_ns.values()),
                }
                for trait, by_ns in sorted(self._traits.items())
            ]

    def reset(self) -> None:
        with self._lock:
            self._traits.clear()
            self._global_revision += 1


def _claim_types(types: Iterable[str], seen: set[str]) -> bool:
    # Types claimed before the first repeat stay claimed.
    for t in types:
        if t in seen:
            return False
        seen.add(t)
    return True
