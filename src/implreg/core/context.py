from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable

from .entries import ImplementorEntry
from .registry import ImplementorRegistry

logger = logging.getLogger(__name__)

RegistrationHook = Callable[[ImplementorRegistry], None]


class RegistrationContext:
    """Hand-off point between implementor data and whoever displays it.

    A registry is either passed to the installed hook right away or parked in the
    pending queue until a hook is installed. Never both, never neither.
    """

    def __init__(self, hook: RegistrationHook | None = None) -> None:
        self._lock = threading.RLock()
        self._hook = hook
        self._pending: list[ImplementorRegistry] = []

    @property
    def hook(self) -> RegistrationHook | None:
        with self._lock:
            return self._hook

    @property
    def pending(self) -> ImplementorRegistry | None:
        """The most recently parked registry, if any."""
        with self._lock:
            return self._pending[-1] if self._pending else None

    def deliver(self, registry: ImplementorRegistry) -> bool:
        """Invoke the hook with `registry` or queue it. Returns True if the hook ran."""

        with self._lock:
            hook = self._hook
            if hook is None:
                self._pending.append(registry)
                logger.debug("No hook installed; parked %r (%d pending)", registry, len(self._pending))
                return False
            hook(registry)
            return True

    def register(
        self,
        name: str,
        entries: Iterable[ImplementorEntry],
        *,
        trait_path: str | None = None,
    ) -> ImplementorRegistry:
        registry = ImplementorRegistry([(name, entries)], trait_path=trait_path)
        self.deliver(registry)
        return registry

    def drain(self) -> list[ImplementorRegistry]:
        """Take every parked registry, oldest first, and clear the queue."""

        with self._lock:
            pending, self._pending = self._pending, []
            return pending

    def install_hook(self, hook: RegistrationHook) -> int:
        """Install `hook` and replay anything parked before it existed.

        Returns the number of registries replayed. If the hook raises, the registry it
        failed on and everything after it stay parked.
        """

        replayed = 0
        with self._lock:
            self._hook = hook
            while self._pending:
                hook(self._pending[0])
                self._pending.pop(0)
                replayed += 1
        if replayed:
            logger.debug("Replayed %d pending implementor registries", replayed)
        return replayed

    def remove_hook(self) -> None:
        with self._lock:
            self._hook = None
