from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .context import RegistrationContext
from .registry import ImplementorRegistry

logger = logging.getLogger(__name__)


def load_registry(
    context: RegistrationContext,
    data: ImplementorRegistry | Mapping[str, Any],
    *,
    trait_path: str | None = None,
) -> ImplementorRegistry:
    """Build the registry once and hand it off exactly once.

    `data` is either a ready registry or the wire mapping `{namespace: [[markup], ...]}`.
    `trait_path` names the trait of a wire mapping; for a ready registry it may only repeat
    the registry's own trait path.
    The returned object is the one the hook received (or the one left pending).
    """

    if isinstance(data, ImplementorRegistry):
        if trait_path is not None and trait_path != data.trait_path:
            raise ValueError(
                f"trait_path {trait_path!r} does not match the registry's trait_path {data.trait_path!r}"
            )
        registry = data
    else:
        registry = ImplementorRegistry.from_wire(data, trait_path=trait_path)

    delivered = context.deliver(registry)
    logger.debug(
        "Loaded %d implementor entries for %s (%s)",
        registry.entry_count,
        registry.trait_path or "<unknown trait>",
        "delivered" if delivered else "pending",
    )
    return registry
