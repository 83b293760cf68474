"""Process-wide index and registration context used by the server and CLI."""

from __future__ import annotations

from .context import RegistrationContext
from .index import ImplementorIndex

INDEX = ImplementorIndex()
CONTEXT = RegistrationContext(hook=INDEX.register_implementors)

__all__ = ["INDEX", "CONTEXT"]
