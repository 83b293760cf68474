from __future__ import annotations

from .context import RegistrationContext, RegistrationHook
from .entries import ImplementorEntry, ItemRef, Segment, Text, parse_markup, render_markup
from .errors import ImplementorFormatError
from .index import ImplementorIndex, ListedImplementor
from .loader import load_registry
from .registry import ImplementorRegistry
from .service import CONTEXT, INDEX

__all__ = [
    "ImplementorEntry",
    "ItemRef",
    "Text",
    "Segment",
    "parse_markup",
    "render_markup",
    "ImplementorFormatError",
    "ImplementorRegistry",
    "RegistrationContext",
    "RegistrationHook",
    "load_registry",
    "ImplementorIndex",
    "ListedImplementor",
    "INDEX",
    "CONTEXT",
]
