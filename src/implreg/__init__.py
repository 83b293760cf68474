from __future__ import annotations

from .builtin import install_all
from .core import (
    CONTEXT,
    INDEX,
    ImplementorEntry,
    ImplementorFormatError,
    ImplementorIndex,
    ImplementorRegistry,
    ItemRef,
    RegistrationContext,
    load_registry,
)
from .io.script import dump_script, load_doc_tree, load_script, parse_script
from .runtime.server import ImplregServer, run
from .sdk.client import ImplregClient

__all__ = [
    "run",
    "ImplregServer",
    "ImplregClient",
    "ImplementorEntry",
    "ItemRef",
    "ImplementorRegistry",
    "ImplementorIndex",
    "ImplementorFormatError",
    "RegistrationContext",
    "load_registry",
    "parse_script",
    "dump_script",
    "load_script",
    "load_doc_tree",
    "install_all",
    "INDEX",
    "CONTEXT",
]
