from __future__ import annotations

from .script import (
    dump_script,
    iter_implementor_files,
    load_doc_tree,
    load_script,
    parse_script,
    read_script,
    trait_path_for,
    write_script,
)

__all__ = [
    "parse_script",
    "dump_script",
    "read_script",
    "write_script",
    "load_script",
    "trait_path_for",
    "iter_implementor_files",
    "load_doc_tree",
]
