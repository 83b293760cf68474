from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..core.context import RegistrationContext
from ..core.errors import ImplementorFormatError
from ..core.loader import load_registry
from ..core.registry import ImplementorRegistry

logger = logging.getLogger(__name__)

SCRIPT_HEAD = "(function() {var implementors = "
SCRIPT_TAIL = (
    ";if (window.register_implementors) {window.register_implementors(implementors);}"
    " else {window.pending_implementors = implementors;}})()"
)


def _unique_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in pairs:
        if key in out:
            raise ImplementorFormatError(f"Duplicate key in implementors literal: {key!r}")
        out[key] = value
    return out


def parse_script(text: str) -> dict[str, Any]:
    """Extract the implementor mapping from a generated `trait.*.js` script.

    Returns the wire mapping `{namespace: [[markup], ...]}` in file order.
    """

    body = text.strip()
    if not body.startswith(SCRIPT_HEAD):
        raise ImplementorFormatError("Not an implementors script: missing 'var implementors =' header")
    body = body[len(SCRIPT_HEAD) :]

    tail_at = body.rfind(";if (window.register_implementors)")
    if tail_at < 0:
        raise ImplementorFormatError("Not an implementors script: missing registration call")
    literal = body[:tail_at]

    try:
        data = json.loads(literal, object_pairs_hook=_unique_keys)
    except json.JSONDecodeError as e:
        raise ImplementorFormatError(f"Invalid implementors literal: {e}") from e
    if not isinstance(data, dict):
        raise ImplementorFormatError("Implementors literal must be an object")
    return data


def dump_script(registry: ImplementorRegistry) -> str:
    """Write a registry back out in rustdoc's script layout (sorted keys, no trailing newline)."""

    wire = registry.to_wire()
    lines = [
        json.dumps(name, ensure_ascii=False) + ":" + json.dumps(wire[name], ensure_ascii=False, separators=(",", ":"))
        for name in sorted(wire)
    ]
    return SCRIPT_HEAD + "{\n" + ",\n".join(lines) + "\n}" + SCRIPT_TAIL


def trait_path_for(path: str | Path, root: str | Path) -> str:
    """Map `<root>/yew/html/component/properties/trait.Properties.js` to
    `yew::html::component::properties::Properties`.

    `root` is the `implementors/` directory.
    """

    rel = Path(path).resolve().relative_to(Path(root).resolve())
    stem = rel.name
    if stem.endswith(".js"):
        stem = stem[: -len(".js")]
    _kind, sep, name = stem.partition(".")
    if not sep or not name:
        raise ImplementorFormatError(f"Unexpected implementors file name: {rel.name!r} (expected '<kind>.<Name>.js')")
    return "::".join([*rel.parent.parts, name])


def read_script(path: str | Path, *, trait_path: str | None = None) -> ImplementorRegistry:
    p = Path(path)
    data = parse_script(p.read_text(encoding="utf-8"))
    return ImplementorRegistry.from_wire(data, trait_path=trait_path)


def write_script(path: str | Path, registry: ImplementorRegistry) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(dump_script(registry), encoding="utf-8")


def load_script(
    path: str | Path,
    context: RegistrationContext,
    *,
    trait_path: str | None = None,
) -> ImplementorRegistry:
    """Read one script and run it through the loader, like a browser evaluating it."""

    p = Path(path)
    data = parse_script(p.read_text(encoding="utf-8"))
    return load_registry(context, data, trait_path=trait_path)


def iter_implementor_files(doc_dir: str | Path) -> Iterator[Path]:
    root = Path(doc_dir) / "implementors"
    if not root.is_dir():
        return
    yield from sorted(root.rglob("*.js"))


def load_doc_tree(doc_dir: str | Path, context: RegistrationContext) -> list[ImplementorRegistry]:
    """Load every `implementors/**/<kind>.<Name>.js` script under a rustdoc output directory."""

    root = Path(doc_dir) / "implementors"
    loaded: list[ImplementorRegistry] = []
    for path in iter_implementor_files(doc_dir):
        loaded.append(load_script(path, context, trait_path=trait_path_for(path, root)))
    logger.info("Loaded %d implementor scripts from %s", len(loaded), root)
    return loaded
