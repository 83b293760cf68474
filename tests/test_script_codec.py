from __future__ import annotations

from pathlib import Path

import pytest

from implreg.builtin import yew_properties
from implreg.core.context import RegistrationContext
from implreg.core.errors import ImplementorFormatError
from implreg.core.registry import ImplementorRegistry
from implreg.io.script import (
    dump_script,
    iter_implementor_files,
    load_doc_tree,
    load_script,
    parse_script,
    read_script,
    trait_path_for,
    write_script,
)

DOC_DIR = Path(__file__).parent / "assets" / "doc"
PROPERTIES_JS = DOC_DIR / "implementors" / "yew" / "html" / "component" / "properties" / "trait.Properties.js"


def test_parse_script_extracts_mapping_in_file_order(properties_script: str) -> None:
    data = parse_script(properties_script)

    assert list(data) == ["monaco", "stylist", "swim", "yew"]
    assert data == yew_properties.IMPLEMENTORS


def test_dump_script_is_byte_identical_to_rustdoc_output(properties_script: str) -> None:
    registry = ImplementorRegistry.from_wire(parse_script(properties_script))
    assert dump_script(registry) == properties_script


def test_dump_script_sorts_namespaces() -> None:
    registry = ImplementorRegistry([("zeta", []), ("alpha", [])])
    text = dump_script(registry)

    assert text.index('"alpha":[]') < text.index('"zeta":[]')
    assert parse_script(text) == {"alpha": [], "zeta": []}
    assert not text.endswith("\n")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "var implementors = {};",
        "(function() {var implementors = {};})()",
        "(function() {var implementors = {oops};if (window.register_implementors) {}})()",
        "(function() {var implementors = [];if (window.register_implementors) {}})()",
    ],
)
def test_parse_script_rejects_other_input(text: str) -> None:
    with pytest.raises(ImplementorFormatError):
        parse_script(text)


def test_trait_path_for_maps_file_location() -> None:
    root = DOC_DIR / "implementors"
    assert trait_path_for(PROPERTIES_JS, root) == yew_properties.TRAIT_PATH


def test_trait_path_for_rejects_unexpected_names(tmp_path: Path) -> None:
    bad = tmp_path / "crate" / "Properties.js"
    bad.parent.mkdir(parents=True)
    bad.write_text("", encoding="utf-8")
    with pytest.raises(ImplementorFormatError):
        trait_path_for(bad, tmp_path)


def test_load_script_goes_through_the_loader() -> None:
    ctx = RegistrationContext()
    registry = load_script(PROPERTIES_JS, ctx, trait_path=yew_properties.TRAIT_PATH)

    assert ctx.drain() == [registry]
    assert registry.trait_path == yew_properties.TRAIT_PATH


def test_load_doc_tree_walks_implementors_dir() -> None:
    seen: list[ImplementorRegistry] = []
    loaded = load_doc_tree(DOC_DIR, RegistrationContext(hook=seen.append))

    assert [p.name for p in iter_implementor_files(DOC_DIR)] == ["trait.Properties.js"]
    assert loaded == seen
    assert [r.trait_path for r in loaded] == [yew_properties.TRAIT_PATH]


def test_load_doc_tree_without_implementors_dir_is_empty(tmp_path: Path) -> None:
    assert load_doc_tree(tmp_path, RegistrationContext()) == []


def test_write_then_read_keeps_registry(tmp_path: Path) -> None:
    registry = ImplementorRegistry.from_wire(yew_properties.IMPLEMENTORS)
    out = tmp_path / "implementors" / "yew" / "trait.Properties.js"

    write_script(out, registry)

    assert out.read_text(encoding="utf-8") == PROPERTIES_JS.read_text(encoding="utf-8")
    assert read_script(out) == registry


def test_parse_script_rejects_repeated_namespace() -> None:
    text = '(function() {var implementors = {\n"a":[],\n"a":[]\n};if (window.register_implementors) {}})()'
    with pytest.raises(ImplementorFormatError, match="Duplicate key"):
        parse_script(text)
