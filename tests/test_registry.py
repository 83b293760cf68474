from __future__ import annotations

import pytest

from implreg.core.entries import ImplementorEntry
from implreg.core.errors import ImplementorFormatError
from implreg.core.registry import ImplementorRegistry

SIMPLE = (
    'impl <a class="trait" href="yew/trait.Properties.html" title="trait yew::Properties">Properties</a> '
    'for <a class="struct" href="swim/struct.Consoleprops.html" title="struct swim::Consoleprops">Consoleprops</a>'
)


def test_duplicate_namespace_is_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate namespace"):
        ImplementorRegistry([("swim", []), ("swim", [])])


def test_registry_is_read_only() -> None:
    reg = ImplementorRegistry({"swim": [ImplementorEntry.from_markup(SIMPLE)]})

    with pytest.raises(TypeError):
        reg["swim"] = ()  # type: ignore[index]
    with pytest.raises(TypeError):
        reg._data["other"] = ()  # type: ignore[index]
    assert isinstance(reg["swim"], tuple)


def test_insertion_order_is_preserved() -> None:
    reg = ImplementorRegistry([("zeta", []), ("alpha", []), ("mid", [])])
    assert list(reg) == ["zeta", "alpha", "mid"]


def test_from_wire_accepts_rustdoc_entry_shapes() -> None:
    reg = ImplementorRegistry.from_wire(
        {
            "a": [[SIMPLE]],
            "b": [[SIMPLE, 1, ["swim::Consoleprops"]]],
            "c": [{"text": SIMPLE, "synthetic": False, "types": []}],
        }
    )

    assert reg["a"][0].synthetic is False
    assert reg["b"][0].synthetic is True
    assert reg["b"][0].types == ("swim::Consoleprops",)
    assert reg["c"][0].markup == SIMPLE
    assert reg.entry_count == 3


def test_to_wire_uses_short_form_for_regular_entries() -> None:
    reg = ImplementorRegistry.from_wire({"a": [[SIMPLE]], "b": [[SIMPLE, 1, ["T"]]]})
    assert reg.to_wire() == {"a": [[SIMPLE]], "b": [[SIMPLE, 1, ["T"]]]}


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"a": "not a list"},
        {"a": [[]]},
        {"a": [[42]]},
        {"a": [[SIMPLE, 1, "T"]]},
    ],
)
def test_from_wire_rejects_malformed_data(data: object) -> None:
    with pytest.raises(ImplementorFormatError):
        ImplementorRegistry.from_wire(data)


def test_equality_compares_contents_and_trait() -> None:
    a = ImplementorRegistry.from_wire({"a": [[SIMPLE]]}, trait_path="yew::Properties")
    b = ImplementorRegistry.from_wire({"a": [[SIMPLE]]}, trait_path="yew::Properties")
    c = ImplementorRegistry.from_wire({"a": [[SIMPLE]]}, trait_path="other::Trait")

    assert a == b
    assert a != c
    assert a == {"a": (ImplementorEntry.from_markup(SIMPLE),)}
