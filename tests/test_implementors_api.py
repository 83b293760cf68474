from __future__ import annotations

from implreg.builtin import yew_properties
from implreg.core.registry import ImplementorRegistry

TRAIT = yew_properties.TRAIT_PATH


def _skip(msg: str) -> None:  # pragma: no cover
    try:
        import pytest  # type: ignore

        pytest.skip(msg)
    except Exception:
        raise RuntimeError(msg)


def _client(**kwargs):
    from implreg.runtime.app import create_app

    try:
        from fastapi.testclient import TestClient
    except Exception as e:  # pragma: no cover
        _skip(f"TestClient not available ({e!r}); install test extras to run this test")
        return None

    return TestClient(create_app(**kwargs))


def test_builtin_data_is_listed(fresh_index) -> None:
    client = _client(builtin=True)

    assert client.get("/healthz").json() == {"ok": True}

    traits = client.get("/api/traits")
    assert traits.status_code == 200
    assert traits.json() == [{"trait": TRAIT, "namespaces": ["monaco", "stylist", "swim", "yew"], "count": 7}]
    assert client.get("/api/events").json()["globalRevision"] == fresh_index.global_revision()


def test_implementors_json_and_filters(fresh_index) -> None:
    client = _client(builtin=True)

    res = client.get(f"/api/traits/{TRAIT}/implementors", params={"currentCrate": "swim", "ignore": "monaco"})
    assert res.status_code == 200
    body = res.json()
    assert body["trait"] == TRAIT
    assert [item["namespace"] for item in body["implementors"]] == ["stylist", "stylist"]
    first = body["implementors"][0]
    assert first["subject"] == "impl Properties for GlobalProps"
    assert first["trait"]["path"] == TRAIT
    assert first["target"]["name"] == "GlobalProps"


def test_implementors_html_rebases_links(fresh_index) -> None:
    client = _client(builtin=True)

    res = client.get(
        f"/api/traits/{TRAIT}/implementors",
        params={"format": "html", "currentCrate": "monaco", "rootPath": "../../"},
    )
    assert res.status_code == 200
    html = res.json()["implementors"]
    assert 'id="impl-Properties-0"' in html
    assert 'href="../../stylist/yew/struct.GlobalProps.html"' in html


def test_unknown_trait_and_bad_format(fresh_index) -> None:
    client = _client(builtin=True)

    assert client.get("/api/traits/no::Such/implementors").status_code == 404
    assert client.get(f"/api/traits/{TRAIT}/implementors", params={"format": "xml"}).status_code == 400


def test_current_crate_defaults_from_environment(fresh_index, monkeypatch) -> None:
    client = _client(builtin=True)
    monkeypatch.setenv("IMPLREG_CURRENT_CRATE", "swim")

    res = client.get(f"/api/traits/{TRAIT}/implementors")
    assert [item["namespace"] for item in res.json()["implementors"]] == ["monaco", "stylist", "stylist"]


def test_post_registers_through_process_context(fresh_index) -> None:
    client = _client()
    registry = ImplementorRegistry.from_wire({"stylist": yew_properties.IMPLEMENTORS["stylist"]})

    res = client.post("/api/traits/yew::Properties/implementors", json=registry.to_wire())
    assert res.status_code == 200
    assert res.json() == {
        "ok": True,
        "trait": "yew::Properties",
        "namespaces": ["stylist"],
        "count": 2,
        "delivered": True,
    }
    assert fresh_index.get("yew::Properties") == ImplementorRegistry(registry.items(), trait_path="yew::Properties")

    bad = client.post("/api/traits/yew::Properties/implementors", json={"stylist": "nope"})
    assert bad.status_code == 400

    not_a_mapping = client.post("/api/traits/yew::Properties/implementors", json=["not", "a", "mapping"])
    assert not_a_mapping.status_code == 400


def test_reset_clears_index(fresh_index) -> None:
    client = _client(builtin=True)

    assert client.post("/api/reset").json() == {"ok": True}
    assert client.get("/api/traits").json() == []


def test_create_app_loads_doc_tree(fresh_index) -> None:
    from pathlib import Path

    _client(doc_dir=Path(__file__).parent / "assets" / "doc")
    assert fresh_index.traits() == [TRAIT]
