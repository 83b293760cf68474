from __future__ import annotations

from typing import Any

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from ..config import Settings
from ..core.errors import ImplementorFormatError
from ..core.registry import ImplementorRegistry
from ..core.presentation import render_implementors_list, trait_name_of
from ..core.service import CONTEXT, INDEX


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def create_api_app() -> FastAPI:
    app = FastAPI(title="implreg", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/api/events")
    def events() -> dict:
        # Minimal polling endpoint.
        return {"globalRevision": INDEX.global_revision()}

    @app.post("/api/reset")
    def reset_index() -> dict[str, bool]:
        INDEX.reset()
        return {"ok": True}

    @app.get("/api/traits")
    def list_traits() -> list[dict]:
        return INDEX.summary()

    @app.get("/api/traits/{trait_path:path}/implementors")
    def get_implementors(
        trait_path: str,
        currentCrate: str | None = None,
        ignore: str | None = None,
        format: str = "json",
        rootPath: str = "",
    ) -> dict:
        if format not in {"json", "html"}:
            raise HTTPException(status_code=400, detail=f"Unsupported format: {format}")

        current_crate = currentCrate if currentCrate is not None else Settings.from_env().current_crate
        try:
            listed = INDEX.implementors_for(
                trait_path,
                current_crate=current_crate or None,
                ignore_crates=_split_csv(ignore),
            )
        except KeyError:
            raise HTTPException(status_code=404, detail=f"Unknown trait: {trait_path}")

        if format == "html":
            return {
                "trait": trait_path,
                **render_implementors_list(listed, trait_name=trait_name_of(trait_path), root_path=rootPath),
            }
        return {
            "trait": trait_path,
            "implementors": [{"namespace": item.namespace, **item.entry.to_dict()} for item in listed],
        }

    @app.post("/api/traits/{trait_path:path}/implementors")
    def register_implementors(trait_path: str, body: Any = Body(...)) -> dict:
        try:
            registry = ImplementorRegistry.from_wire(body, trait_path=trait_path)
        except ImplementorFormatError as e:
            raise HTTPException(status_code=400, detail=str(e))
        delivered = CONTEXT.deliver(registry)
        return {
            "ok": True,
            "trait": trait_path,
            "namespaces": list(registry),
            "count": registry.entry_count,
            "delivered": delivered,
        }

    return app
