from __future__ import annotations

from typing import Any

from ..core.registry import ImplementorRegistry


class ImplregClient:
    """HTTP client for a running implreg server."""

    def __init__(self, base_url: str = "http://127.0.0.1:8000") -> None:
        self.base_url = base_url.rstrip("/")

    def _request(self, method: str, path: str, *, timeout_s: float, what: str, **kwargs: Any) -> Any:
        import httpx

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.request(method, path, **kwargs)
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to {what}: {res.status_code} {res.text}")
            return res.json()

    def healthz(self, *, timeout_s: float = 10.0) -> bool:
        data = self._request("GET", "/healthz", timeout_s=timeout_s, what="probe server")
        return bool(data.get("ok"))

    def global_revision(self, *, timeout_s: float = 10.0) -> int:
        data = self._request("GET", "/api/events", timeout_s=timeout_s, what="get events")
        return int(data.get("globalRevision", 0))

    def list_traits(self, *, timeout_s: float = 10.0) -> list[dict[str, Any]]:
        return self._request("GET", "/api/traits", timeout_s=timeout_s, what="list traits")

    def get_implementors(
        self,
        trait_path: str,
        *,
        current_crate: str | None = None,
        ignore_crates: list[str] | tuple[str, ...] = (),
        format: str = "json",
        root_path: str = "",
        timeout_s: float = 10.0,
    ) -> dict[str, Any]:
        params: dict[str, str] = {"format": format}
        if current_crate is not None:
            params["currentCrate"] = current_crate
        if ignore_crates:
            params["ignore"] = ",".join(ignore_crates)
        if root_path:
            params["rootPath"] = root_path
        return self._request(
            "GET",
            f"/api/traits/{trait_path}/implementors",
            timeout_s=timeout_s,
            what=f"get implementors of {trait_path}",
            params=params,
        )

    def register(self, registry: ImplementorRegistry, *, trait_path: str | None = None, timeout_s: float = 10.0) -> dict[str, Any]:
        """Send a registry to the server, which delivers it through its registration context."""

        trait = trait_path or registry.trait_path
        if not trait:
            raise ValueError("trait_path is required when the registry has none")
        return self._request(
            "POST",
            f"/api/traits/{trait}/implementors",
            timeout_s=timeout_s,
            what=f"register implementors of {trait}",
            json=registry.to_wire(),
        )

    def reset(self, *, timeout_s: float = 10.0) -> None:
        self._request("POST", "/api/reset", timeout_s=timeout_s, what="reset index")
