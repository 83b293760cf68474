from __future__ import annotations

import os
from dataclasses import dataclass


def _normalize_base_url(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    # Allow passing just host:port.
    if "://" not in url:
        url = "http://" + url
    return url.rstrip("/")


@dataclass(frozen=True)
class Settings:
    """Environment-driven defaults.

    - IMPLREG_URL: attach `run()` to an already running server.
    - IMPLREG_DOC_DIR: rustdoc output directory loaded by the CLI.
    - IMPLREG_CURRENT_CRATE: crate hidden from implementor listings when a request names none.
    """

    url: str = ""
    doc_dir: str | None = None
    current_crate: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            url=_normalize_base_url(os.getenv("IMPLREG_URL", "")),
            doc_dir=os.getenv("IMPLREG_DOC_DIR") or None,
            current_crate=os.getenv("IMPLREG_CURRENT_CRATE") or None,
        )
