from __future__ import annotations

import contextlib
import logging
import socket
import threading
import time
from dataclasses import dataclass
from pathlib import Path

import uvicorn

from ..config import Settings, _normalize_base_url
from ..sdk.client import ImplregClient
from .app import create_app

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImplregServer:
    host: str
    port: int
    url: str

    def client(self) -> ImplregClient:
        return ImplregClient(self.url.rstrip("/"))


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _is_server_alive(base_url: str, *, timeout_s: float = 0.2) -> bool:
    """Best-effort probe to determine if an implreg server is reachable."""

    import httpx

    try:
        with httpx.Client(base_url=base_url, timeout=timeout_s) as client:
            r = client.get("/healthz")
            if r.status_code != 200:
                return False
            data = r.json()
            return bool(data.get("ok"))
    except (httpx.HTTPError, ValueError):
        return False


def run(
    *,
    host: str = "127.0.0.1",
    port: int = 0,
    doc_dir: str | Path | None = None,
    builtin: bool = False,
    log_level: str = "info",
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
) -> ImplregServer | ImplregClient:
    """Start the implreg API with a single Python call.

    Behavior:
    - If IMPLREG_URL is set, attach to that server (client mode) unless `new_server=True`.
    - Otherwise, if `port != 0` and a server already answers at http://{host}:{port},
      attach to it unless `new_server=True`.
    - Otherwise start a new server in a daemon thread and return an `ImplregServer`.

    `doc_dir` and `builtin` only apply when a new server is started.
    """

    env_url = Settings.from_env().url

    if env_url and not new_server:
        if _is_server_alive(env_url, timeout_s=connect_timeout_s):
            logger.info("Attaching to implreg server at %s", env_url)
            return ImplregClient(env_url)

    if port != 0 and not new_server:
        default_url = _normalize_base_url(f"http://{host}:{port}")
        if _is_server_alive(default_url, timeout_s=connect_timeout_s):
            logger.info("Attaching to implreg server at %s", default_url)
            return ImplregClient(default_url)

    if port == 0:
        port = _find_free_port(host)

    app = create_app(doc_dir=doc_dir, builtin=builtin)

    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    # Give it a moment so a subsequent client probe doesn't race with startup.
    time.sleep(0.05)

    url = f"http://{host}:{port}/"
    logger.info("implreg server listening on %s", url)
    return ImplregServer(host=host, port=port, url=url)
