from __future__ import annotations

from .app import create_app
from .server import ImplregServer, run

__all__ = ["create_app", "ImplregServer", "run"]
