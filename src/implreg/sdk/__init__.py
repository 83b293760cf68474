from __future__ import annotations

from .client import ImplregClient

__all__ = ["ImplregClient"]
