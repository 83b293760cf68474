from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI

from ..api import create_api_app
from ..builtin import install_all
from ..core.service import CONTEXT
from ..io.script import load_doc_tree

logger = logging.getLogger(__name__)


def create_app(*, doc_dir: str | Path | None = None, builtin: bool = False) -> FastAPI:
    """Create the API app, optionally preloading a rustdoc tree and the bundled data."""

    app = create_api_app()

    if builtin:
        install_all(CONTEXT)
    if doc_dir is not None:
        root = Path(doc_dir)
        if not root.is_dir():
            raise FileNotFoundError(str(root))
        load_doc_tree(root, CONTEXT)

    return app
