from __future__ import annotations

from pathlib import Path

import pytest

ASSETS = Path(__file__).parent / "assets"
DOC_DIR = ASSETS / "doc"
PROPERTIES_JS = DOC_DIR / "implementors" / "yew" / "html" / "component" / "properties" / "trait.Properties.js"


@pytest.fixture
def properties_script() -> str:
    return PROPERTIES_JS.read_text(encoding="utf-8")


@pytest.fixture
def fresh_index():
    from implreg.core.service import INDEX

    INDEX.reset()
    yield INDEX
    INDEX.reset()
