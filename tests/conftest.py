# tests/conftest.py
from __future__ import annotations

import pytest

from color_describer.description.color.vocab import reset_palette_cache
from color_describer.description.general.utils import reload_topics


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Point the loader at the packaged data/ dir and reset caches between tests."""
    for var in ("DATA_DIR", "COLOR_DESCRIBER_DATA_DIR", "COLOR_DESCRIBER_MIX_COUNT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.delenv("COLOR_DESCRIBER_DEBUG_TOPICS", raising=False)
    reload_topics()
    reset_palette_cache()
    yield
    reset_palette_cache()
