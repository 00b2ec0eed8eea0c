"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`polydice` package without requiring an editable install in CI. It also
gives every test a fresh default random source and settings cache.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from polydice.config import get_settings  # noqa: E402
from polydice.utils.rng import reset_rng  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_rng(monkeypatch):
    """Run each test with no POLYDICE_SEED and a new thread-local source."""
    monkeypatch.delenv("POLYDICE_SEED", raising=False)
    get_settings.cache_clear()
    reset_rng()
    yield
    get_settings.cache_clear()
    reset_rng()
