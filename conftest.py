"""Pytest configuration: ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _default_language_unset(monkeypatch):
    """Keep a developer's NUMERAL_TEXT_LANGUAGE from leaking into the suite."""
    monkeypatch.delenv("NUMERAL_TEXT_LANGUAGE", raising=False)
    yield
