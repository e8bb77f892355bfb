"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from userbase_backend.settings import get_settings


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """Point the service at a throwaway SQLite file."""
    return f"sqlite+aiosqlite:///{tmp_path / 'userbase.db'}"


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch, database_url: str) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DATABASE_URL", database_url)
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("LEGACY_NOT_FOUND_ERRORS", raising=False)
    monkeypatch.delenv("DATABASE_AUTO_CREATE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
