"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os
import tempfile
from pathlib import Path

# Environment must be in place before any app import reads settings
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(tempfile.gettempdir()) / f'cobrew-test-{os.getpid()}.db'}",
)
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-at-least-32-characters-long")
# Cheap hashing keeps the suite fast
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "8192")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import Iterator

import pytest

from src.cobrew.core.config import get_settings

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def opaque_application_access(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Answer 404 instead of 403 when a stranger fetches an application."""
    monkeypatch.setenv("OPAQUE_APPLICATION_ACCESS", "true")
    get_settings.cache_clear()
    yield
    monkeypatch.delenv("OPAQUE_APPLICATION_ACCESS")
    get_settings.cache_clear()
