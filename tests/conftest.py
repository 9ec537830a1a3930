"""
Shared test configuration.

Puts the `api/` source root on sys.path, pins the environment to deterministic
values and replaces the pool lifecycle so no test needs a running database.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
API_DIR = ROOT_DIR / "api"
TESTS_DIR = ROOT_DIR / "tests"
for path in (TESTS_DIR, API_DIR):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

# Never pick up a developer's local config.env during tests.
os.environ["CONFIG_ENV_PATH"] = str(TESTS_DIR / "missing-config.env")

from core import db  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure predictable settings during tests."""

    defaults = {
        "APP_ENV": "test",
        "DEPLOY_PLATFORM": "pytest",
        "SERVICE_NAME": "Test Shop",
        "LOG_LEVEL": "INFO",
        "DB_HOST": "localhost",
        "DB_PORT": "5432",
        "DB_USER": "website",
        "DB_PASSWORD": "website",
        "DB_NAME": "website_test",
    }
    for key, value in defaults.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("DATABASE_URL", raising=False)


@pytest.fixture(autouse=True)
def no_pool(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _noop() -> None:
        return None

    monkeypatch.setattr(db, "init_pool", _noop)
    monkeypatch.setattr(db, "close_pool", _noop)
