# Shared helpers for endpoint tests.
# FakeDatabase stands in for the query executor so tests can assert on the
# exact SQL and bound arguments without a running Postgres.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import pytest
from fastapi.testclient import TestClient

from core import db

CORS_ALLOW_HEADERS = (
    "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
    "Content-MD5, Content-Type, Date, X-Api-Version"
)


class FakeDatabase:
    """Records every statement and replays queued results in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._results: list[Any] = []

    def queue(self, result: Any) -> FakeDatabase:
        """Queue rows (list), a single row (dict/None) or an exception to raise."""
        self._results.append(result)
        return self

    def fail(self, message: str) -> FakeDatabase:
        return self.queue(db.DatabaseError(message))

    def _next(self, sql: str, args: tuple[Any, ...]) -> Any:
        self.calls.append((sql, args))
        if not self._results:
            raise AssertionError(f"Unexpected query: {sql}")
        result = self._results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        return self._next(sql, args)

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        return self._next(sql, args)

    def install(self, monkeypatch: pytest.MonkeyPatch) -> FakeDatabase:
        monkeypatch.setattr(db, "fetch_all", self.fetch_all)
        monkeypatch.setattr(db, "fetch_one", self.fetch_one)
        return self

    @property
    def last_sql(self) -> str:
        return self.calls[-1][0]

    @property
    def last_args(self) -> tuple[Any, ...]:
        return self.calls[-1][1]


@contextmanager
def api_test_client() -> Iterator[TestClient]:
    from main import app

    with TestClient(app) as client:
        yield client
