"""Shared test fixtures for bindql."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from bindql.compose import Query, sprintf
from bindql.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from BINDQL_* variables and the settings cache."""
    monkeypatch.delenv("BINDQL_DEFAULT_DIALECT", raising=False)
    monkeypatch.delenv("BINDQL_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def users_query() -> Query:
    """Two levels of nesting: a WHERE clause and a LIMIT clause."""
    where = sprintf("name=%s AND age=%d", "John", 27)
    limit = sprintf("%d OFFSET %d", 10, 100)
    return sprintf("SELECT name FROM users WHERE %s LIMIT %s", where, limit)
