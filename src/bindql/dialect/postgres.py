"""PostgreSQL dialect implementation."""

from __future__ import annotations

from bindql.dialect.base import Dialect, ParamStyle
from bindql.dialect.registry import DialectRegistry


@DialectRegistry.register
class PostgresDialect(Dialect):
    """PostgreSQL — numbered ``$1, $2, ...`` placeholders."""

    @property
    def name(self) -> str:
        return "postgres"

    @property
    def paramstyle(self) -> ParamStyle:
        return ParamStyle.DOLLAR

    def bind_var(self, i: int) -> str:
        return f"${i + 1}"
