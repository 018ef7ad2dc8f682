"""SQL Server dialect implementation."""

from __future__ import annotations

from bindql.dialect.base import Dialect, ParamStyle
from bindql.dialect.registry import DialectRegistry


@DialectRegistry.register
class SQLServerDialect(Dialect):
    """SQL Server — named ``@p1, @p2, ...`` parameters."""

    @property
    def name(self) -> str:
        return "sqlserver"

    @property
    def paramstyle(self) -> ParamStyle:
        return ParamStyle.AT

    def bind_var(self, i: int) -> str:
        return f"@p{i + 1}"
