"""Oracle Database dialect implementation."""

from __future__ import annotations

from bindql.dialect.base import Dialect, ParamStyle
from bindql.dialect.registry import DialectRegistry


@DialectRegistry.register
class OracleDialect(Dialect):
    """Oracle — numbered ``:1, :2, ...`` placeholders."""

    @property
    def name(self) -> str:
        return "oracle"

    @property
    def paramstyle(self) -> ParamStyle:
        return ParamStyle.NUMERIC

    def bind_var(self, i: int) -> str:
        return f":{i + 1}"
