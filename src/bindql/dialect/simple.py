"""Question-mark placeholders used by SQLite, MySQL and ODBC drivers."""

from __future__ import annotations

from bindql.dialect.base import Dialect, ParamStyle
from bindql.dialect.registry import DialectRegistry


@DialectRegistry.register
class SimpleDialect(Dialect):
    """Every slot renders as ``?``; position alone carries the binding."""

    @property
    def name(self) -> str:
        return "simple"

    @property
    def paramstyle(self) -> ParamStyle:
        return ParamStyle.QMARK

    def bind_var(self, i: int) -> str:
        return "?"
