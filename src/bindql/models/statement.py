"""Rendered statement model handed to a database driver."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from bindql.dialect.base import BindVar, ParamStyle

if TYPE_CHECKING:
    from bindql.compose.query import Query


class Statement(BaseModel):
    """SQL text and the arguments bound to its placeholders, in order.

    Pass ``sql`` and ``args`` to the driver together; the i-th placeholder in
    ``sql`` binds ``args[i]``.
    """

    model_config = ConfigDict(frozen=True)

    sql: str
    args: list[Any] = []
    dialect: str
    paramstyle: ParamStyle | None = None

    @classmethod
    def from_query(cls, query: Query, binder: BindVar) -> Statement:
        return cls(
            sql=query.render(binder),
            args=list(query.args),
            dialect=getattr(binder, "name", type(binder).__name__),
            paramstyle=getattr(binder, "paramstyle", None),
        )

    def as_tuple(self) -> tuple[str, list[Any]]:
        """``(sql, args)`` for ``cursor.execute(*statement.as_tuple())``."""
        return self.sql, self.args
