"""Query values: sprintf-style composition, joining and deferred rendering."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from bindql.compose.literal import format_value
from bindql.compose.slots import (
    SLOT,
    MalformedTemplateError,
    count_slots,
    escape_literal,
    expand_verbs,
    substitute_slots,
)
from bindql.dialect.base import BindVar
from bindql.dialect.registry import resolve_dialect
from bindql.models.statement import Statement

logger = logging.getLogger("bindql.compose")


@dataclass(frozen=True)
class Query:
    """A flattened SQL template and the arguments bound to its slots.

    ``pattern`` holds one ``%s`` slot per entry of ``args`` (left to right) and
    ``%%`` for each literal percent sign. Build instances with :func:`sprintf`
    or :func:`join` rather than by hand.

    Queries compare by value. Hashing works only when every argument is
    hashable; a list argument makes the Query unhashable.
    """

    pattern: str = ""
    args: tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))
        if any(isinstance(a, Query) for a in self.args):
            raise TypeError("Query arguments must be flat values; pass nested queries to sprintf()")
        slots = count_slots(self.pattern)
        if slots != len(self.args):
            raise MalformedTemplateError(
                f"Pattern {self.pattern!r} has {slots} slot(s) but {len(self.args)} argument(s)",
                format=self.pattern,
                expected=slots,
                actual=len(self.args),
            )

    def render(self, dialect: BindVar | str | None = None) -> str:
        """Render the statement text with ``dialect``'s placeholders.

        The i-th placeholder of the result binds ``self.args[i]``.
        """
        binder = resolve_dialect(dialect)
        return substitute_slots(self.pattern, [binder.bind_var(i) for i in range(len(self.args))])

    def arg_list(self) -> list[Any]:
        """The arguments as a new list, for drivers that insist on one."""
        return list(self.args)

    def statement(self, dialect: BindVar | str | None = None) -> Statement:
        """Render and pair the SQL with its arguments."""
        return Statement.from_query(self, resolve_dialect(dialect))

    def render_literal(self) -> str:
        """Inline every argument as a SQL literal. Debug output only.

        The result is NOT safe to execute; see :mod:`bindql.compose.literal`.
        """
        return substitute_slots(self.pattern, [format_value(a) for a in self.args])


def sprintf(format: str, *args: Any) -> Query:
    """Compose a Query from a printf-style format and its arguments.

    Each verb in ``format`` consumes one argument. A :class:`Query` argument is
    spliced in place (its pattern replaces the verb and its arguments are
    appended); any other value becomes a single bound argument.

    >>> q = sprintf("name = %s AND age > %d", "John", 27)
    >>> q.render("postgres")
    'name = $1 AND age > $2'
    """
    fills: list[str] = []
    flat: list[Any] = []
    for arg in args:
        if isinstance(arg, Query):
            fills.append(arg.pattern)
            flat.extend(arg.args)
        else:
            fills.append(SLOT)
            flat.append(arg)
    query = Query(pattern=expand_verbs(format, fills), args=tuple(flat))
    logger.debug("composed query with %d slot(s) from %d argument(s)", len(flat), len(args))
    return query


def join(queries: Iterable[Query], separator: str) -> Query:
    """Concatenate queries with ``" <separator> "`` between them.

    ``separator`` is literal text. An empty input gives an empty Query.
    """
    items = list(queries)
    glue = f" {escape_literal(separator)} "
    query = Query(
        pattern=glue.join(q.pattern for q in items),
        args=tuple(a for q in items for a in q.args),
    )
    logger.debug("joined %d queries with %r (%d slot(s))", len(items), separator, len(query.args))
    return query
