"""Convenience constructors for common query fragments."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from bindql.compose.query import Query, join, sprintf
from bindql.compose.slots import escape_literal


def raw(text: str) -> Query:
    """A Query with no arguments whose text is ``text`` verbatim."""
    return Query(pattern=escape_literal(text))


def _combine(op: str, empty: str, queries: tuple[Query, ...]) -> Query:
    if not queries:
        return raw(empty)
    if len(queries) == 1:
        return queries[0]
    return join((sprintf("(%s)", q) for q in queries), op)


def and_(*queries: Query) -> Query:
    """Chain conditions with AND; no conditions is ``TRUE``."""
    return _combine("AND", "TRUE", queries)


def or_(*queries: Query) -> Query:
    """Chain conditions with OR; no conditions is ``FALSE``."""
    return _combine("OR", "FALSE", queries)


def in_list(column: str, values: Iterable[Any]) -> Query:
    """``column IN (...)`` with one bound argument per value.

    ``column`` is literal SQL text. An empty ``values`` gives ``FALSE``.
    """
    items = list(values)
    if not items:
        return raw("FALSE")
    slots = ", ".join(["%s"] * len(items))
    return sprintf(f"{escape_literal(column)} IN ({slots})", *items)
