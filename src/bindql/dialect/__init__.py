"""Bind-variable dialect plugin system for bindql."""

# Import dialects to trigger registration
from bindql.dialect.base import BindVar, Dialect, ParamStyle
from bindql.dialect.oracle import OracleDialect
from bindql.dialect.postgres import PostgresDialect
from bindql.dialect.registry import DialectRegistry, UnsupportedDialectError, resolve_dialect
from bindql.dialect.simple import SimpleDialect
from bindql.dialect.sqlserver import SQLServerDialect

SIMPLE = DialectRegistry.get("simple")
POSTGRES = DialectRegistry.get("postgres")
ORACLE = DialectRegistry.get("oracle")
SQLSERVER = DialectRegistry.get("sqlserver")

__all__ = [
    "ORACLE",
    "POSTGRES",
    "SIMPLE",
    "SQLSERVER",
    "BindVar",
    "Dialect",
    "DialectRegistry",
    "OracleDialect",
    "ParamStyle",
    "PostgresDialect",
    "SQLServerDialect",
    "SimpleDialect",
    "UnsupportedDialectError",
    "resolve_dialect",
]
