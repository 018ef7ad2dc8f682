"""bindql — compose parameterized SQL sprintf-style, render for any dialect."""

from bindql.compose import (
    MalformedTemplateError,
    Query,
    UnsupportedTypeError,
    and_,
    in_list,
    join,
    or_,
    raw,
    sprintf,
)
from bindql.dialect import (
    ORACLE,
    POSTGRES,
    SIMPLE,
    SQLSERVER,
    BindVar,
    Dialect,
    DialectRegistry,
    UnsupportedDialectError,
)
from bindql.models import Statement

__version__ = "0.1.0"

__all__ = [
    "ORACLE",
    "POSTGRES",
    "SIMPLE",
    "SQLSERVER",
    "BindVar",
    "Dialect",
    "DialectRegistry",
    "MalformedTemplateError",
    "Query",
    "Statement",
    "UnsupportedDialectError",
    "UnsupportedTypeError",
    "__version__",
    "and_",
    "in_list",
    "join",
    "or_",
    "raw",
    "sprintf",
]
