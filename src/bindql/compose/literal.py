"""Inline SQL literals for debugging and logging.

WARNING: output from this module is for humans only. Escaping here is a best
effort for readability and does NOT protect against SQL injection. Never
execute a literal rendering; execute ``Query.render()`` with ``Query.args``.
"""

from __future__ import annotations

import datetime
import math
from decimal import Decimal
from typing import Any


class UnsupportedTypeError(TypeError):
    """Raised when a value has no literal SQL rendering."""

    def __init__(self, value: Any, reason: str | None = None) -> None:
        self.value_type = type(value).__name__
        message = f"Cannot render value of type '{self.value_type}' as a SQL literal"
        if reason:
            message += f": {reason}"
        super().__init__(message)


def quote_string(value: str) -> str:
    escaped = value.replace("'", "''")
    return f"'{escaped}'"


def format_value(value: Any) -> str:
    """Render one argument as SQL literal text."""
    match value:
        case None:
            return "NULL"
        case True:
            return "TRUE"
        case False:
            return "FALSE"
        case str():
            return quote_string(value)
        case int():
            return str(value)
        case float() if not math.isfinite(value):
            raise UnsupportedTypeError(value, reason=f"{value!r} has no SQL literal")
        case Decimal() if not value.is_finite():
            raise UnsupportedTypeError(value, reason=f"{value!r} has no SQL literal")
        case float() | Decimal():
            return str(value)
        # datetime is a date subclass; isoformat() covers both
        case datetime.date() | datetime.time():
            return quote_string(value.isoformat())
        case list() | tuple():
            return "ARRAY[" + ", ".join(format_value(v) for v in value) + "]"
        case _:
            raise UnsupportedTypeError(value)
