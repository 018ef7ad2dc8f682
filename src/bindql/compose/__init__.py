"""Query composition: sprintf-style templates flattened into bound statements."""

from bindql.compose.builder import and_, in_list, or_, raw
from bindql.compose.literal import UnsupportedTypeError, format_value
from bindql.compose.query import Query, join, sprintf
from bindql.compose.slots import MalformedTemplateError

__all__ = [
    "MalformedTemplateError",
    "Query",
    "UnsupportedTypeError",
    "and_",
    "format_value",
    "in_list",
    "join",
    "or_",
    "raw",
    "sprintf",
]
