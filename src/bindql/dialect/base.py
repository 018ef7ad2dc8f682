"""Bind-variable strategies: the placeholder syntax of each SQL dialect."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Protocol, runtime_checkable


class ParamStyle(StrEnum):
    """Placeholder family of a dialect, using the DB-API name where one exists."""

    QMARK = "qmark"
    DOLLAR = "dollar"
    NUMERIC = "numeric"
    AT = "at"


@runtime_checkable
class BindVar(Protocol):
    """Anything that maps a zero-based slot index to placeholder text."""

    def bind_var(self, i: int) -> str: ...


class Dialect(ABC):
    """Abstract base for registrable dialects.

    Dialects are stateless; a single instance can be shared freely.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def paramstyle(self) -> ParamStyle: ...

    @abstractmethod
    def bind_var(self, i: int) -> str:
        """Return the placeholder for the zero-based slot ``i``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
