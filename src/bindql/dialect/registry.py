"""Dialect plugin registry — discover and register dialect implementations."""

from __future__ import annotations

import logging

from bindql.dialect.base import BindVar, Dialect
from bindql.settings import get_settings

logger = logging.getLogger("bindql.dialect")


class UnsupportedDialectError(Exception):
    """Raised when a requested dialect is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.dialect_name = name
        self.available = available
        super().__init__(f"Unsupported dialect '{name}'. Available: {', '.join(available)}")


class DialectRegistry:
    """Registry for bind-variable dialect plugins."""

    _dialects: dict[str, Dialect] = {}

    @classmethod
    def register(cls, dialect_class: type[Dialect]) -> type[Dialect]:
        """Register a dialect class. Can be used as a decorator."""
        # Dialects are stateless; the registered instance is shared
        instance = dialect_class()
        cls._dialects[instance.name] = instance
        logger.debug("registered dialect %s (%s)", instance.name, dialect_class.__name__)
        return dialect_class

    @classmethod
    def get(cls, name: str) -> Dialect:
        """Get the shared instance of the named dialect."""
        if name not in cls._dialects:
            raise UnsupportedDialectError(name, available=cls.available())
        return cls._dialects[name]

    @classmethod
    def available(cls) -> list[str]:
        """List registered dialect names."""
        return sorted(cls._dialects.keys())

    @classmethod
    def reset(cls) -> None:
        """Clear all registered dialects (for testing)."""
        cls._dialects.clear()


def resolve_dialect(dialect: BindVar | str | None) -> BindVar:
    """Turn a dialect argument into a ``BindVar``.

    Accepts a dialect object, a registered dialect name, or ``None`` for the
    configured default.
    """
    if dialect is None:
        dialect = get_settings().default_dialect
    if isinstance(dialect, str):
        return DialectRegistry.get(dialect)
    return dialect
