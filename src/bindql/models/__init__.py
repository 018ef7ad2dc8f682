"""Pydantic models for bindql."""

from bindql.models.statement import Statement

__all__ = [
    "Statement",
]
