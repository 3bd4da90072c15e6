"""Shared models."""

from dataprism.core.models.base import ColumnKind, Result

__all__ = [
    "ColumnKind",
    "Result",
]
