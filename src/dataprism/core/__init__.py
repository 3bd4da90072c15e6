"""Core module - configuration, logging, and shared models."""

from dataprism.core.config import Settings, get_settings
from dataprism.core.models.base import ColumnKind, Result

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Models
    "ColumnKind",
    "Result",
]
