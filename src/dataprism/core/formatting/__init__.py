"""Formatting helpers shared by presentation-facing code.

Display-side statistic selection lives in dataprism.core.formatting.stats.
"""

from dataprism.core.formatting.base import ThresholdConfig, sanitize_for_json

__all__ = [
    "ThresholdConfig",
    "sanitize_for_json",
]
