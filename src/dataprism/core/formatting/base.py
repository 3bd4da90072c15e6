"""Base formatting utilities.

Provides reusable patterns for turning raw metrics into labelled levels
that presentation layers can display without re-deriving thresholds.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

import numpy as np


@dataclass
class ThresholdConfig:
    """Configuration for mapping numeric values to named levels.

    Thresholds define the boundaries between levels.

    Example for correlation strength (descending, |r| based):
        ThresholdConfig(
            thresholds={"very_strong": 0.8, "strong": 0.6, "moderate": 0.4, "weak": 0.2},
            default_level="very_weak",
            ascending=False,
        )
        - value >= 0.8 -> "very_strong"
        - 0.6 <= value < 0.8 -> "strong"
        - ...
        - value < 0.2 -> "very_weak" (default)
    """

    thresholds: dict[str, float]
    default_level: str
    ascending: bool = True  # True = level boundaries are upper bounds

    def get_level(self, value: float) -> str:
        """Map a numeric value to a level.

        Args:
            value: Numeric metric value

        Returns:
            Level name
        """
        if self.ascending:
            sorted_thresholds = sorted(self.thresholds.items(), key=lambda x: x[1])
            for level, threshold in sorted_thresholds:
                if value <= threshold:
                    return level
            return self.default_level
        else:
            sorted_thresholds = sorted(self.thresholds.items(), key=lambda x: x[1], reverse=True)
            for level, threshold in sorted_thresholds:
                if value >= threshold:
                    return level
            return self.default_level


def sanitize_for_json(obj: Any) -> Any:
    """Recursively sanitize values for JSON serialization.

    Handles:
    - datetime/date -> ISO format strings
    - NaN/Inf (Python or numpy floats) -> None (JSON doesn't support these)
    - numpy scalar types -> Python native types
    - Nested dicts, lists and tuples
    """
    if obj is None:
        return None

    if isinstance(obj, datetime | date):
        return obj.isoformat()

    # numpy scalars (float64 subclasses float, so check numpy first)
    if isinstance(obj, np.generic):
        obj = obj.item()

    if isinstance(obj, float):
        if math.isnan(obj) or math.isinf(obj):
            return None
        return obj

    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, dict):
        return {k: sanitize_for_json(v) for k, v in obj.items()}

    if isinstance(obj, list | tuple):
        return [sanitize_for_json(item) for item in obj]

    # Default: return as-is (str, int, bool, etc.)
    return obj
