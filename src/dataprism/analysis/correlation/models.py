"""Correlation models."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class CorrelationStrength(str, Enum):
    """Interpretation of |r|."""

    VERY_STRONG = "very_strong"  # >= 0.8
    STRONG = "strong"  # >= 0.6
    MODERATE = "moderate"  # >= 0.4
    WEAK = "weak"  # >= 0.2
    VERY_WEAK = "very_weak"


class CorrelationPair(BaseModel):
    """Pearson correlation between two distinct numerical columns."""

    model_config = ConfigDict(frozen=True)

    column_a: str
    column_b: str
    coefficient: float
    strength: CorrelationStrength
    direction: Literal["positive", "negative", "none"]


class CorrelationMatrix(BaseModel):
    """Pairwise Pearson coefficients across numerical columns.

    coefficients[a][b] is defined for every ordered pair of columns in
    `columns`, including a == b (fixed at 1.0).
    """

    model_config = ConfigDict(frozen=True)

    columns: list[str] = Field(default_factory=list)
    coefficients: dict[str, dict[str, float]] = Field(default_factory=dict)

    def get(self, column_a: str, column_b: str) -> float:
        """Get the coefficient for a pair of columns.

        Raises:
            KeyError: If either column is not in the matrix
        """
        return self.coefficients[column_a][column_b]
