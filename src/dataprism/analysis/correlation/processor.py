"""Correlation matrix over the numerical columns of a table.

Two alignment strategies are supported:

- "positional": each column's parsed values (missing and unparseable cells
  already dropped independently) are paired by position up to the shorter
  length. This only lines rows up correctly when the columns have no holes
  or share the same missing-value pattern.
- "pairwise": paired deletion. Raw cells are re-read row by row and only
  rows where both cells parse to finite numbers are used.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from dataprism.analysis.correlation.algorithms.pearson import pairwise_complete, pearson
from dataprism.analysis.correlation.models import (
    CorrelationMatrix,
    CorrelationPair,
    CorrelationStrength,
)
from dataprism.analysis.typing.inference import parse_number
from dataprism.analysis.typing.models import Column, NumericalColumn
from dataprism.core.config import get_settings
from dataprism.core.formatting.base import ThresholdConfig
from dataprism.core.logging import get_logger

logger = get_logger(__name__)

Alignment = Literal["positional", "pairwise"]

_STRENGTH_THRESHOLDS = ThresholdConfig(
    thresholds={
        CorrelationStrength.VERY_STRONG.value: 0.8,
        CorrelationStrength.STRONG.value: 0.6,
        CorrelationStrength.MODERATE.value: 0.4,
        CorrelationStrength.WEAK.value: 0.2,
    },
    default_level=CorrelationStrength.VERY_WEAK.value,
    ascending=False,
)


def classify_strength(coefficient: float) -> CorrelationStrength:
    """Map a coefficient to a strength label by its absolute value."""
    return CorrelationStrength(_STRENGTH_THRESHOLDS.get_level(abs(coefficient)))


def to_pair(column_a: str, column_b: str, coefficient: float) -> CorrelationPair:
    """Build an interpreted CorrelationPair."""
    if coefficient > 0:
        direction = "positive"
    elif coefficient < 0:
        direction = "negative"
    else:
        direction = "none"
    return CorrelationPair(
        column_a=column_a,
        column_b=column_b,
        coefficient=coefficient,
        strength=classify_strength(coefficient),
        direction=direction,
    )


def _pair_coefficient(a: NumericalColumn, b: NumericalColumn, alignment: Alignment) -> float:
    if alignment == "pairwise":
        x, y = pairwise_complete(
            [parse_number(v) for v in a.raw_values],
            [parse_number(v) for v in b.raw_values],
        )
        return pearson(x, y)
    return pearson(a.values, b.values)


def compute_correlation_matrix(
    columns: Sequence[Column],
    alignment: Alignment = "positional",
) -> CorrelationMatrix:
    """Compute Pearson coefficients for every ordered pair of numerical columns.

    Non-numerical columns are ignored. The diagonal is fixed at 1.0 and not
    computed. Each unordered pair is computed once and mirrored.

    Args:
        columns: All columns of the table, in table order
        alignment: "positional" or "pairwise" (see module docstring)

    Returns:
        CorrelationMatrix
    """
    numerical = [c for c in columns if isinstance(c, NumericalColumn)]
    names = [c.name for c in numerical]
    coefficients: dict[str, dict[str, float]] = {name: {} for name in names}

    for i, col_a in enumerate(numerical):
        coefficients[col_a.name][col_a.name] = 1.0
        for col_b in numerical[i + 1 :]:
            r = _pair_coefficient(col_a, col_b, alignment)
            coefficients[col_a.name][col_b.name] = r
            coefficients[col_b.name][col_a.name] = r

    logger.debug(
        "correlation_matrix_computed",
        columns=len(names),
        pairs=len(names) * (len(names) - 1) // 2,
        alignment=alignment,
    )
    return CorrelationMatrix(columns=names, coefficients=coefficients)


def find_notable_pairs(
    matrix: CorrelationMatrix, min_abs: float | None = None
) -> list[CorrelationPair]:
    """List unordered off-diagonal pairs with |r| >= min_abs.

    Sorted by descending |r|; ties keep column order.

    Args:
        matrix: Correlation matrix
        min_abs: Minimum absolute coefficient to report
            (defaults to settings.notable_correlation_threshold)

    Returns:
        List of CorrelationPair
    """
    if min_abs is None:
        min_abs = get_settings().notable_correlation_threshold
    pairs = []
    for i, column_a in enumerate(matrix.columns):
        for column_b in matrix.columns[i + 1 :]:
            r = matrix.get(column_a, column_b)
            if abs(r) >= min_abs:
                pairs.append(to_pair(column_a, column_b, r))
    pairs.sort(key=lambda p: abs(p.coefficient), reverse=True)
    return pairs
