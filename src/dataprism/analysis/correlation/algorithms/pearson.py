"""Pure Pearson correlation.

No configuration, no logging - just math.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np


def _scaled(values: np.ndarray) -> np.ndarray:
    """Divide by the largest magnitude so squared sums cannot overflow.

    Pearson r is invariant to positive scaling.
    """
    peak = float(np.max(np.abs(values)))
    if peak == 0 or not math.isfinite(peak):
        return values
    return values / peak


def pearson(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson correlation coefficient of two numeric series.

    The series are paired by position up to the shorter length. The
    coefficient is 0.0 when fewer than two pairs exist, either series
    has zero variance, or the sums are not finite. A matrix built from it
    is therefore always fully populated and bounded.

    Args:
        x: First series
        y: Second series

    Returns:
        Coefficient in [-1, 1]
    """
    n = min(len(x), len(y))
    if n < 2:
        return 0.0

    x_arr = _scaled(np.asarray(x[:n], dtype=np.float64))
    y_arr = _scaled(np.asarray(y[:n], dtype=np.float64))

    x_diff = x_arr - x_arr.mean()
    y_diff = y_arr - y_arr.mean()

    numerator = float(np.sum(x_diff * y_diff))
    sum_x_squared = float(np.sum(x_diff * x_diff))
    sum_y_squared = float(np.sum(y_diff * y_diff))

    denominator = float(np.sqrt(sum_x_squared) * np.sqrt(sum_y_squared))
    if denominator == 0 or not (math.isfinite(numerator) and math.isfinite(denominator)):
        return 0.0

    return float(np.clip(numerator / denominator, -1.0, 1.0))


def pairwise_complete(
    x: Sequence[float | None], y: Sequence[float | None]
) -> tuple[list[float], list[float]]:
    """Keep only positions where both series have a value.

    Args:
        x: First series, None marking a missing cell
        y: Second series, same row order as x

    Returns:
        (x_values, y_values) aligned row by row
    """
    x_values: list[float] = []
    y_values: list[float] = []
    for a, b in zip(x, y, strict=False):
        if a is not None and b is not None:
            x_values.append(a)
            y_values.append(b)
    return x_values, y_values
