"""Descriptive statistics for numerical columns.

Pure computation over a list of finite floats. No configuration, no I/O.

Formulas:
- Quartiles use the nearest-rank method: q1 = sorted[floor(n * 0.25)],
  q3 = sorted[floor(n * 0.75)], no interpolation.
- Variance is the population variance (divisor n).
- Skewness is the adjusted Fisher-Pearson standardized third moment:
      n / ((n - 1)(n - 2)) * sum(((x - mean) / sd) ** 3)
- Kurtosis is the sample excess kurtosis:
      n(n + 1) / ((n - 1)(n - 2)(n - 3)) * sum(((x - mean) / sd) ** 4)
      - 3(n - 1)^2 / ((n - 2)(n - 3))

For n < 4 or sd == 0 the moment formulas divide by zero. The results are
propagated as NaN or +/-Inf; display policy belongs to the caller.

Values near the float limits keep a finite mean and median, while spread
measures that overflow (range, variance, std_dev) come back as +Inf.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence

import numpy as np

from dataprism.analysis.statistics.models import NumericalSummary


def nearest_rank_quartiles(sorted_values: Sequence[float]) -> tuple[float, float]:
    """Return (q1, q3) of an ascending sequence by nearest rank."""
    n = len(sorted_values)
    q1 = sorted_values[math.floor(n * 0.25)]
    q3 = sorted_values[math.floor(n * 0.75)]
    return float(q1), float(q3)


def compute_mode(values: Sequence[float]) -> list[float]:
    """Return every value tied for the highest frequency, ascending."""
    counts = Counter(values)
    max_freq = max(counts.values())
    return sorted(float(v) for v, c in counts.items() if c == max_freq)


def compute_moments(values: np.ndarray, mean: float, std_dev: float) -> tuple[float, float]:
    """Compute (skewness, kurtosis) with the adjusted sample formulas.

    Division by zero yields NaN/Inf rather than raising.
    """
    n = np.float64(len(values))
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        z = (values - mean) / np.float64(std_dev)
        skewness = n / ((n - 1) * (n - 2)) * np.sum(z**3)
        kurtosis = (n * (n + 1)) / ((n - 1) * (n - 2) * (n - 3)) * np.sum(z**4) - (
            3 * (n - 1) ** 2
        ) / ((n - 2) * (n - 3))
    return float(skewness), float(kurtosis)


def _mean(values: Sequence[float]) -> float:
    """Mean of finite values that stays finite when their sum overflows."""
    n = len(values)
    try:
        return math.fsum(values) / n
    except OverflowError:
        return math.fsum(v / n for v in values)


def compute_numerical_summary(values: Sequence[float]) -> NumericalSummary:
    """Compute descriptive statistics for a numerical column.

    Args:
        values: Parsed finite numbers, at least one

    Returns:
        NumericalSummary

    Raises:
        ValueError: If values is empty
    """
    n = len(values)
    if n == 0:
        raise ValueError("compute_numerical_summary requires at least one value")

    sorted_values = sorted(float(v) for v in values)
    min_value = sorted_values[0]
    max_value = sorted_values[-1]

    mean = _mean(sorted_values)
    # Rounding can push the mean of near-constant data just past its bounds
    mean = min(max(mean, min_value), max_value)

    if n % 2 == 0:
        median = sorted_values[n // 2 - 1] / 2 + sorted_values[n // 2] / 2
    else:
        median = sorted_values[n // 2]

    q1, q3 = nearest_rank_quartiles(sorted_values)

    arr = np.asarray(values, dtype=np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        variance = float(np.sum((arr - mean) ** 2) / n)
    std_dev = math.sqrt(variance)

    skewness, kurtosis = compute_moments(arr, mean, std_dev)

    return NumericalSummary(
        mean=mean,
        median=median,
        mode=compute_mode(values),
        min=min_value,
        max=max_value,
        q1=q1,
        q3=q3,
        range=max_value - min_value,
        variance=variance,
        std_dev=std_dev,
        count=n,
        skewness=skewness,
        kurtosis=kurtosis,
    )
