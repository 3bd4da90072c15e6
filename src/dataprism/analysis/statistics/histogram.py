"""Histogram binning for numerical columns.

Bin count follows the Freedman-Diaconis rule on nearest-rank quartiles:

    width = 2 * IQR / cbrt(n)
    bins  = ceil(range / width), clamped to [min_bins, max_bins]

A zero width (IQR == 0) makes the rule undefined. It resolves to
`max_bins` when the data still has a positive range (the unbounded count,
clamped) and to `min_bins` when every value is equal. A range so wide
that range / width overflows also resolves to `max_bins`.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from dataprism.analysis.statistics.models import HistogramBucket
from dataprism.analysis.statistics.numeric import nearest_rank_quartiles
from dataprism.core.config import Settings, get_settings


def optimal_bin_count(
    values: Sequence[float],
    min_bins: int = 5,
    max_bins: int = 50,
) -> int:
    """Choose a histogram bin count with the Freedman-Diaconis rule.

    Args:
        values: Clean numeric values of a column (non-empty)
        min_bins: Lower clamp
        max_bins: Upper clamp

    Returns:
        Integer bin count in [min_bins, max_bins]
    """
    n = len(values)
    if n == 0:
        return min_bins

    sorted_values = sorted(values)
    q1, q3 = nearest_rank_quartiles(sorted_values)
    iqr = q3 - q1
    data_range = sorted_values[-1] - sorted_values[0]

    bin_width = 2 * iqr / float(np.cbrt(n))
    if bin_width == 0:
        return max_bins if data_range > 0 else min_bins

    raw_bins = data_range / bin_width
    if not math.isfinite(raw_bins):
        # Range or IQR overflowed near the float limits
        return max_bins

    bins = math.ceil(raw_bins)
    return max(min_bins, min(max_bins, bins))


def _edge(low: float, high: float, width: float, i: int, bins: int) -> float:
    if math.isfinite(width):
        return low + i * width
    t = i / bins
    return low * (1 - t) + high * t


def build_histogram(values: Sequence[float], bins: int) -> list[HistogramBucket]:
    """Split values into equal-width buckets between min and max.

    The last bucket is closed on the right so the maximum is counted.
    When all values are equal the buckets have zero width and every
    value lands in the first one.

    Args:
        values: Numeric values (non-empty)
        bins: Number of buckets, at least 1

    Returns:
        List of HistogramBucket, lowest first
    """
    if not values or bins < 1:
        return []

    low = float(min(values))
    high = float(max(values))
    width = (high - low) / bins
    # Near the float limits high - low overflows; halved values do not
    half_span = high / 2 - low / 2

    counts = [0] * bins
    for value in values:
        if width == 0:
            index = 0
        elif math.isfinite(width):
            index = math.floor((value - low) / width)
        else:
            index = math.floor((value / 2 - low / 2) / half_span * bins)
        counts[min(index, bins - 1)] += 1

    buckets = []
    for i, count in enumerate(counts):
        lower = _edge(low, high, width, i, bins)
        upper = _edge(low, high, width, i + 1, bins)
        buckets.append(
            HistogramBucket(
                label=f"{lower:.1f}-{upper:.1f}",
                lower=lower,
                upper=upper,
                count=count,
            )
        )
    return buckets


def column_histogram(
    values: Sequence[float], settings: Settings | None = None
) -> list[HistogramBucket]:
    """Histogram of a numerical column with the configured bin clamps.

    Args:
        values: Parsed numeric values of a column
        settings: Settings (defaults to get_settings())

    Returns:
        List of HistogramBucket, lowest first
    """
    settings = settings or get_settings()
    bins = optimal_bin_count(
        values,
        min_bins=settings.histogram_min_bins,
        max_bins=settings.histogram_max_bins,
    )
    return build_histogram(values, bins)
