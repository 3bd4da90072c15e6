"""Frequency statistics for categorical columns."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from scipy import stats

from dataprism.analysis.statistics.models import CategoricalSummary, ValueCount


def count_values(values: Sequence[str]) -> dict[str, int]:
    """Tally occurrences per distinct value, in first-seen order."""
    return dict(Counter(values))


def compute_categorical_summary(values: Sequence[str], top_n: int = 10) -> CategoricalSummary:
    """Compute frequency statistics for a categorical column.

    Values are ranked by descending count. Ties keep first-seen order
    (sorted() is stable). Entropy is computed over all distinct values,
    not only the top N.

    Args:
        values: String-coerced clean values
        top_n: Number of top values to report

    Returns:
        CategoricalSummary
    """
    total = len(values)
    frequency = count_values(values)

    ranked = sorted(frequency.items(), key=lambda item: item[1], reverse=True)
    top_values = [
        ValueCount(value=value, count=count, percentage=count / total * 100)
        for value, count in ranked[:top_n]
    ]

    entropy = float(stats.entropy(list(frequency.values()), base=2)) if frequency else 0.0

    return CategoricalSummary(
        top_values=top_values,
        unique_count=len(frequency),
        total_count=total,
        entropy=entropy,
    )
