"""Statistical profiling module.

Computes column-level statistics on parsed values:
- Numerical: mean, median, mode, quartiles, variance, skewness, kurtosis
- Categorical: top values, unique count, Shannon entropy
- Histograms: Freedman-Diaconis bin count and equal-width buckets
"""

from dataprism.analysis.statistics.categorical import (
    compute_categorical_summary,
    count_values,
)
from dataprism.analysis.statistics.histogram import (
    build_histogram,
    column_histogram,
    optimal_bin_count,
)
from dataprism.analysis.statistics.models import (
    CategoricalSummary,
    HistogramBucket,
    NumericalSummary,
    ValueCount,
)
from dataprism.analysis.statistics.numeric import (
    compute_mode,
    compute_numerical_summary,
    nearest_rank_quartiles,
)

__all__ = [
    # Main entry points
    "compute_numerical_summary",
    "compute_categorical_summary",
    "optimal_bin_count",
    "build_histogram",
    "column_histogram",
    # Helpers
    "compute_mode",
    "count_values",
    "nearest_rank_quartiles",
    # Pydantic Models
    "NumericalSummary",
    "CategoricalSummary",
    "ValueCount",
    "HistogramBucket",
]
