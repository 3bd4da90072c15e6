"""dataprism - column profiling for tabular data.

Infers a kind for each column (numerical, categorical, datetime), computes
descriptive statistics for it, and correlates the numerical columns.

Usage:
    from dataprism import profile_table

    result = profile_table(rows).unwrap()
    result.numerical_stats["amount"].median
"""

from dataprism.analysis.correlation import CorrelationMatrix, CorrelationPair, find_notable_pairs
from dataprism.analysis.statistics import (
    CategoricalSummary,
    NumericalSummary,
    build_histogram,
    column_histogram,
    optimal_bin_count,
)
from dataprism.analysis.temporal import DateTimeSummary
from dataprism.analysis.typing import (
    CategoricalColumn,
    Column,
    DatetimeColumn,
    NumericalColumn,
)
from dataprism.core import ColumnKind, Result, Settings, get_settings
from dataprism.core.logging import setup_logging
from dataprism.pipeline import AnalysisResult, profile_table

__all__ = [
    # Entry point
    "profile_table",
    # Visualization helpers
    "optimal_bin_count",
    "build_histogram",
    "column_histogram",
    "find_notable_pairs",
    # Models
    "AnalysisResult",
    "Column",
    "NumericalColumn",
    "CategoricalColumn",
    "DatetimeColumn",
    "NumericalSummary",
    "CategoricalSummary",
    "DateTimeSummary",
    "CorrelationMatrix",
    "CorrelationPair",
    "ColumnKind",
    "Result",
    # Config
    "Settings",
    "get_settings",
    "setup_logging",
]
