"""Table analysis pipeline.

Main entry point:
- profile_table: rows in, AnalysisResult out
"""

from dataprism.pipeline.models import AnalysisResult
from dataprism.pipeline.orchestrator import (
    ColumnOutcome,
    extract_columns,
    profile_column,
    profile_table,
)

__all__ = [
    "profile_table",
    "profile_column",
    "extract_columns",
    "ColumnOutcome",
    "AnalysisResult",
]
