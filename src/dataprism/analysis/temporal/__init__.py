"""Temporal profiling module.

Summarises datetime columns: min/max, day range, and frequencies by day,
ISO week and month.
"""

from dataprism.analysis.temporal.models import DateTimeSummary
from dataprism.analysis.temporal.profiler import (
    compute_datetime_summary,
    day_key,
    day_range,
    iso_week_key,
    month_key,
)

__all__ = [
    "compute_datetime_summary",
    "day_key",
    "day_range",
    "iso_week_key",
    "month_key",
    "DateTimeSummary",
]
