"""Datetime column profiling.

Computes the covered range and three frequency mappings:
- by calendar day (YYYY-MM-DD)
- by ISO-8601 week (YYYY-Www; the week's Thursday decides the ISO year)
- by calendar month (YYYY-MM)
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from datetime import datetime, timedelta

from dataprism.analysis.temporal.models import DateTimeSummary

_ONE_DAY = timedelta(days=1)


def day_key(value: datetime) -> str:
    """Calendar day bucket, YYYY-MM-DD."""
    return value.strftime("%Y-%m-%d")


def iso_week_key(value: datetime) -> str:
    """ISO-8601 week bucket, YYYY-Www.

    Uses the ISO year, which differs from the calendar year for dates near
    New Year (e.g. 2024-12-30 is 2025-W01, 2021-01-01 is 2020-W53).
    """
    iso = value.isocalendar()
    return f"{iso.year:04d}-W{iso.week:02d}"


def month_key(value: datetime) -> str:
    """Calendar month bucket, YYYY-MM."""
    return value.strftime("%Y-%m")


def day_range(start: datetime, end: datetime) -> int:
    """Number of days between two datetimes, rounded up."""
    return math.ceil((end - start) / _ONE_DAY)


def compute_datetime_summary(values: Sequence[datetime]) -> DateTimeSummary:
    """Compute range and frequency statistics for a datetime column.

    Args:
        values: Parsed datetimes, at least one, all in one frame (naive UTC)

    Returns:
        DateTimeSummary

    Raises:
        ValueError: If values is empty
    """
    if not values:
        raise ValueError("compute_datetime_summary requires at least one value")

    sorted_values = sorted(values)
    min_date = sorted_values[0]
    max_date = sorted_values[-1]

    return DateTimeSummary(
        min_date=min_date,
        max_date=max_date,
        range=day_range(min_date, max_date),
        frequency_by_day=dict(Counter(day_key(v) for v in values)),
        frequency_by_week=dict(Counter(iso_week_key(v) for v in values)),
        frequency_by_month=dict(Counter(month_key(v) for v in values)),
        total_count=len(values),
    )
