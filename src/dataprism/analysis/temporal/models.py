"""Temporal summary models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DateTimeSummary(BaseModel):
    """Range and bucketed frequencies for a datetime column.

    Every value contributes exactly one count to each frequency mapping,
    so each mapping sums to total_count.
    """

    model_config = ConfigDict(frozen=True)

    min_date: datetime
    max_date: datetime
    range: int  # whole days, rounded up
    frequency_by_day: dict[str, int] = Field(default_factory=dict)  # YYYY-MM-DD
    frequency_by_week: dict[str, int] = Field(default_factory=dict)  # ISO YYYY-Www
    frequency_by_month: dict[str, int] = Field(default_factory=dict)  # YYYY-MM
    total_count: int
