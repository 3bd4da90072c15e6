"""Display-side statistic selection.

The engine always computes every statistic. Which ones a report or screen
shows is a presentation choice, described here as a catalog of options with
their default enablement and a validated selection over that catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dataprism.analysis.statistics.models import CategoricalSummary, NumericalSummary
from dataprism.analysis.temporal.models import DateTimeSummary

StatCategory = Literal["numerical", "categorical", "datetime"]


@dataclass(frozen=True)
class StatOption:
    """One selectable statistic."""

    id: str
    label: str
    category: StatCategory
    fields: tuple[str, ...]  # summary fields shown when enabled
    enabled: bool = True


STAT_OPTIONS: tuple[StatOption, ...] = (
    # Numerical
    StatOption("mean", "Mean", "numerical", ("mean",)),
    StatOption("median", "Median", "numerical", ("median",)),
    StatOption("mode", "Mode", "numerical", ("mode",)),
    StatOption("min", "Minimum", "numerical", ("min",)),
    StatOption("max", "Maximum", "numerical", ("max",)),
    StatOption("q1", "Q1 (25th percentile)", "numerical", ("q1",)),
    StatOption("q3", "Q3 (75th percentile)", "numerical", ("q3",)),
    StatOption("range", "Range", "numerical", ("range",)),
    StatOption("std_dev", "Standard Deviation", "numerical", ("std_dev",)),
    StatOption("count", "Count", "numerical", ("count",)),
    StatOption("variance", "Variance", "numerical", ("variance",), enabled=False),
    StatOption("skewness", "Skewness", "numerical", ("skewness",), enabled=False),
    StatOption("kurtosis", "Kurtosis", "numerical", ("kurtosis",), enabled=False),
    # Categorical
    StatOption("unique_count", "Unique Count", "categorical", ("unique_count",)),
    StatOption("total_count", "Total Count", "categorical", ("total_count",)),
    StatOption("top_values", "Top Values", "categorical", ("top_values",)),
    StatOption("entropy", "Entropy", "categorical", ("entropy",), enabled=False),
    # Datetime
    StatOption("min_date", "Minimum Date", "datetime", ("min_date",)),
    StatOption("max_date", "Maximum Date", "datetime", ("max_date",)),
    StatOption("date_range", "Date Range", "datetime", ("range",)),
    StatOption("date_count", "Date Count", "datetime", ("total_count",)),
    StatOption(
        "frequency",
        "Frequency Analysis",
        "datetime",
        ("frequency_by_day", "frequency_by_week", "frequency_by_month"),
    ),
)

_OPTIONS_BY_ID = {option.id: option for option in STAT_OPTIONS}

_CATEGORY_BY_SUMMARY: dict[type[BaseModel], StatCategory] = {
    NumericalSummary: "numerical",
    CategoricalSummary: "categorical",
    DateTimeSummary: "datetime",
}


def _default_enabled() -> dict[str, bool]:
    return {option.id: option.enabled for option in STAT_OPTIONS}


class StatSelection(BaseModel):
    """Which statistics to display, keyed by option id.

    Ids missing from `enabled` fall back to the catalog default.
    Unknown ids are rejected.
    """

    model_config = ConfigDict(frozen=True)

    enabled: dict[str, bool] = Field(default_factory=_default_enabled)

    @field_validator("enabled")
    @classmethod
    def _check_known_ids(cls, value: dict[str, bool]) -> dict[str, bool]:
        unknown = sorted(set(value) - set(_OPTIONS_BY_ID))
        if unknown:
            raise ValueError(f"Unknown statistic ids: {', '.join(unknown)}")
        return {**_default_enabled(), **value}

    def is_enabled(self, stat_id: str) -> bool:
        """Check whether a statistic is selected.

        Raises:
            KeyError: If stat_id is not in the catalog
        """
        if stat_id not in _OPTIONS_BY_ID:
            raise KeyError(stat_id)
        return self.enabled[stat_id]

    def toggle(self, stat_id: str) -> StatSelection:
        """Return a new selection with one statistic flipped."""
        return StatSelection(enabled={**self.enabled, stat_id: not self.is_enabled(stat_id)})

    def options_for(self, category: StatCategory) -> list[StatOption]:
        """Enabled options of one category, in catalog order."""
        return [o for o in STAT_OPTIONS if o.category == category and self.enabled[o.id]]


def select_stats(
    summary: NumericalSummary | CategoricalSummary | DateTimeSummary,
    selection: StatSelection | None = None,
) -> dict[str, Any]:
    """Project a summary onto the selected statistics.

    Args:
        summary: Any column summary
        selection: Display selection (defaults to the catalog defaults)

    Returns:
        Dict of enabled summary fields, in catalog order
    """
    selection = selection or StatSelection()
    category = _CATEGORY_BY_SUMMARY[type(summary)]
    data = summary.model_dump()

    selected: dict[str, Any] = {}
    for option in selection.options_for(category):
        for field_name in option.fields:
            selected[field_name] = data[field_name]
    return selected
