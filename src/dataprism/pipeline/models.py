"""Analysis result model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from dataprism.analysis.correlation.models import CorrelationMatrix
from dataprism.analysis.statistics.models import CategoricalSummary, NumericalSummary
from dataprism.analysis.temporal.models import DateTimeSummary
from dataprism.analysis.typing.models import Column
from dataprism.core.formatting.base import sanitize_for_json


class AnalysisResult(BaseModel):
    """Profile of one table.

    Every input column appears exactly once in `columns`, in table order.
    A column has an entry in at most one of the three stats mappings,
    matching its kind; it has none when no value could be parsed.
    `correlation_matrix` is None only for an empty table.
    """

    model_config = ConfigDict(frozen=True)

    analysis_id: str | None = None
    columns: list[Column] = Field(default_factory=list)
    numerical_stats: dict[str, NumericalSummary] = Field(default_factory=dict)
    categorical_stats: dict[str, CategoricalSummary] = Field(default_factory=dict)
    datetime_stats: dict[str, DateTimeSummary] = Field(default_factory=dict)
    correlation_matrix: CorrelationMatrix | None = None
    duration_seconds: float = 0.0

    @property
    def column_names(self) -> list[str]:
        """Column names in table order."""
        return [c.name for c in self.columns]

    def get_column(self, name: str) -> Column | None:
        """Look up a column by name."""
        return next((c for c in self.columns if c.name == name), None)

    def to_json_dict(self, include_values: bool = False) -> dict[str, Any]:
        """Plain JSON-safe dict for export collaborators.

        Non-finite floats become None and datetimes ISO strings. Raw and
        parsed cell values are left out unless include_values is True.
        """
        exclude: dict[str, Any] | None = None
        if not include_values:
            exclude = {"columns": {"__all__": {"raw_values", "clean_values", "values"}}}
        return sanitize_for_json(self.model_dump(exclude=exclude))
