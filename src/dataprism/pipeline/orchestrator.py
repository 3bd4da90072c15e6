"""Table analysis orchestrator.

Runs the profiling pipeline over one in-memory table:

    rows -> per-column type inference -> matching statistics calculator
         -> correlation matrix over the numerical columns -> AnalysisResult

Per-column work has no cross-column dependency and may run on a
ThreadPoolExecutor (settings.max_workers > 1). Results are assembled in
column order, and correlation runs only after every column is done, so the
output is identical either way.
"""

from __future__ import annotations

import time
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any
from uuid import uuid4

from dataprism.analysis.correlation.processor import compute_correlation_matrix
from dataprism.analysis.statistics.categorical import compute_categorical_summary
from dataprism.analysis.statistics.models import CategoricalSummary, NumericalSummary
from dataprism.analysis.statistics.numeric import compute_numerical_summary
from dataprism.analysis.temporal.models import DateTimeSummary
from dataprism.analysis.temporal.profiler import compute_datetime_summary
from dataprism.analysis.typing.inference import build_column
from dataprism.analysis.typing.models import (
    CategoricalColumn,
    Column,
    DatetimeColumn,
    NumericalColumn,
)
from dataprism.core.config import Settings, get_settings
from dataprism.core.logging import current_log_context, get_logger, log_context
from dataprism.core.models.base import Result
from dataprism.pipeline.models import AnalysisResult

logger = get_logger(__name__)

Summary = NumericalSummary | CategoricalSummary | DateTimeSummary


@dataclass
class ColumnOutcome:
    """Typed column plus its summary (None when nothing parsed)."""

    column: Column
    summary: Summary | None


def extract_columns(rows: Sequence[Mapping[str, Any]]) -> dict[str, list[Any]]:
    """Pivot rows into per-column raw value lists.

    Column order is the key order of the first row. A key absent from a
    later row reads as a missing cell.
    """
    headers = list(rows[0].keys())
    return {header: [row.get(header) for row in rows] for header in headers}


def profile_column(name: str, raw_values: Sequence[Any], settings: Settings) -> ColumnOutcome:
    """Classify one column and compute the summary for its kind."""
    column = build_column(name, raw_values, settings=settings)

    summary: Summary | None = None
    if column.values:
        if isinstance(column, NumericalColumn):
            summary = compute_numerical_summary(column.values)
        elif isinstance(column, DatetimeColumn):
            summary = compute_datetime_summary(column.values)
        elif isinstance(column, CategoricalColumn):
            summary = compute_categorical_summary(column.values, top_n=settings.top_n_values)
        logger.info("column_profiled", column=name, kind=column.kind, count=len(column.values))
    else:
        logger.info("column_skipped", column=name, kind=column.kind, reason="no_parsed_values")

    return ColumnOutcome(column=column, summary=summary)


def _profile_columns(
    raw_columns: dict[str, list[Any]], settings: Settings
) -> list[ColumnOutcome]:
    if settings.max_workers <= 1 or len(raw_columns) <= 1:
        return [profile_column(name, values, settings) for name, values in raw_columns.items()]

    context = current_log_context()

    def run(name: str, values: list[Any]) -> ColumnOutcome:
        # Worker threads don't inherit context variables
        with log_context(**context):
            return profile_column(name, values, settings)

    with ThreadPoolExecutor(max_workers=settings.max_workers) as pool:
        futures = [pool.submit(run, name, values) for name, values in raw_columns.items()]
        return [future.result() for future in futures]


def profile_table(
    rows: Sequence[Mapping[str, Any]] | None,
    settings: Settings | None = None,
) -> Result[AnalysisResult]:
    """Profile every column of a table and correlate its numerical columns.

    Malformed cells never cause a failure; they are excluded from the
    parsed values. An empty table yields an empty result with no
    correlation matrix.

    Args:
        rows: Parsed rows, each mapping column name to raw cell value.
            Must not be None.
        settings: Settings (defaults to get_settings())

    Returns:
        Result containing AnalysisResult; failed only when rows is None
    """
    if rows is None:
        return Result.fail("profile_table requires a row collection, got None")

    settings = settings or get_settings()
    start_time = time.time()
    analysis_id = str(uuid4())

    with log_context(analysis_id=analysis_id):
        if len(rows) == 0:
            logger.info("analysis_skipped", reason="empty_table")
            return Result.ok(AnalysisResult(analysis_id=analysis_id))

        raw_columns = extract_columns(rows)
        logger.info("analysis_started", rows=len(rows), columns=len(raw_columns))

        outcomes = _profile_columns(raw_columns, settings)

        numerical_stats: dict[str, NumericalSummary] = {}
        categorical_stats: dict[str, CategoricalSummary] = {}
        datetime_stats: dict[str, DateTimeSummary] = {}
        for outcome in outcomes:
            name = outcome.column.name
            if isinstance(outcome.summary, NumericalSummary):
                numerical_stats[name] = outcome.summary
            elif isinstance(outcome.summary, CategoricalSummary):
                categorical_stats[name] = outcome.summary
            elif isinstance(outcome.summary, DateTimeSummary):
                datetime_stats[name] = outcome.summary

        columns = [outcome.column for outcome in outcomes]
        correlation_matrix = compute_correlation_matrix(
            columns, alignment=settings.correlation_alignment
        )

        duration = time.time() - start_time
        logger.info(
            "analysis_completed",
            numerical=len(numerical_stats),
            categorical=len(categorical_stats),
            datetime=len(datetime_stats),
            duration_seconds=round(duration, 4),
        )

        return Result.ok(
            AnalysisResult(
                analysis_id=analysis_id,
                columns=columns,
                numerical_stats=numerical_stats,
                categorical_stats=categorical_stats,
                datetime_stats=datetime_stats,
                correlation_matrix=correlation_matrix,
                duration_seconds=duration,
            )
        )
