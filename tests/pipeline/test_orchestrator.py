"""Tests for the table analysis orchestrator."""

import math
from datetime import datetime

import pytest
from structlog.testing import capture_logs

from dataprism.analysis.typing import CategoricalColumn, DatetimeColumn, NumericalColumn
from dataprism.core.config import Settings
from dataprism.pipeline import (
    AnalysisResult,
    extract_columns,
    profile_column,
    profile_table,
)


class TestExtractColumns:
    """Tests for extract_columns."""

    def test_headers_from_first_row(self):
        """Test column order and missing keys in later rows."""
        rows = [{"b": 1, "a": 2}, {"a": 3}, {"b": 4, "a": 5, "extra": 6}]
        columns = extract_columns(rows)

        assert list(columns) == ["b", "a"]
        assert columns["b"] == [1, None, 4]
        assert columns["a"] == [2, 3, 5]


class TestProfileColumn:
    """Tests for profile_column."""

    def test_all_missing_column_has_no_summary(self, settings):
        """Test that a column with no parsed values is kept without stats."""
        outcome = profile_column("notes", [None, "", None], settings)

        assert isinstance(outcome.column, CategoricalColumn)
        assert outcome.summary is None

    def test_top_n_from_settings(self):
        """Test that the categorical top-N comes from settings."""
        settings = Settings(top_n_values=1)
        outcome = profile_column("c", ["x", "y", "x"], settings)

        assert [v.value for v in outcome.summary.top_values] == ["x"]


class TestProfileTable:
    """Tests for profile_table."""

    def test_none_rows_fail(self, settings):
        """Test that a missing row collection is a failed result."""
        result = profile_table(None, settings=settings)

        assert not result.success
        assert result.error
        with pytest.raises(ValueError):
            result.unwrap()

    def test_empty_table(self, settings):
        """Test that no rows give an empty result without a matrix."""
        analysis = profile_table([], settings=settings).unwrap()

        assert analysis.columns == []
        assert analysis.numerical_stats == {}
        assert analysis.categorical_stats == {}
        assert analysis.datetime_stats == {}
        assert analysis.correlation_matrix is None

    def test_mixed_table(self, sales_rows, settings):
        """Test a table with date, numeric and text columns."""
        analysis = profile_table(sales_rows, settings=settings).unwrap()

        assert analysis.column_names == ["order_date", "amount", "units", "region"]
        assert isinstance(analysis.get_column("order_date"), DatetimeColumn)
        assert isinstance(analysis.get_column("amount"), NumericalColumn)
        assert isinstance(analysis.get_column("units"), NumericalColumn)
        assert isinstance(analysis.get_column("region"), CategoricalColumn)
        assert analysis.get_column("missing") is None

        assert set(analysis.numerical_stats) == {"amount", "units"}
        assert set(analysis.categorical_stats) == {"region"}
        assert set(analysis.datetime_stats) == {"order_date"}

        units = analysis.numerical_stats["units"]
        assert units.mean == 3.0
        assert units.q1 == 2.0
        assert units.q3 == 4.0

        region = analysis.categorical_stats["region"]
        assert region.top_values[0].value == "north"
        assert region.top_values[0].count == 3

        dates = analysis.datetime_stats["order_date"]
        assert dates.min_date == datetime(2024, 1, 1)
        assert dates.max_date == datetime(2024, 2, 1)
        assert dates.range == 31

        matrix = analysis.correlation_matrix
        assert matrix is not None
        assert matrix.columns == ["amount", "units"]
        assert matrix.get("amount", "units") > 0.99

    def test_each_column_in_at_most_one_stats_mapping(self, sales_rows, settings):
        """Test that stats mappings are disjoint and match column kinds."""
        rows = [{**row, "empty": None} for row in sales_rows]
        analysis = profile_table(rows, settings=settings).unwrap()

        for column in analysis.columns:
            present = [
                column.name in analysis.numerical_stats,
                column.name in analysis.categorical_stats,
                column.name in analysis.datetime_stats,
            ]
            assert sum(present) <= 1
        assert "empty" in analysis.column_names
        assert sum(
            "empty" in stats
            for stats in (
                analysis.numerical_stats,
                analysis.categorical_stats,
                analysis.datetime_stats,
            )
        ) == 0

    def test_malformed_cells_do_not_fail(self, settings):
        """Test that odd cells are dropped rather than raising."""
        rows = [
            {"n": "1", "when": "2024-01-01"},
            {"n": "2", "when": "not a date"},
            {"n": "three", "when": "2024-01-03"},
            {"n": "4", "when": "2024-01-04"},
            {"n": "5", "when": "2024-01-05"},
            {"n": "6", "when": "2024-01-06"},
        ]
        analysis = profile_table(rows, settings=settings).unwrap()

        assert analysis.numerical_stats["n"].count == 5
        assert analysis.datetime_stats["when"].total_count == 5

    def test_analysis_ids_are_unique(self, sales_rows, settings):
        """Test that every run gets its own id."""
        first = profile_table(sales_rows, settings=settings).unwrap()
        second = profile_table(sales_rows, settings=settings).unwrap()

        assert first.analysis_id
        assert first.analysis_id != second.analysis_id

    def test_threaded_matches_sequential(self, sales_rows):
        """Test that per-column threads give the same result."""
        sequential = profile_table(sales_rows, settings=Settings(max_workers=1)).unwrap()
        threaded = profile_table(sales_rows, settings=Settings(max_workers=4)).unwrap()

        assert threaded.column_names == sequential.column_names
        assert threaded.numerical_stats == sequential.numerical_stats
        assert threaded.categorical_stats == sequential.categorical_stats
        assert threaded.datetime_stats == sequential.datetime_stats
        assert threaded.correlation_matrix == sequential.correlation_matrix

    def test_pairwise_alignment_setting(self, settings):
        """Test that the alignment strategy is taken from settings."""
        rows = [
            {"a": "1", "b": "2"},
            {"a": "2", "b": "4"},
            {"a": "", "b": "6"},
            {"a": "4", "b": "8"},
            {"a": "5", "b": "10"},
        ]
        positional = profile_table(rows, settings=settings).unwrap()
        pairwise = profile_table(
            rows, settings=Settings(correlation_alignment="pairwise")
        ).unwrap()

        assert positional.correlation_matrix.get("a", "b") < 0.999
        assert pairwise.correlation_matrix.get("a", "b") == pytest.approx(1.0)

    def test_values_near_float_limits(self):
        """Test that huge finite numbers profile without overflowing."""
        rows = [{"x": "1e308"}, {"x": "1.5e308"}, {"x": "1.7e308"}]
        result = profile_table(rows, settings=Settings())

        assert result.success
        stats = result.unwrap().numerical_stats["x"]
        assert stats.mean == pytest.approx(1.4e308)
        assert stats.variance == math.inf

        data = result.unwrap().to_json_dict()
        assert data["numerical_stats"]["x"]["std_dev"] is None

    def test_one_event_per_column(self, sales_rows, settings):
        """Test the run and column log events."""
        rows = [{**row, "notes": ""} for row in sales_rows]
        with capture_logs() as logs:
            profile_table(rows, settings=settings)

        events = [entry["event"] for entry in logs]
        assert events[0] == "analysis_started"
        assert events.count("column_profiled") == 4
        assert events.count("column_skipped") == 1
        assert events[-1] == "analysis_completed"

        profiled = [entry for entry in logs if entry["event"] == "column_profiled"]
        assert profiled[0]["column"] == "order_date"
        assert profiled[0]["count"] == 5


class TestAnalysisResultJson:
    """Tests for AnalysisResult.to_json_dict."""

    def test_non_finite_values_become_none(self):
        """Test that NaN moments and datetimes are JSON safe."""
        rows = [{"x": "7", "d": "2024-01-01"}]
        analysis = profile_table(rows, settings=Settings()).unwrap()
        assert math.isnan(analysis.numerical_stats["x"].skewness)

        data = analysis.to_json_dict()

        assert data["numerical_stats"]["x"]["skewness"] is None
        assert data["numerical_stats"]["x"]["mean"] == 7.0
        assert data["datetime_stats"]["d"]["min_date"] == "2024-01-01T00:00:00"

    def test_values_excluded_by_default(self, sales_rows, settings):
        """Test that cell values are only exported on request."""
        analysis = profile_table(sales_rows, settings=settings).unwrap()

        compact = analysis.to_json_dict()
        assert compact["columns"][0] == {"name": "order_date", "kind": "datetime"}

        full = analysis.to_json_dict(include_values=True)
        assert full["columns"][1]["values"] == [10.5, 20.0, 30.5, 40.0, 50.5]
        assert full["columns"][0]["values"][0] == "2024-01-01T00:00:00"

    def test_empty_result(self):
        """Test exporting an empty result."""
        data = AnalysisResult(analysis_id="abc").to_json_dict()

        assert data["analysis_id"] == "abc"
        assert data["columns"] == []
        assert data["correlation_matrix"] is None
