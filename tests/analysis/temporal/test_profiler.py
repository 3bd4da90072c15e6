"""Test temporal profiling module."""

from datetime import datetime, timedelta

import pytest

from dataprism.analysis.temporal import (
    compute_datetime_summary,
    day_key,
    day_range,
    iso_week_key,
    month_key,
)


class TestBucketKeys:
    """Tests for the day, week and month keys."""

    def test_day_and_month_keys(self):
        """Test zero-padded day and month keys."""
        value = datetime(2024, 3, 7, 15, 45)
        assert day_key(value) == "2024-03-07"
        assert month_key(value) == "2024-03"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (datetime(2024, 1, 1), "2024-W01"),
            (datetime(2024, 1, 8), "2024-W02"),
            (datetime(2024, 12, 30), "2025-W01"),
            (datetime(2021, 1, 1), "2020-W53"),
            (datetime(2026, 6, 15), "2026-W25"),
        ],
    )
    def test_iso_week_key_uses_iso_year(self, value, expected):
        """Test that weeks spanning New Year take the ISO year."""
        assert iso_week_key(value) == expected


class TestDayRange:
    """Tests for day_range."""

    def test_whole_days(self):
        """Test an exact number of days."""
        assert day_range(datetime(2024, 1, 1), datetime(2024, 1, 8)) == 7

    def test_partial_day_rounds_up(self):
        """Test that any remainder counts as a full day."""
        assert day_range(datetime(2024, 1, 1), datetime(2024, 1, 2, 6)) == 2

    def test_same_instant(self):
        """Test zero span."""
        moment = datetime(2024, 5, 5, 12)
        assert day_range(moment, moment) == 0


class TestComputeDatetimeSummary:
    """Tests for compute_datetime_summary."""

    def test_one_week_apart(self):
        """Test two dates a week apart."""
        summary = compute_datetime_summary([datetime(2024, 1, 1), datetime(2024, 1, 8)])

        assert summary.min_date == datetime(2024, 1, 1)
        assert summary.max_date == datetime(2024, 1, 8)
        assert summary.range == 7
        assert summary.total_count == 2
        assert summary.frequency_by_day == {"2024-01-01": 1, "2024-01-08": 1}
        assert summary.frequency_by_week == {"2024-W01": 1, "2024-W02": 1}
        assert summary.frequency_by_month == {"2024-01": 2}

    def test_unsorted_input(self):
        """Test that min and max do not depend on input order."""
        values = [datetime(2024, 3, 1), datetime(2023, 12, 31), datetime(2024, 1, 15)]
        summary = compute_datetime_summary(values)

        assert summary.min_date == datetime(2023, 12, 31)
        assert summary.max_date == datetime(2024, 3, 1)
        assert summary.range == 61

    def test_same_day_counts_accumulate(self):
        """Test that several timestamps on one day share a bucket."""
        values = [datetime(2024, 2, 10, h) for h in (1, 9, 23)]
        summary = compute_datetime_summary(values)

        assert summary.frequency_by_day == {"2024-02-10": 3}
        assert summary.range == 1

    def test_single_value(self):
        """Test that one date has a zero range."""
        summary = compute_datetime_summary([datetime(2024, 6, 1)])

        assert summary.range == 0
        assert summary.total_count == 1

    def test_mappings_sum_to_total(self):
        """Test that every value lands in exactly one bucket per mapping."""
        start = datetime(2023, 12, 20)
        values = [start + timedelta(days=3 * i, hours=i) for i in range(40)]
        summary = compute_datetime_summary(values)

        assert sum(summary.frequency_by_day.values()) == summary.total_count
        assert sum(summary.frequency_by_week.values()) == summary.total_count
        assert sum(summary.frequency_by_month.values()) == summary.total_count
        assert summary.total_count == 40

    def test_new_year_week_grouping(self):
        """Test that late-December and early-January dates can share an ISO week."""
        values = [datetime(2024, 12, 30), datetime(2025, 1, 2)]
        summary = compute_datetime_summary(values)

        assert summary.frequency_by_week == {"2025-W01": 2}
        assert summary.frequency_by_month == {"2024-12": 1, "2025-01": 1}

    def test_empty_raises(self):
        """Test that an empty sequence is rejected."""
        with pytest.raises(ValueError):
            compute_datetime_summary([])
