"""Tests for display-side statistic selection."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from dataprism.analysis.statistics import compute_categorical_summary, compute_numerical_summary
from dataprism.analysis.temporal import compute_datetime_summary
from dataprism.core.formatting.stats import STAT_OPTIONS, StatSelection, select_stats


class TestStatSelection:
    """Tests for StatSelection."""

    def test_catalog_ids_are_unique(self):
        """Test that option ids do not collide."""
        ids = [option.id for option in STAT_OPTIONS]
        assert len(ids) == len(set(ids))

    def test_defaults(self):
        """Test the default enablement."""
        selection = StatSelection()

        assert selection.is_enabled("mean")
        assert selection.is_enabled("top_values")
        assert selection.is_enabled("frequency")
        assert not selection.is_enabled("variance")
        assert not selection.is_enabled("skewness")
        assert not selection.is_enabled("kurtosis")
        assert not selection.is_enabled("entropy")

    def test_partial_selection_merges_defaults(self):
        """Test that unspecified ids keep their default."""
        selection = StatSelection(enabled={"mean": False})

        assert not selection.is_enabled("mean")
        assert selection.is_enabled("median")

    def test_unknown_id_rejected(self):
        """Test that a typo is a validation error, not silently ignored."""
        with pytest.raises(ValidationError):
            StatSelection(enabled={"meen": True})

        with pytest.raises(KeyError):
            StatSelection().is_enabled("meen")

    def test_toggle_returns_new_selection(self):
        """Test that toggling does not mutate the original."""
        original = StatSelection()
        toggled = original.toggle("entropy")

        assert toggled.is_enabled("entropy")
        assert not original.is_enabled("entropy")
        assert toggled.toggle("entropy") == original

    def test_options_for_category(self):
        """Test per-category listing in catalog order."""
        ids = [option.id for option in StatSelection().options_for("categorical")]
        assert ids == ["unique_count", "total_count", "top_values"]


class TestSelectStats:
    """Tests for select_stats."""

    def test_numerical_defaults(self):
        """Test projecting a numerical summary with default selection."""
        summary = compute_numerical_summary([1.0, 2.0, 3.0, 4.0, 5.0])
        selected = select_stats(summary)

        assert list(selected) == [
            "mean",
            "median",
            "mode",
            "min",
            "max",
            "q1",
            "q3",
            "range",
            "std_dev",
            "count",
        ]
        assert selected["mean"] == 3.0

    def test_enabling_hidden_stat(self):
        """Test that a disabled-by-default stat can be shown."""
        summary = compute_categorical_summary(["a", "a", "b", "c"])
        selected = select_stats(summary, StatSelection(enabled={"entropy": True}))

        assert selected["entropy"] == pytest.approx(1.5)

    def test_datetime_fields(self):
        """Test that datetime options map to summary field names."""
        summary = compute_datetime_summary([datetime(2024, 1, 1), datetime(2024, 1, 8)])
        selected = select_stats(summary, StatSelection(enabled={"frequency": False}))

        assert selected == {
            "min_date": datetime(2024, 1, 1),
            "max_date": datetime(2024, 1, 8),
            "range": 7,
            "total_count": 2,
        }
