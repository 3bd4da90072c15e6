"""Shared pytest fixtures for all tests."""

import pytest

from dataprism.analysis.typing.patterns import PatternConfig, load_pattern_config
from dataprism.core.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Fresh settings with defaults (not the cached instance)."""
    return Settings()


@pytest.fixture(scope="session")
def pattern_config() -> PatternConfig:
    """The packaged value patterns."""
    return load_pattern_config()


@pytest.fixture
def sales_rows() -> list[dict[str, str]]:
    """A small mixed-type table as produced by a CSV parser."""
    return [
        {"order_date": "2024-01-01", "amount": "10.5", "units": "1", "region": "north"},
        {"order_date": "2024-01-02", "amount": "20.0", "units": "2", "region": "south"},
        {"order_date": "2024-01-08", "amount": "30.5", "units": "3", "region": "north"},
        {"order_date": "2024-01-15", "amount": "40.0", "units": "4", "region": "east"},
        {"order_date": "2024-02-01", "amount": "50.5", "units": "5", "region": "north"},
    ]
