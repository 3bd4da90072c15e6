"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_config_dir() -> Path:
    """Find the config directory shipped with the package.

    Looks for a 'config/' directory next to the package modules.
    Falls back to relative Path("config") if not found.
    """
    # Start from this file: src/dataprism/core/config.py
    package_dir = Path(__file__).resolve().parent.parent
    candidate = package_dir / "config"
    if candidate.is_dir():
        return candidate

    # Fallback: relative path (works when CWD is project root)
    return Path("config")


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: DATAPRISM_
    """

    model_config = SettingsConfigDict(
        env_prefix="DATAPRISM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Configuration paths
    config_path: Path = Field(
        default_factory=_find_config_dir,
        description="Path to configuration files (value patterns)",
    )

    # Type inference
    datetime_threshold: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Fraction of clean values that must parse as dates (exclusive)",
    )
    numeric_threshold: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Fraction of clean values that must parse as numbers (exclusive)",
    )

    # Profiling
    top_n_values: int = Field(
        default=10,
        ge=1,
        description="Number of top values to track for categorical columns",
    )
    histogram_min_bins: int = Field(default=5, ge=1)
    histogram_max_bins: int = Field(default=50, ge=1)

    # Correlation
    correlation_alignment: Literal["positional", "pairwise"] = Field(
        default="positional",
        description=(
            "How two numeric series are paired: 'positional' zips independently "
            "filtered values, 'pairwise' keeps only rows where both cells parse"
        ),
    )
    notable_correlation_threshold: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Minimum |r| for a pair to be reported as notable",
    )

    # Execution
    max_workers: int = Field(
        default=1,
        ge=1,
        description="Threads used for per-column profiling (1 = sequential)",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")  # 'json' or 'console'

    @model_validator(mode="after")
    def _check_bin_bounds(self) -> "Settings":
        if self.histogram_min_bins > self.histogram_max_bins:
            raise ValueError("histogram_min_bins must not exceed histogram_max_bins")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
