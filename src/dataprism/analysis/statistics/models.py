"""Statistical summary models.

Summaries are frozen once computed; presentation layers read them and
decide how to display non-finite values.
"""

from pydantic import BaseModel, ConfigDict, Field


class NumericalSummary(BaseModel):
    """Descriptive statistics for a numerical column.

    Invariants for count >= 1:
    - min <= q1 <= median <= q3 <= max
    - range == max - min
    - std_dev == sqrt(variance)

    skewness and kurtosis may be NaN or +/-Inf for tiny or constant samples.
    """

    model_config = ConfigDict(frozen=True)

    mean: float
    median: float
    mode: list[float]  # every value tied for the highest frequency, ascending
    min: float
    max: float
    q1: float  # nearest-rank 25th percentile
    q3: float  # nearest-rank 75th percentile
    range: float
    variance: float  # population variance (divisor n)
    std_dev: float
    count: int
    skewness: float  # adjusted Fisher-Pearson
    kurtosis: float  # sample excess kurtosis


class ValueCount(BaseModel):
    """Value frequency."""

    model_config = ConfigDict(frozen=True)

    value: str
    count: int
    percentage: float  # 0-100


class CategoricalSummary(BaseModel):
    """Frequency statistics for a categorical column."""

    model_config = ConfigDict(frozen=True)

    top_values: list[ValueCount] = Field(default_factory=list)
    unique_count: int
    total_count: int
    entropy: float  # Shannon entropy in bits, over all distinct values


class HistogramBucket(BaseModel):
    """A histogram bucket covering [lower, upper)."""

    model_config = ConfigDict(frozen=True)

    label: str
    lower: float
    upper: float
    count: int
