"""Column kind inference.

Classifies a column's raw cell values as datetime, numerical or categorical:

1. Drop missing cells (None and empty string) -> clean values.
   No clean values -> categorical.
2. More than `datetime_threshold` of the clean values are dates -> datetime.
3. More than `numeric_threshold` of the clean values are numbers -> numerical.
4. Otherwise categorical.

Dates are tested strictly before numbers, so zero-padded numeric date
strings are read as dates. Inference never raises.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

from dataprism.analysis.typing.models import (
    CategoricalColumn,
    Column,
    DatetimeColumn,
    NumericalColumn,
)
from dataprism.analysis.typing.patterns import PatternConfig, get_pattern_config
from dataprism.core.config import Settings, get_settings
from dataprism.core.logging import get_logger
from dataprism.core.models.base import ColumnKind

logger = get_logger(__name__)


def is_missing(value: Any) -> bool:
    """Check whether a cell counts as missing."""
    return value is None or value == ""


def clean_values(raw_values: Sequence[Any]) -> list[Any]:
    """Remove missing cells, preserving order."""
    return [v for v in raw_values if not is_missing(v)]


def parse_number(value: Any, pattern_config: PatternConfig | None = None) -> float | None:
    """Parse a cell as a finite number.

    Numbers pass through; strings must have the lexical form of a decimal
    number once surrounding whitespace is stripped. Booleans, NaN and
    infinities are rejected.

    Returns:
        The parsed float, or None if the cell is not a finite number
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        config = pattern_config or get_pattern_config()
        if not config.is_numeric(text):
            return None
        number = float(text)
    else:
        return None
    return number if math.isfinite(number) else None


def parse_date(value: Any, pattern_config: PatternConfig | None = None) -> datetime | None:
    """Parse a cell as a date.

    Only strings are considered. The value must match one of the configured
    date patterns and parse to a valid date. Timezone-aware results are
    converted to UTC and returned naive, so every datetime shares one frame.

    Returns:
        The parsed datetime, or None
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    config = pattern_config or get_pattern_config()
    pattern = config.match_date(text)
    if pattern is None:
        return None
    parsed = pattern.parse(text)
    if parsed is not None and parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(UTC).replace(tzinfo=None)
        except OverflowError:
            # The UTC instant falls outside datetime.min..datetime.max
            return None
    return parsed


def infer_column_kind(
    raw_values: Sequence[Any],
    settings: Settings | None = None,
    pattern_config: PatternConfig | None = None,
) -> ColumnKind:
    """Infer the semantic kind of a column from its raw values.

    Args:
        raw_values: Raw cell values of one column
        settings: Settings providing the classification thresholds
        pattern_config: Value patterns (defaults to the packaged patterns)

    Returns:
        ColumnKind for the column
    """
    settings = settings or get_settings()
    config = pattern_config or get_pattern_config()

    values = clean_values(raw_values)
    if not values:
        return ColumnKind.CATEGORICAL

    total = len(values)

    date_count = sum(1 for v in values if parse_date(v, config) is not None)
    if date_count / total > settings.datetime_threshold:
        return ColumnKind.DATETIME

    numeric_count = sum(1 for v in values if parse_number(v, config) is not None)
    if numeric_count / total > settings.numeric_threshold:
        return ColumnKind.NUMERICAL

    return ColumnKind.CATEGORICAL


def build_column(
    name: str,
    raw_values: Sequence[Any],
    settings: Settings | None = None,
    pattern_config: PatternConfig | None = None,
) -> Column:
    """Classify a column and build its typed variant.

    The kind is decided once here. Cells the kind's parser rejects are
    dropped from `values` but stay in `raw_values` and `clean_values`.
    """
    config = pattern_config or get_pattern_config()
    kind = infer_column_kind(raw_values, settings=settings, pattern_config=config)

    raw = list(raw_values)
    clean = clean_values(raw)

    column: Column
    if kind == ColumnKind.NUMERICAL:
        numbers = [parse_number(v, config) for v in clean]
        column = NumericalColumn(
            name=name,
            raw_values=raw,
            clean_values=clean,
            values=[n for n in numbers if n is not None],
        )
    elif kind == ColumnKind.DATETIME:
        dates = [parse_date(v, config) for v in clean]
        column = DatetimeColumn(
            name=name,
            raw_values=raw,
            clean_values=clean,
            values=[d for d in dates if d is not None],
        )
    else:
        column = CategoricalColumn(
            name=name,
            raw_values=raw,
            clean_values=clean,
            values=[str(v) for v in clean],
        )

    logger.debug(
        "column_classified",
        column=name,
        kind=kind.value,
        clean_count=len(clean),
        parsed_count=len(column.values),
    )
    return column
