"""Type inference module.

Classifies each column as numerical, categorical or datetime from its raw
cell values and builds the matching typed column variant.
"""

from dataprism.analysis.typing.inference import (
    build_column,
    clean_values,
    infer_column_kind,
    is_missing,
    parse_date,
    parse_number,
)
from dataprism.analysis.typing.models import (
    CategoricalColumn,
    Column,
    DatetimeColumn,
    NumericalColumn,
)
from dataprism.analysis.typing.patterns import (
    Pattern,
    PatternConfig,
    get_pattern_config,
    load_pattern_config,
)

__all__ = [
    # Main entry points
    "build_column",
    "infer_column_kind",
    # Cell helpers
    "clean_values",
    "is_missing",
    "parse_date",
    "parse_number",
    # Patterns
    "Pattern",
    "PatternConfig",
    "get_pattern_config",
    "load_pattern_config",
    # Models
    "Column",
    "NumericalColumn",
    "CategoricalColumn",
    "DatetimeColumn",
]
