"""Correlation analysis module.

Pearson correlation between numerical columns of one table:
- Full matrix over every ordered pair (diagonal fixed at 1)
- Strength labels and notable-pair listing for presentation

Main entry points:
- compute_correlation_matrix: matrix over a table's columns
- find_notable_pairs: interpreted pairs above a |r| threshold
"""

from dataprism.analysis.correlation.algorithms import pairwise_complete, pearson
from dataprism.analysis.correlation.models import (
    CorrelationMatrix,
    CorrelationPair,
    CorrelationStrength,
)
from dataprism.analysis.correlation.processor import (
    classify_strength,
    compute_correlation_matrix,
    find_notable_pairs,
    to_pair,
)

__all__ = [
    # Main entry points
    "compute_correlation_matrix",
    "find_notable_pairs",
    # Algorithms
    "pearson",
    "pairwise_complete",
    # Interpretation
    "classify_strength",
    "to_pair",
    # Pydantic Models
    "CorrelationMatrix",
    "CorrelationPair",
    "CorrelationStrength",
]
