"""Pure correlation algorithms."""

from dataprism.analysis.correlation.algorithms.pearson import pairwise_complete, pearson

__all__ = [
    "pairwise_complete",
    "pearson",
]
