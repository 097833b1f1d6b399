"""Comparison algorithms, grouped by the container shape they consume."""

from .base import Distance, Metric
from .edit import Levenshtein, TokenLevenshtein
from .identity import Identity
from .sets import DiceSimilarity, JaccardSimilarity, OverlapCoefficient, TanimotoCoefficient
from .vector import BlockDistance, CosineSimilarity, EuclideanDistance

__all__ = [
    "Metric",
    "Distance",
    "CosineSimilarity",
    "EuclideanDistance",
    "BlockDistance",
    "TanimotoCoefficient",
    "JaccardSimilarity",
    "DiceSimilarity",
    "OverlapCoefficient",
    "Levenshtein",
    "TokenLevenshtein",
    "Identity",
]
