"""Set-overlap metrics.

All of these read the two token sets as binary vectors, so only the sizes
of the sets and of their intersection matter.
"""

from __future__ import annotations
from abc import abstractmethod
from math import sqrt
from typing import FrozenSet

from ..containers import Shape
from ..errors import require_inputs
from .base import Metric


class _SetMetric(Metric):
    shape = Shape.SET

    def compare(self, a: FrozenSet[str], b: FrozenSet[str]) -> float:
        require_inputs(a, b)
        if not a and not b:
            return 1.0
        if not a or not b:
            return 0.0
        return self._score(a, b, len(a & b))

    @abstractmethod
    def _score(self, a: FrozenSet[str], b: FrozenSet[str], common: int) -> float:
        ...


class TanimotoCoefficient(_SetMetric):
    """Cosine similarity of binary vectors: |a & b| / (sqrt|a| * sqrt|b|)."""

    name = "tanimoto_coefficient"

    def _score(self, a, b, common):
        return min(1.0, common / sqrt(len(a) * len(b)))


class JaccardSimilarity(_SetMetric):
    name = "jaccard_similarity"

    def _score(self, a, b, common):
        return common / (len(a) + len(b) - common)


class DiceSimilarity(_SetMetric):
    name = "dice_similarity"

    def _score(self, a, b, common):
        return 2.0 * common / (len(a) + len(b))


class OverlapCoefficient(_SetMetric):
    name = "overlap_coefficient"

    def _score(self, a, b, common):
        return common / min(len(a), len(b))
