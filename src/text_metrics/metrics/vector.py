"""Vector-space metrics over token multisets.

Each multiset is read as a sparse vector of token counts; a token missing
from one side counts as 0. Zero and negative counts are dropped first
(`+counter`), so a Counter left holding only zeros is empty. All loops run
once over the distinct tokens of the union.
"""

from __future__ import annotations
from collections import Counter
from math import sqrt

from ..containers import Shape, size
from ..errors import require_inputs
from .base import Distance, Metric


def _union(a: Counter, b: Counter):
    yield from a
    for token in b:
        if token not in a:
            yield token


class CosineSimilarity(Metric):
    name = "cosine_similarity"
    shape = Shape.MULTISET

    def compare(self, a: Counter, b: Counter) -> float:
        require_inputs(a, b)
        a, b = +a, +b
        if not a and not b:
            return 1.0
        if not a or not b:
            return 0.0

        dot = 0
        magnitude_a = 0
        magnitude_b = 0
        for token in _union(a, b):
            count_a = a.get(token, 0)
            count_b = b.get(token, 0)
            dot += count_a * count_b
            magnitude_a += count_a * count_a
            magnitude_b += count_b * count_b
        # a.b / (||a|| * ||b||)
        return min(1.0, dot / sqrt(magnitude_a * magnitude_b))


class EuclideanDistance(Metric, Distance):
    """Euclidean distance between count vectors.

    The similarity rescales the distance against the largest distance two
    multisets of these sizes could have, sqrt(|a|^2 + |b|^2), reached when
    they share no tokens.
    """

    name = "euclidean_distance"
    shape = Shape.MULTISET

    def compare(self, a: Counter, b: Counter) -> float:
        require_inputs(a, b)
        a, b = +a, +b
        if not a and not b:
            return 1.0
        if not a or not b:
            return 0.0
        size_a, size_b = size(a), size(b)
        max_distance = sqrt(size_a * size_a + size_b * size_b)
        return max(0.0, (max_distance - self.distance(a, b)) / max_distance)

    def distance(self, a: Counter, b: Counter) -> float:
        require_inputs(a, b)
        a, b = +a, +b
        total = 0
        for token in _union(a, b):
            delta = a.get(token, 0) - b.get(token, 0)
            total += delta * delta
        return sqrt(total)


class BlockDistance(Metric, Distance):
    """Manhattan (L1) distance between count vectors."""

    name = "block_distance"
    shape = Shape.MULTISET

    def compare(self, a: Counter, b: Counter) -> float:
        require_inputs(a, b)
        a, b = +a, +b
        if not a and not b:
            return 1.0
        return 1.0 - self.distance(a, b) / (size(a) + size(b))

    def distance(self, a: Counter, b: Counter) -> float:
        require_inputs(a, b)
        a, b = +a, +b
        return float(sum(abs(a.get(t, 0) - b.get(t, 0)) for t in _union(a, b)))
