"""Edit-distance metrics.

Levenshtein distance is the cheapest series of insertions, deletions and
substitutions turning `a` into `b`. Costs are floats so fractional weights
are allowed; with unit costs the distance is the usual operation count.

The similarity divides by the largest distance two inputs of these lengths
can have, max(len a, len b) * max(costs), which keeps it in [0, 1] for any
positive costs. Distance and similarity are symmetric as long as the insert
and delete costs are equal.
"""

from __future__ import annotations
from typing import Sequence

from ..containers import Shape
from ..errors import require_inputs
from .base import Distance, Metric


class Levenshtein(Metric, Distance):
    name = "levenshtein"
    shape = Shape.STRING

    def __init__(self, insert_cost: float = 1.0, delete_cost: float = 1.0, substitute_cost: float = 1.0):
        for label, cost in (("insert_cost", insert_cost), ("delete_cost", delete_cost),
                            ("substitute_cost", substitute_cost)):
            if cost <= 0:
                raise ValueError(f"{label} must be positive, got {cost}")
        self.insert_cost = float(insert_cost)
        self.delete_cost = float(delete_cost)
        self.substitute_cost = float(substitute_cost)

    def compare(self, a: Sequence, b: Sequence) -> float:
        require_inputs(a, b)
        if not a and not b:
            return 1.0
        if not a or not b:
            return 0.0
        longest = max(len(a), len(b))
        max_cost = max(self.insert_cost, self.delete_cost, self.substitute_cost)
        return max(0.0, 1.0 - self.distance(a, b) / (longest * max_cost))

    def distance(self, a: Sequence, b: Sequence) -> float:
        require_inputs(a, b)
        if not a:
            return len(b) * self.insert_cost
        if not b:
            return len(a) * self.delete_cost

        # two-row dynamic programme over prefixes of a (rows) and b (columns)
        previous = [j * self.insert_cost for j in range(len(b) + 1)]
        for i, token_a in enumerate(a, 1):
            current = [i * self.delete_cost]
            for j, token_b in enumerate(b, 1):
                substitute = previous[j - 1] + (0.0 if token_a == token_b else self.substitute_cost)
                current.append(min(
                    substitute,
                    previous[j] + self.delete_cost,
                    current[j - 1] + self.insert_cost,
                ))
            previous = current
        return previous[-1]

    def __repr__(self) -> str:
        if self.insert_cost == self.delete_cost == self.substitute_cost == 1.0:
            return f"{type(self).__name__}()"
        return (f"{type(self).__name__}(insert_cost={self.insert_cost}, "
                f"delete_cost={self.delete_cost}, substitute_cost={self.substitute_cost})")


class TokenLevenshtein(Levenshtein):
    """Levenshtein over token sequences instead of characters."""

    name = "token_levenshtein"
    shape = Shape.SEQUENCE
