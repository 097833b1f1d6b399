"""Comparison algorithm interface.

Algorithms must:
- declare the container `shape` they consume
- return a similarity in [0, 1] from `compare` (1.0 means identical)
- treat two empty inputs as identical and one empty input as dissimilar
- raise InvalidInputError for None instead of treating it as empty

Algorithms that also expose an unnormalized measure implement `Distance`.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

from ..containers import Shape


class Metric(ABC):
    name: str = "metric"
    shape: Shape = Shape.STRING

    @abstractmethod
    def compare(self, a: Any, b: Any) -> float:
        ...

    def __call__(self, a: Any, b: Any) -> float:
        return self.compare(a, b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Distance(ABC):
    """Non-negative distance; 0.0 means `a` and `b` are identical."""

    @abstractmethod
    def distance(self, a: Any, b: Any) -> float:
        ...
