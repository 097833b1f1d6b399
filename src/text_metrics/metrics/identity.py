"""Identity metric: 1.0 for equal inputs, 0.0 otherwise.

Useful as a terminal algorithm when checking how a pipeline rewrites its
inputs, independent of any scoring numerics.
"""

from __future__ import annotations
from typing import Any

from ..containers import Shape
from ..errors import require_inputs
from .base import Distance, Metric


class Identity(Metric, Distance):
    name = "identity"

    def __init__(self, shape: Shape = Shape.STRING):
        self.shape = Shape(shape)

    def compare(self, a: Any, b: Any) -> float:
        require_inputs(a, b)
        return 1.0 if a == b else 0.0

    def distance(self, a: Any, b: Any) -> float:
        return 1.0 - self.compare(a, b)

    def __repr__(self) -> str:
        return f"Identity(shape={self.shape.value!r})"
