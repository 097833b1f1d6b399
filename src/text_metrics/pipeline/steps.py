"""Pipeline step model.

A pipeline is an ordered tuple of steps. Simplify steps form a leading
block over whole strings; the first tokenize step switches the pipeline to
token lists, after which filter, transform and further tokenize steps act
on each token in turn. A `Tokenizer` receives all current tokens at once
through `tokenize_batch`; plain callables are called per token.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Sequence

from ..containers import Container, Shape, materialize


class StepKind(str, Enum):
    SIMPLIFY = "simplify"
    TOKENIZE = "tokenize"
    FILTER = "filter"
    TRANSFORM = "transform"


@dataclass(frozen=True)
class Step:
    kind: StepKind
    fn: Callable

    def __repr__(self) -> str:
        return f"{self.kind.value}({self.fn!r})"


class TokenPipeline:
    """Runs the token steps on one string and materializes the container."""

    def __init__(self, steps: Sequence[Step], shape: Shape):
        self.steps = tuple(steps)
        self.shape = shape

    def tokens(self, text: str) -> List[str]:
        tokens = [text]
        for step in self.steps:
            fn = step.fn
            if step.kind is StepKind.TOKENIZE:
                batch = getattr(fn, "tokenize_batch", None)
                if batch is not None:
                    tokens = [t for split in batch(tokens) for t in split]
                else:
                    tokens = [t for token in tokens for t in fn(token)]
            elif step.kind is StepKind.FILTER:
                tokens = [t for t in tokens if fn(t)]
            elif step.kind is StepKind.TRANSFORM:
                tokens = [fn(t) for t in tokens]
            else:
                raise ValueError(f"{step.kind.value} step cannot run on tokens")
        return tokens

    def __call__(self, text: str) -> Container:
        return materialize(self.shape, self.tokens(text))

    def __repr__(self) -> str:
        return f"TokenPipeline({list(self.steps)!r} -> {self.shape.value})"
