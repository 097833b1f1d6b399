"""Assembled metrics.

An assembled metric is the immutable product of `MetricBuilder.build()`.
For each call it:
1. rejects None inputs before any stage runs
2. simplifies each input (through the simplifier cache if configured)
3. tokenizes, filters and transforms each input in configured order and
   materializes the container the algorithm consumes (through the
   tokenizer cache if configured)
4. returns the algorithm's score for the two containers

Nothing is kept between calls except cache contents, so one instance can
serve any number of threads.
"""

from __future__ import annotations
from typing import Callable, Hashable, Iterable, Optional, Sequence

from ..cache import BoundedCache, CachedStage
from ..containers import Container, materialize
from ..errors import InvalidInputError, require_inputs
from ..metrics.base import Distance, Metric
from ..stages.tokens import chain
from .steps import Step, StepKind, TokenPipeline


class AssembledMetric:
    def __init__(
        self,
        algorithm: Metric,
        steps: Sequence[Step],
        simplifier_cache: Optional[BoundedCache] = None,
        tokenizer_cache: Optional[BoundedCache] = None,
    ):
        self.algorithm = algorithm
        self.steps = tuple(steps)
        self.simplifier_cache = simplifier_cache
        self.tokenizer_cache = tokenizer_cache

        simplifiers = [s.fn for s in self.steps if s.kind is StepKind.SIMPLIFY]
        token_steps = [s for s in self.steps if s.kind is not StepKind.SIMPLIFY]

        self._simplify: Optional[Callable[[str], str]] = None
        if simplifiers:
            self._simplify = simplifiers[0] if len(simplifiers) == 1 else chain(*simplifiers)
            if simplifier_cache is not None:
                self._simplify = CachedStage(
                    self._simplify, simplifier_cache, _namespace(StepKind.SIMPLIFY, *simplifiers)
                )

        self._tokenize: Optional[Callable[[str], Container]] = None
        if token_steps:
            self._tokenize = TokenPipeline(token_steps, algorithm.shape)
            if tokenizer_cache is not None:
                self._tokenize = CachedStage(
                    self._tokenize, tokenizer_cache, _namespace(StepKind.TOKENIZE, algorithm.shape, *token_steps)
                )

    @property
    def shape(self):
        return self.algorithm.shape

    def prepare(self, value: str) -> Container:
        """Run one input through the stages; returns what the algorithm sees."""
        if value is None:
            raise InvalidInputError("cannot prepare None")
        if self._simplify is not None:
            value = self._simplify(value)
        if self._tokenize is not None:
            value = self._tokenize(value)
        return value

    def compare(self, a: str, b: str) -> float:
        require_inputs(a, b)
        return self.algorithm.compare(self.prepare(a), self.prepare(b))

    def compare_tokens(self, a: Iterable[str], b: Iterable[str]) -> float:
        """Compare pre-tokenized inputs, skipping simplification and tokenization."""
        require_inputs(a, b)
        if not self.shape.tokenized:
            raise InvalidInputError(f"{self.algorithm!r} compares whole strings, not tokens")
        return self.algorithm.compare(materialize(self.shape, a), materialize(self.shape, b))

    def __call__(self, a: str, b: str) -> float:
        return self.compare(a, b)

    def __repr__(self) -> str:
        parts = [repr(s) for s in self.steps]
        if self.simplifier_cache is not None:
            parts.append(f"simplifier_cache={self.simplifier_cache!r}")
        if self.tokenizer_cache is not None:
            parts.append(f"tokenizer_cache={self.tokenizer_cache!r}")
        parts.append(repr(self.algorithm))
        return f"{type(self).__name__}[{' -> '.join(parts)}]"


class AssembledDistance(AssembledMetric):
    """Assembled metric whose algorithm also measures distance."""

    algorithm: Distance

    def distance(self, a: str, b: str) -> float:
        require_inputs(a, b)
        return self.algorithm.distance(self.prepare(a), self.prepare(b))

    def distance_tokens(self, a: Iterable[str], b: Iterable[str]) -> float:
        require_inputs(a, b)
        if not self.shape.tokenized:
            raise InvalidInputError(f"{self.algorithm!r} compares whole strings, not tokens")
        return self.algorithm.distance(materialize(self.shape, a), materialize(self.shape, b))


def _namespace(*parts) -> Hashable:
    """Cache key prefix naming the stage chain that produced a cached value.

    Metrics built from the same stage objects get equal prefixes and share
    entries in a shared cache; any other chain gets its own entries. A chain
    holding an unhashable stage falls back to a prefix unique to this metric.
    """
    try:
        hash(parts)
    except TypeError:
        return object()
    return parts
