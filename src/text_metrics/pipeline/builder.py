"""Metric builder.

Composes simplifiers, tokenizers, token filters and transforms with one
terminal algorithm:

    metric = (with_metric(CosineSimilarity())
              .simplify(LowerCase())
              .tokenize(Whitespace())
              .filter(Stopwords(["a", "the"]))
              .tokenize(QGram(3))
              .tokenizer_cache(1000)
              .build())

Builders are immutable: every call returns a new builder, so a partially
configured builder can be shared and extended in different directions.
All legality checks run in `build()`; a metric that builds never fails
for structural reasons at comparison time.

Caches given as a capacity are created per `build()`, so metrics built from
one builder never share cache state. Passing a cache object instead shares
that object.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Tuple, Union

from ..cache import BoundedCache, LRUCache
from ..errors import InvalidCompositionError
from ..metrics.base import Distance, Metric
from .metric import AssembledDistance, AssembledMetric
from .steps import Step, StepKind

log = logging.getLogger("text_metrics.builder")

CacheSpec = Union[None, int, BoundedCache]


@dataclass(frozen=True)
class MetricBuilder:
    metric: Optional[Metric] = None
    steps: Tuple[Step, ...] = ()
    simplifier_cache_spec: CacheSpec = None
    tokenizer_cache_spec: CacheSpec = None

    def add_step(self, kind: StepKind, fn: Callable) -> "MetricBuilder":
        return replace(self, steps=self.steps + (Step(kind, fn),))

    def simplify(self, simplifier: Callable[[str], str]) -> "MetricBuilder":
        return self.add_step(StepKind.SIMPLIFY, simplifier)

    def tokenize(self, tokenizer: Callable[[str], List[str]]) -> "MetricBuilder":
        return self.add_step(StepKind.TOKENIZE, tokenizer)

    def filter(self, predicate: Callable[[str], bool]) -> "MetricBuilder":
        return self.add_step(StepKind.FILTER, predicate)

    def transform(self, function: Callable[[str], str]) -> "MetricBuilder":
        return self.add_step(StepKind.TRANSFORM, function)

    def simplifier_cache(self, cache: Union[int, BoundedCache]) -> "MetricBuilder":
        return replace(self, simplifier_cache_spec=cache)

    def tokenizer_cache(self, cache: Union[int, BoundedCache]) -> "MetricBuilder":
        return replace(self, tokenizer_cache_spec=cache)

    def validate(self) -> None:
        """Raise InvalidCompositionError naming the first rule this builder breaks."""
        metric = self.metric
        if metric is None:
            raise InvalidCompositionError("a terminal comparison algorithm is required")
        if not isinstance(metric, Metric):
            raise InvalidCompositionError(
                f"terminal algorithm must be a Metric, got {type(metric).__name__}"
            )

        for i, step in enumerate(self.steps):
            if not callable(step.fn):
                raise InvalidCompositionError(
                    f"step {i} ({step.kind.value}) is not callable: {step.fn!r}"
                )

        kinds = [s.kind for s in self.steps]
        tokenized = False
        for i, kind in enumerate(kinds):
            if kind is StepKind.TOKENIZE:
                tokenized = True
            elif kind is StepKind.SIMPLIFY and tokenized:
                raise InvalidCompositionError(
                    f"step {i}: simplifiers must come before the first tokenizer"
                )
            elif kind in (StepKind.FILTER, StepKind.TRANSFORM) and not tokenized:
                raise InvalidCompositionError(
                    f"step {i}: {kind.value} works on tokens and needs a tokenizer before it"
                )

        if metric.shape.tokenized and not tokenized:
            raise InvalidCompositionError(
                f"{metric!r} compares {metric.shape.value}s of tokens and needs at least one tokenizer"
            )
        if not metric.shape.tokenized:
            token_steps = [k.value for k in kinds if k is not StepKind.SIMPLIFY]
            if token_steps:
                raise InvalidCompositionError(
                    f"{metric!r} compares whole strings; remove the {', '.join(sorted(set(token_steps)))} step(s)"
                )
            if self.tokenizer_cache_spec is not None:
                raise InvalidCompositionError(f"{metric!r} compares whole strings; a tokenizer cache has nothing to cache")

        if self.simplifier_cache_spec is not None and StepKind.SIMPLIFY not in kinds:
            raise InvalidCompositionError("a simplifier cache needs at least one simplifier")
        if self.tokenizer_cache_spec is not None and not tokenized:
            raise InvalidCompositionError("a tokenizer cache needs at least one tokenizer")
        for label, spec in (("simplifier", self.simplifier_cache_spec), ("tokenizer", self.tokenizer_cache_spec)):
            _check_cache_spec(label, spec)

    def build(self) -> AssembledMetric:
        self.validate()
        cls = AssembledDistance if isinstance(self.metric, Distance) else AssembledMetric
        assembled = cls(
            self.metric,
            self.steps,
            simplifier_cache=_make_cache(self.simplifier_cache_spec),
            tokenizer_cache=_make_cache(self.tokenizer_cache_spec),
        )
        log.debug("Built %r", assembled)
        return assembled


def with_metric(metric: Metric) -> MetricBuilder:
    """Start a builder around a terminal algorithm."""
    return MetricBuilder(metric=metric)


def _check_cache_spec(label: str, spec: CacheSpec) -> None:
    if spec is None or isinstance(spec, BoundedCache):
        return
    if isinstance(spec, bool) or not isinstance(spec, int):
        raise InvalidCompositionError(
            f"{label} cache must be a capacity or a BoundedCache, got {type(spec).__name__}"
        )
    if spec < 1:
        raise InvalidCompositionError(f"{label} cache capacity must be >= 1, got {spec}")


def _make_cache(spec: CacheSpec) -> Optional[BoundedCache]:
    if spec is None or isinstance(spec, BoundedCache):
        return spec
    return LRUCache(spec)
