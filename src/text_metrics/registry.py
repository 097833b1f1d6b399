"""Component registry.

Metrics and stages are referenced by name in metric configuration files.

Adding a new component:
1) implement it (a Metric subclass, a Simplifier/Tokenizer, or any callable)
2) register a factory under a new name with `register_*()` at startup
3) reference the name in a metric definition

Factories are called with the keyword arguments given in the configuration,
so every lookup returns a fresh instance.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List

from .metrics import (
    BlockDistance,
    CosineSimilarity,
    DiceSimilarity,
    EuclideanDistance,
    Identity,
    JaccardSimilarity,
    Levenshtein,
    Metric,
    OverlapCoefficient,
    TanimotoCoefficient,
    TokenLevenshtein,
)
from .stages import (
    LowerCase,
    MinLength,
    NormalizeWhitespace,
    Pattern,
    QGram,
    RemoveDiacritics,
    RemoveNonWord,
    Stopwords,
    StripMarkup,
    UnicodeNFC,
    UpperCase,
    Whitespace,
    reverse,
)

Factory = Callable[..., Any]


class Registry:
    """Name -> factory table for one kind of component."""

    def __init__(self, kind: str, factories: Dict[str, Factory]):
        self.kind = kind
        self._factories: Dict[str, Factory] = dict(factories)

    def register(self, name: str, factory: Factory) -> None:
        if name in self._factories:
            raise ValueError(f"{self.kind} '{name}' already registered")
        self._factories[name] = factory

    def names(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, name: str) -> bool:
        return name in self._factories

    def create(self, name: str, **kwargs: Any) -> Any:
        if name not in self._factories:
            raise KeyError(
                f"Unknown {self.kind}: {name}. "
                f"Available: {self.names()}. "
                f"Register with register_{self.kind}()"
            )
        return self._factories[name](**kwargs)


METRICS = Registry("metric", {
    CosineSimilarity.name: CosineSimilarity,
    EuclideanDistance.name: EuclideanDistance,
    BlockDistance.name: BlockDistance,
    TanimotoCoefficient.name: TanimotoCoefficient,
    JaccardSimilarity.name: JaccardSimilarity,
    DiceSimilarity.name: DiceSimilarity,
    OverlapCoefficient.name: OverlapCoefficient,
    Levenshtein.name: Levenshtein,
    TokenLevenshtein.name: TokenLevenshtein,
    Identity.name: Identity,
})

SIMPLIFIERS = Registry("simplifier", {
    LowerCase.name: LowerCase,
    UpperCase.name: UpperCase,
    RemoveDiacritics.name: RemoveDiacritics,
    RemoveNonWord.name: RemoveNonWord,
    NormalizeWhitespace.name: NormalizeWhitespace,
    UnicodeNFC.name: UnicodeNFC,
    StripMarkup.name: StripMarkup,
})

TOKENIZERS = Registry("tokenizer", {
    Whitespace.name: Whitespace,
    Pattern.name: Pattern,
    QGram.name: QGram,
})

FILTERS = Registry("filter", {
    Stopwords.name: Stopwords,
    MinLength.name: MinLength,
})

TRANSFORMS = Registry("transform", {
    "reverse": lambda: reverse,
    LowerCase.name: LowerCase,
    UpperCase.name: UpperCase,
    RemoveDiacritics.name: RemoveDiacritics,
})

REGISTRIES: Dict[str, Registry] = {r.kind: r for r in (METRICS, SIMPLIFIERS, TOKENIZERS, FILTERS, TRANSFORMS)}


def register_metric(name: str, factory: Callable[..., Metric]) -> None:
    METRICS.register(name, factory)


def register_simplifier(name: str, factory: Factory) -> None:
    SIMPLIFIERS.register(name, factory)


def register_tokenizer(name: str, factory: Factory) -> None:
    TOKENIZERS.register(name, factory)


def register_filter(name: str, factory: Factory) -> None:
    FILTERS.register(name, factory)


def register_transform(name: str, factory: Factory) -> None:
    TRANSFORMS.register(name, factory)


def get_metric(name: str, **kwargs: Any) -> Metric:
    return METRICS.create(name, **kwargs)


def list_components() -> Dict[str, List[str]]:
    """All registered names, by component kind."""
    return {kind: reg.names() for kind, reg in REGISTRIES.items()}
