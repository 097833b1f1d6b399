"""Metric definitions from YAML.

A definition names a terminal metric and an ordered list of steps, each a
registered component name or a single-key mapping of name -> kwargs:

    metrics:
      names:
        metric: cosine_similarity
        steps:
          - simplify: lower_case
          - tokenize: whitespace
          - filter: {stopwords: {words: [it, is]}}
          - tokenize: {qgram: {q: 3}}
        cache:
          simplifier: 256
          tokenizer: 256
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Mapping, Tuple

import yaml

from ..errors import InvalidCompositionError
from ..pipeline import AssembledMetric, StepKind, with_metric
from ..registry import FILTERS, METRICS, SIMPLIFIERS, TOKENIZERS, TRANSFORMS, Registry

log = logging.getLogger("text_metrics.config")

_STEP_REGISTRIES: Dict[StepKind, Registry] = {
    StepKind.SIMPLIFY: SIMPLIFIERS,
    StepKind.TOKENIZE: TOKENIZERS,
    StepKind.FILTER: FILTERS,
    StepKind.TRANSFORM: TRANSFORMS,
}


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _reference(value: Any, where: str) -> Tuple[str, Dict[str, Any]]:
    """Split `name` or `{name: {kwargs}}` into (name, kwargs)."""
    if isinstance(value, str):
        return value, {}
    if isinstance(value, Mapping) and len(value) == 1:
        name, kwargs = next(iter(value.items()))
        if kwargs is None:
            kwargs = {}
        if not isinstance(kwargs, Mapping):
            raise InvalidCompositionError(f"{where}: arguments of {name!r} must be a mapping, got {kwargs!r}")
        return str(name), dict(kwargs)
    raise InvalidCompositionError(f"{where}: expected a name or {{name: {{args}}}}, got {value!r}")


def _create(registry: Registry, value: Any, where: str) -> Any:
    name, kwargs = _reference(value, where)
    if name not in registry:
        raise InvalidCompositionError(
            f"{where}: unknown {registry.kind} {name!r}. Available: {registry.names()}"
        )
    try:
        return registry.create(name, **kwargs)
    except (TypeError, ValueError) as e:
        raise InvalidCompositionError(f"{where}: cannot create {registry.kind} {name!r}: {e}") from e


def metric_from_config(cfg: Mapping[str, Any], name: str = "<inline>") -> AssembledMetric:
    """Build one metric from a definition mapping."""
    if not isinstance(cfg, Mapping):
        raise InvalidCompositionError(f"metric {name!r}: definition must be a mapping, got {cfg!r}")
    if "metric" not in cfg:
        raise InvalidCompositionError(f"metric {name!r}: missing 'metric'")

    builder = with_metric(_create(METRICS, cfg["metric"], f"metric {name!r}"))

    for i, step in enumerate(cfg.get("steps") or []):
        where = f"metric {name!r} step {i}"
        if not isinstance(step, Mapping) or len(step) != 1:
            raise InvalidCompositionError(f"{where}: expected one of {[k.value for k in StepKind]} -> component")
        key, value = next(iter(step.items()))
        try:
            kind = StepKind(key)
        except ValueError:
            raise InvalidCompositionError(
                f"{where}: unknown step {key!r}, expected one of {[k.value for k in StepKind]}"
            ) from None
        fn = _create(_STEP_REGISTRIES[kind], value, where)
        builder = builder.add_step(kind, fn)

    cache = cfg.get("cache") or {}
    if not isinstance(cache, Mapping):
        raise InvalidCompositionError(f"metric {name!r}: 'cache' must be a mapping, got {cache!r}")
    unknown = set(cache) - {"simplifier", "tokenizer"}
    if unknown:
        raise InvalidCompositionError(f"metric {name!r}: unknown cache keys {sorted(unknown)}")
    if cache.get("simplifier") is not None:
        builder = builder.simplifier_cache(cache["simplifier"])
    if cache.get("tokenizer") is not None:
        builder = builder.tokenizer_cache(cache["tokenizer"])

    try:
        return builder.build()
    except InvalidCompositionError as e:
        raise InvalidCompositionError(f"metric {name!r}: {e}") from e


def metrics_from_config(cfg: Mapping[str, Any]) -> Dict[str, AssembledMetric]:
    definitions = cfg.get("metrics")
    if not isinstance(definitions, Mapping) or not definitions:
        raise InvalidCompositionError("configuration needs a non-empty 'metrics' mapping")
    out = {}
    for name, definition in definitions.items():
        out[name] = metric_from_config(definition, name=name)
        log.info("Loaded metric %s: %r", name, out[name])
    return out


def load_metrics(path: str) -> Dict[str, AssembledMetric]:
    return metrics_from_config(load_yaml(path))
