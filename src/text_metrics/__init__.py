"""text_metrics

Composable, syntactic string similarity metrics.

Public API surface:
- text_metrics.with_metric / MetricBuilder : compose stages with a metric
- text_metrics.metrics : comparison algorithms (cosine, tanimoto, euclidean, levenshtein, ...)
- text_metrics.stages : simplifiers, tokenizers, token filters and transforms
- text_metrics.cache : bounded caches for stage outputs
- text_metrics.config : metric definitions from YAML
- text_metrics.cli.main : CLI entrypoint
"""

from .errors import InvalidCompositionError, InvalidInputError, MetricError
from .pipeline import AssembledDistance, AssembledMetric, MetricBuilder, with_metric

__all__ = [
    "__version__",
    "with_metric",
    "MetricBuilder",
    "AssembledMetric",
    "AssembledDistance",
    "MetricError",
    "InvalidInputError",
    "InvalidCompositionError",
]
__version__ = "0.1.0"
