"""Example: adding a metric and a tokenizer at runtime without modifying registry.py.

Registered names can then be used in YAML metric definitions and on the CLI.
"""

from typing import List

from text_metrics.config import metric_from_config
from text_metrics.containers import Shape
from text_metrics.errors import require_inputs
from text_metrics.metrics import Metric
from text_metrics.registry import list_components, register_metric, register_tokenizer
from text_metrics.stages import Tokenizer


class PrefixSimilarity(Metric):
    """Share of the longer string covered by the common prefix."""

    name = "prefix_similarity"
    shape = Shape.STRING

    def compare(self, a: str, b: str) -> float:
        require_inputs(a, b)
        if not a and not b:
            return 1.0
        common = 0
        for x, y in zip(a, b):
            if x != y:
                break
            common += 1
        return common / max(len(a), len(b))


class CommaTokenizer(Tokenizer):
    name = "comma"

    def tokenize(self, text: str) -> List[str]:
        return [t.strip() for t in text.split(",") if t.strip()]


register_metric("prefix_similarity", PrefixSimilarity)
register_tokenizer("comma", CommaTokenizer)

print("Registered components:")
for kind, names in list_components().items():
    print(f"  {kind}: {', '.join(names)}")

prefix = metric_from_config({"metric": "prefix_similarity", "steps": [{"simplify": "lower_case"}]})
print(prefix.compare("Childeric", "childebert"))

tags = metric_from_config({"metric": "jaccard_similarity", "steps": [{"tokenize": "comma"}]})
print(tags.compare("red, green, blue", "blue, red"))
