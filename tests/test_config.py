"""
Tests for the component registry and YAML metric definitions.
"""

import textwrap

import pytest

from text_metrics import AssembledDistance, InvalidCompositionError
from text_metrics.config import load_metrics, load_yaml, metric_from_config, metrics_from_config
from text_metrics.metrics import CosineSimilarity, Levenshtein, Metric
from text_metrics.registry import (
    METRICS,
    Registry,
    get_metric,
    list_components,
    register_metric,
)
from text_metrics.stages import LowerCase, QGram

from conftest import NAME_A, NAME_B, SENTENCE_A, SENTENCE_B


@pytest.fixture
def metrics_file(tmp_path):
    path = tmp_path / "metrics.yaml"
    path.write_text(textwrap.dedent("""
        metrics:
          names:
            metric: levenshtein
            steps:
              - simplify: remove_diacritics
              - simplify: lower_case
            cache:
              simplifier: 16
          sentences:
            metric: cosine_similarity
            steps:
              - tokenize: whitespace
              - tokenize: {qgram: {q: 3}}
            cache:
              tokenizer: 16
    """), encoding="utf-8")
    return str(path)


class TestRegistry:
    def test_create_returns_fresh_instances(self):
        assert isinstance(get_metric("cosine_similarity"), CosineSimilarity)
        assert get_metric("cosine_similarity") is not get_metric("cosine_similarity")

    def test_create_passes_kwargs(self):
        metric = get_metric("levenshtein", substitute_cost=2.0)
        assert isinstance(metric, Levenshtein)
        assert metric.substitute_cost == 2.0

    def test_unknown_name_lists_available(self):
        with pytest.raises(KeyError, match="cosine_similarity"):
            get_metric("no_such_metric")

    def test_duplicate_registration_is_rejected(self):
        with pytest.raises(ValueError, match="already registered"):
            register_metric("cosine_similarity", CosineSimilarity)

    def test_dynamic_registration(self):
        registry = Registry("metric", {})
        registry.register("lower", LowerCase)
        assert registry.names() == ["lower"]
        assert "lower" in registry

    def test_list_components(self):
        components = list_components()
        assert set(components) == {"metric", "simplifier", "tokenizer", "filter", "transform"}
        assert "qgram" in components["tokenizer"]
        assert all(isinstance(METRICS.create(name), Metric) for name in components["metric"])


class TestMetricFromConfig:
    def test_steps_and_kwargs(self):
        metric = metric_from_config({
            "metric": "cosine_similarity",
            "steps": [
                {"simplify": "lower_case"},
                {"simplify": "remove_non_word"},
                {"tokenize": "whitespace"},
                {"filter": {"stopwords": {"words": ["it", "is", "a"]}}},
                {"tokenize": {"qgram": {"q": 3}}},
            ],
        })
        kinds = [s.kind.value for s in metric.steps]
        assert kinds == ["simplify", "simplify", "tokenize", "filter", "tokenize"]
        assert isinstance(metric.steps[-1].fn, QGram)
        assert metric.steps[-1].fn.q == 3
        assert 0.0 < metric.compare(SENTENCE_A, SENTENCE_B) < 1.0

    def test_metric_kwargs(self):
        metric = metric_from_config({"metric": {"levenshtein": {"substitute_cost": 0.5}}})
        assert metric.algorithm.substitute_cost == 0.5

    def test_step_without_kwargs_mapping(self):
        metric = metric_from_config({"metric": "tanimoto_coefficient", "steps": [{"tokenize": {"whitespace": None}}]})
        assert metric.compare("a b", "b a") == 1.0

    def test_caches(self):
        metric = metric_from_config({
            "metric": "cosine_similarity",
            "steps": [{"simplify": "lower_case"}, {"tokenize": "whitespace"}],
            "cache": {"simplifier": 4, "tokenizer": 8},
        })
        assert metric.simplifier_cache.capacity == 4
        assert metric.tokenizer_cache.capacity == 8

    @pytest.mark.parametrize("cfg,match", [
        ({}, "missing 'metric'"),
        ({"metric": "nope"}, "unknown metric"),
        ({"metric": "cosine_similarity", "steps": [{"tokenize": "nope"}]}, "unknown tokenizer"),
        ({"metric": "cosine_similarity", "steps": [{"split": "whitespace"}]}, "unknown step"),
        ({"metric": "cosine_similarity", "steps": ["whitespace"]}, "expected one of"),
        ({"metric": "cosine_similarity", "steps": [{"tokenize": {"qgram": {"size": 3}}}]}, "cannot create"),
        ({"metric": "cosine_similarity", "steps": [{"tokenize": {"qgram": {"q": 0}}}]}, "cannot create"),
        ({"metric": "cosine_similarity", "steps": [{"tokenize": {"qgram": 3}}]}, "must be a mapping"),
        ({"metric": "cosine_similarity", "steps": [{"simplify": "lower_case"}]}, "needs at least one tokenizer"),
        ({"metric": "levenshtein", "cache": {"tokeniser": 3}}, "unknown cache keys"),
        ("levenshtein", "must be a mapping"),
    ])
    def test_invalid_definitions(self, cfg, match):
        with pytest.raises(InvalidCompositionError, match=match):
            metric_from_config(cfg, name="bad")


class TestLoadMetrics:
    def test_load_yaml(self, metrics_file):
        cfg = load_yaml(metrics_file)
        assert set(cfg["metrics"]) == {"names", "sentences"}

    def test_load_yaml_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_yaml(str(path)) == {}

    def test_load_metrics(self, metrics_file):
        metrics = load_metrics(metrics_file)
        assert isinstance(metrics["names"], AssembledDistance)
        assert metrics["names"].compare(NAME_A, NAME_B) == 1.0
        assert metrics["sentences"].tokenizer_cache.capacity == 16

    def test_needs_metrics_mapping(self):
        with pytest.raises(InvalidCompositionError, match="metrics"):
            metrics_from_config({"metric": "levenshtein"})
