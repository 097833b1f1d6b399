"""
Pytest configuration and shared fixtures.
"""

import pytest

from text_metrics import with_metric
from text_metrics.metrics import (
    BlockDistance,
    CosineSimilarity,
    DiceSimilarity,
    EuclideanDistance,
    Identity,
    JaccardSimilarity,
    Levenshtein,
    OverlapCoefficient,
    TanimotoCoefficient,
    TokenLevenshtein,
)
from text_metrics.stages import LowerCase, QGram, Whitespace

NAME_A = "Chilpéric II son of Childeric II"
NAME_B = "chilperic ii son of childeric ii"
SENTENCE_A = "A quirky thing it is. This is a sentence."
SENTENCE_B = "This sentence is similar; a quirky thing it is."

SAMPLES = [
    "",
    "a",
    "To repeat repeat is to repeat",
    "to repeat is to repeat",
    NAME_A,
    NAME_B,
    SENTENCE_A,
    SENTENCE_B,
    "completely different words here",
]


class Recorder:
    """Stage spy: records every input and returns it unchanged."""

    def __init__(self):
        self.calls = []

    def __call__(self, text):
        self.calls.append(text)
        return text


@pytest.fixture
def recorder():
    return Recorder()


def _token_builder(metric):
    return with_metric(metric).simplify(LowerCase()).tokenize(Whitespace()).tokenize(QGram(2))


ALL_METRIC_BUILDERS = {
    "cosine": lambda: _token_builder(CosineSimilarity()),
    "euclidean": lambda: _token_builder(EuclideanDistance()),
    "block": lambda: _token_builder(BlockDistance()),
    "tanimoto": lambda: _token_builder(TanimotoCoefficient()),
    "jaccard": lambda: _token_builder(JaccardSimilarity()),
    "dice": lambda: _token_builder(DiceSimilarity()),
    "overlap": lambda: _token_builder(OverlapCoefficient()),
    "token_levenshtein": lambda: _token_builder(TokenLevenshtein()),
    "levenshtein": lambda: with_metric(Levenshtein()).simplify(LowerCase()),
    "identity": lambda: with_metric(Identity()),
}


@pytest.fixture(params=sorted(ALL_METRIC_BUILDERS))
def any_builder(request):
    """A builder for every registered algorithm, wired with a typical pipeline."""
    return ALL_METRIC_BUILDERS[request.param]()


@pytest.fixture
def samples():
    return list(SAMPLES)
