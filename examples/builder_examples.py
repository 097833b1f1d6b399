"""Walkthrough: composing metrics with the builder.

Simply comparing strings through a metric is rarely effective. Adding
simplifiers, tokenizers, filters and transforms removes noise and changes
the space strings are compared in; the right mix depends on the data.

Run: python examples/builder_examples.py
"""

from text_metrics import with_metric
from text_metrics.metrics import CosineSimilarity, Levenshtein
from text_metrics.stages import LowerCase, QGram, RemoveDiacritics, RemoveNonWord, Stopwords, Whitespace, reverse

NAME_A = "Chilpéric II son of Childeric II"
NAME_B = "chilperic ii son of childeric ii"
SENTENCE_A = "A quirky thing it is. This is a sentence."
SENTENCE_B = "This sentence is similar; a quirky thing it is."


def plain():
    return Levenshtein().compare(NAME_A, NAME_B)


def simplified():
    # simplifiers run in order, before any tokenization
    metric = (with_metric(Levenshtein())
              .simplify(RemoveDiacritics())
              .simplify(LowerCase())
              .build())
    return metric.compare(NAME_A, NAME_B)


def tokenized():
    metric = with_metric(CosineSimilarity()).tokenize(Whitespace()).build()
    return metric.compare(SENTENCE_A, SENTENCE_B)


def chained_tokenizers():
    # the q-gram tokenizer splits every whitespace token further
    metric = (with_metric(CosineSimilarity())
              .tokenize(Whitespace())
              .tokenize(QGram(3))
              .build())
    return metric.compare(SENTENCE_A, SENTENCE_B)


def filtered():
    metric = (with_metric(CosineSimilarity())
              .simplify(LowerCase())
              .simplify(RemoveNonWord())
              .tokenize(Whitespace())
              .filter(Stopwords(["it", "is"]))
              .filter(Stopwords(["a"]))
              .tokenize(QGram(3))
              .build())
    return metric.compare(SENTENCE_A, SENTENCE_B)


def transformed():
    metric = (with_metric(CosineSimilarity())
              .simplify(LowerCase())
              .simplify(RemoveNonWord())
              .tokenize(Whitespace())
              .transform(reverse)
              .tokenize(QGram(3))
              .build())
    return metric.compare(SENTENCE_A, SENTENCE_B)


def cached():
    # caching has a cost of its own; measure before turning it on
    metric = (with_metric(CosineSimilarity())
              .simplify(LowerCase())
              .simplify(RemoveNonWord())
              .simplifier_cache(2)
              .tokenize(QGram(3))
              .tokenizer_cache(2)
              .build())
    return metric.compare(SENTENCE_A, SENTENCE_B)


if __name__ == "__main__":
    for example in (plain, simplified, tokenized, chained_tokenizers, filtered, transformed, cached):
        print(f"{example.__name__:>20}: {example():.4f}")
