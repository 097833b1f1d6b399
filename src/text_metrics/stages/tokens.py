"""Per-token filters and transforms.

Filters are predicates: a token is kept when the predicate returns True.
Transforms map each token to a new one and may introduce duplicates.
"""

from __future__ import annotations
from typing import Callable, Iterable


class Stopwords:
    """Drop tokens found in a fixed word list."""

    name = "stopwords"

    def __init__(self, words: Iterable[str]):
        self.words = frozenset(words)

    def __call__(self, token: str) -> bool:
        return token not in self.words

    def __repr__(self) -> str:
        return f"Stopwords({sorted(self.words)!r})"


class MinLength:
    """Keep tokens of at least `n` characters."""

    name = "min_length"

    def __init__(self, n: int):
        self.n = int(n)

    def __call__(self, token: str) -> bool:
        return len(token) >= self.n

    def __repr__(self) -> str:
        return f"MinLength({self.n})"


def reverse(token: str) -> str:
    return token[::-1]


def chain(*functions: Callable[[str], str]) -> Callable[[str], str]:
    """Compose str -> str functions left to right."""
    def chained(value: str) -> str:
        for fn in functions:
            value = fn(value)
        return value
    chained.__name__ = "chain(" + ", ".join(getattr(f, "__name__", repr(f)) for f in functions) + ")"
    return chained
