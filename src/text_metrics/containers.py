"""Token containers.

Comparison inputs come in four shapes. Each algorithm declares the shape it
consumes and the builder checks the match when a metric is assembled, so
`compare` never has to inspect its arguments.

- STRING:   the whole string (compared as a character sequence)
- SEQUENCE: tuple of tokens, ordered, duplicates allowed
- SET:      frozenset of tokens
- MULTISET: collections.Counter, token -> occurrence count
"""

from __future__ import annotations
from collections import Counter
from enum import Enum
from typing import FrozenSet, Iterable, Tuple, Union


class Shape(str, Enum):
    STRING = "string"
    SEQUENCE = "sequence"
    SET = "set"
    MULTISET = "multiset"

    @property
    def tokenized(self) -> bool:
        return self is not Shape.STRING


TokenSequence = Tuple[str, ...]
TokenSet = FrozenSet[str]
TokenMultiset = Counter
Container = Union[str, TokenSequence, TokenSet, TokenMultiset]


def materialize(shape: Shape, tokens: Iterable[str]) -> Container:
    """Build the container for `shape` from a token stream in one pass."""
    if shape is Shape.SEQUENCE:
        return tuple(tokens)
    if shape is Shape.SET:
        return frozenset(tokens)
    if shape is Shape.MULTISET:
        return Counter(tokens)
    raise ValueError(f"shape {shape.value!r} is not a token container")


def size(container: Container) -> int:
    """Number of tokens; for a multiset this is the sum of the counts."""
    if isinstance(container, Counter):
        return sum(container.values())
    return len(container)
