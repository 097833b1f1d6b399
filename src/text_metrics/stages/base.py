"""Stage interfaces.

Stages must:
- be pure and total: the same input always gives the same output
- hold no mutable state, so one instance can serve concurrent callers
- accept the empty string

Simplifiers rewrite a whole string before tokenization; tokenizers cut a
string into tokens. Filters (str -> bool) and transforms (str -> str) are
plain callables and need no base class. Any callable with the right
signature is accepted by the builder; these classes add a stable name and
repr for logs and configuration.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Sequence


class Simplifier(ABC):
    name: str = "simplifier"

    @abstractmethod
    def simplify(self, text: str) -> str:
        ...

    def __call__(self, text: str) -> str:
        return self.simplify(text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Tokenizer(ABC):
    name: str = "tokenizer"

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        """Split a string into tokens."""
        raise NotImplementedError

    def tokenize_batch(self, texts: Sequence[str]) -> List[List[str]]:
        """Optional fast path; default falls back to single tokenize."""
        return [self.tokenize(t) for t in texts]

    def __call__(self, text: str) -> List[str]:
        return self.tokenize(text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
