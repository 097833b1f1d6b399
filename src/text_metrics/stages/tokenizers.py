"""Built-in tokenizers.

The choice of tokenizer decides the space strings are compared in: whole
words suit longer texts, q-grams suit short strings such as names.
"""

from __future__ import annotations
import re
from typing import List

from .base import Tokenizer


class Whitespace(Tokenizer):
    """Split on runs of whitespace; never yields empty tokens."""

    name = "whitespace"

    def tokenize(self, text: str) -> List[str]:
        return text.split()


class Pattern(Tokenizer):
    """Split on a regular expression, dropping empty pieces."""

    name = "pattern"

    def __init__(self, pattern: str):
        self.pattern = re.compile(pattern)

    def tokenize(self, text: str) -> List[str]:
        return [t for t in self.pattern.split(text) if t]

    def __repr__(self) -> str:
        return f"Pattern({self.pattern.pattern!r})"


class QGram(Tokenizer):
    """Overlapping substrings of length q.

    - empty input gives no tokens
    - input no longer than q is a single token, unless `filter` is set, in
      which case input shorter than q gives no tokens
    - with `padding`, q - 1 '#' characters are added on both sides first so
      the first and last characters appear in q grams like the others
    """

    name = "qgram"
    PAD = "#"

    def __init__(self, q: int, filter: bool = False, padding: bool = False):
        if q < 1:
            raise ValueError(f"q must be >= 1, got {q}")
        self.q = int(q)
        self.filter = bool(filter)
        self.padding = bool(padding)

    def tokenize(self, text: str) -> List[str]:
        if not text:
            return []
        if self.padding:
            pad = self.PAD * (self.q - 1)
            text = pad + text + pad
        elif self.filter and len(text) < self.q:
            return []
        elif len(text) <= self.q:
            return [text]
        q = self.q
        return [text[i:i + q] for i in range(len(text) - q + 1)]

    def __repr__(self) -> str:
        return f"QGram(q={self.q}, filter={self.filter}, padding={self.padding})"
