"""Pipeline stages: simplifiers, tokenizers, token filters and transforms."""

from .base import Simplifier, Tokenizer
from .simplifiers import (
    LowerCase,
    NormalizeWhitespace,
    RemoveDiacritics,
    RemoveNonWord,
    StripMarkup,
    UnicodeNFC,
    UpperCase,
)
from .tokenizers import Pattern, QGram, Whitespace
from .tokens import MinLength, Stopwords, chain, reverse

__all__ = [
    "Simplifier",
    "Tokenizer",
    "LowerCase",
    "UpperCase",
    "RemoveDiacritics",
    "RemoveNonWord",
    "NormalizeWhitespace",
    "UnicodeNFC",
    "StripMarkup",
    "Whitespace",
    "Pattern",
    "QGram",
    "Stopwords",
    "MinLength",
    "reverse",
    "chain",
]
