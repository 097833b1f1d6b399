"""Built-in simplifiers.

Simplification maps strings from different sources onto one simpler form
before they are compared (case, accents, punctuation, markup).
"""

from __future__ import annotations
import re
import unicodedata

from .base import Simplifier

_TAG_RE = re.compile(r"<[^>]+>")
_NON_WORD_RE = re.compile(r"\W+")
_WS_RE = re.compile(r"\s+")


class LowerCase(Simplifier):
    name = "lower_case"

    def simplify(self, text: str) -> str:
        return text.lower()


class UpperCase(Simplifier):
    name = "upper_case"

    def simplify(self, text: str) -> str:
        return text.upper()


class RemoveDiacritics(Simplifier):
    """Strip combining marks: 'Chilpéric' -> 'Chilperic'.

    Characters are decomposed (NFD), the combining marks dropped and the
    rest recomposed, so letters without a decomposition (e.g. 'ø') are kept.
    """

    name = "remove_diacritics"

    def simplify(self, text: str) -> str:
        if not text:
            return text
        decomposed = unicodedata.normalize("NFD", text)
        stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
        return unicodedata.normalize("NFC", stripped)


class RemoveNonWord(Simplifier):
    """Replace every run of non-word characters with a single space."""

    name = "remove_non_word"

    def __init__(self, replacement: str = " "):
        self.replacement = replacement

    def simplify(self, text: str) -> str:
        return _NON_WORD_RE.sub(self.replacement, text)


class NormalizeWhitespace(Simplifier):
    name = "normalize_whitespace"

    def simplify(self, text: str) -> str:
        return _WS_RE.sub(" ", text).strip()


class UnicodeNFC(Simplifier):
    """Unicode NFC (canonical composition), so equal text has equal code points."""

    name = "unicode_nfc"

    def simplify(self, text: str) -> str:
        if not text:
            return text
        return unicodedata.normalize("NFC", text)


class StripMarkup(Simplifier):
    """Remove simple HTML tags and normalize whitespace."""

    name = "strip_markup"

    def simplify(self, text: str) -> str:
        text = _TAG_RE.sub(" ", text)
        return _WS_RE.sub(" ", text).strip()
