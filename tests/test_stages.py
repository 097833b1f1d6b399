"""
Unit tests for simplifiers, tokenizers and token filters/transforms.
"""

import pytest

from text_metrics.stages import (
    LowerCase,
    MinLength,
    NormalizeWhitespace,
    Pattern,
    QGram,
    RemoveDiacritics,
    RemoveNonWord,
    Stopwords,
    StripMarkup,
    UnicodeNFC,
    UpperCase,
    Whitespace,
    chain,
    reverse,
)

SIMPLIFIER_CASES = [
    (LowerCase(), "Chilpéric II", "chilpéric ii"),
    (UpperCase(), "Chilpéric ii", "CHILPÉRIC II"),
    (RemoveDiacritics(), "Chilpéric Ærø façade", "Chilperic Ærø facade"),
    (RemoveNonWord(), "A quirky thing; it is.", "A quirky thing it is "),
    (NormalizeWhitespace(), "  a \t b\n\nc ", "a b c"),
    (UnicodeNFC(), "Chilpéric", "Chilpéric"),
    (StripMarkup(), "<p>Hello <b>world</b></p>", "Hello world"),
]


class TestSimplifiers:
    @pytest.mark.parametrize("simplifier,text,expected", SIMPLIFIER_CASES, ids=lambda v: repr(v)[:30])
    def test_simplify(self, simplifier, text, expected):
        assert simplifier.simplify(text) == expected
        assert simplifier(text) == expected

    @pytest.mark.parametrize("simplifier", [c[0] for c in SIMPLIFIER_CASES], ids=repr)
    def test_empty_string(self, simplifier):
        assert simplifier("") == ""

    def test_remove_non_word_replacement(self):
        assert RemoveNonWord(replacement="").simplify("a-b c") == "abc"

    def test_repr_names_the_class(self):
        assert repr(LowerCase()) == "LowerCase()"


class TestWhitespace:
    def test_splits_on_runs(self):
        assert Whitespace().tokenize(" This  is\ta\nsentence. ") == ["This", "is", "a", "sentence."]

    def test_empty(self):
        assert Whitespace().tokenize("") == []
        assert Whitespace().tokenize("   ") == []

    def test_batch(self):
        assert Whitespace().tokenize_batch(["a b", "", "c"]) == [["a", "b"], [], ["c"]]


class TestPattern:
    def test_splits_and_drops_empty(self):
        assert Pattern(r"[,;]\s*").tokenize("red, green;;blue") == ["red", "green", "blue"]

    def test_repr(self):
        assert repr(Pattern(",")) == "Pattern(',')"


class TestQGram:
    def test_sliding_window(self):
        assert QGram(3).tokenize("quirky") == ["qui", "uir", "irk", "rky"]

    def test_short_input_is_kept_whole(self):
        assert QGram(3).tokenize("it") == ["it"]
        assert QGram(3).tokenize("is.") == ["is."]

    def test_filter_drops_short_input(self):
        assert QGram(3, filter=True).tokenize("it") == []
        assert QGram(3, filter=True).tokenize("is.") == ["is."]

    def test_padding(self):
        assert QGram(3, padding=True).tokenize("ab") == ["##a", "#ab", "ab#", "b##"]

    def test_empty(self):
        assert QGram(2).tokenize("") == []
        assert QGram(2, padding=True).tokenize("") == []

    def test_unigrams(self):
        assert QGram(1).tokenize("abc") == ["a", "b", "c"]

    def test_invalid_q(self):
        with pytest.raises(ValueError):
            QGram(0)


class TestTokenFunctions:
    def test_stopwords(self):
        keep = Stopwords(["it", "is"])
        assert [t for t in ["this", "is", "it", "a"] if keep(t)] == ["this", "a"]

    def test_min_length(self):
        keep = MinLength(3)
        assert [t for t in ["a", "abc", "ab", "abcd"] if keep(t)] == ["abc", "abcd"]

    def test_reverse(self):
        assert reverse("quirky") == "ykriuq"
        assert reverse("") == ""

    def test_chain_applies_left_to_right(self):
        fn = chain(RemoveDiacritics(), LowerCase(), reverse)
        assert fn("Éa") == "ae"
