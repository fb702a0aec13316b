"""
Tests for the word tokenizer.

Run with: pytest tests/test_tokenizer.py -v
"""

from phrasetrans.translate.tokenizer import tokenize


class TestTokenize:
    """Splitting text into word tokens."""

    def test_empty_string(self):
        """Empty input yields no tokens."""
        assert tokenize("") == []

    def test_only_punctuation(self):
        """Punctuation and whitespace alone yield no tokens."""
        assert tokenize("  ...!?, -- ") == []

    def test_punctuation_is_dropped(self):
        """Punctuation separates words and is discarded."""
        assert tokenize("Hello, world! How are you?") == ["Hello", "world", "How", "are", "you"]

    def test_casing_preserved(self):
        """Tokens keep their original casing."""
        assert tokenize("NEW York") == ["NEW", "York"]

    def test_interior_apostrophe_kept(self):
        """An apostrophe between two letters stays inside the word."""
        assert tokenize("don't stop o'clock") == ["don't", "stop", "o'clock"]

    def test_edge_apostrophes_split(self):
        """Leading and trailing apostrophes act as separators."""
        assert tokenize("'quoted' dogs' 'tis") == ["quoted", "dogs", "tis"]

    def test_apostrophe_next_to_punctuation(self):
        """An apostrophe beside punctuation or another apostrophe separates."""
        assert tokenize("a''b c.'d e'-f") == ["a", "b", "c", "d", "e", "f"]

    def test_digits_and_underscores_separate(self):
        """Only letters form words."""
        assert tokenize("abc123def snake_case") == ["abc", "def", "snake", "case"]

    def test_non_ascii_letters_separate(self):
        """Only ASCII letters form words; accented letters split them."""
        assert tokenize("Café naïve") == ["Caf", "na", "ve"]

    def test_apostrophe_beside_non_ascii_letter(self):
        """A non-ASCII neighbour does not keep an apostrophe in a word."""
        assert tokenize("é't d'é") == ["t", "d"]

    def test_deterministic(self):
        """The same input always gives the same tokens."""
        text = "It's a dog's life, isn't it?"
        assert tokenize(text) == tokenize(text) == ["It's", "a", "dog's", "life", "isn't", "it"]
