"""
Tests for configuration helpers.

Run with: pytest tests/test_config.py -v
"""

from pathlib import Path

from phrasetrans.config import DICTIONARY_ENV_VAR, resolve_dictionary_path


class TestResolveDictionaryPath:
    """Choosing which dictionary file to load."""

    def test_explicit_path_wins(self, monkeypatch):
        """A path given directly overrides the environment."""
        monkeypatch.setenv(DICTIONARY_ENV_VAR, "/env/words.txt")
        assert resolve_dictionary_path(Path("mine.txt")) == Path("mine.txt")

    def test_environment_fallback(self, monkeypatch):
        """The environment variable is used when no path is given."""
        monkeypatch.setenv(DICTIONARY_ENV_VAR, " /env/words.txt ")
        assert resolve_dictionary_path(None) == Path("/env/words.txt")

    def test_nothing_configured(self, monkeypatch):
        """With no path and no variable there is no dictionary."""
        monkeypatch.delenv(DICTIONARY_ENV_VAR, raising=False)
        assert resolve_dictionary_path(None) is None

    def test_blank_variable_ignored(self, monkeypatch):
        """An empty variable counts as unset."""
        monkeypatch.setenv(DICTIONARY_ENV_VAR, "   ")
        assert resolve_dictionary_path(None) is None
