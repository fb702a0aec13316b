"""
Dictionary-driven translator.

This module defines:
- translate(): the pure text → text translation over a DictionaryStore
- Translator: owns the current store snapshot and swaps it on reload
- TranslationResult: translation plus per-segment detail for reporting

Translation walks the tokens left to right. At each position the longest
known phrase is replaced by its translation; an unknown token is passed
through in its original casing. Output pieces are joined with single
spaces, so punctuation from the input does not survive.

Design Philosophy:
- translate() never fails: unknown input passes through unchanged
- Stores are immutable; a reload swaps in a new one wholesale, so a
  translation in progress keeps reading the store it started with
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from phrasetrans.config import DEFAULT_ENCODING
from phrasetrans.translate.dictionary import (
    DictionaryStore,
    Loaded,
    LoadResult,
    load_dictionary,
    read_dictionary_file,
)
from phrasetrans.translate.matcher import longest_match
from phrasetrans.translate.tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    """One unit of translation output.

    Attributes:
        source: Input tokens covered, joined with single spaces
        output: Translation, or the source token itself when unmatched
        matched: Whether a dictionary phrase matched
        tokens: Number of input tokens covered
    """
    source: str
    output: str
    matched: bool
    tokens: int = 1


@dataclass
class TranslationResult:
    """Result of a translation.

    Attributes:
        text: The translated text
        source_text: Original input text
        segments: Ordered output segments
    """
    text: str
    source_text: str
    segments: list[Segment] = field(default_factory=list)

    @property
    def phrases_used(self) -> list[str]:
        return [s.source.lower() for s in self.segments if s.matched]

    @property
    def token_count(self) -> int:
        return sum(s.tokens for s in self.segments)

    @property
    def coverage(self) -> float:
        """Fraction of input tokens covered by dictionary matches."""
        total = self.token_count
        if total == 0:
            return 1.0
        return sum(s.tokens for s in self.segments if s.matched) / total


def iter_segments(tokens: Sequence[str], store: DictionaryStore) -> Iterator[Segment]:
    """Walk tokens left to right, yielding matched phrases and pass-throughs."""
    i = 0
    while i < len(tokens):
        match = longest_match(tokens, i, store)
        if match is None:
            yield Segment(tokens[i], tokens[i], matched=False)
            i += 1
        else:
            source = " ".join(tokens[i:i + match.consumed])
            yield Segment(source, match.translation, matched=True, tokens=match.consumed)
            i += match.consumed


def translate(text: str, store: DictionaryStore) -> str:
    """Translate text with a dictionary store.

    Example:
        >>> store = DictionaryStore.from_mapping({"hello": "bonjour"})
        >>> translate("Hello there!", store)
        'bonjour there'
    """
    return " ".join(s.output for s in iter_segments(tokenize(text), store)).strip()


class Translator:
    """Translator bound to a reloadable dictionary.

    Usage:
        translator = Translator()
        result = translator.load_file("words.txt")
        if not result.ok:
            print(result.message)
        print(translator.translate("Hello there"))

    ``translate`` and ``analyze`` read the current store once per call and
    may run concurrently with each other and with a reload.
    """

    def __init__(self, store: DictionaryStore | None = None):
        self._store = store if store is not None else DictionaryStore()
        self._swap_lock = threading.Lock()

    @property
    def store(self) -> DictionaryStore:
        return self._store

    def load(self, lines: Iterable[str]) -> LoadResult:
        """Load dictionary lines, replacing the store only on success."""
        return self._apply(load_dictionary(lines))

    def load_file(self, path: str | Path, encoding: str = DEFAULT_ENCODING) -> LoadResult:
        """Load a dictionary file, replacing the store only on success."""
        return self._apply(read_dictionary_file(path, encoding=encoding))

    def _apply(self, result: LoadResult) -> LoadResult:
        if isinstance(result, Loaded):
            with self._swap_lock:
                previous = len(self._store)
                self._store = result.store
            logger.info(
                "Dictionary replaced: %d -> %d entries", previous, len(result.store)
            )
        return result

    def translate(self, text: str) -> str:
        return translate(text, self._store)

    def analyze(self, text: str) -> TranslationResult:
        """Translate text and keep the per-segment breakdown."""
        store = self._store
        segments = list(iter_segments(tokenize(text), store))
        return TranslationResult(
            text=" ".join(s.output for s in segments).strip(),
            source_text=text,
            segments=segments,
        )
