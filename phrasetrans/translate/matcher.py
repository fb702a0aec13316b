"""
Greedy phrase matcher.

Starting at a token position, the matcher grows the candidate phrase one
token at a time and stops at the first prefix that is not in the
dictionary. It never skips a token to try a longer window, so a
multi-word key only matches when every one of its leading sub-phrases is
also a key: with only "new york" in the dictionary, "New York" in running
text is left untranslated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from phrasetrans.translate.dictionary import DictionaryStore


@dataclass(frozen=True)
class PhraseMatch:
    """The longest known phrase found at a position.

    Attributes:
        translation: Dictionary value for the matched phrase
        consumed: Number of tokens the phrase covers (always >= 1)
        phrase: The normalized phrase that matched
    """
    translation: str
    consumed: int
    phrase: str


def longest_match(
    tokens: Sequence[str],
    start: int,
    store: DictionaryStore,
) -> Optional[PhraseMatch]:
    """Find the longest dictionary phrase beginning at ``tokens[start]``.

    Returns None when even the single token at ``start`` is unknown, or
    when ``start`` is out of range.
    """
    if start < 0:
        return None

    best = None
    words: list[str] = []
    for i in range(start, len(tokens)):
        words.append(tokens[i].lower())
        candidate = " ".join(words)
        translation = store.lookup(candidate)
        if translation is None:
            break
        best = PhraseMatch(translation, i - start + 1, candidate)
    return best
