"""
Word tokenizer for dictionary translation.

A token is a maximal run of ASCII letters. An apostrophe belongs to a token only
when it sits directly between two letters ("don't", "o'clock"); every other
character, including leading or trailing apostrophes, separates tokens and
is dropped.

Tokens keep their original casing so unmatched words can be passed through
as written. Lowercasing happens at lookup time only.
"""

from __future__ import annotations

import re

# Letters are ASCII only; accented and other non-ASCII letters separate words.
_LETTERS = r"[A-Za-z]+"

WORD_PATTERN = re.compile(rf"{_LETTERS}(?:'{_LETTERS})*")


def tokenize(text: str) -> list[str]:
    """Split text into word tokens, discarding punctuation.

    Examples:
        >>> tokenize("Don't panic, 'friend'!")
        ["Don't", 'panic', 'friend']
        >>> tokenize("... !!")
        []
    """
    if not text:
        return []
    return WORD_PATTERN.findall(text)
