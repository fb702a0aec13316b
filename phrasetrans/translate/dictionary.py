"""
Dictionary store for phrase translation.

This module handles:
- Parsing "key | value" lines into dictionary entries
- Building an immutable, case-insensitive phrase → translation store
- Reporting load failures as explicit result values

Design Philosophy:
- A store is immutable once built; reloading builds a new store
- Loading is all-or-nothing: the first malformed line aborts the load
- On duplicate keys the first occurrence wins
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Union

from phrasetrans.config import DEFAULT_ENCODING

logger = logging.getLogger(__name__)

SEPARATOR = "|"
COMMENT_PREFIX = "#"
EXPECTED_FORMAT = "Expected 'word | translation'"


def normalize_phrase(phrase: str) -> str:
    """Lowercase a phrase and collapse its whitespace to single spaces."""
    return " ".join(phrase.lower().split())


@dataclass(frozen=True)
class DictionaryEntry:
    """A single dictionary entry.

    Attributes:
        key: Normalized source phrase (lowercase, single-spaced)
        value: Translation, trimmed but with its original casing
    """
    key: str
    value: str

    @property
    def word_count(self) -> int:
        return len(self.key.split(" "))


class DictionaryStore:
    """Immutable mapping from normalized phrase to translation.

    Lookups are case-insensitive: ``lookup`` normalizes its argument, so
    callers may pass phrases in any casing.
    """

    def __init__(self, mapping: Mapping[str, str] | None = None, duplicates: int = 0):
        self._mapping = MappingProxyType(dict(mapping or {}))
        self.duplicates = duplicates
        self.max_phrase_length = max(
            (len(key.split(" ")) for key in self._mapping), default=0
        )

    @classmethod
    def from_entries(cls, entries: Iterable[DictionaryEntry]) -> DictionaryStore:
        """Build a store, keeping the first value seen for each key."""
        mapping: dict[str, str] = {}
        duplicates = 0
        for entry in entries:
            if entry.key in mapping:
                duplicates += 1
                logger.debug("Ignoring duplicate dictionary key %r", entry.key)
                continue
            mapping[entry.key] = entry.value
        return cls(mapping, duplicates=duplicates)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> DictionaryStore:
        """Build a store from a plain dict, normalizing its keys."""
        return cls.from_entries(
            DictionaryEntry(normalize_phrase(key), value.strip())
            for key, value in mapping.items()
        )

    def lookup(self, phrase: str) -> Optional[str]:
        """Return the translation for a phrase, or None if it is unknown."""
        return self._mapping.get(normalize_phrase(phrase))

    def entries(self) -> list[DictionaryEntry]:
        return [DictionaryEntry(key, value) for key, value in sorted(self._mapping.items())]

    def __len__(self) -> int:
        return len(self._mapping)

    def __contains__(self, phrase: object) -> bool:
        return isinstance(phrase, str) and normalize_phrase(phrase) in self._mapping

    def __iter__(self) -> Iterator[DictionaryEntry]:
        return iter(self.entries())

    def __repr__(self) -> str:
        return f"DictionaryStore({len(self)} entries)"


# ============================================================================
# Load Results
# ============================================================================

class DictionaryLoadError(Exception):
    """Raised by ``unwrap()`` on a failed load result."""

    def __init__(self, error: FormatError | ReadError):
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True)
class Loaded:
    """Successful load carrying the new store."""
    store: DictionaryStore

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> DictionaryStore:
        return self.store


@dataclass(frozen=True)
class FormatError:
    """A dictionary line did not split into exactly two ``|`` parts.

    Attributes:
        line: The offending line, without its line terminator
        line_number: 1-based position of the line in the source
        expected: Hint describing the expected format
    """
    line: str
    line_number: int = 0
    expected: str = EXPECTED_FORMAT

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f"Invalid format in dictionary file: {self.line}. {self.expected}"

    def unwrap(self) -> DictionaryStore:
        raise DictionaryLoadError(self)


@dataclass(frozen=True)
class ReadError:
    """The dictionary source could not be read.

    Attributes:
        path: The source that failed
        reason: Message of the underlying I/O or decoding error
    """
    path: str
    reason: str

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f"Unable to read the file: {self.reason}"

    def unwrap(self) -> DictionaryStore:
        raise DictionaryLoadError(self)


LoadResult = Union[Loaded, FormatError, ReadError]


# ============================================================================
# Loading Functions
# ============================================================================

def parse_line(line: str, line_number: int = 0) -> DictionaryEntry | FormatError | None:
    """Parse one dictionary line.

    Returns None for blank lines and ``#`` comments, a FormatError when the
    line does not contain exactly one ``|`` or either side is empty, and
    the entry otherwise.
    """
    text = line.rstrip("\r\n")
    stripped = text.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None

    parts = text.split(SEPARATOR)
    if len(parts) != 2:
        return FormatError(text, line_number)

    key = normalize_phrase(parts[0])
    value = parts[1].strip()
    if not key or not value:
        return FormatError(text, line_number)
    return DictionaryEntry(key, value)


def load_dictionary(lines: Iterable[str]) -> LoadResult:
    """Build a store from raw dictionary lines.

    The first malformed line aborts the load and no store is produced.

    Args:
        lines: Lines in "key | value" format

    Returns:
        Loaded on success, FormatError for the first malformed line
    """
    entries = []
    for number, line in enumerate(lines, start=1):
        parsed = parse_line(line, number)
        if parsed is None:
            continue
        if isinstance(parsed, FormatError):
            logger.warning("Dictionary line %d rejected: %r", number, parsed.line)
            return parsed
        entries.append(parsed)

    store = DictionaryStore.from_entries(entries)
    logger.info(
        "Loaded %d dictionary entries (%d duplicates ignored)",
        len(store), store.duplicates,
    )
    return Loaded(store)


def read_dictionary_file(path: str | Path, encoding: str = DEFAULT_ENCODING) -> LoadResult:
    """Read and load a dictionary file.

    The whole file is read before parsing, so an I/O failure is always a
    ReadError and never a partial dictionary.
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding=encoding) as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read dictionary %s: %s", path, e)
        return ReadError(str(path), str(e))

    logger.info("Read %d lines from %s", len(lines), path)
    return load_dictionary(lines)
