"""Dictionary translation: tokenizer, store, phrase matcher and translator."""

from phrasetrans.translate.dictionary import (
    DictionaryEntry,
    DictionaryLoadError,
    DictionaryStore,
    FormatError,
    Loaded,
    LoadResult,
    ReadError,
    load_dictionary,
    parse_line,
    read_dictionary_file,
)
from phrasetrans.translate.matcher import PhraseMatch, longest_match
from phrasetrans.translate.tokenizer import tokenize
from phrasetrans.translate.translator import (
    Segment,
    TranslationResult,
    Translator,
    translate,
)

__all__ = [
    "DictionaryEntry",
    "DictionaryLoadError",
    "DictionaryStore",
    "FormatError",
    "Loaded",
    "LoadResult",
    "ReadError",
    "load_dictionary",
    "parse_line",
    "read_dictionary_file",
    "PhraseMatch",
    "longest_match",
    "tokenize",
    "Segment",
    "TranslationResult",
    "Translator",
    "translate",
]
