"""
PhraseTrans: dictionary-driven phrase translation.

Rewrites text by greedily replacing the longest run of dictionary-known
words at each position with its translation, passing every other word
through unchanged.

License: MIT
"""

__version__ = "0.1.0"

from phrasetrans.translate.dictionary import (
    DictionaryStore,
    FormatError,
    Loaded,
    ReadError,
    load_dictionary,
    read_dictionary_file,
)
from phrasetrans.translate.translator import Translator, translate

__all__ = [
    "DictionaryStore",
    "FormatError",
    "Loaded",
    "ReadError",
    "Translator",
    "load_dictionary",
    "read_dictionary_file",
    "translate",
]
