"""
Project-wide configuration.

Module Contents:
    APP_NAME: Application name for display purposes
    DICTIONARY_ENV_VAR: Environment variable naming the default dictionary file
    DEFAULT_ENCODING: Encoding used to read dictionary files
    EXIT_COMMAND: Input that ends the interactive session

Example:
    >>> from phrasetrans.config import resolve_dictionary_path
    >>> path = resolve_dictionary_path(None)
    >>> print(f"Dictionary at: {path}")
"""

import os
from pathlib import Path
from typing import Optional

# Application name for display and identification
APP_NAME = "PhraseTrans"

# Fallback dictionary location when none is given on the command line
DICTIONARY_ENV_VAR = "PHRASETRANS_DICTIONARY"

# Dictionary files are plain text in this encoding
DEFAULT_ENCODING = "utf-8"

# Typed at the interactive prompt to quit (case-insensitive)
EXIT_COMMAND = "exit"


def resolve_dictionary_path(explicit: Optional[Path]) -> Optional[Path]:
    """
    Pick the dictionary file to load.

    An explicit path always wins; otherwise the ``PHRASETRANS_DICTIONARY``
    environment variable is consulted. Returns None when neither is set.
    """
    if explicit is not None:
        return explicit
    value = os.environ.get(DICTIONARY_ENV_VAR, "").strip()
    return Path(value) if value else None
