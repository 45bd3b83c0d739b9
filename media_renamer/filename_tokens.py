#!/usr/bin/env python3
"""Filename tokenizer.

Splits a file name into pieces that the UI offers as one-click copy buttons,
and extracts the extension used to pre-fill the extension field.
"""
from __future__ import annotations
import re
from typing import List, Optional

__all__ = ["DELIMITERS", "COPY_SYMBOLS", "tokenize", "extract_extension"]

# Each character is a delimiter on its own
DELIMITERS = ",.-[]{}()"
_DELIMITER_PATTERN = re.compile("[" + re.escape(DELIMITERS) + "]")

# Symbols offered as copy buttons ahead of the tokens
COPY_SYMBOLS = ("[", "]", "(", ")", "{", "}")


def tokenize(name: Optional[str]) -> List[str]:
    """Split *name* on the delimiter characters.

    Tokens are stripped of surrounding whitespace and empty tokens are
    dropped, so ``"draft(1).txt"`` gives ``["draft", "1", "txt"]``.
    """
    if not name:
        return []
    parts = (part.strip() for part in _DELIMITER_PATTERN.split(name))
    return [part for part in parts if part]


def extract_extension(name: str) -> str:
    """Return ``"." + <text after the last dot>``, or ``""`` without a dot."""
    head, dot, tail = name.rpartition(".")
    if not dot:
        return ""
    return "." + tail
