#!/usr/bin/env python3
"""Field set and filename composer.

A file's new name is assembled from five free-text fields. Composition is a
plain concatenation of the non-empty fields in a fixed order; separators are
never inserted automatically and must be part of the field values (typed or
appended with a quick-insert).
"""
from __future__ import annotations
from typing import Dict, Iterable, Mapping

# Public API
__all__ = [
    "FIELD_NAMES",
    "DEFAULT_FIELD_ORDER",
    "QUICK_INSERTS",
    "empty_fields",
    "compose",
    "apply_quick_insert",
]

FIELD_NAMES = ("author", "series", "episode", "title", "extension")
DEFAULT_FIELD_ORDER = FIELD_NAMES

# Quick-insert operation -> appended text
QUICK_INSERTS: Dict[str, str] = {
    "space": " ",
    "dash": " - ",
    "comma": ", ",
}


def empty_fields() -> Dict[str, str]:
    return {name: "" for name in FIELD_NAMES}


def compose(fields: Mapping[str, str], order: Iterable[str] = DEFAULT_FIELD_ORDER) -> str:
    """Return the composed file name for *fields*.

    Empty fields are skipped and nothing is placed between the remaining ones:

        >>> compose({"author": "Author", "series": "", "episode": "E01",
        ...          "title": "Title", "extension": ".mkv"})
        'AuthorE01Title.mkv'
    """
    return "".join(fields.get(name, "") for name in order if fields.get(name))


def apply_quick_insert(value: str, op: str) -> str:
    """Append the separator registered for *op* to *value*.

    Plain append: repeated calls keep adding, trailing separators are not
    collapsed.

    Raises:
        KeyError: if *op* is not a known quick-insert.
    """
    return value + QUICK_INSERTS[op]
