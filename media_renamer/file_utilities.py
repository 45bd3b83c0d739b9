#!/usr/bin/env python3
"""
Directory scanning and path helpers for the media renamer.
"""
from __future__ import annotations

import os
from typing import Iterable, List

from .logger_util import get_logger
log = get_logger(__name__)

__all__ = ["ScanError", "scan_directory", "sorted_file_names", "join_path"]


class ScanError(OSError):
    """Raised by a strict scan when the directory cannot be listed."""


def scan_directory(directory: str, strict: bool = False) -> List[str]:
    """List the names of regular files directly inside *directory*.

    Subdirectories are skipped and there is no recursion. The result has no
    guaranteed order; use sorted_file_names() for display.

    Args:
        directory: Path of the directory to list.
        strict: If True, raise ScanError when the directory cannot be read.
            Otherwise log a warning and return an empty list.

    Returns:
        File names (not paths).
    """
    names = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    if entry.is_file():
                        names.append(entry.name)
                except OSError as e:
                    log.debug(f"Skipping unreadable entry {entry.path}: {e}")
    except OSError as e:
        if strict:
            # Single-argument form keeps "[Errno N]" out of str(); errno is set by hand
            err = ScanError(f"Cannot read directory {directory}: {e.strerror or e}")
            err.errno = e.errno
            raise err from e
        log.warning(f"Error scanning directory {directory}: {e}")
        return []

    log.debug(f"Scanned {directory}: {len(names)} files")
    return names


def sorted_file_names(names: Iterable[str]) -> List[str]:
    """Case-sensitive lexicographic order used for the file list."""
    return sorted(names)


def join_path(directory: str, name: str) -> str:
    """Join *directory* and *name* with a single separator.

    Unlike os.path.join, a *name* starting with a separator does not discard
    *directory*.
    """
    if directory.endswith(os.sep):
        return directory + name
    return directory + os.sep + name
