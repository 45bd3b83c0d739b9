#!/usr/bin/env python3
"""
Rename engine: moves the selected file to its composed destination name.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .file_utilities import join_path
from .logger_util import get_logger

log = get_logger(__name__)

__all__ = [
    "RenameError",
    "PreconditionError",
    "FilesystemError",
    "RenameResult",
    "move_file",
    "SUCCESS_MESSAGE",
    "INVALID_INPUT_MESSAGE",
]

SUCCESS_MESSAGE = "Rename Successful!"
INVALID_INPUT_MESSAGE = "Invalid paths or file names provided."


class RenameError(Exception):
    """Base class for rename failures shown to the user."""


class PreconditionError(RenameError):
    """A source directory, file or destination directory is missing."""

    def __init__(self, message: str = INVALID_INPUT_MESSAGE):
        super().__init__(message)


class FilesystemError(RenameError):
    """The OS rename call failed."""

    def __init__(self, reason: object):
        super().__init__(f"Failed to move the file: {reason}")
        self.reason = reason


@dataclass(frozen=True)
class RenameResult:
    """Outcome of one rename attempt."""
    success: bool
    message: str
    source_path: Optional[str] = None
    dest_path: Optional[str] = None
    error: Optional[RenameError] = None


def _is_same_entry(source_path: str, dest_path: str) -> bool:
    """True if both paths name one directory entry, not merely one inode.

    Hard links share an inode but are separate entries, so samefile() is
    not enough here.
    """
    source_path = os.path.abspath(source_path)
    dest_path = os.path.abspath(dest_path)
    if os.path.normcase(source_path) == os.path.normcase(dest_path):
        return True
    src_dir, src_name = os.path.split(source_path)
    dst_dir, dst_name = os.path.split(dest_path)
    if os.path.normcase(src_dir) != os.path.normcase(dst_dir) or src_name.casefold() != dst_name.casefold():
        return False
    # Case-only change: one entry only if the filesystem folds case
    try:
        return dst_name not in os.listdir(dst_dir)
    except OSError:
        return False


def _rename(source_path: str, dest_path: str, allow_overwrite: bool) -> None:
    if not allow_overwrite and os.path.lexists(dest_path) and not _is_same_entry(source_path, dest_path):
        raise FilesystemError(f"destination already exists: {dest_path}")
    try:
        os.rename(source_path, dest_path)
    except OSError as e:
        raise FilesystemError(e) from e


def move_file(
    source_dir: Optional[str],
    source_file: Optional[str],
    dest_dir: Optional[str],
    dest_name: Optional[str],
    allow_overwrite: bool = True,
) -> RenameResult:
    """Move ``source_dir/source_file`` to ``dest_dir/dest_name``.

    Uses os.rename, so the move is atomic on one filesystem and fails across
    devices. With *allow_overwrite* (the default) an existing destination is
    handled however the OS handles it; otherwise the move is refused before
    touching the filesystem.

    An empty *dest_name* is passed through; only ``None`` counts as missing.

    Returns:
        A RenameResult. Failures carry the PreconditionError or
        FilesystemError instance in ``error``; nothing is raised.
    """
    if source_dir is None or source_file is None or dest_dir is None or dest_name is None:
        error = PreconditionError()
        log.warning(f"Rename rejected: {error}")
        return RenameResult(False, str(error), error=error)

    source_path = join_path(source_dir, source_file)
    dest_path = join_path(dest_dir, dest_name)
    try:
        _rename(source_path, dest_path, allow_overwrite)
    except FilesystemError as error:
        log.warning(f"Rename failed {source_path} -> {dest_path}: {error}")
        return RenameResult(False, str(error), source_path, dest_path, error)

    log.info(f"Renamed {source_path} -> {dest_path}")
    return RenameResult(True, SUCCESS_MESSAGE, source_path, dest_path)
