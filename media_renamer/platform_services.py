#!/usr/bin/env python3
"""
Interfaces to the operating system used by the controller.

The controller never talks to the desktop directly; it calls a
PlatformServices object. The Qt-backed implementation lives in
ui/qt_services.py, NullServices is used when no desktop is available.
"""
from __future__ import annotations

from typing import Optional

from .logger_util import get_logger

log = get_logger(__name__)

__all__ = ["PlatformServices", "NullServices"]


class PlatformServices:
    """Folder picker, clipboard and "open with default application".

    All calls are synchronous. Implementations report failure through the
    return value and must not raise.
    """

    def pick_folder(self, title: str, start_dir: Optional[str] = None) -> Optional[str]:
        """Return an absolute directory path, or None if the user cancelled."""
        raise NotImplementedError

    def read_clipboard(self) -> Optional[str]:
        """Return the clipboard text, or None if it cannot be read."""
        raise NotImplementedError

    def write_clipboard(self, text: str) -> bool:
        raise NotImplementedError

    def open_path(self, path: str) -> bool:
        """Open *path* with the default application. Returns False on failure."""
        raise NotImplementedError


class NullServices(PlatformServices):
    """Services for headless runs: no dialogs, an in-process clipboard."""

    def __init__(self, clipboard: Optional[str] = None):
        self.clipboard = clipboard
        self.opened: list[str] = []

    def pick_folder(self, title, start_dir=None):
        log.debug(f"No folder picker available for {title!r}")
        return None

    def read_clipboard(self):
        return self.clipboard

    def write_clipboard(self, text):
        self.clipboard = text
        return True

    def open_path(self, path):
        log.error(f"Error opening file: no desktop available for {path}")
        self.opened.append(path)
        return False
