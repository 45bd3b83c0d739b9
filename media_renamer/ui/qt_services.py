#!/usr/bin/env python3
"""
PyQt6 implementation of the platform services.
"""
from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import QUrl
from PyQt6.QtGui import QDesktopServices, QGuiApplication
from PyQt6.QtWidgets import QFileDialog, QWidget

from ..logger_util import get_logger
from ..platform_services import PlatformServices

log = get_logger(__name__)


class QtPlatformServices(PlatformServices):
    """
    Folder dialog, clipboard and file opening through Qt.

    Args:
        parent: Widget used as parent for the folder dialog.
    """

    def __init__(self, parent: Optional[QWidget] = None):
        self.parent = parent

    def pick_folder(self, title, start_dir=None):
        folder = QFileDialog.getExistingDirectory(self.parent, title, start_dir or "")
        return folder or None

    def read_clipboard(self):
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            log.debug("Clipboard not available")
            return None
        text = clipboard.text()
        if not text:
            log.debug("Clipboard holds no text")
            return None
        return text

    def write_clipboard(self, text):
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            log.debug("Clipboard not available")
            return False
        clipboard.setText(text)
        return True

    def open_path(self, path):
        if not QDesktopServices.openUrl(QUrl.fromLocalFile(path)):
            log.error(f"Error opening file: {path}")
            return False
        return True
