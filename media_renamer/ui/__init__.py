"""UI components for the media renamer"""

from .main_window_ui import MainWindowUI
from .qt_services import QtPlatformServices

__all__ = ['MainWindowUI', 'QtPlatformServices']
