#!/usr/bin/env python3
"""
Main window of the media renamer.

The window owns an AppController. Signals call controller methods and every
handler ends with render(), which redraws the widgets from a fresh
StateSnapshot.
"""

import sys
from functools import partial

from PyQt6.QtWidgets import QApplication, QMainWindow, QPushButton, QListWidgetItem
from PyQt6.QtCore import Qt

from .config import AppConfig
from .controller import AppController
from .filename_tokens import COPY_SYMBOLS
from .logger_util import get_logger, set_level
from .state_model import StateSnapshot
from .ui import MainWindowUI, QtPlatformServices

log = get_logger(__name__)


class MediaRenamerApp(QMainWindow):
    """Main application window."""

    def __init__(self, config=None, services=None):
        super().__init__()
        self.config = config or AppConfig.from_env()
        self.controller = AppController(self.config, services or QtPlatformServices(self))
        self._shown_tokens = None

        MainWindowUI().setup_ui(self)
        self._connect_signals()
        self.render()

    def _connect_signals(self):
        c = self.controller
        self.action_toggle_debug.toggled.connect(self._on_toggle_debug_logging)
        self.action_refresh.triggered.connect(self._action(c.refresh))
        self.action_close_directory.triggered.connect(self._action(c.deselect_source_directory))
        self.action_clear_selection.triggered.connect(self._action(c.deselect_file))
        self.open_file_button.clicked.connect(self._action(c.request_open_selected_file))
        self.open_dir_button.clicked.connect(self._action(c.choose_source_directory))
        self.write_dir_button.clicked.connect(self._action(c.choose_destination_directory))
        self.rename_button.clicked.connect(self._action(c.trigger_rename))
        self.help_button.clicked.connect(self._action(c.toggle_help))
        self.file_list.itemClicked.connect(self._on_file_clicked)

        for name, edit in self.field_edits.items():
            # textEdited only fires for user input, not for render()'s setText
            edit.textEdited.connect(partial(self._on_field_edited, name))
            edit.customContextMenuRequested.connect(self._action(c.paste_field, name))
        for (name, op), button in self.quick_insert_buttons.items():
            button.clicked.connect(self._action(c.quick_insert, name, op))

    def _action(self, method, *args):
        """Wrap a controller method as a slot that redraws afterwards."""
        def slot(*_signal_args):
            method(*args)
            self.render()
        return slot

    def _on_field_edited(self, name, text):
        self.controller.edit_field(name, text)
        self.render()

    def _on_file_clicked(self, item):
        self.controller.select_file(item.data(Qt.ItemDataRole.UserRole))
        self.render()

    def _on_toggle_debug_logging(self, enabled):
        set_level("DEBUG" if enabled else self.config.log_level)
        log.debug("Debug logging enabled")

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def render(self):
        snap = self.controller.snapshot()
        self.selected_file_edit.setText(snap.selected_file or "")
        self.open_file_button.setEnabled(snap.selected_file is not None)

        if snap.tokens != self._shown_tokens:
            self._render_tokens(snap)

        for name, value in snap.fields:
            edit = self.field_edits[name]
            if edit.text() != value:
                edit.setText(value)

        self.preview_label.setText(snap.composed_name)
        self.save_dir_label.setText(snap.dest_dir or "")

        if snap.rename_status is not None:
            self.status_label.setText(snap.rename_status.message)
        self.scan_error_label.setText(snap.scan_error or "")
        self.scan_error_label.setVisible(snap.scan_error is not None)
        self.help_label.setVisible(snap.help_visible)

        self._render_file_list(snap)

    def _render_tokens(self, snap: StateSnapshot):
        layout = self.token_layout
        while layout.count():
            widget = layout.takeAt(0).widget()
            if widget is not None:
                widget.deleteLater()
        for text in COPY_SYMBOLS + snap.tokens:
            button = QPushButton(text.replace("&", "&&"))
            button.clicked.connect(self._action(self.controller.copy_to_clipboard, text))
            layout.addWidget(button)
        self._shown_tokens = snap.tokens

    def _render_file_list(self, snap: StateSnapshot):
        current = [self.file_list.item(i).data(Qt.ItemDataRole.UserRole)
                   for i in range(self.file_list.count())]
        if current != list(snap.files):
            self.file_list.clear()
            for name in snap.files:
                item = QListWidgetItem(name)
                item.setData(Qt.ItemDataRole.UserRole, name)
                self.file_list.addItem(item)
        for i in range(self.file_list.count()):
            item = self.file_list.item(i)
            item.setSelected(item.data(Qt.ItemDataRole.UserRole) == snap.selected_file)


def main():
    """Main entry point"""
    config = AppConfig.from_env()
    set_level(config.log_level)

    app = QApplication(sys.argv)
    app.setApplicationName("Media Renaming Tool")
    app.setApplicationVersion("1.0")
    app.setOrganizationName("MediaRenamer")

    window = MediaRenamerApp(config)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
