#!/usr/bin/env python3
"""
Main Window UI Setup.
Separates the widget construction from the application logic.
"""

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QPushButton,
    QLineEdit, QListWidget, QScrollArea, QFrame
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction

from ..filename_components import FIELD_NAMES, QUICK_INSERTS

# Button captions for the quick-insert operations
QUICK_INSERT_LABELS = {
    "space": "   ",
    "dash": " - ",
    "comma": ", ",
}

HELP_TEXT = (
    "Usage Information\n"
    "- Open Directory = Pick the directory that contains the files you wish to rename\n"
    "- Write Directory = Leave it to keep the renamed file in the same directory, "
    "otherwise choose where to put the renamed file\n"
    "- Rename File = Execute command to rename file\n"
    "- Clicking the buttons that contain words or brackets copies that text to the clipboard.\n"
    "- Right-click the text boxes to paste text.\n"
    "- On the right hand side of the text boxes, you can add spaces, hyphens, and commas"
)


class MainWindowUI:
    """
    Handles the setup of the Main Window UI.
    """

    def setup_ui(self, window):
        """
        Constructs the UI for the given window.

        Args:
            window: The MediaRenamerApp instance.
        """
        window.setWindowTitle("Media Renaming Tool")
        window.resize(640, 760)

        window.central_widget = QWidget()
        window.setCentralWidget(window.central_widget)
        window.main_layout = QVBoxLayout(window.central_widget)

        self._setup_menu_bar(window)

        heading = QLabel("Media Renaming Tool")
        heading.setStyleSheet("font-size: 18px; font-weight: bold;")
        window.main_layout.addWidget(heading)

        self._setup_selected_file_row(window)
        self._setup_token_bar(window)
        self._setup_fields(window)
        self._setup_preview(window)
        self._setup_action_buttons(window)
        self._setup_messages(window)
        self._setup_file_list(window)

    def _setup_menu_bar(self, window):
        mb = window.menuBar()
        file_menu = mb.addMenu('&File')
        window.action_close_directory = QAction('Close Directory', window)
        window.action_close_directory.setStatusTip('Stop browsing the current source directory')
        file_menu.addAction(window.action_close_directory)

        window.action_clear_selection = QAction('Clear Selection', window)
        file_menu.addAction(window.action_clear_selection)

        tools_menu = mb.addMenu('&Tools')
        window.action_toggle_debug = QAction('Enable Debug Logging', window, checkable=True)
        window.action_toggle_debug.setStatusTip('Toggle verbose debug log output')
        tools_menu.addAction(window.action_toggle_debug)

        window.action_refresh = QAction('Refresh File List', window)
        tools_menu.addAction(window.action_refresh)

    def _setup_selected_file_row(self, window):
        row = QHBoxLayout()
        window.selected_file_edit = QLineEdit()
        window.selected_file_edit.setReadOnly(True)
        window.selected_file_edit.setPlaceholderText("(no file selected)")
        window.open_file_button = QPushButton("Open File...")
        row.addWidget(window.selected_file_edit)
        row.addWidget(window.open_file_button)
        window.main_layout.addLayout(row)

    def _setup_token_bar(self, window):
        # Filled by the window whenever the selected file changes
        window.token_container = QWidget()
        window.token_layout = QHBoxLayout(window.token_container)
        window.token_layout.setContentsMargins(0, 0, 0, 0)
        window.token_layout.setAlignment(Qt.AlignmentFlag.AlignLeft)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        scroll.setFixedHeight(48)
        scroll.setWidget(window.token_container)
        window.main_layout.addWidget(scroll)

    def _setup_fields(self, window):
        grid = QGridLayout()
        window.field_edits = {}
        window.quick_insert_buttons = {}
        for row, name in enumerate(FIELD_NAMES):
            grid.addWidget(QLabel(f"{name.capitalize()}: "), row, 0)

            edit = QLineEdit()
            edit.setObjectName(f"field_{name}")
            edit.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
            edit.setToolTip("Right-click to paste")
            grid.addWidget(edit, row, 1)
            window.field_edits[name] = edit

            for col, op in enumerate(QUICK_INSERTS, start=2):
                button = QPushButton(QUICK_INSERT_LABELS[op])
                button.setFixedWidth(36)
                grid.addWidget(button, row, col)
                window.quick_insert_buttons[(name, op)] = button
        window.main_layout.addLayout(grid)

    def _setup_preview(self, window):
        preview_row = QHBoxLayout()
        preview_row.addWidget(QLabel("Name Preview:"))
        window.preview_label = QLabel()
        window.preview_label.setStyleSheet("color: rgb(110, 255, 110); font-size: 12px;")
        window.preview_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        preview_row.addWidget(window.preview_label)
        preview_row.addStretch()
        window.main_layout.addLayout(preview_row)

        dir_row = QHBoxLayout()
        save_label = QLabel("Save Directory")
        save_label.setStyleSheet("font-size: 10px;")
        window.save_dir_label = QLabel()
        window.save_dir_label.setStyleSheet("font-size: 10px;")
        dir_row.addWidget(save_label)
        dir_row.addWidget(window.save_dir_label)
        dir_row.addStretch()
        window.main_layout.addLayout(dir_row)

    def _setup_action_buttons(self, window):
        row = QHBoxLayout()
        window.open_dir_button = QPushButton("Open Directory")
        window.write_dir_button = QPushButton("Write Directory")
        window.rename_button = QPushButton("Rename File")
        window.rename_button.setStyleSheet("color: rgb(227, 118, 118);")
        window.help_button = QPushButton("Help")
        for button in (window.open_dir_button, window.write_dir_button,
                       window.rename_button, window.help_button):
            row.addWidget(button)
        row.addStretch()
        window.main_layout.addLayout(row)

    def _setup_messages(self, window):
        window.status_label = QLabel()
        window.scan_error_label = QLabel()
        window.scan_error_label.setStyleSheet("color: #d83b01;")
        window.scan_error_label.hide()
        window.help_label = QLabel(HELP_TEXT)
        window.help_label.setStyleSheet("font-size: 10px;")
        window.help_label.setWordWrap(True)
        window.help_label.hide()
        window.main_layout.addWidget(window.status_label)
        window.main_layout.addWidget(window.scan_error_label)
        window.main_layout.addWidget(window.help_label)

    def _setup_file_list(self, window):
        window.file_list = QListWidget()
        window.file_list.setMinimumHeight(325)
        window.main_layout.addWidget(window.file_list, 1)
