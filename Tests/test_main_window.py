#!/usr/bin/env python3
"""
Smoke tests for media_renamer/main_application.py

The window is driven through its widgets while the controller does the work;
no real dialogs or clipboard are involved.
"""

import os
import sys
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# ---------------------------------------------------------------------------
# PyQt6 availability check - skip entire module if headless / no Qt
# ---------------------------------------------------------------------------
_qt_available = False
try:
    from PyQt6.QtWidgets import QApplication
    _qt_available = True
except ImportError:
    pass

pytestmark = pytest.mark.skipif(not _qt_available, reason="PyQt6 not available")


@pytest.fixture(scope="module")
def qapp():
    """Provide a QApplication instance for the test session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture()
def media_dir(tmp_path):
    d = tmp_path / "D"
    d.mkdir()
    (d / "old.txt").write_text("x")
    (d / "Show - 01 (1080p).mkv").write_text("x")
    return d


@pytest.fixture()
def window(qapp, media_dir):
    from media_renamer.config import AppConfig
    from media_renamer.main_application import MediaRenamerApp
    from media_renamer.platform_services import NullServices

    class PickingServices(NullServices):
        def pick_folder(self, title, start_dir=None):
            return str(media_dir)

    win = MediaRenamerApp(AppConfig(), PickingServices(clipboard="Clip"))
    yield win
    win.close()
    win.deleteLater()


def _click_file(win, name):
    from PyQt6.QtCore import Qt
    for i in range(win.file_list.count()):
        item = win.file_list.item(i)
        if item.data(Qt.ItemDataRole.UserRole) == name:
            win.file_list.itemClicked.emit(item)
            return
    raise AssertionError(f"{name} not listed")


class TestMainWindow:
    def test_initial_render(self, window):
        assert window.windowTitle() == "Media Renaming Tool"
        assert window.file_list.count() == 0
        assert window.preview_label.text() == ""
        assert not window.open_file_button.isEnabled()

    def test_open_directory_lists_files(self, window, media_dir):
        window.open_dir_button.click()
        names = [window.file_list.item(i).text() for i in range(window.file_list.count())]
        assert names == ["Show - 01 (1080p).mkv", "old.txt"]
        assert window.save_dir_label.text() == str(media_dir)

    def test_select_file_fills_extension_and_tokens(self, window):
        window.open_dir_button.click()
        _click_file(window, "Show - 01 (1080p).mkv")
        assert window.selected_file_edit.text() == "Show - 01 (1080p).mkv"
        assert window.field_edits["extension"].text() == ".mkv"
        labels = [window.token_layout.itemAt(i).widget().text()
                  for i in range(window.token_layout.count())]
        assert labels == ["[", "]", "(", ")", "{", "}", "Show", "01", "1080p", "mkv"]

    def test_edit_quick_insert_and_paste(self, window):
        window.open_dir_button.click()
        _click_file(window, "old.txt")
        window.field_edits["author"].textEdited.emit("Author")
        window.quick_insert_buttons[("author", "dash")].click()
        window.field_edits["title"].customContextMenuRequested.emit(
            window.field_edits["title"].rect().center())
        assert window.field_edits["author"].text() == "Author - "
        assert window.preview_label.text() == "Author - Clip.txt"

    def test_rename_button(self, window, media_dir):
        window.open_dir_button.click()
        _click_file(window, "old.txt")
        window.field_edits["title"].textEdited.emit("new")
        window.rename_button.click()
        assert (media_dir / "new.txt").exists()
        assert window.status_label.text() == "Rename Successful!"
        assert window.field_edits["extension"].text() == ""
        assert window.selected_file_edit.text() == ""

    def test_help_toggle(self, window):
        window.help_button.click()
        assert window.controller.snapshot().help_visible is True
        assert not window.help_label.isHidden()

    def test_close_directory_action(self, window):
        window.open_dir_button.click()
        window.action_close_directory.trigger()
        assert window.file_list.count() == 0
        assert window.save_dir_label.text() == ""
        assert window.controller.snapshot().source_dir is None

    def test_clear_selection_action(self, window):
        window.open_dir_button.click()
        _click_file(window, "old.txt")
        window.action_clear_selection.trigger()
        assert window.selected_file_edit.text() == ""
        assert not window.open_file_button.isEnabled()
        assert window.field_edits["extension"].text() == ".txt"
        assert window.file_list.selectedItems() == []
