#!/usr/bin/env python3
"""
Application controller for the media renamer.

Every user action is a method on AppController. Methods mutate the owned
RenamerState and return immediately; the window redraws from snapshot()
afterwards. Nothing here knows about widgets.
"""
from __future__ import annotations

from typing import Optional

from .config import AppConfig
from .file_utilities import ScanError, join_path, scan_directory
from .filename_components import FIELD_NAMES, apply_quick_insert
from .filename_tokens import extract_extension
from .logger_util import get_logger
from .platform_services import NullServices, PlatformServices
from .rename_engine import RenameResult, move_file
from .state_model import RenamerState, RenameStatus, StateSnapshot

log = get_logger(__name__)


class AppController:
    """State machine behind the main window.

    Args:
        config: Application settings; read from the environment when omitted.
        services: Folder picker / clipboard / file opener.
        state: Initial state, mainly for tests.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        services: Optional[PlatformServices] = None,
        state: Optional[RenamerState] = None,
    ) -> None:
        self.config = config or AppConfig.from_env()
        self.services = services or NullServices()
        self.state = state or RenamerState(field_order=self.config.field_order)

    def snapshot(self) -> StateSnapshot:
        return self.state.snapshot()

    # ------------------------------------------------------------------
    # Directories
    # ------------------------------------------------------------------

    def select_source_directory(self, path: str) -> None:
        """Browse *path*: reset destination, selection and fields, then scan."""
        state = self.state
        state.source_dir = path
        state.dest_dir = path
        state.dest_overridden = False
        state.selected_file = None
        state.clear_fields()
        self._rescan()

    def deselect_source_directory(self) -> None:
        self.state.clear_directory()

    def choose_source_directory(self) -> bool:
        """Ask the folder picker for a source directory. Cancel changes nothing."""
        path = self.services.pick_folder("Open Directory", self.state.source_dir or self.config.initial_directory)
        if path is None:
            return False
        self.select_source_directory(path)
        return True

    def select_destination_directory(self, path: str) -> None:
        self.state.dest_dir = path
        self.state.dest_overridden = True

    def choose_destination_directory(self) -> bool:
        path = self.services.pick_folder("Write Directory", self.state.dest_dir or self.config.initial_directory)
        if path is None:
            return False
        self.select_destination_directory(path)
        return True

    def refresh(self) -> None:
        """Rescan the source directory without touching anything else."""
        if self.state.source_dir is not None:
            self._rescan()

    def _rescan(self) -> None:
        state = self.state
        try:
            state.files = scan_directory(state.source_dir, strict=True)
            state.scan_error = None
        except ScanError as e:
            log.warning(f"Source directory unreadable: {e}")
            state.files = []
            state.scan_error = str(e)

    # ------------------------------------------------------------------
    # File selection
    # ------------------------------------------------------------------

    def select_file(self, name: str) -> None:
        """Select *name*; only the extension field is overwritten."""
        self.state.selected_file = name
        self.state.fields["extension"] = extract_extension(name)

    def deselect_file(self) -> None:
        self.state.selected_file = None

    def request_open_selected_file(self) -> bool:
        """Open the selected file with the default application.

        Failures are logged only; the rename status is left alone.
        """
        state = self.state
        if state.source_dir is None or state.selected_file is None:
            log.debug("Open requested without a selected file")
            return False
        return self.services.open_path(join_path(state.source_dir, state.selected_file))

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def _check_field(self, name: str) -> None:
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown field: {name}")

    def edit_field(self, name: str, value: str) -> None:
        self._check_field(name)
        self.state.fields[name] = value

    def quick_insert(self, name: str, op: str) -> None:
        self._check_field(name)
        self.state.fields[name] = apply_quick_insert(self.state.fields[name], op)

    def paste_field(self, name: str) -> None:
        """Append the clipboard text to field *name*; no-op if unreadable."""
        self._check_field(name)
        text = self.services.read_clipboard()
        if text is None:
            return
        self.state.fields[name] += text

    def copy_to_clipboard(self, text: str) -> None:
        if not self.services.write_clipboard(text):
            log.debug(f"Could not copy {text!r} to clipboard")

    @property
    def composed_name(self) -> str:
        return self.state.composed_name

    # ------------------------------------------------------------------
    # Rename
    # ------------------------------------------------------------------

    def trigger_rename(self) -> RenameResult:
        """Rename the selected file to the composed name.

        On success the selection and all fields are cleared and the source
        directory is rescanned. On failure they are kept so the user can
        correct and retry.
        """
        state = self.state
        result = move_file(
            state.source_dir,
            state.selected_file,
            state.dest_dir,
            state.composed_name,
            allow_overwrite=self.config.allow_overwrite,
        )
        state.rename_status = RenameStatus(result.success, result.message)
        if result.success:
            state.selected_file = None
            state.clear_fields()
            self._rescan()
        return result

    def toggle_help(self) -> None:
        self.state.help_visible = not self.state.help_visible
