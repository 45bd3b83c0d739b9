#!/usr/bin/env python3
"""
State Model for the media renamer.
Holds everything the controller mutates; the UI only ever sees snapshots.
"""

from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, field

from .filename_components import DEFAULT_FIELD_ORDER, FIELD_NAMES, compose, empty_fields
from .file_utilities import sorted_file_names
from .filename_tokens import tokenize


@dataclass(frozen=True)
class RenameStatus:
    """Outcome of the last rename attempt."""
    success: bool
    message: str


@dataclass(frozen=True)
class StateSnapshot:
    """
    Read-only view of RenamerState handed to the UI for drawing.
    """
    source_dir: Optional[str]
    dest_dir: Optional[str]
    dest_overridden: bool
    files: Tuple[str, ...]
    selected_file: Optional[str]
    fields: Tuple[Tuple[str, str], ...]
    composed_name: str
    tokens: Tuple[str, ...]
    rename_status: Optional[RenameStatus]
    scan_error: Optional[str]
    help_visible: bool

    def field_value(self, name: str) -> str:
        return dict(self.fields)[name]


@dataclass
class RenamerState:
    """
    Holds the state of the media renamer.
    """
    # Directory being browsed and where renamed files go
    source_dir: Optional[str] = None
    dest_dir: Optional[str] = None
    dest_overridden: bool = False

    # Names of regular files in source_dir, rebuilt on every scan
    files: List[str] = field(default_factory=list)

    selected_file: Optional[str] = None
    fields: Dict[str, str] = field(default_factory=empty_fields)
    field_order: Tuple[str, ...] = DEFAULT_FIELD_ORDER

    rename_status: Optional[RenameStatus] = None
    scan_error: Optional[str] = None
    help_visible: bool = False

    @property
    def composed_name(self) -> str:
        # Derived on every read, never cached
        return compose(self.fields, self.field_order)

    def clear_fields(self):
        for name in FIELD_NAMES:
            self.fields[name] = ""

    def clear_directory(self):
        self.source_dir = None
        self.dest_dir = None
        self.dest_overridden = False
        self.files.clear()
        self.scan_error = None

    def snapshot(self) -> StateSnapshot:
        return StateSnapshot(
            source_dir=self.source_dir,
            dest_dir=self.dest_dir,
            dest_overridden=self.dest_overridden,
            files=tuple(sorted_file_names(self.files)),
            selected_file=self.selected_file,
            fields=tuple((name, self.fields[name]) for name in FIELD_NAMES),
            composed_name=self.composed_name,
            tokens=tuple(tokenize(self.selected_file)),
            rename_status=self.rename_status,
            scan_error=self.scan_error,
            help_visible=self.help_visible,
        )
