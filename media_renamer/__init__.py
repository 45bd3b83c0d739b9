"""
Media Renamer - compose a media file's new name from labeled text fields.

The core (scanner, tokenizer, composer, rename engine, controller) has no Qt
dependency; the desktop window lives in main_application.
"""
from .config import AppConfig
from .controller import AppController
from .file_utilities import ScanError, scan_directory, sorted_file_names
from .filename_components import DEFAULT_FIELD_ORDER, FIELD_NAMES, compose
from .filename_tokens import extract_extension, tokenize
from .rename_engine import (
    FilesystemError,
    PreconditionError,
    RenameError,
    RenameResult,
    move_file,
)
from .state_model import RenamerState, RenameStatus, StateSnapshot

__version__ = "1.0.0"
__all__ = [
    "AppConfig",
    "AppController",
    "ScanError",
    "scan_directory",
    "sorted_file_names",
    "DEFAULT_FIELD_ORDER",
    "FIELD_NAMES",
    "compose",
    "extract_extension",
    "tokenize",
    "FilesystemError",
    "PreconditionError",
    "RenameError",
    "RenameResult",
    "move_file",
    "RenamerState",
    "RenameStatus",
    "StateSnapshot",
]
