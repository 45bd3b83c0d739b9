#!/usr/bin/env python3
"""
Runtime configuration for the media renamer.

Values are read from environment variables at startup; nothing is written
back to disk.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from .filename_components import DEFAULT_FIELD_ORDER, FIELD_NAMES
from .logger_util import get_logger

log = get_logger(__name__)

FIELD_ORDER_ENV = "MEDIA_RENAMER_FIELD_ORDER"
ALLOW_OVERWRITE_ENV = "MEDIA_RENAMER_ALLOW_OVERWRITE"
START_DIR_ENV = "MEDIA_RENAMER_START_DIR"
LOG_LEVEL_ENV = "MEDIA_RENAMER_LOG_LEVEL"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class AppConfig:
    """Application settings.

    Attributes:
        field_order: Order in which the named fields are concatenated.
        allow_overwrite: When False, a rename onto an existing entry is refused.
        log_level: Name of the initial log level.
        initial_directory: Starting location for the folder dialog.
    """
    field_order: Tuple[str, ...] = field(default=DEFAULT_FIELD_ORDER)
    allow_overwrite: bool = True
    log_level: str = "INFO"
    initial_directory: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if environ is None else environ
        return cls(
            field_order=_parse_field_order(env.get(FIELD_ORDER_ENV)),
            allow_overwrite=_parse_bool(env.get(ALLOW_OVERWRITE_ENV), default=True),
            log_level=(env.get(LOG_LEVEL_ENV) or "INFO").upper(),
            initial_directory=env.get(START_DIR_ENV) or None,
        )


def _parse_field_order(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return DEFAULT_FIELD_ORDER
    names = tuple(part.strip().lower() for part in raw.split(",") if part.strip())
    unknown = [name for name in names if name not in FIELD_NAMES]
    if not names or unknown or len(set(names)) != len(names):
        log.warning(f"Ignoring invalid {FIELD_ORDER_ENV}={raw!r}, using default order")
        return DEFAULT_FIELD_ORDER
    return names


def _parse_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    log.warning(f"Ignoring invalid boolean value {raw!r}, using {default}")
    return default


__all__ = ["AppConfig", "FIELD_ORDER_ENV", "ALLOW_OVERWRITE_ENV", "START_DIR_ENV", "LOG_LEVEL_ENV"]
