#!/usr/bin/env python3
"""Logging setup for the media renamer.

Every module logs through a child of the ``media_renamer`` logger:

    from .logger_util import get_logger
    log = get_logger(__name__)

Only the package logger carries a handler; children propagate to it. The
level is applied by main() from AppConfig.log_level and can be changed at
runtime with set_level() (the "Enable Debug Logging" menu toggle).
"""
from __future__ import annotations
import logging
from typing import Optional

APP_LOGGER_NAME = "media_renamer"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _app_logger() -> logging.Logger:
    logger = logging.getLogger(APP_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or the child logger for *name*.

    *name* may be a module ``__name__`` inside the package or a short
    suffix; both end up under ``media_renamer``.
    """
    app_logger = _app_logger()
    if not name or name == APP_LOGGER_NAME:
        return app_logger
    if not name.startswith(APP_LOGGER_NAME + "."):
        name = f"{APP_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_level(level: int | str) -> None:
    """Set the level of the package logger and its handler.

    Args:
        level: logging level (int or name). Examples: logging.DEBUG, "DEBUG".
            Unknown names fall back to INFO.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO
    logger = _app_logger()
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


__all__ = ["APP_LOGGER_NAME", "get_logger", "set_level"]
