#!/usr/bin/env python3
"""
Unit tests for media_renamer/config.py (environment-driven settings).
"""

import os
import sys
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from media_renamer.config import (
    ALLOW_OVERWRITE_ENV,
    FIELD_ORDER_ENV,
    LOG_LEVEL_ENV,
    START_DIR_ENV,
    AppConfig,
)
from media_renamer.filename_components import DEFAULT_FIELD_ORDER


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig.from_env({})
        assert config == AppConfig()
        assert config.field_order == DEFAULT_FIELD_ORDER
        assert config.allow_overwrite is True
        assert config.log_level == "INFO"
        assert config.initial_directory is None

    def test_custom_field_order(self):
        config = AppConfig.from_env({FIELD_ORDER_ENV: "Title, author ,extension"})
        assert config.field_order == ("title", "author", "extension")

    @pytest.mark.parametrize("raw", ["title,bogus", "title,title", " , "])
    def test_invalid_field_order_falls_back(self, raw):
        assert AppConfig.from_env({FIELD_ORDER_ENV: raw}).field_order == DEFAULT_FIELD_ORDER

    @pytest.mark.parametrize("raw, expected", [
        ("0", False), ("false", False), ("No", False),
        ("1", True), ("yes", True), ("", True), ("maybe", True),
    ])
    def test_allow_overwrite(self, raw, expected):
        assert AppConfig.from_env({ALLOW_OVERWRITE_ENV: raw}).allow_overwrite is expected

    def test_log_level_and_start_dir(self):
        config = AppConfig.from_env({LOG_LEVEL_ENV: "debug", START_DIR_ENV: "/media"})
        assert config.log_level == "DEBUG"
        assert config.initial_directory == "/media"

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv(ALLOW_OVERWRITE_ENV, "off")
        assert AppConfig.from_env().allow_overwrite is False

    def test_frozen(self):
        with pytest.raises(Exception):
            AppConfig().allow_overwrite = False
