"""Tests for environment-driven settings and logging setup."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from catalog.infrastructure.config import Settings
from catalog.infrastructure.log_config import configure_logging


class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in ("CATALOG_DATA_DIR", "CATALOG_LOG_LEVEL", "CATALOG_PAGE_SIZE", "CATALOG_CURRENCY"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.data_dir.name == "data"
        assert settings.log_level == "WARNING"
        assert settings.page_size == 20
        assert settings.currency == "BRL"

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("CATALOG_LOG_LEVEL", "debug")
        monkeypatch.setenv("CATALOG_PAGE_SIZE", "5")
        settings = Settings(_env_file=None)
        assert settings.data_dir == Path(tmp_path)
        assert settings.log_level == "DEBUG"
        assert settings.page_size == 5

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("CATALOG_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_page_size_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("CATALOG_PAGE_SIZE", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestConfigureLogging:

    def test_single_handler_even_when_called_twice(self):
        configure_logging("INFO")
        configure_logging("DEBUG")
        logger = logging.getLogger("catalog")
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
