"""
Tests for configuration and logging setup

Run with: python -m pytest tests/test_config.py -v
"""

import logging

import pytest

from entrystore.config import setup_logging
from entrystore.config.settings import Settings, settings


class TestSettings:
    """Test Settings defaults."""

    def test_defaults(self):
        assert settings.MAX_KEYS == 1000
        assert settings.EVICTION_POLICY == "earliest-timestamp"
        assert settings.CLEANUP_INTERVAL == 60
        assert settings.LOG_LEVEL == "INFO"

    def test_override(self):
        custom = Settings(MAX_KEYS=5, EVICTION_POLICY="expiring-first")
        assert custom.MAX_KEYS == 5
        assert custom.EVICTION_POLICY == "expiring-first"


class TestSetupLogging:
    """Test setup_logging()."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        level, handlers = root.level, root.handlers[:]
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_debug_level(self):
        setup_logging(debug=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_explicit_level(self):
        setup_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_default_level(self):
        setup_logging()
        assert logging.getLogger().level == logging.INFO
