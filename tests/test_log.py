"""
Tests for the package logger setup.
"""

import io
import logging
import sys

import pytest
from code128.log import configure_logging, level_from_env, logger


@pytest.fixture
def restore_logger():
    level = logger.level
    yield
    configure_logging(level, stream=sys.stderr)


class TestLevelFromEnv:
    """Environment lookup of the log level."""

    def test_default_is_info(self):
        assert level_from_env({}) == logging.INFO

    def test_debug_shortcut(self):
        assert level_from_env({"DEBUG": "1"}) == logging.DEBUG

    def test_named_level(self):
        assert level_from_env({"CODE128_LOG_LEVEL": "warning"}) == logging.WARNING

    def test_named_level_wins_over_debug(self):
        env = {"CODE128_LOG_LEVEL": "ERROR", "DEBUG": "1"}
        assert level_from_env(env) == logging.ERROR

    def test_unknown_name_falls_back(self):
        assert level_from_env({"CODE128_LOG_LEVEL": "chatty"}) == logging.INFO


class TestConfigureLogging:
    """Handler attachment and level changes."""

    def test_single_handler(self, restore_logger):
        before = len(logger.handlers)
        configure_logging("DEBUG")
        configure_logging("INFO")

        assert len(logger.handlers) == before
        assert logger.level == logging.INFO

    def test_format_and_stream(self, restore_logger):
        stream = io.StringIO()
        configure_logging(logging.DEBUG, stream=stream)
        logger.debug("checksum %d", 34)

        assert stream.getvalue() == "DEBUG: checksum 34\n"

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            configure_logging("chatty")
