"""Tests for logging setup."""

import logging

from rich.logging import RichHandler

from maat_insight.logging_config import get_logger, setup_logging


class TestSetupLogging:
    def test_levels(self):
        """Verbose means DEBUG, quiet means ERROR and wins over verbose."""
        assert setup_logging().level == logging.WARNING
        assert setup_logging(verbose=True).level == logging.DEBUG
        assert setup_logging(verbose=True, quiet=True).level == logging.ERROR

    def test_single_rich_handler(self):
        """Repeated setup replaces the root handler instead of stacking."""
        setup_logging()
        setup_logging(verbose=True)
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RichHandler)


class TestGetLogger:
    def test_names_are_prefixed(self):
        assert get_logger("parsers.git").name == "maat_insight.parsers.git"
        assert get_logger("maat_insight.api").name == "maat_insight.api"
        assert get_logger().name == "maat_insight"
