"""
Tests for the mvc_sync logger setup.
"""

import logging

from mvc_sync.core.logging_config import LOGGER_NAME, setup_logging


class TestSetupLogging:
    def test_sets_level(self):
        logger = setup_logging("DEBUG")
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        setup_logging(logging.INFO)

    def test_repeated_calls_keep_one_handler(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1
