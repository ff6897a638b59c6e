"""
Unit tests for logging configuration.
"""
import logging
import os

import pytest
from unittest.mock import patch
from logger_config import get_logger, set_log_level


class TestGetLogger:
    """Tests for get_logger function."""

    @patch.dict(os.environ, {'LOG_LEVEL': 'WARNING'})
    def test_level_from_env(self):
        logger = get_logger('tests.logger_config.level')
        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert len(logger.handlers) == 1

    def test_handlers_not_duplicated(self):
        logger1 = get_logger('tests.logger_config.dup')
        logger2 = get_logger('tests.logger_config.dup')
        assert logger1 is logger2
        assert len(logger2.handlers) == 1


class TestSetLogLevel:
    """Tests for set_log_level function."""

    def test_updates_configured_loggers(self):
        logger = get_logger('services.logger_level_update')
        set_log_level('error')
        assert logger.level == logging.ERROR
        set_log_level('INFO')
        assert logger.level == logging.INFO

    def test_unknown_level(self):
        with pytest.raises(ValueError, match='Unknown log level'):
            set_log_level('LOUD')

    def test_other_libraries_untouched(self):
        other = logging.getLogger('thirdparty.client')
        other.addHandler(logging.NullHandler())
        other.propagate = False
        other.setLevel(logging.WARNING)
        try:
            set_log_level('DEBUG')
            assert other.level == logging.WARNING
        finally:
            other.handlers.clear()
            other.propagate = True
            set_log_level('INFO')
