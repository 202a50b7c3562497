"""Tests for logging setup."""

import logging

import pytest

from git_chronicle.logging_config import get_logger, setup_logging


class TestLogging:
    def test_get_logger_prefixes_names(self):
        assert get_logger("temporal.series").name == "git_chronicle.temporal.series"
        assert get_logger("git_chronicle.report").name == "git_chronicle.report"
        assert get_logger().name == "git_chronicle"

    def test_levels(self):
        assert setup_logging().level == logging.WARNING
        assert setup_logging("verbose").level == logging.DEBUG
        assert setup_logging("quiet").level == logging.ERROR

    def test_unknown_verbosity(self):
        with pytest.raises(ValueError):
            setup_logging("chatty")

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "chronicle.log"
        logger = setup_logging("verbose", log_file=str(log_file))
        logger.debug("hello file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello file" in log_file.read_text()
        setup_logging()
